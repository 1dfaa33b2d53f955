"""Tests for ``shipctl init`` driven through the Click prompts."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from shipctl.cli import cli

# select, feature plugins (none), owner, repo, name, email, release-label gate,
# enterprise, create .env, customize labels, add labels
NPM_INPUT = "npm Package\n\nfoo\nbar\nA\na@x.com\nn\nn\nn\nn\nn\n"


class TestInitCommand:
    def test_writes_rc_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["init"], input=NPM_INPUT)

        assert result.exit_code == 0, result.output
        rc = json.loads((project_root / ".shiprc").read_text())
        assert rc["plugins"] == ["npm"]
        assert rc["owner"] == "foo"
        assert rc["repo"] == "bar"
        assert "labels" not in rc
        assert "Wrote configuration to: .shiprc" in result.output
        assert not (project_root / ".env").exists()

    def test_path_argument(self, cli_runner: CliRunner, project_root: Path) -> None:
        target = project_root / "nested" / "app"

        result = cli_runner.invoke(cli, ["init", str(target)], input=NPM_INPUT)

        assert result.exit_code == 0, result.output
        assert (target / ".shiprc").is_file()
        assert not (project_root / ".shiprc").exists()

    def test_creates_env_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        answers = "npm Package\n\nfoo\nbar\nA\na@x.com\nn\nn\ny\nnpm-1\ngh-1\nn\nn\n"

        result = cli_runner.invoke(cli, ["init"], input=answers)

        assert result.exit_code == 0, result.output
        assert (project_root / ".env").read_text() == "NPM_TOKEN=npm-1\nGH_TOKEN=gh-1\n"
        assert (project_root / ".gitignore").read_text() == ".env\n"

    def test_feature_plugin_with_url(self, cli_runner: CliRunner, project_root: Path) -> None:
        answers = "Git Tag\njira\nhttps://jira.example.com\nfoo\nbar\nA\na@x.com\nn\nn\nn\nn\nn\n"

        result = cli_runner.invoke(cli, ["init"], input=answers)

        assert result.exit_code == 0, result.output
        rc = json.loads((project_root / ".shiprc").read_text())
        assert rc["plugins"] == ["git-tag", ["jira", {"url": "https://jira.example.com"}]]

    def test_unknown_feature_re_prompted(self, cli_runner: CliRunner, project_root: Path) -> None:
        answers = "npm Package\nnope\n\nfoo\nbar\nA\na@x.com\nn\nn\nn\nn\nn\n"

        result = cli_runner.invoke(cli, ["init"], input=answers)

        assert result.exit_code == 0, result.output
        assert "Unknown choice(s): nope" in result.output

    def test_quiet_prints_file_name(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "init"], input=NPM_INPUT)
        assert result.exit_code == 0, result.output
        assert result.output.rstrip().splitlines()[-1] == ".shiprc"

    def test_json_output(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "init"], input=NPM_INPUT)

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output[result.output.index('{\n  "ok"') :])
        assert payload["ok"] is True
        assert payload["data"]["config"]["plugins"] == ["npm"]


class TestInitFailures:
    def test_end_of_input_aborts(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["init"], input="npm Package\n\nfoo\nbar\n")

        assert result.exit_code == 1
        assert "Aborted at prompt" in result.output
        assert not (project_root / ".shiprc").exists()

    def test_unknown_plugin_from_config(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "shipctl.toml").write_text(
            '[init.feature_plugins]\nghost = "Not installed anywhere"\n'
        )

        result = cli_runner.invoke(cli, ["init"], input="npm Package\nghost\n")

        assert result.exit_code == 1
        assert "Could not find plugin 'ghost'" in result.output
        assert not (project_root / ".shiprc").exists()

    def test_custom_rc_file_from_config(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "shipctl.toml").write_text('[files]\nrc_file = ".autorc"\n')

        result = cli_runner.invoke(cli, ["init"], input=NPM_INPUT)

        assert result.exit_code == 0, result.output
        assert (project_root / ".autorc").is_file()


class TestInitExamples:
    def test_examples_flag(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["init", "--examples"])
        assert result.exit_code == 0
        assert "shipctl init path/to/project" in result.output
        assert not (project_root / ".shiprc").exists()
