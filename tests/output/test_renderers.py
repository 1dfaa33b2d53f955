"""Tests for ServiceResult rendering across output modes."""

from __future__ import annotations

import json

from shipctl.output.formatters import OutputSettings, format_result
from shipctl.output.renderers import render_quiet, render_result
from shipctl.services.catalog import list_labels
from shipctl.services.result import ServiceError, ServiceResult

INIT_OK = ServiceResult(
    ok=True,
    op="init",
    data={
        "file": ".shiprc",
        "config": {
            "plugins": ["npm", ["jira", {"url": "https://jira"}]],
            "owner": "foo",
            "repo": "bar",
            "labels": [{"name": "bug"}],
        },
    },
)

INIT_FAILED = ServiceResult(
    ok=False,
    op="init",
    error=ServiceError(
        code="PLUGIN_NOT_FOUND",
        message="Could not find plugin 'ghost'",
        detail={"plugin": "ghost"},
    ),
)

PLUGINS = ServiceResult(
    ok=True,
    op="plugins",
    data={
        "count": 2,
        "items": [
            {"name": "npm", "kind": "release", "menu": "npm Package", "available": True},
            {"name": "ghost", "kind": "feature", "menu": "Ghost", "available": False},
        ],
    },
)


class TestRenderInit:
    def test_summary(self) -> None:
        output = render_result(INIT_OK)
        assert output.splitlines()[0].split() == ["OK", "init"]
        assert "Wrote configuration to: .shiprc" in output
        assert "plugins: npm, jira" in output
        assert "labels: 1" in output

    def test_key_value_lines_single_spaced(self) -> None:
        lines = render_result(INIT_OK).splitlines()
        assert lines[0] == "OK  init"
        assert "  plugins: npm, jira" in lines
        assert "  labels: 1" in lines

    def test_verbose_dumps_config(self) -> None:
        output = render_result(INIT_OK, verbose=True)
        assert "owner: foo" in output
        assert '"url":"https://jira"' in output


class TestRenderError:
    def test_message(self) -> None:
        output = render_result(INIT_FAILED)
        assert output.splitlines()[0].split()[:2] == ["ERROR", "init"]
        assert "Could not find plugin 'ghost'" in output
        assert "PLUGIN_NOT_FOUND" not in output

    def test_error_line(self) -> None:
        assert render_result(INIT_FAILED) == "ERROR  init — Could not find plugin 'ghost'"

    def test_verbose_shows_code_and_detail(self) -> None:
        output = render_result(INIT_FAILED, verbose=True)
        assert "code: PLUGIN_NOT_FOUND" in output
        assert "plugin: ghost" in output


class TestRenderTables:
    def test_plugins_table(self) -> None:
        output = render_result(PLUGINS)
        assert "npm Package" in output
        assert "ghost" in output
        assert "no" in output

    def test_labels_table(self) -> None:
        output = render_result(list_labels())
        assert "skip-release" in output
        assert "Description" not in output
        assert "Description" in render_result(list_labels(), verbose=True)

    def test_unknown_op_generic(self) -> None:
        output = render_result(ServiceResult(ok=True, op="other", data={"k": "v"}))
        assert "k: v" in output


class TestQuiet:
    def test_init_prints_file(self) -> None:
        assert render_quiet(INIT_OK) == ".shiprc"

    def test_items_print_names(self) -> None:
        assert render_quiet(PLUGINS) == "npm\nghost"

    def test_error(self) -> None:
        assert render_quiet(INIT_FAILED).startswith("ERROR: init")


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(INIT_OK, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["file"] == ".shiprc"

    def test_quiet_mode(self) -> None:
        assert format_result(INIT_OK, settings=OutputSettings(quiet=True)) == ".shiprc"

    def test_default_mode(self) -> None:
        assert format_result(INIT_OK).splitlines()[0].split() == ["OK", "init"]
