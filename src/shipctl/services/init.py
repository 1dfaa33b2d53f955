"""InteractiveInit — build a ``.shiprc`` through plugin-extensible prompts.

Pipeline (fixed order, every stage runs at most once):

  SELECT plugins → RESOLVE & INIT plugins → CONFIGURE plugins → REPO →
  AUTHOR → GATES (release label, enterprise APIs) → ENV → LABELS → PERSIST

Plugins never add or reorder stages. They influence the outcome of a stage
by tapping :class:`~shipctl.plugins.hooks.InitHooks` from their
``interactive_init`` hook. Default handlers are tapped after every plugin
has initialized, so they only run when no plugin produced a result.

The configuration record is threaded through the stages as a value: each
stage returns a new :class:`~shipctl.domain.rc.ShipRc` and only ``run``
holds the current one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from shipctl.config.logging import init_log_context, log_stage
from shipctl.config.models import FilesConfig, InitConfig
from shipctl.domain.labels import DEFAULT_LABELS, LabelDefinition
from shipctl.domain.rc import (
    AuthorInformation,
    GithubApis,
    PluginEntry,
    RepoInformation,
    ShipRc,
)
from shipctl.infrastructure.filesystem import write_json
from shipctl.plugins.hooks import HookError, InitHooks, make_init_hooks
from shipctl.plugins.manager import PluginManager, PluginResolutionError
from shipctl.prompts import Prompter, PromptAborted, SnippetField, required_fields
from shipctl.services.env import GH_TOKEN_REQUEST_MESSAGE, EnvMaterializer, EnvRequest
from shipctl.services.labels import LabelEditor
from shipctl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

DEFAULT_TAP = "Init Default"


class InitState(StrEnum):
    """Lifecycle of a single init run."""

    PENDING = "pending"
    RUNNING = "running"
    PERSISTED = "persisted"
    ABORTED = "aborted"


class InteractiveInit:
    """Host object handed to every plugin's ``interactive_init`` hook.

    Attributes:
        hooks: The init extension points plugins tap.
        prompter: Interactive capability plugins may use for extra questions.
        root: Project directory the artifacts are written to.
    """

    def __init__(
        self,
        prompter: Prompter,
        *,
        root: Path,
        plugin_manager: PluginManager | None = None,
        menu: InitConfig | None = None,
        files: FilesConfig | None = None,
        default_labels: Sequence[LabelDefinition] = DEFAULT_LABELS,
    ) -> None:
        self.hooks: InitHooks = make_init_hooks()
        self.prompter = prompter
        self.root = root
        self.logger = logger
        self._pm = plugin_manager or PluginManager()
        self._menu = menu or InitConfig()
        self._files = files or FilesConfig()
        self._default_labels = tuple(default_labels)
        self.state = InitState.PENDING

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> ServiceResult:
        """Run every stage and persist the configuration.

        Returns a failed result, with nothing persisted, when a plugin cannot
        be resolved (``PLUGIN_NOT_FOUND``), the user aborts a prompt
        (``ABORTED``) or a plugin handler raises (``HOOK_FAILED``).
        """
        if self.state is not InitState.PENDING:
            msg = f"InteractiveInit.run() called in state {self.state}"
            raise RuntimeError(msg)
        self.state = InitState.RUNNING

        with init_log_context(self.root):
            try:
                rc, filename = self._run_stages()
            except PluginResolutionError as exc:
                return self._abort(
                    ErrorCode.PLUGIN_NOT_FOUND, str(exc), plugin=exc.identifier
                )
            except PromptAborted as exc:
                return self._abort(ErrorCode.ABORTED, f"Aborted at prompt: {exc}")
            except HookError as exc:
                return self._abort(
                    ErrorCode.HOOK_FAILED, str(exc), hook=exc.hook_name, tap=exc.tap_name
                )

            logger.info("Wrote configuration to %s", filename)

        self.state = InitState.PERSISTED
        return ServiceResult(
            ok=True,
            op="init",
            data={"file": filename, "config": rc.to_artifact()},
        )

    # ------------------------------------------------------------------
    # Default handlers (tapped last)
    # ------------------------------------------------------------------

    def get_repo_information(self) -> RepoInformation:
        """Ask which GitHub project to publish."""
        values = self.prompter.snippet(
            "What GitHub project you would like to publish?",
            [SnippetField("owner"), SnippetField("repo")],
            validate=required_fields("owner", "repo"),
        )
        return RepoInformation(owner=values["owner"], repo=values["repo"])

    def get_author_information(self) -> AuthorInformation:
        """Ask for the git identity to make release commits with."""
        values = self.prompter.snippet(
            "What git user would you like to make commits with?",
            [SnippetField("name", label="Name"), SnippetField("email", label="Email")],
            validate=required_fields("name", "email"),
        )
        return AuthorInformation(name=values["name"], email=values["email"])

    def write_rc_file(self, rc: ShipRc) -> str:
        """Persist *rc* as JSON at the canonical path and return its name."""
        filename = self._files.rc_file
        write_json(self.root / filename, rc.to_artifact())
        return filename

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _abort(self, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        self.state = InitState.ABORTED
        logger.debug("Init aborted (%s): %s", code, message)
        return ServiceResult.failure("init", code, message, **detail)

    def _tap_defaults(self) -> None:
        self.hooks.get_repo.tap(DEFAULT_TAP, self.get_repo_information)
        self.hooks.get_author.tap(DEFAULT_TAP, self.get_author_information)
        self.hooks.create_env.tap(DEFAULT_TAP, _add_github_token)
        self.hooks.write_rc_file.tap(DEFAULT_TAP, self.write_rc_file)

    def _run_stages(self) -> tuple[ShipRc, str]:
        rc = ShipRc()

        log_stage(logger, "select")
        plugins = self._select_plugins()
        log_stage(logger, "load")
        self._load_plugins(plugins)
        self._tap_defaults()

        log_stage(logger, "configure")
        rc = rc.with_plugins(self._configure_plugins(plugins))
        log_stage(logger, "repo")
        rc = _merge_result(rc, self.hooks.get_repo.call())
        log_stage(logger, "author")
        rc = _merge_result(rc, self.hooks.get_author.call())
        log_stage(logger, "gates")
        rc = self._ask_gates(rc)

        log_stage(logger, "env")
        requests = self.hooks.create_env.call(())
        self._materialize_env(requests)

        log_stage(logger, "labels")
        labels = LabelEditor(self.prompter, self._default_labels).collect()
        if labels:
            rc = rc.with_labels(labels)

        log_stage(logger, "persist")
        filename = self.hooks.write_rc_file.call(rc)
        return rc, str(filename)

    def _select_plugins(self) -> list[str]:
        release_menu = self._menu.release_plugins
        release = self.prompter.select(
            "What package manager plugin would you like to publish your project with?",
            list(release_menu),
        )
        features = self.prompter.multiselect(
            "What other plugins would you like to use?",
            self._menu.feature_plugins,
        )
        plugins = [release_menu[release], *features]
        logger.debug("Selected plugins: %s", plugins)
        return plugins

    def _load_plugins(self, plugins: Sequence[str]) -> None:
        # Resolve everything first so an unknown identifier aborts before any
        # plugin has tapped a hook.
        units = [self._pm.resolve(name, {}) for name in plugins]
        for unit in units:
            self._pm.initialize(unit, self)

    def _configure_plugins(self, plugins: Sequence[str]) -> list[PluginEntry]:
        entries: list[PluginEntry] = []
        for name in plugins:
            entry = self.hooks.configure_plugin.call(name)
            entries.append(_plugin_entry(entry) if entry is not None else name)
        return entries

    def _ask_gates(self, rc: ShipRc) -> ShipRc:
        only_release_label = self.prompter.confirm(
            'Only make releases if "release" label is on pull request?', default=False
        )
        if only_release_label:
            rc = rc.merge({"only_publish_with_release_label": True})

        is_enterprise = self.prompter.confirm(
            "Are you using an enterprise instance of GitHub?", default=False
        )
        if is_enterprise:
            values = self.prompter.snippet(
                "What are the api URLs for your GitHub enterprise instance?",
                [
                    SnippetField("githubApi", label="GitHub API"),
                    SnippetField("githubGraphqlApi", label="Graphql API"),
                ],
                validate=required_fields("githubApi", "githubGraphqlApi"),
            )
            rc = rc.merge(GithubApis.model_validate(values), overwrite=True)
        return rc

    def _materialize_env(self, requests: Sequence[EnvRequest]) -> None:
        materializer = EnvMaterializer(
            self.prompter,
            env_path=self.root / self._files.env_file,
            ignore_path=self.root / self._files.ignore_file,
        )
        materializer.materialize(list(requests))


def _add_github_token(requests: Sequence[EnvRequest]) -> tuple[EnvRequest, ...]:
    return (*requests, EnvRequest(variable="GH_TOKEN", message=GH_TOKEN_REQUEST_MESSAGE))


def _merge_result(rc: ShipRc, result: object) -> ShipRc:
    """Merge an object-shaped bail result; ``True`` means nothing to merge."""
    if isinstance(result, (BaseModel, Mapping)):
        return rc.merge(result)
    return rc


def _plugin_entry(entry: Any) -> PluginEntry:
    """Normalize a ``configure_plugin`` result to a plugin entry."""
    if isinstance(entry, str):
        return entry
    name, options = entry
    return (str(name), dict(options))
