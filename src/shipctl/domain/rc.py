"""The configuration record assembled by ``shipctl init``.

The record is a frozen pydantic model. Each pipeline stage hands back a new
record via :meth:`ShipRc.merge`; nothing mutates a record in place, so the
orchestrator's copy is the only authoritative one.

Field names on the wire are the release tool's camelCase keys
(``githubApi``, ``onlyPublishWithReleaseLabel``); Python code uses the
snake_case attribute names.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shipctl.domain.labels import LabelDefinition

logger = logging.getLogger(__name__)

# A plugin is configured either by bare identifier or as (identifier, options).
PluginEntry = str | tuple[str, dict[str, Any]]


class RepoInformation(BaseModel):
    """The repository to publish."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str


class AuthorInformation(BaseModel):
    """The git identity used for release commits."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str


class GithubApis(BaseModel):
    """Enterprise API endpoints overriding the public GitHub defaults."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    github_api: str | None = Field(default=None, alias="githubApi")
    github_graphql_api: str | None = Field(default=None, alias="githubGraphqlApi")


class ShipRc(BaseModel):
    """Accumulating configuration record (persisted as ``.shiprc``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repo: str | None = None
    owner: str | None = None
    name: str | None = None
    email: str | None = None
    github_api: str | None = Field(default=None, alias="githubApi")
    github_graphql_api: str | None = Field(default=None, alias="githubGraphqlApi")
    only_publish_with_release_label: bool | None = Field(
        default=None, alias="onlyPublishWithReleaseLabel"
    )
    plugins: tuple[PluginEntry, ...] = ()
    labels: tuple[LabelDefinition, ...] = ()

    def merge(self, delta: BaseModel | Mapping[str, Any], *, overwrite: bool = False) -> ShipRc:
        """Return a new record with *delta* applied.

        ``None`` values in *delta* are ignored. Unless *overwrite* is set, a
        field that already holds a value is kept; the conflicting value is
        logged and dropped.
        """
        values = _delta_values(delta)
        updates: dict[str, Any] = {}
        for key, value in values.items():
            attr = _attribute_name(key)
            if attr is None:
                logger.debug("Ignoring unknown configuration key %r", key)
                continue
            if value is None:
                continue
            current = getattr(self, attr)
            if current not in (None, ()) and not overwrite and current != value:
                logger.debug("Keeping %s=%r, ignoring later value %r", attr, current, value)
                continue
            updates[attr] = value
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})

    def with_plugins(self, plugins: list[PluginEntry]) -> ShipRc:
        return self.model_copy(update={"plugins": tuple(plugins)})

    def with_labels(self, labels: list[LabelDefinition]) -> ShipRc:
        """Append *labels* after any labels already on the record."""
        return self.model_copy(update={"labels": (*self.labels, *labels)})

    def to_artifact(self) -> dict[str, Any]:
        """JSON-ready dict with external key names and unset fields omitted."""
        data = self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"plugins", "labels"},
        )
        if self.plugins:
            data["plugins"] = [
                entry if isinstance(entry, str) else [entry[0], dict(entry[1])]
                for entry in self.plugins
            ]
        if self.labels:
            data["labels"] = [label.to_artifact() for label in self.labels]
        return data


def _delta_values(delta: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(delta, BaseModel):
        return delta.model_dump(by_alias=False)
    return dict(delta)


def _attribute_name(key: str) -> str | None:
    """Resolve an attribute or alias name to the model attribute."""
    if key in ShipRc.model_fields:
        return key
    for attr, info in ShipRc.model_fields.items():
        if info.alias == key:
            return attr
    return None
