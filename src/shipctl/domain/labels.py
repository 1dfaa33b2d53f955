"""Label definitions: release types, the stock label set, and validation.

A label maps a pull-request tag to a changelog section and a version bump.
Names are unique by convention only; nothing here enforces it.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReleaseType(StrEnum):
    """Version-bump severity a label triggers."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"
    SKIP = "skip"
    RELEASE = "release"


RELEASE_TYPES: tuple[str, ...] = tuple(t.value for t in ReleaseType)

# Fields shown in the label form, in display order.
LABEL_FIELDS: tuple[str, ...] = ("name", "changelogTitle", "description", "releaseType")


class LabelDefinition(BaseModel):
    """A single label rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    changelog_title: str | None = Field(default=None, alias="changelogTitle")
    description: str | None = None
    release_type: ReleaseType | None = Field(default=None, alias="releaseType")
    overwrite: bool | None = None

    def form_values(self) -> dict[str, str | None]:
        """Editable field values keyed by their external names."""
        return {
            "name": self.name,
            "changelogTitle": self.changelog_title,
            "description": self.description,
            "releaseType": self.release_type.value if self.release_type else None,
        }

    def to_artifact(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


DEFAULT_LABELS: tuple[LabelDefinition, ...] = (
    LabelDefinition(
        name="major",
        changelog_title="💥 Breaking Change",
        description="Increment the major version when merged",
        release_type=ReleaseType.MAJOR,
    ),
    LabelDefinition(
        name="minor",
        changelog_title="🚀 Enhancement",
        description="Increment the minor version when merged",
        release_type=ReleaseType.MINOR,
    ),
    LabelDefinition(
        name="patch",
        changelog_title="🐛 Bug Fix",
        description="Increment the patch version when merged",
        release_type=ReleaseType.PATCH,
    ),
    LabelDefinition(
        name="skip-release",
        description="Preserve the current version when merged",
        release_type=ReleaseType.SKIP,
    ),
    LabelDefinition(
        name="release",
        description="Create a release when this pr is merged",
        release_type=ReleaseType.RELEASE,
    ),
    LabelDefinition(
        name="internal",
        changelog_title="🏠 Internal",
        description="Changes only affect the internal API",
        release_type=ReleaseType.NONE,
    ),
    LabelDefinition(
        name="documentation",
        changelog_title="📝 Documentation",
        description="Changes only affect the documentation",
        release_type=ReleaseType.NONE,
    ),
    LabelDefinition(
        name="tests",
        changelog_title="🧪 Tests",
        description="Add or improve existing tests",
        release_type=ReleaseType.NONE,
    ),
    LabelDefinition(
        name="dependencies",
        changelog_title="🔩 Dependency Updates",
        description="Update one or more dependencies version",
        release_type=ReleaseType.NONE,
    ),
)


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def validate_label(values: Mapping[str, Any]) -> str | None:
    """Return an error message for an invalid label form, or None if valid."""
    if not _clean(values.get("name")):
        return "name is required for new label"

    release_type = _clean(values.get("releaseType"))
    if release_type and release_type not in RELEASE_TYPES:
        return f"Release type can only be one of the following: {', '.join(RELEASE_TYPES)}"

    return None


def label_from_values(values: Mapping[str, Any]) -> LabelDefinition:
    """Build a label from submitted form values. Blank fields become absent.

    Raises:
        ValueError: If the values fail :func:`validate_label`.
    """
    error = validate_label(values)
    if error is not None:
        raise ValueError(error)
    return LabelDefinition.model_validate({key: _clean(values.get(key)) for key in LABEL_FIELDS})


def is_override(edited: LabelDefinition, default: LabelDefinition) -> bool:
    """Whether *edited* differs from *default* in any editable field."""
    return edited.form_values() != default.form_values()
