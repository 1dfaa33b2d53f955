"""LabelEditor — customize the stock labels and add new ones.

Only labels that differ from their default are kept, flagged with
``overwrite=True``. New labels are appended after the overrides.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from shipctl.domain.labels import (
    DEFAULT_LABELS,
    LABEL_FIELDS,
    LabelDefinition,
    is_override,
    label_from_values,
    validate_label,
)
from shipctl.prompts import SnippetField

if TYPE_CHECKING:
    from shipctl.prompts import Prompter

logger = logging.getLogger(__name__)


def label_form(label: LabelDefinition | None = None) -> list[SnippetField]:
    """Snippet fields for editing *label*, or for a brand-new label.

    ``changelogTitle`` is only offered for an existing label that has one.
    """
    if label is None:
        return [SnippetField(name) for name in LABEL_FIELDS]
    values = label.form_values()
    return [
        SnippetField(name, default=values[name])
        for name in LABEL_FIELDS
        if name != "changelogTitle" or values[name]
    ]


class LabelEditor:
    """Interactive edit/validate loop over label definitions."""

    def __init__(
        self,
        prompter: Prompter,
        defaults: Sequence[LabelDefinition] = DEFAULT_LABELS,
    ) -> None:
        self._prompter = prompter
        self._defaults = tuple(defaults)

    def ask_label(self, label: LabelDefinition | None = None) -> LabelDefinition:
        message = f'Edit "{label.name}" label:' if label else "Add a label:"
        values = self._prompter.snippet(message, label_form(label), validate=validate_label)
        return label_from_values(values)

    def customize_defaults(self) -> list[LabelDefinition]:
        """Overrides for the default labels the user actually changed."""
        if not self._prompter.confirm(
            "Would you like to customize the default labels?", default=False
        ):
            return []

        overrides: list[LabelDefinition] = []
        for default in self._defaults:
            edited = self.ask_label(default)
            if is_override(edited, default):
                logger.debug("Label %s overridden", default.name)
                overrides.append(edited.model_copy(update={"overwrite": True}))
        return overrides

    def additional_labels(self) -> list[LabelDefinition]:
        """New labels, asked for until the user declines."""
        labels: list[LabelDefinition] = []
        add = self._prompter.confirm("Would you like to add more labels?", default=False)
        while add:
            labels.append(self.ask_label())
            add = self._prompter.confirm("Would you like to add another label?", default=False)
        return labels

    def collect(self) -> list[LabelDefinition]:
        return [*self.customize_defaults(), *self.additional_labels()]
