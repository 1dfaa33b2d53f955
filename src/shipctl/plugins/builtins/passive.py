"""Plugins with nothing to ask during init."""

from __future__ import annotations

from typing import Any


class PassivePlugin:
    """Resolvable unit without an ``interactive_init`` entry point."""

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        self.options = options or {}
