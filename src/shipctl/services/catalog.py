"""Read-only listings backing ``shipctl plugins`` and ``shipctl labels``."""

from __future__ import annotations

from typing import Any

from shipctl.config.models import InitConfig
from shipctl.domain.labels import DEFAULT_LABELS
from shipctl.plugins.manager import PluginManager
from shipctl.services.result import ServiceResult


def list_plugins(menu: InitConfig, plugin_manager: PluginManager | None = None) -> ServiceResult:
    """List the init menu and whether each identifier can be resolved."""
    pm = plugin_manager or PluginManager()
    items: list[dict[str, Any]] = []
    for label, identifier in menu.release_plugins.items():
        items.append(
            {
                "name": identifier,
                "kind": "release",
                "menu": label,
                "available": pm.is_resolvable(identifier),
            }
        )
    for identifier, description in menu.feature_plugins.items():
        items.append(
            {
                "name": identifier,
                "kind": "feature",
                "menu": description,
                "available": pm.is_resolvable(identifier),
            }
        )
    warnings = [f"Plugin {i['name']!r} is not installed" for i in items if not i["available"]]
    return ServiceResult(
        ok=True,
        op="plugins",
        data={"count": len(items), "items": items},
        warnings=warnings,
    )


def list_labels() -> ServiceResult:
    """List the stock label set offered for customization."""
    items = [label.to_artifact() for label in DEFAULT_LABELS]
    return ServiceResult(ok=True, op="labels", data={"count": len(items), "items": items})
