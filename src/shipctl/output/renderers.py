"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from shipctl.output.console import create_console, get_output, style_for_release_type

if TYPE_CHECKING:
    from rich.console import Console

    from shipctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "init":
        return str(result.data.get("file", ""))
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ship.ok")
    op = Text(f"  {result.op}", style="ship.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ship.key")
    if isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print(
        Text("  Wrote configuration to: "),
        Text(str(result.data.get("file", "")), style="ship.path"),
        sep="",
    )
    config = result.data.get("config") or {}
    if verbose:
        for key, value in config.items():
            _field(console, key, value)
    else:
        plugins = config.get("plugins") or []
        names = [p if isinstance(p, str) else p[0] for p in plugins]
        if names:
            _field(console, "plugins", ", ".join(names))
        if config.get("labels"):
            _field(console, "labels", len(config["labels"]))


def _render_plugins(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Plugin", style="ship.plugin", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Menu")
    table.add_column("Available")
    for item in result.data.get("items", []):
        available = Text("yes", style="ship.ok") if item["available"] else Text(
            "no", style="ship.error"
        )
        table.add_row(item["name"], item["kind"], item["menu"], available)
    console.print(table)


def _render_labels(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Label", no_wrap=True)
    table.add_column("Release")
    table.add_column("Changelog Title")
    if verbose:
        table.add_column("Description", style="dim")
    for item in result.data.get("items", []):
        release_type = item.get("releaseType")
        row: list[Any] = [
            item["name"],
            Text(release_type or "", style=style_for_release_type(release_type)),
            item.get("changelogTitle", ""),
        ]
        if verbose:
            row.append(item.get("description", ""))
        table.add_row(*row)
    console.print(table)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ship.error")
    op = Text(f"  {result.op}", style="ship.op")
    sep = Text(" — ")
    console.print(Text.assemble(label, op, sep, msg))
    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="ship.key"))
        for key, value in err.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "init": _render_init,
    "plugins": _render_plugins,
    "labels": _render_labels,
}
