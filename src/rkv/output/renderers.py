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

from rich.text import Text

from rkv.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from rkv.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode: the affected path."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    for key in ("full_path", "vault_path", "path"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="rkv.ok"), Text(f"  {result.op}", style="rkv.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rkv.key")
    if key.endswith("path"):
        v = Text(str(value), style="rkv.path")
    elif isinstance(value, dict | list):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k + v)


def _hint(console: Console, message: str) -> None:
    console.print(Text(f"  {message}", style="rkv.hint"))


def _render_launch(console: Console, data: dict[str, Any]) -> None:
    """Print what happened when handing the entry to the editor."""
    if data.get("opened"):
        _hint(console, f"Opened in Obsidian: {data['path']}")
    elif "open_command" in data:
        editor = str(data["open_command"]).split(" ", 1)[0]
        console.print(Text(f"  Open with {editor}: {data['full_path']}"))
        _hint(console, f"Command: {data['open_command']}")


# ── Per-op renderers ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_new_entry(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    entry_type = str(data.get("type", ""))
    _status_line(console, result)
    if data.get("defaulted_type"):
        _hint(console, f"Using default entry type: {entry_type}")
    if data.get("created"):
        origin = data.get("template_origin")
        template = data.get("template")
        if origin == "vault":
            _hint(console, f"Using vault template: .templates/{template}.md")
        elif origin == "default":
            _hint(console, f"Using default template: {template}.md")
        label = Text("  Created ")
        label.append(entry_type, style=style_for_type(entry_type))
        label.append(f" entry for {data.get('date')}")
        console.print(label)
    else:
        console.print(Text(f"  Entry already exists: {data.get('path')}", style="rkv.warning"))
    _field(console, "path", data.get("path"))
    _render_launch(console, data)
    if verbose:
        _field(console, "full_path", data.get("full_path"))


def _render_open_entry(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "path", data.get("path"))
    _render_launch(console, data)


def _render_log_capture(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    console.print(Text("  Logged capture"))
    _hint(console, f"{data.get('count', 0)} captures today")
    if verbose:
        _field(console, "path", data.get("path"))


def _render_init_vault(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "vault_path", data.get("vault_path"))
    _field(console, "vault_name", data.get("vault_name"))
    _field(console, "editor", data.get("editor"))
    _field(console, "config_path", data.get("config_path"))
    for folder in data.get("folders_created", []):
        _hint(console, f"Created {folder}/")
    templates = data.get("templates_copied", [])
    if templates:
        _hint(console, f"Templates: {', '.join(templates)}")
    if data.get("welcome_created"):
        _hint(console, "Created welcome file")
    steps = data.get("next_steps", [])
    if steps:
        console.print()
        console.print(Text("  Next steps:", style="rkv.op"))
        for step in steps:
            _hint(console, f"  - {step}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="rkv.error")
    msg = result.error.message if result.error else "Unknown error"
    console.print(label, Text(f"  {result.op}", style="rkv.op"), Text(f" — {msg}"))
    if result.error is None:
        return
    detail = result.error.detail
    for key in ("hint", "suggestion"):
        if detail.get(key):
            prefix = "To create a new entry, try: " if key == "suggestion" else ""
            _hint(console, f"{prefix}{detail[key]}")
    if detail.get("valid_types"):
        _hint(console, f"Valid types: {', '.join(detail['valid_types'])}")
    if verbose:
        for key, value in detail.items():
            if key not in ("hint", "suggestion", "valid_types"):
                _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "new_entry": _render_new_entry,
    "open_entry": _render_open_entry,
    "log_capture": _render_log_capture,
    "init_vault": _render_init_vault,
}
