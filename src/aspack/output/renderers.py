"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from aspack.domain.json_utils import stringify
from aspack.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from aspack.services.result import ServiceResult

Renderer = Any


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.op in _RESULT_RENDERERS:
        _RESULT_RENDERERS[result.op](result, console, verbose=verbose)
    elif result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "format":
        return str(result.data.get("text", ""))
    if result.op == "get":
        return stringify(result.data.get("value"))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    if result.ok:
        console.print(Text("OK", style="aspack.ok"), Text(f"  {result.op}", style="aspack.op"))
        return
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="aspack.error"),
        Text(f"  {result.op}", style="aspack.op"),
        Text(f"- {msg}"),
    )


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="aspack.key"), Text(str(value)), sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="aspack.warning"), Text(warning), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    err = result.error
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Validation ────────────────────────────────────────────────────────


def _render_validation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render ``validate``/``validate_field`` as a per-field table.

    Used for both outcomes: an invalid record still carries its results.
    """
    data = result.data
    if not data:
        _render_error(result, console, verbose=verbose)
        return

    _status_line(console, result)

    if "results" in data:
        fields: dict[str, dict[str, Any]] = data["results"]
    else:
        fields = {data.get("field", "value"): data}

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="aspack.field", no_wrap=True)
    table.add_column("Valid")
    table.add_column("Errors")
    if verbose:
        table.add_column("Rules", style="aspack.rule")

    for name, field_result in fields.items():
        errors = field_result.get("errors", [])
        valid = Text("yes", style="aspack.ok") if not errors else Text("no", style="aspack.error")
        row: list[Text] = [Text(name), valid, Text("; ".join(e["message"] for e in errors))]
        if verbose:
            row.append(Text(", ".join(e["rule"] for e in errors)))
        table.add_row(*row)

    console.print(table)
    if not result.ok:
        _render_warnings(console, result)


# ── Rules / JSON ──────────────────────────────────────────────────────


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "rules", ", ".join(result.data.get("rules", [])))
    _field(console, "types", ", ".join(result.data.get("types", [])))


def _render_get(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the looked-up value as JSON, nothing else, so it pipes cleanly."""
    console.print(Text(stringify(result.data.get("value"), 2)), soft_wrap=True)


def _render_format(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data.get("text", ""))), soft_wrap=True)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict | list):
            _field(console, key, stringify(value))
        else:
            _field(console, key, value)


# ── Dispatch tables ───────────────────────────────────────────────────

# Ops whose renderer also handles failed results.
_RESULT_RENDERERS: dict[str, Renderer] = {
    "validate": _render_validation,
    "validate_field": _render_validation,
}

_OP_RENDERERS: dict[str, Renderer] = {
    "rules": _render_rules,
    "get": _render_get,
    "format": _render_format,
}
