"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from modulectl.output.console import create_console, get_output, style_for_outcome

if TYPE_CHECKING:
    from rich.console import Console

    from modulectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
    if "output" in result.data:
        return str(result.data["output"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="mod.ok"), Text(f"  {result.op}", style="mod.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="mod.key")
    style = "mod.path" if key in ("driver", "output") else ""
    console.print(k, Text(str(value), style=style), end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="mod.error")
    op = Text(f"  {result.op}", style="mod.op")
    console.print(label, op, Text("—"), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_docs(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "output", result.data.get("output", ""))
    if verbose:
        _field(console, "driver", result.data.get("driver", ""))
        _field(console, "size", result.data.get("size", 0))


def _render_register(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "type", result.data.get("type", ""))
    _field(console, "total", result.data.get("total", 0))

    stats: dict[str, int] = result.data.get("stats", {})
    if not stats:
        return
    console.print()
    table = Table(title="Statistics", show_header=True, pad_edge=False, expand=False)
    table.add_column("Outcome")
    table.add_column("Count", style="mod.count", justify="right")
    for outcome, count in stats.items():
        table.add_row(Text(outcome, style=style_for_outcome(outcome)), str(count))
    console.print(table)


_OP_RENDERERS: dict[str, Any] = {
    "generate_docs": _render_docs,
    "register_products": _render_register,
}
