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

from dasshboard.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from dasshboard.services.result import ServiceResult


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

    if result.op == "sync":
        return "\n".join(result.data.get("added", []))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["name"]) for item in items if isinstance(item, dict))

    if "uri" in result.data:
        return str(result.data["uri"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dassh.ok")
    op = Text(f"  {result.op}", style="dassh.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dassh.key")
    if key in ("host", "name"):
        v = Text(str(value), style="dassh.name")
    elif key in ("path", "store", "config"):
        v = Text(str(value), style="dassh.path")
    elif key == "uri":
        v = Text(str(value), style="dassh.uri")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value) or "-")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _counts_line(console: Console, counts: dict[str, int]) -> None:
    parts = [f"{counts.get(t, 0)} {t}" for t in ("ssh", "wsl", "docker")]
    console.print(Text(f"  found: {', '.join(parts)}", style="dim"))


def _host_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a list of host summaries."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="dassh.name", no_wrap=True)
    table.add_column("Type")
    table.add_column("Connection")
    table.add_column("Folders")
    if verbose:
        table.add_column("IP", style="dim")
        table.add_column("Icon", style="dim")
        table.add_column("Color", style="dim")

    for item in items:
        host_type = str(item.get("type", ""))
        row: list[Any] = [
            str(item.get("name", "")),
            Text(host_type, style=style_for_type(host_type)),
            str(item.get("detail", "")),
            ", ".join(item.get("folders", [])),
        ]
        if verbose:
            row.append(str(item.get("ip") or ""))
            row.append(str(item.get("icon") or ""))
            color = str(item.get("color") or "")
            row.append(Text(color, style=color) if color.startswith("#") else color)
        table.add_row(*row)
    return table


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="dassh.warning"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dassh.error")
    op = Text(f"  {result.op}", style="dassh.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_hosts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if items:
        console.print(_host_table(items, verbose=verbose))
    else:
        console.print(Text("No SSH hosts, WSL distros, or Docker containers found.", style="dim"))
    console.print(f"\n{result.data.get('count', len(items))} hosts")


def _render_sync(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    added = result.data.get("added", [])
    if added:
        _field(console, "added", added)
    else:
        console.print(Text("  No new hosts detected. Settings are up to date.", style="dim"))
    _field(console, "total", result.data.get("total", 0))
    if verbose:
        _field(console, "store", result.data.get("store", ""))
        _counts_line(console, result.data.get("counts", {}))


def _render_diagnose(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("platform", "remote", "wsl_available", "store", "config"):
        _field(console, key, d.get(key) if d.get(key) is not None else "-")

    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Tool")
    table.add_column("Found")
    table.add_column("Enabled")
    table.add_column("Path", style="dassh.path")
    for tool in d.get("tools", []):
        table.add_row(
            str(tool.get("tool", "")),
            Text("yes", style="dassh.ok") if tool.get("found") else Text("no", style="dassh.error"),
            "yes" if tool.get("enabled") else "no",
            str(tool.get("path") or ""),
        )
    console.print()
    console.print(table)

    console.print()
    for host_type, names in d.get("hosts", {}).items():
        console.print(f"  {host_type}: {len(names)}" + (f" ({', '.join(names)})" if names else ""))


def _render_settings(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "store", d.get("store", ""))
    _field(console, "layout", d.get("layout", ""))

    sections = Table(show_header=True, pad_edge=False, expand=False, title="Sections")
    sections.add_column("Section")
    sections.add_column("Color")
    sections.add_column("Collapsed")
    colors = d.get("section_colors", {})
    collapsed = d.get("section_collapsed", {})
    for section in ("ssh", "wsl", "docker"):
        sections.add_row(
            Text(section, style=style_for_type(section)),
            colors.get(section) or "-",
            "yes" if collapsed.get(section) else "no",
        )
    console.print(sections)

    hosts = d.get("hosts", {})
    table = Table(show_header=True, pad_edge=False, expand=False, title="Hosts")
    table.add_column("Host", style="dassh.name")
    table.add_column("Folders")
    table.add_column("Icon")
    table.add_column("Color")
    for name, entry in hosts.items():
        table.add_row(
            name,
            ", ".join(entry.get("folders", [])),
            entry.get("icon") or "-",
            entry.get("color") or "-",
        )
    console.print(table)


def _render_open(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("host", "type", "folder", "uri", "path"):
        if key in result.data:
            _field(console, key, result.data[key])
    if "new_window" in result.data:
        _field(console, "window", "new" if result.data["new_window"] else "current")
    if verbose and "command" in result.data:
        _field(console, "command", " ".join(result.data["command"]))


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "bytes"):
        if key in result.data:
            _field(console, key, result.data[key])
    _render_warnings(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus one field per data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        if key in ("reload", "command"):
            continue
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "list_hosts": _render_hosts,
    "sync": _render_sync,
    "diagnose": _render_diagnose,
    "show_settings": _render_settings,
    "open_folder": _render_open,
    "open_ssh_config": _render_open,
    "open_settings": _render_open,
    "render": _render_render,
}
