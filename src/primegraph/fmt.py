# src/primegraph/fmt.py
from __future__ import annotations

import re

from colorama import Fore, Style

from primegraph.encode import GraphNumber
from primegraph.graph import Graph

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

BALL = "●"

_TERMINAL_COLORS = {
    "white": Fore.WHITE,
    "gray": Fore.LIGHTBLACK_EX,
    "red": Fore.RED,
    "blue": Fore.BLUE,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "cyan": Fore.CYAN,
    "magenta": Fore.MAGENTA,
    "orange": Fore.LIGHTRED_EX,
    "pink": Fore.LIGHTMAGENTA_EX,
    "purple": Fore.MAGENTA,
    "brown": Fore.RED + Style.DIM,
    "lime": Fore.LIGHTGREEN_EX,
    "teal": Fore.LIGHTCYAN_EX,
    "indigo": Fore.LIGHTBLUE_EX,
    "violet": Fore.LIGHTMAGENTA_EX,
    "coral": Fore.LIGHTRED_EX,
    "salmon": Fore.LIGHTRED_EX,
}


def strip_ansi(s: str | None) -> str:
    return ANSI_RE.sub("", s or "")


def paint(color: str, text: str) -> str:
    """Color text like the label says; unknown labels stay uncolored."""
    key = color.lower()
    fore = _TERMINAL_COLORS.get(key) or _TERMINAL_COLORS.get(key.rstrip("0123456789"))
    if fore is None:
        return text
    return f"{fore}{text}{Style.RESET_ALL}"


def ball(color: str) -> str:
    return paint(color, BALL)


def format_nodes(graph: Graph) -> str:
    if graph.is_empty():
        return f"{Style.DIM}(empty){Style.RESET_ALL}"
    return "  ".join(f"{ball(n.color)} {n.color}" for n in graph.nodes)


def format_edges(graph: Graph) -> str:
    """Edges as 1-based node positions, e.g. '1–2, 2–3'. Unknown endpoints show as '?'."""
    pos = {n.id: i for i, n in enumerate(graph.nodes, start=1)}
    parts = [f"{pos.get(e.source, '?')}–{pos.get(e.target, '?')}" for e in graph.edges]
    return ", ".join(parts) if parts else "-"


def render_layout(graph: Graph) -> list[str]:
    """
    Text picture of the node positions: one line per distinct y, one column
    per distinct x, balls only.
    """
    if graph.is_empty():
        return []
    xs = sorted({n.x for n in graph.nodes})
    col = {x: i for i, x in enumerate(xs)}
    rows: dict[float, list[str]] = {}
    for n in graph.nodes:
        cells = rows.setdefault(n.y, [" "] * len(xs))
        c = col[n.x]
        cells[c] = ball(n.color) if cells[c] == " " else paint(n.color, "◉")
    return ["  ".join(cells).rstrip() for _, cells in sorted(rows.items())]


def format_number(res: GraphNumber) -> str:
    if res.number in (0, 1):
        return f"{Style.BRIGHT}{res.number}{Style.RESET_ALL}"
    return f"{Style.BRIGHT}{res.number}{Style.RESET_ALL} = {res.factorization_string}"
