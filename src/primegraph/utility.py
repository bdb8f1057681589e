# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import shutil
import sys

from colorama import Fore, Style

from primegraph.runtime import current as _rt_current


class UserInputError(Exception):
    pass


def warn(msg: str) -> None:
    """One-line warning on stderr."""
    print(f"{Fore.YELLOW}[warn]{Style.RESET_ALL} {msg}", file=sys.stderr)


def debug(msg: str) -> None:
    """One-line trace on stderr, only when the runtime is in debug mode."""
    if _rt_current().debug:
        print(f"{Style.DIM}[debug]{Style.RESET_ALL} {msg}", file=sys.stderr)


def parse_int(text: str) -> int:
    """
    Parse a non-negative integer typed by a user.
    Accepts digit grouping with '_' or ',' (e.g. 1_000, 1,000).
    """
    s = (text or "").strip().replace("_", "").replace(",", "")
    if s.startswith("+"):
        s = s[1:]
    if not s.isdigit():
        raise UserInputError(f"Invalid input: '{text}' is not a non-negative integer.")
    return int(s)


def get_terminal_width(default=80):
    """
    Return the terminal's character width if detected, else the default
    value (80 by default).
    """
    try:
        return shutil.get_terminal_size().columns
    except (OSError, ValueError):
        return default


def typename(v: object) -> str:
    return type(v).__name__


def flatten_dotted(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in (d or {}).items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            out.update(flatten_dotted(v, key))
        else:
            out[key] = v
    return out
