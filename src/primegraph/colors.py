# -----------------------------------------------------------------------------
#  colors.py
#  Bidirectional color label <-> prime registry
# -----------------------------------------------------------------------------

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from contextvars import ContextVar

from primegraph.primes import is_prime
from primegraph.runtime import CFG

# white and gray both stand for the sentinel 1; prime 1 maps back to white
BASE_TABLE: tuple[tuple[str, int], ...] = (
    ("white", 1),
    ("gray", 1),
    ("red", 2),
    ("blue", 3),
    ("green", 5),
    ("yellow", 7),
    ("cyan", 11),
    ("magenta", 13),
)
ALIASES = frozenset({"gray"})

EXTENDED_PALETTE: tuple[str, ...] = (
    "orange", "pink", "purple", "brown", "lime",
    "teal", "indigo", "violet", "coral", "salmon",
)

COLOR_VALUES: dict[str, str] = {
    "white": "#e0e0e0",
    "gray": "#e0e0e0",
    "red": "#ff4444",
    "blue": "#4444ff",
    "green": "#44ff44",
    "yellow": "#ffff44",
    "cyan": "#44ffff",
    "magenta": "#ff44ff",
    "orange": "#ff8844",
    "pink": "#ff88ff",
    "purple": "#8844ff",
    "brown": "#884444",
    "lime": "#88ff44",
    "teal": "#44ff88",
    "indigo": "#4444ff",
    "violet": "#ff44ff",
    "coral": "#ff8844",
    "salmon": "#ff8888",
}


class ColorRegistry:
    """
    Color labels ↔ primes.

    Seeded with BASE_TABLE. Primes without a color get the next slot of the
    extended palette on first use; the allocation counter only moves forward.
    Once the palette is exhausted it wraps around and the labels get the cycle
    number appended (orange2, pink2, ...), so no label is ever bound to two primes.

    Colors for large primes depend on the order in which they are first seen;
    use preallocate() to fix that order.
    """

    def __init__(self, palette: Sequence[str] | None = None):
        self._palette: tuple[str, ...] = tuple(
            c.strip().lower() for c in (EXTENDED_PALETTE if palette is None else palette)
        )
        if not self._palette:
            raise ValueError("extended palette must not be empty")
        self._color_to_prime: dict[str, int] = {}
        self._prime_to_color: dict[int, str] = {}
        self._next_slot = 0
        self._lock = threading.Lock()

        for color, prime in BASE_TABLE:
            self._color_to_prime[color] = prime
            self._prime_to_color.setdefault(prime, color)

    @classmethod
    def from_settings(cls) -> ColorRegistry:
        return cls(palette=CFG("COLORS.EXTENDED_PALETTE", None))

    # --- lookups -------------------------------------------------------------

    def prime_for_color(self, color: str) -> int | None:
        return self._color_to_prime.get(str(color).strip().lower())

    def color_for_prime(self, prime: int) -> str:
        prime = int(prime)
        color = self._prime_to_color.get(prime)
        if color is not None:
            return color
        with self._lock:
            # another thread may have allocated it meanwhile
            color = self._prime_to_color.get(prime)
            if color is None:
                color = self._allocate(prime)
        return color

    def _allocate(self, prime: int) -> str:
        while True:
            slot = self._next_slot
            self._next_slot += 1
            base = self._palette[slot % len(self._palette)]
            cycle = slot // len(self._palette)
            color = base if cycle == 0 else f"{base}{cycle + 1}"
            # a label registered explicitly earlier keeps its prime
            if color not in self._color_to_prime:
                break
        self._color_to_prime[color] = prime
        self._prime_to_color[prime] = color
        return color

    def register(self, color: str, prime: int) -> None:
        """Bind a new label to a prime; both must be unbound (re-binding the same pair is a no-op)."""
        color = str(color).strip().lower()
        prime = int(prime)
        if not color:
            raise ValueError("color label must not be empty")
        if prime != 1 and not is_prime(prime):
            raise ValueError(f"{prime} is not a prime")
        with self._lock:
            if self._color_to_prime.get(color) == prime and self._prime_to_color.get(prime) == color:
                return
            if color in self._color_to_prime:
                raise ValueError(f"color {color!r} is already bound to {self._color_to_prime[color]}")
            if prime in self._prime_to_color:
                raise ValueError(f"prime {prime} is already bound to {self._prime_to_color[prime]!r}")
            self._color_to_prime[color] = prime
            self._prime_to_color[prime] = color

    def preallocate(self, primes: Iterable[int]) -> list[str]:
        return [self.color_for_prime(p) for p in primes]

    def available_colors(self) -> list[str]:
        return [c for c in self._color_to_prime if c not in ALIASES]

    def all_colors(self) -> list[tuple[str, int]]:
        return [(c, p) for c, p in self._color_to_prime.items() if c not in ALIASES]

    def color_value(self, color: str) -> str:
        key = str(color).strip().lower()
        if key in COLOR_VALUES:
            return COLOR_VALUES[key]
        base = key.rstrip("0123456789")
        if key in self._color_to_prime and base in COLOR_VALUES:
            return COLOR_VALUES[base]
        return color

    def __contains__(self, color: object) -> bool:
        return isinstance(color, str) and self.prime_for_color(color) is not None

    def __len__(self) -> int:
        return len(self.available_colors())


# --- Context management ---

_current_registry: ContextVar[ColorRegistry | None] = ContextVar("primegraph_registry", default=None)


def current_registry() -> ColorRegistry:
    reg = _current_registry.get()
    if reg is None:
        reg = ColorRegistry.from_settings()
        _current_registry.set(reg)
    return reg


def use_registry(registry: ColorRegistry | None) -> None:
    """Install a registry for the current context (None → rebuilt lazily from settings)."""
    _current_registry.set(registry)
