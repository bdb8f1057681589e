from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("primegraph")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .colors import ColorRegistry, current_registry, use_registry
from .config import load_settings
from .decode import number_to_graph
from .encode import GraphNumber, graph_to_number
from .factorization import PrimeFactor, factorize, format_factorization, reconstruct_number
from .graph import Edge, Graph, Node, parse_graph
from .layout import connect_in_grid
from .operations import apply_operation, dagger, gcd, lcm, star
from .runtime import APPLY, CFG

__all__ = [
    "APPLY",
    "CFG",
    "ColorRegistry",
    "Edge",
    "Graph",
    "GraphNumber",
    "Node",
    "PrimeFactor",
    "__version__",
    "apply_operation",
    "connect_in_grid",
    "current_registry",
    "dagger",
    "factorize",
    "format_factorization",
    "gcd",
    "graph_to_number",
    "lcm",
    "load_settings",
    "number_to_graph",
    "parse_graph",
    "reconstruct_number",
    "star",
    "use_registry",
]
