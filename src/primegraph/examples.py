# -----------------------------------------------------------------------------
#  examples.py
#  The demonstration table: two operands, an operation, an expected result
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

from primegraph.colors import ColorRegistry, current_registry
from primegraph.dataio import load_example_rows
from primegraph.encode import graph_to_number
from primegraph.graph import Graph, parse_graph
from primegraph.operations import apply_operation, resolve_operation


@dataclass
class Example:
    id: str
    title: str
    description: str
    operation: str
    slot1: Graph
    slot2: Graph
    expected: Graph | None = None


@dataclass
class ExampleRun:
    example: Example
    result: Graph
    ok: bool | None     # None when the example has no expected result


def load_examples() -> list[Example]:
    """Build the examples with freshly generated graphs (no ids shared between calls)."""
    out = []
    for row in load_example_rows():
        expected = row["expected"]
        out.append(Example(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            operation=resolve_operation(row["operation"]),
            slot1=parse_graph(row["slot1"]),
            slot2=parse_graph(row["slot2"]),
            expected=parse_graph(expected) if expected is not None else None,
        ))
    return out


def find_example(key: str, examples: list[Example] | None = None) -> Example | None:
    """Look up by id ('example-3') or by 1-based position ('3')."""
    examples = load_examples() if examples is None else examples
    key = (key or "").strip().lower()
    for ex in examples:
        if ex.id.lower() == key:
            return ex
    if key.isdigit() and 1 <= int(key) <= len(examples):
        return examples[int(key) - 1]
    return None


def run_example(example: Example, registry: ColorRegistry | None = None) -> ExampleRun:
    """Apply the example's operation; `ok` compares encoded numbers only."""
    reg = registry or current_registry()
    result = apply_operation(example.operation, example.slot1, example.slot2, reg)
    ok = None
    if example.expected is not None:
        ok = graph_to_number(result, reg).number == graph_to_number(example.expected, reg).number
    return ExampleRun(example=example, result=result, ok=ok)
