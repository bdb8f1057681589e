# src/primegraph/dataio.py
from __future__ import annotations

from importlib.resources import as_file
from importlib.resources import files as pkg_files
from pathlib import Path

from primegraph.utility import UserInputError
from primegraph.workspace import workspace_dir

try:
    import tomllib as _toml  # py311+
except Exception:  # pragma: no cover
    import tomli as _toml  # type: ignore

_REQUIRED = ("id", "operation", "slot1", "slot2")


def data_path(rel: str) -> Path:
    """
    Resolve a data file path with override semantics:

      1) <Workspace>/data/<rel>  (if present)
      2) Packaged resource: primegraph/data/<rel>
    """
    rel = rel.lstrip("/\\")
    p = workspace_dir() / "data" / rel
    if p.exists():
        return p

    ref = pkg_files("primegraph") / "data" / rel
    # materialize to a real path (needed for zip/egg resources)
    with as_file(ref) as real:
        return Path(real)


def load_example_rows() -> list[dict]:
    """
    Raw rows of examples.toml:

      [[examples]]
      id        = "example-1"
      title     = "..."                 # optional
      description = "..."               # optional
      operation = "dagger"
      slot1     = "white"
      slot2     = "white"
      expected  = "red"                 # optional

    Rows missing a required key are skipped.
    """
    p = data_path("examples.toml")
    try:
        with p.open("rb") as f:
            doc = _toml.load(f)
    except FileNotFoundError:
        return []
    except _toml.TOMLDecodeError as e:
        raise UserInputError(f"reading {p.name}: {e}.") from None

    raw = doc.get("examples")
    if not isinstance(raw, list):
        return []

    rows: list[dict] = []
    for it in raw:
        if not isinstance(it, dict):
            continue
        if not all(isinstance(it.get(k), str) for k in _REQUIRED):
            continue
        rows.append({
            "id": it["id"],
            "title": it.get("title") or it["id"],
            "description": it.get("description") or "",
            "operation": it["operation"],
            "slot1": it["slot1"],
            "slot2": it["slot2"],
            "expected": it.get("expected"),
        })
    return rows
