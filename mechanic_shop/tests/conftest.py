import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from mechanic_shop.db import Gateway  # noqa: E402


def _schema_statements() -> list[str]:
    schema = Path(_PROJECT_ROOT / "schema.sql").read_text(encoding="utf-8")
    lines = [ln for ln in schema.splitlines() if not ln.strip().startswith("--")]
    return [s.strip() for s in "\n".join(lines).split(";") if s.strip()]


@pytest.fixture()
def apply_schema():
    def _apply(db: Gateway):
        for stmt in _schema_statements():
            db.execute_update(stmt)
    return _apply


@pytest.fixture()
def db(apply_schema):
    # Fresh in-memory database per test
    gw = Gateway.connect("sqlite://")
    apply_schema(gw)
    with gw:
        yield gw


@pytest.fixture()
def answers(monkeypatch):
    """
    Script operator input: answers("John", "Doe", ...) feeds one line per
    input() call and echoes prompt + answer like a terminal would.
    Running out of lines raises EOFError.
    """
    def _feed(*lines: str):
        it = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                line = next(it)
            except StopIteration:
                raise EOFError
            print(f"{prompt}{line}")
            return line

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


@pytest.fixture()
def seed(db):
    """Insert raw rows: seed("Customer", (0, "John", "Doe", "555-1234", "1 Main St"), ...)."""
    def _seed(table: str, *rows: tuple):
        for row in rows:
            names = ", ".join(f":p{i}" for i in range(len(row)))
            db.execute_update(f"INSERT INTO {table} VALUES ({names})", {f"p{i}": v for i, v in enumerate(row)})
    return _seed
