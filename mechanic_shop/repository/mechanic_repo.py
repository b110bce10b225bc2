from __future__ import annotations

from ..db import Gateway
from ..models import Mechanic


def print_all(db: Gateway) -> int:
    return db.execute_query_and_print_result("SELECT * FROM Mechanic")


def insert(db: Gateway, m: Mechanic):
    db.execute_update(
        "INSERT INTO Mechanic VALUES (:id, :fname, :lname, :experience)",
        m.model_dump(),
    )


def exists(db: Gateway, mechanic_id: int) -> bool:
    return db.execute_query("SELECT id FROM Mechanic WHERE id = :id", {"id": mechanic_id}) == 1
