from __future__ import annotations

from ..db import Gateway
from ..models import Car

# Cars reached through the Owns association for one customer
OWNED_BY_SQL = "SELECT * FROM Car WHERE vin IN (SELECT car_vin FROM Owns WHERE customer_id = :customer_id)"


def print_all(db: Gateway) -> int:
    return db.execute_query_and_print_result("SELECT * FROM Car")


def insert(db: Gateway, c: Car):
    db.execute_update(
        "INSERT INTO Car VALUES (:vin, :make, :model, :year)",
        c.model_dump(),
    )


def print_owned_by(db: Gateway, customer_id: int) -> int:
    return db.execute_query_and_print_result(OWNED_BY_SQL, {"customer_id": customer_id})


def vins_owned_by(db: Gateway, customer_id: int) -> list[str]:
    rows = db.execute_query_and_return_result(OWNED_BY_SQL, {"customer_id": customer_id})
    return [r[0] for r in rows]
