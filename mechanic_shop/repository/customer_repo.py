from __future__ import annotations

from ..db import Gateway
from ..models import Customer


def print_all(db: Gateway) -> int:
    return db.execute_query_and_print_result("SELECT * FROM Customer")


def insert(db: Gateway, c: Customer):
    db.execute_update(
        "INSERT INTO Customer VALUES (:id, :fname, :lname, :phone, :address)",
        c.model_dump(),
    )


def print_by_last_name(db: Gateway, lname: str) -> int:
    return db.execute_query_and_print_result(
        "SELECT C.id, C.fname, C.lname FROM Customer C WHERE C.lname = :lname",
        {"lname": lname},
    )


def ids_by_last_name(db: Gateway, lname: str) -> list[int]:
    rows = db.execute_query_and_return_result(
        "SELECT C.id FROM Customer C WHERE C.lname = :lname", {"lname": lname}
    )
    return [int(r[0]) for r in rows]


def print_by_id(db: Gateway, customer_id: int) -> int:
    return db.execute_query_and_print_result(
        "SELECT C.id, C.fname, C.lname FROM Customer C WHERE C.id = :id",
        {"id": customer_id},
    )
