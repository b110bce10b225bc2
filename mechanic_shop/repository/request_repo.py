from __future__ import annotations

from ..db import Gateway
from ..models import ClosedRequest, ServiceRequest


def count_service_requests(db: Gateway) -> int:
    rows = db.execute_query_and_return_result("SELECT COUNT(*) FROM Service_Request")
    return int(rows[0][0]) if rows else 0


def service_request_exists(db: Gateway, rid: int) -> bool:
    return db.execute_query("SELECT rid FROM Service_Request WHERE rid = :rid", {"rid": rid}) == 1


def insert_service_request(db: Gateway, sr: ServiceRequest) -> int:
    """Insert with today's date and print the stored row. Returns the printed row count."""
    return db.execute_query_and_print_result(
        "INSERT INTO Service_Request VALUES (:rid, :customer_id, :car_vin, CURRENT_DATE, :odometer, :complain) RETURNING *",
        sr.model_dump(),
    )


def insert_closed_request(db: Gateway, cr: ClosedRequest) -> int:
    """Insert with today's date and print the stored row. Returns the printed row count."""
    return db.execute_query_and_print_result(
        "INSERT INTO Closed_Request VALUES (:wid, :rid, :mid, CURRENT_DATE, :comment, :bill) RETURNING *",
        cr.model_dump(),
    )
