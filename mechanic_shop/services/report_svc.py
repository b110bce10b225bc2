from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ..db import Gateway, Params
from ..domain.validation import integer, prompt_until_valid
from ..logs import LogContext
from ..repository import reporting_repo
from .export_svc import export_report
from .utils import report_failure


def _run_report(db: Gateway, name: str, sql: str, params: Params = None, export_dir: Optional[str] = None):
    log = LogContext(name.upper(), db.operator)
    log.set_payload(dict(params) if params else None)
    try:
        row_count = db.execute_query_and_print_result(sql, params)
        print(f"Total row(s): {row_count}")
        if export_dir:
            path = export_report(db, name, sql, params, export_dir)
            print(f"CSV exported to {path}")
    except (SQLAlchemyError, ValueError, OSError) as e:
        report_failure(e, log)
        return
    log.write()


def list_customers_with_bill_less_than_100(db: Gateway, export_dir: Optional[str] = None):
    _run_report(db, "customers_bill_lt_100", reporting_repo.BILL_LESS_THAN_100, export_dir=export_dir)


def list_customers_with_more_than_20_cars(db: Gateway, export_dir: Optional[str] = None):
    _run_report(db, "customers_gt_20_cars", reporting_repo.MORE_THAN_20_CARS, export_dir=export_dir)


def list_cars_before_1995_with_50000_miles(db: Gateway, export_dir: Optional[str] = None):
    _run_report(db, "cars_before_1995_lt_50000", reporting_repo.CARS_BEFORE_1995_UNDER_50000, export_dir=export_dir)


def list_k_cars_with_the_most_services(db: Gateway, export_dir: Optional[str] = None):
    limit = prompt_until_valid(
        "\tEnter a number to see which car(s) have the highest number of service orders: ",
        integer("Number", minimum=1, message="Number must be greater than zero."),
    )
    _run_report(db, "k_most_serviced_cars", reporting_repo.K_MOST_SERVICED_CARS, {"limit": limit}, export_dir)


def list_customers_in_descending_order_of_their_total_bill(db: Gateway, export_dir: Optional[str] = None):
    _run_report(db, "customers_by_total_bill", reporting_repo.CUSTOMERS_BY_TOTAL_BILL, export_dir=export_dir)
