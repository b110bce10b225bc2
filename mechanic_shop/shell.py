"""
shell.py

Interactive menu for the mechanic shop database.

Responsibilities:
- Parse `<dbname> <port> <user>` and open the single database connection.
- Loop over the numbered menu, dispatching choices 1-10 to the operation
  handlers; 11 (or end of input) leaves the loop.
- Release the connection on every exit path.

Usage:
    mechanic-shop <dbname> <port> <user> [--config config.yaml]
"""

from __future__ import annotations

import argparse
import functools
import logging
import sys
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from .config import read_config
from .db import Gateway, get_db_url
from .domain.validation import Checked, prompt_until_valid
from .logs import setup_logging
from .services.car_svc import add_car
from .services.customer_svc import add_customer
from .services.mechanic_svc import add_mechanic
from .services.report_svc import (
    list_cars_before_1995_with_50000_miles,
    list_customers_in_descending_order_of_their_total_bill,
    list_customers_with_bill_less_than_100,
    list_customers_with_more_than_20_cars,
    list_k_cars_with_the_most_services,
)
from .services.request_svc import close_service_request, insert_service_request

logger = logging.getLogger(__name__)

EXIT_CHOICE = 11

MENU = [
    "AddCustomer",
    "AddMechanic",
    "AddCar",
    "InsertServiceRequest",
    "CloseServiceRequest",
    "ListCustomersWithBillLessThan100",
    "ListCustomersWithMoreThan20Cars",
    "ListCarsBefore1995With50000Milles",
    "ListKCarsWithTheMostServices",
    "ListCustomersInDescendingOrderOfTheirTotalBill",
]


def build_handlers(export_dir: Optional[str] = None) -> dict[int, Callable[[Gateway], None]]:
    """Menu number -> handler. Report handlers get the export directory bound in."""
    def report(fn):
        return functools.partial(fn, export_dir=export_dir)

    return {
        1: add_customer,
        2: add_mechanic,
        3: add_car,
        4: insert_service_request,
        5: close_service_request,
        6: report(list_customers_with_bill_less_than_100),
        7: report(list_customers_with_more_than_20_cars),
        8: report(list_cars_before_1995_with_50000_miles),
        9: report(list_k_cars_with_the_most_services),
        10: report(list_customers_in_descending_order_of_their_total_bill),
    }


def print_menu() -> None:
    print("MAIN MENU")
    print("---------")
    for i, name in enumerate(MENU, start=1):
        print(f"{i}. {name}")
    print(f"{EXIT_CHOICE}. < EXIT")


def _parse_choice(raw: str) -> Checked[int]:
    try:
        return Checked(value=int(raw.strip()))
    except ValueError:
        return Checked(error="Your input is invalid!")


def read_choice() -> int:
    # rejections go to stdout, next to the menu
    return prompt_until_valid("Please make your choice: ", _parse_choice, err=sys.stdout)


def run_shell(db: Gateway, handlers: dict[int, Callable[[Gateway], None]]) -> None:
    """Run the menu until the exit choice or end of input."""
    while True:
        print_menu()
        try:
            choice = read_choice()
            if choice == EXIT_CHOICE:
                return
            handler = handlers.get(choice)
            if handler is not None:
                handler(db)
        except EOFError:
            print()
            return


def connect(url, operator: str) -> Optional[Gateway]:
    """Open the session connection; prints the diagnostic and returns None on failure."""
    print("Connecting to database...", end="")
    rendered = url if isinstance(url, str) else url.render_as_string(hide_password=True)
    print(f"Connection URL: {rendered}\n")
    try:
        db = Gateway.connect(url, operator=operator)
    except ModuleNotFoundError as e:
        print(f"Where is your database driver? Install it first ({e.name}).", file=sys.stderr)
        return None
    except SQLAlchemyError as e:
        logger.error("connect failed: %s", e)
        print(f"Error - Unable to Connect to Database: {e}", file=sys.stderr)
        print("Make sure you started postgres on this machine")
        return None
    print("Done")
    return db


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mechanic-shop", description="Mechanic shop database menu")
    parser.add_argument("dbname")
    parser.add_argument("port", type=int)
    parser.add_argument("user")
    parser.add_argument("--config", default=None, help="YAML settings file (default ./config.yaml)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    CLI entrypoint.

    Args:
        argv: arguments without the program name (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 after a normal session, 1 when the database is unreachable.
    """
    args = build_parser().parse_args(argv)
    cfg = read_config(args.config)
    setup_logging(cfg)

    db = connect(get_db_url(args.dbname, args.port, args.user, cfg), cfg["operator"])
    if db is None:
        return 1

    try:
        run_shell(db, build_handlers(cfg.get("export_dir")))
    finally:
        print("Disconnecting from database...", end="")
        db.cleanup()
        print("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
