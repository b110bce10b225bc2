from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from ..db import Gateway
from ..domain.validation import bounded_text, prompt_until_valid
from ..logs import LogContext
from ..models import ADDRESS_MAX, NAME_MAX, PHONE_MAX, Customer
from ..repository import customer_repo
from .utils import report_failure


def add_customer(db: Gateway):
    """Menu 1: new Customer row whose id is the current row count."""
    fname = prompt_until_valid("\tEnter customer's first name: ", bounded_text("Customer's first name", NAME_MAX))
    lname = prompt_until_valid("\tEnter customer's last name: ", bounded_text("Customer's last name", NAME_MAX))
    phone = prompt_until_valid("\tEnter customer's phone number: ", bounded_text("Customer's phone number", PHONE_MAX))
    address = prompt_until_valid("\tEnter customer's address: ", bounded_text("Customer's address", ADDRESS_MAX))

    log = LogContext("ADD_CUSTOMER", db.operator)
    try:
        row_count = customer_repo.print_all(db)
        print(f"total row(s): {row_count}")

        customer = Customer(id=row_count, fname=fname, lname=lname, phone=phone, address=address)
        log.set_payload(customer.model_dump())
        customer_repo.insert(db, customer)
        log.set_entity("CUSTOMER", str(customer.id))

        row_count = customer_repo.print_all(db)
        print(f"total row(s): {row_count}")
        print("\tSuccess!")
    except (SQLAlchemyError, ValueError) as e:
        report_failure(e, log)
        return
    log.write()
