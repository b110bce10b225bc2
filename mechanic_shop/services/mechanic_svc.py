from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from ..db import Gateway
from ..domain.validation import bounded_text, integer, prompt_until_valid
from ..logs import LogContext
from ..models import NAME_MAX, Mechanic
from ..repository import mechanic_repo
from .utils import report_failure


def add_mechanic(db: Gateway):
    """Menu 2: new Mechanic row whose id is the current row count."""
    fname = prompt_until_valid("\tEnter mechanic's first name: ", bounded_text("Mechanic's first name", NAME_MAX))
    lname = prompt_until_valid("\tEnter mechanic's last name: ", bounded_text("Mechanic's last name", NAME_MAX))
    experience = prompt_until_valid("\tEnter mechanic's years of experience: ", integer("Years of experience"))

    log = LogContext("ADD_MECHANIC", db.operator)
    try:
        row_count = mechanic_repo.print_all(db)
        print(f"total row(s): {row_count}")

        mechanic = Mechanic(id=row_count, fname=fname, lname=lname, experience=experience)
        log.set_payload(mechanic.model_dump())
        mechanic_repo.insert(db, mechanic)
        log.set_entity("MECHANIC", str(mechanic.id))

        row_count = mechanic_repo.print_all(db)
        print(f"total row(s): {row_count}")
        print("\tSuccess!")
    except (SQLAlchemyError, ValueError) as e:
        report_failure(e, log)
        return
    log.write()
