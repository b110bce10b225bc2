from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from ..db import Gateway
from ..domain.validation import bounded_text, integer, prompt_until_valid
from ..logs import LogContext
from ..models import MAKE_MAX, MODEL_MAX, VIN_MAX, Car
from ..repository import car_repo
from .utils import report_failure


def add_car(db: Gateway):
    """Menu 3: the VIN is the key, so no id is generated."""
    vin = prompt_until_valid("\tEnter car's vin: ", bounded_text("Car's vin", VIN_MAX))
    make = prompt_until_valid("\tEnter car's make: ", bounded_text("Car's make", MAKE_MAX))
    model = prompt_until_valid("\tEnter car's model: ", bounded_text("Car's model", MODEL_MAX))
    year = prompt_until_valid("\tEnter car's year: ", integer("Car's year"))

    log = LogContext("ADD_CAR", db.operator)
    try:
        car = Car(vin=vin, make=make, model=model, year=year)
        log.set_payload(car.model_dump())
        log.set_entity("CAR", car.vin)
        car_repo.insert(db, car)

        row_count = car_repo.print_all(db)
        print(f"total row(s): {row_count}")
        print("\tSuccess!")
    except (SQLAlchemyError, ValueError) as e:
        report_failure(e, log)
        return
    log.write()
