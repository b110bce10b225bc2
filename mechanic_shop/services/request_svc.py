from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from ..db import Gateway
from ..domain.validation import bounded_text, free_text, integer, one_of, prompt_until_valid
from ..errors import RecordNotFound
from ..logs import LogContext
from ..models import NAME_MAX, ClosedRequest, ServiceRequest
from ..repository import car_repo, customer_repo, mechanic_repo, request_repo
from .utils import report_failure

ADD_CUSTOMER_HINT = (
    'Before inserting a service request, please use the "AddCustomer" function. '
    "Otherwise, try a different last name."
)
ADD_CAR_HINT = (
    'Before adding a service request for a customer, please use the "AddCar" function. '
    "Otherwise, try a different name."
)


def _pick_customer(db: Gateway, lname: str) -> int:
    row_count = customer_repo.print_by_last_name(db, lname)
    print(f"Total row(s): {row_count}")
    if row_count == 0:
        raise RecordNotFound("Customer does not exist!", ADD_CUSTOMER_HINT)

    ids = customer_repo.ids_by_last_name(db, lname)
    if len(ids) == 1:
        return ids[0]

    customer_id = prompt_until_valid(
        "\tWhich customer wants to insert a service request? Enter customer's id: ",
        one_of(ids, "Please enter one of the listed customer ids.", integer("Customer's id")),
    )
    row_count = customer_repo.print_by_id(db, customer_id)
    print(f"Total row(s): {row_count}")
    return customer_id


def _pick_car(db: Gateway, customer_id: int) -> str:
    row_count = car_repo.print_owned_by(db, customer_id)
    print(f"Total row(s): {row_count}")
    if row_count == 0:
        raise RecordNotFound("No car(s) found under this customer.", ADD_CAR_HINT)

    vins = car_repo.vins_owned_by(db, customer_id)
    if len(vins) == 1:
        return vins[0]
    return prompt_until_valid(
        "Enter the vin for the car that needs service: ",
        one_of(vins, "Please enter one of the listed vins."),
    )


def insert_service_request(db: Gateway):
    """
    Menu 4: find the customer by last name (disambiguating by id), find the
    car they own (disambiguating by VIN), then store the request.
    """
    lname = prompt_until_valid("\tEnter customer's last name: ", bounded_text("Customer's last name", NAME_MAX))

    log = LogContext("INSERT_SERVICE_REQUEST", db.operator)
    try:
        customer_id = _pick_customer(db, lname)
        vin = _pick_car(db, customer_id)

        odometer = prompt_until_valid("\tEnter odometer reading: ", integer("Odometer reading", minimum=0))
        complain = prompt_until_valid("\tEnter complaint: ", free_text)

        sr = ServiceRequest(
            rid=request_repo.count_service_requests(db),
            customer_id=customer_id,
            car_vin=vin,
            odometer=odometer,
            complain=complain,
        )
        log.set_payload(sr.model_dump())
        log.set_entity("SERVICE_REQUEST", str(sr.rid))
        row_count = request_repo.insert_service_request(db, sr)
        print(f"Total row(s): {row_count}")
        print("\tSuccess!")
    except (SQLAlchemyError, ValueError) as e:
        report_failure(e, log)
        return
    log.write()


def close_service_request(db: Gateway):
    """Menu 5: the request number is stored both as the closing id (wid) and as rid."""
    rid = prompt_until_valid("\tEnter service request number: ", integer("Service request number"))
    mid = prompt_until_valid("\tEnter employee ID: ", integer("Employee ID"))
    comment = prompt_until_valid("\tEnter comment: ", free_text)
    bill = prompt_until_valid("\tEnter bill: ", integer("Bill"))

    log = LogContext("CLOSE_SERVICE_REQUEST", db.operator)
    try:
        cr = ClosedRequest(wid=rid, rid=rid, mid=mid, comment=comment, bill=bill)
        log.set_payload(cr.model_dump())
        log.set_entity("CLOSED_REQUEST", str(cr.wid))
        if not request_repo.service_request_exists(db, rid):
            raise RecordNotFound(f"Service request {rid} does not exist!")
        if not mechanic_repo.exists(db, mid):
            raise RecordNotFound(f"Mechanic {mid} does not exist!")

        row_count = request_repo.insert_closed_request(db, cr)
        print(f"Total row(s): {row_count}")
    except (SQLAlchemyError, ValueError) as e:
        report_failure(e, log)
        return
    log.write()
