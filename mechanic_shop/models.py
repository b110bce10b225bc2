from __future__ import annotations

from pydantic import BaseModel, Field

NAME_MAX = 32
PHONE_MAX = 13
ADDRESS_MAX = 256
VIN_MAX = 16
MAKE_MAX = 32
MODEL_MAX = 32


class Customer(BaseModel):
    id: int
    fname: str = Field(..., min_length=1, max_length=NAME_MAX)
    lname: str = Field(..., min_length=1, max_length=NAME_MAX)
    phone: str = Field(..., min_length=1, max_length=PHONE_MAX)
    address: str = Field(..., min_length=1, max_length=ADDRESS_MAX)


class Mechanic(BaseModel):
    id: int
    fname: str = Field(..., min_length=1, max_length=NAME_MAX)
    lname: str = Field(..., min_length=1, max_length=NAME_MAX)
    experience: int


class Car(BaseModel):
    vin: str = Field(..., min_length=1, max_length=VIN_MAX)
    make: str = Field(..., min_length=1, max_length=MAKE_MAX)
    model: str = Field(..., min_length=1, max_length=MODEL_MAX)
    year: int


class ServiceRequest(BaseModel):
    rid: int
    customer_id: int
    car_vin: str = Field(..., min_length=1, max_length=VIN_MAX)
    odometer: int = Field(..., ge=0)
    complain: str = ""


class ClosedRequest(BaseModel):
    # wid doubles as the closed request's own id and equals rid
    wid: int
    rid: int
    mid: int
    comment: str = ""
    bill: int
