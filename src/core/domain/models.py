"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Field constraints (positive ids, non-empty names, year and seat bounds) live
  next to the data they guard, so a record that exists is a valid record.
- The vehicle variants form a discriminated union on `kind`; callers dispatch
  on the concrete class instead of relying on overridden methods.

Note:
- These models describe *what* is stored, not *how* it is entered. Prompting
  and re-prompting belong to the CLI.
"""

from __future__ import annotations

from datetime import date, time
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator
from pydantic.config import ConfigDict

from core.errors import check_time_range

MIN_MANUFACTURE_YEAR = 1900
MIN_MINIBUS_SEATS = 1
MAX_MINIBUS_SEATS = 50


def current_year() -> int:
    return date.today().year


class Order(BaseModel):
    """A rental order.

    Orders are immutable once accepted. `driver_id` and `car_id` are raw
    references: nothing checks that the driver or the vehicle exists.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Order number, unique among orders.")
    order_date: date = Field(..., description="Calendar day of the rental.")
    start_time: time = Field(..., description="Start of the rental (24h).")
    end_time: time = Field(..., description="End of the rental, after the start.")
    driver_id: int = Field(..., gt=0, description="Id of the assigned driver.")
    car_id: int = Field(..., gt=0, description="Id of the rented vehicle.")

    @model_validator(mode="after")
    def end_after_start(self) -> "Order":
        check_time_range(self.start_time, self.end_time)
        return self

    def sort_key(self) -> tuple[date, time]:
        return (self.order_date, self.start_time)


class Driver(BaseModel):
    """A driver. Names are stored trimmed; edits produce a new validated copy."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: int = Field(..., gt=0, description="Driver id, unique among drivers.")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)


class _VehicleFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: int = Field(..., gt=0, description="Vehicle number, unique among vehicles.")
    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int = Field(..., description="Manufacture year, 1900..current year.")

    @field_validator("year")
    @classmethod
    def year_in_range(cls, value: int) -> int:
        upper = current_year()
        if not MIN_MANUFACTURE_YEAR <= value <= upper:
            raise ValueError(
                f"year must be between {MIN_MANUFACTURE_YEAR} and {upper}"
            )
        return value


class PassengerCar(_VehicleFields):
    kind: Literal["passenger_car"] = "passenger_car"
    child_seat: bool = Field(
        default=False,
        description="Whether the car can carry children (child seat available).",
    )


class Minibus(_VehicleFields):
    kind: Literal["minibus"] = "minibus"
    seats: int = Field(..., ge=MIN_MINIBUS_SEATS, le=MAX_MINIBUS_SEATS)


Vehicle = Annotated[Union[PassengerCar, Minibus], Field(discriminator="kind")]


_VEHICLE_ADAPTER: TypeAdapter[Vehicle] = TypeAdapter(Vehicle)


def build_vehicle(data: dict[str, Any]) -> Vehicle:
    """Validate `data` into the variant named by its `kind` key."""

    return _VEHICLE_ADAPTER.validate_python(data)
