"""
Tests for domain models and their validation rules
"""

from datetime import date, time

import pytest
from pydantic import ValidationError

from core.domain.models import (
    Driver,
    Minibus,
    Order,
    PassengerCar,
    build_vehicle,
    current_year,
)
from core.errors import InvalidTimeRangeError, check_time_range


def make_order(**overrides):
    data = {
        "id": 5,
        "order_date": date(2024, 6, 15),
        "start_time": time(9, 0),
        "end_time": time(10, 0),
        "driver_id": 1,
        "car_id": 10,
    }
    data.update(overrides)
    return Order(**data)


class TestOrder:
    """Tests for Order"""

    def test_valid_order(self):
        order = make_order()
        assert order.end_time > order.start_time
        assert order.sort_key() == (date(2024, 6, 15), time(9, 0))

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            make_order(end_time=time(8, 0))

    def test_end_equal_to_start_rejected(self):
        with pytest.raises(ValidationError):
            make_order(end_time=time(9, 0))

    @pytest.mark.parametrize("field", ["id", "driver_id", "car_id"])
    def test_ids_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            make_order(**{field: 0})

    def test_order_is_immutable(self):
        order = make_order()
        with pytest.raises(ValidationError):
            order.driver_id = 2


class TestTimeRange:
    """Tests for the shared end-after-start check"""

    def test_accepts_later_end(self):
        check_time_range(time(9, 0), time(9, 1))

    def test_rejects_earlier_end(self):
        with pytest.raises(InvalidTimeRangeError) as exc_info:
            check_time_range(time(9, 0), time(8, 0))
        assert exc_info.value.start == time(9, 0)
        assert "08:00" in str(exc_info.value)

    def test_is_a_value_error(self):
        assert issubclass(InvalidTimeRangeError, ValueError)


class TestDriver:
    """Tests for Driver"""

    def test_names_are_trimmed(self):
        driver = Driver(id=1, first_name="  Ivan ", last_name="Petrov  ")
        assert driver.first_name == "Ivan"
        assert driver.last_name == "Petrov"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_names_rejected(self, name):
        with pytest.raises(ValidationError):
            Driver(id=1, first_name=name, last_name="Petrov")

    def test_long_names_accepted(self):
        assert Driver(id=1, first_name="A" * 200, last_name="Petrov").first_name == "A" * 200

    def test_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            Driver(id=-1, first_name="Ivan", last_name="Petrov")


class TestVehicles:
    """Tests for the PassengerCar / Minibus union"""

    def test_year_below_range_rejected(self):
        with pytest.raises(ValidationError):
            PassengerCar(id=10, brand="Lada", model="Niva", year=1899)

    def test_year_in_future_rejected(self):
        with pytest.raises(ValidationError):
            PassengerCar(id=10, brand="Lada", model="Niva", year=current_year() + 1)

    def test_year_bounds_accepted(self):
        assert PassengerCar(id=10, brand="Lada", model="Niva", year=1900).year == 1900
        assert PassengerCar(id=11, brand="Lada", model="Niva", year=current_year())

    @pytest.mark.parametrize("seats", [0, 51])
    def test_minibus_seats_out_of_range(self, seats):
        with pytest.raises(ValidationError):
            Minibus(id=20, brand="Ford", model="Transit", year=2020, seats=seats)

    def test_passenger_car_defaults_to_no_child_seat(self):
        car = PassengerCar(id=10, brand="Kia", model="Rio", year=2020)
        assert car.child_seat is False
        assert car.kind == "passenger_car"

    def test_build_vehicle_dispatches_on_kind(self):
        car = build_vehicle(
            {"kind": "passenger_car", "id": 1, "brand": "Kia", "model": "Rio", "year": 2020, "child_seat": True}
        )
        bus = build_vehicle(
            {"kind": "minibus", "id": 2, "brand": "Ford", "model": "Transit", "year": 2019, "seats": 18}
        )
        assert isinstance(car, PassengerCar)
        assert car.child_seat is True
        assert isinstance(bus, Minibus)
        assert bus.seats == 18

    def test_build_vehicle_unknown_kind(self):
        with pytest.raises(ValidationError):
            build_vehicle({"kind": "truck", "id": 3, "brand": "MAN", "model": "TGX", "year": 2018})

    def test_long_brand_and_model_accepted(self):
        bus = Minibus(id=20, brand="B" * 300, model="M" * 300, year=2020, seats=8)
        assert len(bus.brand) == 300

    def test_blank_brand_rejected(self):
        with pytest.raises(ValidationError):
            Minibus(id=20, brand=" ", model="Transit", year=2020, seats=8)
