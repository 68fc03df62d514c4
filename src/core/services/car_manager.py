"""Vehicle bookkeeping over the passenger car / minibus union."""

from __future__ import annotations

from dataclasses import dataclass, field

from core.domain.models import Minibus, PassengerCar, Vehicle
from core.services.registry import RecordRegistry


@dataclass
class VehicleListing:
    """Vehicles grouped by variant, each group sorted by id."""

    passenger_cars: list[PassengerCar] = field(default_factory=list)
    minibuses: list[Minibus] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.passenger_cars) + len(self.minibuses)


class CarManager:
    def __init__(self) -> None:
        self.vehicles: RecordRegistry[Vehicle] = RecordRegistry("vehicle")

    def __len__(self) -> int:
        return len(self.vehicles)

    def ensure_unique(self, vehicle_id: int) -> None:
        self.vehicles.ensure_unique(vehicle_id)

    def ensure_not_empty(self) -> None:
        self.vehicles.ensure_not_empty()

    def add(self, vehicle: Vehicle) -> Vehicle:
        return self.vehicles.add(vehicle)

    def delete(self, vehicle_id: int) -> Vehicle:
        return self.vehicles.remove(vehicle_id)

    def list_vehicles(self) -> VehicleListing:
        listing = VehicleListing()
        for vehicle in self.vehicles.sorted():
            if isinstance(vehicle, PassengerCar):
                listing.passenger_cars.append(vehicle)
            elif isinstance(vehicle, Minibus):
                listing.minibuses.append(vehicle)
            else:
                raise TypeError(f"unknown vehicle variant: {type(vehicle).__name__}")
        return listing
