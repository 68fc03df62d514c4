from core.services.car_manager import CarManager, VehicleListing
from core.services.driver_manager import DriverManager
from core.services.order_manager import OrderManager
from core.services.registry import RecordRegistry

__all__ = [
    "CarManager",
    "DriverManager",
    "OrderManager",
    "RecordRegistry",
    "VehicleListing",
]
