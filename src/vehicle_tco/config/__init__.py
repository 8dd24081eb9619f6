"""Configuration models — all calculation inputs and their option sets."""

from vehicle_tco.config.vehicle import VehicleConfig
from vehicle_tco.config.finance import FinanceConfig
from vehicle_tco.config.operations import OperationsConfig
from vehicle_tco.config.configuration import Configuration

__all__ = [
    "VehicleConfig",
    "FinanceConfig",
    "OperationsConfig",
    "Configuration",
]
