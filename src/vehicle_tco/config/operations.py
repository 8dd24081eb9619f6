"""Operational configuration — lifecycle, mileage, driver, fuel and maintenance."""

from pydantic import BaseModel, ConfigDict, Field

from vehicle_tco.config.options import (
    DEFAULT_ANNUAL_MAINTENANCE_BUDGET,
    DEFAULT_FUEL_EFFICIENCY,
    DEFAULT_GASOLINE_PRICE,
)


class OperationsConfig(BaseModel):
    """How the vehicle is run over its lifecycle."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    lifecycle_years: int = Field(
        default=5, ge=0,
        description="Planning horizon in years. 0 yields zero per-unit costs.",
    )
    annual_km: int = Field(default=60_000, ge=0, description="Distance driven per year (km)")
    monthly_driver_salary: float = Field(default=0.0, ge=0, description="Driver salary per month (Rp)")
    gasoline_price_per_liter: float = Field(
        default=float(DEFAULT_GASOLINE_PRICE), ge=0, description="Fuel price (Rp/liter)",
    )
    fuel_efficiency_km_per_liter: float = Field(
        default=float(DEFAULT_FUEL_EFFICIENCY), gt=0,
        description="Fuel efficiency (km/liter). Must be positive.",
    )
    annual_maintenance_budget: float = Field(
        default=float(DEFAULT_ANNUAL_MAINTENANCE_BUDGET), ge=0,
        description="Manual maintenance budget per year (Rp). "
                    "The engine reports the higher of this and the km-based estimate.",
    )
