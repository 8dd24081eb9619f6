"""Shared test fixtures — dealership configurations used across the suite."""

from __future__ import annotations

import pytest

from vehicle_tco.config import Configuration, FinanceConfig, OperationsConfig, VehicleConfig


@pytest.fixture
def elf_config() -> Configuration:
    """The reference ELF case: all dealership defaults, no driver salary."""
    return Configuration(
        vehicle=VehicleConfig(product_type="elf"),
        finance=FinanceConfig(
            down_payment_rate=0.25,
            depreciation_rate=0.70,
            insurance_rate=0.07,
            interest_rate=0.17,
            lease_years=5,
        ),
        operations=OperationsConfig(
            lifecycle_years=5,
            annual_km=60_000,
            monthly_driver_salary=0,
            gasoline_price_per_liter=6_800,
            fuel_efficiency_km_per_liter=8,
            annual_maintenance_budget=10_000_000,
        ),
    )


@pytest.fixture
def giga_config() -> Configuration:
    """A GIGA on a 4-year lease, 6-year lifecycle, with a paid driver."""
    return Configuration(
        vehicle=VehicleConfig(product_type="giga", application="dump-truck"),
        finance=FinanceConfig(
            down_payment_rate=0.30,
            depreciation_rate=0.60,
            insurance_rate=0.05,
            interest_rate=0.21,
            lease_years=4,
        ),
        operations=OperationsConfig(
            lifecycle_years=6,
            annual_km=80_000,
            monthly_driver_salary=5_000_000,
            gasoline_price_per_liter=6_800,
            fuel_efficiency_km_per_liter=5,
            annual_maintenance_budget=10_000_000,
        ),
    )


@pytest.fixture
def zero_lifecycle_config() -> Configuration:
    """Degenerate horizon: nothing accrues, per-unit costs must be zero."""
    return Configuration(operations=OperationsConfig(lifecycle_years=0))
