"""Recurring costs over the lifecycle — insurance, tax, maintenance, driver, fuel."""

from __future__ import annotations

from vehicle_tco.config.finance import FinanceConfig
from vehicle_tco.config.operations import OperationsConfig
from vehicle_tco.config.options import ANNUAL_TAX, get_product
from vehicle_tco.models.results import RecurringCosts


def compute_recurring_costs(
    vehicle_price: float,
    product_type: str,
    finance: FinanceConfig,
    operations: OperationsConfig,
) -> RecurringCosts:
    """Compute every lifecycle-total running cost.

    Maintenance takes the higher of the km-based estimate and the manual
    budget, so a low budget entry cannot understate the cost.
    """
    years = operations.lifecycle_years
    total_km = operations.annual_km * years

    annual_insurance = vehicle_price * finance.insurance_rate
    total_insurance = annual_insurance * years

    total_tax = ANNUAL_TAX * years

    maintenance_cost_per_km = get_product(product_type).maintenance_cost_per_km
    maintenance_from_km = total_km * maintenance_cost_per_km
    total_maintenance_budget = operations.annual_maintenance_budget * years
    total_maintenance = max(maintenance_from_km, total_maintenance_budget)

    total_driver_salary = operations.monthly_driver_salary * 12 * years

    # fuel_efficiency_km_per_liter > 0 is enforced by OperationsConfig
    liters = total_km / operations.fuel_efficiency_km_per_liter
    total_gasoline_cost = liters * operations.gasoline_price_per_liter

    return RecurringCosts(
        annual_insurance=annual_insurance,
        total_insurance=total_insurance,
        total_tax=float(total_tax),
        maintenance_cost_per_km=float(maintenance_cost_per_km),
        maintenance_from_km=float(maintenance_from_km),
        total_maintenance_budget=total_maintenance_budget,
        total_maintenance=float(total_maintenance),
        total_driver_salary=total_driver_salary,
        total_gasoline_cost=total_gasoline_cost,
    )
