"""Result types — the contract between the engine, narrative, report and API.

Every value is in Rupiah unless the field name says otherwise.  Nothing is
rounded here; rounding happens only when a value is formatted for display.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vehicle_tco.config.configuration import Configuration


# ═══════════════════════════════════════════════════════════════════════════
# Cost breakdown
# ═══════════════════════════════════════════════════════════════════════════

class OwnershipCosts(BaseModel):
    """Purchase and financing costs."""

    model_config = ConfigDict(frozen=True)

    vehicle_price: float
    """Custom price if entered, otherwise the product's base price."""

    down_payment_amount: float
    """vehicle_price × down_payment_rate."""

    loan_amount: float
    """vehicle_price − down_payment_amount."""

    total_interest: float
    """loan_amount × interest_rate × lease_years (simple interest)."""

    total_loan_payment: float
    """loan_amount + total_interest."""

    monthly_payment: float
    """total_loan_payment / (lease_years × 12)."""


class DepreciationCosts(BaseModel):
    """Value lost over the lifecycle (reported, not part of the TCO sum)."""

    model_config = ConfigDict(frozen=True)

    residual_value: float
    """vehicle_price × (1 − depreciation_rate)."""

    depreciation_cost: float
    """vehicle_price − residual_value."""


class RecurringCosts(BaseModel):
    """Costs that accrue every year of the lifecycle."""

    model_config = ConfigDict(frozen=True)

    annual_insurance: float
    total_insurance: float
    total_tax: float
    """Fixed annual tax × lifecycle_years."""

    maintenance_cost_per_km: float
    maintenance_from_km: float
    """total_km × maintenance_cost_per_km."""

    total_maintenance_budget: float
    """Manual annual budget × lifecycle_years."""

    total_maintenance: float
    """max(maintenance_from_km, total_maintenance_budget) — the more conservative estimate."""

    total_driver_salary: float
    total_gasoline_cost: float
    """(total_km / fuel_efficiency) × gasoline_price."""


class CostBreakdown(BaseModel):
    """Full TCO breakdown for one Configuration.

    A pure function of its Configuration: equal inputs always give equal
    breakdowns.
    """

    model_config = ConfigDict(frozen=True)

    ownership: OwnershipCosts
    depreciation: DepreciationCosts
    recurring: RecurringCosts

    total_cost_of_ownership: float
    """down payment + loan payments + insurance + tax + maintenance + driver + fuel."""

    cost_per_year: float
    cost_per_month: float
    cost_per_km: float

    total_km: int
    """annual_km × lifecycle_years."""

    lifecycle_years: int
    """Carried so readers can convert lifecycle totals to monthly figures."""


# ═══════════════════════════════════════════════════════════════════════════
# Comparison & sensitivity
# ═══════════════════════════════════════════════════════════════════════════

class ProductComparison(BaseModel):
    """Headline figures for one product line under otherwise equal inputs."""

    product_type: str
    label: str
    vehicle_price: float
    total_cost_of_ownership: float
    cost_per_month: float
    cost_per_km: float
    monthly_payment: float
    total_maintenance: float


class CalculationResult(BaseModel):
    """Inputs, breakdown and narrative of one calculation request."""

    configuration: Configuration
    breakdown: CostBreakdown
    narrative: str = ""
