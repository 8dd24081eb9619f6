"""Result models — calculation output contracts."""

from vehicle_tco.models.results import (
    CalculationResult,
    CostBreakdown,
    DepreciationCosts,
    OwnershipCosts,
    ProductComparison,
    RecurringCosts,
)

__all__ = [
    "CalculationResult",
    "CostBreakdown",
    "DepreciationCosts",
    "OwnershipCosts",
    "ProductComparison",
    "RecurringCosts",
]
