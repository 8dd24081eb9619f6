"""Engine — deterministic TCO computation logic."""

from vehicle_tco.engine.ownership import compute_ownership_costs, compute_depreciation_costs
from vehicle_tco.engine.recurring import compute_recurring_costs
from vehicle_tco.engine.tco import compute, compute_cached
from vehicle_tco.engine.comparison import compare_products
from vehicle_tco.engine.sensitivity import run_option_sensitivity

__all__ = [
    "compute",
    "compute_cached",
    "compute_ownership_costs",
    "compute_depreciation_costs",
    "compute_recurring_costs",
    "compare_products",
    "run_option_sensitivity",
]
