"""Total cost of ownership — Configuration → CostBreakdown.

Pure arithmetic, no I/O and no hidden state.  ``compute_cached`` memoizes
on the full (frozen, hashable) Configuration; it is an optimization only.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from vehicle_tco.config.configuration import Configuration
from vehicle_tco.engine.ownership import compute_depreciation_costs, compute_ownership_costs
from vehicle_tco.engine.recurring import compute_recurring_costs
from vehicle_tco.models.results import CostBreakdown

logger = logging.getLogger(__name__)


def compute(config: Configuration) -> CostBreakdown:
    """Compute the full cost breakdown for one configuration."""
    vehicle_price = config.effective_vehicle_price
    years = config.operations.lifecycle_years
    total_km = config.operations.annual_km * years

    ownership = compute_ownership_costs(vehicle_price, config.finance)
    depreciation = compute_depreciation_costs(vehicle_price, config.finance)
    recurring = compute_recurring_costs(
        vehicle_price, config.vehicle.product_type, config.finance, config.operations,
    )

    # Depreciation is reported alongside but is not a cash outflow.
    total_cost_of_ownership = (
        ownership.down_payment_amount
        + ownership.total_loan_payment
        + recurring.total_insurance
        + recurring.total_tax
        + recurring.total_maintenance
        + recurring.total_driver_salary
        + recurring.total_gasoline_cost
    )

    # Degenerate horizons give zero per-unit costs instead of failing.
    cost_per_km = total_cost_of_ownership / total_km if total_km > 0 else 0.0
    cost_per_year = total_cost_of_ownership / years if years > 0 else 0.0
    cost_per_month = cost_per_year / 12

    logger.debug(
        "TCO computed: product=%s price=%.0f years=%d tco=%.0f",
        config.vehicle.product_type, vehicle_price, years, total_cost_of_ownership,
    )

    return CostBreakdown(
        ownership=ownership,
        depreciation=depreciation,
        recurring=recurring,
        total_cost_of_ownership=total_cost_of_ownership,
        cost_per_year=cost_per_year,
        cost_per_month=cost_per_month,
        cost_per_km=cost_per_km,
        total_km=total_km,
        lifecycle_years=years,
    )


@lru_cache(maxsize=256)
def compute_cached(config: Configuration) -> CostBreakdown:
    """Memoized :func:`compute`.  Safe because both the input and the
    output are frozen models."""
    return compute(config)
