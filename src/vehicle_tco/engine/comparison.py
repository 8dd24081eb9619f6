"""Product comparison — the same inputs priced across every product line."""

from __future__ import annotations

from vehicle_tco.config.configuration import Configuration
from vehicle_tco.config.options import PRODUCT_TYPES
from vehicle_tco.engine.tco import compute
from vehicle_tco.models.results import ProductComparison


def compare_products(config: Configuration) -> list[ProductComparison]:
    """Re-run the engine once per product type, cheapest TCO first.

    A custom vehicle price is dropped so that every product is priced at
    its own base price; all other inputs are kept.
    """
    rows: list[ProductComparison] = []
    for product in PRODUCT_TYPES:
        vehicle = config.vehicle.model_copy(
            update={"product_type": product.value, "vehicle_price": None},
        )
        breakdown = compute(config.model_copy(update={"vehicle": vehicle}))
        rows.append(ProductComparison(
            product_type=product.value,
            label=product.label,
            vehicle_price=breakdown.ownership.vehicle_price,
            total_cost_of_ownership=breakdown.total_cost_of_ownership,
            cost_per_month=breakdown.cost_per_month,
            cost_per_km=breakdown.cost_per_km,
            monthly_payment=breakdown.ownership.monthly_payment,
            total_maintenance=breakdown.recurring.total_maintenance,
        ))

    rows.sort(key=lambda r: r.total_cost_of_ownership)
    return rows
