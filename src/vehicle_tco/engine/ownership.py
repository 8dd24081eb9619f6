"""Ownership costs — down payment, flat-interest loan, and depreciation.

Interest is simple and non-compounding: the financed amount accrues
``interest_rate`` per year for every year of the lease.
"""

from __future__ import annotations

from vehicle_tco.config.finance import FinanceConfig
from vehicle_tco.models.results import DepreciationCosts, OwnershipCosts


def compute_ownership_costs(vehicle_price: float, finance: FinanceConfig) -> OwnershipCosts:
    """Split the vehicle price into down payment and a flat-interest loan."""
    down_payment_amount = vehicle_price * finance.down_payment_rate
    loan_amount = vehicle_price - down_payment_amount

    total_interest = loan_amount * finance.interest_rate * finance.lease_years
    total_loan_payment = loan_amount + total_interest

    # lease_years >= 1 is enforced by FinanceConfig
    monthly_payment = total_loan_payment / (finance.lease_years * 12)

    return OwnershipCosts(
        vehicle_price=vehicle_price,
        down_payment_amount=down_payment_amount,
        loan_amount=loan_amount,
        total_interest=total_interest,
        total_loan_payment=total_loan_payment,
        monthly_payment=monthly_payment,
    )


def compute_depreciation_costs(vehicle_price: float, finance: FinanceConfig) -> DepreciationCosts:
    """Residual value after depreciation, and the value lost. Reported only, not part of TCO."""
    residual_value = vehicle_price * (1.0 - finance.depreciation_rate)
    return DepreciationCosts(
        residual_value=residual_value,
        depreciation_cost=vehicle_price - residual_value,
    )
