"""Financing configuration — down payment, loan, depreciation and insurance rates."""

from pydantic import BaseModel, ConfigDict, Field


class FinanceConfig(BaseModel):
    """Lease / loan structure and rate assumptions.

    Rates are fractions (0.25 = 25%).  The dealership offers fixed option
    sets for each (see ``vehicle_tco.config.options``); any value in [0, 1]
    is accepted here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    down_payment_rate: float = Field(
        default=0.25, ge=0, le=1.0,
        description="Fraction of the vehicle price paid upfront.",
    )
    depreciation_rate: float = Field(
        default=0.70, ge=0, le=1.0,
        description="Fraction of the vehicle price lost over the lifecycle.",
    )
    insurance_rate: float = Field(
        default=0.07, ge=0, le=1.0,
        description="Annual insurance premium as a fraction of the vehicle price.",
    )
    interest_rate: float = Field(
        default=0.17, ge=0, le=1.0,
        description="Flat annual interest rate on the financed amount (simple, non-compounding).",
    )
    lease_years: int = Field(
        default=5, ge=1,
        description="Financing term in years over which the loan is repaid.",
    )
