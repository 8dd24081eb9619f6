"""Fixed option sets and constants offered to dealership staff.

These lists are the effective wire format of the calculator: UIs render
them as selection lists and the API publishes them verbatim via
``GET /options``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


ProductType = Literal["elf", "traga", "giga"]
RegistrationType = Literal["on-road", "off-road"]
PlateColor = Literal["yellow", "white"]
Application = Literal["bus", "pickup", "dump-truck", "box-truck", "tanker", "trailer"]


@dataclass(frozen=True)
class Option:
    """One entry of a selection list."""

    value: str | int | float
    label: str


@dataclass(frozen=True)
class ProductSpec:
    """One vehicle product line."""

    value: str
    label: str
    base_price: float
    """List price (Rp) used when no custom vehicle price is entered."""

    maintenance_cost_per_km: float
    """Km-driven maintenance estimate (Rp/km)."""


PRODUCT_TYPES: tuple[ProductSpec, ...] = (
    ProductSpec("elf", "ELF Type", 350_000_000, 1_000),
    ProductSpec("traga", "TRAGA Type", 450_000_000, 1_200),
    ProductSpec("giga", "GIGA Type", 750_000_000, 1_500),
)

REGISTRATION_TYPES: tuple[Option, ...] = (
    Option("on-road", "On-road"),
    Option("off-road", "Off-road"),
)

PLATE_COLORS: tuple[Option, ...] = (
    Option("yellow", "Yellow Plate"),
    Option("white", "White Plate"),
)

APPLICATIONS: tuple[Option, ...] = (
    Option("bus", "Bus"),
    Option("pickup", "Pickup"),
    Option("dump-truck", "Dump Truck"),
    Option("box-truck", "Box Truck"),
    Option("tanker", "Tanker"),
    Option("trailer", "Trailer"),
)

LIFECYCLE_OPTIONS: tuple[Option, ...] = (
    Option(4, "4 Years"),
    Option(5, "5 Years"),
    Option(6, "6 Years"),
)

KM_PER_YEAR_OPTIONS: tuple[Option, ...] = (
    Option(60_000, "60,000 km"),
    Option(70_000, "70,000 km"),
    Option(80_000, "80,000 km"),
)

DOWN_PAYMENT_OPTIONS: tuple[Option, ...] = (
    Option(0.25, "25%"),
    Option(0.30, "30%"),
    Option(0.50, "50%"),
)

DEPRECIATION_OPTIONS: tuple[Option, ...] = (
    Option(0.70, "70%"),
    Option(0.65, "65%"),
    Option(0.60, "60%"),
)

INSURANCE_OPTIONS: tuple[Option, ...] = (
    Option(0.07, "7%"),
    Option(0.055, "5.5%"),
    Option(0.05, "5%"),
)

INTEREST_RATE_OPTIONS: tuple[Option, ...] = (
    Option(0.17, "17%"),
    Option(0.19, "19%"),
    Option(0.21, "21%"),
)

LEASE_PERIOD_OPTIONS: tuple[Option, ...] = (
    Option(4, "4 Years"),
    Option(5, "5 Years"),
)

# --- Fixed constants (Rp) ---
ANNUAL_TAX = 1_000_000
DEFAULT_GASOLINE_PRICE = 6_800
"""Rp per liter."""
DEFAULT_FUEL_EFFICIENCY = 8
"""km per liter."""
DEFAULT_ANNUAL_MAINTENANCE_BUDGET = 10_000_000


# Dot-path into Configuration → offered options.  Used by the sensitivity
# sweep and the API options manifest.
OPTION_SETS: dict[str, tuple[Option, ...]] = {
    "finance.down_payment_rate": DOWN_PAYMENT_OPTIONS,
    "finance.depreciation_rate": DEPRECIATION_OPTIONS,
    "finance.insurance_rate": INSURANCE_OPTIONS,
    "finance.interest_rate": INTEREST_RATE_OPTIONS,
    "finance.lease_years": LEASE_PERIOD_OPTIONS,
    "operations.lifecycle_years": LIFECYCLE_OPTIONS,
    "operations.annual_km": KM_PER_YEAR_OPTIONS,
}


def get_product(product_type: str) -> ProductSpec:
    """Look up a product line by its value (``elf``, ``traga``, ``giga``)."""
    for product in PRODUCT_TYPES:
        if product.value == product_type:
            return product
    raise KeyError(f"Unknown product type: {product_type!r}")


def option_label(options: tuple[Option, ...], value: str | int | float) -> str:
    """Display label for ``value``, or ``str(value)`` if it is not offered."""
    for option in options:
        if option.value == value:
            return option.label
    return str(value)
