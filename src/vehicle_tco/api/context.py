"""Context manifest — makes the calculator self-describing for API clients.

Produces structured context at two detail levels:
  - ``compact``: parameter schemas + option sets
  - ``full``:    adds formulas and an interpretation guide

A client (form UI, spreadsheet integration, assistant) reads ``GET /context``
once and then knows what it can configure and how to read the results.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Literal

from pydantic import BaseModel, Field

from vehicle_tco import __version__
from vehicle_tco.config import Configuration, FinanceConfig, OperationsConfig, VehicleConfig
from vehicle_tco.config import options


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one configuration section (vehicle, finance, operations)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class CalculatorContext(BaseModel):
    """Full self-describing context."""
    name: str
    version: str
    description: str
    input_sections: list[SectionSchema]
    options: dict[str, Any]
    key_formulas: list[dict[str, str]]
    interpretation_guide: str


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=field_info.default,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Static content
# ═══════════════════════════════════════════════════════════════════════════

_INPUT_SECTIONS = [
    ("vehicle", VehicleConfig, "Product line, optional custom price, registration details"),
    ("finance", FinanceConfig, "Down payment, depreciation, insurance and interest rates, lease period"),
    ("operations", OperationsConfig, "Lifecycle, annual km, driver salary, fuel and maintenance"),
]

_KEY_FORMULAS = [
    {"name": "Down payment", "formula": "vehicle_price × down_payment_rate"},
    {"name": "Total interest", "formula": "loan_amount × interest_rate × lease_years (simple interest)"},
    {"name": "Monthly payment", "formula": "(loan_amount + total_interest) / (lease_years × 12)"},
    {"name": "Residual value", "formula": "vehicle_price × (1 − depreciation_rate)"},
    {"name": "Total maintenance", "formula": "max(total_km × cost_per_km(product), annual_budget × lifecycle_years)"},
    {"name": "Gasoline", "formula": "(total_km / fuel_efficiency) × gasoline_price"},
    {"name": "TCO", "formula": "down payment + loan payments + insurance + tax + maintenance + driver + gasoline"},
    {"name": "Cost per month", "formula": "TCO / lifecycle_years / 12 (0 if lifecycle_years = 0)"},
]

_INTERPRETATION_GUIDE = """
- Total cost of ownership is the cash spent over the lifecycle; depreciation and
  residual value are shown for reference and are not added to it.
- Maintenance is the higher of the km-based estimate (Rp 1,000 / 1,200 / 1,500 per km
  for ELF / TRAGA / GIGA) and the manual annual budget.
- The summary assumes Rp 1,000,000 revenue per day over 25 operating days; change the
  narrative assumptions to match the customer's business.
- Interest is flat: a longer lease adds interest linearly.
"""


def get_option_sets() -> dict[str, Any]:
    """Every offered option set and fixed constant, JSON-serializable."""
    def _opts(items: tuple[options.Option, ...]) -> list[dict[str, Any]]:
        return [asdict(o) for o in items]

    return {
        "product_types": [asdict(p) for p in options.PRODUCT_TYPES],
        "registration_types": _opts(options.REGISTRATION_TYPES),
        "plate_colors": _opts(options.PLATE_COLORS),
        "applications": _opts(options.APPLICATIONS),
        "lifecycle_years": _opts(options.LIFECYCLE_OPTIONS),
        "annual_km": _opts(options.KM_PER_YEAR_OPTIONS),
        "down_payment_rate": _opts(options.DOWN_PAYMENT_OPTIONS),
        "depreciation_rate": _opts(options.DEPRECIATION_OPTIONS),
        "insurance_rate": _opts(options.INSURANCE_OPTIONS),
        "interest_rate": _opts(options.INTEREST_RATE_OPTIONS),
        "lease_years": _opts(options.LEASE_PERIOD_OPTIONS),
        "constants": {
            "annual_tax": options.ANNUAL_TAX,
            "default_gasoline_price": options.DEFAULT_GASOLINE_PRICE,
            "default_fuel_efficiency": options.DEFAULT_FUEL_EFFICIENCY,
            "default_annual_maintenance_budget": options.DEFAULT_ANNUAL_MAINTENANCE_BUDGET,
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> CalculatorContext:
    """Build the self-describing context manifest."""
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]

    return CalculatorContext(
        name="Vehicle TCO Calculator",
        version=__version__,
        description=(
            "Total Cost of Ownership calculator for Astra Isuzu commercial vehicles "
            "(ELF, TRAGA, GIGA): ownership, financing and operating costs over the "
            "vehicle lifecycle, with a generated summary."
        ),
        input_sections=sections,
        options=get_option_sets(),
        key_formulas=_KEY_FORMULAS if detail_level == "full" else [],
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if detail_level == "full" else "",
    )


def get_configuration_schema() -> dict:
    """Return the full JSON Schema for Configuration."""
    return Configuration.model_json_schema()


def get_default_configuration() -> dict:
    """Return the default Configuration as a JSON-serializable dict."""
    return Configuration().model_dump()
