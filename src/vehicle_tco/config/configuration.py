"""Top-level configuration — bundles the vehicle, finance and operations inputs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vehicle_tco.config.finance import FinanceConfig
from vehicle_tco.config.operations import OperationsConfig
from vehicle_tco.config.options import get_product
from vehicle_tco.config.vehicle import VehicleConfig
from vehicle_tco.errors import InvalidInput


# Flat form field → owning section.
FORM_FIELDS: dict[str, str] = {
    **{name: "vehicle" for name in VehicleConfig.model_fields},
    **{name: "finance" for name in FinanceConfig.model_fields},
    **{name: "operations" for name in OperationsConfig.model_fields},
}

# What an empty text box means for the free-entry numeric fields.
# Fields not listed here fall back to their model default when left empty.
_EMPTY_FORM_VALUES: dict[str, Any] = {
    "vehicle_price": None,
    "monthly_driver_salary": 0.0,
    "annual_maintenance_budget": 0.0,
}


class Configuration(BaseModel):
    """Complete, immutable input bundle for one TCO calculation.

    Frozen and hashable, so it can key a memoized engine call.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    vehicle: VehicleConfig = Field(default_factory=VehicleConfig)
    finance: FinanceConfig = Field(default_factory=FinanceConfig)
    operations: OperationsConfig = Field(default_factory=OperationsConfig)

    @property
    def effective_vehicle_price(self) -> float:
        """Custom price when entered, otherwise the product's base price."""
        if self.vehicle.vehicle_price is not None:
            return self.vehicle.vehicle_price
        return get_product(self.vehicle.product_type).base_price

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> Configuration:
        """Build a Configuration from flat, form-style values.

        Keys are field names (``product_type``, ``lifecycle_years``,
        ``fuel_efficiency_km_per_liter`` ...).  Values may be text as typed
        into a form: numeric strings are parsed, blank strings fall back to
        their defaults, anything else that does not parse is rejected.

        Raises
        ------
        InvalidInput
            If any field is unknown, malformed, non-finite or out of range.
        """
        sections: dict[str, dict[str, Any]] = {"vehicle": {}, "finance": {}, "operations": {}}
        unknown: list[dict[str, Any]] = []

        for name, raw in form.items():
            section = FORM_FIELDS.get(name)
            if section is None:
                unknown.append({"field": name, "message": "Unknown field"})
                continue
            value = raw.strip() if isinstance(raw, str) else raw
            if value == "" or value is None:
                if name not in _EMPTY_FORM_VALUES:
                    continue
                value = _EMPTY_FORM_VALUES[name]
            sections[section][name] = value

        if unknown:
            raise InvalidInput(unknown)

        try:
            return cls(**sections)
        except ValidationError as exc:
            raise InvalidInput.from_validation_error(exc) from exc
