"""Option sensitivity — which offered option moves the TCO the most.

Vary one option-set parameter at a time across every value the dealership
offers, holding everything else at the base configuration, and record the
resulting TCO swing.  Produces tornado chart data sorted by impact.

Default sweep set (see ``OPTION_SETS``):
  - finance.down_payment_rate, depreciation_rate, insurance_rate, interest_rate
  - finance.lease_years
  - operations.lifecycle_years, annual_km
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ValidationError

from vehicle_tco.config.configuration import Configuration
from vehicle_tco.config.options import OPTION_SETS, Option
from vehicle_tco.engine.tco import compute
from vehicle_tco.errors import InvalidInput


@dataclass(frozen=True)
class OptionPoint:
    """TCO at one offered option value."""

    value: float | str
    label: str
    total_cost_of_ownership: float
    cost_per_month: float


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_path: str
    """Dot-path into Configuration (e.g. 'finance.interest_rate')."""

    base_value: float | str | None
    points: tuple[OptionPoint, ...]
    """One point per offered option, in option order."""

    min_tco: float
    max_tco: float
    delta_tco: float
    """max_tco − min_tco — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_tco: float
    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_tco (descending)."""


def _get_nested_attr(obj: object, path: str) -> object:
    """Get a nested attribute via dot-path string."""
    current = obj
    for part in path.split("."):
        current = getattr(current, part)
    return current


def _with_nested_attr(model: BaseModel, path: str, value: object) -> BaseModel:
    """Return a copy of a frozen model tree with one dot-path field replaced.

    The section holding the field is re-validated, so a swept value gets the
    same checks as direct construction.  Raises ``ValidationError``.
    """
    head, _, rest = path.partition(".")
    if not rest:
        return type(model).model_validate({**model.model_dump(), head: value})
    child = getattr(model, head)
    return model.model_copy(update={head: _with_nested_attr(child, rest, value)})


def run_option_sensitivity(
    config: Configuration,
    sweeps: dict[str, tuple[Option, ...]] | None = None,
) -> SensitivityResult:
    """Sweep each option-set parameter over its offered values.

    Parameters
    ----------
    config : Configuration
        Base configuration.
    sweeps : dict[path, options] | None
        Parameters to sweep. None = use ``OPTION_SETS``.  Paths that do not
        exist on Configuration are skipped.

    Raises
    ------
    InvalidInput
        If an option value fails validation for its field.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by TCO swing.
    """
    if sweeps is None:
        sweeps = OPTION_SETS

    base_tco = compute(config).total_cost_of_ownership
    bars: list[TornadoBar] = []

    for path, options in sweeps.items():
        try:
            base_value = _get_nested_attr(config, path)
        except AttributeError:
            continue
        if not options:
            continue

        points: list[OptionPoint] = []
        for option in options:
            try:
                swept = _with_nested_attr(config, path, option.value)
            except ValidationError as exc:
                raise InvalidInput([
                    {"field": path, "message": f"{option.label}: {err['msg']}"}
                    for err in exc.errors()
                ]) from exc
            breakdown = compute(swept)
            points.append(OptionPoint(
                value=option.value,
                label=option.label,
                total_cost_of_ownership=breakdown.total_cost_of_ownership,
                cost_per_month=breakdown.cost_per_month,
            ))

        tcos = [p.total_cost_of_ownership for p in points]
        bars.append(TornadoBar(
            param_path=path,
            base_value=base_value,
            points=tuple(points),
            min_tco=min(tcos),
            max_tco=max(tcos),
            delta_tco=max(tcos) - min(tcos),
        ))

    bars.sort(key=lambda b: b.delta_tco, reverse=True)
    return SensitivityResult(base_tco=base_tco, bars=bars)
