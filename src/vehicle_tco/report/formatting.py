"""Display formatting for Rupiah amounts, percentages and distances.

Indonesian conventions: ``.`` groups thousands, amounts are shown in whole
Rupiah.  Halves round up toward +∞ (``-2.5`` → ``-2``), as the dealership's
browser tool did with ``Math.round``.
"""

from __future__ import annotations

import math


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _group(n: int) -> str:
    return f"{n:,}".replace(",", ".")


def format_number_id(value: float) -> str:
    """Whole number with Indonesian grouping: ``20927083.3`` → ``20.927.083``."""
    return _group(_round_half_up(value))


def format_currency(value: float) -> str:
    """Rupiah amount: ``350000000`` → ``Rp 350.000.000``."""
    n = _round_half_up(value)
    if n < 0:
        return f"-Rp {_group(-n)}"
    return f"Rp {_group(n)}"


def format_percent(rate: float) -> str:
    """Fraction as a percentage label: ``0.055`` → ``5.5%``."""
    return f"{round(rate * 100, 4):g}%"


def format_km(km: float) -> str:
    return f"{format_number_id(km)} km"
