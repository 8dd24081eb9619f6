"""Narrative generator — plain-language summary of a TCO breakdown.

A fixed, deterministic template (the dealership tool labels it an "AI
summary"; no model is called).  Converts a ``CostBreakdown`` into one
paragraph: the monthly cost, the operating cost items that apply, an
assumed revenue, and the resulting monthly net profit.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from vehicle_tco.models.results import CostBreakdown, ProductComparison
from vehicle_tco.report.formatting import format_number_id


Language = Literal["id", "en"]


class NarrativeAssumptions(BaseModel):
    """Revenue assumption used to turn monthly cost into a net profit figure."""

    daily_revenue: float = Field(default=1_000_000, ge=0, description="Minimum revenue per operating day (Rp)")
    operating_days_per_month: int = Field(default=25, ge=0, le=31, description="Operating days per month")

    @property
    def monthly_revenue(self) -> float:
        return self.daily_revenue * self.operating_days_per_month


_TEMPLATES: dict[str, dict[str, str]] = {
    "id": {
        "driver": "gaji sopir (Rp. {amount}/bulan)",
        "fuel": "BBM (Rp. {amount}/bulan)",
        "maintenance": "maintenance (Rp. {amount}/bulan)",
        "operational": " Biaya operasional meliputi: {parts}.",
        "summary": (
            "Total biaya per bulan yaitu Rp. {cost} yang mencakup biaya kepemilikan "
            "(cicilan, asuransi, pajak) dan biaya operasional.{operational} "
            "Dengan asumsi unit beroperasi {days} hari/bulan dan revenue minimal "
            "Rp. {daily}/hari, revenue bulanan Rp. {monthly} dikurangi biaya bulanan "
            "Rp. {cost} menghasilkan keuntungan bersih per bulan sekitar Rp. {profit}."
        ),
    },
    "en": {
        "driver": "driver salary (Rp. {amount}/month)",
        "fuel": "fuel (Rp. {amount}/month)",
        "maintenance": "maintenance (Rp. {amount}/month)",
        "operational": " Operating costs include: {parts}.",
        "summary": (
            "Total cost per month is Rp. {cost}, covering ownership costs "
            "(installments, insurance, tax) and operating costs.{operational} "
            "Assuming the unit operates {days} days/month with a minimum revenue of "
            "Rp. {daily}/day, monthly revenue of Rp. {monthly} minus the monthly cost of "
            "Rp. {cost} leaves a net profit of about Rp. {profit} per month."
        ),
    },
}


def operating_cost_clauses(breakdown: CostBreakdown, language: Language = "id") -> list[str]:
    """Monthly clauses for driver salary, fuel and maintenance, in that order.

    A clause is present only when its lifecycle total is positive.
    """
    templates = _get_templates(language)
    r = breakdown.recurring
    months = breakdown.lifecycle_years * 12

    parts: list[str] = []
    for key, total in (
        ("driver", r.total_driver_salary),
        ("fuel", r.total_gasoline_cost),
        ("maintenance", r.total_maintenance),
    ):
        # A positive lifecycle total implies lifecycle_years > 0.
        if total > 0:
            parts.append(templates[key].format(amount=format_number_id(total / months)))
    return parts


def summarize(
    breakdown: CostBreakdown,
    assumptions: NarrativeAssumptions | None = None,
    language: Language = "id",
) -> str:
    """Generate the one-paragraph summary for a breakdown."""
    templates = _get_templates(language)
    if assumptions is None:
        assumptions = NarrativeAssumptions()

    monthly_revenue = assumptions.monthly_revenue
    net_profit = monthly_revenue - breakdown.cost_per_month

    parts = operating_cost_clauses(breakdown, language)
    operational = templates["operational"].format(parts=", ".join(parts)) if parts else ""

    return templates["summary"].format(
        cost=format_number_id(breakdown.cost_per_month),
        operational=operational,
        days=assumptions.operating_days_per_month,
        daily=format_number_id(assumptions.daily_revenue),
        monthly=format_number_id(monthly_revenue),
        profit=format_number_id(net_profit),
    )


def summarize_comparison(rows: list[ProductComparison]) -> str:
    """Text table comparing product lines, cheapest first."""
    if not rows:
        return "No products to compare."

    rows = sorted(rows, key=lambda r: r.total_cost_of_ownership)
    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("PRODUCT COMPARISON")
    sections.append("=" * 60)

    header = f"{'Product':12s}  {'Price':>16s}  {'TCO':>18s}  {'Per month':>14s}  {'Per km':>8s}"
    sections.append(header)
    sections.append("-" * len(header))
    for r in rows:
        sections.append(
            f"{r.label:12s}  {format_number_id(r.vehicle_price):>16s}  "
            f"{format_number_id(r.total_cost_of_ownership):>18s}  "
            f"{format_number_id(r.cost_per_month):>14s}  {format_number_id(r.cost_per_km):>8s}"
        )

    best, worst = rows[0], rows[-1]
    sections.append(f"\nLowest TCO: {best.label} (Rp. {format_number_id(best.total_cost_of_ownership)})")
    if len(rows) > 1:
        saving = worst.cost_per_month - best.cost_per_month
        sections.append(f"Saves Rp. {format_number_id(saving)}/month vs {worst.label}.")

    return "\n".join(sections)


def _get_templates(language: str) -> dict[str, str]:
    try:
        return _TEMPLATES[language]
    except KeyError:
        raise ValueError(f"Unsupported narrative language: {language!r}") from None
