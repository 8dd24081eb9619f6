"""Report content — the (label, value) tables handed to document exporters.

Sections always appear in this order:
  1. Vehicle Configuration
  2. Financial Parameters
  3. Operational Parameters
  4. TCO Summary
  5. Cost Breakdown
  6. Summary (narrative)

Values are already formatted for display.  Exporters here produce a CSV
(via pandas) and paginated plain text; both only lay out what
``build_report`` provides.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from datetime import date

import pandas as pd
from pydantic import BaseModel, Field

from vehicle_tco.config.configuration import Configuration
from vehicle_tco.config.options import (
    ANNUAL_TAX,
    APPLICATIONS,
    PLATE_COLORS,
    REGISTRATION_TYPES,
    get_product,
    option_label,
)
from vehicle_tco.models.results import CostBreakdown
from vehicle_tco.report.formatting import format_currency, format_km, format_number_id, format_percent


SECTION_ORDER: tuple[str, ...] = (
    "Vehicle Configuration",
    "Financial Parameters",
    "Operational Parameters",
    "TCO Summary",
    "Cost Breakdown",
    "Summary",
)


class ReportRow(BaseModel):
    label: str
    value: str


class ReportSection(BaseModel):
    title: str
    rows: list[ReportRow] = Field(default_factory=list)


class TCOReport(BaseModel):
    """Everything an exporter needs, in display order."""

    title: str
    product_label: str
    generated_on: date
    sections: list[ReportSection]


@dataclass(frozen=True)
class PageBlock:
    """A run of rows from one section on one page."""

    title: str
    rows: tuple[ReportRow, ...]
    continued: bool
    """True when the section started on an earlier page."""


@dataclass(frozen=True)
class ReportPage:
    number: int
    blocks: tuple[PageBlock, ...]


def _years(n: int) -> str:
    return f"{n} Years"


def build_report(
    config: Configuration,
    breakdown: CostBreakdown,
    narrative: str,
    generated_on: date | None = None,
) -> TCOReport:
    """Assemble the report sections for one calculation."""
    if generated_on is None:
        generated_on = date.today()

    v, f, o = config.vehicle, config.finance, config.operations
    own, dep, rec = breakdown.ownership, breakdown.depreciation, breakdown.recurring
    product = get_product(v.product_type)

    def section(title: str, rows: list[tuple[str, str]]) -> ReportSection:
        return ReportSection(title=title, rows=[ReportRow(label=k, value=val) for k, val in rows])

    sections = [
        section("Vehicle Configuration", [
            ("Product Type", product.label),
            ("Vehicle Price", format_currency(own.vehicle_price)),
            ("Registration", option_label(REGISTRATION_TYPES, v.registration)),
            ("Plate Color", option_label(PLATE_COLORS, v.plate_color)),
            ("Application", option_label(APPLICATIONS, v.application)),
        ]),
        section("Financial Parameters", [
            ("Down Payment", format_percent(f.down_payment_rate)),
            ("Depreciation", format_percent(f.depreciation_rate)),
            ("Insurance Rate", format_percent(f.insurance_rate)),
            ("Interest Rate", format_percent(f.interest_rate)),
            ("Lease Period", _years(f.lease_years)),
            ("Annual Tax", format_currency(ANNUAL_TAX)),
        ]),
        section("Operational Parameters", [
            ("Lifecycle", _years(o.lifecycle_years)),
            ("Annual Kilometers", format_km(o.annual_km)),
            ("Monthly Driver Salary", format_currency(o.monthly_driver_salary)),
            ("Gasoline Price", f"{format_currency(o.gasoline_price_per_liter)}/liter"),
            ("Fuel Efficiency", f"{o.fuel_efficiency_km_per_liter:g} km/liter"),
            ("Annual Maintenance Budget", format_currency(o.annual_maintenance_budget)),
        ]),
        section("TCO Summary", [
            ("Total Cost of Ownership", format_currency(breakdown.total_cost_of_ownership)),
            ("Cost per Year", format_currency(breakdown.cost_per_year)),
            ("Cost per Month", format_currency(breakdown.cost_per_month)),
            ("Cost per Km", format_currency(breakdown.cost_per_km)),
        ]),
        section("Cost Breakdown", [
            ("Vehicle Price", format_currency(own.vehicle_price)),
            ("Down Payment", format_currency(own.down_payment_amount)),
            ("Loan Amount", format_currency(own.loan_amount)),
            ("Total Interest", format_currency(own.total_interest)),
            ("Monthly Payment", format_currency(own.monthly_payment)),
            ("Total Insurance", format_currency(rec.total_insurance)),
            ("Total Tax", format_currency(rec.total_tax)),
            ("Total Maintenance", format_currency(rec.total_maintenance)),
            ("Total Driver Salary", format_currency(rec.total_driver_salary)),
            ("Total Gasoline Cost", format_currency(rec.total_gasoline_cost)),
            ("Depreciation Cost", format_currency(dep.depreciation_cost)),
            ("Residual Value", format_currency(dep.residual_value)),
            ("Total Kilometers", format_km(breakdown.total_km)),
        ]),
        section("Summary", [("AI Summary", narrative)]),
    ]

    return TCOReport(
        title="Astra Isuzu TCO Calculator",
        product_label=product.label,
        generated_on=generated_on,
        sections=sections,
    )


def report_filename(product_type: str, generated_on: date | None = None, extension: str = "pdf") -> str:
    """``TCO_Report_ELF_Type_2026-10-19.pdf``"""
    if generated_on is None:
        generated_on = date.today()
    label = get_product(product_type).label.replace(" ", "_")
    return f"TCO_Report_{label}_{generated_on.isoformat()}.{extension.lstrip('.')}"


def _line_count(value: str, value_width: int | None) -> int:
    if value_width is None:
        return 1
    return len(textwrap.wrap(value, width=value_width)) or 1


def paginate(
    report: TCOReport,
    rows_per_page: int = 20,
    value_width: int | None = None,
) -> list[ReportPage]:
    """Split the report into pages of at most ``rows_per_page`` lines.

    Without ``value_width`` every row counts as one line.  With it, a row
    counts as many lines as its value wraps to at that width, so a long
    narrative takes up the space it will actually print in.  Rows are never
    split; a row taller than a whole page gets a page to itself.  A section
    that does not fit continues on the next page, and sections are never
    reordered.
    """
    if rows_per_page < 1:
        raise ValueError("rows_per_page must be >= 1")

    pages: list[ReportPage] = []
    blocks: list[PageBlock] = []
    used = 0

    for sec in report.sections:
        run: list[ReportRow] = []
        continued = False
        for row in sec.rows:
            height = _line_count(row.value, value_width)
            if used and used + height > rows_per_page:
                if run:
                    blocks.append(PageBlock(title=sec.title, rows=tuple(run), continued=continued))
                    run, continued = [], True
                pages.append(ReportPage(number=len(pages) + 1, blocks=tuple(blocks)))
                blocks, used = [], 0
            run.append(row)
            used += height
        if run:
            blocks.append(PageBlock(title=sec.title, rows=tuple(run), continued=continued))

    if blocks or not pages:
        pages.append(ReportPage(number=len(pages) + 1, blocks=tuple(blocks)))
    return pages


def render_text(report: TCOReport, rows_per_page: int = 20, width: int = 78) -> list[str]:
    """Render the report as paginated plain text, one string per page.

    ``rows_per_page`` bounds the printed value lines on each page, wrapped
    values included.
    """
    label_width = max(
        (len(row.label) for sec in report.sections for row in sec.rows),
        default=0,
    ) + 2
    value_width = max(width - label_width, 20)
    pages = paginate(report, rows_per_page, value_width=value_width)
    rendered: list[str] = []

    for page in pages:
        lines = [f"{report.title} | {report.product_label} | {report.generated_on.isoformat()}", ""]
        for block in page.blocks:
            heading = f"{block.title} (continued)" if block.continued else block.title
            lines.append(heading)
            lines.append("-" * len(heading))
            for row in block.rows:
                wrapped = textwrap.wrap(row.value, width=value_width) or [""]
                lines.append(f"{row.label:<{label_width}}{wrapped[0]}")
                lines.extend(" " * label_width + extra for extra in wrapped[1:])
            lines.append("")
        lines.append(f"Page {page.number} of {len(pages)}")
        rendered.append("\n".join(lines))

    return rendered


def report_to_frame(report: TCOReport) -> pd.DataFrame:
    """Long-format table: one row per (section, label, value)."""
    records = [
        {"section": sec.title, "label": row.label, "value": row.value}
        for sec in report.sections
        for row in sec.rows
    ]
    return pd.DataFrame.from_records(records, columns=["section", "label", "value"])


def export_csv(report: TCOReport) -> str:
    return report_to_frame(report).to_csv(index=False)


def headline_metrics(breakdown: CostBreakdown) -> dict[str, str]:
    """Formatted headline figures for cards and summaries."""
    return {
        "total_cost_of_ownership": format_currency(breakdown.total_cost_of_ownership),
        "cost_per_year": format_currency(breakdown.cost_per_year),
        "cost_per_month": format_currency(breakdown.cost_per_month),
        "cost_per_km": format_currency(breakdown.cost_per_km),
        "total_km": format_number_id(breakdown.total_km),
    }
