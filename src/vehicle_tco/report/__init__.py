"""Report content, pagination and export (CSV, plain text)."""

from vehicle_tco.report.document import (
    SECTION_ORDER,
    ReportPage,
    ReportRow,
    ReportSection,
    TCOReport,
    build_report,
    export_csv,
    headline_metrics,
    paginate,
    render_text,
    report_filename,
    report_to_frame,
)
from vehicle_tco.report.formatting import format_currency, format_km, format_number_id, format_percent

__all__ = [
    "SECTION_ORDER",
    "ReportPage",
    "ReportRow",
    "ReportSection",
    "TCOReport",
    "build_report",
    "export_csv",
    "headline_metrics",
    "paginate",
    "render_text",
    "report_filename",
    "report_to_frame",
    "format_currency",
    "format_km",
    "format_number_id",
    "format_percent",
]
