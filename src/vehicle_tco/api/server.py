"""FastAPI server — HTTP surface for the TCO calculator.

Run with:
    uvicorn vehicle_tco.api.server:app --reload --port 8000

Or:
    vehicle-tco-api

Endpoints:
    GET  /context                  — self-describing manifest (sections, options, formulas)
    GET  /options                  — every offered option set and constant
    GET  /schema                   — full JSON Schema for Configuration
    GET  /configuration/defaults   — complete default Configuration as JSON
    POST /calculate                — breakdown + narrative (partial or full Configuration)
    POST /calculate/summary        — narrative + headline metrics only
    POST /calculate/compare        — same inputs across ELF / TRAGA / GIGA
    POST /calculate/sensitivity    — option sweep → tornado data
    POST /report                   — report sections, text pages and suggested filename
    POST /report/csv               — report as a CSV download
"""

from __future__ import annotations

import logging
import os
from datetime import date
from typing import Any, Literal

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field, ValidationError

from vehicle_tco import __version__
from vehicle_tco.api.context import (
    build_context,
    get_configuration_schema,
    get_default_configuration,
    get_option_sets,
)
from vehicle_tco.api.narrative import Language, NarrativeAssumptions, summarize, summarize_comparison
from vehicle_tco.config.configuration import Configuration
from vehicle_tco.engine.comparison import compare_products
from vehicle_tco.engine.sensitivity import run_option_sensitivity
from vehicle_tco.engine.tco import compute_cached
from vehicle_tco.errors import InvalidInput
from vehicle_tco.models.results import CalculationResult
from vehicle_tco.report.document import build_report, export_csv, headline_metrics, render_text, report_filename

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Vehicle TCO Calculator API",
    version=__version__,
    description=(
        "Total Cost of Ownership calculator for commercial vehicles. Configure a "
        "vehicle, financing and operating assumptions; get a cost breakdown, a "
        "plain-language summary, product comparisons and exportable reports. "
        "Start with GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.warning("Rejected input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.errors})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    configuration: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Configuration JSON. Missing fields use defaults. "
                    "Example: {'vehicle': {'product_type': 'giga'}, 'operations': {'annual_km': 80000}}",
    )
    language: Language = Field(default="id", description="Narrative language: 'id' or 'en'")
    assumptions: NarrativeAssumptions = Field(default_factory=NarrativeAssumptions)


class ReportRequest(CalculateRequest):
    """Request body for /report and /report/csv."""
    rows_per_page: int = Field(default=20, ge=1, le=200)


class CompareResponse(BaseModel):
    """Response from /calculate/compare."""
    rows: list[dict[str, Any]]
    comparison_narrative: str


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_configuration(overrides: dict[str, Any]) -> Configuration:
    """Build a Configuration from partial overrides merged onto defaults.

    Raises InvalidInput on any validation failure.
    """
    defaults = get_default_configuration()
    _deep_merge(defaults, overrides)
    try:
        return Configuration(**defaults)
    except ValidationError as exc:
        raise InvalidInput.from_validation_error(exc) from exc


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Vehicle TCO Calculator API",
        "version": __version__,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas and options only, 'full' adds formulas and guide",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/options")
def get_options():
    """Every offered option set (product types, rates, periods) and fixed constant."""
    return get_option_sets()


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Configuration — types, defaults, constraints."""
    return get_configuration_schema()


@app.get("/configuration/defaults")
def get_defaults():
    """Complete default Configuration as JSON. Use as a starting point for modifications."""
    return get_default_configuration()


@app.post("/calculate", response_model=CalculationResult)
def calculate(req: CalculateRequest):
    """Compute the full cost breakdown and narrative.

    Send a partial Configuration (only the fields you want to change).

    Example minimal request:
    ```json
    {"configuration": {"vehicle": {"product_type": "traga"}}, "language": "en"}
    ```
    """
    config = _build_configuration(req.configuration)
    breakdown = compute_cached(config)
    logger.info(
        "Calculated TCO for %s: %.0f", config.vehicle.product_type, breakdown.total_cost_of_ownership,
    )
    return CalculationResult(
        configuration=config,
        breakdown=breakdown,
        narrative=summarize(breakdown, req.assumptions, req.language),
    )


@app.post("/calculate/summary")
def calculate_summary(req: CalculateRequest):
    """Return ONLY the narrative and headline metrics."""
    config = _build_configuration(req.configuration)
    breakdown = compute_cached(config)
    return {
        "narrative": summarize(breakdown, req.assumptions, req.language),
        "headline_metrics": {
            "total_cost_of_ownership": breakdown.total_cost_of_ownership,
            "cost_per_year": breakdown.cost_per_year,
            "cost_per_month": breakdown.cost_per_month,
            "cost_per_km": breakdown.cost_per_km,
            "monthly_payment": breakdown.ownership.monthly_payment,
            "net_profit_per_month": req.assumptions.monthly_revenue - breakdown.cost_per_month,
        },
        "formatted": headline_metrics(breakdown),
    }


@app.post("/calculate/compare", response_model=CompareResponse)
def calculate_compare(req: CalculateRequest):
    """Price the same inputs for every product line, lowest TCO first."""
    config = _build_configuration(req.configuration)
    rows = compare_products(config)
    return CompareResponse(
        rows=[r.model_dump() for r in rows],
        comparison_narrative=summarize_comparison(rows),
    )


@app.post("/calculate/sensitivity")
def calculate_sensitivity(req: CalculateRequest):
    """Sweep every option set and rank parameters by TCO swing (tornado data)."""
    config = _build_configuration(req.configuration)
    result = run_option_sensitivity(config)
    return {
        "base_tco": result.base_tco,
        "tornado_bars": [
            {
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "min_tco": bar.min_tco,
                "max_tco": bar.max_tco,
                "delta_tco": bar.delta_tco,
                "points": [
                    {
                        "value": p.value,
                        "label": p.label,
                        "total_cost_of_ownership": p.total_cost_of_ownership,
                        "cost_per_month": p.cost_per_month,
                    }
                    for p in bar.points
                ],
            }
            for bar in result.bars
        ],
        "interpretation": (
            "Sorted by TCO swing (largest first). Parameters at the top are the "
            "offered options that change the total cost the most."
        ),
    }


@app.post("/report")
def report(req: ReportRequest):
    """Report sections in export order, rendered text pages and a filename."""
    config = _build_configuration(req.configuration)
    breakdown = compute_cached(config)
    narrative = summarize(breakdown, req.assumptions, req.language)
    today = date.today()
    doc = build_report(config, breakdown, narrative, generated_on=today)
    return {
        "filename": report_filename(config.vehicle.product_type, today, "txt"),
        "report": doc.model_dump(mode="json"),
        "pages": render_text(doc, rows_per_page=req.rows_per_page),
    }


@app.post("/report/csv")
def report_csv(req: ReportRequest):
    """Report as a CSV attachment."""
    config = _build_configuration(req.configuration)
    breakdown = compute_cached(config)
    narrative = summarize(breakdown, req.assumptions, req.language)
    today = date.today()
    doc = build_report(config, breakdown, narrative, generated_on=today)
    filename = report_filename(config.vehicle.product_type, today, "csv")
    return Response(
        content=export_csv(doc),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(
        level=os.environ.get("TCO_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "vehicle_tco.api.server:app",
        host=os.environ.get("TCO_API_HOST", "0.0.0.0"),
        port=int(os.environ.get("TCO_API_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
