"""Vehicle TCO Calculator — Streamlit dashboard.

Layout: sidebar inputs (the dealership's fixed option sets) → main area with
three tabs (Breakdown | Compare | Report).
Design: metric cards for headlines, tables for the breakdown, one cost
composition chart, the generated summary, and report downloads.

Run with:
    streamlit run src/vehicle_tco/dashboard/app.py
"""

from __future__ import annotations

from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from vehicle_tco.api.narrative import NarrativeAssumptions, summarize, summarize_comparison
from vehicle_tco.config import options
from vehicle_tco.config.configuration import Configuration
from vehicle_tco.config.options import get_product
from vehicle_tco.engine.comparison import compare_products
from vehicle_tco.engine.sensitivity import run_option_sensitivity
from vehicle_tco.engine.tco import compute_cached
from vehicle_tco.errors import InvalidInput
from vehicle_tco.report.document import build_report, export_csv, render_text, report_filename
from vehicle_tco.report.formatting import format_currency, format_km

# ---------------------------------------------------------------------------
# Default instance, source of sidebar defaults
# ---------------------------------------------------------------------------
_DEF = Configuration()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Astra Isuzu TCO Calculator", page_icon="🚚", layout="wide")

st.title("Astra Isuzu TCO Calculator")
st.caption("Total Cost of Ownership Calculator for Product and Service of Astra Isuzu dealership")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _card(icon: str, label: str, value: str, accent: str = "#6c5ce7") -> str:
    """Return HTML for a styled metric card with colored top accent."""
    return f"""
    <div style="
        border: 1px solid rgba(128,128,128,0.15);
        border-top: 3px solid {accent};
        border-radius: 8px;
        padding: 14px 16px 12px;
        text-align: center;
    ">
        <div style="font-size: 1.3rem; margin-bottom: 2px; line-height: 1;">{icon}</div>
        <div style="font-size: 1.2rem; font-weight: 700; line-height: 1.3;">{value}</div>
        <div style="font-size: 0.65rem; text-transform: uppercase; letter-spacing: 0.6px; margin-top: 3px; opacity: 0.6;">{label}</div>
    </div>
    """


def _select(label: str, opts: tuple[options.Option, ...], default, key: str):
    """Selectbox over an option set; returns the option's value."""
    values = [o.value for o in opts]
    labels = {o.value: o.label for o in opts}
    return st.selectbox(label, values, index=values.index(default), format_func=labels.get, key=key)


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Vehicle Configuration")

_products = [p.value for p in options.PRODUCT_TYPES]
product_type = st.sidebar.selectbox(
    "Product Type", _products, index=_products.index(_DEF.vehicle.product_type),
    format_func=lambda v: get_product(v).label,
)
custom_price = st.sidebar.text_input(
    "Vehicle Price (Rp)", "",
    placeholder=f"Default: {format_currency(get_product(product_type).base_price)}",
)
with st.sidebar.expander("Registration & Application"):
    registration = _select("Registration", options.REGISTRATION_TYPES, _DEF.vehicle.registration, "reg")
    plate_color = _select("Plate Color", options.PLATE_COLORS, _DEF.vehicle.plate_color, "plate")
    application = _select("Application", options.APPLICATIONS, _DEF.vehicle.application, "app")

with st.sidebar.expander("Operational Parameters", expanded=True):
    lifecycle = _select("Lifecycle", options.LIFECYCLE_OPTIONS, _DEF.operations.lifecycle_years, "life")
    annual_km = _select("Kilometers per Year", options.KM_PER_YEAR_OPTIONS, _DEF.operations.annual_km, "km")
    driver_salary = st.text_input("Monthly Driver Salary (Rp)", "", placeholder="Optional")
    gasoline_price = st.text_input("Gasoline Price (Rp/liter)", f"{options.DEFAULT_GASOLINE_PRICE}")
    fuel_efficiency = st.text_input("Fuel Efficiency (km/liter)", f"{options.DEFAULT_FUEL_EFFICIENCY}")
    maintenance_budget = st.text_input(
        "Annual Maintenance Budget (Rp)", f"{options.DEFAULT_ANNUAL_MAINTENANCE_BUDGET}",
    )

with st.sidebar.expander("Financial Parameters", expanded=True):
    down_payment = _select("Down Payment", options.DOWN_PAYMENT_OPTIONS, _DEF.finance.down_payment_rate, "dp")
    depreciation = _select("Depreciation", options.DEPRECIATION_OPTIONS, _DEF.finance.depreciation_rate, "dep")
    insurance = _select("Insurance", options.INSURANCE_OPTIONS, _DEF.finance.insurance_rate, "ins")
    interest = _select("Interest Rate", options.INTEREST_RATE_OPTIONS, _DEF.finance.interest_rate, "int")
    lease = _select("Lease Period", options.LEASE_PERIOD_OPTIONS, _DEF.finance.lease_years, "lease")
    st.text_input("Annual Tax", format_currency(options.ANNUAL_TAX), disabled=True)

with st.sidebar.expander("Summary Assumptions"):
    daily_revenue = st.number_input("Daily revenue (Rp)", 0, 100_000_000, 1_000_000, 100_000)
    operating_days = st.number_input("Operating days / month", 0, 31, 25, 1)
    language = st.selectbox("Summary language", ["id", "en"], format_func={"id": "Bahasa Indonesia", "en": "English"}.get)


# ---------------------------------------------------------------------------
# Calculation
# ---------------------------------------------------------------------------
try:
    config = Configuration.from_form({
        "product_type": product_type,
        "vehicle_price": custom_price,
        "registration": registration,
        "plate_color": plate_color,
        "application": application,
        "lifecycle_years": lifecycle,
        "annual_km": annual_km,
        "monthly_driver_salary": driver_salary,
        "gasoline_price_per_liter": gasoline_price,
        "fuel_efficiency_km_per_liter": fuel_efficiency,
        "annual_maintenance_budget": maintenance_budget,
        "down_payment_rate": down_payment,
        "depreciation_rate": depreciation,
        "insurance_rate": insurance,
        "interest_rate": interest,
        "lease_years": lease,
    })
except InvalidInput as exc:
    st.error("Some inputs could not be used:")
    for err in exc.errors:
        st.markdown(f"- `{err['field']}` — {err['message']}")
    st.stop()

breakdown = compute_cached(config)
assumptions = NarrativeAssumptions(daily_revenue=daily_revenue, operating_days_per_month=operating_days)
narrative = summarize(breakdown, assumptions, language)
own, dep, rec = breakdown.ownership, breakdown.depreciation, breakdown.recurring

breakdown_tab, compare_tab, report_tab = st.tabs(["Breakdown", "Compare", "Report"])


# ═══════════════════════════════════════════════════════════════════════════
# ==================  BREAKDOWN TAB  ======================================
# ═══════════════════════════════════════════════════════════════════════════
with breakdown_tab:
    st.subheader("TCO Summary")
    cols = st.columns(4)
    cards = [
        ("💰", "Total Cost of Ownership", format_currency(breakdown.total_cost_of_ownership), "#6c5ce7"),
        ("📅", "Cost per Year", format_currency(breakdown.cost_per_year), "#00b894"),
        ("🗓️", "Cost per Month", format_currency(breakdown.cost_per_month), "#0984e3"),
        ("🛣️", "Cost per Km", format_currency(breakdown.cost_per_km), "#e17055"),
    ]
    for col, (icon, label, value, accent) in zip(cols, cards):
        col.markdown(_card(icon, label, value, accent), unsafe_allow_html=True)

    st.subheader("AI Summary")
    st.info(narrative)

    left, right = st.columns(2)
    with left:
        st.markdown("**Vehicle & Financing**")
        st.dataframe(pd.DataFrame([
            ("Vehicle Price", format_currency(own.vehicle_price)),
            ("Down Payment", format_currency(own.down_payment_amount)),
            ("Loan Amount", format_currency(own.loan_amount)),
            ("Total Interest", format_currency(own.total_interest)),
            ("Monthly Payment", format_currency(own.monthly_payment)),
        ], columns=["Item", "Amount"]), use_container_width=True, hide_index=True)

        st.markdown("**Depreciation**")
        st.dataframe(pd.DataFrame([
            ("Depreciation Cost", format_currency(dep.depreciation_cost)),
            ("Residual Value", format_currency(dep.residual_value)),
            ("Total Kilometers", format_km(breakdown.total_km)),
        ], columns=["Item", "Amount"]), use_container_width=True, hide_index=True)

    with right:
        st.markdown("**Operating Costs**")
        op_rows = [
            ("Total Insurance", format_currency(rec.total_insurance)),
            ("Total Tax", format_currency(rec.total_tax)),
            ("Total Maintenance", format_currency(rec.total_maintenance)),
        ]
        if rec.total_driver_salary > 0:
            op_rows.append(("Total Driver Salary", format_currency(rec.total_driver_salary)))
        if rec.total_gasoline_cost > 0:
            op_rows.append(("Total Gasoline Cost", format_currency(rec.total_gasoline_cost)))
        st.dataframe(pd.DataFrame(op_rows, columns=["Item", "Amount"]), use_container_width=True, hide_index=True)

        with st.expander("Show maintenance formula"):
            st.markdown(
                f"**Km-based** — {format_km(breakdown.total_km)} × Rp {rec.maintenance_cost_per_km:,.0f} "
                f"= {format_currency(rec.maintenance_from_km)}"
            )
            st.markdown(f"**Budget** — {format_currency(rec.total_maintenance_budget)} over the lifecycle")
            st.markdown(f"**Used** — the higher of the two: **{format_currency(rec.total_maintenance)}**")

    # --- Cost composition ---
    st.subheader("Cost Composition")
    components = [
        ("Down payment", own.down_payment_amount),
        ("Loan payments", own.total_loan_payment),
        ("Insurance", rec.total_insurance),
        ("Tax", rec.total_tax),
        ("Maintenance", rec.total_maintenance),
        ("Driver salary", rec.total_driver_salary),
        ("Gasoline", rec.total_gasoline_cost),
    ]
    fig = go.Figure(go.Bar(
        x=[v for _, v in components],
        y=[k for k, _ in components],
        orientation="h",
        marker_color="#6c5ce7",
        text=[format_currency(v) for _, v in components],
        textposition="auto",
    ))
    fig.update_layout(
        xaxis_title="Rp over lifecycle",
        height=320,
        margin=dict(l=20, r=20, t=30, b=20),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    st.plotly_chart(fig, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# ==================  COMPARE TAB  ========================================
# ═══════════════════════════════════════════════════════════════════════════
with compare_tab:
    st.subheader("Product Comparison")
    rows = compare_products(config)
    st.dataframe(pd.DataFrame([
        {
            "Product": r.label,
            "Vehicle Price": format_currency(r.vehicle_price),
            "TCO": format_currency(r.total_cost_of_ownership),
            "Cost / Month": format_currency(r.cost_per_month),
            "Cost / Km": format_currency(r.cost_per_km),
            "Monthly Payment": format_currency(r.monthly_payment),
        }
        for r in rows
    ]), use_container_width=True, hide_index=True)
    with st.expander("Comparison summary"):
        st.code(summarize_comparison(rows), language=None)

    st.subheader("Option Sensitivity")
    sens = run_option_sensitivity(config)
    fig_t = go.Figure()
    for bar in reversed(sens.bars):
        fig_t.add_trace(go.Bar(
            y=[bar.param_path],
            x=[bar.max_tco - bar.min_tco],
            base=[bar.min_tco],
            orientation="h",
            marker_color="#00b894",
            hovertext=", ".join(f"{p.label}: {format_currency(p.total_cost_of_ownership)}" for p in bar.points),
        ))
    fig_t.add_vline(x=sens.base_tco, line_dash="dash", line_color="#e17055",
                    annotation_text="Current", annotation_position="top right")
    fig_t.update_layout(
        xaxis_title="TCO range across offered options (Rp)",
        height=340,
        margin=dict(l=20, r=20, t=30, b=20),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    st.plotly_chart(fig_t, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# ==================  REPORT TAB  =========================================
# ═══════════════════════════════════════════════════════════════════════════
with report_tab:
    today = date.today()
    report = build_report(config, breakdown, narrative, generated_on=today)
    pages = render_text(report)

    st.subheader("Report Preview")
    for page in pages:
        st.code(page, language=None)

    c1, c2 = st.columns(2)
    c1.download_button(
        "Download CSV",
        data=export_csv(report),
        file_name=report_filename(config.vehicle.product_type, today, "csv"),
        mime="text/csv",
    )
    c2.download_button(
        "Download Text Report",
        data="\f\n".join(pages),
        file_name=report_filename(config.vehicle.product_type, today, "txt"),
        mime="text/plain",
    )
