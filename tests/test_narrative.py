"""Tests for the summary narrative and the product comparison text."""

from __future__ import annotations

import pytest

from vehicle_tco.api.narrative import (
    NarrativeAssumptions,
    operating_cost_clauses,
    summarize,
    summarize_comparison,
)
from vehicle_tco.config import Configuration, OperationsConfig, VehicleConfig
from vehicle_tco.engine import compare_products, compute


ELF_SUMMARY_ID = (
    "Total biaya per bulan yaitu Rp. 20.927.083 yang mencakup biaya kepemilikan "
    "(cicilan, asuransi, pajak) dan biaya operasional. Biaya operasional meliputi: "
    "BBM (Rp. 4.250.000/bulan), maintenance (Rp. 5.000.000/bulan). Dengan asumsi unit "
    "beroperasi 25 hari/bulan dan revenue minimal Rp. 1.000.000/hari, revenue bulanan "
    "Rp. 25.000.000 dikurangi biaya bulanan Rp. 20.927.083 menghasilkan keuntungan "
    "bersih per bulan sekitar Rp. 4.072.917."
)


class TestSummary:

    def test_reference_summary_indonesian(self, elf_config: Configuration):
        # 1,255,625,000 / 60 = 20,927,083.33; 25M − 20.93M = 4,072,916.67
        assert summarize(compute(elf_config)) == ELF_SUMMARY_ID

    def test_reference_summary_english(self, elf_config: Configuration):
        text = summarize(compute(elf_config), language="en")
        assert text.startswith("Total cost per month is Rp. 20.927.083,")
        assert "Operating costs include: fuel (Rp. 4.250.000/month), maintenance (Rp. 5.000.000/month)." in text
        assert text.endswith("leaves a net profit of about Rp. 4.072.917 per month.")

    def test_deterministic(self, giga_config: Configuration):
        b = compute(giga_config)
        assert summarize(b) == summarize(b)

    def test_unknown_language_rejected(self, elf_config: Configuration):
        with pytest.raises(ValueError):
            summarize(compute(elf_config), language="fr")

    def test_custom_assumptions(self, elf_config: Configuration):
        assumptions = NarrativeAssumptions(daily_revenue=2_000_000, operating_days_per_month=20)
        text = summarize(compute(elf_config), assumptions, language="en")
        # 2M × 20 = 40M; 40M − 20,927,083.33 = 19,072,916.67
        assert "operates 20 days/month" in text
        assert "Rp. 40.000.000" in text
        assert "about Rp. 19.072.917 per month" in text

    def test_negative_profit_rendered(self, giga_config: Configuration):
        # GIGA monthly cost ≈ 43.8M > 25M revenue
        text = summarize(compute(giga_config), language="en")
        assert "about Rp. -18.816.667 per month" in text

    def test_negative_half_profit_rounds_up(self):
        # 1.2M TCO over 12 months = 100,000/month; revenue 0.5 × 1 day
        cfg = Configuration(
            vehicle=VehicleConfig(vehicle_price=0),
            operations=OperationsConfig(lifecycle_years=1, annual_km=0, annual_maintenance_budget=200_000),
        )
        b = compute(cfg)
        assert b.cost_per_month == 100_000
        assumptions = NarrativeAssumptions(daily_revenue=0.5, operating_days_per_month=1)
        text = summarize(b, assumptions, language="en")
        # -99,999.5 rounds to -99,999
        assert "about Rp. -99.999 per month" in text


class TestClauses:

    def test_fixed_order_with_driver(self, giga_config: Configuration):
        parts = operating_cost_clauses(compute(giga_config), language="en")
        # 360M / 72 = 5M; 652.8M / 72 = 9,066,666.67; 720M / 72 = 10M
        assert parts == [
            "driver salary (Rp. 5.000.000/month)",
            "fuel (Rp. 9.066.667/month)",
            "maintenance (Rp. 10.000.000/month)",
        ]

    def test_order_ignores_magnitude(self):
        cfg = Configuration(operations=OperationsConfig(monthly_driver_salary=50_000_000))
        parts = operating_cost_clauses(compute(cfg), language="id")
        assert parts[0].startswith("gaji sopir")
        assert parts[1].startswith("BBM")
        assert parts[2].startswith("maintenance")

    def test_driver_clause_absent_without_salary(self, elf_config: Configuration):
        parts = operating_cost_clauses(compute(elf_config))
        assert not any(p.startswith("gaji sopir") for p in parts)
        assert len(parts) == 2

    def test_fuel_clause_absent_when_free(self):
        cfg = Configuration(operations=OperationsConfig(gasoline_price_per_liter=0))
        parts = operating_cost_clauses(compute(cfg), language="en")
        assert [p.split(" (")[0] for p in parts] == ["maintenance"]

    def test_no_clauses_omits_sentence(self, zero_lifecycle_config: Configuration):
        b = compute(zero_lifecycle_config)
        assert operating_cost_clauses(b) == []
        text = summarize(b)
        assert "Biaya operasional meliputi" not in text
        assert text.startswith("Total biaya per bulan yaitu Rp. 0 ")

    def test_clause_presence_matches_totals(self):
        for salary in (0, 3_000_000):
            for gas in (0, 6_800):
                for budget, km in ((0, 0), (10_000_000, 0), (0, 60_000)):
                    cfg = Configuration(operations=OperationsConfig(
                        monthly_driver_salary=salary, gasoline_price_per_liter=gas,
                        annual_maintenance_budget=budget, annual_km=km,
                    ))
                    b = compute(cfg)
                    r = b.recurring
                    expected = [
                        name for name, total in (
                            ("driver salary", r.total_driver_salary),
                            ("fuel", r.total_gasoline_cost),
                            ("maintenance", r.total_maintenance),
                        ) if total > 0
                    ]
                    parts = operating_cost_clauses(b, language="en")
                    assert [p.split(" (")[0] for p in parts] == expected


class TestComparisonNarrative:

    def test_lists_products_cheapest_first(self, elf_config: Configuration):
        text = summarize_comparison(compare_products(elf_config))
        assert "PRODUCT COMPARISON" in text
        assert text.index("ELF Type") < text.index("TRAGA Type") < text.index("GIGA Type")
        assert "Lowest TCO: ELF Type (Rp. 1.255.625.000)" in text
        assert "vs GIGA Type" in text

    def test_empty(self):
        assert summarize_comparison([]) == "No products to compare."

    def test_single_row_has_no_saving_line(self):
        rows = compare_products(Configuration(vehicle=VehicleConfig(product_type="giga")))[:1]
        assert "Saves" not in summarize_comparison(rows)
