"""Tests for product comparison and option sensitivity."""

from __future__ import annotations

import pytest

from vehicle_tco.config import Configuration, OperationsConfig, VehicleConfig
from vehicle_tco.config.options import DOWN_PAYMENT_OPTIONS, OPTION_SETS, Option
from vehicle_tco.engine import compare_products, compute, run_option_sensitivity
from vehicle_tco.errors import InvalidInput


# ═══════════════════════════════════════════════════════════════════════════
# Product comparison
# ═══════════════════════════════════════════════════════════════════════════

class TestCompareProducts:

    def test_one_row_per_product(self, elf_config: Configuration):
        rows = compare_products(elf_config)
        assert {r.product_type for r in rows} == {"elf", "traga", "giga"}

    def test_sorted_by_tco(self, elf_config: Configuration):
        rows = compare_products(elf_config)
        tcos = [r.total_cost_of_ownership for r in rows]
        assert tcos == sorted(tcos)
        assert rows[0].product_type == "elf"

    def test_matches_engine(self, elf_config: Configuration):
        elf = next(r for r in compare_products(elf_config) if r.product_type == "elf")
        b = compute(elf_config)
        assert elf.total_cost_of_ownership == b.total_cost_of_ownership
        assert elf.monthly_payment == b.ownership.monthly_payment

    def test_traga_figures(self, elf_config: Configuration):
        traga = next(r for r in compare_products(elf_config) if r.product_type == "traga")
        # 112.5M + 624.375M + 157.5M + 5M + 360M + 255M
        assert traga.total_cost_of_ownership == pytest.approx(1_514_375_000)
        assert traga.label == "TRAGA Type"

    def test_custom_price_dropped(self):
        cfg = Configuration(vehicle=VehicleConfig(vehicle_price=1))
        prices = {r.product_type: r.vehicle_price for r in compare_products(cfg)}
        assert prices == {"elf": 350_000_000, "traga": 450_000_000, "giga": 750_000_000}

    def test_other_inputs_kept(self):
        cfg = Configuration(operations=OperationsConfig(monthly_driver_salary=4_000_000))
        for row in compare_products(cfg):
            base = Configuration(
                vehicle=VehicleConfig(product_type=row.product_type),
                operations=OperationsConfig(monthly_driver_salary=4_000_000),
            )
            assert row.total_cost_of_ownership == compute(base).total_cost_of_ownership


# ═══════════════════════════════════════════════════════════════════════════
# Option sensitivity
# ═══════════════════════════════════════════════════════════════════════════

class TestOptionSensitivity:

    def test_base_tco(self, elf_config: Configuration):
        result = run_option_sensitivity(elf_config)
        assert result.base_tco == compute(elf_config).total_cost_of_ownership

    def test_one_bar_per_option_set(self, elf_config: Configuration):
        result = run_option_sensitivity(elf_config)
        assert {b.param_path for b in result.bars} == set(OPTION_SETS)

    def test_sorted_by_swing(self, elf_config: Configuration):
        deltas = [b.delta_tco for b in run_option_sensitivity(elf_config).bars]
        assert deltas == sorted(deltas, reverse=True)

    def test_points_follow_option_order(self, elf_config: Configuration):
        bars = {b.param_path: b for b in run_option_sensitivity(elf_config).bars}
        life = bars["operations.lifecycle_years"]
        assert [p.value for p in life.points] == [4, 5, 6]
        assert [p.label for p in life.points] == ["4 Years", "5 Years", "6 Years"]
        assert life.base_value == 5

    def test_lease_swing_is_one_year_of_interest(self, elf_config: Configuration):
        bars = {b.param_path: b for b in run_option_sensitivity(elf_config).bars}
        # 262.5M × 0.17 = 44.625M per lease year
        assert bars["finance.lease_years"].delta_tco == pytest.approx(44_625_000)

    def test_depreciation_has_no_swing(self, elf_config: Configuration):
        bars = {b.param_path: b for b in run_option_sensitivity(elf_config).bars}
        assert bars["finance.depreciation_rate"].delta_tco == 0

    def test_swept_point_matches_engine(self, elf_config: Configuration):
        bars = {b.param_path: b for b in run_option_sensitivity(elf_config).bars}
        half_down = bars["finance.down_payment_rate"].points[2]
        cfg = elf_config.model_copy(
            update={"finance": elf_config.finance.model_copy(update={"down_payment_rate": 0.50})},
        )
        assert half_down.total_cost_of_ownership == compute(cfg).total_cost_of_ownership

    def test_base_config_untouched(self, elf_config: Configuration):
        before = elf_config.model_dump()
        run_option_sensitivity(elf_config)
        assert elf_config.model_dump() == before

    def test_unknown_path_skipped(self, elf_config: Configuration):
        result = run_option_sensitivity(elf_config, {"finance.balloon_rate": DOWN_PAYMENT_OPTIONS})
        assert result.bars == []

    def test_custom_sweep(self, elf_config: Configuration):
        result = run_option_sensitivity(elf_config, {"finance.down_payment_rate": DOWN_PAYMENT_OPTIONS})
        assert len(result.bars) == 1
        assert len(result.bars[0].points) == 3

    def test_text_option_sweep(self, elf_config: Configuration):
        sweep = {"vehicle.product_type": (Option("elf", "ELF Type"), Option("giga", "GIGA Type"))}
        bar = run_option_sensitivity(elf_config, sweep).bars[0]
        assert bar.base_value == "elf"
        assert [p.value for p in bar.points] == ["elf", "giga"]
        assert bar.min_tco == compute(elf_config).total_cost_of_ownership
        assert bar.delta_tco > 0

    def test_zero_fuel_efficiency_rejected(self, elf_config: Configuration):
        sweep = {"operations.fuel_efficiency_km_per_liter": (Option(0, "0 km/liter"), Option(8, "8 km/liter"))}
        with pytest.raises(InvalidInput) as exc_info:
            run_option_sensitivity(elf_config, sweep)
        assert exc_info.value.errors[0]["field"] == "operations.fuel_efficiency_km_per_liter"

    def test_zero_lease_rejected(self, elf_config: Configuration):
        with pytest.raises(InvalidInput):
            run_option_sensitivity(elf_config, {"finance.lease_years": (Option(0, "0 Years"),)})

    def test_out_of_range_rate_rejected(self, elf_config: Configuration):
        with pytest.raises(InvalidInput):
            run_option_sensitivity(elf_config, {"finance.interest_rate": (Option(1.5, "150%"),)})
