"""Tests for quantity rounding, extended costs and totals."""

from __future__ import annotations

from decimal import Decimal

import pytest

from fencebom.models.enums import UnitType
from fencebom.models.result import LaborLineItem, MaterialLineItem
from fencebom.pricing import (
    extended_cost,
    price_labor,
    price_materials,
    round_quantity,
    summarize,
)


def _material(
    raw: float,
    unit_cost: float,
    unit_type: UnitType = UnitType.EACH,
    bundle_size: float = 1.0,
) -> MaterialLineItem:
    return MaterialLineItem(
        role="picket",
        role_name="Picket",
        material_id="mat-P601",
        material_sku="P601",
        material_name="1x6x6 Picket",
        raw_quantity=raw,
        unit_type=unit_type,
        unit_cost=unit_cost,
        bundle_size=bundle_size,
    )


def _labor(raw: float, rate: float) -> LaborLineItem:
    return LaborLineItem(
        role="install",
        role_name="Install",
        labor_code_id="lab-W03",
        labor_sku="W03",
        description="Nail Up",
        raw_quantity=raw,
        unit_type=UnitType.LINEAR_FOOT,
        rate=rate,
    )


class TestRoundQuantity:
    @pytest.mark.parametrize("unit_type", [UnitType.EACH, UnitType.BOX, UnitType.COIL, UnitType.BAG])
    def test_discrete_units_round_up(self, unit_type: UnitType) -> None:
        assert round_quantity(2.01, unit_type) == 3.0

    def test_whole_number_stays(self) -> None:
        assert round_quantity(13.0, UnitType.EACH) == 13.0

    def test_float_noise_ignored(self) -> None:
        assert round_quantity(13.000000000000002, UnitType.EACH) == 13.0

    def test_linear_feet_keep_decimals(self) -> None:
        assert round_quantity(100.5, UnitType.LINEAR_FOOT) == 100.5


class TestExtendedCost:
    def test_rounds_to_cents_half_up(self) -> None:
        assert extended_cost(1, 0.125) == Decimal("0.13")
        assert extended_cost(3, 0.335) == Decimal("1.01")

    def test_float_representation_does_not_leak(self) -> None:
        # 224 * 2.09 is 468.15999... in binary floating point
        assert extended_cost(224, 2.09) == Decimal("468.16")


class TestPriceLines:
    def test_material_quantity_and_cost(self) -> None:
        priced = price_materials([_material(223.636, 2.09)])[0]
        assert priced.raw_quantity == 223.636
        assert priced.quantity == 224
        assert priced.extended_cost == 468.16

    def test_linear_material_costed_on_decimal_quantity(self) -> None:
        priced = price_materials(
            [_material(100.5, 0.38, UnitType.LINEAR_FOOT, bundle_size=10)]
        )[0]
        assert priced.quantity == 100.5
        assert priced.extended_cost == 38.19
        assert priced.purchase_quantity == 110

    def test_labor_cost(self) -> None:
        priced = price_labor([_labor(100, 3.5)])[0]
        assert priced.quantity == 100
        assert priced.extended_cost == 350.0

    def test_input_items_untouched(self) -> None:
        item = _material(2.5, 1.0)
        price_materials([item])
        assert item.quantity == 0.0


class TestSummarize:
    def test_totals_are_sums_of_rounded_lines(self) -> None:
        materials = price_materials([_material(1, 0.125), _material(1, 0.125)])
        totals = summarize(materials, [], net_length=1)
        # Each line rounds to 0.13 before summing.
        assert totals.material == 0.26
        assert totals.total == 0.26

    def test_cost_per_foot(self) -> None:
        materials = price_materials([_material(224, 2.09)])
        labor = price_labor([_labor(100, 3.5)])
        totals = summarize(materials, labor, net_length=100)
        assert totals.material == 468.16
        assert totals.labor == 350.0
        assert totals.total == 818.16
        assert totals.per_foot == 8.18

    def test_empty(self) -> None:
        totals = summarize([], [], net_length=100)
        assert totals.total == 0.0
        assert totals.per_foot == 0.0
