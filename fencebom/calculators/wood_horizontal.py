"""Wood horizontal fence calculator.

Boards run post to post in rows stacked to the fence height; nailers are one
per section and vertical trim is sold by the linear foot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.calculators.base import RoleFormula, run_labor, run_material_formulas
from fencebom.calculators.concrete import CONCRETE_FORMULAS
from fencebom.calculators.primitives import (
    gated_on_steel,
    horizontal_boards_raw,
    length_coverage_raw,
)
from fencebom.models.enums import FormulaStage, ProductFamily

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fencebom.context import CalculationContext
    from fencebom.models.result import LaborLineItem, MaterialLineItem


def _posts(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.post_count)


def _boards(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return horizontal_boards_raw(
        ctx.net_length,
        ctx.height,
        ctx.material_width("board"),
        ctx.material_length("board"),
        ctx.parameter("side_multiplier", "board"),
        ctx.parameter("waste_factor", "board"),
    )


def _nailers(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.section_count)


def _cap(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return length_coverage_raw(
        ctx.net_length,
        ctx.material_length("cap"),
        ctx.parameter("side_multiplier", "cap"),
    )


def _vertical_trim(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    # Linear feet down each post face, costed continuously.
    return ctx.post_count * ctx.height * ctx.parameter("side_multiplier", "vertical_trim")


def _steel_post_caps(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.post_count)


class WoodHorizontalCalculator:
    family = ProductFamily.WOOD_HORIZONTAL
    parameter_keys = (
        "waste_factor",
        "side_multiplier",
        "concrete_bags_per_post",
    )
    width_roles = ("board",)
    length_roles = ("board", "cap")
    formulas = (
        RoleFormula("post", FormulaStage.LENGTH_INDEPENDENT, _posts),
        RoleFormula("nailer", FormulaStage.LENGTH_INDEPENDENT, _nailers),
        RoleFormula("board", FormulaStage.LENGTH_DEPENDENT, _boards),
        RoleFormula("cap", FormulaStage.LENGTH_DEPENDENT, _cap),
        RoleFormula("vertical_trim", FormulaStage.COUNT_DEPENDENT, _vertical_trim),
        RoleFormula(
            "steel_post_cap", FormulaStage.COUNT_DEPENDENT, _steel_post_caps, gated_on_steel
        ),
        *CONCRETE_FORMULAS,
    )

    def compute_materials(self, context: CalculationContext) -> list[MaterialLineItem]:
        return run_material_formulas(context, self.formulas)

    def compute_labor(self, context: CalculationContext) -> list[LaborLineItem]:
        return run_labor(context)
