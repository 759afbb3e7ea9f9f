"""Wood vertical (picket) fence calculator.

Posts and rails follow the post spacing, pickets cover the run side by
side, cap/trim/rot boards are laid end to end, and steel-post hardware is
driven by the post count.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.calculators.base import RoleFormula, run_labor, run_material_formulas
from fencebom.calculators.concrete import CONCRETE_FORMULAS
from fencebom.calculators.primitives import (
    gated_on_steel,
    length_coverage_raw,
    linear_coverage_raw,
    per_section,
)
from fencebom.models.enums import FormulaStage, ProductFamily

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fencebom.context import CalculationContext
    from fencebom.models.result import LaborLineItem, MaterialLineItem


def _posts(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.post_count)


def _rails(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return per_section(ctx.section_count, ctx.parameter("rail_count"))


def _pickets(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return linear_coverage_raw(
        ctx.net_length,
        ctx.material_width("picket"),
        ctx.parameter("waste_factor", "picket"),
        ctx.parameter("style_multiplier", "picket"),
    )


def _end_to_end(role: str):
    def compute(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
        return length_coverage_raw(
            ctx.net_length,
            ctx.material_length(role),
            ctx.parameter("side_multiplier", role),
        )

    return compute


def _brackets(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return ctx.post_count * ctx.parameter("rail_count")


def _steel_post_caps(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.post_count)


def _picket_nails(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    nails = qty["picket_qty"] * ctx.parameter("rail_count") * ctx.parameter(
        "nails_per_picket"
    )
    return nails / ctx.parameter("nails_per_coil")


class WoodVerticalCalculator:
    family = ProductFamily.WOOD_VERTICAL
    parameter_keys = (
        "rail_count",
        "waste_factor",
        "style_multiplier",
        "side_multiplier",
        "nails_per_picket",
        "nails_per_coil",
        "concrete_bags_per_post",
    )
    width_roles = ("picket",)
    length_roles = ("cap", "trim", "rot_board")
    formulas = (
        RoleFormula("post", FormulaStage.LENGTH_INDEPENDENT, _posts),
        RoleFormula("rail", FormulaStage.LENGTH_INDEPENDENT, _rails),
        RoleFormula("picket", FormulaStage.LENGTH_DEPENDENT, _pickets),
        RoleFormula("cap", FormulaStage.LENGTH_DEPENDENT, _end_to_end("cap")),
        RoleFormula("trim", FormulaStage.LENGTH_DEPENDENT, _end_to_end("trim")),
        RoleFormula("rot_board", FormulaStage.LENGTH_DEPENDENT, _end_to_end("rot_board")),
        RoleFormula("bracket", FormulaStage.COUNT_DEPENDENT, _brackets, gated_on_steel),
        RoleFormula(
            "steel_post_cap", FormulaStage.COUNT_DEPENDENT, _steel_post_caps, gated_on_steel
        ),
        RoleFormula("nails_picket", FormulaStage.COUNT_DEPENDENT, _picket_nails),
        *CONCRETE_FORMULAS,
    )

    def compute_materials(self, context: CalculationContext) -> list[MaterialLineItem]:
        return run_material_formulas(context, self.formulas)

    def compute_labor(self, context: CalculationContext) -> list[LaborLineItem]:
        return run_labor(context)
