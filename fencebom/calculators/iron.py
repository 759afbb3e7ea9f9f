"""Ornamental iron fence calculator.

The post spacing doubles as the panel width. Panels are fractional until
rounded so that a short final run still buys a whole panel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.calculators.base import RoleFormula, run_labor, run_material_formulas
from fencebom.calculators.concrete import CONCRETE_FORMULAS
from fencebom.calculators.primitives import gated_on_steel
from fencebom.models.enums import FormulaStage, ProductFamily

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fencebom.context import CalculationContext
    from fencebom.models.result import LaborLineItem, MaterialLineItem


def _posts(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.post_count)


def _panels(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return ctx.net_length / ctx.post_spacing


def _brackets(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    panels = qty.get("panel_qty", float(ctx.section_count))
    return panels * ctx.parameter("rail_count") * ctx.parameter("brackets_per_rail")


def _steel_post_caps(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
    return float(ctx.post_count)


class IronCalculator:
    family = ProductFamily.IRON
    parameter_keys = ("rail_count", "brackets_per_rail", "concrete_bags_per_post")
    width_roles: tuple[str, ...] = ()
    length_roles: tuple[str, ...] = ()
    formulas = (
        RoleFormula("post", FormulaStage.LENGTH_INDEPENDENT, _posts),
        RoleFormula("panel", FormulaStage.LENGTH_DEPENDENT, _panels),
        RoleFormula("bracket", FormulaStage.COUNT_DEPENDENT, _brackets, gated_on_steel),
        RoleFormula(
            "steel_post_cap", FormulaStage.COUNT_DEPENDENT, _steel_post_caps, gated_on_steel
        ),
        *CONCRETE_FORMULAS,
    )

    def compute_materials(self, context: CalculationContext) -> list[MaterialLineItem]:
        return run_material_formulas(context, self.formulas)

    def compute_labor(self, context: CalculationContext) -> list[LaborLineItem]:
        return run_labor(context)
