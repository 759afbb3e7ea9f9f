"""Post-hole concrete shared by every product family.

A job uses either a premixed bag (the ``concrete`` role) or a three-part mix
of sand and gravel, portland cement and quickrock, each its own role. Every
bag is consumed per post at the rate carried by the selected material, for
example one red bag, 0.65 yellow bags or a tenth of a sand and gravel bag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.calculators.base import RoleFormula
from fencebom.models.enums import FormulaStage

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fencebom.context import CalculationContext

CONCRETE_ROLES = ("concrete", "concrete_sand", "concrete_cement", "concrete_quickrock")


def _bags(role: str):
    def compute(ctx: CalculationContext, qty: Mapping[str, float]) -> float:
        return ctx.post_count * ctx.material_per_post(role, "concrete_bags_per_post")

    return compute


CONCRETE_FORMULAS = tuple(
    RoleFormula(role, FormulaStage.COUNT_DEPENDENT, _bags(role)) for role in CONCRETE_ROLES
)
