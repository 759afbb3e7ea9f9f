"""Calculator protocol and the shared formula runner.

Each product family is a small class satisfying :class:`ProductCalculator`.
Families declare their role formulas as data; :func:`run_material_formulas`
and :func:`run_labor` execute them in the fixed stage order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from fencebom.exceptions import ConfigurationError, FormulaError
from fencebom.formula import evaluate_formula
from fencebom.models.enums import FormulaStage, LaborBasis, ProductFamily
from fencebom.models.result import LaborLineItem, MaterialLineItem
from fencebom.pricing import round_quantity

if TYPE_CHECKING:
    from fencebom.context import CalculationContext

logger = logging.getLogger(__name__)

POST_ROLE = "post"

QuantityFn = Callable[["CalculationContext", Mapping[str, float]], float]
Predicate = Callable[["CalculationContext", str], bool]


class ProductCalculator(Protocol):
    """Capability every product family provides."""

    family: ProductFamily
    parameter_keys: tuple[str, ...]
    # Roles whose material width / length feeds a formula.
    width_roles: tuple[str, ...]
    length_roles: tuple[str, ...]

    def compute_materials(self, context: CalculationContext) -> list[MaterialLineItem]: ...

    def compute_labor(self, context: CalculationContext) -> list[LaborLineItem]: ...


def always(context: CalculationContext, role: str) -> bool:  # noqa: ARG001
    return True


@dataclass(frozen=True)
class RoleFormula:
    """Built-in quantity formula for one material role.

    ``compute`` receives the context and the quantities computed so far
    (``<role>_qty``). ``applies`` gates conditional components.
    """

    role: str
    stage: FormulaStage
    compute: QuantityFn
    applies: Predicate = always


_LABOR_STAGES: dict[LaborBasis, FormulaStage] = {
    LaborBasis.NET_LENGTH: FormulaStage.LENGTH_INDEPENDENT,
    LaborBasis.GATES: FormulaStage.LENGTH_INDEPENDENT,
    LaborBasis.POSTS: FormulaStage.COUNT_DEPENDENT,
    LaborBasis.SECTIONS: FormulaStage.COUNT_DEPENDENT,
}


def run_material_formulas(
    context: CalculationContext, formulas: tuple[RoleFormula, ...]
) -> list[MaterialLineItem]:
    """Evaluate material formulas in stage order and emit line items.

    Roles without a mapped material are skipped. A custom formula on the
    configuration replaces the built-in one, except on the post line, which
    always takes the context post count. Mapped roles that have neither are
    a configuration error.
    """
    by_role = {formula.role: formula for formula in formulas}
    for role in context.materials:
        if role not in by_role:
            if role not in context.custom_formulas:
                msg = f"No formula for role '{role}' in family '{context.family}'"
                raise ConfigurationError(
                    msg, configuration_id=context.configuration_id, role=role
                )
            by_role[role] = RoleFormula(
                role=role,
                stage=FormulaStage.COUNT_DEPENDENT,
                compute=_unreachable,
            )

    ordered = sorted(by_role.values(), key=lambda f: f.stage)
    variables = context.variables()
    quantities: dict[str, float] = {}
    items: list[MaterialLineItem] = []

    for formula in ordered:
        selected = context.materials.get(formula.role)
        if selected is None:
            continue
        if not formula.applies(context, formula.role):
            logger.debug(
                "Skipping %s for %s: condition not met",
                formula.role,
                context.configuration_id,
            )
            continue

        custom = context.custom_formulas.get(formula.role)
        if custom is not None and formula.role == POST_ROLE:
            # Already evaluated once into the context post count.
            raw = float(context.post_count)
        elif custom is not None:
            raw = evaluate_custom(custom, {**variables, **quantities}, formula.role)
        else:
            raw = formula.compute(context, quantities)

        unit_type = selected.role.unit_type
        quantities[f"{formula.role}_qty"] = round_quantity(raw, unit_type)
        items.append(
            MaterialLineItem(
                role=formula.role,
                role_name=selected.role.name,
                material_id=selected.material.id,
                material_sku=selected.material.sku,
                material_name=selected.material.name,
                raw_quantity=raw,
                unit_type=unit_type,
                unit_cost=selected.material.unit_cost,
                bundle_size=selected.material.bundle_size,
                formula=custom,
            )
        )
    return items


def labor_quantity(context: CalculationContext, basis: LaborBasis) -> float:
    match basis:
        case LaborBasis.NET_LENGTH:
            return context.net_length
        case LaborBasis.GATES:
            return float(context.gates)
        case LaborBasis.POSTS:
            return float(context.post_count)
        case LaborBasis.SECTIONS:
            return float(context.section_count)


def run_labor(context: CalculationContext) -> list[LaborLineItem]:
    """Emit labor lines for every selected labor role.

    Length-driven labor comes before count-driven labor. Custom formulas
    see the material quantities on the context. Lines whose quantity is
    zero (no gates, for example) are omitted.
    """
    selections = sorted(
        context.labor.values(),
        key=lambda s: _LABOR_STAGES[s.role.labor_basis],  # type: ignore[index]
    )
    variables = context.variables()
    items: list[LaborLineItem] = []

    for selected in selections:
        role = selected.role
        custom = context.custom_formulas.get(role.code)
        if custom is not None:
            raw = evaluate_custom(custom, variables, role.code)
        else:
            raw = labor_quantity(context, role.labor_basis)  # type: ignore[arg-type]

        if raw <= 0:
            continue

        items.append(
            LaborLineItem(
                role=role.code,
                role_name=role.name,
                labor_code_id=selected.labor_code.id,
                labor_sku=selected.labor_code.sku,
                description=selected.labor_code.description,
                raw_quantity=raw,
                unit_type=selected.labor_code.unit_type,
                rate=selected.rate,
                formula=custom,
            )
        )
    return items


def _unreachable(context: CalculationContext, quantities: Mapping[str, float]) -> float:
    msg = "custom-only role evaluated without its formula"
    raise AssertionError(msg)


def evaluate_custom(formula: str, variables: Mapping[str, float], role: str) -> float:
    """Evaluate a configuration's custom formula; quantities cannot be negative."""
    raw = evaluate_formula(formula, variables, role=role)
    if raw < 0:
        msg = f"Custom formula for role '{role}' produced a negative quantity: {raw}"
        raise FormulaError(msg, role=role, formula=formula)
    return raw
