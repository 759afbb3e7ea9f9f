"""Cost aggregation: quantity rounding, extended costs and totals.

Rounding is two-tiered. Discrete unit types round up to whole purchasable
units; linear feet keep decimal precision for costing. Extended costs are
quantized to cents per line, and totals are sums of those rounded lines.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fencebom.models.enums import UnitType
    from fencebom.models.result import LaborLineItem, MaterialLineItem

_CENT = Decimal("0.01")
_QUANTITY_PLACES = 9


def round_quantity(raw: float, unit_type: UnitType) -> float:
    """Apply the costing rounding policy to a raw quantity.

    The raw value is first trimmed to 9 decimal places so float noise such
    as ``13.000000000000002`` does not buy an extra unit.
    """
    trimmed = round(raw, _QUANTITY_PLACES)
    if unit_type.is_discrete:
        return float(math.ceil(trimmed))
    return trimmed


def to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def extended_cost(quantity: float, unit_cost: float) -> Decimal:
    """Quantity times unit cost, quantized to cents (half up)."""
    return (to_decimal(quantity) * to_decimal(unit_cost)).quantize(
        _CENT, rounding=ROUND_HALF_UP
    )


def price_materials(items: Iterable[MaterialLineItem]) -> list[MaterialLineItem]:
    """Round each material quantity and attach its extended cost."""
    priced: list[MaterialLineItem] = []
    for item in items:
        quantity = round_quantity(item.raw_quantity, item.unit_type)
        priced.append(
            item.model_copy(
                update={
                    "quantity": quantity,
                    "extended_cost": float(extended_cost(quantity, item.unit_cost)),
                }
            )
        )
    return priced


def price_labor(items: Iterable[LaborLineItem]) -> list[LaborLineItem]:
    """Round each labor quantity and attach its extended cost."""
    priced: list[LaborLineItem] = []
    for item in items:
        quantity = round_quantity(item.raw_quantity, item.unit_type)
        priced.append(
            item.model_copy(
                update={
                    "quantity": quantity,
                    "extended_cost": float(extended_cost(quantity, item.rate)),
                }
            )
        )
    return priced


@dataclass(frozen=True)
class CostTotals:
    """Totals over already-priced line items."""

    material: float
    labor: float
    total: float
    per_foot: float


def summarize(
    materials: Iterable[MaterialLineItem],
    labor: Iterable[LaborLineItem],
    net_length: float,
) -> CostTotals:
    """Sum priced line items; never re-rounds the sum of raw products."""
    material_total = sum(
        (to_decimal(item.extended_cost) for item in materials), Decimal("0")
    )
    labor_total = sum((to_decimal(item.extended_cost) for item in labor), Decimal("0"))
    total = material_total + labor_total

    per_foot = Decimal("0")
    if net_length > 0:
        per_foot = (total / to_decimal(net_length)).quantize(
            _CENT, rounding=ROUND_HALF_UP
        )

    return CostTotals(
        material=float(material_total),
        labor=float(labor_total),
        total=float(total),
        per_foot=float(per_foot),
    )
