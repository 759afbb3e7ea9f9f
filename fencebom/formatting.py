"""Formatting helpers for calculation output.

Human-readable currency and quantity strings the way estimators read a
material list (e.g. '249 EA', '100.5 LF', '$1,234.56').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fencebom.models.enums import UnitType


def format_currency(amount: float) -> str:
    """Format a currency amount with cents and comma separators.

    - Amounts >= $10,000 drop the cents (e.g., '$12,346')
    - Amounts < $10,000 keep them (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_quantity(quantity: float, unit_type: UnitType) -> str:
    """Format a quantity with its unit.

    Discrete units print as whole numbers; linear feet keep up to two
    decimals with trailing zeros stripped.
    """
    if unit_type.is_discrete:
        return f"{quantity:,.0f} {unit_type.value}"
    text = f"{quantity:,.2f}".rstrip("0").rstrip(".")
    return f"{text} {unit_type.value}"


def format_cost_per_foot(amount: float) -> str:
    """Format a per-linear-foot cost as '$XX.XX / LF'."""
    return f"${amount:,.2f} / LF"
