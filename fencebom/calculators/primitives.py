"""Quantity primitives shared by every product calculator.

All functions are pure. ``*_raw`` variants return the unrounded value that
is reported on a line item; the rounding policy turns it into a count.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from fencebom.models.enums import PostType

if TYPE_CHECKING:
    from fencebom.context import CalculationContext

INCHES_PER_FOOT = 12.0

_PLACES = 9


def ceil_units(value: float) -> int:
    """Round up to a whole unit, ignoring float noise below 1e-9."""
    return math.ceil(round(value, _PLACES))


def section_count(net_length: float, post_spacing: float) -> int:
    """Gaps between posts: ``ceil(net_length / post_spacing)``."""
    return ceil_units(net_length / post_spacing)


def extra_line_posts(lines: int) -> int:
    """Additional terminal posts where independent runs meet."""
    if lines <= 2:
        return 0
    return math.ceil((lines - 2) / 2)


def post_count(net_length: float, post_spacing: float, lines: int) -> int:
    """``ceil(net_length / post_spacing) + 1`` plus extra posts for lines > 2."""
    return section_count(net_length, post_spacing) + 1 + extra_line_posts(lines)


def linear_coverage_raw(
    net_length: float,
    component_width: float,
    waste_factor: float,
    style_multiplier: float,
) -> float:
    """Boards side by side along the run, before rounding."""
    return (
        (net_length * INCHES_PER_FOOT / component_width)
        * waste_factor
        * style_multiplier
    )


def linear_coverage(
    net_length: float,
    component_width: float,
    waste_factor: float,
    style_multiplier: float,
) -> int:
    """Pickets: ``ceil((net_length * 12 / width) * waste * multiplier)``."""
    return ceil_units(
        linear_coverage_raw(net_length, component_width, waste_factor, style_multiplier)
    )


def per_section(sections: int, count_per_section: float) -> float:
    """Repeating members per section, e.g. rails."""
    return sections * count_per_section


def length_coverage_raw(
    net_length: float, material_length: float, multiplier: float = 1.0
) -> float:
    """Runs of a material laid end to end, before rounding."""
    return net_length * multiplier / material_length


def length_coverage(
    net_length: float, material_length: float, multiplier: float = 1.0
) -> int:
    """Cap, trim and rot boards: ``ceil(net_length * multiplier / length)``."""
    return ceil_units(length_coverage_raw(net_length, material_length, multiplier))


def boards_high(height_ft: float, board_width_in: float) -> int:
    """Rows of horizontal boards needed to reach the fence height."""
    return ceil_units(height_ft * INCHES_PER_FOOT / board_width_in)


def horizontal_boards_raw(
    net_length: float,
    height_ft: float,
    board_width_in: float,
    board_length_ft: float,
    side_multiplier: float,
    waste_factor: float,
) -> float:
    """Horizontal boards: rows times runs per row, before rounding."""
    rows = boards_high(height_ft, board_width_in)
    return rows * net_length * side_multiplier / board_length_ft * waste_factor


def is_steel_post(context: CalculationContext) -> bool:
    return context.post_type is PostType.STEEL


def gated_on_steel(context: CalculationContext, role: str) -> bool:
    """Steel-only components need steel posts and a mapped material."""
    return is_steel_post(context) and context.has_material(role)
