"""Enums for the fencebom domain models.

Selection modes, unit types and error kinds are closed sets; code that
branches on them matches every member explicitly.
"""

from enum import IntEnum, StrEnum


class ProductFamily(StrEnum):
    """Product families, each served by one calculator."""

    WOOD_VERTICAL = "wood_vertical"
    WOOD_HORIZONTAL = "wood_horizontal"
    IRON = "iron"


class PostType(StrEnum):
    """Post material driving steel-only components and labor codes."""

    WOOD = "WOOD"
    STEEL = "STEEL"


class UnitType(StrEnum):
    """Unit of measure for a component role or catalog item."""

    EACH = "EA"
    BOX = "BOX"
    COIL = "COIL"
    BAG = "BAG"
    LINEAR_FOOT = "LF"

    @property
    def is_discrete(self) -> bool:
        """Discrete units are bought whole; linear feet are continuous."""
        return self is not UnitType.LINEAR_FOOT


class SelectionMode(StrEnum):
    """How an eligibility rule picks catalog items."""

    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    SPECIFIC = "specific"

    @property
    def specificity(self) -> int:
        """Higher wins: specific > subcategory > category."""
        return _SPECIFICITY[self]


_SPECIFICITY: dict[SelectionMode, int] = {
    SelectionMode.CATEGORY: 1,
    SelectionMode.SUBCATEGORY: 2,
    SelectionMode.SPECIFIC: 3,
}


class RuleKind(StrEnum):
    """Whether an eligibility rule selects materials or labor codes."""

    MATERIAL = "material"
    LABOR = "labor"


class LaborBasis(StrEnum):
    """Quantity driver for a labor role."""

    NET_LENGTH = "net_length"
    GATES = "gates"
    POSTS = "posts"
    SECTIONS = "sections"


class ParameterSource(StrEnum):
    """Override tier a resolved parameter came from."""

    STYLE = "style"
    CONFIGURATION = "configuration"
    PRODUCT_TYPE = "product_type"
    FALLBACK = "fallback"


class ErrorKind(StrEnum):
    """Closed set of engine error kinds."""

    CONFIGURATION = "configuration"
    AMBIGUOUS_RULE = "ambiguous_rule"
    FORMULA = "formula"
    PARAMETER_GAP = "parameter_gap"


class FormulaStage(IntEnum):
    """Fixed execution order for quantity formulas.

    1. selection of materials and labor codes
    2. counts that do not depend on a material's length (posts, rails)
    3. counts that depend on the selected material's dimensions
    4. counts driven by earlier counts (brackets, caps, consumables, labor)
    """

    SELECTION = 1
    LENGTH_INDEPENDENT = 2
    LENGTH_DEPENDENT = 3
    COUNT_DEPENDENT = 4
