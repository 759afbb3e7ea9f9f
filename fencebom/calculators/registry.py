"""Calculator registry: product family -> calculator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.calculators.iron import IronCalculator
from fencebom.calculators.wood_horizontal import WoodHorizontalCalculator
from fencebom.calculators.wood_vertical import WoodVerticalCalculator
from fencebom.exceptions import ConfigurationError
from fencebom.models.enums import ProductFamily

if TYPE_CHECKING:
    from fencebom.calculators.base import ProductCalculator

CALCULATOR_REGISTRY: dict[ProductFamily, type] = {
    ProductFamily.WOOD_VERTICAL: WoodVerticalCalculator,
    ProductFamily.WOOD_HORIZONTAL: WoodHorizontalCalculator,
    ProductFamily.IRON: IronCalculator,
}


def get_calculator(family: ProductFamily) -> ProductCalculator:
    """Return a calculator instance for a product family."""
    if family not in CALCULATOR_REGISTRY:
        msg = (
            f"No calculator registered for family '{family}'. "
            f"Available: {[str(f) for f in CALCULATOR_REGISTRY]}"
        )
        raise ConfigurationError(msg)
    return CALCULATOR_REGISTRY[family]()


def list_families() -> list[ProductFamily]:
    return list(CALCULATOR_REGISTRY)
