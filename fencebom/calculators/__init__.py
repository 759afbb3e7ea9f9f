from fencebom.calculators.base import ProductCalculator, RoleFormula
from fencebom.calculators.registry import get_calculator, list_families

__all__ = ["ProductCalculator", "RoleFormula", "get_calculator", "list_families"]
