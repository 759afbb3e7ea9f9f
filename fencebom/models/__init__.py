"""Domain models for the fencebom calculation engine."""

from fencebom.models.catalog import (
    ComponentRole,
    EligibilityRule,
    FormulaParameter,
    LaborCode,
    LaborRate,
    Material,
    ProductStyle,
    ProductType,
    ProductTypeComponent,
)
from fencebom.models.configuration import CalculationInput, Configuration
from fencebom.models.enums import (
    ErrorKind,
    FormulaStage,
    LaborBasis,
    ParameterSource,
    PostType,
    ProductFamily,
    RuleKind,
    SelectionMode,
    UnitType,
)
from fencebom.models.result import (
    CalculationMetadata,
    CalculationResult,
    DebugTrace,
    LaborLineItem,
    MaterialLineItem,
    ParameterGap,
    ResolvedParameter,
)

__all__ = [
    "CalculationInput",
    "CalculationMetadata",
    "CalculationResult",
    "ComponentRole",
    "Configuration",
    "DebugTrace",
    "EligibilityRule",
    "ErrorKind",
    "FormulaParameter",
    "FormulaStage",
    "LaborBasis",
    "LaborCode",
    "LaborLineItem",
    "LaborRate",
    "Material",
    "MaterialLineItem",
    "ParameterGap",
    "ParameterSource",
    "PostType",
    "ProductFamily",
    "ProductStyle",
    "ProductType",
    "ProductTypeComponent",
    "ResolvedParameter",
    "RuleKind",
    "SelectionMode",
    "UnitType",
]
