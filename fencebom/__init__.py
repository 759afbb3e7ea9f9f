"""fencebom: rule-driven bill of materials and labor engine for fences.

Usage::

    from fencebom import create_default_engine, load_seed_catalog

    engine = create_default_engine()
    catalog = load_seed_catalog()
    result = engine.calculate(configuration, catalog, CalculationInput(net_length=100))
"""

from fencebom.config import EngineSettings
from fencebom.data.repository import CatalogRepository
from fencebom.engine import FenceBomEngine
from fencebom.exceptions import (
    AmbiguousRuleError,
    ConfigurationError,
    FenceBomError,
    FormulaError,
    ParameterGapError,
)
from fencebom.factory import create_default_engine, load_seed_catalog
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
    LaborBasis,
    PostType,
    ProductFamily,
    SelectionMode,
    UnitType,
)
from fencebom.models.result import (
    CalculationResult,
    LaborLineItem,
    MaterialLineItem,
)
from fencebom.services.repricing import RepricingReport, reprice_catalog

__all__ = [
    "AmbiguousRuleError",
    "CalculationInput",
    "CalculationResult",
    "CatalogRepository",
    "ComponentRole",
    "Configuration",
    "ConfigurationError",
    "EligibilityRule",
    "EngineSettings",
    "ErrorKind",
    "FenceBomEngine",
    "FenceBomError",
    "FormulaError",
    "FormulaParameter",
    "LaborBasis",
    "LaborCode",
    "LaborLineItem",
    "LaborRate",
    "Material",
    "MaterialLineItem",
    "ParameterGapError",
    "PostType",
    "ProductFamily",
    "ProductStyle",
    "ProductType",
    "ProductTypeComponent",
    "RepricingReport",
    "SelectionMode",
    "UnitType",
    "create_default_engine",
    "load_seed_catalog",
    "reprice_catalog",
]
