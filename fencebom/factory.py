"""Factory functions for creating pre-configured engines and catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.data.repository import CatalogRepository
from fencebom.data.seed import (
    SEED_LABOR_CODES,
    SEED_LABOR_RATES,
    SEED_MATERIALS,
    SEED_PARAMETERS,
    SEED_PRODUCT_TYPES,
    SEED_ROLES,
    SEED_RULES,
    SEED_STYLES,
)
from fencebom.engine import FenceBomEngine

if TYPE_CHECKING:
    from fencebom.config import EngineSettings


def create_default_engine(settings: EngineSettings | None = None) -> FenceBomEngine:
    """Create a FenceBomEngine with default settings.

    Returns:
        A FenceBomEngine ready to calculate configurations.

    Example::

        from fencebom import create_default_engine, load_seed_catalog

        engine = create_default_engine()
        result = engine.calculate(configuration, load_seed_catalog())
    """
    return FenceBomEngine(settings)


def load_seed_catalog() -> CatalogRepository:
    """Build a CatalogRepository from the built-in seed catalog."""
    return CatalogRepository(
        product_types=SEED_PRODUCT_TYPES,
        product_styles=SEED_STYLES,
        roles=SEED_ROLES,
        materials=SEED_MATERIALS,
        labor_codes=SEED_LABOR_CODES,
        labor_rates=SEED_LABOR_RATES,
        rules=SEED_RULES,
        parameters=SEED_PARAMETERS,
    )
