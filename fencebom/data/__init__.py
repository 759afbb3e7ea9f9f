"""Catalog data layer for the fencebom calculation engine."""

from fencebom.data.repository import CatalogRepository
from fencebom.data.seed import SEED_CONFIGURATIONS

__all__ = [
    "CatalogRepository",
    "SEED_CONFIGURATIONS",
]
