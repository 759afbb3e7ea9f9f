"""Tests for the ParameterResolver override hierarchy."""

from __future__ import annotations

import logging

import pytest

from fencebom.config import EngineSettings
from fencebom.data.repository import CatalogRepository
from fencebom.exceptions import ParameterGapError
from fencebom.models.catalog import (
    ComponentRole,
    FormulaParameter,
    ProductStyle,
    ProductType,
)
from fencebom.models.configuration import Configuration
from fencebom.models.enums import ErrorKind, ParameterSource, ProductFamily
from fencebom.resolvers.parameters import ParameterResolver

_TYPE = ProductType(
    code="wv",
    name="Wood Vertical",
    family=ProductFamily.WOOD_VERTICAL,
    default_post_spacing=8.0,
)
_STANDARD = ProductStyle(code="standard", name="Standard", product_type_code="wv")
_GOOD_NEIGHBOR = ProductStyle(
    code="good-neighbor",
    name="Good Neighbor",
    product_type_code="wv",
    formula_adjustments={"style_multiplier": 1.11, "waste_factor": 1.05},
)

_PARAMETERS = [
    FormulaParameter(key="waste_factor", value=1.025, product_type_code="wv"),
    FormulaParameter(key="style_multiplier", value=1.0, product_type_code="wv"),
    FormulaParameter(key="rail_count", value=2, product_type_code="wv"),
    FormulaParameter(
        key="side_multiplier", value=2.0, product_type_code="wv", role_code="trim"
    ),
    FormulaParameter(key="side_multiplier", value=1.0, product_type_code="wv"),
    FormulaParameter(
        key="waste_factor",
        value=1.10,
        product_type_code="wv",
        product_style_code="good-neighbor",
        role_code="picket",
    ),
    # Another product type's default must never leak in.
    FormulaParameter(key="nails_per_coil", value=250, product_type_code="other"),
]


@pytest.fixture()
def catalog() -> CatalogRepository:
    """Catalog with one product type, two styles and scoped parameters."""
    return CatalogRepository(
        product_types=[_TYPE],
        product_styles=[_STANDARD, _GOOD_NEIGHBOR],
        roles=[ComponentRole(code="picket", name="Picket")],
        parameters=_PARAMETERS,
    )


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _configuration(**overrides: object) -> Configuration:
    fields: dict[str, object] = {
        "id": "cfg-1",
        "sku": "T01",
        "product_type_code": "wv",
        "product_style_code": "standard",
        "height": 6,
    }
    fields.update(overrides)
    return Configuration(**fields)


def _resolver(
    catalog: CatalogRepository,
    style: ProductStyle = _STANDARD,
    settings: EngineSettings | None = None,
    **config_overrides: object,
) -> ParameterResolver:
    return ParameterResolver(
        catalog,
        _configuration(product_style_code=style.code, **config_overrides),
        _TYPE,
        style,
        settings or EngineSettings(),
    )


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_type_default(self, catalog: CatalogRepository) -> None:
        resolved = _resolver(catalog).resolve("waste_factor")
        assert resolved.value == 1.025
        assert resolved.source is ParameterSource.PRODUCT_TYPE

    def test_style_adjustment_beats_type_default(self, catalog: CatalogRepository) -> None:
        resolved = _resolver(catalog, _GOOD_NEIGHBOR).resolve("style_multiplier")
        assert resolved.value == 1.11
        assert resolved.source is ParameterSource.STYLE

    def test_style_row_beats_style_adjustment_for_its_role(
        self, catalog: CatalogRepository
    ) -> None:
        resolver = _resolver(catalog, _GOOD_NEIGHBOR)
        assert resolver.value("waste_factor", "picket") == 1.10
        assert resolver.value("waste_factor") == 1.05

    def test_configuration_field_beats_type_default(self, catalog: CatalogRepository) -> None:
        resolved = _resolver(catalog, rail_count=3).resolve("rail_count")
        assert resolved.value == 3
        assert resolved.source is ParameterSource.CONFIGURATION

    def test_unset_configuration_field_falls_through(self, catalog: CatalogRepository) -> None:
        resolved = _resolver(catalog).resolve("rail_count")
        assert resolved.value == 2
        assert resolved.source is ParameterSource.PRODUCT_TYPE

    def test_post_spacing_from_type(self, catalog: CatalogRepository) -> None:
        resolved = _resolver(catalog).resolve("post_spacing")
        assert resolved.value == 8.0
        assert resolved.source is ParameterSource.PRODUCT_TYPE

    def test_post_spacing_from_configuration(self, catalog: CatalogRepository) -> None:
        resolved = _resolver(catalog, post_spacing=6).resolve("post_spacing")
        assert resolved.value == 6.0
        assert resolved.source is ParameterSource.CONFIGURATION

    def test_role_scoped_type_default(self, catalog: CatalogRepository) -> None:
        resolver = _resolver(catalog)
        assert resolver.value("side_multiplier", "trim") == 2.0
        assert resolver.value("side_multiplier", "cap") == 1.0
        assert resolver.value("side_multiplier") == 1.0


# ---------------------------------------------------------------------------
# Fallbacks and gaps
# ---------------------------------------------------------------------------


class TestFallbacks:
    def test_engine_fallback_records_gap(self, catalog: CatalogRepository) -> None:
        resolver = _resolver(catalog)
        resolved = resolver.resolve("nails_per_coil")
        assert resolved.value == 300.0
        assert resolved.source is ParameterSource.FALLBACK
        assert [gap.key for gap in resolver.gaps] == ["nails_per_coil"]

    def test_other_type_rows_ignored(self, catalog: CatalogRepository) -> None:
        assert _resolver(catalog).value("nails_per_coil") != 250

    def test_unknown_key_resolves_to_zero(self, catalog: CatalogRepository) -> None:
        resolver = _resolver(catalog)
        assert resolver.value("gate_width") == 0.0
        assert resolver.gaps[0].key == "gate_width"

    def test_gap_is_logged(
        self, catalog: CatalogRepository, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="fencebom.resolvers.parameters"):
            _resolver(catalog).value("brackets_per_rail")
        assert "brackets_per_rail" in caplog.text
        assert "cfg-1" in caplog.text

    def test_repeated_lookup_records_one_gap(self, catalog: CatalogRepository) -> None:
        resolver = _resolver(catalog)
        resolver.value("nails_per_coil")
        resolver.value("nails_per_coil")
        assert len(resolver.gaps) == 1

    def test_custom_fallbacks_from_settings(self, catalog: CatalogRepository) -> None:
        settings = EngineSettings(fallback_parameters={"nails_per_coil": 250.0})
        assert _resolver(catalog, settings=settings).value("nails_per_coil") == 250.0

    def test_strict_mode_raises(self, catalog: CatalogRepository) -> None:
        settings = EngineSettings(strict_parameters=True)
        resolver = _resolver(catalog, settings=settings)
        with pytest.raises(ParameterGapError, match="nails_per_coil") as info:
            resolver.value("nails_per_coil")
        assert info.value.kind is ErrorKind.PARAMETER_GAP
        assert info.value.configuration_id == "cfg-1"

    def test_strict_mode_allows_resolved_keys(self, catalog: CatalogRepository) -> None:
        settings = EngineSettings(strict_parameters=True)
        assert _resolver(catalog, settings=settings).value("waste_factor") == 1.025


class TestTrace:
    def test_resolved_keyed_by_role(self, catalog: CatalogRepository) -> None:
        resolver = _resolver(catalog)
        resolver.value("side_multiplier", "trim")
        resolver.value("waste_factor")
        resolved = resolver.resolved
        assert set(resolved) == {"trim.side_multiplier", "waste_factor"}
        assert resolved["trim.side_multiplier"].role == "trim"
        assert resolved["waste_factor"].role is None
