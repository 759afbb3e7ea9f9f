"""Tests for the public API surface of the fencebom package.

Verifies that consumers can import everything they need from the top-level
``fencebom`` package, use ``create_default_engine`` for quick setup, and
round-trip results through JSON serialization.
"""

from __future__ import annotations

import json

from fencebom import (
    AmbiguousRuleError,
    CalculationInput,
    CalculationResult,
    CatalogRepository,
    Configuration,
    ConfigurationError,
    EngineSettings,
    FenceBomEngine,
    FenceBomError,
    FormulaError,
    ParameterGapError,
    PostType,
    RepricingReport,
    UnitType,
    create_default_engine,
    load_seed_catalog,
    reprice_catalog,
)
from fencebom.data import SEED_CONFIGURATIONS

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sample_configuration() -> Configuration:
    """A wood vertical SKU mapped onto seed materials."""
    return Configuration(
        id="cfg-api",
        sku="API01",
        product_type_code="wood-vertical",
        product_style_code="standard",
        height=6,
        post_type=PostType.WOOD,
        materials={
            "post": "mat-PS13",
            "picket": "mat-P601",
            "rail": "mat-RA01",
        },
    )


def _sample_result() -> CalculationResult:
    engine = create_default_engine()
    return engine.calculate(
        _sample_configuration(),
        load_seed_catalog(),
        CalculationInput(net_length=150, lines=2),
    )


# ---------------------------------------------------------------------------
# Import tests
# ---------------------------------------------------------------------------


class TestPublicImports:
    """All expected symbols are importable from the top-level package."""

    def test_import_engine_and_settings(self) -> None:
        assert FenceBomEngine is not None
        assert EngineSettings is not None
        assert callable(create_default_engine)

    def test_import_catalog(self) -> None:
        assert isinstance(load_seed_catalog(), CatalogRepository)

    def test_errors_share_a_base(self) -> None:
        for error in (ConfigurationError, AmbiguousRuleError, FormulaError, ParameterGapError):
            assert issubclass(error, FenceBomError)

    def test_import_repricing(self) -> None:
        assert callable(reprice_catalog)
        assert RepricingReport is not None


# ---------------------------------------------------------------------------
# Factory tests
# ---------------------------------------------------------------------------


class TestCreateDefaultEngine:
    """create_default_engine() returns a working FenceBomEngine."""

    def test_returns_engine(self) -> None:
        assert isinstance(create_default_engine(), FenceBomEngine)

    def test_custom_settings(self) -> None:
        engine = create_default_engine(EngineSettings(strict_parameters=True))
        assert engine.settings.strict_parameters is True

    def test_engine_can_produce_result(self) -> None:
        result = _sample_result()
        assert isinstance(result, CalculationResult)
        assert result.sku == "API01"
        assert result.total_cost > 0
        assert result.cost_per_foot > 0
        assert result.materials[0].unit_type is UnitType.EACH

    def test_every_seed_configuration_calculates(self) -> None:
        engine = create_default_engine()
        catalog = load_seed_catalog()
        for configuration in SEED_CONFIGURATIONS:
            result = engine.calculate(configuration, catalog)
            assert result.total_cost > 0, configuration.sku


# ---------------------------------------------------------------------------
# JSON round-trip tests
# ---------------------------------------------------------------------------


class TestJsonRoundTrip:
    """Results serialize to JSON and deserialize back correctly."""

    def test_json_round_trip(self) -> None:
        result = _sample_result()
        restored = CalculationResult.model_validate_json(result.model_dump_json())
        assert restored.total_cost == result.total_cost
        assert restored.materials == result.materials
        assert restored.labor == result.labor
        assert restored.debug == result.debug

    def test_json_output_is_consumable(self) -> None:
        data = json.loads(_sample_result().model_dump_json())

        for key in (
            "configuration_id",
            "sku",
            "materials",
            "labor",
            "total_material_cost",
            "total_labor_cost",
            "total_cost",
            "cost_per_foot",
            "warnings",
            "metadata",
        ):
            assert key in data

        material = data["materials"][0]
        assert material["unit_type"] == "EA"
        assert "purchase_quantity" in material
        assert "raw_quantity" in material
