"""Tests for catalog, configuration and result models and the error types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fencebom.exceptions import (
    AmbiguousRuleError,
    ConfigurationError,
    FenceBomError,
    FormulaError,
    ParameterGapError,
)
from fencebom.models.catalog import ComponentRole, Material, ProductType, ProductTypeComponent
from fencebom.models.configuration import CalculationInput, Configuration
from fencebom.models.enums import ErrorKind, LaborBasis, ProductFamily, SelectionMode, UnitType
from fencebom.models.result import MaterialLineItem

# ---------------------------------------------------------------------------
# Catalog rows
# ---------------------------------------------------------------------------


class TestComponentRole:
    def test_labor_role_needs_basis(self) -> None:
        with pytest.raises(ValidationError, match="labor_basis"):
            ComponentRole(code="install", name="Install", is_labor=True)

    def test_labor_role(self) -> None:
        role = ComponentRole(
            code="install", name="Install", is_labor=True, labor_basis=LaborBasis.NET_LENGTH
        )
        assert role.labor_basis is LaborBasis.NET_LENGTH

    def test_defaults(self) -> None:
        role = ComponentRole(code="post", name="Post")
        assert role.unit_type is UnitType.EACH
        assert role.is_labor is False


class TestMaterial:
    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Material(id="m", sku="M", name="m", category="c", unit_cost=-1)

    def test_zero_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Material(id="m", sku="M", name="m", category="c", unit_cost=1, actual_width=0)

    def test_frozen(self) -> None:
        material = Material(id="m", sku="M", name="m", category="c", unit_cost=1)
        with pytest.raises(ValidationError):
            material.unit_cost = 2  # type: ignore[misc]


class TestProductType:
    def test_component_lookup(self) -> None:
        product_type = ProductType(
            code="wv",
            name="Wood Vertical",
            family=ProductFamily.WOOD_VERTICAL,
            components=[ProductTypeComponent(role_code="post", is_required=True)],
        )
        assert product_type.component("post").is_required is True
        assert product_type.component("cap") is None

    def test_post_spacing_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ProductType(
                code="wv",
                name="Wood Vertical",
                family=ProductFamily.WOOD_VERTICAL,
                default_post_spacing=0,
            )


class TestEnums:
    def test_specificity_order(self) -> None:
        assert (
            SelectionMode.SPECIFIC.specificity
            > SelectionMode.SUBCATEGORY.specificity
            > SelectionMode.CATEGORY.specificity
        )

    def test_only_linear_feet_are_continuous(self) -> None:
        continuous = [unit for unit in UnitType if not unit.is_discrete]
        assert continuous == [UnitType.LINEAR_FOOT]


# ---------------------------------------------------------------------------
# Configuration and job input
# ---------------------------------------------------------------------------


class TestConfiguration:
    def test_height_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Configuration(
                id="c", sku="C", product_type_code="wv", product_style_code="s", height=0
            )

    def test_defaults(self) -> None:
        configuration = Configuration(
            id="c", sku="C", product_type_code="wv", product_style_code="s", height=6
        )
        assert configuration.post_spacing is None
        assert configuration.rail_count is None
        assert configuration.materials == {}


class TestCalculationInput:
    def test_net_length_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CalculationInput(net_length=0)

    def test_lines_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            CalculationInput(net_length=100, lines=0)

    def test_gates_not_negative(self) -> None:
        with pytest.raises(ValidationError):
            CalculationInput(net_length=100, gates=-1)


# ---------------------------------------------------------------------------
# Line items
# ---------------------------------------------------------------------------


def _line(unit_type: UnitType, raw: float, quantity: float, bundle: float = 1.0) -> MaterialLineItem:
    return MaterialLineItem(
        role="r",
        role_name="R",
        material_id="m",
        material_sku="M",
        material_name="m",
        raw_quantity=raw,
        quantity=quantity,
        unit_type=unit_type,
        unit_cost=1.0,
        bundle_size=bundle,
    )


class TestPurchaseQuantity:
    def test_discrete_is_costing_quantity(self) -> None:
        assert _line(UnitType.EACH, 223.6, 224).purchase_quantity == 224

    def test_linear_rounds_to_bundles(self) -> None:
        assert _line(UnitType.LINEAR_FOOT, 108, 108, bundle=10).purchase_quantity == 110

    def test_linear_exact_bundle(self) -> None:
        assert _line(UnitType.LINEAR_FOOT, 100, 100, bundle=10).purchase_quantity == 100


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    @pytest.mark.parametrize(
        ("error_cls", "kind"),
        [
            (ConfigurationError, ErrorKind.CONFIGURATION),
            (AmbiguousRuleError, ErrorKind.AMBIGUOUS_RULE),
            (FormulaError, ErrorKind.FORMULA),
            (ParameterGapError, ErrorKind.PARAMETER_GAP),
        ],
    )
    def test_kind(self, error_cls: type[FenceBomError], kind: ErrorKind) -> None:
        assert error_cls("x").kind is kind

    def test_str_with_context(self) -> None:
        error = AmbiguousRuleError(
            "2 default rules match", configuration_id="cfg-1", role="picket",
            rule_ids=("a", "b"),
        )
        assert str(error) == "2 default rules match (configuration=cfg-1; role=picket; rules=a,b)"

    def test_str_with_formula(self) -> None:
        error = FormulaError("Formula divides by zero", role="rail", formula="1 / 0")
        assert str(error) == "Formula divides by zero (role=rail; formula='1 / 0')"

    def test_str_plain(self) -> None:
        assert str(ConfigurationError("Unknown product type 'x'")) == "Unknown product type 'x'"

    def test_with_configuration_keeps_existing(self) -> None:
        error = ConfigurationError("x", configuration_id="cfg-1")
        assert error.with_configuration("cfg-2").configuration_id == "cfg-1"
        assert ConfigurationError("x").with_configuration("cfg-2").configuration_id == "cfg-2"
