"""Catalog row models supplied by the calling system.

These mirror the catalog tables the engine reads: product types and styles,
component roles, materials, labor codes and rates, eligibility rules and
formula parameters. All rows are immutable once built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fencebom.models.enums import (
    LaborBasis,
    ProductFamily,
    RuleKind,
    SelectionMode,
    UnitType,
)


class CatalogRow(BaseModel):
    """Base for immutable catalog rows."""

    model_config = ConfigDict(frozen=True)


class ComponentRole(CatalogRow):
    """A named structural slot (post, picket, rail...) or a labor task."""

    code: str
    name: str
    unit_type: UnitType = UnitType.EACH
    is_labor: bool = False
    labor_basis: LaborBasis | None = None

    @model_validator(mode="after")
    def labor_roles_need_basis(self) -> ComponentRole:
        if self.is_labor and self.labor_basis is None:
            msg = f"Labor role '{self.code}' must declare a labor_basis"
            raise ValueError(msg)
        return self


class ProductTypeComponent(CatalogRow):
    """Declares that a role belongs to a product type."""

    role_code: str
    is_required: bool = False


class ProductType(CatalogRow):
    """A product type; its family selects the calculator."""

    code: str
    name: str
    family: ProductFamily
    default_post_spacing: float | None = Field(default=None, gt=0)
    components: list[ProductTypeComponent] = Field(default_factory=list)

    def component(self, role_code: str) -> ProductTypeComponent | None:
        for component in self.components:
            if component.role_code == role_code:
                return component
        return None


class ProductStyle(CatalogRow):
    """A style of a product type with style-level parameter overrides."""

    code: str
    name: str
    product_type_code: str
    formula_adjustments: dict[str, float] = Field(default_factory=dict)


class Material(CatalogRow):
    """A purchasable material from the catalog."""

    id: str
    sku: str
    name: str
    category: str
    subcategory: str | None = None
    unit_cost: float = Field(ge=0)
    unit_type: UnitType = UnitType.EACH
    actual_width: float | None = Field(default=None, gt=0)
    length_ft: float | None = Field(default=None, gt=0)
    bundle_size: float = Field(default=1.0, gt=0)
    # Consumed at every post hole, e.g. bags of concrete per post.
    per_post: float | None = Field(default=None, gt=0)
    is_active: bool = True


class LaborCode(CatalogRow):
    """An installation task that can be billed."""

    id: str
    sku: str
    description: str
    category: str
    subcategory: str | None = None
    unit_type: UnitType = UnitType.LINEAR_FOOT
    is_active: bool = True


class LaborRate(CatalogRow):
    """Rate for a labor code, optionally specific to a business unit."""

    labor_code_id: str
    rate: float = Field(ge=0)
    business_unit_id: str | None = None


class FormulaParameter(CatalogRow):
    """A numeric tunable scoped to a product type, style and/or role.

    A row with a style code is a style-level override; a row with only a
    product type code is a type-level default.
    """

    key: str
    value: float
    product_type_code: str | None = None
    product_style_code: str | None = None
    role_code: str | None = None


class EligibilityRule(CatalogRow):
    """Declares which materials or labor codes may fill a role."""

    id: str
    kind: RuleKind = RuleKind.MATERIAL
    product_type_code: str
    role_code: str
    selection_mode: SelectionMode
    category: str | None = None
    subcategory: str | None = None
    target_id: str | None = None
    attribute_filter: dict[str, list[str]] = Field(default_factory=dict)
    min_length_ft: float | None = None
    max_length_ft: float | None = None
    is_default: bool = False
    display_order: int = 0
    is_active: bool = True

    @model_validator(mode="after")
    def mode_fields_present(self) -> EligibilityRule:
        match self.selection_mode:
            case SelectionMode.CATEGORY:
                missing = self.category is None
            case SelectionMode.SUBCATEGORY:
                missing = self.category is None or self.subcategory is None
            case SelectionMode.SPECIFIC:
                missing = self.target_id is None
        if missing:
            msg = (
                f"Rule '{self.id}' uses selection mode '{self.selection_mode}' "
                f"but is missing the fields that mode needs"
            )
            raise ValueError(msg)
        return self
