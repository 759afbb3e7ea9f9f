"""Immutable calculation context shared by every formula of one calculation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fencebom.models.catalog import (
        ComponentRole,
        LaborCode,
        Material,
        ProductStyle,
        ProductType,
    )
    from fencebom.models.enums import PostType, ProductFamily


@dataclass(frozen=True)
class SelectedMaterial:
    """The material chosen for a role and the rule that allowed it."""

    role: ComponentRole
    material: Material
    rule_id: str
    is_required: bool


@dataclass(frozen=True)
class SelectedLabor:
    """The labor code chosen for a labor role, with its resolved rate."""

    role: ComponentRole
    labor_code: LaborCode
    rate: float
    rule_id: str
    is_required: bool


@dataclass(frozen=True)
class CalculationContext:
    """Everything a product calculator may read.

    Assembled once per calculation after selection, parameter resolution
    and post/section counting. Mapping fields are read-only proxies.
    """

    configuration_id: str
    sku: str
    product_type: ProductType
    style: ProductStyle
    post_type: PostType
    height: float
    net_length: float
    lines: int
    gates: int
    business_unit_id: str | None
    post_spacing: float
    post_count: int
    section_count: int
    parameters: Mapping[str, float]
    materials: Mapping[str, SelectedMaterial]
    labor: Mapping[str, SelectedLabor]
    attributes: Mapping[str, str]
    custom_formulas: Mapping[str, str]
    # Rounded material quantities, filled in once materials are computed.
    quantities: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def product_type_code(self) -> str:
        return self.product_type.code

    @property
    def family(self) -> ProductFamily:
        return self.product_type.family

    def has_material(self, role: str) -> bool:
        return role in self.materials

    def parameter(self, key: str, role: str | None = None) -> float:
        """Resolved parameter value, role-scoped first."""
        if role is not None:
            scoped = self.parameters.get(f"{role}.{key}")
            if scoped is not None:
                return scoped
        return self.parameters[key]

    def material_width(self, role: str) -> float:
        """Actual width of the role's material in inches, else ``<role>_width``."""
        selected = self.materials[role]
        if selected.material.actual_width is not None:
            return selected.material.actual_width
        return self.parameter(f"{role}_width", role)

    def material_length(self, role: str) -> float:
        """Length of the role's material in feet, else ``<role>_length``."""
        selected = self.materials[role]
        if selected.material.length_ft is not None:
            return selected.material.length_ft
        return self.parameter(f"{role}_length", role)

    def material_per_post(self, role: str, key: str) -> float:
        """Units of the role's material used per post, else parameter ``key``."""
        per_post = self.materials[role].material.per_post
        if per_post is not None:
            return per_post
        return self.parameter(key, role)

    def variables(self) -> dict[str, float]:
        """Base variable table for custom formulas.

        Material formulas add prior quantities (``<role>_qty``) as they go;
        labor formulas see every material quantity through ``quantities``.
        """
        table: dict[str, float] = {
            "net_length": self.net_length,
            "Quantity": self.net_length,
            "lines": float(self.lines),
            "Lines": float(self.lines),
            "gates": float(self.gates),
            "Gates": float(self.gates),
            "height": self.height,
            "post_spacing": self.post_spacing,
            "post_count": float(self.post_count),
            "section_count": float(self.section_count),
        }
        table.update(self.parameters)
        table.update(self.quantities)
        for role, selected in self.materials.items():
            material = selected.material
            if material.actual_width is not None:
                table[f"{role}.width_inches"] = material.actual_width
            if material.length_ft is not None:
                table[f"{role}.length_feet"] = material.length_ft
            if material.per_post is not None:
                table[f"{role}.per_post"] = material.per_post
            table[f"{role}.unit_cost"] = material.unit_cost
        return table
