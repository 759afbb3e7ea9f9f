"""Calculation output models for the fencebom engine."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from fencebom.models.enums import ParameterSource, UnitType


class ResultModel(BaseModel):
    """Base for immutable result rows."""

    model_config = ConfigDict(frozen=True)


class MaterialLineItem(ResultModel):
    """One material row of the bill of materials.

    ``raw_quantity`` is the unrounded formula output; ``quantity`` is the
    costing quantity after the unit-type rounding policy. Linear materials
    keep decimal precision here; whole-bundle rounding is only exposed
    through ``purchase_quantity``.
    """

    role: str
    role_name: str
    material_id: str
    material_sku: str
    material_name: str
    raw_quantity: float
    quantity: float = 0.0
    unit_type: UnitType
    unit_cost: float
    extended_cost: float = 0.0
    bundle_size: float = 1.0
    formula: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def purchase_quantity(self) -> float:
        """Quantity to order, rounded up to whole purchasable bundles."""
        if self.unit_type.is_discrete:
            return self.quantity
        bundles = math.ceil(round(self.raw_quantity / self.bundle_size, 9))
        return bundles * self.bundle_size


class LaborLineItem(ResultModel):
    """One labor row of the bill of labor."""

    role: str
    role_name: str
    labor_code_id: str
    labor_sku: str
    description: str
    raw_quantity: float
    quantity: float = 0.0
    unit_type: UnitType
    rate: float
    extended_cost: float = 0.0
    formula: str | None = None


class ResolvedParameter(ResultModel):
    """A parameter value together with the tier it came from."""

    key: str
    value: float
    source: ParameterSource
    role: str | None = None


class ParameterGap(ResultModel):
    """A parameter that fell through to the engine-wide fallback."""

    key: str
    value: float
    role: str | None = None
    message: str


class DebugTrace(ResultModel):
    """Intermediate values kept for audit and troubleshooting."""

    post_count: int
    section_count: int
    post_spacing: float
    parameters: dict[str, ResolvedParameter] = Field(default_factory=dict)
    stage_order: list[str] = Field(default_factory=list)


class CalculationMetadata(ResultModel):
    """Metadata about the calculation run."""

    engine_version: str
    product_type: str
    product_style: str
    family: str
    business_unit_id: str | None = None


class CalculationResult(ResultModel):
    """Complete bill of materials and labor for one configuration."""

    configuration_id: str
    sku: str
    net_length: float
    materials: list[MaterialLineItem]
    labor: list[LaborLineItem]
    total_material_cost: float
    total_labor_cost: float
    total_cost: float
    cost_per_foot: float
    warnings: list[ParameterGap] = Field(default_factory=list)
    metadata: CalculationMetadata
    debug: DebugTrace | None = None

    def material_for(self, role: str) -> MaterialLineItem | None:
        for item in self.materials:
            if item.role == role:
                return item
        return None

    def labor_for(self, role: str) -> LaborLineItem | None:
        for item in self.labor:
            if item.role == role:
                return item
        return None

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from fencebom.formatting import (
            format_cost_per_foot,
            format_currency,
            format_quantity,
        )

        return {
            "sku": self.sku,
            "product_type": self.metadata.product_type,
            "product_style": self.metadata.product_style,
            "net_length_formatted": f"{self.net_length:,.0f} LF",
            "material_cost_formatted": format_currency(self.total_material_cost),
            "labor_cost_formatted": format_currency(self.total_labor_cost),
            "total_cost_formatted": format_currency(self.total_cost),
            "cost_per_foot_formatted": format_cost_per_foot(self.cost_per_foot),
            "num_materials": len(self.materials),
            "num_labor": len(self.labor),
            "materials": [
                {
                    "role": m.role_name,
                    "sku": m.material_sku,
                    "quantity_formatted": format_quantity(m.quantity, m.unit_type),
                    "cost_formatted": format_currency(m.extended_cost),
                }
                for m in self.materials
            ],
            "num_warnings": len(self.warnings),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce the caller-facing export structure.

        Material rows expose ``{role, material_id, quantity, unit_type,
        unit_cost}`` and labor rows ``{labor_code_id, quantity, rate,
        unit_type}`` plus totals and, when captured, the debug trace.
        """
        return {
            "configuration_id": self.configuration_id,
            "sku": self.sku,
            "materials": [
                {
                    "role": m.role,
                    "material_id": m.material_id,
                    "quantity": m.quantity,
                    "unit_type": m.unit_type.value,
                    "unit_cost": m.unit_cost,
                }
                for m in self.materials
            ],
            "labor": [
                {
                    "labor_code_id": lab.labor_code_id,
                    "quantity": lab.quantity,
                    "rate": lab.rate,
                    "unit_type": lab.unit_type.value,
                }
                for lab in self.labor
            ],
            "total_material_cost": self.total_material_cost,
            "total_labor_cost": self.total_labor_cost,
            "total_cost": self.total_cost,
            "metadata": self.metadata.model_dump(mode="json"),
            "debug": self.debug.model_dump(mode="json") if self.debug else None,
        }
