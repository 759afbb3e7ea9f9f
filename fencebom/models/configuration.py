"""Configuration ("SKU") and job input models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fencebom.models.enums import PostType


class Configuration(BaseModel):
    """A fully specified, purchasable product instance.

    ``materials`` and ``labor`` map component role codes to the selected
    material / labor code ids. ``custom_formulas`` maps role codes to a
    formula expression that replaces the built-in quantity formula.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    sku: str
    product_type_code: str
    product_style_code: str
    height: float = Field(gt=0)
    post_type: PostType = PostType.WOOD
    post_spacing: float | None = Field(default=None, gt=0)
    rail_count: int | None = Field(default=None, ge=0)
    materials: dict[str, str] = Field(default_factory=dict)
    labor: dict[str, str] = Field(default_factory=dict)
    custom_formulas: dict[str, str] = Field(default_factory=dict)


class CalculationInput(BaseModel):
    """Job input: how much fence, how many runs and gates."""

    model_config = ConfigDict(frozen=True)

    net_length: float = Field(gt=0)
    lines: int = Field(default=1, ge=1)
    gates: int = Field(default=0, ge=0)
    business_unit_id: str | None = None
