"""Catalog repository: an in-memory snapshot of catalog rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencebom.exceptions import ConfigurationError
from fencebom.models.enums import RuleKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fencebom.models.catalog import (
        ComponentRole,
        EligibilityRule,
        FormulaParameter,
        LaborCode,
        LaborRate,
        Material,
        ProductStyle,
        ProductType,
    )


class CatalogRepository:
    """Read-only snapshot of the catalog used by one or more calculations.

    Wraps catalog rows fetched by the caller and provides the lookups the
    resolvers need. The repository never changes after construction, so a
    single snapshot can serve concurrent calculations.
    """

    def __init__(
        self,
        *,
        product_types: Iterable[ProductType],
        product_styles: Iterable[ProductStyle],
        roles: Iterable[ComponentRole],
        materials: Iterable[Material] = (),
        labor_codes: Iterable[LaborCode] = (),
        labor_rates: Iterable[LaborRate] = (),
        rules: Iterable[EligibilityRule] = (),
        parameters: Iterable[FormulaParameter] = (),
    ) -> None:
        self._product_types = {pt.code: pt for pt in product_types}
        self._product_styles = {
            (ps.product_type_code, ps.code): ps for ps in product_styles
        }
        self._roles = {role.code: role for role in roles}
        self._materials = {m.id: m for m in materials}
        self._labor_codes = {lc.id: lc for lc in labor_codes}
        self._labor_rates = tuple(labor_rates)
        self._rules = tuple(rules)
        self._parameters = tuple(parameters)

    def get_product_type(self, code: str) -> ProductType:
        product_type = self._product_types.get(code)
        if product_type is None:
            msg = f"Unknown product type '{code}'"
            raise ConfigurationError(msg)
        return product_type

    def get_product_style(self, product_type_code: str, code: str) -> ProductStyle:
        style = self._product_styles.get((product_type_code, code))
        if style is None:
            msg = f"Unknown style '{code}' for product type '{product_type_code}'"
            raise ConfigurationError(msg)
        return style

    def get_role(self, code: str) -> ComponentRole:
        role = self._roles.get(code)
        if role is None:
            msg = f"Unknown component role '{code}'"
            raise ConfigurationError(msg, role=code)
        return role

    def list_materials(self) -> list[Material]:
        return list(self._materials.values())

    def list_labor_codes(self) -> list[LaborCode]:
        return list(self._labor_codes.values())

    def get_labor_rate(
        self, labor_code_id: str, business_unit_id: str | None = None
    ) -> float | None:
        """Look up the rate for a labor code.

        Lookup order:
        1. Rate for the requested business unit
        2. Company-wide rate (row without a business unit)

        Returns None when neither exists.
        """
        company_wide: float | None = None
        for row in self._labor_rates:
            if row.labor_code_id != labor_code_id:
                continue
            if business_unit_id is not None and row.business_unit_id == business_unit_id:
                return row.rate
            if row.business_unit_id is None:
                company_wide = row.rate
        return company_wide

    def rules_for(
        self, kind: RuleKind, product_type_code: str, role_code: str
    ) -> list[EligibilityRule]:
        """Active rules of one kind for a (product type, role) pair, in declaration order."""
        return [
            rule
            for rule in self._rules
            if rule.is_active
            and rule.kind == kind
            and rule.product_type_code == product_type_code
            and rule.role_code == role_code
        ]

    def parameters_for(self, key: str) -> list[FormulaParameter]:
        return [p for p in self._parameters if p.key == key]

    def parameters_in_scope(
        self, product_type_code: str, style_code: str
    ) -> list[FormulaParameter]:
        """Parameter rows that apply to a product type or to one of its styles."""
        return [
            p
            for p in self._parameters
            if (p.product_type_code == product_type_code and p.product_style_code is None)
            or (
                p.product_style_code == style_code
                and p.product_type_code in (None, product_type_code)
            )
        ]
