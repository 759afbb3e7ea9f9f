"""Parameter resolution through the style / configuration / type / fallback hierarchy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fencebom.exceptions import ParameterGapError
from fencebom.models.enums import ParameterSource
from fencebom.models.result import ParameterGap, ResolvedParameter

if TYPE_CHECKING:
    from fencebom.config import EngineSettings
    from fencebom.data.repository import CatalogRepository
    from fencebom.models.catalog import FormulaParameter, ProductStyle, ProductType
    from fencebom.models.configuration import Configuration

logger = logging.getLogger(__name__)

# Parameter keys that map onto explicit Configuration fields.
_CONFIGURATION_FIELDS: dict[str, str] = {
    "post_spacing": "post_spacing",
    "rail_count": "rail_count",
    "height": "height",
}


class ParameterResolver:
    """Resolves numeric tunables for one configuration.

    Resolution order, highest precedence first:

    1. Style-level override: a FormulaParameter scoped to the style
       (role-specific before role-less), then the style's
       ``formula_adjustments`` entry.
    2. Configuration field, when the key names one and it is set.
    3. Product-type default: a FormulaParameter scoped to the type
       (role-specific before role-less), then ``default_post_spacing``.
    4. Engine-wide fallback from settings.

    ``resolve`` never fails. Tier 4 hits are recorded as gaps and, with
    ``strict_parameters`` enabled, raised as ParameterGapError.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        configuration: Configuration,
        product_type: ProductType,
        style: ProductStyle,
        settings: EngineSettings,
    ) -> None:
        self._catalog = catalog
        self._configuration = configuration
        self._product_type = product_type
        self._style = style
        self._settings = settings
        self._resolved: dict[str, ResolvedParameter] = {}
        self._gaps: dict[str, ParameterGap] = {}

    @property
    def resolved(self) -> dict[str, ResolvedParameter]:
        """Every parameter resolved so far, keyed ``key`` or ``role.key``."""
        return dict(self._resolved)

    @property
    def gaps(self) -> list[ParameterGap]:
        return list(self._gaps.values())

    def value(self, key: str, role: str | None = None) -> float:
        return self.resolve(key, role).value

    def resolve(self, key: str, role: str | None = None) -> ResolvedParameter:
        trace_key = f"{role}.{key}" if role else key
        cached = self._resolved.get(trace_key)
        if cached is not None:
            return cached

        resolved = self._lookup(key, role)
        self._resolved[trace_key] = resolved

        if resolved.source is ParameterSource.FALLBACK:
            self._record_gap(trace_key, resolved)
        return resolved

    def _lookup(self, key: str, role: str | None) -> ResolvedParameter:
        rows = self._catalog.parameters_for(key)

        # 1. Style-level override
        style_rows = [
            p for p in rows
            if p.product_style_code == self._style.code
            and p.product_type_code in (None, self._product_type.code)
        ]
        row = _most_specific(style_rows, role)
        if row is not None:
            return ResolvedParameter(
                key=key, value=row.value, source=ParameterSource.STYLE, role=role
            )
        if key in self._style.formula_adjustments:
            return ResolvedParameter(
                key=key,
                value=self._style.formula_adjustments[key],
                source=ParameterSource.STYLE,
                role=role,
            )

        # 2. Explicit configuration field
        field_name = _CONFIGURATION_FIELDS.get(key)
        if field_name is not None:
            field_value = getattr(self._configuration, field_name)
            if field_value is not None:
                return ResolvedParameter(
                    key=key,
                    value=float(field_value),
                    source=ParameterSource.CONFIGURATION,
                    role=role,
                )

        # 3. Product type default
        type_rows = [
            p for p in rows
            if p.product_type_code == self._product_type.code
            and p.product_style_code is None
        ]
        row = _most_specific(type_rows, role)
        if row is not None:
            return ResolvedParameter(
                key=key, value=row.value, source=ParameterSource.PRODUCT_TYPE, role=role
            )
        if key == "post_spacing" and self._product_type.default_post_spacing is not None:
            return ResolvedParameter(
                key=key,
                value=self._product_type.default_post_spacing,
                source=ParameterSource.PRODUCT_TYPE,
                role=role,
            )

        # 4. Engine-wide fallback
        value = self._settings.fallback_parameters.get(
            key, self._settings.unknown_parameter_value
        )
        return ResolvedParameter(
            key=key, value=value, source=ParameterSource.FALLBACK, role=role
        )

    def _record_gap(self, trace_key: str, resolved: ResolvedParameter) -> None:
        msg = (
            f"Parameter '{resolved.key}' has no style, configuration or "
            f"product type value for '{self._product_type.code}/{self._style.code}'; "
            f"used engine fallback {resolved.value}"
        )
        if self._settings.strict_parameters:
            raise ParameterGapError(
                msg, configuration_id=self._configuration.id, role=resolved.role
            )
        logger.warning("%s (configuration=%s)", msg, self._configuration.id)
        self._gaps[trace_key] = ParameterGap(
            key=resolved.key, value=resolved.value, role=resolved.role, message=msg
        )


def _most_specific(
    rows: list[FormulaParameter], role: str | None
) -> FormulaParameter | None:
    """Prefer a row scoped to the role, then a role-less row."""
    if role is not None:
        for row in rows:
            if row.role_code == role:
                return row
    for row in rows:
        if row.role_code is None:
            return row
    return None
