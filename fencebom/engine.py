"""Core calculation engine for the fencebom library.

The FenceBomEngine turns one Configuration into a bill of materials and
labor in a fixed sequence:

1. **Selection** - Validate the role maps against the product type and pick
   the material and labor code for every role through the eligibility rules.
2. **Parameters** - Resolve every tunable the family calculator reads through
   the style / configuration / type / fallback hierarchy.
3. **Counts** - Compute post and section counts once; every downstream
   formula reuses them.
4. **Quantities** - Run the family calculator against the immutable context.
5. **Pricing** - Round quantities per unit type, extend costs, sum totals.

A calculation never returns a partial result: any fatal error aborts the
whole configuration.
"""

from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from fencebom.calculators.base import POST_ROLE, evaluate_custom
from fencebom.calculators.primitives import post_count, section_count
from fencebom.calculators.registry import get_calculator
from fencebom.config import EngineSettings
from fencebom.context import CalculationContext, SelectedLabor, SelectedMaterial
from fencebom.exceptions import ConfigurationError, FenceBomError
from fencebom.models.enums import UnitType
from fencebom.models.result import CalculationMetadata, CalculationResult, DebugTrace
from fencebom.pricing import price_labor, price_materials, round_quantity, summarize
from fencebom.resolvers.parameters import ParameterResolver
from fencebom.resolvers.rules import RuleResolver, SelectionScope

if TYPE_CHECKING:
    from fencebom.calculators.base import ProductCalculator
    from fencebom.data.repository import CatalogRepository
    from fencebom.models.catalog import ComponentRole, ProductStyle, ProductType
    from fencebom.models.configuration import CalculationInput, Configuration
    from fencebom.models.result import MaterialLineItem

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class FenceBomEngine:
    """Calculation engine that converts a Configuration into a CalculationResult.

    Args:
        settings: Engine-wide fallbacks and switches. Frozen for the
            lifetime of the engine so calculations stay pure.

    Example::

        from fencebom import create_default_engine, load_seed_catalog

        engine = create_default_engine()
        catalog = load_seed_catalog()
        result = engine.calculate(configuration, catalog)
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings or EngineSettings()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def calculate(
        self,
        configuration: Configuration,
        catalog: CatalogRepository,
        job: CalculationInput | None = None,
        *,
        debug: bool | None = None,
    ) -> CalculationResult:
        """Calculate the bill of materials and labor for one configuration.

        Args:
            configuration: The SKU to calculate.
            catalog: Catalog snapshot supplying every row the engine reads.
            job: Net length, lines, gates and business unit. Defaults to
                the standard costing assumptions from settings.
            debug: Override ``settings.debug_trace`` for this call.

        Returns:
            A CalculationResult with ordered line items and totals.

        Raises:
            ConfigurationError: A required role cannot be filled, a mapped
                item is not eligible, or catalog rows are missing.
            AmbiguousRuleError: Two equally specific default rules match.
            FormulaError: A custom formula cannot be evaluated.
            ParameterGapError: Only with ``strict_parameters`` enabled.
        """
        try:
            return self._calculate(configuration, catalog, job, debug)
        except FenceBomError as exc:
            raise exc.with_configuration(configuration.id)

    def _calculate(
        self,
        configuration: Configuration,
        catalog: CatalogRepository,
        job: CalculationInput | None,
        debug: bool | None,
    ) -> CalculationResult:
        job = job or self._settings.standard_assumptions
        product_type = catalog.get_product_type(configuration.product_type_code)
        style = catalog.get_product_style(
            product_type.code, configuration.product_style_code
        )
        calculator = get_calculator(product_type.family)

        material_roles, labor_roles = _split_roles(product_type, catalog)
        _validate_role_maps(configuration, material_roles, labor_roles)

        # 1. Selection
        attributes = _context_attributes(configuration, product_type, style, material_roles)
        scope = SelectionScope(
            configuration_id=configuration.id,
            product_type_code=product_type.code,
            attributes=attributes,
        )
        rules = RuleResolver(catalog)
        materials = _select_materials(configuration, product_type, material_roles, rules, scope)
        labor = _select_labor(
            configuration, product_type, labor_roles, rules, scope, catalog, job
        )

        # 2. Parameters
        resolver = ParameterResolver(
            catalog, configuration, product_type, style, self._settings
        )
        post_spacing = resolver.value("post_spacing")
        if post_spacing <= 0:
            msg = f"Post spacing must be positive, got {post_spacing}"
            raise ConfigurationError(msg, configuration_id=configuration.id)
        parameters = _resolve_parameters(resolver, calculator, catalog, materials)
        if configuration.custom_formulas:
            _resolve_formula_scope(resolver, catalog, product_type, style, materials, parameters)

        # 3. Counts
        sections = section_count(job.net_length, post_spacing)
        posts = post_count(job.net_length, post_spacing, job.lines)

        context = CalculationContext(
            configuration_id=configuration.id,
            sku=configuration.sku,
            product_type=product_type,
            style=style,
            post_type=configuration.post_type,
            height=configuration.height,
            net_length=job.net_length,
            lines=job.lines,
            gates=job.gates,
            business_unit_id=job.business_unit_id,
            post_spacing=post_spacing,
            post_count=posts,
            section_count=sections,
            parameters=MappingProxyType(parameters),
            materials=MappingProxyType(materials),
            labor=MappingProxyType(labor),
            attributes=MappingProxyType(attributes),
            custom_formulas=MappingProxyType(dict(configuration.custom_formulas)),
        )
        context = _apply_custom_post_count(context)

        # 4. Quantities
        material_items = calculator.compute_materials(context)
        context = dataclasses.replace(
            context, quantities=MappingProxyType(_material_quantities(material_items))
        )
        labor_items = calculator.compute_labor(context)

        # 5. Pricing
        material_items = price_materials(material_items)
        labor_items = price_labor(labor_items)
        totals = summarize(material_items, labor_items, job.net_length)

        trace = None
        if self._settings.debug_trace if debug is None else debug:
            trace = DebugTrace(
                post_count=context.post_count,
                section_count=context.section_count,
                post_spacing=post_spacing,
                parameters=resolver.resolved,
                stage_order=[item.role for item in material_items]
                + [item.role for item in labor_items],
            )

        logger.info(
            "Calculated %s (%s): %d materials, %d labor, total %.2f",
            configuration.sku,
            configuration.id,
            len(material_items),
            len(labor_items),
            totals.total,
        )

        return CalculationResult(
            configuration_id=configuration.id,
            sku=configuration.sku,
            net_length=job.net_length,
            materials=material_items,
            labor=labor_items,
            total_material_cost=totals.material,
            total_labor_cost=totals.labor,
            total_cost=totals.total,
            cost_per_foot=totals.per_foot,
            warnings=resolver.gaps,
            metadata=CalculationMetadata(
                engine_version=ENGINE_VERSION,
                product_type=product_type.code,
                product_style=style.code,
                family=str(product_type.family),
                business_unit_id=job.business_unit_id,
            ),
            debug=trace,
        )


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _split_roles(
    product_type: ProductType, catalog: CatalogRepository
) -> tuple[dict[str, ComponentRole], dict[str, ComponentRole]]:
    """Split the product type's components into material and labor roles."""
    material_roles: dict[str, ComponentRole] = {}
    labor_roles: dict[str, ComponentRole] = {}
    for component in product_type.components:
        role = catalog.get_role(component.role_code)
        if role.is_labor:
            labor_roles[role.code] = role
        else:
            material_roles[role.code] = role
    return material_roles, labor_roles


def _validate_role_maps(
    configuration: Configuration,
    material_roles: dict[str, ComponentRole],
    labor_roles: dict[str, ComponentRole],
) -> None:
    for role_code in configuration.materials:
        if role_code not in material_roles:
            msg = (
                f"Material role '{role_code}' is not a material component of "
                f"product type '{configuration.product_type_code}'"
            )
            raise ConfigurationError(msg, configuration_id=configuration.id, role=role_code)
    for role_code in configuration.labor:
        if role_code not in labor_roles:
            msg = (
                f"Labor role '{role_code}' is not a labor component of "
                f"product type '{configuration.product_type_code}'"
            )
            raise ConfigurationError(msg, configuration_id=configuration.id, role=role_code)
    for role_code in configuration.custom_formulas:
        if role_code not in material_roles and role_code not in labor_roles:
            msg = (
                f"Custom formula targets role '{role_code}', which product type "
                f"'{configuration.product_type_code}' does not have"
            )
            raise ConfigurationError(msg, configuration_id=configuration.id, role=role_code)


def _context_attributes(
    configuration: Configuration,
    product_type: ProductType,
    style: ProductStyle,
    material_roles: dict[str, ComponentRole],
) -> dict[str, str]:
    """Discrete attributes that eligibility rule filters match against."""
    attributes = {
        "post_type": str(configuration.post_type),
        "style": style.code,
        "height": f"{configuration.height:g}",
        "family": str(product_type.family),
        "product_type": product_type.code,
    }
    for role_code in material_roles:
        mapped = role_code in configuration.materials
        attributes[f"has_{role_code}"] = "true" if mapped else "false"
    return attributes


def _select_materials(
    configuration: Configuration,
    product_type: ProductType,
    material_roles: dict[str, ComponentRole],
    rules: RuleResolver,
    scope: SelectionScope,
) -> dict[str, SelectedMaterial]:
    """Confirm every mapped material is eligible for its role.

    The configuration's role map is authoritative: unmapped optional roles
    are not applicable and produce no line.
    """
    selected: dict[str, SelectedMaterial] = {}
    for role_code, role in material_roles.items():
        component = product_type.component(role_code)
        is_required = component is not None and component.is_required
        material_id = configuration.materials.get(role_code)

        if material_id is None:
            if is_required:
                msg = f"Required role '{role_code}' has no material mapped"
                raise ConfigurationError(
                    msg, configuration_id=configuration.id, role=role_code
                )
            continue

        candidates = rules.eligible_materials(role_code, scope)
        match = next((c for c in candidates if c.item.id == material_id), None)
        if match is None:
            if not candidates:
                msg = f"Role '{role_code}' has no eligible materials"
            else:
                msg = f"Material '{material_id}' is not eligible for role '{role_code}'"
            raise ConfigurationError(msg, configuration_id=configuration.id, role=role_code)
        if match.item.unit_type != role.unit_type:
            msg = (
                f"Material '{material_id}' is sold by {match.item.unit_type} but role "
                f"'{role_code}' is measured in {role.unit_type}"
            )
            raise ConfigurationError(msg, configuration_id=configuration.id, role=role_code)

        selected[role_code] = SelectedMaterial(
            role=role,
            material=match.item,
            rule_id=match.rule_id,
            is_required=is_required,
        )
    return selected


def _select_labor(
    configuration: Configuration,
    product_type: ProductType,
    labor_roles: dict[str, ComponentRole],
    rules: RuleResolver,
    scope: SelectionScope,
    catalog: CatalogRepository,
    job: CalculationInput,
) -> dict[str, SelectedLabor]:
    """Pick a labor code per labor role and attach its rate.

    A mapped labor code must be eligible. Unmapped roles take the
    top-ranked eligible code, which is how post-type and height specific
    codes are chosen.
    """
    selected: dict[str, SelectedLabor] = {}
    for role_code, role in labor_roles.items():
        component = product_type.component(role_code)
        is_required = component is not None and component.is_required
        candidates = rules.eligible_labor(role_code, scope)
        labor_code_id = configuration.labor.get(role_code)

        if labor_code_id is not None:
            match = next((c for c in candidates if c.item.id == labor_code_id), None)
            if match is None:
                msg = f"Labor code '{labor_code_id}' is not eligible for role '{role_code}'"
                raise ConfigurationError(
                    msg, configuration_id=configuration.id, role=role_code
                )
        elif candidates:
            match = candidates[0]
        elif is_required:
            msg = f"Required labor role '{role_code}' has no eligible labor code"
            raise ConfigurationError(msg, configuration_id=configuration.id, role=role_code)
        else:
            logger.debug(
                "No labor code for optional role %s on %s", role_code, configuration.id
            )
            continue

        rate = catalog.get_labor_rate(match.item.id, job.business_unit_id)
        if rate is None:
            msg = (
                f"Labor code '{match.item.sku}' has no rate for business unit "
                f"'{job.business_unit_id}'"
            )
            raise ConfigurationError(
                msg,
                configuration_id=configuration.id,
                role=role_code,
                rule_ids=(match.rule_id,),
            )

        selected[role_code] = SelectedLabor(
            role=role,
            labor_code=match.item,
            rate=rate,
            rule_id=match.rule_id,
            is_required=is_required,
        )
    return selected


def _resolve_parameters(
    resolver: ParameterResolver,
    calculator: ProductCalculator,
    catalog: CatalogRepository,
    materials: dict[str, SelectedMaterial],
) -> dict[str, float]:
    """Resolve the calculator's keys, role-scoped overrides and dimension fallbacks."""
    parameters: dict[str, float] = {}
    for key in calculator.parameter_keys:
        parameters[key] = resolver.value(key)
        scoped_roles = {p.role_code for p in catalog.parameters_for(key) if p.role_code}
        for role_code in materials:
            if role_code in scoped_roles:
                parameters[f"{role_code}.{key}"] = resolver.value(key, role_code)

    for role_code in calculator.width_roles:
        selected = materials.get(role_code)
        if selected is not None and selected.material.actual_width is None:
            key = f"{role_code}_width"
            parameters[key] = resolver.value(key)
    for role_code in calculator.length_roles:
        selected = materials.get(role_code)
        if selected is not None and selected.material.length_ft is None:
            key = f"{role_code}_length"
            parameters[key] = resolver.value(key)
    return parameters


def _resolve_formula_scope(
    resolver: ParameterResolver,
    catalog: CatalogRepository,
    product_type: ProductType,
    style: ProductStyle,
    materials: dict[str, SelectedMaterial],
    parameters: dict[str, float],
) -> None:
    """Add every catalog tunable of the type and style for custom formulas.

    Role-scoped rows are added only for mapped roles, as ``role.key``.
    """
    for row in catalog.parameters_in_scope(product_type.code, style.code):
        if row.role_code is None:
            name = row.key
        elif row.role_code in materials:
            name = f"{row.role_code}.{row.key}"
        else:
            continue
        if name not in parameters:
            parameters[name] = resolver.value(row.key, row.role_code)
    for key in style.formula_adjustments:
        if key not in parameters:
            parameters[key] = resolver.value(key)


def _apply_custom_post_count(context: CalculationContext) -> CalculationContext:
    """A custom formula on the post role replaces the computed post count."""
    formula = context.custom_formulas.get(POST_ROLE)
    if formula is None:
        return context
    raw = evaluate_custom(formula, context.variables(), POST_ROLE)
    posts = int(round_quantity(raw, UnitType.EACH))
    return dataclasses.replace(context, post_count=posts)


def _material_quantities(items: list[MaterialLineItem]) -> dict[str, float]:
    return {
        f"{item.role}_qty": round_quantity(item.raw_quantity, item.unit_type)
        for item in items
    }
