"""Eligibility rule resolution for material and labor roles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from fencebom.exceptions import AmbiguousRuleError
from fencebom.models.enums import RuleKind, SelectionMode
from fencebom.models.catalog import LaborCode, Material

if TYPE_CHECKING:
    from fencebom.data.repository import CatalogRepository
    from fencebom.models.catalog import EligibilityRule

CatalogItem = TypeVar("CatalogItem", Material, LaborCode)


class RuleScope(Protocol):
    """What rule matching needs to know about a calculation."""

    @property
    def configuration_id(self) -> str: ...

    @property
    def product_type_code(self) -> str: ...

    @property
    def attributes(self) -> Mapping[str, str]: ...


@dataclass(frozen=True)
class SelectionScope:
    """Rule scope used before the calculation context exists."""

    configuration_id: str
    product_type_code: str
    attributes: Mapping[str, str]


@dataclass(frozen=True)
class Candidate(Generic[CatalogItem]):
    """A catalog item allowed to fill a role, with the rule that allowed it."""

    item: CatalogItem
    rule_id: str
    selection_mode: SelectionMode
    is_default: bool


class RuleResolver:
    """Resolves eligible materials and labor codes per component role.

    Candidates are ordered by rule specificity (specific, then subcategory,
    then category), then default rules before others, then display order.
    Rules whose attribute filter does not match the scope are excluded.
    """

    def __init__(self, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def eligible_materials(self, role: str, scope: RuleScope) -> list[Candidate[Material]]:
        return self._eligible(
            RuleKind.MATERIAL, role, scope, self._catalog.list_materials()
        )

    def eligible_labor(self, role: str, scope: RuleScope) -> list[Candidate[LaborCode]]:
        return self._eligible(
            RuleKind.LABOR, role, scope, self._catalog.list_labor_codes()
        )

    def default_material(self, role: str, scope: RuleScope) -> Material | None:
        candidates = self.eligible_materials(role, scope)
        return candidates[0].item if candidates else None

    def default_labor(self, role: str, scope: RuleScope) -> LaborCode | None:
        candidates = self.eligible_labor(role, scope)
        return candidates[0].item if candidates else None

    def _eligible(
        self,
        kind: RuleKind,
        role: str,
        scope: RuleScope,
        items: list[CatalogItem],
    ) -> list[Candidate[CatalogItem]]:
        rules = [
            rule
            for rule in self._catalog.rules_for(kind, scope.product_type_code, role)
            if filter_matches(rule.attribute_filter, scope.attributes)
        ]
        _check_ambiguous_defaults(rules, role, scope)

        ranked = sorted(
            enumerate(rules),
            key=lambda pair: (
                -pair[1].selection_mode.specificity,
                not pair[1].is_default,
                pair[1].display_order,
                pair[0],
            ),
        )

        candidates: list[Candidate[CatalogItem]] = []
        seen: set[str] = set()
        for _, rule in ranked:
            for item in items:
                if item.id in seen or not item.is_active:
                    continue
                if not _rule_selects(rule, item):
                    continue
                seen.add(item.id)
                candidates.append(
                    Candidate(
                        item=item,
                        rule_id=rule.id,
                        selection_mode=rule.selection_mode,
                        is_default=rule.is_default,
                    )
                )
        return candidates


def filter_matches(
    attribute_filter: Mapping[str, list[str]], attributes: Mapping[str, str]
) -> bool:
    """Conjunctive match: every filter key must be present and its value allowed."""
    for key, allowed in attribute_filter.items():
        actual = attributes.get(key)
        if actual is None or actual not in allowed:
            return False
    return True


def _rule_selects(rule: EligibilityRule, item: Material | LaborCode) -> bool:
    match rule.selection_mode:
        case SelectionMode.SPECIFIC:
            selected = item.id == rule.target_id
        case SelectionMode.SUBCATEGORY:
            selected = (
                item.category == rule.category and item.subcategory == rule.subcategory
            )
        case SelectionMode.CATEGORY:
            selected = item.category == rule.category
    if not selected:
        return False

    if isinstance(item, Material) and (
        rule.min_length_ft is not None or rule.max_length_ft is not None
    ):
        if item.length_ft is None:
            return False
        if rule.min_length_ft is not None and item.length_ft < rule.min_length_ft:
            return False
        if rule.max_length_ft is not None and item.length_ft > rule.max_length_ft:
            return False
    return True


def _check_ambiguous_defaults(
    rules: list[EligibilityRule], role: str, scope: RuleScope
) -> None:
    defaults_by_mode: dict[SelectionMode, list[str]] = {}
    for rule in rules:
        if rule.is_default:
            defaults_by_mode.setdefault(rule.selection_mode, []).append(rule.id)

    for mode, rule_ids in defaults_by_mode.items():
        if len(rule_ids) > 1:
            msg = (
                f"{len(rule_ids)} default '{mode}' rules match role '{role}' "
                f"for product type '{scope.product_type_code}'"
            )
            raise AmbiguousRuleError(
                msg,
                configuration_id=scope.configuration_id,
                role=role,
                rule_ids=tuple(rule_ids),
            )
