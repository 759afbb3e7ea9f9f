"""Catalog re-pricing: recalculate many configurations under one job input."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fencebom.exceptions import FenceBomError
from fencebom.models.enums import ErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fencebom.data.repository import CatalogRepository
    from fencebom.engine import FenceBomEngine
    from fencebom.models.configuration import CalculationInput, Configuration
    from fencebom.models.result import CalculationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepricingFailure:
    """A configuration whose calculation failed, with the reason."""

    configuration_id: str
    sku: str
    kind: ErrorKind
    message: str
    role: str | None = None


@dataclass(frozen=True)
class RepricingReport:
    """Outcome of a re-pricing run.

    ``results`` keeps input order for the configurations that succeeded;
    ``failures`` lists the rest. One failure never hides another result.
    """

    results: list[CalculationResult] = field(default_factory=list)
    failures: list[RepricingFailure] = field(default_factory=list)
    processing_time_seconds: float = 0.0

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def result_for(self, sku: str) -> CalculationResult | None:
        for result in self.results:
            if result.sku == sku:
                return result
        return None

    def cost_table(self) -> dict[str, dict[str, float]]:
        """Per-SKU material, labor and total cost, as stored on a SKU row."""
        return {
            result.sku: {
                "material_cost": result.total_material_cost,
                "labor_cost": result.total_labor_cost,
                "total_cost": result.total_cost,
                "cost_per_foot": result.cost_per_foot,
            }
            for result in self.results
        }


def reprice_catalog(
    engine: FenceBomEngine,
    configurations: Iterable[Configuration],
    catalog: CatalogRepository,
    job: CalculationInput | None = None,
) -> RepricingReport:
    """Recalculate every configuration, isolating failures per configuration.

    Engine errors are recorded on the report and the run continues.
    Anything else is a programming error and propagates.

    Args:
        engine: The engine to calculate with.
        configurations: The SKUs to re-price.
        catalog: One catalog snapshot shared by every calculation.
        job: Job input; defaults to the engine's standard assumptions.
    """
    start = time.monotonic()
    job = job or engine.settings.standard_assumptions
    results: list[CalculationResult] = []
    failures: list[RepricingFailure] = []

    for configuration in configurations:
        try:
            result = engine.calculate(configuration, catalog, job)
        except FenceBomError as exc:
            logger.warning(
                "Re-pricing %s failed (%s): %s", configuration.sku, exc.kind, exc
            )
            failures.append(
                RepricingFailure(
                    configuration_id=configuration.id,
                    sku=configuration.sku,
                    kind=exc.kind,
                    message=str(exc),
                    role=exc.role,
                )
            )
            continue
        results.append(result)

    elapsed = time.monotonic() - start
    logger.info(
        "Re-priced %d configurations (%d failed) in %.2fs",
        len(results) + len(failures),
        len(failures),
        elapsed,
    )
    return RepricingReport(
        results=results,
        failures=failures,
        processing_time_seconds=round(elapsed, 2),
    )
