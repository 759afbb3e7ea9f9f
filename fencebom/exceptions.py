"""Custom exception hierarchy for the fencebom calculation engine."""

from __future__ import annotations

from fencebom.models.enums import ErrorKind


class FenceBomError(Exception):
    """Base exception for all fencebom errors.

    Every error carries enough context for a catalog maintainer to locate
    the offending data: the configuration, the component role, and the
    rule ids or formula text involved.
    """

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str,
        *,
        configuration_id: str | None = None,
        role: str | None = None,
        rule_ids: tuple[str, ...] = (),
        formula: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.configuration_id = configuration_id
        self.role = role
        self.rule_ids = rule_ids
        self.formula = formula

    def with_configuration(self, configuration_id: str) -> FenceBomError:
        """Attach the configuration id if the raiser did not know it."""
        if self.configuration_id is None:
            self.configuration_id = configuration_id
        return self

    def __str__(self) -> str:
        details = []
        if self.configuration_id is not None:
            details.append(f"configuration={self.configuration_id}")
        if self.role is not None:
            details.append(f"role={self.role}")
        if self.rule_ids:
            details.append(f"rules={','.join(self.rule_ids)}")
        if self.formula is not None:
            details.append(f"formula={self.formula!r}")
        if not details:
            return self.message
        return f"{self.message} ({'; '.join(details)})"


class ConfigurationError(FenceBomError):
    """Raised when a configuration cannot be satisfied by the catalog.

    Typical causes: a required role has no eligible material or labor code,
    a mapped material is not eligible for its role, or a labor code has no
    rate for the business unit.
    """

    kind = ErrorKind.CONFIGURATION


class AmbiguousRuleError(FenceBomError):
    """Raised when two equally specific default rules match the same role."""

    kind = ErrorKind.AMBIGUOUS_RULE


class FormulaError(FenceBomError):
    """Raised when a custom formula cannot be evaluated to a finite number."""

    kind = ErrorKind.FORMULA


class ParameterGapError(FenceBomError):
    """A parameter fell through to the engine-wide fallback.

    Non-fatal by default: the gap is recorded on the result as a warning.
    Raised only when the engine runs with ``strict_parameters`` enabled.
    """

    kind = ErrorKind.PARAMETER_GAP
