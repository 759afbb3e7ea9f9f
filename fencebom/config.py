"""Engine settings: fallback constants, standard assumptions and switches."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from fencebom.models.configuration import CalculationInput

logger = logging.getLogger(__name__)

_ENV_PREFIX = "FENCEBOM_"

# Last-resort values when neither style, configuration nor product type
# supplies a parameter.
DEFAULT_FALLBACK_PARAMETERS: dict[str, float] = {
    "post_spacing": 8.0,
    "rail_count": 2.0,
    "waste_factor": 1.025,
    "style_multiplier": 1.0,
    "side_multiplier": 1.0,
    "picket_width": 5.5,
    "board_width": 5.5,
    "board_length": 8.0,
    "cap_length": 8.0,
    "trim_length": 8.0,
    "rot_board_length": 8.0,
    "brackets_per_rail": 2.0,
    "nails_per_picket": 2.0,
    "nails_per_coil": 300.0,
    "concrete_bags_per_post": 0.5,
}

# Standard job used when re-costing SKUs without a concrete job.
STANDARD_ASSUMPTIONS = CalculationInput(net_length=100.0, lines=4, gates=0)


class EngineSettings(BaseModel):
    """Settings frozen into an engine at construction time."""

    model_config = ConfigDict(frozen=True)

    fallback_parameters: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_FALLBACK_PARAMETERS)
    )
    unknown_parameter_value: float = 0.0
    standard_assumptions: CalculationInput = STANDARD_ASSUMPTIONS
    strict_parameters: bool = False
    debug_trace: bool = True

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> EngineSettings:
        """Build settings from ``FENCEBOM_*`` environment variables.

        An optional ``.env`` file is loaded first. Recognised variables:
        ``FENCEBOM_STRICT_PARAMETERS``, ``FENCEBOM_DEBUG_TRACE``,
        ``FENCEBOM_STANDARD_NET_LENGTH``, ``FENCEBOM_STANDARD_LINES``,
        ``FENCEBOM_STANDARD_GATES`` and ``FENCEBOM_FALLBACK_<KEY>`` for any
        fallback parameter.
        """
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()

        fallbacks = dict(DEFAULT_FALLBACK_PARAMETERS)
        fallback_prefix = f"{_ENV_PREFIX}FALLBACK_"
        for name, raw in os.environ.items():
            if name.startswith(fallback_prefix):
                key = name[len(fallback_prefix):].lower()
                fallbacks[key] = float(raw)
                logger.debug("Fallback parameter %s=%s from environment", key, raw)

        standard = CalculationInput(
            net_length=float(
                os.environ.get(
                    f"{_ENV_PREFIX}STANDARD_NET_LENGTH", STANDARD_ASSUMPTIONS.net_length
                )
            ),
            lines=int(
                os.environ.get(f"{_ENV_PREFIX}STANDARD_LINES", STANDARD_ASSUMPTIONS.lines)
            ),
            gates=int(
                os.environ.get(f"{_ENV_PREFIX}STANDARD_GATES", STANDARD_ASSUMPTIONS.gates)
            ),
        )

        return cls(
            fallback_parameters=fallbacks,
            standard_assumptions=standard,
            strict_parameters=_env_flag(f"{_ENV_PREFIX}STRICT_PARAMETERS", default=False),
            debug_trace=_env_flag(f"{_ENV_PREFIX}DEBUG_TRACE", default=True),
        )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}
