"""Tolerance and display configuration for vector element types."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_FLOAT32_EPSILON = 1e-5
DEFAULT_FLOAT64_EPSILON = 1e-9
DEFAULT_DISPLAY_DECIMALS = 6


# //1.- Bundle the per-precision tolerances and the text formatting width.
@dataclass(frozen=True)
class ToleranceSettings:
    """Epsilon per element precision plus the decimals used by ``repr``."""

    float32_epsilon: float = DEFAULT_FLOAT32_EPSILON
    float64_epsilon: float = DEFAULT_FLOAT64_EPSILON
    display_decimals: int = DEFAULT_DISPLAY_DECIMALS

    def __post_init__(self) -> None:
        # //2.- Reject tolerances that would make every comparison fail or pass.
        if not self.float32_epsilon > 0:
            raise ValueError("float32 epsilon must be positive")
        if not self.float64_epsilon > 0:
            raise ValueError("float64 epsilon must be positive")
        if self.display_decimals < 0:
            raise ValueError("display decimals must not be negative")

    # //3.- Build settings from a plain mapping, falling back to defaults per key.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, object]] = None) -> "ToleranceSettings":
        if not payload:
            return cls()
        return cls(
            float32_epsilon=float(payload.get("float32_epsilon", DEFAULT_FLOAT32_EPSILON)),  # type: ignore[arg-type]
            float64_epsilon=float(payload.get("float64_epsilon", DEFAULT_FLOAT64_EPSILON)),  # type: ignore[arg-type]
            display_decimals=int(payload.get("display_decimals", DEFAULT_DISPLAY_DECIMALS)),  # type: ignore[arg-type]
        )

    # //4.- Allow overriding tolerances through environment variables.
    @classmethod
    def from_environment(cls, prefix: str = "VEXEL") -> "ToleranceSettings":
        mapping: Dict[str, object] = {}
        for key in ("float32_epsilon", "float64_epsilon", "display_decimals"):
            raw = os.getenv(f"{prefix}_{key.upper()}")
            if raw is None:
                continue
            LOGGER.debug("Overriding %s from environment: %s", key, raw)
            mapping[key] = raw
        return cls.from_mapping(mapping)


# //5.- Canonical accessor used when the default precisions are created.
def load_tolerance_settings(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    env_prefix: str = "VEXEL",
) -> ToleranceSettings:
    if mapping is not None:
        return ToleranceSettings.from_mapping(mapping)
    return ToleranceSettings.from_environment(prefix=env_prefix)


DEFAULT_SETTINGS = load_tolerance_settings()
