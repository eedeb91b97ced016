"""
Estimator configuration (JSON based).
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from jetsim.core.toolpath import DEFAULT_CUTTING_SPEED

logger = logging.getLogger(__name__)

# 30 seconds per pierce
DEFAULT_PIERCE_TIME = 0.5


class ConfigError(ValueError):
    """Invalid or unreadable estimator configuration."""


@dataclass
class EstimatorConfig:
    """Job-level defaults for cut-time estimation."""

    # Minutes spent on each pierce
    pierce_time_per_pierce: float = DEFAULT_PIERCE_TIME

    # Used when a program carries no feed rate (mm/min)
    fallback_cutting_speed: float = DEFAULT_CUTTING_SPEED

    # Forces the cutting speed instead of the program's average feed (mm/min)
    cutting_speed_override: Optional[float] = None

    # Points per arc when sampling toolpaths for replay
    arc_samples: int = 32

    def __post_init__(self) -> None:
        if self.pierce_time_per_pierce < 0:
            raise ConfigError(f"pierce_time_per_pierce must be >= 0, got {self.pierce_time_per_pierce}")
        if self.fallback_cutting_speed <= 0:
            raise ConfigError(f"fallback_cutting_speed must be > 0, got {self.fallback_cutting_speed}")
        if self.cutting_speed_override is not None and self.cutting_speed_override <= 0:
            raise ConfigError(f"cutting_speed_override must be > 0, got {self.cutting_speed_override}")
        if self.arc_samples < 2:
            raise ConfigError(f"arc_samples must be >= 2, got {self.arc_samples}")

    @classmethod
    def from_json(cls, path: str | Path) -> EstimatorConfig:
        """Load configuration from JSON file. A missing file yields the defaults."""
        path = Path(path)
        if not path.exists():
            logger.info("Config %s not found, using defaults", path)
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a JSON object")

        override = data.get("cutting_speed_override")
        try:
            values = {
                "pierce_time_per_pierce": float(data.get("pierce_time_per_pierce", DEFAULT_PIERCE_TIME)),
                "fallback_cutting_speed": float(data.get("fallback_cutting_speed", DEFAULT_CUTTING_SPEED)),
                "cutting_speed_override": float(override) if override is not None else None,
                "arc_samples": int(data.get("arc_samples", 32)),
            }
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in config {path}: {e}") from e
        return cls(**values)

    def to_json(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)
