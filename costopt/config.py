"""
Optimizer Configuration

Token thresholds and cost multiplier overrides for the task complexity
classifier, plus loading them from a YAML file.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from .types import COST_MULTIPLIERS, ExecutionMode, coerce_mode

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


@dataclass(frozen=True)
class ValueThresholds:
    """Token-count ceilings used when picking an execution mode"""

    chat: float = 10
    single_agent: float = 50
    multi_agent: float = 200  # Reported only, mode selection never reads it

    FIELDS = ("chat", "single_agent", "multi_agent")

    def validate(self) -> List[str]:
        """Validate thresholds, return list of errors"""
        errors = []
        for name in self.FIELDS:
            value = getattr(self, name)
            if not _is_number(value):
                errors.append(f"value_thresholds.{name} must be a finite number")
            elif value < 0:
                errors.append(f"value_thresholds.{name} must not be negative")
        return errors

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary"""
        return {name: getattr(self, name) for name in self.FIELDS}


@dataclass
class OptimizerConfig:
    """Configuration for a TaskComplexityClassifier"""

    value_thresholds: ValueThresholds = field(default_factory=ValueThresholds)

    # Per-mode overrides, merged over COST_MULTIPLIERS
    custom_multipliers: Dict[ExecutionMode, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize multiplier keys to ExecutionMode members"""
        self.custom_multipliers = {
            coerce_mode(mode): multiplier
            for mode, multiplier in self.custom_multipliers.items()
        }

    @property
    def multipliers(self) -> Dict[ExecutionMode, float]:
        """Default multipliers with any overrides applied"""
        merged = dict(COST_MULTIPLIERS)
        merged.update(self.custom_multipliers)
        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration, return list of errors.

        Thresholds out of order are allowed but logged as a warning.
        """
        errors = self.value_thresholds.validate()

        for mode, multiplier in self.custom_multipliers.items():
            if not _is_number(multiplier):
                errors.append(
                    f"custom_multipliers.{mode.value} must be a finite number"
                )
            elif not multiplier > 0:
                errors.append(f"custom_multipliers.{mode.value} must be positive")

        thresholds = self.value_thresholds
        if not errors and thresholds.chat > thresholds.single_agent:
            logger.warning(
                f"Chat threshold ({thresholds.chat}) exceeds single-agent "
                f"threshold ({thresholds.single_agent})"
            )

        return errors

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "OptimizerConfig":
        """
        Build a configuration from a plain dictionary.

        Threshold fields fall back to their defaults individually, so
        {"value_thresholds": {"chat": 5}} keeps single_agent and multi_agent
        at 50 and 200.

        Raises:
            ValueError: If a mode key is unknown or a value is out of range
        """
        data = data or {}

        thresholds = ValueThresholds()
        threshold_data = data.get("value_thresholds") or {}
        if not isinstance(threshold_data, Mapping):
            raise ValueError("value_thresholds must be a mapping")
        overrides = {
            name: threshold_data[name]
            for name in ValueThresholds.FIELDS
            if name in threshold_data
        }
        if overrides:
            thresholds = replace(thresholds, **overrides)

        multiplier_data = data.get("custom_multipliers") or {}
        if not isinstance(multiplier_data, Mapping):
            raise ValueError("custom_multipliers must be a mapping")
        config = cls(
            value_thresholds=thresholds,
            custom_multipliers=dict(multiplier_data),
        )

        errors = config.validate()
        if errors:
            raise ValueError(f"Invalid optimizer configuration: {'; '.join(errors)}")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "value_thresholds": self.value_thresholds.to_dict(),
            "custom_multipliers": {
                mode.value: multiplier
                for mode, multiplier in self.custom_multipliers.items()
            },
        }


def load_config(config_path: Union[str, Path]) -> OptimizerConfig:
    """
    Load optimizer settings from the "optimizer" section of a YAML file.

    An empty file, or one without that section, yields the defaults.
    """
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    logger.debug(f"Loaded optimizer configuration from {config_path}")
    return OptimizerConfig.from_dict(data.get("optimizer") or {})
