"""
Agent Cost Optimizer

Heuristic task routing between execution modes:
- Task complexity scoring from text heuristics
- Execution mode recommendation (chat, single agent, multi-agent)
- Relative cost comparison across modes
"""

from .classifier import TaskComplexityClassifier, create_classifier
from .config import OptimizerConfig, ValueThresholds, load_config
from .types import (
    COST_MULTIPLIERS,
    MODE_LABELS,
    ComplexityLevel,
    ExecutionMode,
    TaskAnalysis,
)

__version__ = "0.1.0"

__all__ = [
    # Classifier
    "TaskComplexityClassifier",
    "create_classifier",
    "TaskAnalysis",
    # Enumerations and defaults
    "ExecutionMode",
    "ComplexityLevel",
    "COST_MULTIPLIERS",
    "MODE_LABELS",
    # Configuration
    "OptimizerConfig",
    "ValueThresholds",
    "load_config",
]
