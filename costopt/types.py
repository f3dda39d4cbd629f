"""
Core types for the agent cost optimizer.

Execution modes, complexity tiers, the default cost multiplier table and the
analysis record returned by the classifier.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ExecutionMode(str, Enum):
    """Strategy tiers for handling a task, cheapest first."""

    CHAT = "chat"  # Direct response
    SINGLE_AGENT = "single-agent"  # One worker
    MULTI_AGENT = "multi-agent"  # Decomposed across several workers


class ComplexityLevel(str, Enum):
    """Discrete complexity tiers derived from the complexity score."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"


# Relative cost of running a task in each mode
COST_MULTIPLIERS: Dict[ExecutionMode, float] = {
    ExecutionMode.CHAT: 1,
    ExecutionMode.SINGLE_AGENT: 4,
    ExecutionMode.MULTI_AGENT: 15,
}

MODE_LABELS: Dict[ExecutionMode, str] = {
    ExecutionMode.CHAT: "Chat (1×)",
    ExecutionMode.SINGLE_AGENT: "Single Agent (4×)",
    ExecutionMode.MULTI_AGENT: "Multi-Agent (15×)",
}


def coerce_mode(mode: Any) -> ExecutionMode:
    """
    Resolve an execution mode from an enum member or its string value.

    Accepts "single_agent" as well as "single-agent". Anything else is a
    programming error and raises ValueError.
    """
    if isinstance(mode, ExecutionMode):
        return mode

    if isinstance(mode, str):
        normalized = mode.strip().lower().replace("_", "-")
        for candidate in ExecutionMode:
            if candidate.value == normalized:
                return candidate

    valid = ", ".join(m.value for m in ExecutionMode)
    raise ValueError(f"Unknown execution mode: {mode!r} (expected one of {valid})")


@dataclass(frozen=True)
class TaskAnalysis:
    """Result of analyzing a single task description"""

    complexity: ComplexityLevel
    estimated_tokens: int
    recommended_mode: ExecutionMode
    confidence: float  # 0.5-0.95
    reasoning: str

    # Raw score behind the complexity tier
    complexity_score: float = 0.0

    # Which text heuristics fired
    indicators: Dict[str, bool] = field(default_factory=dict)

    # Length measurements of the analyzed text
    characteristics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "complexity": self.complexity.value,
            "estimated_tokens": self.estimated_tokens,
            "recommended_mode": self.recommended_mode.value,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "complexity_score": self.complexity_score,
            "indicators": dict(self.indicators),
            "characteristics": dict(self.characteristics),
        }
