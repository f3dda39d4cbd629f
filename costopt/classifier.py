"""
Task Complexity Classifier

Scores a natural-language task description with text heuristics and
recommends the cheapest execution mode (chat, single agent, multi-agent)
that can handle it. Also compares the relative cost of each mode.
"""

import logging
import math
import re
from typing import Any, Dict, Mapping, Optional, Union

from .config import OptimizerConfig, ValueThresholds
from .types import (
    MODE_LABELS,
    ComplexityLevel,
    ExecutionMode,
    TaskAnalysis,
    coerce_mode,
)

logger = logging.getLogger(__name__)

TaskInput = Union[str, Mapping[str, Any]]


class TaskComplexityClassifier:
    """
    Classifies task complexity and recommends an execution mode.

    This classifier:
    1. Scores a task from its word count and keyword heuristics
    2. Estimates tokens at roughly four characters per token
    3. Maps the score onto a complexity tier
    4. Picks the cheapest mode whose token and score ceilings both hold
    """

    # Heuristics are matched against the description only, never the context
    INDICATOR_PATTERNS = {
        "multiple_parts": re.compile(r",\s*and|\.\s+[A-Z]"),
        "conditional": re.compile(
            r"\b(if|when|unless|whether|or|and)\b", re.IGNORECASE
        ),
        "iteration": re.compile(r"\b(each|every|loop|iterate|repeat)\b", re.IGNORECASE),
        "complex_reasoning": re.compile(
            r"\b(analyze|compare|evaluate|reason|explain why)\b", re.IGNORECASE
        ),
        "code_related": re.compile(
            r"\b(code|function|class|implement|debug|refactor)\b", re.IGNORECASE
        ),
        "multi_step": re.compile(
            r"\b(first|then|next|finally|step|process)\b", re.IGNORECASE
        ),
    }

    INDICATOR_WEIGHTS = {
        "multiple_parts": 15,
        "conditional": 15,
        "iteration": 20,
        "complex_reasoning": 20,
        "code_related": 15,
        "multi_step": 10,
    }

    # Length contributes words / 2, capped
    WORD_SCORE_DIVISOR = 2
    WORD_SCORE_CAP = 20

    CHARS_PER_TOKEN = 4

    # Upper bounds (exclusive) of each tier; anything above is VERY_HIGH
    COMPLEXITY_BREAKPOINTS = (
        (20, ComplexityLevel.SIMPLE),
        (45, ComplexityLevel.MEDIUM),
        (70, ComplexityLevel.HIGH),
    )

    # Score ceilings (inclusive) for the cheaper modes
    CHAT_SCORE_CEILING = 20
    SINGLE_AGENT_SCORE_CEILING = 50

    BASE_CONFIDENCE = 0.5
    MAX_CONFIDENCE = 0.95

    def __init__(
        self, config: Optional[Union[OptimizerConfig, Mapping[str, Any]]] = None
    ):
        """
        Initialize the classifier.

        Args:
            config: OptimizerConfig, or a dictionary with optional
                "value_thresholds" and "custom_multipliers" entries

        Raises:
            ValueError: If the configuration is invalid
        """
        if isinstance(config, OptimizerConfig):
            errors = config.validate()
            if errors:
                raise ValueError(
                    f"Invalid optimizer configuration: {'; '.join(errors)}"
                )
            self.config = config
        else:
            self.config = OptimizerConfig.from_dict(config)

        self._thresholds = self.config.value_thresholds
        self._multipliers = self.config.multipliers

        multipliers = {mode.value: m for mode, m in self._multipliers.items()}
        logger.debug(
            f"TaskComplexityClassifier initialized with thresholds "
            f"{self._thresholds.to_dict()} and multipliers {multipliers}"
        )

    @property
    def value_thresholds(self) -> ValueThresholds:
        return self._thresholds

    @property
    def multipliers(self) -> Dict[ExecutionMode, float]:
        return dict(self._multipliers)

    def analyze_task(self, task: TaskInput) -> TaskAnalysis:
        """
        Analyze a task and recommend how to execute it.

        Args:
            task: Task description, or a dictionary with "description" and
                an optional "context"

        Returns:
            TaskAnalysis with complexity tier, token estimate and recommended mode
        """
        if isinstance(task, str):
            description, context = task, ""
        else:
            description = task.get("description") or ""
            context = task.get("context") or ""

        combined_text = f"{description} {context}"
        # Splitting on whitespace runs keeps edge empties, so the separator
        # before an empty context counts as a word
        word_count = len(re.split(r"\s+", combined_text))
        char_count = len(combined_text)

        indicators = self.detect_indicators(description)

        complexity_score = min(
            word_count / self.WORD_SCORE_DIVISOR, self.WORD_SCORE_CAP
        )
        for name, fired in indicators.items():
            if fired:
                complexity_score += self.INDICATOR_WEIGHTS[name]

        estimated_tokens = self.estimate_tokens(combined_text)
        complexity = self.classify_score(complexity_score)
        recommended_mode = self.determine_mode(estimated_tokens, complexity_score)
        confidence = self._confidence_for_score(complexity_score)

        reasoning = (
            f"Score: {complexity_score:.1f}/100. Tokens: ~{estimated_tokens}. "
            f"{self.get_mode_label(recommended_mode)}"
        )

        logger.debug(
            f"Analyzed task ({word_count} words): score={complexity_score:.1f}, "
            f"tokens={estimated_tokens}, mode={recommended_mode.value}"
        )

        return TaskAnalysis(
            complexity=complexity,
            estimated_tokens=estimated_tokens,
            recommended_mode=recommended_mode,
            confidence=confidence,
            reasoning=reasoning,
            complexity_score=complexity_score,
            indicators=indicators,
            characteristics={
                "word_count": word_count,
                "char_count": char_count,
                "has_context": bool(context),
            },
        )

    def detect_indicators(self, text: str) -> Dict[str, bool]:
        """Evaluate each keyword heuristic against the text"""
        return {
            name: bool(pattern.search(text))
            for name, pattern in self.INDICATOR_PATTERNS.items()
        }

    @classmethod
    def estimate_tokens(cls, text: str) -> int:
        """Estimate token count (~4 characters per token)"""
        return math.ceil(len(text) / cls.CHARS_PER_TOKEN)

    @classmethod
    def classify_score(cls, complexity_score: float) -> ComplexityLevel:
        """Map a complexity score onto its tier"""
        for upper_bound, level in cls.COMPLEXITY_BREAKPOINTS:
            if complexity_score < upper_bound:
                return level
        return ComplexityLevel.VERY_HIGH

    def determine_mode(
        self, estimated_tokens: float, complexity_score: float
    ) -> ExecutionMode:
        """
        Pick the cheapest mode whose token ceiling and score ceiling both hold.

        Falls through to MULTI_AGENT when neither cheaper mode qualifies.
        """
        if (
            estimated_tokens <= self._thresholds.chat
            and complexity_score <= self.CHAT_SCORE_CEILING
        ):
            return ExecutionMode.CHAT
        if (
            estimated_tokens <= self._thresholds.single_agent
            and complexity_score <= self.SINGLE_AGENT_SCORE_CEILING
        ):
            return ExecutionMode.SINGLE_AGENT
        return ExecutionMode.MULTI_AGENT

    def _confidence_for_score(self, complexity_score: float) -> float:
        # Linear from 0.5 at score 0, capped once the score reaches 100
        return min(
            self.MAX_CONFIDENCE,
            self.BASE_CONFIDENCE + (complexity_score / 100) * 0.45,
        )

    def get_mode_label(self, mode: Union[ExecutionMode, str]) -> str:
        """Human-readable label for a mode, e.g. "Chat (1×)" """
        return MODE_LABELS[coerce_mode(mode)]

    def calculate_cost(self, mode: Union[ExecutionMode, str], tokens: float) -> float:
        """
        Relative cost of running a task of the given size in a mode.

        Token counts are not validated.
        """
        return tokens * self._multipliers[coerce_mode(mode)]

    def compare_costs(self, tokens: float) -> Dict[ExecutionMode, float]:
        """Relative cost of the given token count in every mode"""
        return {mode: self.calculate_cost(mode, tokens) for mode in ExecutionMode}

    def get_multiplier(self, mode: Union[ExecutionMode, str]) -> float:
        """Active cost multiplier for a mode, including overrides"""
        return self._multipliers[coerce_mode(mode)]


def create_classifier(
    config: Optional[Union[OptimizerConfig, Mapping[str, Any]]] = None,
) -> TaskComplexityClassifier:
    """
    Factory function to create a TaskComplexityClassifier instance.

    Args:
        config: Configuration dictionary or OptimizerConfig

    Returns:
        Configured TaskComplexityClassifier instance
    """
    return TaskComplexityClassifier(config)
