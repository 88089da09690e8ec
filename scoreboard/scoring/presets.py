"""Metric tables and weight presets.

Two presets exist and are kept side by side:

- ``standard``: TheoEntry weighs 35. 55 fundamental + 45 technical = 100.
- ``detailed``: TheoEntry weighs 40. 55 fundamental + 50 technical = 105,
  normalized back to a 0-100 scale. This preset also uses the inverted
  SMA-cross reading and labels the middle band BLUE.

The score is always ``points / total_active_points * 100``, where
``total_active_points`` is the sum of the preset's weights.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from scoreboard.core.exceptions import NotFoundError
from scoreboard.core.logging import get_logger

from .classifiers import SmaCrossStrategy
from .config import get_scoring_config

logger = get_logger("scoring.presets")


class MetricKey(str, Enum):
    """Stable identifiers for every scored metric."""

    VALUE_CREATION = "value_creation"
    MUNGER_QUALITY_SCORE = "munger_quality_score"
    IRR = "irr"
    RO40_F1 = "ro40_f1"
    RO40_F2 = "ro40_f2"
    LEVERAGE_F2 = "leverage_f2"
    CASH_SDEBT = "cash_sdebt"
    CURRENT_RATIO = "current_ratio"
    PE1_INDUSTRY = "pe1_industry"
    PE2_INDUSTRY = "pe2_industry"
    TB_S_PRICE = "tb_s_price"
    THEO_ENTRY = "theo_entry"
    SMA100 = "sma100"
    SMA200 = "sma200"
    SMA_CROSS = "sma_cross"


class ScoringMethod(str, Enum):
    """How a color turns into points."""

    THREE_BAND = "3Band"  # GREEN 1.0, ORANGE 0.7, RED/BLANK 0
    GREEN_ONLY = "GreenOnly"  # full weight iff GREEN


class MetricCategory(str, Enum):
    FUNDAMENTAL = "Fundamental"
    TECHNICAL = "Technical"


METRIC_NAMES: dict[MetricKey, str] = {
    MetricKey.VALUE_CREATION: "VALUE CREATION",
    MetricKey.MUNGER_QUALITY_SCORE: "Munger Quality Score",
    MetricKey.IRR: "IRR",
    MetricKey.RO40_F1: "Ro40 F1",
    MetricKey.RO40_F2: "Ro40 F2",
    MetricKey.LEVERAGE_F2: "LEVERAGE F2",
    MetricKey.CASH_SDEBT: "Cash/SDebt",
    MetricKey.CURRENT_RATIO: "Current Ratio",
    MetricKey.PE1_INDUSTRY: "P/E1 INDUSTRY",
    MetricKey.PE2_INDUSTRY: "P/E2 INDUSTRY",
    MetricKey.TB_S_PRICE: "(TB/S)/Price",
    MetricKey.THEO_ENTRY: "TheoEntry",
    MetricKey.SMA100: "SMA(100)",
    MetricKey.SMA200: "SMA(200)",
    MetricKey.SMA_CROSS: "SMA Cross",
}

FUNDAMENTAL_METRICS: frozenset[MetricKey] = frozenset(
    {
        MetricKey.VALUE_CREATION,
        MetricKey.MUNGER_QUALITY_SCORE,
        MetricKey.IRR,
        MetricKey.RO40_F1,
        MetricKey.RO40_F2,
        MetricKey.LEVERAGE_F2,
        MetricKey.CASH_SDEBT,
        MetricKey.CURRENT_RATIO,
        MetricKey.PE1_INDUSTRY,
        MetricKey.PE2_INDUSTRY,
        MetricKey.TB_S_PRICE,
    }
)


def metric_category(key: MetricKey) -> MetricCategory:
    if key in FUNDAMENTAL_METRICS:
        return MetricCategory.FUNDAMENTAL
    return MetricCategory.TECHNICAL


@dataclass(frozen=True)
class Metric:
    """One row of a metric table."""

    key: MetricKey
    weight: float
    method: ScoringMethod

    @property
    def name(self) -> str:
        return METRIC_NAMES[self.key]

    @property
    def category(self) -> MetricCategory:
        return metric_category(self.key)


@dataclass(frozen=True)
class ScoringPreset:
    """A named metric table plus the choices that go with it."""

    name: str
    metrics: tuple[Metric, ...]
    sma_cross_strategy: SmaCrossStrategy = SmaCrossStrategy.STANDARD
    orange_label: str = "ORANGE"
    description: str = ""

    @property
    def total_active_points(self) -> float:
        """Sum of all weights; the divisor that maps points onto 0-100."""
        return sum(m.weight for m in self.metrics)

    @property
    def fundamental_points(self) -> float:
        return sum(m.weight for m in self.metrics if m.category is MetricCategory.FUNDAMENTAL)

    @property
    def technical_points(self) -> float:
        return sum(m.weight for m in self.metrics if m.category is MetricCategory.TECHNICAL)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API responses."""
        return {
            "name": self.name,
            "description": self.description,
            "sma_cross_strategy": self.sma_cross_strategy.value,
            "orange_label": self.orange_label,
            "total_active_points": self.total_active_points,
            "fundamental_points": self.fundamental_points,
            "technical_points": self.technical_points,
            "metrics": [
                {
                    "key": m.key.value,
                    "name": m.name,
                    "weight": m.weight,
                    "method": m.method.value,
                    "category": m.category.value,
                }
                for m in self.metrics
            ],
        }


_THREE_BAND = ScoringMethod.THREE_BAND
_GREEN_ONLY = ScoringMethod.GREEN_ONLY

_FUNDAMENTAL_TABLE: tuple[Metric, ...] = (
    Metric(MetricKey.VALUE_CREATION, 10, _THREE_BAND),
    Metric(MetricKey.MUNGER_QUALITY_SCORE, 10, _THREE_BAND),
    Metric(MetricKey.IRR, 8, _THREE_BAND),
    Metric(MetricKey.RO40_F1, 6, _THREE_BAND),
    Metric(MetricKey.RO40_F2, 5, _THREE_BAND),
    Metric(MetricKey.LEVERAGE_F2, 5, _THREE_BAND),
    Metric(MetricKey.CASH_SDEBT, 4, _THREE_BAND),
    Metric(MetricKey.CURRENT_RATIO, 3, _THREE_BAND),
    Metric(MetricKey.PE1_INDUSTRY, 2, _THREE_BAND),
    Metric(MetricKey.PE2_INDUSTRY, 1, _THREE_BAND),
    Metric(MetricKey.TB_S_PRICE, 1, _THREE_BAND),
)


def _technical_table(theo_entry_weight: float) -> tuple[Metric, ...]:
    return (
        Metric(MetricKey.THEO_ENTRY, theo_entry_weight, _GREEN_ONLY),
        Metric(MetricKey.SMA100, 2.5, _GREEN_ONLY),
        Metric(MetricKey.SMA200, 2.5, _GREEN_ONLY),
        Metric(MetricKey.SMA_CROSS, 5, _GREEN_ONLY),
    )


STANDARD_WEIGHTS = ScoringPreset(
    name="standard",
    metrics=_FUNDAMENTAL_TABLE + _technical_table(35),
    sma_cross_strategy=SmaCrossStrategy.STANDARD,
    orange_label="ORANGE",
    description="55 fundamental + 45 technical = 100 points",
)

# TODO: confirm with the product owner whether the 105-point pool is intended
# or should be folded into STANDARD_WEIGHTS.
DETAILED_WEIGHTS = ScoringPreset(
    name="detailed",
    metrics=_FUNDAMENTAL_TABLE + _technical_table(40),
    sma_cross_strategy=SmaCrossStrategy.INVERTED,
    orange_label="BLUE",
    description="55 fundamental + 50 technical = 105 points, normalized to 100",
)

PRESETS: dict[str, ScoringPreset] = {
    STANDARD_WEIGHTS.name: STANDARD_WEIGHTS,
    DETAILED_WEIGHTS.name: DETAILED_WEIGHTS,
}


def get_preset(name: str | None = None) -> ScoringPreset:
    """Look up a preset by name; None means the configured default."""
    if name is None:
        name = get_scoring_config().default_preset

    preset = PRESETS.get(name.strip().lower())
    if preset is None:
        raise NotFoundError(
            message=f"Unknown scoring preset '{name}'",
            details={"available": sorted(PRESETS)},
        )
    logger.debug(f"Using scoring preset '{preset.name}'")
    return preset
