"""Per-metric score breakdown for explanatory views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from scoreboard.domain.stock import StockMetrics
from scoreboard.domain.thresholds import IndustryThreshold

from .classifiers import SmaCrossStrategy
from .colors import ColorType, display_label
from .engine import build_context, metric_color, metric_factor, round_score, scale_score
from .lookups import EntryExitLookup, PriceLookup
from .presets import STANDARD_WEIGHTS, MetricCategory, MetricKey, ScoringPreset


@dataclass
class ScoreBreakdownItem:
    """One metric's contribution to the score."""

    key: MetricKey
    metric: str
    weight: float
    color: ColorType
    factor: float
    points: float  # weight * factor
    category: MetricCategory

    def to_dict(self, orange_label: str = "ORANGE") -> dict[str, Any]:
        return {
            "key": self.key.value,
            "metric": self.metric,
            "weight": self.weight,
            "color": display_label(self.color, orange_label),
            "factor": self.factor,
            "points": self.points,
            "category": self.category.value,
        }


@dataclass
class ScoreBreakdown:
    """Result of a breakdown: the score plus every intermediate."""

    total_score: float
    items: list[ScoreBreakdownItem] = field(default_factory=list)
    fundamental_total: float = 0.0
    technical_total: float = 0.0
    preset: str = STANDARD_WEIGHTS.name
    orange_label: str = "ORANGE"

    def items_in(self, category: MetricCategory) -> list[ScoreBreakdownItem]:
        return [item for item in self.items if item.category is category]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API responses."""
        return {
            "total_score": self.total_score,
            "fundamental_total": self.fundamental_total,
            "technical_total": self.technical_total,
            "preset": self.preset,
            "items": [item.to_dict(self.orange_label) for item in self.items],
        }


def calculate_score_breakdown(
    stock: StockMetrics,
    thresholds: Sequence[IndustryThreshold],
    price_lookup: PriceLookup | None = None,
    entry_exit_lookup: EntryExitLookup | None = None,
    preset: ScoringPreset = STANDARD_WEIGHTS,
    sma_cross_strategy: SmaCrossStrategy | None = None,
) -> ScoreBreakdown:
    """Same aggregation as ``calculate_score`` but keeps every row.

    ``total_score`` is scaled exactly like ``calculate_score`` so both agree
    under the same preset. Category totals are raw points rounded to one
    decimal.
    """
    context = build_context(
        stock,
        thresholds,
        price_lookup,
        entry_exit_lookup,
        sma_cross_strategy or preset.sma_cross_strategy,
    )

    items: list[ScoreBreakdownItem] = []
    total_points = 0.0
    fundamental_total = 0.0
    technical_total = 0.0

    for metric in preset.metrics:
        color = metric_color(metric.key, context)
        factor = metric_factor(metric, color)
        points = metric.weight * factor

        items.append(
            ScoreBreakdownItem(
                key=metric.key,
                metric=metric.name,
                weight=metric.weight,
                color=color,
                factor=factor,
                points=points,
                category=metric.category,
            )
        )

        total_points += points
        if metric.category is MetricCategory.FUNDAMENTAL:
            fundamental_total += points
        else:
            technical_total += points

    return ScoreBreakdown(
        total_score=scale_score(total_points, preset),
        items=items,
        fundamental_total=round_score(fundamental_total),
        technical_total=round_score(technical_total),
        preset=preset.name,
        orange_label=preset.orange_label,
    )
