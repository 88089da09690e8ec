"""Score aggregation.

For each metric of a preset: classify it, turn the color into points
(3Band through the factor table, GreenOnly as all-or-nothing), sum, and
scale onto 0-100 using the preset's total active points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from scoreboard.domain.entry_exit import EntryExitValues
from scoreboard.domain.stock import StockMetrics
from scoreboard.domain.thresholds import IndustryThreshold

from .classifiers import (
    SmaCrossStrategy,
    get_cash_sdebt_color,
    get_current_ratio_color,
    get_irr_color,
    get_leverage_f2_color,
    get_munger_quality_score_color,
    get_pe_percentage_color,
    get_ro40_color,
    get_sma_color,
    get_sma_cross_color,
    get_tb_s_price_color,
    get_value_creation_color,
)
from .colors import ColorType, color_factor
from .lookups import EntryExitLookup, PriceLookup
from .presets import STANDARD_WEIGHTS, Metric, MetricKey, ScoringMethod, ScoringPreset
from .theo_entry import get_theo_entry_color


@dataclass(frozen=True)
class ScoringContext:
    """Everything a classifier may need for one stock."""

    stock: StockMetrics
    thresholds: Sequence[IndustryThreshold]
    price: float | None
    entry_exit: EntryExitValues | None
    sma_cross_strategy: SmaCrossStrategy = SmaCrossStrategy.STANDARD


_CLASSIFIERS: dict[MetricKey, Callable[[ScoringContext], ColorType]] = {
    MetricKey.VALUE_CREATION: lambda c: get_value_creation_color(c.stock.value_creation),
    MetricKey.MUNGER_QUALITY_SCORE: lambda c: get_munger_quality_score_color(
        c.stock.munger_quality_score
    ),
    MetricKey.IRR: lambda c: get_irr_color(c.stock.irr, c.stock.industry, c.thresholds),
    MetricKey.RO40_F1: lambda c: get_ro40_color(c.stock.ro40_f1, c.stock.industry, c.thresholds),
    MetricKey.RO40_F2: lambda c: get_ro40_color(c.stock.ro40_f2, c.stock.industry, c.thresholds),
    MetricKey.LEVERAGE_F2: lambda c: get_leverage_f2_color(
        c.stock.leverage_f2, c.stock.industry, c.thresholds
    ),
    MetricKey.CASH_SDEBT: lambda c: get_cash_sdebt_color(
        c.stock.cash_sdebt, c.stock.is_cash_sdebt_div_zero, c.stock.industry, c.thresholds
    ),
    MetricKey.CURRENT_RATIO: lambda c: get_current_ratio_color(
        c.stock.current_ratio, c.stock.industry, c.thresholds
    ),
    MetricKey.PE1_INDUSTRY: lambda c: get_pe_percentage_color(c.stock.pe1_industry),
    MetricKey.PE2_INDUSTRY: lambda c: get_pe_percentage_color(c.stock.pe2_industry),
    MetricKey.TB_S_PRICE: lambda c: get_tb_s_price_color(c.stock.tb_s_price),
    MetricKey.THEO_ENTRY: lambda c: get_theo_entry_color(c.entry_exit, c.price),
    MetricKey.SMA100: lambda c: get_sma_color(c.price, c.stock.sma100),
    MetricKey.SMA200: lambda c: get_sma_color(c.price, c.stock.sma200),
    MetricKey.SMA_CROSS: lambda c: get_sma_cross_color(c.stock.sma_cross, c.sma_cross_strategy),
}


def build_context(
    stock: StockMetrics,
    thresholds: Sequence[IndustryThreshold],
    price_lookup: PriceLookup | None = None,
    entry_exit_lookup: EntryExitLookup | None = None,
    sma_cross_strategy: SmaCrossStrategy = SmaCrossStrategy.STANDARD,
) -> ScoringContext:
    """Resolve lookups for one stock.

    Without a price lookup the row's own ``price`` is used; with one, its
    answer is final even when it is None.
    """
    if price_lookup is None:
        price = stock.price
    else:
        price = price_lookup(stock.ticker, stock.company_name)

    entry_exit = None
    if entry_exit_lookup is not None:
        entry_exit = entry_exit_lookup(stock.ticker, stock.company_name)

    return ScoringContext(
        stock=stock,
        thresholds=thresholds,
        price=price,
        entry_exit=entry_exit,
        sma_cross_strategy=SmaCrossStrategy(sma_cross_strategy),
    )


def metric_color(key: MetricKey, context: ScoringContext) -> ColorType:
    """Classify one metric of a stock."""
    return _CLASSIFIERS[key](context)


def metric_factor(metric: Metric, color: ColorType) -> float:
    """Share of the metric's weight earned by a color."""
    if metric.method is ScoringMethod.GREEN_ONLY:
        return 1.0 if color is ColorType.GREEN else 0.0
    return color_factor(color)


def round_score(value: float) -> float:
    """Round half up to one decimal."""
    return math.floor(value * 10 + 0.5) / 10


def scale_score(total_points: float, preset: ScoringPreset) -> float:
    """Map raw points onto 0-100, clamp, round to one decimal."""
    total_active = preset.total_active_points
    if total_active <= 0 or not math.isfinite(total_points):
        return 0.0
    score = max(0.0, min(100.0, total_points / total_active * 100))
    return round_score(score)


def classify_stock(
    stock: StockMetrics,
    thresholds: Sequence[IndustryThreshold],
    price_lookup: PriceLookup | None = None,
    entry_exit_lookup: EntryExitLookup | None = None,
    preset: ScoringPreset = STANDARD_WEIGHTS,
    sma_cross_strategy: SmaCrossStrategy | None = None,
) -> dict[MetricKey, ColorType]:
    """Color of every metric in the preset, in table order."""
    context = build_context(
        stock,
        thresholds,
        price_lookup,
        entry_exit_lookup,
        sma_cross_strategy or preset.sma_cross_strategy,
    )
    return {metric.key: metric_color(metric.key, context) for metric in preset.metrics}


def calculate_score(
    stock: StockMetrics,
    thresholds: Sequence[IndustryThreshold],
    price_lookup: PriceLookup | None = None,
    entry_exit_lookup: EntryExitLookup | None = None,
    preset: ScoringPreset = STANDARD_WEIGHTS,
    sma_cross_strategy: SmaCrossStrategy | None = None,
) -> float:
    """Composite 0-100 score for one stock, rounded to one decimal.

    Never raises on data problems: anything that cannot be classified
    contributes zero points.
    """
    context = build_context(
        stock,
        thresholds,
        price_lookup,
        entry_exit_lookup,
        sma_cross_strategy or preset.sma_cross_strategy,
    )

    total_points = 0.0
    for metric in preset.metrics:
        color = metric_color(metric.key, context)
        total_points += metric.weight * metric_factor(metric, color)

    return scale_score(total_points, preset)
