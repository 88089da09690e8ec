"""Per-metric color classification.

Every classifier is a pure function. Missing or non-finite values classify as
BLANK before any threshold lookup, with one exception: Cash/SDebt checks its
division-by-zero flag first. Threshold-dependent metrics classify as BLANK
when the industry is blank or absent from the threshold table.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Sequence

from scoreboard.domain.thresholds import IndustryThreshold

from .colors import ColorType
from .config import (
    MUNGER_QUALITY_SCORE_GREEN_THRESHOLD,
    MUNGER_QUALITY_SCORE_RED_THRESHOLD,
    RO40_PERCENT_DIVISOR,
    TB_S_PRICE_GREEN_THRESHOLD,
)
from .thresholds import resolve_threshold


def _is_missing(value: float | None) -> bool:
    return value is None or not math.isfinite(value)


# =============================================================================
# Threshold-dependent metrics
# =============================================================================


def get_irr_color(
    irr_value: float | None,
    industry: str | None,
    thresholds: Sequence[IndustryThreshold],
) -> ColorType:
    """GREEN when IRR reaches the industry cutoff, else RED."""
    if _is_missing(irr_value):
        return ColorType.BLANK
    threshold = resolve_threshold(industry, thresholds)
    if threshold is None:
        return ColorType.BLANK

    return ColorType.GREEN if irr_value >= threshold.irr else ColorType.RED


def get_ro40_color(
    ro40_value: float | None,
    industry: str | None,
    thresholds: Sequence[IndustryThreshold],
) -> ColorType:
    """Classify a Rule-of-40 percentage against decimal thresholds."""
    if _is_missing(ro40_value):
        return ColorType.BLANK
    threshold = resolve_threshold(industry, thresholds)
    if threshold is None:
        return ColorType.BLANK

    ro40_decimal = ro40_value / RO40_PERCENT_DIVISOR
    if ro40_decimal <= threshold.ro40_min:
        return ColorType.RED
    if ro40_decimal >= threshold.ro40_max:
        return ColorType.GREEN
    return ColorType.ORANGE


def get_leverage_f2_color(
    leverage_f2_value: float | None,
    industry: str | None,
    thresholds: Sequence[IndustryThreshold],
) -> ColorType:
    """Inverted band: low leverage is good."""
    if _is_missing(leverage_f2_value):
        return ColorType.BLANK
    threshold = resolve_threshold(industry, thresholds)
    if threshold is None:
        return ColorType.BLANK

    if leverage_f2_value <= threshold.leverage_f2_min:
        return ColorType.GREEN
    if leverage_f2_value <= threshold.leverage_f2_max:
        return ColorType.ORANGE
    return ColorType.RED


def get_cash_sdebt_color(
    cash_sdebt: float | None,
    is_div_zero: bool,
    industry: str | None,
    thresholds: Sequence[IndustryThreshold],
) -> ColorType:
    """Classify Cash/SDebt.

    A division by zero means there is no short-term debt, which is GREEN
    regardless of the stored value or the industry.
    """
    if is_div_zero:
        return ColorType.GREEN
    if _is_missing(cash_sdebt):
        return ColorType.BLANK
    threshold = resolve_threshold(industry, thresholds)
    if threshold is None:
        return ColorType.BLANK

    if cash_sdebt <= threshold.cash_sdebt_min:
        return ColorType.RED
    if cash_sdebt >= threshold.cash_sdebt_max:
        return ColorType.GREEN
    return ColorType.ORANGE


def get_current_ratio_color(
    current_ratio: float | None,
    industry: str | None,
    thresholds: Sequence[IndustryThreshold],
) -> ColorType:
    """GREEN inside [min, max); excess liquidity above max is ORANGE."""
    if _is_missing(current_ratio):
        return ColorType.BLANK
    threshold = resolve_threshold(industry, thresholds)
    if threshold is None:
        return ColorType.BLANK

    if current_ratio < threshold.current_ratio_min:
        return ColorType.RED
    if current_ratio < threshold.current_ratio_max:
        return ColorType.GREEN
    return ColorType.ORANGE


# =============================================================================
# Static-threshold metrics
# =============================================================================


def get_munger_quality_score_color(munger_quality_score: float | None) -> ColorType:
    if _is_missing(munger_quality_score):
        return ColorType.BLANK
    if munger_quality_score < MUNGER_QUALITY_SCORE_RED_THRESHOLD:
        return ColorType.RED
    if munger_quality_score <= MUNGER_QUALITY_SCORE_GREEN_THRESHOLD:
        return ColorType.ORANGE
    return ColorType.GREEN


def get_value_creation_color(value_creation: float | None) -> ColorType:
    if _is_missing(value_creation):
        return ColorType.BLANK
    return ColorType.GREEN if value_creation >= 0 else ColorType.RED


def get_pe_percentage_color(pe_industry: float | None) -> ColorType:
    """P/E at or below the industry median is GREEN."""
    if _is_missing(pe_industry):
        return ColorType.BLANK
    return ColorType.GREEN if pe_industry <= 0 else ColorType.RED


def get_tb_s_price_color(tb_s_price: float | None) -> ColorType:
    if _is_missing(tb_s_price):
        return ColorType.BLANK
    return ColorType.GREEN if tb_s_price >= TB_S_PRICE_GREEN_THRESHOLD else ColorType.RED


# =============================================================================
# Technical metrics
# =============================================================================


def get_sma_color(price: float | None, sma_value: float | None) -> ColorType:
    """Price above its moving average is GREEN, equal is ORANGE."""
    if _is_missing(price) or _is_missing(sma_value):
        return ColorType.BLANK
    if price > sma_value:
        return ColorType.GREEN
    if price < sma_value:
        return ColorType.RED
    return ColorType.ORANGE


class SmaCrossStrategy(str, Enum):
    """How a GOLDEN/DEATH cross maps to a color."""

    STANDARD = "standard"
    INVERTED = "inverted"


def get_sma_cross_color_standard(sma_cross: str | None) -> ColorType:
    """GOLDEN is GREEN, DEATH is RED. Exact, case-insensitive match."""
    if not sma_cross:
        return ColorType.BLANK
    upper = sma_cross.upper()
    if upper == "GOLDEN":
        return ColorType.GREEN
    if upper == "DEATH":
        return ColorType.RED
    return ColorType.BLANK


def get_sma_cross_color_inverted(sma_cross: str | None) -> ColorType:
    """GOLDEN is RED, DEATH is GREEN. Substring match, used by the detailed score."""
    if not sma_cross:
        return ColorType.BLANK
    upper = sma_cross.upper()
    if "GOLDEN" in upper:
        return ColorType.RED
    if "DEATH" in upper:
        return ColorType.GREEN
    return ColorType.BLANK


_SMA_CROSS_CLASSIFIERS: dict[SmaCrossStrategy, Callable[[str | None], ColorType]] = {
    SmaCrossStrategy.STANDARD: get_sma_cross_color_standard,
    SmaCrossStrategy.INVERTED: get_sma_cross_color_inverted,
}


def get_sma_cross_color(
    sma_cross: str | None,
    strategy: SmaCrossStrategy = SmaCrossStrategy.STANDARD,
) -> ColorType:
    """Classify an SMA cross with an explicitly chosen strategy."""
    return _SMA_CROSS_CLASSIFIERS[SmaCrossStrategy(strategy)](sma_cross)
