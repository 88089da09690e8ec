"""Composite stock scoring engine.

This module provides:
- Color classification of fundamental and technical metrics
- Industry threshold resolution
- TheoEntry (risk/reward plus entry proximity) evaluation
- Weighted aggregation into a 0-100 score under named presets
- Per-metric breakdowns and batch scoring of whole tables
"""

from .breakdown import ScoreBreakdown, ScoreBreakdownItem, calculate_score_breakdown
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
from .colors import ColorType, color_factor, display_label
from .config import ScoringConfig, get_scoring_config
from .engine import calculate_score, classify_stock
from .lookups import (
    EntryExitLookup,
    PriceLookup,
    entry_exit_lookup_from_mapping,
    find_price,
    price_lookup_from_records,
)
from .presets import (
    DETAILED_WEIGHTS,
    PRESETS,
    STANDARD_WEIGHTS,
    Metric,
    MetricCategory,
    MetricKey,
    ScoringMethod,
    ScoringPreset,
    get_preset,
)
from .service import ScoreBoardService, StockScore, get_scoreboard_service
from .theo_entry import (
    calculate_rr1,
    calculate_rr2,
    get_theo_entry_color,
    is_entry1_green,
    is_entry2_green,
    is_theo_entry_green,
)
from .thresholds import resolve_threshold


__all__ = [
    "ColorType",
    "DETAILED_WEIGHTS",
    "EntryExitLookup",
    "Metric",
    "MetricCategory",
    "MetricKey",
    "PRESETS",
    "PriceLookup",
    "STANDARD_WEIGHTS",
    "ScoreBoardService",
    "ScoreBreakdown",
    "ScoreBreakdownItem",
    "ScoringConfig",
    "ScoringMethod",
    "ScoringPreset",
    "SmaCrossStrategy",
    "StockScore",
    "calculate_rr1",
    "calculate_rr2",
    "calculate_score",
    "calculate_score_breakdown",
    "classify_stock",
    "color_factor",
    "display_label",
    "entry_exit_lookup_from_mapping",
    "find_price",
    "get_cash_sdebt_color",
    "get_current_ratio_color",
    "get_irr_color",
    "get_leverage_f2_color",
    "get_munger_quality_score_color",
    "get_pe_percentage_color",
    "get_preset",
    "get_ro40_color",
    "get_scoreboard_service",
    "get_scoring_config",
    "get_sma_color",
    "get_sma_cross_color",
    "get_tb_s_price_color",
    "get_theo_entry_color",
    "get_value_creation_color",
    "is_entry1_green",
    "is_entry2_green",
    "is_theo_entry_green",
    "price_lookup_from_records",
    "resolve_threshold",
]
