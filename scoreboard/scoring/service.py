"""Score board service.

Scores whole tables at once: one shared set of thresholds, price records
and entry/exit targets, one preset, many stocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from scoreboard.core.logging import get_logger
from scoreboard.domain.entry_exit import EntryExitValues
from scoreboard.domain.stock import PriceRecord, StockMetrics
from scoreboard.domain.thresholds import IndustryThreshold
from scoreboard.ingest import (
    DEFAULT_COLUMN_ALIASES,
    find_column,
    is_valid_value,
    stock_metrics_from_frame,
)

from .breakdown import ScoreBreakdown, calculate_score_breakdown
from .colors import ColorType
from .config import ScoringConfig, get_scoring_config
from .engine import calculate_score, classify_stock
from .lookups import (
    EntryExitLookup,
    PriceLookup,
    entry_exit_lookup_from_mapping,
    price_lookup_from_records,
)
from .presets import MetricKey, ScoringPreset, get_preset

logger = get_logger("scoring.service")


@dataclass
class StockScore:
    """Score of one row in a table."""

    ticker: str
    company_name: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            "company_name": self.company_name,
            "score": self.score,
        }


def _lookups(
    price_records: Optional[Sequence[PriceRecord]],
    entry_exit: Optional[Mapping[str, EntryExitValues]],
) -> tuple[PriceLookup | None, EntryExitLookup | None]:
    price_lookup = (
        price_lookup_from_records(price_records) if price_records is not None else None
    )
    entry_exit_lookup = (
        entry_exit_lookup_from_mapping(entry_exit) if entry_exit is not None else None
    )
    return price_lookup, entry_exit_lookup


class ScoreBoardService:
    """Batch scoring over the pure engine functions."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or get_scoring_config()

    def resolve_preset(self, preset: str | ScoringPreset | None = None) -> ScoringPreset:
        """Preset object for a name, an instance, or the configured default."""
        if isinstance(preset, ScoringPreset):
            return preset
        return get_preset(preset if preset is not None else self.config.default_preset)

    def score_rows(
        self,
        stocks: Sequence[StockMetrics],
        thresholds: Sequence[IndustryThreshold],
        price_records: Optional[Sequence[PriceRecord]] = None,
        entry_exit: Optional[Mapping[str, EntryExitValues]] = None,
        preset: str | ScoringPreset | None = None,
    ) -> list[StockScore]:
        """Score every stock, preserving input order.

        Without ``price_records`` each row's own ``price`` feeds the
        technical metrics.
        """
        resolved = self.resolve_preset(preset)
        price_lookup, entry_exit_lookup = _lookups(price_records, entry_exit)

        results = [
            StockScore(
                ticker=stock.ticker,
                company_name=stock.company_name,
                score=calculate_score(
                    stock,
                    thresholds,
                    price_lookup=price_lookup,
                    entry_exit_lookup=entry_exit_lookup,
                    preset=resolved,
                ),
            )
            for stock in stocks
        ]

        logger.info(
            "Scored stocks",
            extra={"count": len(results), "preset": resolved.name},
        )
        return results

    def score_frame(
        self,
        frame: pd.DataFrame,
        thresholds: Sequence[IndustryThreshold],
        price_records: Optional[Sequence[PriceRecord]] = None,
        entry_exit: Optional[Mapping[str, EntryExitValues]] = None,
        preset: str | ScoringPreset | None = None,
        column_aliases: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> pd.DataFrame:
        """Copy of a score board sheet with a ``score`` column appended.

        Rows skipped during ingestion (no ticker or company name) get NaN.
        """
        stocks = stock_metrics_from_frame(frame, column_aliases)
        scores = self.score_rows(stocks, thresholds, price_records, entry_exit, preset)

        aliases = dict(DEFAULT_COLUMN_ALIASES)
        if column_aliases:
            aliases.update(column_aliases)
        ticker_col = find_column(frame, aliases["ticker"])
        name_col = find_column(frame, aliases["company_name"])

        valid = frame[ticker_col].map(is_valid_value) & frame[name_col].map(is_valid_value)

        result = frame.copy()
        result["score"] = float("nan")
        result.loc[valid, "score"] = [s.score for s in scores]
        return result

    def classify(
        self,
        stock: StockMetrics,
        thresholds: Sequence[IndustryThreshold],
        price_records: Optional[Sequence[PriceRecord]] = None,
        entry_exit: Optional[Mapping[str, EntryExitValues]] = None,
        preset: str | ScoringPreset | None = None,
    ) -> dict[MetricKey, ColorType]:
        """Per-metric colors of one stock under a preset."""
        resolved = self.resolve_preset(preset)
        price_lookup, entry_exit_lookup = _lookups(price_records, entry_exit)
        return classify_stock(
            stock,
            thresholds,
            price_lookup=price_lookup,
            entry_exit_lookup=entry_exit_lookup,
            preset=resolved,
        )

    def breakdown(
        self,
        stock: StockMetrics,
        thresholds: Sequence[IndustryThreshold],
        price_records: Optional[Sequence[PriceRecord]] = None,
        entry_exit: Optional[Mapping[str, EntryExitValues]] = None,
        preset: str | ScoringPreset | None = None,
    ) -> ScoreBreakdown:
        """Per-metric breakdown of one stock's score."""
        resolved = self.resolve_preset(preset)
        price_lookup, entry_exit_lookup = _lookups(price_records, entry_exit)

        result = calculate_score_breakdown(
            stock,
            thresholds,
            price_lookup=price_lookup,
            entry_exit_lookup=entry_exit_lookup,
            preset=resolved,
        )

        if self.config.log_breakdowns:
            logger.debug(
                f"Score breakdown for {stock.ticker}",
                extra={
                    "ticker": stock.ticker,
                    "preset": resolved.name,
                    "total_score": result.total_score,
                    "fundamental_total": result.fundamental_total,
                    "technical_total": result.technical_total,
                },
            )
        return result


_service: Optional[ScoreBoardService] = None


def get_scoreboard_service() -> ScoreBoardService:
    """Get singleton score board service."""
    global _service
    if _service is None:
        _service = ScoreBoardService()
    return _service
