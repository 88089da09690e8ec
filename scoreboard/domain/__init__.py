"""Domain models for strongly-typed data throughout the application.

Usage:
    from scoreboard.domain import StockMetrics, IndustryThreshold

    stock = StockMetrics(ticker="AAPL", company_name="Apple Inc.", irr=30.0)
    data = stock.model_dump()
"""

from scoreboard.domain.entry_exit import (
    EntryExitValues,
    entry_exit_key,
)
from scoreboard.domain.stock import (
    PriceRecord,
    StockMetrics,
)
from scoreboard.domain.thresholds import IndustryThreshold

__all__ = [
    "EntryExitValues",
    "IndustryThreshold",
    "PriceRecord",
    "StockMetrics",
    "entry_exit_key",
]
