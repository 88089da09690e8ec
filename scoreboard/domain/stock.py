"""Stock domain models.

Per-stock figures as they arrive from the score board sheet, plus the price
records used to look up a current price for technical metrics.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StockMetrics(BaseModel):
    """Fundamental and technical figures for one company.

    Numeric fields are nullable: ``None`` means the value is missing or was
    invalid in the source sheet, while ``0`` is an actual zero.
    """

    ticker: str = Field(..., description="Ticker symbol")
    company_name: str = Field(..., description="Company name")
    industry: str = Field(default="", description="Industry used for threshold lookup")

    # Fundamental
    value_creation: float | None = Field(None, description="Value creation (%)")
    munger_quality_score: float | None = Field(None, description="Munger quality score (0-100)")
    irr: float | None = Field(None, description="Internal rate of return")
    ro40_f1: float | None = Field(None, description="Rule of 40, forecast year 1 (%)")
    ro40_f2: float | None = Field(None, description="Rule of 40, forecast year 2 (%)")
    leverage_f2: float | None = Field(None, description="Leverage, forecast year 2")
    cash_sdebt: float | None = Field(None, description="Cash / short-term debt")
    is_cash_sdebt_div_zero: bool = Field(
        default=False, description="Cash/SDebt was a division by zero (no short-term debt)"
    )
    current_ratio: float | None = Field(None, description="Current ratio")
    pe1_industry: float | None = Field(
        None, description="P/E1 difference vs industry median (%)"
    )
    pe2_industry: float | None = Field(
        None, description="P/E2 difference vs industry median (%)"
    )
    tb_s_price: float | None = Field(None, description="(Tangible book / share) / price")

    # Technical
    sma100: float | None = Field(None, description="100-day simple moving average")
    sma200: float | None = Field(None, description="200-day simple moving average")
    sma_cross: str | None = Field(None, description="SMA cross signal (GOLDEN/DEATH)")
    price: float | None = Field(None, description="Price carried on the row itself")

    model_config = {
        "from_attributes": True,
        "extra": "ignore",
        "frozen": True,
    }

    @property
    def key(self) -> tuple[str, str]:
        """Natural identity of the row."""
        return (self.ticker, self.company_name)


class PriceRecord(BaseModel):
    """Current price for a company from the price sheet."""

    ticker: str | None = Field(None, description="Ticker symbol")
    company_name: str | None = Field(None, description="Company name")
    price: float | None = Field(None, description="Latest price")

    model_config = {
        "from_attributes": True,
        "extra": "ignore",
        "frozen": True,
    }
