"""Scoring Pydantic schemas for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from scoreboard.domain import EntryExitValues, IndustryThreshold, PriceRecord, StockMetrics


# === Request Schemas ===


class ScoreRequest(BaseModel):
    """Request for scoring a table of stocks."""

    stocks: list[StockMetrics] = Field(
        ...,
        min_length=1,
        description="Score board rows to score",
    )
    thresholds: list[IndustryThreshold] = Field(
        default_factory=list,
        description="Industry threshold table",
    )
    prices: list[PriceRecord] | None = Field(
        default=None,
        description="Price records; when omitted each row's own price is used",
    )
    entry_exit: dict[str, EntryExitValues] | None = Field(
        default=None,
        description='Entry/exit targets keyed by "<ticker>-<company name>"',
    )
    preset: str | None = Field(
        default=None,
        description="Weight preset name (default: configured preset)",
    )


class StockRequest(BaseModel):
    """Request carrying a single stock plus its lookup tables."""

    stock: StockMetrics
    thresholds: list[IndustryThreshold] = Field(default_factory=list)
    prices: list[PriceRecord] | None = None
    entry_exit: dict[str, EntryExitValues] | None = None
    preset: str | None = None


# === Response Schemas ===


class StockScoreResponse(BaseModel):
    """Score of one stock."""

    ticker: str
    company_name: str
    score: float = Field(..., ge=0, le=100)


class ScoreResponse(BaseModel):
    """Scores for a table, in request order."""

    preset: str
    count: int
    scores: list[StockScoreResponse]


class BreakdownItemResponse(BaseModel):
    """One metric's contribution to the score."""

    key: str
    metric: str
    weight: float
    color: str = Field(..., description="GREEN, ORANGE/BLUE, RED or BLANK")
    factor: float
    points: float
    category: str


class BreakdownResponse(BaseModel):
    """Per-metric breakdown of one stock's score."""

    ticker: str
    company_name: str
    preset: str
    total_score: float = Field(..., ge=0, le=100)
    fundamental_total: float
    technical_total: float
    items: list[BreakdownItemResponse]


class ColorsResponse(BaseModel):
    """Color of every metric of one stock."""

    ticker: str
    company_name: str
    preset: str
    colors: dict[str, str] = Field(..., description="Metric key to color label")


class PresetMetricResponse(BaseModel):
    """One row of a preset's metric table."""

    key: str
    name: str
    weight: float
    method: str
    category: str


class PresetResponse(BaseModel):
    """A weight preset."""

    name: str
    description: str
    sma_cross_strategy: str
    orange_label: str
    total_active_points: float
    fundamental_points: float
    technical_points: float
    metrics: list[PresetMetricResponse]


class PresetListResponse(BaseModel):
    """All presets plus the configured default."""

    default: str
    presets: list[PresetResponse]
