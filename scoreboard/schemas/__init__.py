"""Pydantic schemas for API request/response validation."""

from .common import ErrorResponse, HealthResponse
from .scoring import (
    BreakdownItemResponse,
    BreakdownResponse,
    ColorsResponse,
    PresetListResponse,
    PresetMetricResponse,
    PresetResponse,
    ScoreRequest,
    ScoreResponse,
    StockRequest,
    StockScoreResponse,
)


__all__ = [
    "BreakdownItemResponse",
    "BreakdownResponse",
    "ColorsResponse",
    "ErrorResponse",
    "HealthResponse",
    "PresetListResponse",
    "PresetMetricResponse",
    "PresetResponse",
    "ScoreRequest",
    "ScoreResponse",
    "StockRequest",
    "StockScoreResponse",
]
