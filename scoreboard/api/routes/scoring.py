"""Scoring API routes.

Endpoints for scoring tables of stocks, explaining single scores and
listing the weight presets.
"""

from __future__ import annotations

from fastapi import APIRouter, Path

from scoreboard.core.config import settings
from scoreboard.core.exceptions import BadRequestError
from scoreboard.core.logging import get_logger
from scoreboard.schemas.scoring import (
    BreakdownItemResponse,
    BreakdownResponse,
    ColorsResponse,
    PresetListResponse,
    PresetResponse,
    ScoreRequest,
    ScoreResponse,
    StockRequest,
    StockScoreResponse,
)
from scoreboard.scoring.colors import display_label
from scoreboard.scoring.presets import PRESETS, get_preset
from scoreboard.scoring.service import get_scoreboard_service

logger = get_logger("api.scoring")

router = APIRouter()


@router.get(
    "/presets",
    response_model=PresetListResponse,
    summary="List weight presets",
)
async def list_presets() -> PresetListResponse:
    """List every preset with its metric table and point totals."""
    service = get_scoreboard_service()
    return PresetListResponse(
        default=service.resolve_preset().name,
        presets=[PresetResponse(**preset.to_dict()) for preset in PRESETS.values()],
    )


@router.get(
    "/presets/{name}",
    response_model=PresetResponse,
    summary="Get a weight preset",
)
async def get_preset_by_name(
    name: str = Path(..., description="Preset name"),
) -> PresetResponse:
    """Get one preset; unknown names return 404."""
    return PresetResponse(**get_preset(name).to_dict())


@router.post(
    "/score",
    response_model=ScoreResponse,
    summary="Score a table of stocks",
)
async def score_stocks(request: ScoreRequest) -> ScoreResponse:
    """
    Score every stock in the request.

    Scores come back in request order. Rows that cannot be classified still
    score, with missing metrics contributing zero points.
    """
    if len(request.stocks) > settings.max_batch_size:
        raise BadRequestError(
            message=f"Too many stocks: {len(request.stocks)} > {settings.max_batch_size}",
            details={"max_batch_size": settings.max_batch_size},
        )

    service = get_scoreboard_service()
    preset = service.resolve_preset(request.preset)
    scores = service.score_rows(
        request.stocks,
        request.thresholds,
        price_records=request.prices,
        entry_exit=request.entry_exit,
        preset=preset,
    )

    return ScoreResponse(
        preset=preset.name,
        count=len(scores),
        scores=[StockScoreResponse(**s.to_dict()) for s in scores],
    )


@router.post(
    "/breakdown",
    response_model=BreakdownResponse,
    summary="Explain one stock's score",
)
async def score_breakdown(request: StockRequest) -> BreakdownResponse:
    """Per-metric colors, factors and points behind a score."""
    service = get_scoreboard_service()
    breakdown = service.breakdown(
        request.stock,
        request.thresholds,
        price_records=request.prices,
        entry_exit=request.entry_exit,
        preset=request.preset,
    )
    data = breakdown.to_dict()

    return BreakdownResponse(
        ticker=request.stock.ticker,
        company_name=request.stock.company_name,
        preset=data["preset"],
        total_score=data["total_score"],
        fundamental_total=data["fundamental_total"],
        technical_total=data["technical_total"],
        items=[BreakdownItemResponse(**item) for item in data["items"]],
    )


@router.post(
    "/colors",
    response_model=ColorsResponse,
    summary="Classify every metric of one stock",
)
async def stock_colors(request: StockRequest) -> ColorsResponse:
    """Color of every metric, labelled the way the preset displays them."""
    service = get_scoreboard_service()
    preset = service.resolve_preset(request.preset)
    colors = service.classify(
        request.stock,
        request.thresholds,
        price_records=request.prices,
        entry_exit=request.entry_exit,
        preset=preset,
    )

    return ColorsResponse(
        ticker=request.stock.ticker,
        company_name=request.stock.company_name,
        preset=preset.name,
        colors={
            key.value: display_label(color, preset.orange_label)
            for key, color in colors.items()
        },
    )
