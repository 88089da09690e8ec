"""Health check endpoints."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

from scoreboard.core.config import settings
from scoreboard.core.logging import get_logger
from scoreboard.schemas.common import HealthResponse
from scoreboard.scoring.presets import PRESETS, get_preset


router = APIRouter(prefix="/health")

logger = get_logger("health")


def presets_healthcheck() -> bool:
    """Check that the configured default preset resolves."""
    try:
        get_preset()
    except Exception as e:
        logger.warning(f"Preset healthcheck failed: {e}")
        return False
    return bool(PRESETS)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the API and its scoring configuration.",
)
async def health_check() -> HealthResponse:
    """
    Perform health check on the API.

    The service is stateless, so the only dependency is a resolvable
    default preset.
    """
    checks = {"presets": presets_healthcheck()}

    return HealthResponse(
        status="healthy" if all(checks.values()) else "unhealthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC),
        checks=checks,
    )


@router.get(
    "/live",
    summary="Liveness check",
    description="Check if the API process is alive.",
)
async def liveness_check() -> dict:
    """
    Kubernetes-style liveness check.

    Simple check that the process is running.
    """
    return {"status": "alive"}
