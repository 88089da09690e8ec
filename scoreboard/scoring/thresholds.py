"""Industry threshold resolution."""

from __future__ import annotations

from typing import Iterable

from scoreboard.core.logging import get_logger
from scoreboard.domain.thresholds import IndustryThreshold


logger = get_logger("scoring.thresholds")


def resolve_threshold(
    industry: str | None,
    thresholds: Iterable[IndustryThreshold],
) -> IndustryThreshold | None:
    """Find the threshold record for an industry.

    Matching is case-insensitive exact equality; the first match wins.
    Returns None for a blank industry or one missing from the table.
    """
    if not industry or not industry.strip():
        return None

    wanted = industry.lower()
    for threshold in thresholds:
        if threshold.industry.lower() == wanted:
            return threshold

    logger.debug(f"No threshold record for industry '{industry}'")
    return None
