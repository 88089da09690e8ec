"""Color bands and their point factors."""

from __future__ import annotations

from enum import Enum

from .config import (
    COLOR_FACTOR_BLANK,
    COLOR_FACTOR_GREEN,
    COLOR_FACTOR_ORANGE_BLUE,
    COLOR_FACTOR_RED,
)


class ColorType(str, Enum):
    """Classification of a metric value.

    ORANGE is the middle band; the detailed view labels it BLUE. BLANK means
    there was not enough data to classify.
    """

    GREEN = "GREEN"
    ORANGE = "ORANGE"
    RED = "RED"
    BLANK = "BLANK"


COLOR_FACTORS: dict[ColorType, float] = {
    ColorType.GREEN: COLOR_FACTOR_GREEN,
    ColorType.ORANGE: COLOR_FACTOR_ORANGE_BLUE,
    ColorType.RED: COLOR_FACTOR_RED,
    ColorType.BLANK: COLOR_FACTOR_BLANK,
}


def color_factor(color: ColorType) -> float:
    """Point factor for a 3Band metric."""
    return COLOR_FACTORS[color]


def display_label(color: ColorType, orange_label: str = "ORANGE") -> str:
    """Label shown for a color; the middle band may be rendered as BLUE."""
    if color is ColorType.ORANGE:
        return orange_label
    return color.value
