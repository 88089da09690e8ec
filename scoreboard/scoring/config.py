"""Scoring constants and settings.

Classification constants are fixed; only preset selection and breakdown
logging are configurable through the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Munger Quality Score bands (static, no industry table)
MUNGER_QUALITY_SCORE_RED_THRESHOLD = 40.0
MUNGER_QUALITY_SCORE_GREEN_THRESHOLD = 60.0

# (TB/S)/Price
TB_S_PRICE_GREEN_THRESHOLD = 1.00

# TheoEntry
RR_GREEN_THRESHOLD_PERCENT = 60.0
PRICE_TOLERANCE_GREEN = 1.05  # 5% above entry

# Color factors for 3Band metrics
COLOR_FACTOR_GREEN = 1.00
COLOR_FACTOR_ORANGE_BLUE = 0.70
COLOR_FACTOR_RED = 0.00
COLOR_FACTOR_BLANK = 0.00

# Ro40 metric values are percentages, thresholds are decimals
RO40_PERCENT_DIVISOR = 100.0


class ScoringSettings(BaseSettings):
    """Scoring settings from environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    scoring_default_preset: str = Field(
        default="standard",
        description="Weight preset used when a caller does not name one",
    )
    scoring_log_breakdowns: bool = Field(
        default=False,
        description="Log every computed score breakdown at DEBUG level",
    )

    @field_validator("scoring_default_preset")
    @classmethod
    def normalize_preset(cls, v: str) -> str:
        return v.strip().lower()


@dataclass(frozen=True)
class ScoringConfig:
    """Resolved scoring configuration."""

    default_preset: str = "standard"
    log_breakdowns: bool = False

    @classmethod
    def from_settings(cls, settings: ScoringSettings | None = None) -> ScoringConfig:
        """Create config from settings."""
        if settings is None:
            settings = ScoringSettings()

        return cls(
            default_preset=settings.scoring_default_preset,
            log_breakdowns=settings.scoring_log_breakdowns,
        )

    def with_overrides(
        self,
        default_preset: str | None = None,
        log_breakdowns: bool | None = None,
    ) -> ScoringConfig:
        """Return a new config with optional overrides applied."""
        from dataclasses import replace

        overrides = {}
        if default_preset is not None:
            overrides["default_preset"] = default_preset.strip().lower()
        if log_breakdowns is not None:
            overrides["log_breakdowns"] = log_breakdowns

        return replace(self, **overrides) if overrides else self


@lru_cache(maxsize=1)
def get_scoring_config() -> ScoringConfig:
    """Get cached scoring configuration from settings."""
    return ScoringConfig.from_settings()
