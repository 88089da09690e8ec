"""Industry threshold domain model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IndustryThreshold(BaseModel):
    """Banding boundaries for one industry.

    Ro40 boundaries are decimals (0.15 == 15%), while Ro40 metric values
    arrive as percentages.
    """

    industry: str = Field(..., description="Industry name, matched case-insensitively")
    irr: float = Field(default=0.0, description="IRR cutoff")
    leverage_f2_min: float = Field(default=0.0, description="Leverage F2 green ceiling")
    leverage_f2_max: float = Field(default=0.0, description="Leverage F2 red floor")
    ro40_min: float = Field(default=0.0, description="Ro40 red ceiling (decimal)")
    ro40_max: float = Field(default=0.0, description="Ro40 green floor (decimal)")
    cash_sdebt_min: float = Field(default=0.0, description="Cash/SDebt red ceiling")
    cash_sdebt_max: float = Field(default=0.0, description="Cash/SDebt green floor")
    current_ratio_min: float = Field(default=0.0, description="Current ratio green floor")
    current_ratio_max: float = Field(default=0.0, description="Current ratio green ceiling")

    model_config = {
        "from_attributes": True,
        "extra": "ignore",
        "frozen": True,
    }
