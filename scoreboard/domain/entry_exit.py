"""User-edited entry/exit targets."""

from __future__ import annotations

from pydantic import BaseModel, Field


def entry_exit_key(ticker: str, company_name: str) -> str:
    """Key used by the entry/exit map: ``"<ticker>-<company name>"``."""
    return f"{ticker}-{company_name}"


class EntryExitValues(BaseModel):
    """Entry and exit price targets for one stock. Zero means unset."""

    entry1: float = Field(default=0.0, description="Primary entry target")
    entry2: float = Field(default=0.0, description="Secondary entry target")
    exit1: float = Field(default=0.0, description="Primary exit target")
    exit2: float = Field(default=0.0, description="Secondary exit target")
    currency: str = Field(default="USD", description="Currency of the targets")
    date_of_update: str | None = Field(None, description="Last time the targets were edited")

    model_config = {
        "from_attributes": True,
        "extra": "ignore",
        "frozen": True,
    }
