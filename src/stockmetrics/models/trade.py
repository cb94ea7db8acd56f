"""Trade - a single recorded execution of the stock."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Side(str, Enum):
    """Buy/sell indicator."""

    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def _missing_(cls, value: object) -> Side | None:
        # Single-letter indicators ("B"/"S") and lowercase spellings
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.value, member.value[0]):
                    return member
        return None


class StockType(str, Enum):
    """Stock class used to pick the dividend yield formula."""

    COMMON = "Common"
    PREFERRED = "Preferred"

    @classmethod
    def _missing_(cls, value: object) -> StockType | None:
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        return None


class Trade(BaseModel):
    """Executed trade held by the ledger. Immutable."""

    timestamp: datetime
    quantity: int = Field(..., ge=0)
    side: Side
    price: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @field_validator("side", mode="before")
    @classmethod
    def coerce_side(cls, v: object) -> object:
        """Accept "B"/"S" as well as BUY/SELL."""
        if isinstance(v, str):
            return Side(v)
        return v

    @field_validator("timestamp")
    @classmethod
    def truncate_to_seconds(cls, v: datetime) -> datetime:
        return v.replace(microsecond=0)
