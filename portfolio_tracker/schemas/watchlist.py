from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, field_validator

from portfolio_tracker.utils.validation import blank_to_none, normalize_symbol, required_text

class WatchlistCreate(BaseModel):
    portfolio_id: Optional[UUID] = None
    symbol: str
    name: str
    sector: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("symbol")
    @classmethod
    def _symbol(cls, v: str) -> str:
        return normalize_symbol(v)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return required_text(v)

    # Blank optional fields are stored as NULL, never as ""
    @field_validator("sector", "notes")
    @classmethod
    def _optional_text(cls, v: Optional[str]) -> Optional[str]:
        return blank_to_none(v)

class WatchlistRead(BaseModel):
    id: UUID
    portfolio_id: UUID
    symbol: str
    name: str
    sector: Optional[str] = None
    notes: Optional[str] = None
    added_at: datetime

    model_config = ConfigDict(from_attributes=True)

class WatchlistRow(WatchlistRead):
    added_display: str

class WatchlistList(BaseModel):
    items: List[WatchlistRow]
    empty_message: Optional[str] = None

class WatchlistCreated(BaseModel):
    message: str
    item: WatchlistRead
