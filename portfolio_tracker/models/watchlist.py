from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from typing import Optional
from datetime import datetime, timezone

class WatchlistItem(SQLModel, table=True):
    __tablename__ = "watchlist"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    portfolio_id: UUID = Field(foreign_key="portfolio.id", index=True)
    symbol: str
    name: str
    sector: Optional[str] = None
    notes: Optional[str] = None
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
