from uuid import UUID, uuid4
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

from portfolio_tracker.models.enums import TransactionType

class Transaction(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    portfolio_id: UUID = Field(foreign_key="portfolio.id", index=True)

    # Plain reference, not a foreign key: transactions are kept as history
    # after the investment they point at is deleted.
    investment_id: Optional[UUID] = Field(default=None, index=True)

    symbol: str
    name: str
    type: TransactionType
    quantity: float
    price: float
    total_amount: float
    transaction_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
