from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone

from portfolio_tracker.models.enums import InvestmentType

class Investment(SQLModel, table=True):
    __table_args__ = (
        CheckConstraint("purchase_price >= 0", name="ck_investment_purchase_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_investment_quantity_non_negative"),
        CheckConstraint("current_price >= 0", name="ck_investment_current_price_non_negative"),
    )
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    portfolio_id: UUID = Field(foreign_key="portfolio.id", index=True)
    symbol: str = Field(index=True)
    name: str
    type: InvestmentType = Field(default=InvestmentType.stock)
    purchase_price: float
    quantity: float
    current_price: float
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
