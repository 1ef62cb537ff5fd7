from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict

from portfolio_tracker.models.enums import TransactionType

class TransactionRead(BaseModel):
    id: UUID
    portfolio_id: UUID
    investment_id: Optional[UUID] = None
    symbol: str
    name: str
    type: TransactionType
    quantity: float
    price: float
    total_amount: float
    transaction_date: datetime

    model_config = ConfigDict(from_attributes=True)

class TransactionRow(TransactionRead):
    type_label: str
    sign: str
    color: str
    amount_display: str
    quantity_display: str
    date_display: str

class TransactionList(BaseModel):
    items: List[TransactionRow]
    empty_message: Optional[str] = None
