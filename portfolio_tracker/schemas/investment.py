from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_tracker.models.enums import InvestmentType
from portfolio_tracker.schemas.transaction import TransactionRead
from portfolio_tracker.utils.validation import (
    PRICE_DECIMALS,
    QUANTITY_DECIMALS,
    check_decimals,
    normalize_symbol,
    required_text,
)

class InvestmentCreate(BaseModel):
    symbol: str
    name: str
    type: InvestmentType
    quantity: float = Field(ge=0)
    purchase_price: float = Field(ge=0)
    current_price: float = Field(ge=0)

    @field_validator("symbol")
    @classmethod
    def _symbol(cls, v: str) -> str:
        return normalize_symbol(v)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return required_text(v)

    @field_validator("quantity")
    @classmethod
    def _quantity_step(cls, v: float) -> float:
        return check_decimals(v, QUANTITY_DECIMALS)

    @field_validator("purchase_price", "current_price")
    @classmethod
    def _price_step(cls, v: float) -> float:
        return check_decimals(v, PRICE_DECIMALS)

class InvestmentUpdate(BaseModel):
    # Only these two fields are editable after creation
    quantity: float = Field(ge=0)
    current_price: float = Field(ge=0)

    @field_validator("quantity")
    @classmethod
    def _quantity_step(cls, v: float) -> float:
        return check_decimals(v, QUANTITY_DECIMALS)

    @field_validator("current_price")
    @classmethod
    def _price_step(cls, v: float) -> float:
        return check_decimals(v, PRICE_DECIMALS)

class InvestmentRead(BaseModel):
    id: UUID
    portfolio_id: UUID
    symbol: str
    name: str
    type: InvestmentType
    purchase_price: float
    quantity: float
    current_price: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class InvestmentRow(InvestmentRead):
    type_label: str
    current_value: float
    cost_basis: float
    gain_loss: float
    gain_loss_percentage: float
    is_positive: bool
    purchase_price_display: str
    current_price_display: str
    current_value_display: str
    gain_loss_display: str
    gain_loss_percentage_display: str

class InvestmentList(BaseModel):
    items: List[InvestmentRow]
    empty_message: Optional[str] = None

class InvestmentCreated(BaseModel):
    message: str
    investment: InvestmentRead
    transaction: TransactionRead

class InvestmentUpdated(BaseModel):
    message: str
    investment: InvestmentRead
