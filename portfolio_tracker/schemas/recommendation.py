from typing import List
from pydantic import BaseModel

class RecommendationRead(BaseModel):
    symbol: str
    name: str
    sector: str
    price: float
    change: float
    reason: str
    price_display: str
    change_display: str

class RecommendationList(BaseModel):
    title: str
    description: str
    items: List[RecommendationRead]
