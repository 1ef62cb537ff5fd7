from typing import Optional
from pydantic import BaseModel

from portfolio_tracker.schemas.investment import InvestmentList
from portfolio_tracker.schemas.portfolio import PortfolioRead
from portfolio_tracker.schemas.recommendation import RecommendationList
from portfolio_tracker.schemas.transaction import TransactionList

class PortfolioMetrics(BaseModel):
    total_value: float
    total_cost: float
    total_gain_loss: float
    gain_loss_percentage: float
    is_positive: bool
    total_value_display: str
    total_cost_display: str
    total_gain_loss_display: str
    gain_loss_percentage_display: str

class DashboardRead(BaseModel):
    portfolio: Optional[PortfolioRead] = None
    metrics: PortfolioMetrics
    investments: InvestmentList
    transactions: TransactionList
    recommendations: RecommendationList
