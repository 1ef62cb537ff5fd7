# portfolio_tracker/api/dashboard.py

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_tracker.core.config import AUTH_ENTRY_URL
from portfolio_tracker.core.security import get_optional_user
from portfolio_tracker.database import get_session
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.schemas.dashboard import DashboardRead
from portfolio_tracker.schemas.portfolio import PortfolioRead
from portfolio_tracker.utils.portfolio_helpers import get_user_portfolio
from portfolio_tracker.utils import views

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("", response_model=DashboardRead)
def dashboard(
    user_id: Optional[UUID] = Depends(get_optional_user),
    session: Session = Depends(get_session),
):
    if user_id is None:
        return RedirectResponse(url=AUTH_ENTRY_URL, status_code=307)

    investments = []
    transactions = []
    try:
        portfolio = get_user_portfolio(session, user_id)
        if portfolio:
            investments = session.exec(
                select(Investment).where(Investment.portfolio_id == portfolio.id)
            ).all()
            transactions = session.exec(
                select(Transaction)
                .where(Transaction.portfolio_id == portfolio.id)
                .order_by(Transaction.transaction_date.desc())
            ).all()
    except SQLAlchemyError:
        logger.exception("Error fetching dashboard data for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch portfolio data")

    return DashboardRead(
        portfolio=PortfolioRead.model_validate(portfolio) if portfolio else None,
        metrics=views.metrics_view(investments),
        investments=views.investment_list(investments),
        transactions=views.transaction_list(transactions),
        recommendations=views.recommendation_list(investments),
    )
