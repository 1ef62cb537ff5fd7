import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from portfolio_tracker.core.security import get_current_user
from portfolio_tracker.database import get_session
from portfolio_tracker.schemas.portfolio import PortfolioRead
from portfolio_tracker.utils.portfolio_helpers import get_user_portfolio

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portfolio", tags=["portfolio"])

@router.get("", response_model=PortfolioRead)
def read_portfolio(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    try:
        portfolio = get_user_portfolio(session, user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching portfolio for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch portfolio data")

    if not portfolio:
        raise HTTPException(status_code=404, detail="No portfolio found")
    return portfolio
