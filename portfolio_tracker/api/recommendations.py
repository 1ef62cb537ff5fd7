import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_tracker.core.security import get_current_user
from portfolio_tracker.database import get_session
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.schemas.recommendation import RecommendationList
from portfolio_tracker.schemas.watchlist import WatchlistCreate, WatchlistCreated, WatchlistRead
from portfolio_tracker.api.watchlist import add_watchlist_item
from portfolio_tracker.utils.portfolio_helpers import get_user_portfolio
from portfolio_tracker.utils.recommendations import default_source
from portfolio_tracker.utils import views

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

@router.get("", response_model=RecommendationList)
def list_recommendations(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    try:
        portfolio = get_user_portfolio(session, user_id)
        investments = []
        if portfolio:
            investments = session.exec(
                select(Investment).where(Investment.portfolio_id == portfolio.id)
            ).all()
    except SQLAlchemyError:
        logger.exception("Error fetching holdings for recommendations, user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch portfolio data")

    return views.recommendation_list(investments, default_source)

@router.post(
    "/{symbol}/watchlist",
    response_model=WatchlistCreated,
    status_code=status.HTTP_201_CREATED,
    responses={204: {"description": "No portfolio, nothing was written"}},
)
def watch_recommendation(
    symbol: str,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    candidate = default_source.find(symbol)
    if not candidate:
        raise HTTPException(status_code=404, detail="Unknown recommendation")

    data = WatchlistCreate(symbol=candidate.symbol, name=candidate.name, sector=candidate.sector)
    try:
        item = add_watchlist_item(session, user_id, data)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error adding recommendation %s to watchlist", candidate.symbol)
        raise HTTPException(status_code=500, detail="Failed to add stock to watchlist. Please try again.")

    if item is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return WatchlistCreated(
        message=f"{item.symbol} has been added to your watchlist",
        item=WatchlistRead.model_validate(item),
    )
