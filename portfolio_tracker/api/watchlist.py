import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_tracker.core.security import get_current_user
from portfolio_tracker.database import get_session
from portfolio_tracker.models.portfolio import Portfolio
from portfolio_tracker.models.watchlist import WatchlistItem
from portfolio_tracker.schemas.watchlist import WatchlistCreate, WatchlistCreated, WatchlistList, WatchlistRead
from portfolio_tracker.utils.portfolio_helpers import get_user_portfolio
from portfolio_tracker.utils import views

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


def resolve_portfolio(session: Session, user_id: UUID, portfolio_id: Optional[UUID]) -> Optional[Portfolio]:
    """
    The portfolio a watchlist call targets: the given one if it belongs to
    the caller (404 otherwise), else the caller's own portfolio, if any.
    """
    if portfolio_id is None:
        return get_user_portfolio(session, user_id)

    portfolio = session.exec(
        select(Portfolio).where(Portfolio.id == portfolio_id, Portfolio.user_id == user_id)
    ).first()
    if not portfolio:
        raise HTTPException(status_code=404, detail="Portfolio not found")
    return portfolio


def add_watchlist_item(session: Session, user_id: UUID, data: WatchlistCreate):
    """Inserts one item scoped to (user, portfolio). Returns None when there is no portfolio to attach it to."""
    portfolio = resolve_portfolio(session, user_id, data.portfolio_id)
    if not portfolio:
        logger.debug("User %s has no portfolio, skipping watchlist add", user_id)
        return None

    item = WatchlistItem(
        user_id=user_id,
        portfolio_id=portfolio.id,
        symbol=data.symbol,
        name=data.name,
        sector=data.sector,
        notes=data.notes,
    )
    session.add(item)
    session.commit()
    session.refresh(item)
    logger.info("Added %s to watchlist of user %s", item.symbol, user_id)
    return item


@router.get("", response_model=WatchlistList)
def list_watchlist(
    portfolio_id: Optional[UUID] = Query(None),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    try:
        portfolio = resolve_portfolio(session, user_id, portfolio_id)
        items = []
        if portfolio:
            items = session.exec(
                select(WatchlistItem)
                .where(WatchlistItem.user_id == user_id, WatchlistItem.portfolio_id == portfolio.id)
                .order_by(WatchlistItem.added_at.desc())
            ).all()
    except SQLAlchemyError:
        logger.exception("Error fetching watchlist for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to load watchlist items.")

    return views.watchlist_list(items)


@router.post(
    "",
    response_model=WatchlistCreated,
    status_code=status.HTTP_201_CREATED,
    responses={204: {"description": "No portfolio, nothing was written"}},
)
def add_to_watchlist(
    data: WatchlistCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    try:
        item = add_watchlist_item(session, user_id, data)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error adding %s to watchlist", data.symbol)
        raise HTTPException(status_code=500, detail="Failed to add stock to watchlist. Please try again.")

    if item is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return WatchlistCreated(
        message=f"{item.symbol} has been added to your watchlist.",
        item=WatchlistRead.model_validate(item),
    )


# No confirmation step here, unlike investment deletion
@router.delete("/{item_id}")
def remove_from_watchlist(
    item_id: UUID,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    try:
        item = session.exec(
            select(WatchlistItem).where(WatchlistItem.id == item_id, WatchlistItem.user_id == user_id)
        ).first()
        if not item:
            raise HTTPException(status_code=404, detail="Watchlist item not found")

        symbol = item.symbol
        session.delete(item)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error removing watchlist item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to remove stock from watchlist.")

    logger.info("Removed %s from watchlist of user %s", symbol, user_id)
    return {"message": f"{symbol} has been removed from your watchlist."}
