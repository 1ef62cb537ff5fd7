import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_tracker.core.security import get_current_user
from portfolio_tracker.database import get_session
from portfolio_tracker.models.enums import TransactionType
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.schemas.investment import (
    InvestmentCreate,
    InvestmentCreated,
    InvestmentList,
    InvestmentRead,
    InvestmentUpdate,
    InvestmentUpdated,
)
from portfolio_tracker.schemas.transaction import TransactionRead
from portfolio_tracker.utils.formatting import format_quantity
from portfolio_tracker.utils.portfolio_helpers import get_user_investment, get_user_portfolio
from portfolio_tracker.utils import views

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/investments", tags=["investments"])


def _get_investment_or_404(session: Session, user_id: UUID, investment_id: UUID) -> Investment:
    investment = get_user_investment(session, user_id, investment_id)
    if not investment:
        raise HTTPException(status_code=404, detail="Investment not found")
    return investment


@router.get("", response_model=InvestmentList)
def list_investments(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    try:
        portfolio = get_user_portfolio(session, user_id)
        investments = []
        if portfolio:
            investments = session.exec(
                select(Investment).where(Investment.portfolio_id == portfolio.id)
            ).all()
    except SQLAlchemyError:
        logger.exception("Error fetching investments for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch portfolio data")

    return views.investment_list(investments)


@router.post(
    "",
    response_model=InvestmentCreated,
    status_code=status.HTTP_201_CREATED,
    responses={204: {"description": "No portfolio, nothing was written"}},
)
def add_investment(
    data: InvestmentCreate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Adds a holding and its opening buy transaction.

    Both rows are written in one database transaction: if the transaction
    row cannot be stored the investment is not kept either.
    """
    try:
        portfolio = get_user_portfolio(session, user_id)
        if not portfolio:
            logger.debug("User %s has no portfolio, skipping add", user_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        investment = Investment(**data.model_dump(), portfolio_id=portfolio.id)
        session.add(investment)
        session.flush()  # insert errors surface here, before the transaction row is built

        transaction = Transaction(
            portfolio_id=portfolio.id,
            investment_id=investment.id,
            symbol=investment.symbol,
            name=investment.name,
            type=TransactionType.buy,
            quantity=data.quantity,
            price=data.purchase_price,
            total_amount=data.purchase_price * data.quantity,
        )
        session.add(transaction)
        session.commit()
        session.refresh(investment)
        session.refresh(transaction)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error adding investment %s for user %s", data.symbol, user_id)
        raise HTTPException(status_code=500, detail="Failed to add investment. Please try again.")

    logger.info("Added %s x %s to portfolio %s", data.quantity, investment.symbol, portfolio.id)
    return InvestmentCreated(
        message=f"Successfully added {format_quantity(data.quantity)} shares of {investment.symbol}",
        investment=InvestmentRead.model_validate(investment),
        transaction=TransactionRead.model_validate(transaction),
    )


@router.patch("/{investment_id}", response_model=InvestmentUpdated)
def update_investment(
    investment_id: UUID,
    data: InvestmentUpdate,
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    try:
        investment = _get_investment_or_404(session, user_id, investment_id)
        investment.quantity = data.quantity
        investment.current_price = data.current_price
        session.add(investment)
        session.commit()
        session.refresh(investment)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error updating investment %s", investment_id)
        raise HTTPException(status_code=500, detail="Failed to update investment")

    logger.info("Updated investment %s (%s)", investment.id, investment.symbol)
    return InvestmentUpdated(
        message=f"Updated {investment.symbol} successfully",
        investment=InvestmentRead.model_validate(investment),
    )


@router.delete("/{investment_id}")
def delete_investment(
    investment_id: UUID,
    confirm: Optional[str] = Query(None, description="Symbol of the investment, to confirm deletion"),
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    try:
        investment = _get_investment_or_404(session, user_id, investment_id)
    except SQLAlchemyError:
        logger.exception("Error fetching investment %s", investment_id)
        raise HTTPException(status_code=500, detail="Failed to delete investment")

    symbol = investment.symbol
    if not confirm or confirm.strip().upper() != symbol:
        raise HTTPException(status_code=400, detail=f"Are you sure you want to delete {symbol}?")

    # Transactions that reference this investment stay as history
    try:
        session.delete(investment)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error deleting investment %s", investment_id)
        raise HTTPException(status_code=500, detail="Failed to delete investment")

    logger.info("Deleted investment %s (%s)", investment_id, symbol)
    return {"message": f"Removed {symbol} from portfolio"}
