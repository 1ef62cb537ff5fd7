import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_tracker.core.security import get_current_user
from portfolio_tracker.database import get_session
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.schemas.transaction import TransactionList
from portfolio_tracker.utils.portfolio_helpers import get_user_portfolio
from portfolio_tracker.utils import views

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])

# Read-only: transactions are only ever written by the add-investment flow
@router.get("", response_model=TransactionList)
def list_transactions(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    try:
        portfolio = get_user_portfolio(session, user_id)
        transactions = []
        if portfolio:
            transactions = session.exec(
                select(Transaction)
                .where(Transaction.portfolio_id == portfolio.id)
                .order_by(Transaction.transaction_date.desc())
            ).all()
    except SQLAlchemyError:
        logger.exception("Error fetching transactions for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch portfolio data")

    return views.transaction_list(transactions)
