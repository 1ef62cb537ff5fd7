from typing import Optional
from uuid import UUID

from sqlmodel import Session, select

from portfolio_tracker.core.config import DEFAULT_PORTFOLIO_NAME
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.models.portfolio import Portfolio


def get_user_portfolio(session: Session, user_id: UUID) -> Optional[Portfolio]:
    """The caller's single portfolio, or None when it has none yet."""
    return session.exec(
        select(Portfolio)
        .where(Portfolio.user_id == user_id)
        .order_by(Portfolio.created_at)
    ).first()


def create_default_portfolio(session: Session, user_id: UUID) -> Portfolio:
    """
    Creates the portfolio a new user starts with. Idempotent: returns the
    existing one if the user already has it. Does not commit.
    """
    existing = get_user_portfolio(session, user_id)
    if existing:
        return existing

    portfolio = Portfolio(
        user_id=user_id,
        name=DEFAULT_PORTFOLIO_NAME,
        description="Personal investment portfolio",
    )
    session.add(portfolio)
    return portfolio


def get_user_investment(session: Session, user_id: UUID, investment_id: UUID) -> Optional[Investment]:
    return session.exec(
        select(Investment)
        .join(Portfolio, Portfolio.id == Investment.portfolio_id)
        .where(Investment.id == investment_id, Portfolio.user_id == user_id)
    ).first()
