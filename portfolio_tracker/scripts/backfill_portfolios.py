from sqlmodel import Session, select

from portfolio_tracker.database import engine
from portfolio_tracker.models.user import User
from portfolio_tracker.utils.portfolio_helpers import create_default_portfolio, get_user_portfolio

def backfill_portfolios(session: Session) -> int:
    """Gives every user without a portfolio the default one. Returns how many were created."""
    created = 0
    users = session.exec(select(User)).all()
    for user in users:
        if get_user_portfolio(session, user.id):
            continue
        create_default_portfolio(session, user.id)
        session.flush()
        created += 1
        print(f"Created portfolio for {user.email}")
    session.commit()
    return created

if __name__ == "__main__":
    with Session(engine) as session:
        count = backfill_portfolios(session)
    print(f"Backfill done: {count} portfolio(s) created.")
