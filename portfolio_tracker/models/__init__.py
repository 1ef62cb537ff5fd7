from portfolio_tracker.models.user import User
from portfolio_tracker.models.portfolio import Portfolio
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.models.watchlist import WatchlistItem

__all__ = ["User", "Portfolio", "Investment", "Transaction", "WatchlistItem"]
