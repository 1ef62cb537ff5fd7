"""
Display values derived per row, the way the dashboard renders them.
"""
from typing import List, Sequence

from portfolio_tracker.models.enums import TransactionType
from portfolio_tracker.schemas.dashboard import PortfolioMetrics
from portfolio_tracker.schemas.investment import InvestmentList, InvestmentRead, InvestmentRow
from portfolio_tracker.schemas.recommendation import RecommendationList, RecommendationRead
from portfolio_tracker.schemas.transaction import TransactionList, TransactionRead, TransactionRow
from portfolio_tracker.schemas.watchlist import WatchlistList, WatchlistRead, WatchlistRow
from portfolio_tracker.utils.formatting import (
    format_date,
    format_datetime,
    format_money,
    format_percent,
    format_quantity,
    format_signed_money,
    format_signed_percent,
)
from portfolio_tracker.utils.metrics import holding_metrics, portfolio_totals
from portfolio_tracker.utils.recommendations import RecommendationSource, default_source, generate_recommendations

NO_INVESTMENTS = "No investments yet"
NO_TRANSACTIONS = "No transactions yet"
NO_WATCHLIST_ITEMS = "No stocks in your watchlist yet."
RECOMMENDATIONS_PROMPT = "Add some investments to see personalized recommendations"


def investment_row(investment) -> InvestmentRow:
    base = InvestmentRead.model_validate(investment, from_attributes=True)
    m = holding_metrics(base)
    return InvestmentRow(
        **base.model_dump(),
        type_label=base.type.value.replace("_", " "),
        current_value=m.current_value,
        cost_basis=m.cost_basis,
        gain_loss=m.gain_loss,
        gain_loss_percentage=m.gain_loss_percentage,
        is_positive=m.is_positive,
        purchase_price_display=format_money(base.purchase_price),
        current_price_display=format_money(base.current_price),
        current_value_display=format_money(m.current_value),
        gain_loss_display=format_signed_money(m.gain_loss),
        gain_loss_percentage_display=format_percent(m.gain_loss_percentage),
    )


def investment_list(investments: Sequence) -> InvestmentList:
    return InvestmentList(
        items=[investment_row(inv) for inv in investments],
        empty_message=None if investments else NO_INVESTMENTS,
    )


def transaction_row(transaction) -> TransactionRow:
    base = TransactionRead.model_validate(transaction, from_attributes=True)
    # A buy is money out (debit, red); a sell is money in (credit, green)
    is_buy = base.type == TransactionType.buy
    sign = "-" if is_buy else "+"
    return TransactionRow(
        **base.model_dump(),
        type_label=base.type.value.upper(),
        sign=sign,
        color="red" if is_buy else "green",
        amount_display=f"{sign}${abs(base.total_amount):.2f}",
        quantity_display=f"{format_quantity(base.quantity)} @ {format_money(base.price)}",
        date_display=format_datetime(base.transaction_date),
    )


def transaction_list(transactions: Sequence) -> TransactionList:
    return TransactionList(
        items=[transaction_row(t) for t in transactions],
        empty_message=None if transactions else NO_TRANSACTIONS,
    )


def watchlist_list(items: Sequence) -> WatchlistList:
    rows: List[WatchlistRow] = []
    for item in items:
        base = WatchlistRead.model_validate(item, from_attributes=True)
        rows.append(WatchlistRow(**base.model_dump(), added_display=format_date(base.added_at)))
    return WatchlistList(items=rows, empty_message=None if rows else NO_WATCHLIST_ITEMS)


def metrics_view(investments: Sequence) -> PortfolioMetrics:
    totals = portfolio_totals(investments)
    return PortfolioMetrics(
        total_value=totals.total_value,
        total_cost=totals.total_cost,
        total_gain_loss=totals.total_gain_loss,
        gain_loss_percentage=totals.gain_loss_percentage,
        is_positive=totals.is_positive,
        total_value_display=format_money(totals.total_value),
        total_cost_display=format_money(totals.total_cost),
        total_gain_loss_display=format_signed_money(totals.total_gain_loss),
        gain_loss_percentage_display=format_percent(totals.gain_loss_percentage),
    )


def recommendation_list(investments: Sequence, source: RecommendationSource = default_source) -> RecommendationList:
    if not investments:
        return RecommendationList(title="Recommended Stocks", description=RECOMMENDATIONS_PROMPT, items=[])

    items = [
        RecommendationRead(
            **c._asdict(),
            price_display=format_money(c.price),
            change_display=format_signed_percent(c.change),
        )
        for c in generate_recommendations(investments, source)
    ]
    return RecommendationList(
        title="Recommended for You",
        description="Based on your current portfolio and market trends",
        items=items,
    )
