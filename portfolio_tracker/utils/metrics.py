from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class HoldingMetrics:
    current_value: float
    cost_basis: float
    gain_loss: float
    gain_loss_percentage: float

    @property
    def is_positive(self) -> bool:
        return self.gain_loss >= 0


@dataclass(frozen=True)
class PortfolioTotals:
    total_value: float
    total_cost: float
    total_gain_loss: float
    gain_loss_percentage: float

    @property
    def is_positive(self) -> bool:
        return self.total_gain_loss >= 0


def gain_loss_percentage(gain_loss: float, cost: float) -> float:
    # A zero cost basis reports 0% whatever the current value is
    return gain_loss / cost * 100 if cost > 0 else 0.0


def holding_metrics(investment) -> HoldingMetrics:
    current_value = investment.current_price * investment.quantity
    cost_basis = investment.purchase_price * investment.quantity
    gain_loss = current_value - cost_basis
    return HoldingMetrics(
        current_value=current_value,
        cost_basis=cost_basis,
        gain_loss=gain_loss,
        gain_loss_percentage=gain_loss_percentage(gain_loss, cost_basis),
    )


def portfolio_totals(investments: Iterable) -> PortfolioTotals:
    """
    Aggregate value, cost basis and gain/loss over a list of holdings.

    Works on anything with `current_price`, `purchase_price` and `quantity`
    attributes (models or read schemas).
    """
    total_value = 0.0
    total_cost = 0.0
    for inv in investments:
        total_value += inv.current_price * inv.quantity
        total_cost += inv.purchase_price * inv.quantity

    total_gain_loss = total_value - total_cost
    return PortfolioTotals(
        total_value=total_value,
        total_cost=total_cost,
        total_gain_loss=total_gain_loss,
        gain_loss_percentage=gain_loss_percentage(total_gain_loss, total_cost),
    )
