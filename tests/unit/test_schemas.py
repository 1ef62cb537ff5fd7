import pytest
from pydantic import ValidationError

from portfolio_tracker.models.enums import InvestmentType
from portfolio_tracker.schemas.investment import InvestmentCreate, InvestmentUpdate
from portfolio_tracker.schemas.watchlist import WatchlistCreate


def valid_investment(**overrides):
    data = {
        "symbol": " aapl ",
        "name": "Apple Inc.",
        "type": "stock",
        "quantity": 100,
        "purchase_price": 150.0,
        "current_price": 155.0,
    }
    data.update(overrides)
    return data


def test_investment_symbol_uppercased():
    inv = InvestmentCreate(**valid_investment())
    assert inv.symbol == "AAPL"
    assert inv.type == InvestmentType.stock


@pytest.mark.parametrize("field", ["quantity", "purchase_price", "current_price"])
@pytest.mark.parametrize("bad", ["", "abc", None])
def test_investment_numeric_fields_required(field, bad):
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(**{field: bad}))


def test_investment_negative_values_rejected():
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(quantity=-1))
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(current_price=-0.01))


def test_investment_step_precision():
    assert InvestmentCreate(**valid_investment(quantity=0.0001)).quantity == 0.0001
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(quantity=0.00001))
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(purchase_price=1.005))


def test_investment_unknown_type_rejected():
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(type="option"))


def test_investment_blank_symbol_rejected():
    with pytest.raises(ValidationError):
        InvestmentCreate(**valid_investment(symbol="   "))


def test_update_only_carries_quantity_and_price():
    update = InvestmentUpdate(quantity=5, current_price=10.5, symbol="MSFT", purchase_price=1)
    assert update.model_dump() == {"quantity": 5, "current_price": 10.5}


def test_watchlist_blank_optionals_become_none():
    item = WatchlistCreate(symbol="nvda", name="NVIDIA", sector="  ", notes="")
    assert item.symbol == "NVDA"
    assert item.sector is None
    assert item.notes is None


def test_watchlist_requires_symbol_and_name():
    with pytest.raises(ValidationError):
        WatchlistCreate(symbol="", name="NVIDIA")
    with pytest.raises(ValidationError):
        WatchlistCreate(symbol="NVDA", name=" ")
