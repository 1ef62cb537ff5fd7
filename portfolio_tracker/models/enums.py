from enum import Enum

class InvestmentType(str, Enum):
    stock = "stock"
    bond = "bond"
    mutual_fund = "mutual_fund"
    etf = "etf"
    crypto = "crypto"
    other = "other"

class TransactionType(str, Enum):
    buy = "buy"
    sell = "sell"
