from typing import NamedTuple

class Candidate(NamedTuple):
    symbol: str
    name: str
    sector: str
    price: float
    change: float  # day change, percent
    reason: str

# Mock market data, in this order. No live feed behind it.
STATIC_CANDIDATES = (
    Candidate("MSFT", "Microsoft Corporation", "Technology", 378.85, 2.1, "Similar to your tech holdings"),
    Candidate("NVDA", "NVIDIA Corporation", "Technology", 875.32, 3.8, "High growth potential in AI sector"),
    Candidate("JPM", "JPMorgan Chase & Co.", "Financial", 215.67, 1.2, "Diversification into financial sector"),
    Candidate("JNJ", "Johnson & Johnson", "Healthcare", 156.78, 0.8, "Stable dividend stock for portfolio balance"),
    Candidate("TSLA", "Tesla, Inc.", "Automotive", 248.42, -1.5, "Innovation leader in electric vehicles"),
)

MAX_RECOMMENDATIONS = 4
