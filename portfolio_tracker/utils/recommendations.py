from typing import Iterable, List, Optional, Protocol, Sequence

from portfolio_tracker.constants.recommendations import Candidate, MAX_RECOMMENDATIONS, STATIC_CANDIDATES


class RecommendationSource(Protocol):
    """Given current holdings, return candidates in the order they should be shown."""

    def candidates(self, holdings: Sequence) -> Sequence[Candidate]:
        ...


class StaticRecommendationSource:
    def __init__(self, candidates: Sequence[Candidate] = STATIC_CANDIDATES):
        self._candidates = tuple(candidates)

    def candidates(self, holdings: Sequence) -> Sequence[Candidate]:
        return self._candidates

    def find(self, symbol: str) -> Optional[Candidate]:
        symbol = symbol.strip().upper()
        return next((c for c in self._candidates if c.symbol == symbol), None)


default_source = StaticRecommendationSource()


def generate_recommendations(
    investments: Iterable,
    source: RecommendationSource = default_source,
    limit: int = MAX_RECOMMENDATIONS,
) -> List[Candidate]:
    holdings = list(investments)
    owned = {inv.symbol.upper() for inv in holdings}
    survivors = [c for c in source.candidates(holdings) if c.symbol.upper() not in owned]
    return survivors[:limit]
