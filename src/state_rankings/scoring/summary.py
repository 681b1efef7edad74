"""
Sort, filter and summary utilities for ranking lists.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from src.state_rankings.models import (
    ConnectionSummary,
    ConnectionType,
    PolicyConnection,
    RankingSortBy,
    RankingSummary,
    StateRanking,
    DEFAULT_EVIDENCE_QUALITY,
    DEFAULT_WORKFORCE_RELEVANCE,
)
from src.state_rankings.scoring.synthesizer import round_half_up


_SORT_KEYS = {
    RankingSortBy.SCORE: lambda r: r.workforce_impact_score,
    RankingSortBy.CONNECTIONS: lambda r: r.total_connections,
    RankingSortBy.POLICIES: lambda r: r.policies,
}


def sort_state_rankings(
    rankings: Sequence[StateRanking],
    sort_by: Union[RankingSortBy, str] = RankingSortBy.SCORE,
) -> List[StateRanking]:
    """
    Sort rankings by different criteria.

    Numeric keys sort descending, 'alpha' sorts by state ascending. Ties keep
    their input order. The input sequence is not modified.

    Raises:
        ValueError: If sort_by is not a known sort key
    """
    sort_by = RankingSortBy(sort_by)
    if sort_by == RankingSortBy.ALPHA:
        return sorted(rankings, key=lambda r: r.state)
    return sorted(rankings, key=_SORT_KEYS[sort_by], reverse=True)


@dataclass(frozen=True)
class RankingFilters:
    """Display filters applied on top of a ranking list."""
    sort_by: RankingSortBy = RankingSortBy.SCORE
    min_score: Optional[int] = None
    max_score: Optional[int] = None
    has_data: Optional[bool] = None


def apply_ranking_filters(
    rankings: Sequence[StateRanking],
    filters: RankingFilters,
) -> List[StateRanking]:
    """Filter by inclusive score bounds and data availability, then sort."""
    result = list(rankings)

    if filters.min_score is not None:
        result = [r for r in result if r.workforce_impact_score >= filters.min_score]
    if filters.max_score is not None:
        result = [r for r in result if r.workforce_impact_score <= filters.max_score]

    # has_data=False means "no restriction", not "only states without data"
    if filters.has_data:
        result = [r for r in result if r.total_connections > 0]

    return sort_state_rankings(result, filters.sort_by)


def get_ranking_for_state(rankings: Sequence[StateRanking], state: str) -> Optional[StateRanking]:
    """Find a state's ranking by case-insensitive name."""
    wanted = state.lower()
    for ranking in rankings:
        if ranking.state.lower() == wanted:
            return ranking
    return None


def get_ranking_summary(rankings: Sequence[StateRanking]) -> RankingSummary:
    """
    Summary statistics over a ranking list.

    Returns a zeroed summary with an empty grade distribution for an empty list.
    """
    if not rankings:
        return RankingSummary()

    scores = [r.workforce_impact_score for r in rankings]
    grade_distribution: Dict[str, int] = {}
    for r in rankings:
        letter = r.grade.letter
        grade_distribution[letter] = grade_distribution.get(letter, 0) + 1

    return RankingSummary(
        total_states=len(rankings),
        average_score=round_half_up(sum(scores) / len(scores)),
        highest_score=max(scores),
        lowest_score=min(scores),
        states_with_data=sum(1 for r in rankings if r.total_connections > 0),
        grade_distribution=grade_distribution,
    )


def summarize_connections(connections: Sequence[PolicyConnection]) -> ConnectionSummary:
    """Counts by polarity and average ratings over a connection list."""
    total = len(connections)
    if total == 0:
        return ConnectionSummary()

    def _avg(values):
        return sum(values) / total

    return ConnectionSummary(
        total_connections=total,
        positive_connections=sum(1 for c in connections if c.connection_type == ConnectionType.POSITIVE),
        negative_connections=sum(1 for c in connections if c.connection_type == ConnectionType.NEGATIVE),
        neutral_connections=sum(1 for c in connections if c.connection_type == ConnectionType.NEUTRAL),
        average_strength=_avg([c.strength_score for c in connections]),
        average_evidence=_avg([
            c.evidence_quality if c.evidence_quality is not None else DEFAULT_EVIDENCE_QUALITY
            for c in connections
        ]),
        average_relevance=_avg([
            c.workforce_relevance if c.workforce_relevance is not None else DEFAULT_WORKFORCE_RELEVANCE
            for c in connections
        ]),
    )
