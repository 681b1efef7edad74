"""
State Workforce Impact Rankings

Aggregates policy-research connections and baseline workforce statistics
into one composite score, confidence interval and letter grade per US state.

Components:
- models: Input and output schemas
- scoring: Grades, accumulation, score synthesis, ranking and summaries
- states: State name normalization helpers
- loader: JSON input loading
- export: Excel/JSON export utilities
"""

from src.state_rankings.models import (
    ConnectionType,
    DataQualityFlag,
    RankingSortBy,
    PolicyConnection,
    Policy,
    StateBaselineWorkforce,
    WorkforceGrade,
    StateRanking,
    RankingSummary,
    ConnectionSummary,
)
from src.state_rankings.scoring import (
    ScoringWeights,
    StateRankingEngine,
    calculate_state_rankings,
    get_workforce_impact_grade,
    sort_state_rankings,
    get_ranking_summary,
)

__all__ = [
    # Models
    "ConnectionType",
    "DataQualityFlag",
    "RankingSortBy",
    "PolicyConnection",
    "Policy",
    "StateBaselineWorkforce",
    "WorkforceGrade",
    "StateRanking",
    "RankingSummary",
    "ConnectionSummary",
    # Engine
    "ScoringWeights",
    "StateRankingEngine",
    "calculate_state_rankings",
    "get_workforce_impact_grade",
    "sort_state_rankings",
    "get_ranking_summary",
]
