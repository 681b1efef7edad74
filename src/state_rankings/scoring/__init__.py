"""
Scoring Engine for State Workforce Rankings

Provides modular, testable scoring components for:
- Letter grades (score → A+ ... F)
- Per-state accumulation of policy-research connections
- Composite score synthesis (baseline, policy, evidence, population)
- Ranking assembly, sorting and summary statistics
"""

from src.state_rankings.scoring.grading import (
    GradeRubric,
    get_workforce_impact_grade,
    get_evidence_category,
    get_strength_label,
)
from src.state_rankings.scoring.accumulator import (
    StateScoreAccumulator,
    accumulate_connections,
)
from src.state_rankings.scoring.synthesizer import (
    ScoringWeights,
    StateScoreSynthesizer,
    calculate_confidence,
    round_half_up,
)
from src.state_rankings.scoring.ranking_engine import (
    StateRankingEngine,
    calculate_state_rankings,
)
from src.state_rankings.scoring.summary import (
    RankingFilters,
    apply_ranking_filters,
    get_ranking_for_state,
    get_ranking_summary,
    sort_state_rankings,
    summarize_connections,
)

__all__ = [
    # Grades
    "GradeRubric",
    "get_workforce_impact_grade",
    "get_evidence_category",
    "get_strength_label",
    # Accumulation
    "StateScoreAccumulator",
    "accumulate_connections",
    # Synthesis
    "ScoringWeights",
    "StateScoreSynthesizer",
    "calculate_confidence",
    "round_half_up",
    # Ranking
    "StateRankingEngine",
    "calculate_state_rankings",
    # Utilities
    "RankingFilters",
    "apply_ranking_filters",
    "get_ranking_for_state",
    "get_ranking_summary",
    "sort_state_rankings",
    "summarize_connections",
]
