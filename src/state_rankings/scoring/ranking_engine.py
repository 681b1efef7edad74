"""
Ranking Engine

Main orchestrator for state workforce rankings: accumulates connections per
state, scores every state that has connections or baseline data, and returns
the rankings sorted by workforce impact score.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from src.state_rankings.models import (
    Policy,
    PolicyConnection,
    StateBaselineWorkforce,
    StateRanking,
)
from src.state_rankings.scoring.accumulator import accumulate_connections
from src.state_rankings.scoring.synthesizer import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    StateScoreSynthesizer,
)

logger = logging.getLogger(__name__)


def _score_order(ranking: StateRanking):
    # Highest score first; equal scores fall back to state name
    return (-ranking.workforce_impact_score, ranking.state)


class StateRankingEngine:
    """
    Assembles StateRanking lists from in-memory connections, policies and
    baseline workforce records.

    Holds no state between calls; concurrent use with different inputs is safe.
    """

    def __init__(
        self,
        synthesizer: Optional[StateScoreSynthesizer] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        """
        Initialize the ranking engine.

        Args:
            synthesizer: Per-state scorer (created from weights if not provided)
            weights: Composite score weights
        """
        self._synthesizer = synthesizer or StateScoreSynthesizer(weights=weights)

    @property
    def synthesizer(self) -> StateScoreSynthesizer:
        return self._synthesizer

    def calculate_rankings(
        self,
        connections: Sequence[PolicyConnection],
        policies: Sequence[Policy],
        baseline_data: Sequence[StateBaselineWorkforce] = (),
    ) -> List[StateRanking]:
        """
        Calculate state rankings.

        Args:
            connections: Policy-research connections (grouped by exact state string)
            policies: Policies, matched to states by exact jurisdiction
            baseline_data: Baseline workforce records; later duplicates win

        Returns:
            One ranking per state, sorted by score descending then state ascending
        """
        baseline_lookup: Dict[str, StateBaselineWorkforce] = {}
        for baseline in baseline_data:
            baseline_lookup[baseline.state_name] = baseline

        policies_by_state: Dict[str, List[Policy]] = defaultdict(list)
        for policy in policies:
            policies_by_state[policy.jurisdiction].append(policy)

        accumulators = accumulate_connections(connections)

        rankings: List[StateRanking] = []
        for state, acc in accumulators.items():
            rankings.append(
                self._synthesizer.score_state(
                    acc,
                    policies_by_state.get(state, []),
                    baseline_lookup.get(state),
                )
            )

        # States with baseline data but no connections
        for state, baseline in baseline_lookup.items():
            if state not in accumulators:
                rankings.append(self._synthesizer.score_baseline_only(baseline))

        rankings.sort(key=_score_order)

        logger.info(
            f"Ranked {len(rankings)} states from {len(connections)} connections "
            f"({len(accumulators)} with connections, {len(rankings) - len(accumulators)} baseline-only)"
        )
        return rankings


def calculate_state_rankings(
    connections: Sequence[PolicyConnection],
    policies: Sequence[Policy],
    baseline_data: Sequence[StateBaselineWorkforce] = (),
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> List[StateRanking]:
    """Calculate state rankings with a fresh engine."""
    return StateRankingEngine(weights=weights).calculate_rankings(connections, policies, baseline_data)
