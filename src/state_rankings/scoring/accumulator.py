"""
Per-State Accumulator

Folds policy-research connections into running counts and sums keyed by
state identifier. Grouping uses the exact state string; callers normalize
state names beforehand (see src.state_rankings.states).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Set

from src.state_rankings.models import (
    ConnectionType,
    PolicyConnection,
    DEFAULT_EVIDENCE_QUALITY,
    DEFAULT_WORKFORCE_RELEVANCE,
)
from src.state_rankings.scoring.grading import get_evidence_category

logger = logging.getLogger(__name__)


@dataclass
class StateScoreAccumulator:
    """Running totals for one state's connections."""
    state: str
    total_connections: int = 0
    positive_connections: int = 0
    negative_connections: int = 0
    total_strength_score: float = 0.0
    workforce_relevance_total: float = 0.0
    strong_evidence: int = 0
    moderate_evidence: int = 0
    weak_evidence: int = 0
    policy_ids: Set[str] = field(default_factory=set)
    paper_ids: Set[str] = field(default_factory=set)

    @property
    def distinct_policies(self) -> int:
        return len(self.policy_ids)

    @property
    def distinct_papers(self) -> int:
        return len(self.paper_ids)

    def add(self, connection: PolicyConnection) -> None:
        """Fold one connection into the running totals."""
        self.total_connections += 1
        self.total_strength_score += connection.strength_score

        relevance = connection.workforce_relevance
        if relevance is None:
            relevance = DEFAULT_WORKFORCE_RELEVANCE
        self.workforce_relevance_total += relevance

        if connection.connection_type == ConnectionType.POSITIVE:
            self.positive_connections += 1
        elif connection.connection_type == ConnectionType.NEGATIVE:
            self.negative_connections += 1

        evidence = connection.evidence_quality
        if evidence is None:
            evidence = DEFAULT_EVIDENCE_QUALITY
        tier = get_evidence_category(evidence)
        if tier == "strong":
            self.strong_evidence += 1
        elif tier == "moderate":
            self.moderate_evidence += 1
        else:
            self.weak_evidence += 1

        self.policy_ids.add(connection.policy_id)
        self.paper_ids.add(connection.paper_id)


def accumulate_connections(
    connections: Iterable[PolicyConnection],
) -> Dict[str, StateScoreAccumulator]:
    """
    Group connections by state and accumulate their metrics.

    Connections without a state are skipped. The returned mapping preserves
    the order in which each state was first seen.

    Args:
        connections: Connections to fold (not mutated)

    Returns:
        Mapping of state identifier to its accumulator
    """
    accumulators: Dict[str, StateScoreAccumulator] = {}
    skipped = 0

    for conn in connections:
        state = conn.state_jurisdiction
        if not state:
            skipped += 1
            logger.debug(f"Skipping connection {conn.connection_id} with no state jurisdiction")
            continue

        acc = accumulators.get(state)
        if acc is None:
            acc = StateScoreAccumulator(state=state)
            accumulators[state] = acc
        acc.add(conn)

    if skipped:
        logger.warning(f"Skipped {skipped} connection(s) without a state jurisdiction")

    return accumulators
