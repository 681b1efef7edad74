"""
Score Synthesizer

Turns one state's accumulated connection metrics, its policies and its
optional baseline record into a StateRanking.

Dimensions combined into the composite score:
- Baseline workforce score (remainder weight, 40% by default)
- Policy impact (35%)
- Evidence strength (15%)
- Population impact (10%)
followed by a physician-shortage multiplier and clamping to [0, 100].
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from src.state_rankings.models import (
    DataQualityFlag,
    Policy,
    StateBaselineWorkforce,
    StateRanking,
    DEFAULT_BASELINE_SCORE,
    DEFAULT_POPULATION_AFFECTED,
)
from src.state_rankings.scoring.accumulator import StateScoreAccumulator
from src.state_rankings.scoring.grading import get_workforce_impact_grade

logger = logging.getLogger(__name__)


# Confidence thresholds (independent data points)
MIN_DATA_POINTS = 3
RELIABLE_DATA_POINTS = 6
MAX_UNCERTAINTY = 15


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 always rounding up (toward +inf)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(round_half_up(value), 100))


def calculate_confidence(data_points: int) -> Tuple[float, int, DataQualityFlag]:
    """
    Confidence metadata for a given number of independent data points.

    Returns:
        Tuple of (confidence 0.0-1.0, uncertainty range in score points, quality flag)
    """
    confidence = min(data_points / MIN_DATA_POINTS, 1.0)
    uncertainty = round_half_up((1 - confidence) * MAX_UNCERTAINTY)

    if data_points < MIN_DATA_POINTS:
        flag = DataQualityFlag.INSUFFICIENT_DATA
    elif data_points < RELIABLE_DATA_POINTS:
        flag = DataQualityFlag.LIMITED_DATA
    else:
        flag = DataQualityFlag.RELIABLE_DATA

    return confidence, uncertainty, flag


@dataclass(frozen=True)
class ScoringWeights:
    """
    Weights for the composite score dimensions.

    Default weights:
    - Policy Impact: 35%
    - Evidence Strength: 15%
    - Population Impact: 10%
    - Baseline: remainder (40%)
    """
    policy_weight: float = 0.35
    evidence_weight: float = 0.15
    population_weight: float = 0.10

    @property
    def baseline_weight(self) -> float:
        return 1 - (self.policy_weight + self.evidence_weight + self.population_weight)

    def validate(self) -> bool:
        """Each weight must be in [0, 1] and together leave a non-negative baseline share."""
        weights = [self.policy_weight, self.evidence_weight, self.population_weight]
        return all(0 <= w <= 1 for w in weights) and self.baseline_weight >= -1e-9


DEFAULT_WEIGHTS = ScoringWeights()


class StateScoreSynthesizer:
    """
    Computes the multi-dimensional workforce impact score for a single state.

    All divisions are guarded, so scoring is total over well-typed input.
    """

    # Evidence quality
    STRONG_METHODOLOGY_THRESHOLD = 7
    WEAK_METHODOLOGY_THRESHOLD = 4
    STRONG_METHODOLOGY_FACTOR = 1.2
    WEAK_METHODOLOGY_FACTOR = 0.8
    PAPER_DIVERSITY_BONUS = 0.1
    MAX_DIVERSITY_BONUS = 1.0

    # Population scaling
    REFERENCE_POPULATION = 500_000
    MAX_POPULATION_SCALE = 2.0

    # Physician shortage adjustment
    SHORTAGE_DENSITY_THRESHOLD = 2.5
    SHORTAGE_BONUS = 1.15

    IMPLEMENTED_STATUS_TERMS = ("enacted", "signed", "effective")

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS):
        if not weights.validate():
            raise ValueError("Scoring weights must be within [0, 1] and sum to at most 1.0")
        self._weights = weights

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def evidence_quality_score(self, acc: StateScoreAccumulator, avg_strength: float) -> float:
        """Tier-weighted evidence quality, adjusted for methodology strength and paper diversity."""
        base = (
            acc.strong_evidence * 3 +
            acc.moderate_evidence * 2 +
            acc.weak_evidence * 1
        ) / max(acc.total_connections, 1)

        if avg_strength > self.STRONG_METHODOLOGY_THRESHOLD:
            factor = self.STRONG_METHODOLOGY_FACTOR
        elif avg_strength < self.WEAK_METHODOLOGY_THRESHOLD:
            factor = self.WEAK_METHODOLOGY_FACTOR
        else:
            factor = 1.0

        diversity_bonus = min(acc.distinct_papers * self.PAPER_DIVERSITY_BONUS, self.MAX_DIVERSITY_BONUS)
        return base * factor + diversity_bonus

    def average_population_affected(self, policies: Sequence[Policy]) -> float:
        if not policies:
            return float(DEFAULT_POPULATION_AFFECTED)
        total = sum(
            p.estimated_population_affected
            if p.estimated_population_affected is not None
            else DEFAULT_POPULATION_AFFECTED
            for p in policies
        )
        return total / len(policies)

    def implementation_rate(self, policies: Sequence[Policy]) -> float:
        """Fraction of policies whose status reads as enacted, signed or effective."""
        implemented = sum(
            1 for p in policies
            if p.status and any(term in p.status.lower() for term in self.IMPLEMENTED_STATUS_TERMS)
        )
        return implemented / (len(policies) or 1)

    def shortage_bonus(self, baseline: Optional[StateBaselineWorkforce]) -> float:
        if (
            baseline is not None and
            baseline.physician_density is not None and
            baseline.physician_density < self.SHORTAGE_DENSITY_THRESHOLD
        ):
            return self.SHORTAGE_BONUS
        return 1.0

    def score_state(
        self,
        acc: StateScoreAccumulator,
        policies: Sequence[Policy],
        baseline: Optional[StateBaselineWorkforce] = None,
    ) -> StateRanking:
        """
        Score a single state from its accumulated connections.

        Args:
            acc: The state's accumulated connection metrics
            policies: Policies whose jurisdiction is this state
            baseline: The state's baseline record, if any

        Returns:
            StateRanking with composite score, grade and confidence metadata
        """
        count = acc.total_connections
        w = self._weights

        if count > 0:
            avg_strength = acc.total_strength_score / count
            avg_relevance = acc.workforce_relevance_total / count
            positive_rate = acc.positive_connections / count
            negative_rate = acc.negative_connections / count
            evidence_quality = self.evidence_quality_score(acc, avg_strength)
        else:
            avg_strength = avg_relevance = positive_rate = negative_rate = 0.0
            evidence_quality = 0.0

        baseline_score = _resolve_baseline_score(baseline)

        avg_population = self.average_population_affected(policies)
        population_scale = min(avg_population / self.REFERENCE_POPULATION, self.MAX_POPULATION_SCALE)

        shortage_bonus = self.shortage_bonus(baseline)

        implementation_rate = self.implementation_rate(policies)
        implementation_multiplier = 0.7 + implementation_rate * 0.6

        policy_impact = 50.0
        if count > 0:
            net_positive_rate = positive_rate - negative_rate
            policy_impact = (
                50 + net_positive_rate * 25 +
                (avg_strength - 5) * 3 +
                (avg_relevance - 5) * 3 +
                (evidence_quality - 1.5) * 5 +
                (implementation_multiplier - 1) * 20 +
                (population_scale - 1) * 10
            )
            policy_impact = max(0.0, min(policy_impact, 100.0))

        policy_effectiveness = round_half_up(policy_impact * implementation_multiplier)
        evidence_strength = round_half_up(evidence_quality * 20)
        population_impact = round_half_up(population_scale * 50)

        composite = baseline_score
        if count > 0:
            composite = round_half_up(
                baseline_score * w.baseline_weight +
                policy_impact * w.policy_weight +
                evidence_strength * w.evidence_weight +
                population_impact * w.population_weight
            ) * shortage_bonus

        score = clamp_score(composite)

        data_points = count + (1 if baseline is not None else 0) + acc.distinct_papers
        confidence, uncertainty, quality_flag = calculate_confidence(data_points)

        logger.debug(
            f"{acc.state}: {count} connections, policy impact {policy_impact:.1f}, "
            f"evidence {evidence_quality:.2f}, composite {composite:.2f} -> {score}"
        )

        return StateRanking(
            state=acc.state,
            workforce_impact_score=score,
            grade=get_workforce_impact_grade(score),
            total_connections=count,
            positive_connections=acc.positive_connections,
            negative_connections=acc.negative_connections,
            average_strength=avg_strength,
            average_workforce_relevance=avg_relevance,
            positive_connection_rate=positive_rate,
            evidence_quality_score=evidence_quality,
            strong_evidence=acc.strong_evidence,
            moderate_evidence=acc.moderate_evidence,
            weak_evidence=acc.weak_evidence,
            policies=acc.distinct_policies,
            research_papers=acc.distinct_papers,
            baseline_workforce_score=baseline_score,
            policy_impact_score=round_half_up(policy_impact),
            has_baseline_data=baseline is not None,
            policy_effectiveness_score=policy_effectiveness,
            evidence_strength_score=evidence_strength,
            population_impact_score=population_impact,
            workforce_supply_score=baseline_score,
            implementation_rate=round_half_up(implementation_rate * 100),
            implementation_status_multiplier=implementation_multiplier,
            population_scale_factor=population_scale,
            shortage_area_bonus=shortage_bonus,
            average_population_affected=avg_population,
            confidence_level=round_half_up(confidence * 100),
            uncertainty_range=uncertainty,
            data_quality_flag=quality_flag,
            data_points_count=data_points,
            score_range_low=max(0, score - uncertainty),
            score_range_high=min(100, score + uncertainty),
        )

    def score_baseline_only(self, baseline: StateBaselineWorkforce) -> StateRanking:
        """Ranking for a state that has baseline data but no connections."""
        baseline_score = _resolve_baseline_score(baseline)
        score = clamp_score(baseline_score)
        confidence, uncertainty, quality_flag = calculate_confidence(1)

        return StateRanking(
            state=baseline.state_name,
            workforce_impact_score=score,
            grade=get_workforce_impact_grade(score),
            baseline_workforce_score=baseline_score,
            policy_impact_score=0,
            has_baseline_data=True,
            confidence_level=round_half_up(confidence * 100),
            uncertainty_range=uncertainty,
            data_quality_flag=quality_flag,
            data_points_count=1,
            score_range_low=max(0, score - uncertainty),
            score_range_high=min(100, score + uncertainty),
        )


def _resolve_baseline_score(baseline: Optional[StateBaselineWorkforce]) -> float:
    if baseline is None or baseline.baseline_workforce_score is None:
        return float(DEFAULT_BASELINE_SCORE)
    return baseline.baseline_workforce_score
