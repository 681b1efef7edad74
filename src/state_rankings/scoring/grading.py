"""
Grade Classifier

Explicit lookup rubrics for:
- Workforce impact letter grades (0-100 score → A+ ... F)
- Evidence quality tiers (1-10 score → strong/moderate/weak)
- Connection strength labels (1-10 score → Very Strong ... Very Weak)
"""

from typing import Tuple

from src.state_rankings.models import WorkforceGrade


GREEN = "#28a745"
YELLOW = "#ffc107"
ORANGE = "#fd7e14"
RED = "#dc3545"


class GradeRubric:
    """
    Stepped-threshold rubrics, evaluated highest to lowest; first match wins.

    Tables are tuples so they cannot be mutated at runtime.
    """

    WORKFORCE_GRADE_THRESHOLDS: Tuple[Tuple[float, WorkforceGrade], ...] = (
        (90, WorkforceGrade(letter="A+", color=GREEN, description="Excellent workforce policies")),
        (85, WorkforceGrade(letter="A", color=GREEN, description="Very strong workforce impact")),
        (80, WorkforceGrade(letter="A-", color=GREEN, description="Strong workforce support")),
        (75, WorkforceGrade(letter="B+", color=YELLOW, description="Good workforce policies")),
        (70, WorkforceGrade(letter="B", color=YELLOW, description="Adequate workforce support")),
        (65, WorkforceGrade(letter="B-", color=YELLOW, description="Mixed workforce impact")),
        (60, WorkforceGrade(letter="C+", color=ORANGE, description="Limited workforce benefits")),
        (55, WorkforceGrade(letter="C", color=ORANGE, description="Neutral workforce impact")),
        (50, WorkforceGrade(letter="C-", color=ORANGE, description="Minimal workforce support")),
        (40, WorkforceGrade(letter="D", color=RED, description="Concerning workforce policies")),
    )
    FAILING_GRADE = WorkforceGrade(letter="F", color=RED, description="Critical workforce deficiencies")

    # Evidence quality tiers on the 1-10 scale
    EVIDENCE_TIERS: Tuple[Tuple[float, str], ...] = (
        (8, "strong"),
        (5, "moderate"),
    )

    STRENGTH_LABELS: Tuple[Tuple[float, str], ...] = (
        (9, "Very Strong"),
        (7, "Strong"),
        (5, "Moderate"),
        (3, "Weak"),
    )

    @classmethod
    def grade(cls, score: float) -> WorkforceGrade:
        """Map a workforce impact score to its letter grade."""
        for threshold, grade in cls.WORKFORCE_GRADE_THRESHOLDS:
            if score >= threshold:
                return grade
        return cls.FAILING_GRADE

    @classmethod
    def evidence_category(cls, evidence_quality: float) -> str:
        """Map a 1-10 evidence quality rating to strong/moderate/weak."""
        for threshold, tier in cls.EVIDENCE_TIERS:
            if evidence_quality >= threshold:
                return tier
        return "weak"

    @classmethod
    def strength_label(cls, strength_score: float) -> str:
        """Map a 1-10 strength rating to a display label."""
        for threshold, label in cls.STRENGTH_LABELS:
            if strength_score >= threshold:
                return label
        return "Very Weak"


def get_workforce_impact_grade(score: float) -> WorkforceGrade:
    """Get workforce impact grade based on score."""
    return GradeRubric.grade(score)


def get_evidence_category(evidence_quality: float) -> str:
    """Evidence quality category: strong (>=8), moderate (5-7), weak (<5)."""
    return GradeRubric.evidence_category(evidence_quality)


def get_strength_label(strength_score: float) -> str:
    return GradeRubric.strength_label(strength_score)
