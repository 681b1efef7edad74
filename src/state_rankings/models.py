"""
Pydantic schemas for the State Workforce Impact Ranking Engine

Defines structured data models for:
- Policy-research connections (evidence links scoped to a state)
- Policies and baseline workforce statistics
- State rankings, grades and summary statistics
"""

from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


# Default values resolved by the score synthesizer when inputs omit them
DEFAULT_EVIDENCE_QUALITY = 5
DEFAULT_WORKFORCE_RELEVANCE = 5
DEFAULT_POPULATION_AFFECTED = 100_000
DEFAULT_BASELINE_SCORE = 50


class ConnectionType(str, Enum):
    """Polarity of a policy-research connection"""
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"
    MIXED = "MIXED"


class DataQualityFlag(str, Enum):
    """Coarse confidence label for a state's score"""
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    LIMITED_DATA = "LIMITED_DATA"
    RELIABLE_DATA = "RELIABLE_DATA"


class RankingSortBy(str, Enum):
    """Sort keys supported for ranking lists"""
    SCORE = "score"
    ALPHA = "alpha"
    CONNECTIONS = "connections"
    POLICIES = "policies"


class _CamelModel(BaseModel):
    """Accepts snake_case or camelCase keys; dumps camelCase with by_alias."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _FrozenCamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ============================================================
# Input Schemas
# ============================================================

class PolicyConnection(_CamelModel):
    """Evidence-backed link between one policy and one research paper, scoped to a state"""
    connection_id: Optional[str] = Field(None, description="Connection identifier")
    policy_id: str = Field(..., description="Referenced policy")
    paper_id: str = Field(..., description="Referenced research paper")
    state_jurisdiction: Optional[str] = Field(None, description="State the connection applies to")
    connection_type: ConnectionType = Field(..., description="POSITIVE/NEGATIVE/NEUTRAL/MIXED")
    strength_score: int = Field(..., description="1-10: how strongly the policy affects the outcome")
    evidence_quality: Optional[int] = Field(None, description="1-10: quality of supporting research")
    workforce_relevance: Optional[int] = Field(None, description="1-10: relevance to the physician workforce")
    rationale: Optional[str] = None
    outcome_affected: Optional[str] = None
    project: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Policy(_CamelModel):
    """Policy record; only status and population affected feed the scoring"""
    policy_id: str
    title: str = ""
    jurisdiction: str = Field(..., description="State identifier")
    description: Optional[str] = None
    policy_type: Optional[str] = None  # legislation, regulation, executive_order, ...
    status: Optional[str] = None  # introduced, passed, enacted, signed, effective, ...
    effective_date: Optional[date] = None
    source_url: Optional[str] = None
    bill_number: Optional[str] = None
    session: Optional[str] = None
    estimated_population_affected: Optional[int] = None
    project: Optional[str] = None


class StateBaselineWorkforce(_CamelModel):
    """Connection-independent workforce statistics for one state"""
    state_name: str
    baseline_workforce_score: Optional[float] = Field(None, description="0-100 baseline workforce health")
    physician_density: Optional[float] = Field(None, description="Physicians per 1,000 residents")
    nurse_ratio: Optional[float] = None
    rural_access_score: Optional[float] = None
    specialty_distribution: Optional[Dict[str, float]] = None


# ============================================================
# Output Schemas
# ============================================================

class WorkforceGrade(_FrozenCamelModel):
    """Letter grade with display color and description"""
    letter: str
    color: str
    description: str


class StateRanking(_FrozenCamelModel):
    """Composite workforce impact ranking for one state"""
    state: str
    workforce_impact_score: int = Field(..., ge=0, le=100)
    grade: WorkforceGrade

    # Connection metrics
    total_connections: int = 0
    positive_connections: int = 0
    negative_connections: int = 0

    # Quality metrics
    average_strength: float = 0.0
    average_workforce_relevance: float = 0.0
    positive_connection_rate: float = 0.0
    evidence_quality_score: float = 0.0

    # Evidence breakdown
    strong_evidence: int = 0
    moderate_evidence: int = 0
    weak_evidence: int = 0

    # Distinct references
    policies: int = 0
    research_papers: int = 0

    # Baseline data
    baseline_workforce_score: float = DEFAULT_BASELINE_SCORE
    policy_impact_score: int = 0
    has_baseline_data: bool = False

    # Enhanced metrics (connection-scored states only)
    policy_effectiveness_score: Optional[int] = None
    evidence_strength_score: Optional[int] = None
    population_impact_score: Optional[int] = None
    workforce_supply_score: Optional[float] = None
    implementation_rate: Optional[int] = None
    implementation_status_multiplier: Optional[float] = None
    population_scale_factor: Optional[float] = None
    shortage_area_bonus: Optional[float] = None
    average_population_affected: Optional[float] = None

    # Confidence metrics
    confidence_level: int = 0
    uncertainty_range: int = 0
    data_quality_flag: DataQualityFlag = DataQualityFlag.INSUFFICIENT_DATA
    data_points_count: int = 0
    score_range_low: int = 0
    score_range_high: int = 0


class RankingSummary(_FrozenCamelModel):
    """Aggregate statistics over a ranking list"""
    total_states: int = 0
    average_score: int = 0
    highest_score: int = 0
    lowest_score: int = 0
    states_with_data: int = 0
    grade_distribution: Mapping[str, int] = Field(default_factory=dict, validate_default=True)

    @field_validator("grade_distribution", mode="after")
    @classmethod
    def _freeze_grade_distribution(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))

    @field_serializer("grade_distribution")
    def _dump_grade_distribution(self, value: Mapping[str, int]) -> Dict[str, int]:
        return dict(value)


class ConnectionSummary(_FrozenCamelModel):
    """Aggregate statistics over a connection list"""
    total_connections: int = 0
    positive_connections: int = 0
    negative_connections: int = 0
    neutral_connections: int = 0
    average_strength: float = 0.0
    average_evidence: float = 0.0
    average_relevance: float = 0.0
