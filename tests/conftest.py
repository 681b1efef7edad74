"""
Shared builders for ranking engine tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.state_rankings.models import (
    ConnectionType,
    Policy,
    PolicyConnection,
    StateBaselineWorkforce,
)


def make_connection(
    state="CALIFORNIA",
    connection_type=ConnectionType.POSITIVE,
    strength=5,
    evidence=5,
    relevance=5,
    policy_id="p1",
    paper_id="paper1",
    connection_id=None,
):
    return PolicyConnection(
        connection_id=connection_id,
        policy_id=policy_id,
        paper_id=paper_id,
        state_jurisdiction=state,
        connection_type=connection_type,
        strength_score=strength,
        evidence_quality=evidence,
        workforce_relevance=relevance,
    )


def make_policy(policy_id="p1", jurisdiction="CALIFORNIA", status=None, population=None):
    return Policy(
        policy_id=policy_id,
        title=f"Policy {policy_id}",
        jurisdiction=jurisdiction,
        status=status,
        estimated_population_affected=population,
    )


def make_baseline(state="TEXAS", score=50, density=None):
    return StateBaselineWorkforce(
        state_name=state,
        baseline_workforce_score=score,
        physician_density=density,
    )


@pytest.fixture
def sample_connections():
    """Two positive California connections and one negative Texas connection."""
    return [
        make_connection("CALIFORNIA", ConnectionType.POSITIVE, 8, 9, 7, "p1", "paper1", "1"),
        make_connection("CALIFORNIA", ConnectionType.POSITIVE, 7, 8, 8, "p2", "paper2", "2"),
        make_connection("TEXAS", ConnectionType.NEGATIVE, 5, 6, 5, "p3", "paper3", "3"),
    ]


@pytest.fixture
def sample_policies():
    return [
        make_policy("p1", "CALIFORNIA", "enacted"),
        make_policy("p2", "CALIFORNIA", "signed"),
        make_policy("p3", "TEXAS", "enacted"),
    ]
