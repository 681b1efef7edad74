"""
Tests for ranking sort, filter and summary utilities.
"""

import pytest

from conftest import make_connection
from src.state_rankings.models import ConnectionType, RankingSortBy, RankingSummary, StateRanking
from src.state_rankings.scoring.grading import get_workforce_impact_grade
from src.state_rankings.scoring.summary import (
    RankingFilters,
    apply_ranking_filters,
    get_ranking_for_state,
    get_ranking_summary,
    sort_state_rankings,
    summarize_connections,
)


def make_ranking(state, score, connections=0, policies=0):
    return StateRanking(
        state=state,
        workforce_impact_score=score,
        grade=get_workforce_impact_grade(score),
        total_connections=connections,
        policies=policies,
    )


@pytest.fixture
def rankings():
    return [
        make_ranking("CALIFORNIA", 85, connections=10, policies=5),
        make_ranking("TEXAS", 70, connections=15, policies=8),
        make_ranking("FLORIDA", 90, connections=5, policies=3),
    ]


class TestSortStateRankings:
    """Tests for sort_state_rankings."""

    def test_sort_by_score_default(self, rankings):
        assert [r.state for r in sort_state_rankings(rankings)] == ["FLORIDA", "CALIFORNIA", "TEXAS"]

    def test_sort_alphabetically(self, rankings):
        sorted_rankings = sort_state_rankings(rankings, "alpha")
        assert [r.state for r in sorted_rankings] == ["CALIFORNIA", "FLORIDA", "TEXAS"]

    def test_alpha_is_case_sensitive(self):
        """Upper-case names sort before lower-case ones."""
        mixed = [make_ranking("ohio", 50), make_ranking("Texas", 50), make_ranking("ALASKA", 50)]
        assert [r.state for r in sort_state_rankings(mixed, RankingSortBy.ALPHA)] == ["ALASKA", "Texas", "ohio"]

    def test_sort_by_connections(self, rankings):
        sorted_rankings = sort_state_rankings(rankings, "connections")
        assert sorted_rankings[0].state == "TEXAS"
        assert sorted_rankings[0].total_connections == 15

    def test_sort_by_policies(self, rankings):
        sorted_rankings = sort_state_rankings(rankings, RankingSortBy.POLICIES)
        assert sorted_rankings[0].state == "TEXAS"
        assert sorted_rankings[0].policies == 8

    def test_ties_keep_input_order(self):
        tied = [make_ranking("OHIO", 60), make_ranking("IOWA", 60)]
        assert [r.state for r in sort_state_rankings(tied)] == ["OHIO", "IOWA"]

    def test_input_not_reordered(self, rankings):
        sort_state_rankings(rankings, "alpha")
        assert [r.state for r in rankings] == ["CALIFORNIA", "TEXAS", "FLORIDA"]

    def test_unknown_key_rejected(self, rankings):
        with pytest.raises(ValueError):
            sort_state_rankings(rankings, "population")


class TestApplyRankingFilters:
    """Tests for apply_ranking_filters."""

    def test_score_bounds_inclusive(self, rankings):
        result = apply_ranking_filters(rankings, RankingFilters(min_score=70, max_score=85))
        assert [r.state for r in result] == ["CALIFORNIA", "TEXAS"]

    def test_has_data(self, rankings):
        result = apply_ranking_filters(rankings + [make_ranking("OHIO", 99)], RankingFilters(has_data=True))
        assert "OHIO" not in [r.state for r in result]

    def test_has_data_false_keeps_all(self, rankings):
        result = apply_ranking_filters(rankings + [make_ranking("OHIO", 99)], RankingFilters(has_data=False))
        assert len(result) == 4

    def test_filters_then_sorts(self, rankings):
        result = apply_ranking_filters(rankings, RankingFilters(sort_by=RankingSortBy.ALPHA, min_score=80))
        assert [r.state for r in result] == ["CALIFORNIA", "FLORIDA"]


class TestGetRankingForState:
    """Tests for get_ranking_for_state."""

    def test_case_insensitive(self, rankings):
        assert get_ranking_for_state(rankings, "texas").state == "TEXAS"

    def test_missing(self, rankings):
        assert get_ranking_for_state(rankings, "OHIO") is None


class TestGetRankingSummary:
    """Tests for get_ranking_summary."""

    def test_statistics(self):
        rankings = [make_ranking("A", 90, 3), make_ranking("B", 80), make_ranking("C", 70, 1)]
        summary = get_ranking_summary(rankings)

        assert summary.total_states == 3
        assert summary.average_score == 80
        assert summary.highest_score == 90
        assert summary.lowest_score == 70
        assert summary.states_with_data == 2

    def test_grade_distribution(self):
        rankings = [make_ranking("A", 90), make_ranking("B", 85), make_ranking("C", 82), make_ranking("D", 95)]
        summary = get_ranking_summary(rankings)
        assert summary.grade_distribution == {"A+": 2, "A": 1, "A-": 1}

    def test_grade_distribution_is_read_only(self):
        """The distribution cannot be edited through a returned summary."""
        summary = get_ranking_summary([make_ranking("A", 90)])
        with pytest.raises(TypeError):
            summary.grade_distribution["A"] = 1
        assert dict(summary.grade_distribution) == {"A+": 1}
        assert isinstance(summary.model_dump()["grade_distribution"], dict)

    def test_average_rounds_half_up(self):
        summary = get_ranking_summary([make_ranking("A", 70), make_ranking("B", 71)])
        assert summary.average_score == 71

    def test_empty(self):
        summary = get_ranking_summary([])
        assert summary == RankingSummary()
        assert summary.model_dump() == {
            "total_states": 0,
            "average_score": 0,
            "highest_score": 0,
            "lowest_score": 0,
            "states_with_data": 0,
            "grade_distribution": {},
        }

    def test_camel_case_dump(self):
        dumped = get_ranking_summary([make_ranking("A", 90)]).model_dump(by_alias=True)
        assert dumped["totalStates"] == 1
        assert dumped["gradeDistribution"] == {"A+": 1}


class TestSummarizeConnections:
    """Tests for summarize_connections."""

    def test_counts_and_averages(self):
        connections = [
            make_connection(connection_type=ConnectionType.POSITIVE, strength=8, evidence=9, relevance=7),
            make_connection(connection_type=ConnectionType.NEGATIVE, strength=4, evidence=None, relevance=None),
            make_connection(connection_type=ConnectionType.NEUTRAL, strength=6, evidence=7, relevance=9),
            make_connection(connection_type=ConnectionType.MIXED, strength=2, evidence=3, relevance=3),
        ]
        summary = summarize_connections(connections)

        assert summary.total_connections == 4
        assert summary.positive_connections == 1
        assert summary.negative_connections == 1
        assert summary.neutral_connections == 1
        assert summary.average_strength == 5
        assert summary.average_evidence == 6
        assert summary.average_relevance == 6

    def test_empty(self):
        summary = summarize_connections([])
        assert summary.total_connections == 0
        assert summary.average_strength == 0
