"""
Excel Exporter for State Workforce Rankings
"""

import logging
from pathlib import Path
from typing import Sequence

from src.state_rankings.models import StateRanking
from src.state_rankings.scoring.summary import get_ranking_summary

logger = logging.getLogger(__name__)


def export_rankings_to_excel(
    rankings: Sequence[StateRanking],
    output_path: str,
) -> str:
    """
    Export state rankings to an Excel file.

    Creates a workbook with:
    - Rankings (one row per state, in the order given)
    - Grade Distribution

    Args:
        rankings: Rankings to export
        output_path: Output file path

    Returns:
        Path to created file
    """
    try:
        import pandas as pd
    except ImportError:
        raise ImportError("pandas is required for Excel export")

    try:
        import openpyxl  # noqa: F401
    except ImportError:
        raise ImportError("openpyxl is required for Excel export")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows = []
    for rank, r in enumerate(rankings, 1):
        rows.append({
            'Rank': rank,
            'State': r.state,
            'Score': r.workforce_impact_score,
            'Grade': r.grade.letter,
            'Score Range': f"{r.score_range_low}-{r.score_range_high}",
            'Data Quality': r.data_quality_flag.value,
            'Confidence (%)': r.confidence_level,
            'Connections': r.total_connections,
            'Positive': r.positive_connections,
            'Negative': r.negative_connections,
            'Avg Strength': round(r.average_strength, 2),
            'Avg Relevance': round(r.average_workforce_relevance, 2),
            'Evidence Quality': round(r.evidence_quality_score, 2),
            'Strong Evidence': r.strong_evidence,
            'Moderate Evidence': r.moderate_evidence,
            'Weak Evidence': r.weak_evidence,
            'Policies': r.policies,
            'Research Papers': r.research_papers,
            'Baseline Score': r.baseline_workforce_score,
            'Policy Impact': r.policy_impact_score,
            'Has Baseline': r.has_baseline_data,
        })

    summary = get_ranking_summary(rankings)
    grade_rows = [
        {'Grade': letter, 'States': count}
        for letter, count in summary.grade_distribution.items()
    ]

    with pd.ExcelWriter(output_path, engine='openpyxl') as writer:
        pd.DataFrame(rows, columns=[
            'Rank', 'State', 'Score', 'Grade', 'Score Range', 'Data Quality',
            'Confidence (%)', 'Connections', 'Positive', 'Negative', 'Avg Strength',
            'Avg Relevance', 'Evidence Quality', 'Strong Evidence', 'Moderate Evidence',
            'Weak Evidence', 'Policies', 'Research Papers', 'Baseline Score',
            'Policy Impact', 'Has Baseline',
        ]).to_excel(writer, sheet_name='Rankings', index=False)
        pd.DataFrame(grade_rows, columns=['Grade', 'States']).to_excel(
            writer, sheet_name='Grade Distribution', index=False
        )

    logger.info(f"Exported {len(rankings)} rankings to {output_path}")
    return str(output_path)
