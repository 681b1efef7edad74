"""
JSON Exporter for State Workforce Rankings
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Sequence

from src.state_rankings.models import RankingSummary, StateRanking
from src.state_rankings.scoring.summary import get_ranking_summary

logger = logging.getLogger(__name__)


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder for datetime objects."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


def rankings_to_dict(
    rankings: Sequence[StateRanking],
    summary: Optional[RankingSummary] = None,
) -> dict:
    """
    Build the export payload with camelCase keys.

    The summary is computed from the rankings when not supplied.
    """
    if summary is None:
        summary = get_ranking_summary(rankings)

    return {
        'generated_at': datetime.now(),
        'summary': summary.model_dump(mode='json', by_alias=True),
        'rankings': [r.model_dump(mode='json', by_alias=True) for r in rankings],
    }


def export_rankings_to_json(
    rankings: Sequence[StateRanking],
    output_path: str,
    summary: Optional[RankingSummary] = None,
    indent: int = 2,
) -> str:
    """
    Export state rankings to a JSON file.

    Args:
        rankings: Rankings to export, in the order given
        output_path: Output file path
        summary: Optional precomputed summary
        indent: JSON indentation level

    Returns:
        Path to created file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = rankings_to_dict(rankings, summary)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, cls=DateTimeEncoder)

    logger.info(f"Exported {len(rankings)} rankings to {output_path}")
    return str(output_path)
