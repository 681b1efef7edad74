"""
Rank US states by workforce impact from exported connection data.

Reads JSON exports of policy-research connections, policies and (optionally)
baseline workforce statistics, ranks every state, prints the ranking table
and summary, and writes JSON/Excel reports. Reports go to the configured
rankings output directory unless explicit paths are given.
"""

import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.state_rankings.export import export_rankings_to_excel, export_rankings_to_json
from src.state_rankings.loader import load_inputs, normalize_inputs
from src.state_rankings.models import RankingSortBy, StateRanking
from src.state_rankings.scoring import (
    StateRankingEngine,
    get_ranking_summary,
    sort_state_rankings,
)
from src.utils.config import get_settings
from src.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

JSON_REPORT_NAME = "state_rankings.json"
EXCEL_REPORT_NAME = "state_rankings.xlsx"


def format_rankings_table(rankings: List[StateRanking]) -> str:
    """Plain-text table of rankings."""
    lines = [
        f"{'Rank':>4}  {'State':<16} {'Score':>5}  {'Grade':<5} {'Range':<9} {'Conn':>4} {'Papers':>6}  Data",
        "-" * 72,
    ]
    for rank, r in enumerate(rankings, 1):
        lines.append(
            f"{rank:>4}  {r.state:<16} {r.workforce_impact_score:>5}  {r.grade.letter:<5} "
            f"{r.score_range_low:>3}-{r.score_range_high:<5} {r.total_connections:>4} "
            f"{r.research_papers:>6}  {r.data_quality_flag.value}"
        )
    return "\n".join(lines)


def rank_states(
    connections_path: str,
    policies_path: str,
    baseline_path: Optional[str] = None,
    sort_by: Optional[str] = None,
    normalize_states: Optional[bool] = None,
    json_output: Optional[str] = None,
    excel_output: Optional[str] = None,
    export: bool = True,
) -> List[StateRanking]:
    """
    Load inputs, rank states, report and export.

    Unset options fall back to Settings: sort key, state normalization, and
    report paths (under Settings.output_dir). With export=False nothing is written.
    """
    settings = get_settings()

    if normalize_states is None:
        normalize_states = settings.normalize_state_names

    inputs = load_inputs(connections_path, policies_path, baseline_path)
    if normalize_states:
        inputs = normalize_inputs(inputs)

    engine = StateRankingEngine()
    rankings = engine.calculate_rankings(inputs.connections, inputs.policies, inputs.baseline_data)
    rankings = sort_state_rankings(rankings, sort_by or settings.default_sort_by)

    summary = get_ranking_summary(rankings)

    print(format_rankings_table(rankings))
    print()
    print(f"States ranked: {summary.total_states} ({summary.states_with_data} with connections)")
    print(f"Average score: {summary.average_score} (high {summary.highest_score}, low {summary.lowest_score})")
    print("Grades: " + ", ".join(f"{k}={v}" for k, v in summary.grade_distribution.items()))

    if export:
        export_rankings_to_json(rankings, json_output or str(settings.output_dir / JSON_REPORT_NAME), summary=summary)
        export_rankings_to_excel(rankings, excel_output or str(settings.output_dir / EXCEL_REPORT_NAME))
    else:
        logger.info("Export disabled; no reports written")

    return rankings


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description='Rank states by workforce impact')
    parser.add_argument('--connections', required=True, help='JSON file of policy-research connections')
    parser.add_argument('--policies', required=True, help='JSON file of policies')
    parser.add_argument('--baseline', help='JSON file of baseline workforce records')
    parser.add_argument('--sort-by', choices=[s.value for s in RankingSortBy], help='Sort key (default from settings)')
    parser.add_argument('--normalize-states', action='store_true', default=None,
                        help='Normalize state names to upper-case full names before ranking')
    parser.add_argument('--output', help=f'Rankings JSON path (default <output dir>/{JSON_REPORT_NAME})')
    parser.add_argument('--excel', help=f'Rankings workbook path (default <output dir>/{EXCEL_REPORT_NAME})')
    parser.add_argument('--no-export', action='store_true', help='Print the rankings without writing reports')
    parser.add_argument('--log-level', help='Logging level (default from settings)')
    args = parser.parse_args()

    setup_logging(args.log_level)

    try:
        rank_states(
            connections_path=args.connections,
            policies_path=args.policies,
            baseline_path=args.baseline,
            sort_by=args.sort_by,
            normalize_states=args.normalize_states,
            json_output=args.output,
            excel_output=args.excel,
            export=not args.no_export,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Ranking failed: {e}")
        sys.exit(1)
