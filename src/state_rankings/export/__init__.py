"""
Export Utilities for State Workforce Rankings

Provides export functionality for:
- Excel reports
- JSON data
"""

from src.state_rankings.export.excel_exporter import export_rankings_to_excel
from src.state_rankings.export.json_exporter import export_rankings_to_json, rankings_to_dict

__all__ = [
    "export_rankings_to_excel",
    "export_rankings_to_json",
    "rankings_to_dict",
]
