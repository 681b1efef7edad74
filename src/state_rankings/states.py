"""
US state name lookups.

The ranking engine groups connections by the exact state string it is given;
these helpers let callers normalize identifiers (abbreviations, mixed case)
to upper-case full names before ranking.
"""

from types import MappingProxyType
from typing import Mapping, Optional


US_STATES: Mapping[str, str] = MappingProxyType({
    'ALABAMA': 'AL', 'ALASKA': 'AK', 'ARIZONA': 'AZ', 'ARKANSAS': 'AR', 'CALIFORNIA': 'CA',
    'COLORADO': 'CO', 'CONNECTICUT': 'CT', 'DELAWARE': 'DE', 'FLORIDA': 'FL', 'GEORGIA': 'GA',
    'HAWAII': 'HI', 'IDAHO': 'ID', 'ILLINOIS': 'IL', 'INDIANA': 'IN', 'IOWA': 'IA',
    'KANSAS': 'KS', 'KENTUCKY': 'KY', 'LOUISIANA': 'LA', 'MAINE': 'ME', 'MARYLAND': 'MD',
    'MASSACHUSETTS': 'MA', 'MICHIGAN': 'MI', 'MINNESOTA': 'MN', 'MISSISSIPPI': 'MS', 'MISSOURI': 'MO',
    'MONTANA': 'MT', 'NEBRASKA': 'NE', 'NEVADA': 'NV', 'NEW HAMPSHIRE': 'NH', 'NEW JERSEY': 'NJ',
    'NEW MEXICO': 'NM', 'NEW YORK': 'NY', 'NORTH CAROLINA': 'NC', 'NORTH DAKOTA': 'ND', 'OHIO': 'OH',
    'OKLAHOMA': 'OK', 'OREGON': 'OR', 'PENNSYLVANIA': 'PA', 'RHODE ISLAND': 'RI', 'SOUTH CAROLINA': 'SC',
    'SOUTH DAKOTA': 'SD', 'TENNESSEE': 'TN', 'TEXAS': 'TX', 'UTAH': 'UT', 'VERMONT': 'VT',
    'VIRGINIA': 'VA', 'WASHINGTON': 'WA', 'WEST VIRGINIA': 'WV', 'WISCONSIN': 'WI', 'WYOMING': 'WY',
})

STATE_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {abbrev: name for name, abbrev in US_STATES.items()}
)


def normalize_state_name(value: str) -> str:
    """
    Normalize a state identifier to its upper-case full name.

    Accepts abbreviations ("ca") or full names in any case ("California").
    Unrecognized values are returned stripped and upper-cased.
    """
    upper = " ".join(value.split()).upper()
    if upper in STATE_ABBREVIATIONS:
        return STATE_ABBREVIATIONS[upper]
    return upper


def get_state_abbreviation(value: str) -> Optional[str]:
    """Two-letter abbreviation for a full name or abbreviation, None if unknown."""
    return US_STATES.get(normalize_state_name(value))


def is_valid_state(value: str) -> bool:
    return normalize_state_name(value) in US_STATES
