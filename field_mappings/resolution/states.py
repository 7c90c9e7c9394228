# ==============================================
# US States
# ==============================================
#
# PURPOSE:
#   Region codes used by state-dependent dropdowns.
#
# - US_STATE_OPTIONS            → 50 states + DC as DropdownOptions
# - normalize_state_value(v)    → caller-side clean-up of raw API values
#                                 ("fl", " Florida ", "FL" → "FL")
# - get_state_display_label(v)  → "Florida" for "FL"
#
#   The option resolver itself only upper-cases; it does not call these.
#
# ==============================================

from typing import Dict, Optional, Tuple

from field_mappings.models import DropdownOption

_STATES: Tuple[Tuple[str, str], ...] = (
    ("AL", "Alabama"), ("AK", "Alaska"), ("AZ", "Arizona"), ("AR", "Arkansas"),
    ("CA", "California"), ("CO", "Colorado"), ("CT", "Connecticut"), ("DE", "Delaware"),
    ("DC", "District of Columbia"), ("FL", "Florida"), ("GA", "Georgia"), ("HI", "Hawaii"),
    ("ID", "Idaho"), ("IL", "Illinois"), ("IN", "Indiana"), ("IA", "Iowa"),
    ("KS", "Kansas"), ("KY", "Kentucky"), ("LA", "Louisiana"), ("ME", "Maine"),
    ("MD", "Maryland"), ("MA", "Massachusetts"), ("MI", "Michigan"), ("MN", "Minnesota"),
    ("MS", "Mississippi"), ("MO", "Missouri"), ("MT", "Montana"), ("NE", "Nebraska"),
    ("NV", "Nevada"), ("NH", "New Hampshire"), ("NJ", "New Jersey"), ("NM", "New Mexico"),
    ("NY", "New York"), ("NC", "North Carolina"), ("ND", "North Dakota"), ("OH", "Ohio"),
    ("OK", "Oklahoma"), ("OR", "Oregon"), ("PA", "Pennsylvania"), ("RI", "Rhode Island"),
    ("SC", "South Carolina"), ("SD", "South Dakota"), ("TN", "Tennessee"), ("TX", "Texas"),
    ("UT", "Utah"), ("VT", "Vermont"), ("VA", "Virginia"), ("WA", "Washington"),
    ("WV", "West Virginia"), ("WI", "Wisconsin"), ("WY", "Wyoming"),
)

US_STATE_OPTIONS: Tuple[DropdownOption, ...] = tuple(
    DropdownOption(value=code, label=name) for code, name in _STATES
)

_NAME_BY_CODE: Dict[str, str] = dict(_STATES)
_CODE_BY_NAME: Dict[str, str] = {name.lower(): code for code, name in _STATES}


def normalize_state_value(state_value: Optional[str]) -> Optional[str]:
    """
    Map a raw state value to its 2-letter code.

    "fl" / "FL" / "Florida" / " florida " -> "FL"; unknown or empty -> None.
    """
    if not state_value or not isinstance(state_value, str):
        return None

    normalized_input = state_value.strip().lower()

    if len(normalized_input) == 2 and normalized_input.upper() in _NAME_BY_CODE:
        return normalized_input.upper()

    return _CODE_BY_NAME.get(normalized_input)


def get_state_display_label(state_value: Optional[str]) -> str:
    """Full state name for a code or name; the raw value when unrecognised; "" when empty."""
    if not state_value:
        return ""
    code = normalize_state_value(state_value)
    if code is None:
        return str(state_value)
    return _NAME_BY_CODE[code]
