# ==============================================
# State Option Resolver
# ==============================================
#
# PURPOSE:
#   Effective dropdown choices for a field, given the data document.
#
#   1. Static `options` set → returned verbatim (they take precedence).
#   2. `state_specific_options` + `depends_on_state_from` set → read the
#      region code at that dotted path, upper-case it, and return the
#      matching list, or the "default" list when the code is absent,
#      unmapped, or not a string.
#   3. Otherwise → empty list.
#
#   Never raises. The region code is NOT trimmed or checked against the
#   state list here; use states.normalize_state_value() upstream for that.
#
# ==============================================

from typing import Any, List

from field_mappings.models import DEFAULT_STATE_KEY, DropdownOption, FieldDefinition
from field_mappings.paths import get_nested_value


def get_field_options(field: FieldDefinition, data: Any) -> List[DropdownOption]:
    """
    Args:
        field: Field definition (usually a dropdown / radio / multiselect)
        data: The insurance record being displayed (read only)

    Returns:
        A new list of options; mutating it does not touch the registry.
    """
    if field.options is not None:
        return list(field.options)

    state_options = field.state_specific_options
    if state_options and field.depends_on_state_from:
        raw = get_nested_value(data, field.depends_on_state_from)
        state_code = raw.upper() if isinstance(raw, str) else None

        if state_code and state_code in state_options:
            return list(state_options[state_code])

        return list(state_options.get(DEFAULT_STATE_KEY, ()))

    return []
