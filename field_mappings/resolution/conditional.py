# ==============================================
# Conditional Visibility
# ==============================================
#
# PURPOSE:
#   Decide whether a field is shown for a given record, from the
#   field's `hidden` flag and its optional ConditionalRule.
#
# FUNCTIONS:
# ----------
# - evaluate_condition(rule, data) -> bool
#     No rule → True. The value at rule.depends_on is read with
#     get_nested_value(); a missing value compares as None.
#     equals / not_equals  → plain equality
#     contains             → membership for lists / dicts, substring otherwise
#     greater_than / less_than → numeric when both sides are numbers,
#                                string comparison otherwise
#
# - is_visible(field, data) -> bool
#     hidden fields are never visible.
#
# - coerce_number(x) -> float | None
#     Lenient number parsing shared with the composite-input helpers.
#
# ==============================================

from typing import Any, Optional

from field_mappings.models import ConditionalRule, ConditionOperator, FieldDefinition
from field_mappings.paths import get_nested_value


def coerce_number(x: Any) -> Optional[float]:
    try:
        if isinstance(x, bool):
            return float(int(x))
        if isinstance(x, (int, float)):
            return float(x)
        if isinstance(x, str) and x.strip() != "":
            return float(x.strip())
    except (ValueError, OverflowError):
        pass
    return None


def _contains(lhs: Any, rhs: Any) -> bool:
    if lhs is None:
        return False
    if isinstance(lhs, (list, tuple, set)):
        return rhs in lhs
    if isinstance(lhs, dict):
        return rhs in lhs.keys()
    return str(rhs) in str(lhs)


def _compare(lhs: Any, op: ConditionOperator, rhs: Any) -> bool:
    if op is ConditionOperator.EQUALS:
        return lhs == rhs
    if op is ConditionOperator.NOT_EQUALS:
        return lhs != rhs
    if op is ConditionOperator.CONTAINS:
        return _contains(lhs, rhs)

    # Ordering: numeric when both sides are numeric, string compare otherwise
    ln = coerce_number(lhs)
    rn = coerce_number(rhs)
    if ln is not None and rn is not None:
        return ln > rn if op is ConditionOperator.GREATER_THAN else ln < rn
    if lhs is None:
        return False
    ls, rs = str(lhs), "" if rhs is None else str(rhs)
    return ls > rs if op is ConditionOperator.GREATER_THAN else ls < rs


def evaluate_condition(rule: Optional[ConditionalRule], data: Any) -> bool:
    """
    Evaluate a visibility rule against the data document.

    A missing rule means visible. A missing target value is compared as
    None, so `equals` is False and `not_equals` is True.
    """
    if rule is None:
        return True
    lhs = get_nested_value(data, rule.depends_on)
    return _compare(lhs, rule.when, rule.value)


def is_visible(field: FieldDefinition, data: Any) -> bool:
    if field.hidden:
        return False
    return evaluate_condition(field.conditional, data)
