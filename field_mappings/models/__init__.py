# ==============================================
# MODELS
# ==============================================
#
# Data classes describing the data dictionary itself:
# how a schema field is presented, and how fields are grouped.
#
# Modules:
# --------
# - field_definition.py  → FieldDefinition and its value types / enums
# - group_definition.py  → GroupDefinition (static, nested, template)
#
# ==============================================

from .field_definition import (
    DEFAULT_STATE_KEY,
    TEMPLATE_TOKEN,
    ConditionalRule,
    ConditionOperator,
    DropdownOption,
    FieldDefinition,
    InputType,
    Section,
    TextCasing,
    ValidationKind,
    ValidationRule,
)
from .group_definition import TEMPLATE_SUFFIX, GroupDefinition

__all__ = [
    "DEFAULT_STATE_KEY",
    "TEMPLATE_TOKEN",
    "TEMPLATE_SUFFIX",
    "ConditionalRule",
    "ConditionOperator",
    "DropdownOption",
    "FieldDefinition",
    "GroupDefinition",
    "InputType",
    "Section",
    "TextCasing",
    "ValidationKind",
    "ValidationRule",
]
