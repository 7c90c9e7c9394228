# ==============================================
# Template Resolver
# ==============================================
#
# PURPOSE:
#   Find the FieldDefinition that applies to a concrete data field key.
#
#   1. Exact match: the key is in the registry verbatim → return it as is.
#   2. Template match: scan the registry's "[*]" keys in insertion order;
#      the first pattern that matches wins. The copy returned carries the
#      concrete key, and a group id ending in "_template" is rewritten to
#      "_<index>" using the first bracketed integer of the key:
#        client.household_members[1].first_name
#          → group household_member_template → household_member_1
#   3. Nothing matched → None (the caller renders the raw key/value).
#
#   Catalog validation rejects two templates with the same signature,
#   so for a validated registry "first match" is the only match.
#
# ==============================================

from dataclasses import replace
from typing import Optional

from field_mappings.models import TEMPLATE_SUFFIX, FieldDefinition
from field_mappings.registry import FieldRegistry

from .diagnostics import FIELD_NOT_FOUND, ResolutionDiagnostics, emit


def get_field_config(field_key: str, registry: FieldRegistry) -> Optional[FieldDefinition]:
    """Exact lookup only."""
    return registry.get(field_key)


def instance_group_id(group: Optional[str], index: int) -> Optional[str]:
    if group and group.endswith(TEMPLATE_SUFFIX):
        return f"{group[: -len(TEMPLATE_SUFFIX)]}_{index}"
    return group


def resolve_field(
    data_field_key: str,
    registry: FieldRegistry,
    diagnostics: Optional[ResolutionDiagnostics] = None,
) -> Optional[FieldDefinition]:
    """
    Resolve display metadata for a data field key.

    Args:
        data_field_key: Concrete key, e.g. "auto.vehicles[0].vin"
        registry: Field registry to search
        diagnostics: Optional collector for the not-found event

    Returns:
        The matching definition (a materialized copy for template matches),
        or None when nothing applies.
    """
    exact = registry.get(data_field_key)
    if exact is not None:
        return exact

    for pattern, definition in registry.templates():
        if not pattern.matches(data_field_key):
            continue
        index = pattern.index_of(data_field_key)
        if index is None:
            index = 0
        return replace(
            definition,
            key=data_field_key,
            group=instance_group_id(definition.group, index),
        )

    emit(diagnostics, FIELD_NOT_FOUND, data_field_key)
    return None
