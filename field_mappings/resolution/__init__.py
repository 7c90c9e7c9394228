# ==============================================
# RESOLUTION
# ==============================================
#
# Pure lookups over the registries and a read-only data document.
#
# Modules:
# --------
# - template_resolver.py → resolve_field(): exact, then "[*]" template match
# - state_options.py     → get_field_options(): static / per-state / default
# - states.py            → US state options, normalize_state_value()
# - dynamic_groups.py    → create_dynamic_groups(): one group per array element
# - hierarchy.py         → build_group_hierarchy(): two-level sorted forest
# - sections.py          → section listings, build_navigation()
# - conditional.py       → is_visible(): evaluate a field's conditional rule
# - array_items.py       → claims_array sub-schemas, material percentages
# - diagnostics.py       → ResolutionDiagnostics (silent outcomes, counted)
# - resolver.py          → FieldResolver facade
#
# ==============================================

from .diagnostics import (
    FIELD_NOT_FOUND,
    ORPHANED_GROUP,
    UNRESOLVED_COLLECTION,
    ResolutionDiagnostics,
)
from .template_resolver import get_field_config, instance_group_id, resolve_field
from .state_options import get_field_options
from .states import US_STATE_OPTIONS, get_state_display_label, normalize_state_value
from .dynamic_groups import DEFAULT_COLLECTION_BINDINGS, CollectionBinding, create_dynamic_groups
from .hierarchy import GroupHierarchy, build_group_hierarchy
from .sections import NavigationTree, build_navigation, get_fields_by_section, get_fields_grouped
from .conditional import evaluate_condition, is_visible
from .array_items import get_array_item_schema, validate_material_percentages
from .resolver import FieldResolver

__all__ = [
    "DEFAULT_COLLECTION_BINDINGS",
    "FIELD_NOT_FOUND",
    "ORPHANED_GROUP",
    "UNRESOLVED_COLLECTION",
    "US_STATE_OPTIONS",
    "CollectionBinding",
    "FieldResolver",
    "GroupHierarchy",
    "NavigationTree",
    "ResolutionDiagnostics",
    "build_group_hierarchy",
    "build_navigation",
    "create_dynamic_groups",
    "evaluate_condition",
    "get_array_item_schema",
    "get_field_config",
    "get_field_options",
    "get_fields_by_section",
    "get_fields_grouped",
    "get_state_display_label",
    "instance_group_id",
    "is_visible",
    "normalize_state_value",
    "resolve_field",
    "validate_material_percentages",
]
