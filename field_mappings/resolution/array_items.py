# ==============================================
# Composite Input Helpers
# ==============================================
#
# PURPOSE:
#   Support for the two input types whose value is a list of objects.
#
#   - claims_array: each element is edited with a small sub-field
#     schema (claims, prior carriers, violations/claims).
#   - material_percentage: list of {material, percentage}; the total
#     must not exceed 100 and a material may not repeat.
#
# FUNCTIONS:
# ----------
# - get_array_item_schema(field_key, schemas) -> mapping | None
# - validate_material_percentages(materials) -> (bool, message | None)
#     Never raises: non-object entries are skipped and a percentage
#     that is not a number counts as 0.
#
# ==============================================

from typing import Any, Dict, List, Mapping, Optional, Tuple

from field_mappings.models import FieldDefinition

from .conditional import coerce_number

CLAIMS_SCHEMA = "claims"
PRIOR_CARRIERS_SCHEMA = "prior_carriers"
VIOLATIONS_CLAIMS_SCHEMA = "violations_claims"


def get_array_item_schema(
    field_key: str,
    schemas: Mapping[str, Mapping[str, FieldDefinition]],
) -> Optional[Mapping[str, FieldDefinition]]:
    """Pick the sub-field schema for a claims_array field key, or None."""
    key = field_key or ""
    if VIOLATIONS_CLAIMS_SCHEMA in key:
        return schemas.get(VIOLATIONS_CLAIMS_SCHEMA)
    if PRIOR_CARRIERS_SCHEMA in key:
        return schemas.get(PRIOR_CARRIERS_SCHEMA)
    if CLAIMS_SCHEMA in key:
        return schemas.get(CLAIMS_SCHEMA)
    return None


def validate_material_percentages(materials: Optional[List[Dict[str, Any]]]) -> Tuple[bool, Optional[str]]:
    """
    Returns:
        (is_valid, message) - message is None when valid
    """
    if not materials or not isinstance(materials, (list, tuple)):
        return True, None

    entries = [item for item in materials if isinstance(item, dict)]
    total = sum(coerce_number(item.get("percentage")) or 0 for item in entries)
    if total > 100:
        return False, "Total percentage cannot exceed 100%"

    seen: List[Any] = []
    for item in entries:
        name = item.get("material")
        if name in seen:
            return False, "Cannot have duplicate materials"
        seen.append(name)

    return True, None
