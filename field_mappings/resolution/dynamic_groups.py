# ==============================================
# Dynamic Group Materializer
# ==============================================
#
# PURPOSE:
#   Turn template groups into one concrete group per element of the
#   repeated collection they describe. Instances are rebuilt from the
#   data on every call and never cached, so adding or removing a
#   vehicle is reflected immediately.
#
# CLASSES:
# --------
# - CollectionBinding (dataclass)
#     pattern: str   → template_pattern it serves, e.g. "auto.vehicles[*]"
#     base: str      → id prefix of the instances, e.g. "vehicle"
#     path -> str    → where the array lives in the data ("auto.vehicles")
#
# FUNCTIONS:
# ----------
# - create_dynamic_groups(template_groups, data, bindings=None, diagnostics=None)
#     For element i of a bound collection:
#       id          = "<base>_<i>"
#       name        = dynamic_name_pattern with {index + 1} / {index} filled in
#       order       = template.order + i
#       parent_group, default_open copied from the template
#       description = "Information for <name, lower-cased>"
#     Missing / empty / non-list collection → no groups.
#     Pattern without a binding → no groups (unresolved_collection event).
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from field_mappings.models import TEMPLATE_TOKEN, GroupDefinition
from field_mappings.paths import get_nested_value

from .diagnostics import UNRESOLVED_COLLECTION, ResolutionDiagnostics, emit


@dataclass(frozen=True)
class CollectionBinding:
    pattern: str
    base: str

    @property
    def path(self) -> str:
        if self.pattern.endswith(TEMPLATE_TOKEN):
            return self.pattern[: -len(TEMPLATE_TOKEN)]
        return self.pattern


DEFAULT_COLLECTION_BINDINGS: Dict[str, CollectionBinding] = {
    b.pattern: b
    for b in (
        CollectionBinding("client.household_members[*]", "household_member"),
        CollectionBinding("home.additional_interests[*]", "additional_interests"),
        CollectionBinding("auto.vehicles[*]", "vehicle"),
    )
}


def format_instance_name(template: GroupDefinition, index: int) -> str:
    pattern = template.dynamic_name_pattern
    if not pattern:
        return f"{template.name} {index + 1}"
    return pattern.replace("{index + 1}", str(index + 1)).replace("{index}", str(index))


def _materialize(template: GroupDefinition, binding: CollectionBinding, items: list) -> List[GroupDefinition]:
    instances = []
    for index in range(len(items)):
        name = format_instance_name(template, index)
        instances.append(GroupDefinition(
            id=f"{binding.base}_{index}",
            name=name,
            order=template.order + index,
            description=f"Information for {name.lower()}",
            default_open=template.default_open,
            parent_group=template.parent_group,
        ))
    return instances


def create_dynamic_groups(
    template_groups: Iterable[GroupDefinition],
    data: Any,
    bindings: Optional[Dict[str, CollectionBinding]] = None,
    diagnostics: Optional[ResolutionDiagnostics] = None,
) -> List[GroupDefinition]:
    """
    Materialize concrete groups from template groups.

    Args:
        template_groups: Groups to expand; non-template groups are skipped
        data: The insurance record (read only)
        bindings: template_pattern → CollectionBinding; defaults to the
                  household member / additional interest / vehicle bindings
        diagnostics: Optional collector for unresolved patterns

    Returns:
        Concrete groups, templates in input order, elements in index order.
    """
    table = DEFAULT_COLLECTION_BINDINGS if bindings is None else bindings
    dynamic_groups: List[GroupDefinition] = []

    for template in template_groups:
        if not template.is_template or not template.template_pattern:
            continue

        binding = table.get(template.template_pattern)
        if binding is None:
            emit(diagnostics, UNRESOLVED_COLLECTION, template.template_pattern)
            continue

        items = get_nested_value(data, binding.path)
        if not isinstance(items, (list, tuple)):
            continue

        dynamic_groups.extend(_materialize(template, binding, list(items)))

    return dynamic_groups
