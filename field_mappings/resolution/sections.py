# ==============================================
# Section & Navigation Queries
# ==============================================
#
# FUNCTIONS:
# ----------
# - get_fields_by_section(section, fields, groups) -> list[FieldDefinition]
#     Fields of one section ordered by their group's order (999 when the
#     group is unknown or unset), then by the field's own order.
#
# - get_fields_grouped(section, fields, groups) -> dict[group_id, list]
#     Same ordering, bucketed by group id ("ungrouped" when none).
#
# - build_navigation(groups, data, ...) -> NavigationTree
#     Materialize template groups against the data, then build the
#     hierarchy from the non-template static groups + dynamic groups.
#     Static groups whose parent is a template are repeated under every
#     instance of that template (vehicle_details under vehicle_0, vehicle_1).
#     Template groups themselves never appear in the tree.
#
# ==============================================

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from field_mappings.models import FieldDefinition, GroupDefinition, Section
from field_mappings.registry import FieldRegistry, GroupRegistry

from .diagnostics import ResolutionDiagnostics
from .dynamic_groups import CollectionBinding, create_dynamic_groups
from .hierarchy import GroupHierarchy, by_order, build_group_hierarchy

UNGROUPED = "ungrouped"
UNKNOWN_GROUP_ORDER = 999


@dataclass
class NavigationTree(GroupHierarchy):
    dynamic_groups: List[GroupDefinition] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out["dynamic_groups"] = [g.to_dict() for g in self.dynamic_groups]
        return out


def get_fields_by_section(
    section: Union[Section, str],
    fields: FieldRegistry,
    groups: GroupRegistry,
) -> List[FieldDefinition]:
    def sort_key(definition: FieldDefinition):
        group = groups.get(definition.group) if definition.group else None
        group_order = group.order if group is not None else UNKNOWN_GROUP_ORDER
        return (group_order, definition.order)

    return sorted(fields.for_section(section), key=sort_key)


def get_fields_grouped(
    section: Union[Section, str],
    fields: FieldRegistry,
    groups: GroupRegistry,
) -> Dict[str, List[FieldDefinition]]:
    grouped: Dict[str, List[FieldDefinition]] = {}
    for definition in get_fields_by_section(section, fields, groups):
        grouped.setdefault(definition.group or UNGROUPED, []).append(definition)
    return grouped


def _template_children(groups: GroupRegistry) -> Tuple[List[GroupDefinition], Dict[str, List[GroupDefinition]]]:
    """Split static groups into those that stand alone and those nested under a template."""
    template_ids = {g.id for g in groups.templates()}
    standalone: List[GroupDefinition] = []
    nested: Dict[str, List[GroupDefinition]] = {}
    for group in groups.static_groups():
        if group.parent_group in template_ids:
            nested.setdefault(group.parent_group, []).append(group)
        else:
            standalone.append(group)
    return standalone, nested


def build_navigation(
    groups: GroupRegistry,
    data: Any,
    bindings: Optional[Dict[str, CollectionBinding]] = None,
    diagnostics: Optional[ResolutionDiagnostics] = None,
) -> NavigationTree:
    standalone, nested = _template_children(groups)

    dynamic_groups: List[GroupDefinition] = []
    instances_by_template: Dict[str, List[GroupDefinition]] = {}
    for template in groups.templates():
        instances = create_dynamic_groups([template], data, bindings, diagnostics)
        instances_by_template[template.id] = instances
        dynamic_groups.extend(instances)

    hierarchy = build_group_hierarchy(standalone, dynamic_groups, diagnostics)

    # Every instance gets its own copy of the template's sub-sections
    for template_id, children in nested.items():
        for instance in instances_by_template.get(template_id, []):
            bucket = hierarchy.children_by_parent.get(instance.id)
            if bucket is None:
                continue
            bucket.extend(replace(child, parent_group=instance.id) for child in children)
            bucket.sort(key=by_order)

    return NavigationTree(
        top_level=hierarchy.top_level,
        children_by_parent=hierarchy.children_by_parent,
        dynamic_groups=dynamic_groups,
    )
