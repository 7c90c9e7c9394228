# ==============================================
# Group Hierarchy Builder
# ==============================================
#
# PURPOSE:
#   Assemble the two-level navigation forest from static groups plus
#   materialized dynamic groups.
#
#   - No parent_group            → top level (children bucket created, even if empty)
#   - parent_group is top level  → appended to that bucket
#   - parent_group unknown       → dropped from the output (orphaned_group event)
#
#   Top level and every bucket are sorted by `order` with a stable sort,
#   so equal orders keep their input order.
#
#   The builder does not look at is_template: the caller decides whether
#   template groups are part of `static_groups` (build_navigation leaves
#   them out).
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from field_mappings.models import GroupDefinition

from .diagnostics import ORPHANED_GROUP, ResolutionDiagnostics, emit


@dataclass
class GroupHierarchy:
    top_level: List[GroupDefinition] = field(default_factory=list)
    children_by_parent: Dict[str, List[GroupDefinition]] = field(default_factory=dict)

    def children_of(self, group_id: str) -> List[GroupDefinition]:
        return list(self.children_by_parent.get(group_id, []))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top_level": [g.to_dict() for g in self.top_level],
            "children_by_parent": {
                parent: [g.to_dict() for g in children]
                for parent, children in self.children_by_parent.items()
            },
        }


def by_order(group: GroupDefinition) -> float:
    return group.order


def build_group_hierarchy(
    static_groups: Union[Mapping[str, GroupDefinition], Iterable[GroupDefinition]],
    dynamic_groups: Iterable[GroupDefinition] = (),
    diagnostics: Optional[ResolutionDiagnostics] = None,
) -> GroupHierarchy:
    """
    Args:
        static_groups: Groups from the registry (a mapping's values are used)
        dynamic_groups: Output of create_dynamic_groups()
        diagnostics: Optional collector for orphaned groups

    Returns:
        GroupHierarchy with sorted top level and children buckets
    """
    if isinstance(static_groups, Mapping):
        static_groups = static_groups.values()
    all_groups = [*static_groups, *dynamic_groups]

    top_level: List[GroupDefinition] = []
    children: Dict[str, List[GroupDefinition]] = {}

    for group in all_groups:
        if not group.parent_group:
            top_level.append(group)
            children[group.id] = []

    for group in all_groups:
        if not group.parent_group:
            continue
        bucket = children.get(group.parent_group)
        if bucket is None:
            emit(diagnostics, ORPHANED_GROUP, group.id)
            continue
        bucket.append(group)

    top_level.sort(key=by_order)
    for bucket in children.values():
        bucket.sort(key=by_order)

    return GroupHierarchy(top_level=top_level, children_by_parent=children)
