# ==============================================
# Group Definition (Data Class)
# ==============================================
#
# PURPOSE:
#   A named, orderable container of fields. Groups nest one level
#   deep through `parent_group`. A template group (is_template=True)
#   is never rendered itself; it is materialized into one concrete
#   group per element of the repeated collection named by
#   `template_pattern` (e.g. "auto.vehicles[*]" → vehicle_0, vehicle_1).
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Optional

TEMPLATE_SUFFIX = "_template"


@dataclass(frozen=True)
class GroupDefinition:
    """Display container for fields; `order` is scoped to siblings."""

    id: str
    name: str
    order: float = 0
    description: Optional[str] = None
    default_open: bool = False

    # --- Hierarchy ---
    parent_group: Optional[str] = None

    # --- Templates ---
    is_template: bool = False
    template_pattern: Optional[str] = None  # e.g. "client.household_members[*]"
    dynamic_name_pattern: Optional[str] = None  # e.g. "Household Member {index + 1}"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id, "name": self.name, "order": self.order}
        if self.description is not None:
            out["description"] = self.description
        if self.default_open:
            out["default_open"] = True
        if self.parent_group is not None:
            out["parent_group"] = self.parent_group
        if self.is_template:
            out["is_template"] = True
        if self.template_pattern is not None:
            out["template_pattern"] = self.template_pattern
        if self.dynamic_name_pattern is not None:
            out["dynamic_name_pattern"] = self.dynamic_name_pattern
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupDefinition":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            order=data.get("order", 0),
            description=data.get("description"),
            default_open=bool(data.get("default_open", False)),
            parent_group=data.get("parent_group"),
            is_template=bool(data.get("is_template", False)),
            template_pattern=data.get("template_pattern"),
            dynamic_name_pattern=data.get("dynamic_name_pattern"),
        )
