# ==============================================
# Field & Group Registries
# ==============================================
#
# PURPOSE:
#   Immutable, ordered lookup tables handed to every resolver.
#   They are built once when the catalog is loaded and passed by
#   reference; nothing in the package keeps a global copy.
#
# CLASSES:
# --------
# - FieldRegistry(Mapping[str, FieldDefinition])
#     Keyed by field key, insertion order preserved.
#     - templates() -> list[(PathPattern, FieldDefinition)]
#         Compiled matchers of every key carrying "[*]", in insertion order.
#     - for_section(section) -> list[FieldDefinition]
#
# - GroupRegistry(Mapping[str, GroupDefinition])
#     Keyed by group id, insertion order preserved.
#     - templates() -> list[GroupDefinition]       (is_template=True)
#     - static_groups() -> list[GroupDefinition]   (everything else)
#
# Both raise ValueError on duplicate keys / ids.
#
# ==============================================

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from field_mappings.models import FieldDefinition, GroupDefinition, Section
from field_mappings.paths import PathPattern, compile_pattern


class FieldRegistry(Mapping):
    """Read-only mapping of field key → FieldDefinition."""

    def __init__(self, definitions: Iterable[Union[FieldDefinition, Dict[str, Any]]] = ()):
        table: Dict[str, FieldDefinition] = {}
        for item in definitions:
            definition = item if isinstance(item, FieldDefinition) else FieldDefinition.from_dict(item)
            if definition.key in table:
                raise ValueError(f"Duplicate field key '{definition.key}'")
            table[definition.key] = definition

        self._table = MappingProxyType(table)
        self._templates: Tuple[Tuple[PathPattern, FieldDefinition], ...] = tuple(
            (compile_pattern(key), definition)
            for key, definition in table.items()
            if definition.is_template
        )

    def __getitem__(self, key: str) -> FieldDefinition:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"FieldRegistry({len(self)} fields, {len(self._templates)} templates)"

    def templates(self) -> List[Tuple[PathPattern, FieldDefinition]]:
        return list(self._templates)

    def for_section(self, section: Union[Section, str]) -> List[FieldDefinition]:
        wanted = Section(section)
        return [d for d in self._table.values() if d.section is wanted]


class GroupRegistry(Mapping):
    """Read-only mapping of group id → GroupDefinition."""

    def __init__(self, groups: Iterable[Union[GroupDefinition, Dict[str, Any]]] = ()):
        table: Dict[str, GroupDefinition] = {}
        for item in groups:
            group = item if isinstance(item, GroupDefinition) else GroupDefinition.from_dict(item)
            if group.id in table:
                raise ValueError(f"Duplicate group id '{group.id}'")
            table[group.id] = group
        self._table = MappingProxyType(table)

    def __getitem__(self, group_id: str) -> GroupDefinition:
        return self._table[group_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"GroupRegistry({len(self)} groups)"

    def templates(self) -> List[GroupDefinition]:
        return [g for g in self._table.values() if g.is_template]

    def static_groups(self) -> List[GroupDefinition]:
        return [g for g in self._table.values() if not g.is_template]
