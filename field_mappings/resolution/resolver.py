# ==============================================
# FieldResolver
# ==============================================
#
# PURPOSE:
#   One object a rendering layer can hold: it carries the loaded
#   catalog and a diagnostics collector, and forwards to the pure
#   resolver functions. It keeps no other state, so calling any method
#   twice with the same data gives equal results.
#
# USAGE:
# ------
#   from field_mappings import FieldResolver, load_catalog
#
#   resolver = FieldResolver(load_catalog())
#   definition = resolver.resolve("auto.vehicles[0].year")
#   options = resolver.options(definition, audit_record)
#   tree = resolver.navigation(audit_record)
#
# ==============================================

from typing import Any, Dict, List, Mapping, Optional, Union

from field_mappings.models import DropdownOption, FieldDefinition, Section
from field_mappings.registry import Catalog

from .array_items import get_array_item_schema
from .conditional import is_visible
from .diagnostics import ResolutionDiagnostics
from .dynamic_groups import CollectionBinding
from .sections import NavigationTree, build_navigation, get_fields_by_section, get_fields_grouped
from .state_options import get_field_options
from .template_resolver import resolve_field


class FieldResolver:
    """Facade over the resolution functions for one catalog."""

    def __init__(
        self,
        catalog: Catalog,
        bindings: Optional[Dict[str, CollectionBinding]] = None,
        diagnostics: Optional[ResolutionDiagnostics] = None,
    ):
        self.catalog = catalog
        self.bindings = bindings
        self.diagnostics = diagnostics if diagnostics is not None else ResolutionDiagnostics()

    def resolve(self, data_field_key: str) -> Optional[FieldDefinition]:
        return resolve_field(data_field_key, self.catalog.fields, self.diagnostics)

    def options(self, field: Union[FieldDefinition, str], data: Any) -> List[DropdownOption]:
        """Accepts a definition or a data field key (resolved first; unknown key → [])."""
        definition = self.resolve(field) if isinstance(field, str) else field
        if definition is None:
            return []
        return get_field_options(definition, data)

    def is_visible(self, field: Union[FieldDefinition, str], data: Any) -> bool:
        definition = self.resolve(field) if isinstance(field, str) else field
        if definition is None:
            return True
        return is_visible(definition, data)

    def navigation(self, data: Any) -> NavigationTree:
        return build_navigation(self.catalog.groups, data, self.bindings, self.diagnostics)

    def fields_by_section(self, section: Union[Section, str]) -> List[FieldDefinition]:
        return get_fields_by_section(section, self.catalog.fields, self.catalog.groups)

    def fields_grouped(self, section: Union[Section, str]) -> Dict[str, List[FieldDefinition]]:
        return get_fields_grouped(section, self.catalog.fields, self.catalog.groups)

    def array_item_schema(self, field_key: str) -> Optional[Mapping[str, FieldDefinition]]:
        return get_array_item_schema(field_key, self.catalog.array_schemas)
