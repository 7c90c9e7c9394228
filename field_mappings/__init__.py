# ==============================================
# Insurance Field Mappings
# ==============================================
#
# Maps insurance audit data keys (e.g. "home.roof_type",
# "auto.vehicles[0].vin") to UI presentation metadata.
#
# Package Structure:
#
# field_mappings/
# ├── models/         # FieldDefinition, GroupDefinition
# ├── registry/       # Immutable registries, catalog loading, validation
# ├── resolution/     # Template / option / group resolution
# ├── data/           # Bundled insurance catalog (YAML)
# ├── paths.py        # Path patterns and nested-value reads
# ├── config.py       # Configuration management
# ├── logging_utils.py
# └── cli.py          # Command line entry point
#
# ==============================================

__version__ = "0.1.0"

from .models import FieldDefinition, GroupDefinition, InputType, Section
from .registry import Catalog, FieldRegistry, GroupRegistry, load_catalog
from .resolution import (
    FieldResolver,
    ResolutionDiagnostics,
    build_group_hierarchy,
    create_dynamic_groups,
    get_field_options,
    resolve_field,
)

__all__ = [
    "Catalog",
    "FieldDefinition",
    "FieldRegistry",
    "FieldResolver",
    "GroupDefinition",
    "GroupRegistry",
    "InputType",
    "ResolutionDiagnostics",
    "Section",
    "build_group_hierarchy",
    "create_dynamic_groups",
    "get_field_options",
    "load_catalog",
    "resolve_field",
]
