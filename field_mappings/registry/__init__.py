# ==============================================
# REGISTRY
# ==============================================
#
# Immutable lookup tables for the data dictionary, plus loading
# them from disk and checking their invariants once at load time.
#
# Modules:
# --------
# - field_registry.py  → FieldRegistry, GroupRegistry
# - validation.py      → validate_catalog(), CatalogValidationError
# - loader.py          → load_catalog(), Catalog
#
# ==============================================

from .field_registry import FieldRegistry, GroupRegistry
from .validation import (
    CatalogValidationError,
    ValidationIssue,
    ValidationReport,
    validate_catalog,
)
from .loader import Catalog, load_catalog, load_default_catalog, parse_array_schemas

__all__ = [
    "Catalog",
    "CatalogValidationError",
    "FieldRegistry",
    "GroupRegistry",
    "ValidationIssue",
    "ValidationReport",
    "load_catalog",
    "load_default_catalog",
    "parse_array_schemas",
    "validate_catalog",
]
