# ==============================================
# Catalog Loader
# ==============================================
#
# PURPOSE:
#   Read the data dictionary (groups, fields, array item schemas)
#   from disk once at start-up and return immutable registries.
#
# FILES (in the catalog directory):
# ---------------------------------
#   groups.yaml          → {"groups": [GroupDefinition, ...]}
#   fields.yaml          → {"fields": [FieldDefinition, ...]}
#   array_schemas.yaml   → {"<schema name>": {"<sub field>": {...}}}   (optional)
#
#   A ".json" file with the same stem is used when no ".yaml" exists.
#
# CLASSES:
# --------
# - Catalog (dataclass)
#     fields: FieldRegistry
#     groups: GroupRegistry
#     array_schemas: dict[str, dict[str, FieldDefinition]]
#
# FUNCTIONS:
# ----------
# - load_catalog(directory=None, validate=True) -> Catalog
#     Validation errors raise CatalogValidationError, warnings are logged.
#
# - load_default_catalog() -> Catalog
#     Uses get_config().catalog_dir.
#
# ==============================================

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from field_mappings.config import get_config
from field_mappings.logging_utils import create_logger
from field_mappings.models import FieldDefinition

from .field_registry import FieldRegistry, GroupRegistry
from .validation import ValidationReport, validate_catalog

logger = create_logger(__name__)

GROUPS_STEM = "groups"
FIELDS_STEM = "fields"
ARRAY_SCHEMAS_STEM = "array_schemas"


@dataclass(frozen=True)
class Catalog:
    fields: FieldRegistry
    groups: GroupRegistry
    array_schemas: Mapping[str, Mapping[str, FieldDefinition]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def validate(self) -> ValidationReport:
        return validate_catalog(self.fields, self.groups)


def _find_file(directory: Path, stem: str) -> Optional[Path]:
    for suffix in (".yaml", ".yml", ".json"):
        candidate = directory / f"{stem}{suffix}"
        if candidate.exists():
            return candidate
    return None


def _read_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def _records(document: Any, key: str, path: Path) -> list:
    """Accept either a bare list or a mapping holding the list under `key`."""
    if document is None:
        return []
    if isinstance(document, list):
        return document
    if isinstance(document, dict) and isinstance(document.get(key, []), list):
        return document.get(key, [])
    raise ValueError(f"{path}: expected a list or a mapping with a '{key}' list")


def parse_array_schemas(document: Any) -> Mapping[str, Mapping[str, FieldDefinition]]:
    """Sub-field name becomes the definition key (e.g. 'amount' in the claims schema)."""
    schemas: Dict[str, Mapping[str, FieldDefinition]] = {}
    for schema_name, sub_fields in (document or {}).items():
        parsed = {
            name: FieldDefinition.from_dict({**spec, "key": name})
            for name, spec in (sub_fields or {}).items()
        }
        schemas[schema_name] = MappingProxyType(parsed)
    return MappingProxyType(schemas)


def load_catalog(directory: Optional[Union[str, Path]] = None, validate: bool = True) -> Catalog:
    """
    Load a catalog directory into registries.

    Args:
        directory: Catalog directory; defaults to the configured one
        validate: Run validate_catalog() and raise on errors

    Returns:
        Catalog with read-only registries

    Raises:
        FileNotFoundError: groups or fields file is missing
        CatalogValidationError: validation found errors
    """
    config = get_config()
    base = Path(directory) if directory is not None else Path(config.catalog_dir)

    groups_path = _find_file(base, GROUPS_STEM)
    fields_path = _find_file(base, FIELDS_STEM)
    if groups_path is None:
        raise FileNotFoundError(f"No {GROUPS_STEM}.yaml or {GROUPS_STEM}.json in {base}")
    if fields_path is None:
        raise FileNotFoundError(f"No {FIELDS_STEM}.yaml or {FIELDS_STEM}.json in {base}")

    groups = GroupRegistry(_records(_read_document(groups_path), "groups", groups_path))
    fields = FieldRegistry(_records(_read_document(fields_path), "fields", fields_path))

    schemas_path = _find_file(base, ARRAY_SCHEMAS_STEM)
    array_schemas = parse_array_schemas(_read_document(schemas_path)) if schemas_path else MappingProxyType({})

    catalog = Catalog(fields=fields, groups=groups, array_schemas=array_schemas)
    logger.info(f"Loaded {len(fields)} fields and {len(groups)} groups from {base}")

    if validate:
        report = catalog.validate()
        for issue in report.warnings:
            logger.warning(f"{issue.code} [{issue.subject}]: {issue.message}")
        if not config.strict_validation:
            for issue in report.errors:
                logger.error(f"{issue.code} [{issue.subject}]: {issue.message}")
        else:
            report.ensure_valid()

    return catalog


def load_default_catalog() -> Catalog:
    return load_catalog(get_config().catalog_dir)
