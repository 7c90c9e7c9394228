# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# COMMANDS:
# ---------
# 1. Resolve a data field key to its definition:
#    field-mappings resolve "auto.vehicles[1].vin"
#
# 2. Effective dropdown options for a key against a record:
#    field-mappings options home.foundation_type --data audit.json
#
# 3. Navigation groups (with per-vehicle / per-member groups):
#    field-mappings groups --data audit.json
#
# 4. Ordered fields of a section:
#    field-mappings section home
#
# 5. Check the catalog invariants:
#    field-mappings validate
#
# Every command accepts --catalog DIR and prints JSON.
# Exit code 1 when a key is not found or validation fails.
#
# ==============================================

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from field_mappings.config import get_config
from field_mappings.logging_utils import create_logger
from field_mappings.registry import load_catalog
from field_mappings.resolution import FieldResolver

logger = create_logger(__name__)


def _read_data(path: Optional[str]) -> Any:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_resolve(resolver: FieldResolver, args: argparse.Namespace) -> int:
    definition = resolver.resolve(args.key)
    if definition is None:
        _print({"key": args.key, "found": False})
        return 1
    _print(definition.to_dict())
    return 0


def cmd_options(resolver: FieldResolver, args: argparse.Namespace) -> int:
    definition = resolver.resolve(args.key)
    if definition is None:
        _print({"key": args.key, "found": False})
        return 1
    options = resolver.options(definition, _read_data(args.data))
    _print([opt.to_dict() for opt in options])
    return 0


def cmd_groups(resolver: FieldResolver, args: argparse.Namespace) -> int:
    tree = resolver.navigation(_read_data(args.data))
    _print(tree.to_dict())
    return 0


def cmd_section(resolver: FieldResolver, args: argparse.Namespace) -> int:
    _print([d.to_dict() for d in resolver.fields_by_section(args.name)])
    return 0


def cmd_validate(resolver: FieldResolver, args: argparse.Namespace) -> int:
    report = resolver.catalog.validate()
    _print(report.to_dict())
    return 0 if report.is_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="field-mappings",
        description="Look up presentation metadata for insurance data fields.",
    )
    parser.add_argument("--catalog", help="Catalog directory (default: FIELD_CATALOG_DIR or bundled)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("resolve", help="Resolve a data field key")
    p.add_argument("key")
    p.set_defaults(func=cmd_resolve)

    p = sub.add_parser("options", help="Effective options for a field")
    p.add_argument("key")
    p.add_argument("--data", help="JSON file with the insurance record")
    p.set_defaults(func=cmd_options)

    p = sub.add_parser("groups", help="Group hierarchy for a record")
    p.add_argument("--data", help="JSON file with the insurance record")
    p.set_defaults(func=cmd_groups)

    p = sub.add_parser("section", help="Ordered fields of a section")
    p.add_argument("name", choices=["applicant", "home", "auto"])
    p.set_defaults(func=cmd_section)

    p = sub.add_parser("validate", help="Validate the catalog")
    p.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    catalog_dir = Path(args.catalog) if args.catalog else Path(get_config().catalog_dir)
    logger.debug(f"Using catalog {catalog_dir}")

    # validate prints its own report instead of raising
    catalog = load_catalog(catalog_dir, validate=args.command != "validate")
    resolver = FieldResolver(catalog)
    return args.func(resolver, args)


if __name__ == "__main__":
    sys.exit(main())
