# ==============================================
# Catalog Validation
# ==============================================
#
# PURPOSE:
#   Configuration invariants are checked once, when the catalog is
#   loaded, so the per-call resolvers can assume them and never raise.
#
# ERRORS (catalog is unusable):
#   - missing_default        state_specific_options without "default"
#   - missing_state_source   state_specific_options without depends_on_state_from
#   - ambiguous_template     two template keys with the same path signature
#   - self_parent            group lists itself as parent_group
#   - parent_cycle           parent_group links loop
#   - missing_template_pattern  is_template without template_pattern
#
# WARNINGS (catalog is usable, something will not render):
#   - unknown_group          field references a group id (as written, template ids included) that does not exist
#   - unknown_parent         group's parent_group does not exist (orphan)
#   - options_conflict       both static and state-specific options
#   - template_pattern_format   template_pattern without "[*]"
#
# ==============================================

from dataclasses import dataclass, field
from typing import Dict, List

from field_mappings.models import DEFAULT_STATE_KEY, TEMPLATE_TOKEN
from field_mappings.paths import path_signature

from .field_registry import FieldRegistry, GroupRegistry


class CatalogValidationError(ValueError):
    """Raised when a catalog violates an invariant the resolvers rely on."""

    def __init__(self, issues: List["ValidationIssue"]):
        self.issues = list(issues)
        lines = "; ".join(f"{i.code}: {i.message}" for i in self.issues)
        super().__init__(f"Invalid field catalog ({len(self.issues)} errors): {lines}")


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    subject: str  # field key or group id
    message: str


@dataclass
class ValidationReport:
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error(self, code: str, subject: str, message: str) -> None:
        self.errors.append(ValidationIssue(code, subject, message))

    def warn(self, code: str, subject: str, message: str) -> None:
        self.warnings.append(ValidationIssue(code, subject, message))

    def ensure_valid(self) -> None:
        if self.errors:
            raise CatalogValidationError(self.errors)

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            "errors": [vars(i) for i in self.errors],
            "warnings": [vars(i) for i in self.warnings],
        }


def _check_fields(fields: FieldRegistry, groups: GroupRegistry, report: ValidationReport) -> None:
    signatures: Dict[str, str] = {}

    for key, definition in fields.items():
        if definition.state_specific_options is not None:
            if DEFAULT_STATE_KEY not in definition.state_specific_options:
                report.error("missing_default", key, "state_specific_options has no 'default' entry")
            if not definition.depends_on_state_from:
                report.error("missing_state_source", key, "state_specific_options without depends_on_state_from")
            if definition.options is not None:
                report.warn("options_conflict", key, "static options shadow state_specific_options")

        if definition.is_template:
            sig = path_signature(key)
            if sig in signatures:
                report.error(
                    "ambiguous_template", key,
                    f"matches the same keys as template '{signatures[sig]}'",
                )
            else:
                signatures[sig] = key

        if definition.group is not None and definition.group not in groups:
            report.warn("unknown_group", key, f"group '{definition.group}' is not defined")


def _check_groups(groups: GroupRegistry, report: ValidationReport) -> None:
    for group_id, group in groups.items():
        if group.is_template:
            if not group.template_pattern:
                report.error("missing_template_pattern", group_id, "template group has no template_pattern")
            elif TEMPLATE_TOKEN not in group.template_pattern:
                report.warn("template_pattern_format", group_id,
                            f"template_pattern '{group.template_pattern}' has no '{TEMPLATE_TOKEN}'")

        parent = group.parent_group
        if parent is None:
            continue
        if parent == group_id:
            report.error("self_parent", group_id, "group is its own parent")
            continue
        if parent not in groups:
            report.warn("unknown_parent", group_id, f"parent group '{parent}' is not defined")
            continue

        # Walk up the chain; revisiting any id means the links loop.
        seen = {group_id}
        current = groups.get(parent)
        while current is not None and current.parent_group is not None:
            if current.id in seen:
                report.error("parent_cycle", group_id, f"parent_group links loop through '{current.id}'")
                break
            seen.add(current.id)
            current = groups.get(current.parent_group)


def validate_catalog(fields: FieldRegistry, groups: GroupRegistry) -> ValidationReport:
    """Check both registries and collect every issue found."""
    report = ValidationReport()
    _check_fields(fields, groups, report)
    _check_groups(groups, report)
    return report
