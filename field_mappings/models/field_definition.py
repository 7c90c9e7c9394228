# ==============================================
# Field Definition (Data Classes)
# ==============================================
#
# PURPOSE:
#   Presentation and validation metadata for one schema field
#   of the insurance audit document, e.g. "home.roof_type".
#
# ENUMS:
# ------
# - InputType          → which input component renders the field
# - TextCasing         → display / input text-transform hint
# - Section            → top-level domain the field belongs to
# - ValidationKind     → kind of a descriptive validation rule
# - ConditionOperator  → comparison used by a visibility rule
#
# CLASSES:
# --------
# - DropdownOption     → one (value, label) choice
# - ValidationRule     → kind + parameter + message (not enforced here)
# - ConditionalRule    → show the field when another field compares true
# - FieldDefinition    → the record itself
#
#   All records are frozen. Collections are tuples, and the
#   state-specific option map is a read-only mapping, so a resolved
#   copy of a definition never shares mutable state with the registry.
#
#   Methods:
#   --------
#   - to_dict() -> dict            → Catalog file layout
#   - from_dict(data) (classmethod) → Parse a catalog record
#
# ==============================================

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

TEMPLATE_TOKEN = "[*]"
DEFAULT_STATE_KEY = "default"


class InputType(Enum):
    """Input component used to render a field."""
    TEXT = "text"
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    PHONE = "phone"
    EMAIL = "email"
    DATE = "date"
    DROPDOWN = "dropdown"
    MULTISELECT = "multiselect"
    TEXTAREA = "textarea"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    ZIP = "zip"
    SSN = "ssn"
    LICENSE = "license"
    VIN = "vin"
    ADDRESS = "address"
    MATERIAL_PERCENTAGE = "material_percentage"
    CLAIMS_ARRAY = "claims_array"


class TextCasing(Enum):
    TITLE = "title"
    UPPER = "upper"
    LOWER = "lower"
    SENTENCE = "sentence"
    NONE = "none"


class Section(Enum):
    APPLICANT = "applicant"
    HOME = "home"
    AUTO = "auto"


class ValidationKind(Enum):
    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    EMAIL = "email"
    PHONE = "phone"
    CUSTOM = "custom"


class ConditionOperator(Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


@dataclass(frozen=True)
class DropdownOption:
    """A selectable (value, label) pair."""
    value: str
    label: str
    disabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"value": self.value, "label": self.label}
        if self.disabled:
            out["disabled"] = True
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DropdownOption":
        value = str(data["value"])
        return cls(
            value=value,
            label=str(data.get("label", value)),
            disabled=bool(data.get("disabled", False)),
        )


@dataclass(frozen=True)
class ValidationRule:
    kind: ValidationKind
    value: Any = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"kind": self.kind.value}
        if self.value is not None:
            out["value"] = self.value
        if self.message is not None:
            out["message"] = self.message
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationRule":
        return cls(
            kind=ValidationKind(data["kind"]),
            value=data.get("value"),
            message=data.get("message"),
        )


@dataclass(frozen=True)
class ConditionalRule:
    """Visibility rule: show the owning field when `depends_on` compares true against `value`."""
    depends_on: str
    when: ConditionOperator
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"depends_on": self.depends_on, "when": self.when.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConditionalRule":
        return cls(
            depends_on=data["depends_on"],
            when=ConditionOperator(data.get("when", "equals")),
            value=data.get("value"),
        )


def _options_tuple(items: Optional[List[Dict[str, Any]]]) -> Tuple[DropdownOption, ...]:
    return tuple(DropdownOption.from_dict(item) for item in (items or []))


@dataclass(frozen=True)
class FieldDefinition:
    """
    Presentation metadata for one data field.

    `key` is a dotted path that may carry the template token `[*]`
    (one definition for every element of a repeated collection) or a
    concrete index such as `[3]`.
    """

    # --- Identity ---
    key: str
    label: str
    input_type: InputType
    description: Optional[str] = None

    # --- Input ---
    placeholder: Optional[str] = None
    options: Optional[Tuple[DropdownOption, ...]] = None
    state_specific_options: Optional[Mapping[str, Tuple[DropdownOption, ...]]] = None
    depends_on_state_from: Optional[str] = None  # Dotted path holding the region code

    # --- Formatting hints ---
    display_casing: TextCasing = TextCasing.NONE
    input_casing: Optional[TextCasing] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    # --- Validation (descriptive only) ---
    validations: Tuple[ValidationRule, ...] = ()
    required: bool = False

    # --- Organization ---
    group: Optional[str] = None
    order: float = 0
    section: Optional[Section] = None

    # --- Display ---
    hidden: bool = False
    readonly: bool = False
    conditional: Optional[ConditionalRule] = None
    custom_formatter: Optional[str] = None
    custom_validator: Optional[str] = None

    @property
    def is_template(self) -> bool:
        return TEMPLATE_TOKEN in self.key

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the catalog layout. Optional attributes that are
        unset are left out so files stay readable.
        """
        out: Dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "input_type": self.input_type.value,
            "display_casing": self.display_casing.value,
            "order": self.order,
        }
        if self.description is not None:
            out["description"] = self.description
        if self.placeholder is not None:
            out["placeholder"] = self.placeholder
        if self.options is not None:
            out["options"] = [opt.to_dict() for opt in self.options]
        if self.state_specific_options is not None:
            out["state_specific_options"] = {
                code: [opt.to_dict() for opt in opts]
                for code, opts in self.state_specific_options.items()
            }
        if self.depends_on_state_from is not None:
            out["depends_on_state_from"] = self.depends_on_state_from
        if self.input_casing is not None:
            out["input_casing"] = self.input_casing.value
        if self.prefix is not None:
            out["prefix"] = self.prefix
        if self.suffix is not None:
            out["suffix"] = self.suffix
        if self.validations:
            out["validations"] = [rule.to_dict() for rule in self.validations]
        if self.required:
            out["required"] = True
        if self.group is not None:
            out["group"] = self.group
        if self.section is not None:
            out["section"] = self.section.value
        if self.hidden:
            out["hidden"] = True
        if self.readonly:
            out["readonly"] = True
        if self.conditional is not None:
            out["conditional"] = self.conditional.to_dict()
        if self.custom_formatter is not None:
            out["custom_formatter"] = self.custom_formatter
        if self.custom_validator is not None:
            out["custom_validator"] = self.custom_validator
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldDefinition":
        """
        Parse a catalog record.

        Raises:
            KeyError: a required attribute (key, label, input_type) is missing
            ValueError: an enumerated attribute has an unknown value
        """
        options = data.get("options")
        state_options = data.get("state_specific_options")
        input_casing = data.get("input_casing")
        section = data.get("section")
        conditional = data.get("conditional")

        return cls(
            key=data["key"],
            label=data["label"],
            input_type=InputType(data["input_type"]),
            description=data.get("description"),
            placeholder=data.get("placeholder"),
            options=_options_tuple(options) if options is not None else None,
            state_specific_options=(
                MappingProxyType({
                    str(code): _options_tuple(opts)
                    for code, opts in state_options.items()
                })
                if state_options is not None else None
            ),
            depends_on_state_from=data.get("depends_on_state_from"),
            display_casing=TextCasing(data.get("display_casing", "none")),
            input_casing=TextCasing(input_casing) if input_casing else None,
            prefix=data.get("prefix"),
            suffix=data.get("suffix"),
            validations=tuple(ValidationRule.from_dict(v) for v in data.get("validations") or []),
            required=bool(data.get("required", False)),
            group=data.get("group"),
            order=data.get("order", 0),
            section=Section(section) if section else None,
            hidden=bool(data.get("hidden", False)),
            readonly=bool(data.get("readonly", False)),
            conditional=ConditionalRule.from_dict(conditional) if conditional else None,
            custom_formatter=data.get("custom_formatter"),
            custom_validator=data.get("custom_validator"),
        )
