# ==============================================
# Tests for Visibility Rules, Section Queries and Composite Inputs
# ==============================================

import pytest

from field_mappings.models import (
    ConditionalRule,
    ConditionOperator,
    FieldDefinition,
    GroupDefinition,
    InputType,
    Section,
)
from field_mappings.registry import FieldRegistry, GroupRegistry
from field_mappings.resolution import (
    evaluate_condition,
    get_array_item_schema,
    get_fields_by_section,
    get_fields_grouped,
    is_visible,
    validate_material_percentages,
)


def _rule(when, value, depends_on="home.number_of_claims"):
    return ConditionalRule(depends_on=depends_on, when=ConditionOperator(when), value=value)


class TestEvaluateCondition:

    @pytest.mark.parametrize("when, value, data_value, expected", [
        ("equals", "Yes", "Yes", True),
        ("equals", "Yes", "No", False),
        ("not_equals", "Yes", "No", True),
        ("greater_than", 2, 3, True),
        ("greater_than", 2, "10", True),
        ("less_than", 2, 1, True),
        ("less_than", "2", 5, False),
        ("contains", "Fire", ["Fire", "Flood"], True),
        ("contains", "Hail", ["Fire", "Flood"], False),
        ("contains", "Bank", "First Bank", True),
    ])
    def test_operators(self, when, value, data_value, expected):
        data = {"home": {"number_of_claims": data_value}}
        assert evaluate_condition(_rule(when, value), data) is expected

    @pytest.mark.parametrize("when, expected", [
        ("equals", False),
        ("not_equals", True),
        ("contains", False),
        ("greater_than", False),
    ])
    def test_missing_value_compares_as_none(self, when, expected):
        assert evaluate_condition(_rule(when, 1), {"home": {}}) is expected

    def test_no_rule_is_visible(self):
        assert evaluate_condition(None, {}) is True


class TestIsVisible:

    def test_driver_training_date(self, catalog, audit_record):
        definition = catalog.fields["client.driver_training_date"]
        assert is_visible(definition, audit_record)
        audit_record["client"]["driver_training"] = "No"
        assert not is_visible(definition, audit_record)

    def test_claims_follow_flag(self, catalog, audit_record):
        definition = catalog.fields["home.claims"]
        assert not is_visible(definition, audit_record)
        audit_record["home"]["has_claims_last_5_years"] = "true"
        assert is_visible(definition, audit_record)

    def test_unconditional_field(self, catalog):
        assert is_visible(catalog.fields["client.first_name"], {})

    def test_hidden_wins_over_condition(self):
        definition = FieldDefinition(
            key="internal.agent_id", label="Agent", input_type=InputType.TEXT, hidden=True,
        )
        assert not is_visible(definition, {"internal": {"agent_id": "A1"}})


class TestSections:

    def test_home_section_order(self, catalog):
        keys = [d.key for d in get_fields_by_section("home", catalog.fields, catalog.groups)]
        assert keys[:2] == ["home.year_built", "home.square_footage"]
        assert keys[-1] == "home.claims"
        assert keys.index("home.has_financial_interests") < keys.index("home.additional_interests[*].type")
        assert keys.index("home.additional_interests[*].loan_number") < keys.index("home.prior_carriers")

    def test_applicant_grouped(self, catalog):
        grouped = get_fields_grouped("applicant", catalog.fields, catalog.groups)
        assert list(grouped) == [
            "personal_information",
            "address",
            "driver_information",
            "household_member_template",
        ]
        assert [d.key for d in grouped["address"]][0] == "client.current_address_line1"

    def test_unknown_group_sorts_last_and_ungrouped_bucket(self):
        fields = FieldRegistry([
            FieldDefinition(key="home.notes", label="Notes", input_type=InputType.TEXTAREA, section=Section.HOME),
            FieldDefinition(key="home.pool", label="Pool", input_type=InputType.CHECKBOX, section=Section.HOME,
                            group="mystery", order=1),
            FieldDefinition(key="home.year_built", label="Year Built", input_type=InputType.NUMBER,
                            section=Section.HOME, group="general_property", order=1),
        ])
        groups = GroupRegistry([GroupDefinition(id="general_property", name="General", order=1)])

        keys = [d.key for d in get_fields_by_section("home", fields, groups)]
        assert keys[0] == "home.year_built"

        grouped = get_fields_grouped("home", fields, groups)
        assert [d.key for d in grouped["ungrouped"]] == ["home.notes"]
        assert [d.key for d in grouped["mystery"]] == ["home.pool"]

    def test_section_without_fields(self, field_registry, group_registry):
        assert get_fields_by_section("home", field_registry, group_registry) == []


class TestArrayItemSchema:

    @pytest.mark.parametrize("field_key, expected", [
        ("home.claims", "claims"),
        ("home.prior_carriers", "prior_carriers"),
        ("auto.violations_claims", "violations_claims"),
        ("home.year_built", None),
    ])
    def test_schema_selection(self, catalog, field_key, expected):
        schema = get_array_item_schema(field_key, catalog.array_schemas)
        if expected is None:
            assert schema is None
        else:
            assert schema is catalog.array_schemas[expected]

    def test_claims_sub_fields(self, catalog):
        schema = get_array_item_schema("home.claims", catalog.array_schemas)
        assert schema["amount"].input_type is InputType.CURRENCY
        assert "is_catastrophe_loss" in schema


class TestMaterialPercentages:

    @pytest.mark.parametrize("materials", [None, [], [{"material": "Brick", "percentage": 100}]])
    def test_valid(self, materials):
        assert validate_material_percentages(materials) == (True, None)

    def test_total_over_100(self):
        materials = [{"material": "Brick", "percentage": 60}, {"material": "Stucco", "percentage": "50"}]
        assert validate_material_percentages(materials) == (False, "Total percentage cannot exceed 100%")

    def test_duplicate_material(self):
        materials = [{"material": "Brick", "percentage": 30}, {"material": "Brick", "percentage": 20}]
        assert validate_material_percentages(materials) == (False, "Cannot have duplicate materials")

    @pytest.mark.parametrize("percentage", ["n/a", "", None, [40], {"value": 40}])
    def test_non_numeric_percentage_counts_as_zero(self, percentage):
        materials = [{"material": "Paint", "percentage": percentage}, {"material": "Brick", "percentage": 90}]
        assert validate_material_percentages(materials) == (True, None)

    def test_numeric_strings_still_count(self):
        materials = [{"material": "Paint", "percentage": " 60 "}, {"material": "Brick", "percentage": "n/a"},
                     {"material": "Stone", "percentage": 50}]
        assert validate_material_percentages(materials) == (False, "Total percentage cannot exceed 100%")

    def test_non_object_entries_are_skipped(self):
        materials = ["Brick", None, 42, {"material": "Brick", "percentage": 100}]
        assert validate_material_percentages(materials) == (True, None)

    def test_unhashable_material_names(self):
        materials = [{"material": ["Brick"], "percentage": 10}, {"material": ["Brick"], "percentage": 10}]
        assert validate_material_percentages(materials) == (False, "Cannot have duplicate materials")
        materials[1]["material"] = {"name": "Stone"}
        assert validate_material_percentages(materials) == (True, None)

    def test_not_a_list(self):
        assert validate_material_percentages({"material": "Brick"}) == (True, None)
