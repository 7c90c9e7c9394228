# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures:
#   - catalog          → bundled insurance catalog (validated)
#   - field_registry   → small hand-built registry with templates
#   - group_registry   → small hand-built registry with a template group
#   - audit_record     → insurance record with 3 vehicles, 2 members
# ==============================================

import pytest

from field_mappings.config import reset_config
from field_mappings.models import FieldDefinition, GroupDefinition, InputType, Section
from field_mappings.registry import FieldRegistry, GroupRegistry, load_catalog
from field_mappings.resolution import ResolutionDiagnostics


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test sees the environment it sets, not a cached config."""
    monkeypatch.delenv("FIELD_CATALOG_DIR", raising=False)
    monkeypatch.delenv("STRICT_CATALOG", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def diagnostics():
    return ResolutionDiagnostics()


@pytest.fixture
def field_registry():
    return FieldRegistry([
        FieldDefinition(
            key="client.first_name",
            label="First Name",
            input_type=InputType.TEXT,
            group="personal_information",
            section=Section.APPLICANT,
            order=1,
        ),
        FieldDefinition(
            key="client.household_members[*].first_name",
            label="First Name",
            input_type=InputType.TEXT,
            group="household_member_template",
            section=Section.APPLICANT,
            order=1,
        ),
        FieldDefinition(
            key="auto.vehicles[*].vin",
            label="VIN",
            input_type=InputType.VIN,
            group="vehicle_details",
            section=Section.AUTO,
            order=1,
        ),
    ])


@pytest.fixture
def group_registry():
    return GroupRegistry([
        GroupDefinition(id="personal_information", name="Personal Information", order=1),
        GroupDefinition(id="address", name="Address", order=2),
        GroupDefinition(
            id="vehicle_template",
            name="Vehicle",
            order=3,
            is_template=True,
            template_pattern="auto.vehicles[*]",
            dynamic_name_pattern="Vehicle {index + 1}",
        ),
        GroupDefinition(id="mailing", name="Mailing", order=1, parent_group="address"),
    ])


@pytest.fixture
def audit_record():
    """Insurance audit record in the shape the data dictionary describes."""
    return {
        "client": {
            "first_name": "Jane",
            "current_address_state": "fl",
            "driver_training": "Yes",
            "household_members": [
                {"first_name": "John", "relationship_to_applicant": "Spouse"},
                {"first_name": "Amy", "relationship_to_applicant": "Child"},
            ],
        },
        "home": {
            "address_state": "FL",
            "has_financial_interests": "Yes",
            "has_claims_last_5_years": "false",
            "additional_interests": [{"type": "Mortgagee", "name": "First Bank"}],
        },
        "auto": {
            "vehicles": [
                {"vin": "1HGBH41JXMN109186", "year": 2019},
                {"vin": "2T1BURHE0JC034567", "year": 2018},
                {"vin": "3FA6P0H73HR123456", "year": 2017},
            ],
        },
    }
