# ==============================================
# Tests for the command line interface
# ==============================================

import json
from textwrap import dedent

import pytest

from field_mappings.cli import main


@pytest.fixture
def record_file(tmp_path, audit_record):
    path = tmp_path / "record.json"
    path.write_text(json.dumps(audit_record), encoding="utf-8")
    return str(path)


def _stdout_json(capsys):
    return json.loads(capsys.readouterr().out)


def test_resolve_template_key(capsys):
    assert main(["resolve", "auto.vehicles[1].vin"]) == 0
    out = _stdout_json(capsys)
    assert out["key"] == "auto.vehicles[1].vin"
    assert out["label"] == "VIN"


def test_resolve_unknown_key(capsys):
    assert main(["resolve", "auto.spaceships[0].name"]) == 1
    assert _stdout_json(capsys) == {"key": "auto.spaceships[0].name", "found": False}


def test_options_with_record(capsys, record_file):
    assert main(["options", "home.foundation_type", "--data", record_file]) == 0
    options = _stdout_json(capsys)
    assert len(options) == 14
    assert options[0]["value"] == "Basement"


def test_options_without_record_uses_default(capsys):
    assert main(["options", "home.foundation_type"]) == 0
    assert len(_stdout_json(capsys)) == 8


def test_groups(capsys, record_file):
    assert main(["groups", "--data", record_file]) == 0
    out = _stdout_json(capsys)
    dynamic_ids = [g["id"] for g in out["dynamic_groups"]]
    assert dynamic_ids[-3:] == ["vehicle_0", "vehicle_1", "vehicle_2"]


def test_section(capsys):
    assert main(["section", "home"]) == 0
    keys = [d["key"] for d in _stdout_json(capsys)]
    assert keys[0] == "home.year_built"


def test_validate_bundled(capsys):
    assert main(["validate"]) == 0
    assert _stdout_json(capsys) == {"errors": [], "warnings": []}


def test_validate_reports_errors_instead_of_raising(capsys, tmp_path):
    (tmp_path / "groups.yaml").write_text("groups:\n  - {id: a, name: A, parent_group: a}\n")
    (tmp_path / "fields.yaml").write_text(dedent("""\
        fields:
          - {key: home.year_built, label: Year Built, input_type: number}
    """))
    assert main(["--catalog", str(tmp_path), "validate"]) == 1
    assert _stdout_json(capsys)["errors"][0]["code"] == "self_parent"


def test_unknown_section_rejected():
    with pytest.raises(SystemExit):
        main(["section", "boat"])
