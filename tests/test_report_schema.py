"""Smoke tests: the bundled report schema loads and agrees with the rule registry."""
from __future__ import annotations

import re

import jsonschema
import pytest

from locale_audit import rules
from locale_audit.contracts.load import load_schema, validate_instance
from locale_audit.model.check_result import REPORT_SCHEMA_VERSION

SCHEMA = "locale_audit_report.schema.json"


def _minimal_report() -> dict:
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "tool_version": "0.1.0",
        "inputs": {"locale_file": "app.yml", "locale_keys": 0, "source_files": 0, "key_usages": 0},
        "summary": {"has_errors": False, "diagnostics_total": 0, "by_rule": {}},
        "rules": [],
    }


def test_report_schema_loads():
    schema = load_schema(SCHEMA)
    assert schema["$id"] == SCHEMA
    assert schema["properties"]["schema_version"]["const"] == REPORT_SCHEMA_VERSION


def test_rule_names_match_schema_pattern():
    pattern = load_schema(SCHEMA)["properties"]["rules"]["items"]["properties"]["rule"]["pattern"]
    for name in rules.ALL_RULE_NAMES:
        assert re.match(pattern, name), name


def test_minimal_report_is_valid():
    validate_instance(_minimal_report(), SCHEMA)


def test_unknown_top_level_field_rejected():
    report = _minimal_report()
    report["extra"] = True
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(report, SCHEMA)


def test_unknown_schema_name():
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema.json")
