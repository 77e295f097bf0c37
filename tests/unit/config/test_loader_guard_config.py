"""Unit tests for guard configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from intentguard.config import (
    ModelGuardConfig,
    load_guard_config,
    load_guard_config_from_dict,
    load_guard_config_from_string,
)
from intentguard.enums import EnumPatternSeverity
from intentguard.exceptions import GuardConfigurationError
from intentguard.patterns import ModelNumericRangeSpec, ModelRequiredFieldsSpec

pytestmark = pytest.mark.unit

VALID_CONFIG_YAML = """\
version: "1.0"
known_intents: [submitBid, acceptBid]
role_permissions:
  - role: contractor
    allowed_intents: [submitBid]
  - role: suspended
    denied_intents: ["*"]
patterns:
  - kind: required_fields
    id: bid-fields
    name: Bid Fields
    intent_names: [submitBid]
    fields: [projectId, amount]
  - kind: numeric_range
    id: max-bid-amount
    name: Max Bid Amount
    severity: warning
    field: amount
    max: 10000
owner_id:
  owner_keys: [user_id, contractor_id]
domain_boundary:
  allowed_domain_pairs:
    - [bidding, payment]
"""


class TestLoadFromString:
    def test_valid_config(self) -> None:
        config = load_guard_config_from_string(VALID_CONFIG_YAML)
        assert config.known_intents == frozenset({"submitBid", "acceptBid"})
        assert [r.role for r in config.role_permissions] == ["contractor", "suspended"]
        required, numeric = config.patterns
        assert isinstance(required, ModelRequiredFieldsSpec)
        assert isinstance(numeric, ModelNumericRangeSpec)
        assert numeric.severity is EnumPatternSeverity.WARNING
        assert config.owner_id.owner_keys == ("user_id", "contractor_id")
        assert config.domain_boundary.is_pair_allowed("payment", "bidding")

    def test_empty_document_uses_defaults(self) -> None:
        config = load_guard_config_from_string("")
        assert config == ModelGuardConfig()

    def test_yaml_syntax_error(self) -> None:
        with pytest.raises(GuardConfigurationError) as exc_info:
            load_guard_config_from_string("patterns: [unclosed\n")
        assert exc_info.value.field == "yaml"

    def test_non_mapping_root(self) -> None:
        with pytest.raises(GuardConfigurationError) as exc_info:
            load_guard_config_from_string("- just\n- a list\n")
        assert exc_info.value.field == "root"
        assert "list" in str(exc_info.value)

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(GuardConfigurationError) as exc_info:
            load_guard_config_from_string("unexpected: true\n")
        assert exc_info.value.field == "unexpected"

    def test_bad_version(self) -> None:
        with pytest.raises(GuardConfigurationError, match="semver"):
            load_guard_config_from_string('version: "latest"\n')

    def test_unknown_severity_reports_field_path(self) -> None:
        yaml_content = (
            "patterns:\n"
            "  - kind: required_fields\n"
            "    id: p1\n"
            "    name: P1\n"
            "    severity: critical\n"
            "    fields: [amount]\n"
        )
        with pytest.raises(GuardConfigurationError) as exc_info:
            load_guard_config_from_string(yaml_content)
        assert exc_info.value.field is not None
        assert exc_info.value.field.startswith("patterns.0")


class TestDuplicateDetection:
    def test_duplicate_pattern_ids(self) -> None:
        data = {
            "patterns": [
                {"kind": "required_fields", "id": "p1", "name": "A", "fields": ["a"]},
                {"kind": "required_fields", "id": "p1", "name": "B", "fields": ["b"]},
            ]
        }
        with pytest.raises(GuardConfigurationError, match="Duplicate pattern IDs"):
            load_guard_config_from_dict(data)

    def test_duplicate_roles(self) -> None:
        data = {
            "role_permissions": [
                {"role": "contractor", "allowed_intents": ["submitBid"]},
                {"role": "contractor", "allowed_intents": ["updateBid"]},
            ]
        }
        with pytest.raises(GuardConfigurationError, match="Duplicate roles"):
            load_guard_config_from_dict(data)


class TestLoadFromFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "guard.yaml"
        path.write_text(VALID_CONFIG_YAML, encoding="utf-8")
        config = load_guard_config(path)
        assert len(config.patterns) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GuardConfigurationError) as exc_info:
            load_guard_config(tmp_path / "missing.yaml")
        assert exc_info.value.field == "file"
