from __future__ import annotations

"""
Unit tests for the Registry Domain models.
"""

import dataclasses
import os

import pytest

from levelog.domain.models import LevelDefinition, LogOverrides, RegistryConfig


def test_registry_config_defaults_to_cwd_logs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = RegistryConfig()

    assert cfg.logs_dir == os.path.join(os.getcwd(), "logs")
    assert cfg.rotation == "daily"
    assert cfg.development is False


def test_registry_config_is_immutable():
    cfg = RegistryConfig(logs_dir="/tmp/levelog")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.rotation = "monthly"


def test_level_definition_defaults():
    definition = LevelDefinition(color="green")
    assert definition.include_timestamp_in_console is False
    assert definition.default_log_to_file is True
    assert definition.log_file_name is None
    assert definition.on_trigger is None


def test_overrides_as_dict_keeps_only_provided_fields():
    """False is an explicit override, None means 'not overridden'."""
    overrides = LogOverrides(log_to_file=False, color="red")
    assert overrides.as_dict() == {"log_to_file": False, "color": "red"}
    assert LogOverrides().as_dict() == {}
