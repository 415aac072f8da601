"""Unit tests for ConfigService."""

from __future__ import annotations

import json

import pytest

from tasknote.models.config_models import AppConfig
from tasknote.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc() -> ConfigService:
    return ConfigService()


class TestLoadSave:
    def test_first_run_writes_defaults(self, svc):
        assert svc.config == AppConfig()
        assert svc.config_path.exists()

    def test_loads_existing_file(self, svc):
        svc.config_path.write_text(json.dumps({"tag_marker": "#todo"}), encoding="utf-8")
        assert svc.load_config().tag_marker == "#todo"

    def test_invalid_file_raises(self, svc):
        svc.config_path.write_text(json.dumps({"tag_marker": ""}), encoding="utf-8")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            svc.load_config()

    def test_cached_service(self):
        assert get_config_service() is get_config_service()


class TestGetSet:
    def test_get_top_level(self, svc):
        assert svc.get("tag_marker") == "#task"

    def test_get_nested(self, svc):
        assert svc.get("toggle.done_symbol") == "x"

    @pytest.mark.parametrize("key", ["nope", "toggle.nope", "tag_marker.x"])
    def test_get_unknown(self, svc, key):
        with pytest.raises(KeyError):
            svc.get(key)

    def test_set_persists(self, svc):
        svc.set("tag_marker", "#todo")
        assert ConfigService().config.tag_marker == "#todo"

    def test_set_nested(self, svc):
        svc.set("toggle.completion_key", "done")
        assert svc.config.toggle.completion_key == "done"

    def test_set_invalid_value_keeps_config(self, svc):
        with pytest.raises(ValueError):
            svc.set("tag_marker", "two words")
        assert svc.config.tag_marker == "#task"

    def test_set_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.set("colour", "red")


class TestReset:
    def test_reset_key(self, svc):
        svc.set("tag_marker", "#todo")
        svc.reset("tag_marker")
        assert svc.config.tag_marker == "#task"

    def test_reset_section(self, svc):
        svc.set("toggle.done_symbol", "/")
        svc.reset("toggle")
        assert svc.config.toggle.done_symbol == "x"

    def test_reset_all(self, svc):
        svc.set("repeat_default", "never")
        svc.reset()
        assert ConfigService().config == AppConfig()

    def test_reset_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.reset("nope")
