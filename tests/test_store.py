"""Tests for the ConfigStore implementations."""

import pytest

from pipeline_wizard.engine.defaults import resolve_defaults
from pipeline_wizard.engine.store import InMemoryConfigStore, JsonFileConfigStore, MockConfigStore, SaveResult
from pipeline_wizard.pipelines.website.schema import WebsiteConfig
from pipeline_wizard.settings import SCHEMA_VERSION


@pytest.fixture
def store():
    return InMemoryConfigStore("website")


@pytest.fixture
def website_config():
    config = resolve_defaults(WebsiteConfig)
    config["siteName"] = "Acme"
    return config


def test_save_result_ok():
    assert SaveResult(id="x").ok
    assert not SaveResult(error="boom").ok


class TestInMemoryConfigStore:

    def test_create_stores_tagged_document(self, store, website_config):
        result = store.save(None, website_config)

        assert result.ok
        assert len(result.id) == 32
        stored = store.load(result.id)
        assert stored["type"] == "website"
        assert stored["version"] == SCHEMA_VERSION
        assert stored["siteName"] == "Acme"

    def test_version_tag_is_configurable(self, website_config):
        store = InMemoryConfigStore("website", version="2.1.0")
        result = store.save(None, website_config)
        assert store.load(result.id)["version"] == "2.1.0"

    def test_update_keeps_id(self, store, website_config):
        created = store.save(None, website_config)

        website_config["siteName"] = "Acme GmbH"
        updated = store.save(created.id, website_config)

        assert updated.id == created.id
        assert store.load(created.id)["siteName"] == "Acme GmbH"

    def test_update_of_unknown_id_fails(self, store, website_config):
        result = store.save("nope", website_config)

        assert result.error == "Project not found: nope"
        assert store.records == {}

    def test_validation_errors_name_the_field(self, store):
        result = store.save(None, {"blogEnabled": "yes"})

        assert result.id is None
        assert result.error.endswith("(field: blogEnabled)")
        assert store.records == {}

    def test_nested_field_path(self, store):
        result = store.save(None, {"corporateIdentity": {"brandColors": ["red"]}})
        assert result.error.endswith("(field: corporateIdentity.brandColors.0)")

    def test_index_keyed_objects_are_saved_as_lists(self, store):
        result = store.save(None, {"websiteTypes": {"0": "blog", "1": "ecommerce"}})

        assert store.load(result.id)["websiteTypes"] == ["blog", "ecommerce"]

    def test_legacy_shapes_are_migrated_on_save(self):
        store = InMemoryConfigStore("preset")

        result = store.save(None, {"businessName": "Acme", "appType": "crm"})

        stored = store.load(result.id)
        assert stored["meta"]["businessName"] == "Acme"
        assert stored["app"]["appType"] == "crm"
        assert "businessName" not in stored

    def test_existing_tag_is_replaced(self, store):
        result = store.save(None, {"type": "website", "version": "2.0.0-rc1", "siteName": "Acme"})

        stored = store.load(result.id)
        assert stored["version"] == SCHEMA_VERSION
        assert stored["siteName"] == "Acme"

    def test_load_returns_copy(self, store, website_config):
        result = store.save(None, website_config)

        store.load(result.id)["siteName"] = "changed"

        assert store.load(result.id)["siteName"] == "Acme"
        assert store.load("missing") is None


class TestJsonFileConfigStore:

    def test_round_trip(self, tmp_path, website_config):
        store = JsonFileConfigStore("website", tmp_path)

        result = store.save(None, website_config)

        assert (tmp_path / "website" / f"{result.id}.json").exists()
        assert store.load(result.id)["siteName"] == "Acme"

    def test_missing_document(self, tmp_path, website_config):
        store = JsonFileConfigStore("website", tmp_path)

        assert store.load("missing") is None
        assert store.save("missing", website_config).error == "Project not found: missing"

    def test_write_errors_are_returned(self, tmp_path, website_config):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = JsonFileConfigStore("website", blocker)

        result = store.save(None, website_config)

        assert result.id is None
        assert result.error


def test_mock_store_records_calls():
    store = MockConfigStore()

    result = store.save(None, {"a": 1})
    store.load(result.id)

    assert store.calls == [("save", None, {"a": 1}), ("load", "mock-1")]


class TestIdHandling:
    """Odd keys and ids come back as SaveResults."""

    def test_non_ascii_digit_keys_do_not_raise(self):
        store = InMemoryConfigStore("preset")

        result = store.save(None, {"meta": {"²": "x", "businessName": "Acme"}})

        assert result.ok
        assert store.load(result.id)["meta"]["businessName"] == "Acme"

    def test_empty_existing_id_creates(self, store, website_config):
        result = store.save("", website_config)

        assert result.ok
        assert result.id
        assert store.load(result.id)["siteName"] == "Acme"

    @pytest.mark.parametrize("config_id", ["../../escape", "a/b", "..\\x", ".."])
    def test_path_like_ids_are_rejected(self, tmp_path, website_config, config_id):
        store = JsonFileConfigStore("website", tmp_path / "store")
        outside = tmp_path / "escape.json"
        outside.write_text("{}")

        result = store.save(config_id, website_config)

        assert result.error == f"Invalid project id: {config_id}"
        assert outside.read_text() == "{}"
        assert store.load(config_id) is None

    def test_empty_existing_id_creates_file(self, tmp_path, website_config):
        store = JsonFileConfigStore("website", tmp_path)

        result = store.save("", website_config)

        assert result.ok
        assert (tmp_path / "website" / f"{result.id}.json").exists()
