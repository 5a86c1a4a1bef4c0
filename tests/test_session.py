"""Tests for WizardSession."""

import logging
from unittest.mock import Mock

import pytest

from pipeline_wizard.engine.defaults import resolve_defaults
from pipeline_wizard.engine.generator import MockDocumentGenerator
from pipeline_wizard.engine.schema import PipelineSpec
from pipeline_wizard.engine.state import WizardSession, WizardState, open_session
from pipeline_wizard.engine.store import InMemoryConfigStore, MockConfigStore, SaveResult
from pipeline_wizard.errors import ConfigValidationError, PipelineMismatchError
from pipeline_wizard.pipelines.website.schema import WebsiteConfig
from pipeline_wizard.pipelines.workflow.session import WorkflowWizardSession


@pytest.fixture
def website():
    """Website session on default configuration."""
    return WizardSession("website")


@pytest.fixture
def preset():
    return WizardSession("preset")


class TestReadAccess:

    def test_starts_on_first_step_with_defaults(self, website):
        assert website.current_step == 1
        assert website.is_complete is False
        assert website.config == resolve_defaults(WebsiteConfig)
        assert website.total_steps == 14

    def test_config_is_a_copy(self, website):
        config = website.config
        config["siteName"] = "changed"
        config["websiteTypes"].append("blog")

        assert website.config["siteName"] == ""
        assert website.config["websiteTypes"] == []

    def test_snapshot(self, website):
        state = website.snapshot()

        assert isinstance(state, WizardState)
        assert state.current_step == 1
        assert state.visible_steps == tuple(website.visible_steps)


class TestUpdate:

    def test_top_level_values_replace(self, website):
        website.update({"siteName": "Acme", "websiteTypes": ["ecommerce"]})

        assert website.config["siteName"] == "Acme"
        assert {11, 12, 13} <= set(website.visible_steps)

    def test_blocks_merge_one_level_deep(self, preset):
        preset.update({"auth": {"mfa": True}})

        auth = preset.config["auth"]
        assert auth["mfa"] is True
        assert auth["enabled"] is True
        assert auth["providers"] == [{"type": "email", "enabled": True}]

    def test_unknown_keys_are_ignored(self, website, caplog):
        caplog.set_level(logging.WARNING, logger="pipeline_wizard.engine.state")

        website.update({"madeUpField": 123, "siteName": "Acme"})

        assert "madeUpField" not in website.config
        assert website.config["siteName"] == "Acme"
        assert "madeUpField" in caplog.text

    def test_update_does_not_keep_caller_references(self, website):
        types = ["blog"]
        website.update({"websiteTypes": types})
        types.append("ecommerce")

        assert website.config["websiteTypes"] == ["blog"]

    def test_hiding_current_step_moves_back(self, website):
        website.update({"websiteTypes": ["ecommerce"]})
        website.set_step(12)

        website.update({"websiteTypes": ["blog"]})

        assert website.current_step == 10

    def test_hiding_everything_before_moves_to_first_visible(self):
        spec = PipelineSpec(
            pipeline="website",
            version="1",
            description="Shop first",
            steps=[{"number": n, "id": f"s{n}", "label": f"S{n}"} for n in (1, 2, 3)],
            groups=[{"id": "shop", "steps": [1, 2], "when": "website.is_ecommerce"}],
        )
        session = WizardSession("website", spec=spec, config={"websiteTypes": ["ecommerce"]})
        session.set_step(2)

        session.update({"websiteTypes": []})

        assert session.current_step == 3


class TestNavigation:

    def test_next_skips_hidden_steps(self, website):
        website.set_step(10)
        assert website.next() == 14
        assert website.current_step == 14

    def test_next_on_last_step_completes(self, website):
        website.set_step(17)

        assert website.next() is None
        assert website.is_complete is True
        assert website.current_step == 17

    def test_next_from_hidden_step(self, website):
        website.set_step(12)
        assert website.next() == 14

    def test_previous(self, website):
        website.set_step(14)
        assert website.previous() == 10

        website.set_step(1)
        assert website.previous() is None
        assert website.current_step == 1

    def test_previous_from_hidden_step(self, website):
        website.set_step(12)
        assert website.previous() == 10

    def test_complete_flag(self, website):
        website.complete()
        assert website.is_complete is True
        website.complete(False)
        assert website.is_complete is False

    def test_reset(self, website):
        website.update({"siteName": "Acme"})
        website.set_step(5)
        website.complete()
        website.project_id = "p1"

        website.reset()

        assert website.config == resolve_defaults(WebsiteConfig)
        assert website.current_step == 1
        assert website.is_complete is False
        assert website.project_id is None


class TestImport:

    def test_import_reseeds_and_rewinds(self, website):
        website.set_step(7)
        website.complete()

        website.import_config({"siteName": "Acme", "websiteTypes": ["ecommerce"]})

        assert website.config["siteName"] == "Acme"
        assert website.current_step == 1
        assert website.is_complete is False

    def test_import_resets_import_bookkeeping(self, website):
        website.import_config({"siteName": "Acme", "importedProjectId": "abc", "importMode": "merge"})

        config = website.config
        assert config["importedProjectId"] is None
        assert config["importMode"] == "new"

    def test_import_of_other_pipeline_is_rejected(self, website):
        website.update({"siteName": "Acme"})

        with pytest.raises(PipelineMismatchError):
            website.import_config({"type": "preset", "version": "2.0.0"})

        assert website.config["siteName"] == "Acme"


class TestSubscribers:

    def test_subscribers_receive_snapshots(self, website):
        callback = Mock()
        website.subscribe(callback)

        website.update({"siteName": "Acme"})

        callback.assert_called_once()
        state = callback.call_args[0][0]
        assert state.config["siteName"] == "Acme"
        state.config["siteName"] = "changed"
        assert website.config["siteName"] == "Acme"

    def test_unsubscribe(self, website):
        callback = Mock()
        unsubscribe = website.subscribe(callback)

        website.next()
        unsubscribe()
        website.next()
        unsubscribe()

        assert callback.call_count == 1


class TestCollaborators:

    def test_save_passes_a_copy_and_remembers_id(self, website):
        store = MockConfigStore()
        website.update({"siteName": "Acme"})

        result = website.save(store)

        assert result == SaveResult(id="mock-1")
        assert website.project_id == "mock-1"
        action, existing_id, config = store.calls[0]
        assert (action, existing_id) == ("save", None)
        config["siteName"] = "changed"
        assert website.config["siteName"] == "Acme"

    def test_second_save_updates(self, website):
        store = MockConfigStore()
        website.save(store)
        website.save(store)

        assert store.calls[1][1] == "mock-1"

    def test_save_errors_are_returned_unchanged(self, website):
        store = MockConfigStore()
        store.responses["save"] = SaveResult(error="Project not found: x")

        result = website.save(store, existing_id="x")

        assert result.error == "Project not found: x"
        assert website.project_id is None
        assert len(store.calls) == 1

    def test_save_to_memory_store(self, website):
        store = InMemoryConfigStore("website")
        website.update({"siteName": "Acme"})

        result = website.save(store)

        stored = store.load(result.id)
        assert stored["type"] == "website"
        assert stored["siteName"] == "Acme"

    def test_generate_receives_validated_config(self, website):
        generator = MockDocumentGenerator(result="# Concept")
        website.update({"siteName": "Acme"})

        assert website.generate(generator) == "# Concept"
        assert generator.calls == [("generate", "website", website.config)]

    def test_generate_rejects_invalid_config(self, website):
        website.update({"blogEnabled": "yes"})

        with pytest.raises(ConfigValidationError):
            website.generate(MockDocumentGenerator())


def test_open_session_uses_pipeline_session_class():
    assert isinstance(open_session("workflow"), WorkflowWizardSession)
    assert type(open_session("website")) is WizardSession
