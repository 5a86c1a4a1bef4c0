"""Tests for importing website files into a session."""

from pipeline_wizard.engine.defaults import resolve_defaults
from pipeline_wizard.engine.migration import ingest_config
from pipeline_wizard.engine.state import open_session
from pipeline_wizard.pipelines.website import WebsiteConfig


def test_unknown_fields_are_dropped_and_valid_ones_kept():
    valid = {"siteName": "Acme", "industry": "retail", "websiteTypes": ["blog"], "sitemap": False}

    result = ingest_config({"madeUpField": 123, **valid}, "website")

    assert "madeUpField" not in result
    for key, value in valid.items():
        assert result[key] == value


def test_empty_import_gives_defaults():
    assert ingest_config({}, "website") == resolve_defaults(WebsiteConfig)


def test_session_import_resets_import_fields():
    session = open_session("website")

    session.import_config({"importedProjectId": "p-42", "importMode": "merge", "siteName": "Acme"})

    assert session.config["importedProjectId"] is None
    assert session.config["importMode"] == "new"
    assert session.config["siteName"] == "Acme"


def test_ingest_keeps_import_fields():
    """Only a session import clears them; plain ingestion round-trips."""
    result = ingest_config({"importedProjectId": "p-42", "importMode": "merge"}, "website")

    assert result["importedProjectId"] == "p-42"
    assert result["importMode"] == "merge"


def test_commerce_steps_follow_import():
    session = open_session("website")

    session.import_config({"websiteTypes": ["e-commerce"]})
    assert {11, 12, 13} <= set(session.visible_steps)

    session.import_config({"websiteTypes": ["blog"]})
    assert not {11, 12, 13} & set(session.visible_steps)
