"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest

from pipeline_wizard.logging_config import LOG_FORMAT, configure_logging
from pipeline_wizard.settings import SCHEMA_VERSION, load_settings


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("LOG_LEVEL", "VERBOSE", "SPEC_PATH", "STORE_DIR", "SCHEMA_VERSION"):
        monkeypatch.delenv(f"PIPELINE_WIZARD_{key}", raising=False)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    settings = load_settings(env_file=str(tmp_path / "none.env"))

    assert settings.log_level == "WARNING"
    assert settings.verbose is False
    assert settings.spec_path is None
    assert settings.store_dir == Path(".pipeline-wizard")
    assert settings.schema_version == SCHEMA_VERSION


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("PIPELINE_WIZARD_LOG_LEVEL", "DEBUG")
    clean_env.setenv("PIPELINE_WIZARD_VERBOSE", "true")
    clean_env.setenv("PIPELINE_WIZARD_STORE_DIR", str(tmp_path))

    settings = load_settings(env_file=str(tmp_path / "none.env"))

    assert settings.log_level == "DEBUG"
    assert settings.verbose is True
    assert settings.store_dir == tmp_path


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PIPELINE_WIZARD_SCHEMA_VERSION=2.1.0\n")
    # registered so teardown removes what load_dotenv sets
    clean_env.setenv("PIPELINE_WIZARD_SCHEMA_VERSION", "")
    clean_env.delenv("PIPELINE_WIZARD_SCHEMA_VERSION")

    settings = load_settings(env_file=str(env_file))

    assert settings.schema_version == "2.1.0"


def test_configure_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("info")
        configure_logging("info", verbose=True)

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert root.handlers[0].formatter._fmt == LOG_FORMAT
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
