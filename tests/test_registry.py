"""Tests for the pipeline and predicate registry."""

import pytest

from pipeline_wizard.engine.registry import get_pipeline, get_predicate, pipeline_names
from pipeline_wizard.errors import PipelineWizardError, UnknownPipelineError, UnknownPredicateError
from pipeline_wizard.pipelines.preset import PresetConfig


def test_bundled_pipelines_are_registered():
    assert pipeline_names() == ("preset", "website", "workflow")


def test_get_pipeline():
    pipeline = get_pipeline("preset")

    assert pipeline.name == "preset"
    assert pipeline.schema is PresetConfig
    assert pipeline.reset_on_import == ()


def test_unknown_pipeline():
    with pytest.raises(UnknownPipelineError) as exc_info:
        get_pipeline("game")

    assert str(exc_info.value) == "Unknown pipeline: 'game'"
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, PipelineWizardError)


def test_unknown_predicate():
    with pytest.raises(UnknownPredicateError, match="website.is_game"):
        get_predicate("website.is_game")
