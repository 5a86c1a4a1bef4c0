"""Tests for the workflow steps builder."""

from unittest.mock import Mock

import pytest

from pipeline_wizard.engine.generator import MockDocumentGenerator
from pipeline_wizard.engine.state import open_session


@pytest.fixture
def session():
    return open_session("workflow")


@pytest.fixture
def three_steps(session):
    """Session with steps A, B, C; returns their ids."""
    return [session.add_step(title=title) for title in ("A", "B", "C")]


def _titles(session):
    return [step["title"] for step in session.config["steps"]]


def _orders(session):
    return [step["order"] for step in session.config["steps"]]


def test_add_step(session):
    step_id = session.add_step(title="Fetch")

    steps = session.config["steps"]
    assert len(steps) == 1
    assert steps[0]["id"] == step_id
    assert steps[0]["title"] == "Fetch"
    assert steps[0]["order"] == 0
    assert steps[0]["type"] == "action"


def test_remove_step_renumbers(session, three_steps):
    session.remove_step(three_steps[0])

    assert _titles(session) == ["B", "C"]
    assert _orders(session) == [0, 1]


def test_update_step(session, three_steps):
    session.update_step(three_steps[1], {"title": "B2", "retries": 2})

    step = session.config["steps"][1]
    assert step["title"] == "B2"
    assert step["retries"] == 2


def test_reorder_steps(session, three_steps):
    session.reorder_steps(three_steps[2], three_steps[0])

    assert _titles(session) == ["C", "A", "B"]
    assert _orders(session) == [0, 1, 2]


def test_reorder_with_unknown_id_is_ignored(session, three_steps):
    session.reorder_steps("missing", three_steps[0])
    assert _titles(session) == ["A", "B", "C"]


def test_children(session, three_steps):
    step_id = three_steps[0]

    template_id = session.add_template(step_id, {"name": "Spec", "type": "document"})
    link_id = session.add_link(step_id, {"label": "Docs", "url": "https://docs.example.com"})
    service_id = session.add_service(step_id, {"name": "CRM", "type": "rest"})

    step = session.config["steps"][0]
    assert [t["id"] for t in step["templates"]] == [template_id]
    assert [link["id"] for link in step["links"]] == [link_id]
    assert [s["id"] for s in step["services"]] == [service_id]

    session.remove_template(step_id, template_id)
    session.remove_link(step_id, link_id)
    session.remove_service(step_id, service_id)

    step = session.config["steps"][0]
    assert step["templates"] == step["links"] == step["services"] == []


def test_builder_operations_notify_once(session):
    callback = Mock()
    session.subscribe(callback)

    session.add_step(title="A")

    callback.assert_called_once()


def test_built_workflow_validates(session, three_steps):
    session.add_template(three_steps[0], {"name": "Spec", "type": "document"})
    generator = MockDocumentGenerator()

    session.generate(generator)

    pipeline, config = generator.calls[0][1:]
    assert pipeline == "workflow"
    assert len(config["steps"]) == 3
    assert config["steps"][0]["templates"][0]["size"] is None
