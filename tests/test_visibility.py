"""Tests for the step visibility resolver."""

import pytest

from pipeline_wizard.engine.loader import SpecLoader
from pipeline_wizard.engine.schema import PipelineSpec
from pipeline_wizard.engine.visibility import next_step, prev_step, visible_steps
from pipeline_wizard.errors import UnknownPredicateError

ALWAYS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 14, 15, 16, 17]


@pytest.fixture(scope="module")
def website_spec():
    return SpecLoader().load_pipeline_spec("website")


@pytest.fixture
def demo_spec():
    """Five steps; 2-3 shown when 'extra' is set, 5 when 'final' is set."""
    return PipelineSpec(
        pipeline="demo",
        version="1",
        description="Demo",
        steps=[{"number": n, "id": f"s{n}", "label": f"Step {n}"} for n in range(1, 6)],
        groups=[
            {"id": "extra", "steps": [2, 3], "when": "demo.extra"},
            {"id": "final", "steps": [5], "when": "demo.final"},
        ],
    )


@pytest.fixture
def demo_predicates():
    return {
        "demo.extra": lambda config: config.get("extra") is True,
        "demo.final": lambda config: config.get("final") is True,
    }


def test_ecommerce_types_show_commerce_steps(website_spec):
    visible = visible_steps(website_spec, {"websiteTypes": ["e-commerce"]})

    assert {11, 12, 13} <= set(visible)
    assert 18 not in visible


def test_other_types_hide_commerce_steps(website_spec):
    visible = visible_steps(website_spec, {"websiteTypes": ["blog"]})

    assert not {11, 12, 13} & set(visible)
    assert visible == ALWAYS


def test_business_service_steps(website_spec):
    visible = visible_steps(website_spec, {"websiteTypes": ["business-service", "marketplace"]})
    assert visible == list(range(1, 20))


def test_malformed_types_hide_conditional_steps(website_spec):
    assert visible_steps(website_spec, {"websiteTypes": "ecommerce"}) == ALWAYS
    assert visible_steps(website_spec, {}) == ALWAYS


def test_visibility_is_monotone(demo_spec, demo_predicates):
    """Turning a predicate on only adds its group's steps."""
    base = visible_steps(demo_spec, {}, demo_predicates)
    extra = visible_steps(demo_spec, {"extra": True}, demo_predicates)
    both = visible_steps(demo_spec, {"extra": True, "final": True}, demo_predicates)

    assert base == [1, 4]
    assert extra == [1, 2, 3, 4]
    assert both == [1, 2, 3, 4, 5]
    assert set(base) <= set(extra) <= set(both)


def test_unknown_predicate_raises(demo_spec):
    with pytest.raises(UnknownPredicateError, match="demo.extra"):
        visible_steps(demo_spec, {})


def test_overrides_fall_back_to_registry(website_spec):
    visible = visible_steps(
        website_spec,
        {"websiteTypes": ["business-service"]},
        {"website.is_ecommerce": lambda config: True},
    )
    assert visible == list(range(1, 20))


@pytest.mark.parametrize("current,expected", [(1, 2), (9, 10), (10, 14), (17, None), (11, None)])
def test_next_step(current, expected):
    assert next_step(ALWAYS, current) == expected


@pytest.mark.parametrize("current,expected", [(1, None), (14, 10), (17, 16), (12, None)])
def test_prev_step(current, expected):
    assert prev_step(ALWAYS, current) == expected


def test_toggling_selector_restores_visible_steps(website_spec):
    config = {"websiteTypes": ["blog"]}
    before = visible_steps(website_spec, config)

    config["websiteTypes"] = ["blog", "ecommerce", "business-service"]
    visible_steps(website_spec, config)
    config["websiteTypes"] = ["blog"]

    assert visible_steps(website_spec, config) == before
