"""Pipeline registry - maps discriminators and predicate names to code."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Type

from ..errors import UnknownPipelineError, UnknownPredicateError
from .migration import LegacyMarker
from .model import ConfigModel

logger = logging.getLogger(__name__)

Predicate = Callable[[Dict[str, Any]], bool]


@dataclass(frozen=True)
class Pipeline:
    """
    Everything the engine needs to know about one pipeline.

    Attributes:
        name: Discriminator written into version tags ("preset", "website", ...)
        schema: Root configuration model
        legacy_markers: Ordered generation-1 detection rules
        migrate: Maps a generation-1 body to a resolved configuration
        reset_on_import: Keys restored to their defaults when a session imports
                         a file (they describe the import itself)
        session_class: WizardSession subclass to use, if the pipeline has one
    """

    name: str
    schema: Type[ConfigModel]
    legacy_markers: Tuple[LegacyMarker, ...]
    migrate: Callable[[Dict[str, Any]], Dict[str, Any]]
    reset_on_import: Tuple[str, ...] = ()
    session_class: Optional[type] = field(default=None, compare=False)


_pipelines: Dict[str, Pipeline] = {}
_predicates: Dict[str, Predicate] = {}


def register_pipeline(pipeline: Pipeline) -> None:
    _pipelines[pipeline.name] = pipeline


def register_predicate(name: str, func: Predicate) -> None:
    """Register a step-visibility predicate under a "pipeline.func" name."""
    _predicates[name] = func


def get_pipeline(name: str) -> Pipeline:
    """
    Look up a registered pipeline.

    Raises:
        UnknownPipelineError: If no pipeline is registered under ``name``
    """
    _auto_register_pipelines()
    try:
        return _pipelines[name]
    except KeyError:
        raise UnknownPipelineError(name) from None


def get_predicate(name: str) -> Predicate:
    """
    Look up a visibility predicate by its "pipeline.func" name.

    Raises:
        UnknownPredicateError: If nothing is registered under ``name``
    """
    _auto_register_pipelines()
    try:
        return _predicates[name]
    except KeyError:
        raise UnknownPredicateError(name) from None


def pipeline_names() -> Tuple[str, ...]:
    _auto_register_pipelines()
    return tuple(sorted(_pipelines))


def _auto_register_pipelines() -> None:
    """Register the bundled pipelines and their predicates once."""
    if "website.is_ecommerce" in _predicates:
        return

    from ..pipelines import preset, website, workflow

    register_pipeline(preset.PIPELINE)
    register_pipeline(workflow.PIPELINE)
    register_pipeline(website.PIPELINE)

    register_predicate("website.is_ecommerce", website.is_ecommerce)
    register_predicate("website.is_business_service", website.is_business_service)

    logger.debug("Registered pipelines: %s", ", ".join(sorted(_pipelines)))
