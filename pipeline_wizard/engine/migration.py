"""Version detection and the ingestion state machine for external blobs."""

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union

from ..errors import ConfigValidationError, PipelineMismatchError
from .sanitizer import sanitize_imported_config, validate_config
from .versioning import VersionTag, split_envelope

if TYPE_CHECKING:
    from .registry import Pipeline

logger = logging.getLogger(__name__)

MARKER_KINDS = ("string", "array", "boolean", "object", "present")


@dataclass(frozen=True)
class LegacyMarker:
    """
    A structural hint that a blob predates the current schema generation.

    Attributes:
        field: Top-level key to inspect
        kind: What the value must look like for the marker to fire
              ("string", "array", "boolean", "object" or "present")
        unless_present: Key whose presence cancels the marker (e.g. the
                        ``meta`` block only current configurations have)
    """

    field: str
    kind: str
    unless_present: Optional[str] = None

    def __post_init__(self):
        if self.kind not in MARKER_KINDS:
            raise ValueError(f"Unknown legacy marker kind: {self.kind}")

    def matches(self, raw: Dict[str, Any]) -> bool:
        if self.unless_present and raw.get(self.unless_present) is not None:
            return False
        if self.field not in raw:
            return False

        value = raw[self.field]
        if self.kind == "string":
            return isinstance(value, str)
        if self.kind == "array":
            return isinstance(value, list)
        if self.kind == "boolean":
            return isinstance(value, bool)
        if self.kind == "object":
            return isinstance(value, dict)
        return value is not None


def find_legacy_marker(raw: Dict[str, Any], markers: Sequence[LegacyMarker]) -> Optional[LegacyMarker]:
    """Return the first marker (in declaration order) that fires, if any."""
    for marker in markers:
        if marker.matches(raw):
            return marker
    return None


def is_legacy_shape(
    raw: Any,
    markers: Sequence[LegacyMarker],
    tag: Optional[VersionTag] = None,
) -> bool:
    """
    Decide whether a blob is a generation-1 configuration.

    An explicit version tag wins over sniffing. Without one, the pipeline's
    legacy markers are checked in order.

    Args:
        raw: Configuration body (without its version tag)
        markers: Ordered legacy markers for the pipeline
        tag: Version tag split off the stored blob, if there was one

    Returns:
        True when the blob should go through the migrator
    """
    if not isinstance(raw, dict):
        return False

    if tag is not None and tag.is_legacy is not None:
        return tag.is_legacy

    return find_legacy_marker(raw, markers) is not None


def overlay_blocks(migrated: Dict[str, Any], raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy current-generation blocks found in ``raw`` over a migrated config.

    Used at the end of each migrator so that a current configuration that was
    classified as legacy keeps every block it already had.
    """
    result = dict(migrated)
    for key, value in raw.items():
        if not isinstance(value, dict):
            continue
        current = result.get(key)
        result[key] = {**current, **copy.deepcopy(value)} if isinstance(current, dict) else copy.deepcopy(value)
    return result


def ingest_config(raw: Any, pipeline: Union[str, "Pipeline"]) -> Dict[str, Any]:
    """
    Turn any external blob into a configuration for ``pipeline``.

    Flow::

        raw -> strip version tag -> legacy? -> migrate
                                  -> current -> validate -> ok -> config
                                                         -> fails -> sanitize

    Malformed input never raises; it degrades to defaults field by field.

    Args:
        raw: Parsed JSON (from a file import or a stored blob)
        pipeline: Pipeline name or registered Pipeline

    Returns:
        Resolved configuration dict

    Raises:
        PipelineMismatchError: If the blob is tagged for another pipeline
        UnknownPipelineError: If ``pipeline`` names no registered pipeline
    """
    from .registry import get_pipeline

    if isinstance(pipeline, str):
        pipeline = get_pipeline(pipeline)

    if not isinstance(raw, dict):
        logger.debug("Ignoring non-object %s import of type %s", pipeline.name, type(raw).__name__)
        return sanitize_imported_config({}, pipeline.schema)

    tag, body = split_envelope(raw)
    if tag is not None and tag.type is not None and tag.type != pipeline.name:
        raise PipelineMismatchError(pipeline.name, tag.type)

    if is_legacy_shape(body, pipeline.legacy_markers, tag):
        marker = find_legacy_marker(body, pipeline.legacy_markers)
        logger.info(
            "Migrating legacy %s configuration (marker: %s)",
            pipeline.name, marker.field if marker else f"version {tag.version}",
        )
        return pipeline.migrate(body)

    try:
        return validate_config(pipeline.schema, body)
    except ConfigValidationError as exc:
        logger.info("Imported %s configuration needs sanitizing: %s", pipeline.name, exc.user_message)
        return sanitize_imported_config(body, pipeline.schema)
