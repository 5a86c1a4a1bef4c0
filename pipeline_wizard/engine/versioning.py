"""Version tags on stored configurations."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..settings import SCHEMA_VERSION

# Discriminators a stored blob may carry. "game" is written by another
# product line and has no schema here.
PIPELINE_TYPES = ("preset", "workflow", "website", "game")

CURRENT_MAJOR = 2


@dataclass(frozen=True)
class VersionTag:
    """Out-of-band (type, version) marker stored next to a configuration."""

    type: Optional[str] = None
    version: Optional[str] = None

    @property
    def major(self) -> Optional[int]:
        """Major component of ``version`` or None when it is not parseable."""
        if not self.version:
            return None
        head = self.version.lstrip("vV").split(".", 1)[0]
        return int(head) if head.isascii() and head.isdigit() else None

    @property
    def is_legacy(self) -> Optional[bool]:
        """True/False when the version decides the generation, None when it cannot."""
        major = self.major
        if major is None:
            return None
        return major < CURRENT_MAJOR


def split_envelope(raw: Dict[str, Any]) -> Tuple[Optional[VersionTag], Dict[str, Any]]:
    """
    Separate the version tag from a stored configuration.

    Only string-valued top-level ``type``/``version`` keys count as a tag; any
    other value under those names is left in the body for the sanitizer to
    discard.

    Args:
        raw: Stored or uploaded configuration dict

    Returns:
        Tuple of (tag or None, body without tag keys)
    """
    tag_type = raw.get("type") if isinstance(raw.get("type"), str) else None
    tag_version = raw.get("version") if isinstance(raw.get("version"), str) else None

    if tag_type is None and tag_version is None:
        return None, dict(raw)

    body = {
        key: value
        for key, value in raw.items()
        if not (key == "type" and tag_type is not None) and not (key == "version" and tag_version is not None)
    }
    return VersionTag(tag_type, tag_version), body


def envelope(config: Dict[str, Any], pipeline: str, version: str = SCHEMA_VERSION) -> Dict[str, Any]:
    """Prefix a configuration with its version tag for server-side storage."""
    return {"type": pipeline, "version": version, **config}


def export_config(config: Dict[str, Any]) -> str:
    """Serialize a configuration for download; exported files carry no tag."""
    _, body = split_envelope(config)
    return json.dumps(body, indent=2, ensure_ascii=False)
