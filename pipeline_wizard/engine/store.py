"""ConfigStore interface - persistence of finished configurations."""

import copy
import json
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..errors import ConfigValidationError
from ..settings import SCHEMA_VERSION
from .coercion import fix_arrays
from .migration import find_legacy_marker, is_legacy_shape
from .registry import Pipeline, get_pipeline
from .sanitizer import validate_config
from .versioning import envelope, split_envelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    """Outcome of ``ConfigStore.save``; exactly one of error/id is set."""

    error: Optional[str] = None
    id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ConfigStore(ABC):
    """Interface for persisting configurations."""

    @abstractmethod
    def save(self, existing_id: Optional[str], config: Dict[str, Any]) -> SaveResult:
        """Create (existing_id None) or update a stored configuration."""
        pass

    @abstractmethod
    def load(self, config_id: str) -> Optional[Dict[str, Any]]:
        """Return the stored (tagged) blob, or None if there is none."""
        pass


class PipelineConfigStore(ConfigStore):
    """
    Base for stores that own the save-time contract of one pipeline.

    Before anything is written the configuration is repaired (objects with
    index keys back into lists), migrated when it still has a legacy shape,
    validated against the schema and wrapped in a version tag. Validation
    failures come back as ``SaveResult(error="<message> (field: <path>)")``.
    """

    def __init__(self, pipeline: Union[str, Pipeline], version: str = SCHEMA_VERSION):
        self.pipeline = get_pipeline(pipeline) if isinstance(pipeline, str) else pipeline
        self.version = version

    def prepare(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Produce the tagged document that will be persisted.

        Raises:
            ConfigValidationError: If the configuration fails validation
        """
        data = fix_arrays(copy.deepcopy(config))
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration must be a JSON object")

        tag, body = split_envelope(data)
        if is_legacy_shape(body, self.pipeline.legacy_markers, tag):
            marker = find_legacy_marker(body, self.pipeline.legacy_markers)
            logger.info("Auto-migrating legacy %s configuration on save (%s)",
                        self.pipeline.name, marker.field if marker else "version tag")
            body = self.pipeline.migrate(body)

        validated = validate_config(self.pipeline.schema, body)
        return envelope(validated, self.pipeline.name, self.version)

    def save(self, existing_id: Optional[str], config: Dict[str, Any]) -> SaveResult:
        try:
            document = self.prepare(config)
        except ConfigValidationError as exc:
            return SaveResult(error=exc.user_message)

        config_id = existing_id or uuid.uuid4().hex
        error = self._write(config_id, document, is_new=not existing_id)
        if error:
            return SaveResult(error=error)
        return SaveResult(id=config_id)

    @abstractmethod
    def _write(self, config_id: str, document: Dict[str, Any], is_new: bool) -> Optional[str]:
        """Persist a prepared document; return an error message on failure."""
        pass


class InMemoryConfigStore(PipelineConfigStore):
    """Keeps documents in a dict; useful for embedding and tests."""

    def __init__(self, pipeline: Union[str, Pipeline], version: str = SCHEMA_VERSION):
        super().__init__(pipeline, version)
        self.records: Dict[str, Dict[str, Any]] = {}

    def _write(self, config_id, document, is_new):
        if not is_new and config_id not in self.records:
            return f"Project not found: {config_id}"
        self.records[config_id] = document
        return None

    def load(self, config_id: str) -> Optional[Dict[str, Any]]:
        document = self.records.get(config_id)
        return copy.deepcopy(document) if document is not None else None


class JsonFileConfigStore(PipelineConfigStore):
    """Stores each document as ``<directory>/<pipeline>/<id>.json``."""

    def __init__(self, pipeline: Union[str, Pipeline], directory: Union[str, Path],
                 version: str = SCHEMA_VERSION):
        super().__init__(pipeline, version)
        self.directory = Path(directory) / self.pipeline.name

    def _path(self, config_id: str) -> Optional[Path]:
        # ids name a file directly below the pipeline directory
        if not config_id or "/" in config_id or "\\" in config_id or ".." in config_id:
            return None
        return self.directory / f"{config_id}.json"

    def _write(self, config_id, document, is_new):
        path = self._path(config_id)
        if path is None:
            return f"Invalid project id: {config_id}"
        if not is_new and not path.exists():
            return f"Project not found: {config_id}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
        except OSError as exc:
            logger.error("Could not write %s: %s", path, exc)
            return str(exc)
        logger.debug("Wrote %s", path)
        return None

    def load(self, config_id: str) -> Optional[Dict[str, Any]]:
        path = self._path(config_id)
        if path is None or not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)


class MockConfigStore(ConfigStore):
    """Mock for testing - records calls."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.responses: Dict[str, Any] = {}
        self.documents: Dict[str, Dict[str, Any]] = {}

    def save(self, existing_id, config):
        self.calls.append(('save', existing_id, config))
        if 'save' in self.responses:
            return self.responses['save']
        config_id = existing_id or f"mock-{len(self.documents) + 1}"
        self.documents[config_id] = config
        return SaveResult(id=config_id)

    def load(self, config_id):
        self.calls.append(('load', config_id))
        return self.documents.get(config_id)
