"""DocumentGenerator interface - consumers of a finished configuration."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class DocumentGenerator(ABC):
    """
    Produces a derived document (prompt, concept, spec) from a configuration.

    Implementations receive a resolved, schema-valid copy and must treat it
    as read-only.
    """

    @abstractmethod
    def generate(self, pipeline: str, config: Dict[str, Any]) -> Any:
        pass


class MockDocumentGenerator(DocumentGenerator):
    """Mock for testing - records calls."""

    def __init__(self, result: Any = ""):
        self.calls: List[tuple] = []
        self.result = result

    def generate(self, pipeline, config):
        self.calls.append(('generate', pipeline, config))
        return self.result
