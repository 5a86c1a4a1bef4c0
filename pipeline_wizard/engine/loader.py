"""SpecLoader - loads and validates pipeline step specs from YAML."""

from pathlib import Path
from typing import Dict, Optional

import yaml

from ..errors import SpecNotFoundError
from .schema import PipelineSpec


class SpecLoader:
    """
    Loads pipeline step specs from ``<base_path>/<pipeline>/spec.yaml``.

    Validates structure using Pydantic models. Loaded specs are cached per
    loader instance.
    """

    def __init__(self, base_path: Optional[Path] = None):
        """
        Initialize loader.

        Args:
            base_path: Directory containing one folder per pipeline
                       (default: the bundled pipeline_wizard/pipelines)
        """
        if base_path is None:
            base_path = Path(__file__).resolve().parent.parent / "pipelines"
        self.base_path = Path(base_path)
        self._cache: Dict[str, PipelineSpec] = {}

    def load_pipeline_spec(self, pipeline: str) -> PipelineSpec:
        """
        Load a pipeline step spec from YAML.

        Args:
            pipeline: Name of pipeline (e.g., 'website')

        Returns:
            Validated PipelineSpec instance

        Raises:
            SpecNotFoundError: If spec file doesn't exist
            ValidationError: If YAML doesn't match schema
        """
        if pipeline in self._cache:
            return self._cache[pipeline]

        spec_path = self.base_path / pipeline / "spec.yaml"
        if not spec_path.exists():
            raise SpecNotFoundError(f"Pipeline spec not found: {spec_path}")

        with open(spec_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        spec = PipelineSpec(**data)
        self._cache[pipeline] = spec
        return spec
