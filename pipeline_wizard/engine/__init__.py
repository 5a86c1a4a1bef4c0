"""Wizard engine - schema-agnostic machinery shared by every pipeline."""

from .coercion import fix_arrays, sanitize_field
from .defaults import resolve_defaults
from .generator import DocumentGenerator, MockDocumentGenerator
from .importer import ConfigFileImporter
from .loader import SpecLoader
from .migration import LegacyMarker, find_legacy_marker, ingest_config, is_legacy_shape
from .model import ConfigModel
from .registry import Pipeline, get_pipeline, get_predicate, pipeline_names
from .sanitizer import sanitize_imported_config, validate_config
from .schema import PipelineSpec, StepCategory, StepGroup, WizardStep
from .state import WizardSession, WizardState, open_session
from .store import ConfigStore, InMemoryConfigStore, JsonFileConfigStore, MockConfigStore, SaveResult
from .versioning import VersionTag, envelope, export_config, split_envelope
from .visibility import next_step, prev_step, visible_steps

__all__ = [
    'ConfigModel',
    'resolve_defaults',
    'sanitize_field',
    'fix_arrays',
    'sanitize_imported_config',
    'validate_config',
    'LegacyMarker',
    'find_legacy_marker',
    'is_legacy_shape',
    'ingest_config',
    'VersionTag',
    'split_envelope',
    'envelope',
    'export_config',
    'Pipeline',
    'get_pipeline',
    'get_predicate',
    'pipeline_names',
    'SpecLoader',
    'PipelineSpec',
    'WizardStep',
    'StepGroup',
    'StepCategory',
    'visible_steps',
    'next_step',
    'prev_step',
    'WizardSession',
    'WizardState',
    'open_session',
    'ConfigStore',
    'InMemoryConfigStore',
    'JsonFileConfigStore',
    'MockConfigStore',
    'SaveResult',
    'DocumentGenerator',
    'MockDocumentGenerator',
    'ConfigFileImporter',
]
