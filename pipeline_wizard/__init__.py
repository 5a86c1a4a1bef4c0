"""Pipeline wizard - versioned configuration schemas, step visibility and legacy migration."""

from .engine import (
    ConfigFileImporter,
    ingest_config,
    open_session,
    resolve_defaults,
    sanitize_imported_config,
    WizardSession,
)
from .errors import (
    ConfigValidationError,
    PipelineMismatchError,
    PipelineWizardError,
    SpecNotFoundError,
    UnknownPipelineError,
    UnknownPredicateError,
)

__version__ = "2.0.0"

__all__ = [
    'ConfigFileImporter',
    'ingest_config',
    'open_session',
    'resolve_defaults',
    'sanitize_imported_config',
    'WizardSession',
    'ConfigValidationError',
    'PipelineMismatchError',
    'PipelineWizardError',
    'SpecNotFoundError',
    'UnknownPipelineError',
    'UnknownPredicateError',
]
