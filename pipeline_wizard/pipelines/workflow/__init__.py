"""Workflow pipeline - 18 steps, no conditional groups, plus a steps builder."""

from ...engine.registry import Pipeline
from .migration import LEGACY_MARKERS, migrate_legacy_to_v2
from .schema import WorkflowConfig
from .session import WorkflowWizardSession

PIPELINE = Pipeline(
    name='workflow',
    schema=WorkflowConfig,
    legacy_markers=LEGACY_MARKERS,
    migrate=migrate_legacy_to_v2,
    session_class=WorkflowWizardSession,
)

__all__ = ['PIPELINE', 'WorkflowConfig', 'WorkflowWizardSession', 'LEGACY_MARKERS', 'migrate_legacy_to_v2']
