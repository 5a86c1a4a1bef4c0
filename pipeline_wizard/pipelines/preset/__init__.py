"""Preset (app) pipeline - 16 steps, no conditional groups."""

from ...engine.registry import Pipeline
from .migration import LEGACY_MARKERS, migrate_legacy_to_v2
from .schema import PresetConfig

PIPELINE = Pipeline(
    name='preset',
    schema=PresetConfig,
    legacy_markers=LEGACY_MARKERS,
    migrate=migrate_legacy_to_v2,
)

__all__ = ['PIPELINE', 'PresetConfig', 'LEGACY_MARKERS', 'migrate_legacy_to_v2']
