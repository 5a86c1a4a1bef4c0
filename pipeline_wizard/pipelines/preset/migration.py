"""Preset generation 1 -> 2 migration."""

import logging
from typing import Any, Dict, List

from ...engine.migration import LegacyMarker, overlay_blocks
from ...engine.sanitizer import sanitize_imported_config
from .schema import PresetConfig

logger = logging.getLogger(__name__)

# Generation 1 kept everything flat at the top level.
LEGACY_MARKERS = (
    LegacyMarker('businessName', 'string'),
    LegacyMarker('appType', 'string'),
    LegacyMarker('authMethods', 'array', unless_present='meta'),
)


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ''


def migrate_legacy_to_v2(v1: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a flat generation-1 preset into the nested generation-2 blocks.

    Fields without a generation-2 home are dropped; blocks that cannot be
    derived from generation 1 keep their defaults.

    Args:
        v1: Generation-1 preset body (version tag already removed)

    Returns:
        Resolved generation-2 configuration
    """
    auth_methods = _strings(v1.get('authMethods')) or ['email']
    integrations = _strings(v1.get('integrations'))
    theme = v1.get('theme')

    migrated = {
        'meta': {
            'businessName': _text(v1.get('businessName')),
            'industry': _text(v1.get('industry')),
            'description': _text(v1.get('description')),
        },
        'app': {
            'appType': _text(v1.get('appType')),
            'framework': 'nextjs',
            'targetUsers': _strings(v1.get('targetUsers')),
        },
        'auth': {
            'enabled': True,
            'providers': [{'type': method, 'enabled': True} for method in auth_methods],
            'roles': _strings(v1.get('roles')) or ['admin', 'user'],
        },
        'database': {
            'enabled': True,
            'provider': 'postgresql',
            'entities': v1.get('entities') if isinstance(v1.get('entities'), list) else [],
        },
        'features': {
            'coreFeatures': _strings(v1.get('features')),
            'customFeatures': _text(v1.get('customFeatures')),
        },
        'ui': {
            'theme': theme if theme in ('light', 'dark', 'system') else 'system',
            'primaryColor': _text(v1.get('primaryColor')) or '#0066FF',
            'layout': _text(v1.get('layout')) or 'sidebar',
        },
        'integrations': {
            'services': [{'id': name, 'name': name, 'type': 'other'} for name in integrations],
        },
        'deploy': {
            'target': _text(v1.get('deployTarget')) or 'vercel',
            'region': _text(v1.get('region')) or 'auto',
        },
    }

    migrated = overlay_blocks(migrated, v1)
    logger.debug("Migrated preset %r to generation 2", migrated['meta'].get('businessName'))
    return sanitize_imported_config(migrated, PresetConfig)
