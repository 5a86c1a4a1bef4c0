"""Workflow generation 1 -> 2 migration."""

import logging
import uuid
from typing import Any, Dict, List

from ...engine.migration import LegacyMarker, overlay_blocks
from ...engine.sanitizer import sanitize_imported_config
from .schema import WorkflowConfig, WorkflowStep

logger = logging.getLogger(__name__)

# Generation 1 had flat lists where generation 2 has blocks.
LEGACY_MARKERS = (
    LegacyMarker('features', 'array'),
    LegacyMarker('aiIntegrations', 'array'),
    LegacyMarker('authEnabled', 'boolean'),
    LegacyMarker('deployTarget', 'string'),
    LegacyMarker('steps', 'present', unless_present='meta'),
)

# Generation 1 used the product name, generation 2 the vendor.
PROVIDER_RENAMES = {'claude': 'anthropic'}


def new_id() -> str:
    return uuid.uuid4().hex[:9]


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ''


def _migrate_steps(steps: Any) -> List[Dict[str, Any]]:
    if not isinstance(steps, list):
        return []

    migrated = []
    for index, step in enumerate(item for item in steps if isinstance(item, dict)):
        defaults = WorkflowStep(id=new_id(), order=index).model_dump(by_alias=True, mode='json')
        merged = {**defaults, **step}
        if not isinstance(merged.get('id'), str) or not merged['id']:
            merged['id'] = defaults['id']
        if not isinstance(merged.get('order'), int) or isinstance(merged['order'], bool):
            merged['order'] = index
        migrated.append(merged)
    return migrated


def _migrate_ai_integrations(integrations: Any) -> List[Dict[str, Any]]:
    if not isinstance(integrations, list):
        return []

    providers = []
    for item in integrations:
        if not isinstance(item, dict) or not isinstance(item.get('provider'), str):
            continue
        name = PROVIDER_RENAMES.get(item['provider'], item['provider'])
        config = item.get('config') if isinstance(item.get('config'), dict) else {}
        providers.append({
            'id': name,
            'provider': name,
            'enabled': item.get('enabled') is True,
            'mode': item.get('mode', 'service'),
            'model': _text(config.get('model')),
            'endpoint': _text(config.get('endpoint')),
        })
    return providers


def migrate_legacy_to_v2(v1: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a flat generation-1 workflow into the generation-2 blocks.

    Steps are kept and filled up with the generation-2 step fields; AI
    integrations become providers (``claude`` is renamed ``anthropic`` and the
    nested ``config`` is flattened).

    Args:
        v1: Generation-1 workflow body (version tag already removed)

    Returns:
        Resolved generation-2 configuration
    """
    features = v1.get('features')
    ai_integrations = v1.get('aiIntegrations')

    migrated = {
        'steps': _migrate_steps(v1.get('steps')),
        'features': {
            'featureIds': _strings(features),
            'customFeatures': _text(v1.get('customFeatures')),
        },
        'auth': {
            'enabled': v1.get('authEnabled') is True,
            'methods': [{'type': method, 'enabled': True} for method in _strings(v1.get('authMethods'))],
            'roles': _strings(v1.get('roles')),
        },
        'ui': {
            'theme': v1.get('theme', 'system'),
            'primaryColor': _text(v1.get('primaryColor')) or '#0ea5e9',
            'layout': v1.get('layout', 'sidebar'),
        },
        'aiIntegrations': {
            'providers': _migrate_ai_integrations(ai_integrations),
        },
        'deployment': {
            'target': v1.get('deployTarget', ''),
            'region': _text(v1.get('region')),
        },
    }

    migrated = overlay_blocks(migrated, v1)
    logger.debug("Migrated workflow with %d steps to generation 2", len(migrated['steps']))
    return sanitize_imported_config(migrated, WorkflowConfig)
