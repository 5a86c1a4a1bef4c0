"""Website generation 1 -> 2 migration.

Generation 1 allowed a single ``websiteType`` and kept the brand fields flat
at the top level; generation 2 has a ``websiteTypes`` list and moves the
brand fields into ``corporateIdentity``.
"""

import logging
from typing import Any, Dict

from ...engine.migration import LegacyMarker
from ...engine.sanitizer import sanitize_imported_config
from .schema import WebsiteConfig

logger = logging.getLogger(__name__)

FLAT_CI_FIELDS = ('brandColors', 'fontPrimary', 'fontSecondary', 'brandUrl', 'brandNotes')

LEGACY_MARKERS = (
    LegacyMarker('websiteType', 'string'),
    *(LegacyMarker(name, 'present', unless_present='corporateIdentity') for name in FLAT_CI_FIELDS),
)


def migrate_legacy_to_v2(v1: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a generation-1 website into the generation-2 shape.

    Args:
        v1: Generation-1 website body (version tag already removed)

    Returns:
        Resolved generation-2 configuration
    """
    migrated = {
        key: value for key, value in v1.items()
        if key != 'websiteType' and key not in FLAT_CI_FIELDS
    }

    website_types = v1.get('websiteTypes')
    website_types = list(website_types) if isinstance(website_types, list) else []
    website_type = v1.get('websiteType')
    if isinstance(website_type, str) and website_type and website_type not in website_types:
        website_types.insert(0, website_type)
    migrated['websiteTypes'] = website_types

    corporate_identity = {name: v1[name] for name in FLAT_CI_FIELDS if name in v1}
    if isinstance(v1.get('corporateIdentity'), dict):
        corporate_identity.update(v1['corporateIdentity'])
    migrated['corporateIdentity'] = corporate_identity

    logger.debug("Migrated website with types %s to generation 2", website_types)
    return sanitize_imported_config(migrated, WebsiteConfig)
