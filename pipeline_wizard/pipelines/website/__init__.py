"""Website pipeline - 19 steps with commerce (11-13) and business (18-19) groups."""

from ...engine.registry import Pipeline
from .migration import LEGACY_MARKERS, migrate_legacy_to_v2
from .predicates import BUSINESS_SERVICE_TYPES, ECOMMERCE_TYPES, is_business_service, is_ecommerce
from .schema import WebsiteConfig

PIPELINE = Pipeline(
    name='website',
    schema=WebsiteConfig,
    legacy_markers=LEGACY_MARKERS,
    migrate=migrate_legacy_to_v2,
    reset_on_import=('importedProjectId', 'importMode'),
)

__all__ = [
    'PIPELINE',
    'WebsiteConfig',
    'LEGACY_MARKERS',
    'migrate_legacy_to_v2',
    'ECOMMERCE_TYPES',
    'BUSINESS_SERVICE_TYPES',
    'is_ecommerce',
    'is_business_service',
]
