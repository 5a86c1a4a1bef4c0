"""Visibility predicates for the conditional website steps."""

from typing import Any, Dict, List

ECOMMERCE_TYPES = ('ecommerce', 'e-commerce', 'marketplace', 'saas-product')
BUSINESS_SERVICE_TYPES = ('business-service',)


def _website_types(config: Dict[str, Any]) -> List[str]:
    types = config.get('websiteTypes')
    if not isinstance(types, list):
        return []
    return [t for t in types if isinstance(t, str)]


def is_ecommerce(config: Dict[str, Any]) -> bool:
    """Products, payments and shipping steps (11-13)."""
    return any(t in ECOMMERCE_TYPES for t in _website_types(config))


def is_business_service(config: Dict[str, Any]) -> bool:
    """Business modules and directory steps (18-19)."""
    return any(t in BUSINESS_SERVICE_TYPES for t in _website_types(config))
