"""Default resolution for configuration schemas."""

from typing import Any, Dict, Type

from .model import ConfigModel


def resolve_defaults(schema: Type[ConfigModel]) -> Dict[str, Any]:
    """
    Build the fully populated default configuration for a schema.

    Every block is created by its own default factory, so the result does not
    depend on field order and two calls return equal, independent dicts.

    Args:
        schema: Root (or block) configuration model

    Returns:
        JSON-compatible dict keyed by wire names
    """
    return schema().model_dump(by_alias=True, mode="json")
