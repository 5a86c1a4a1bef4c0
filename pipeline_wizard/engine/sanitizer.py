"""Import sanitizer - rebuilds a well-typed configuration from untrusted JSON."""

import copy
import functools
import json
import logging
import types
from typing import Annotated, Any, Dict, List, Literal, Type, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import ConfigValidationError
from .coercion import sanitize_field
from .defaults import resolve_defaults
from .model import ConfigModel

logger = logging.getLogger(__name__)


def validate_config(schema: Type[ConfigModel], data: Any) -> Dict[str, Any]:
    """
    Validate a configuration against the full schema.

    Validation runs in strict JSON mode: strings are not turned into numbers
    or booleans and enum values must match exactly.

    Args:
        schema: Root configuration model
        data: Candidate configuration

    Returns:
        The validated configuration, dumped by wire name

    Raises:
        ConfigValidationError: If the data does not satisfy the schema
    """
    try:
        payload = json.dumps(data)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Configuration is not JSON-serializable: {exc}") from exc

    try:
        model = schema.model_validate_json(payload, strict=True)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        first = errors[0]
        path = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(first["msg"], path, errors) from exc

    return model.model_dump(by_alias=True, mode="json")


def sanitize_imported_config(raw: Any, schema: Type[ConfigModel]) -> Dict[str, Any]:
    """
    Coerce an arbitrary imported object into a configuration for ``schema``.

    Each schema field is taken from ``raw`` when it has the right kind and
    satisfies its constraints, otherwise from the schema default. Unknown keys
    are dropped. The assembled dict is then checked by ``validate_config``; if
    that still fails, the sanitized dict is returned anyway so an import never
    blocks the user.

    Args:
        raw: Parsed JSON of any shape (None, list, dict, scalars)
        schema: Root configuration model

    Returns:
        Configuration dict with every schema field present
    """
    defaults = resolve_defaults(schema)
    source = raw if isinstance(raw, dict) else {}
    sanitized = _sanitize_model(source, schema, defaults)

    try:
        return validate_config(schema, sanitized)
    except ConfigValidationError as exc:
        logger.warning(
            "Sanitized %s still fails validation, keeping best-effort result: %s",
            schema.__name__, exc.user_message,
        )
        return sanitized


def _sanitize_model(raw: Dict[str, Any], model: Type[BaseModel], defaults: Dict[str, Any]) -> Dict[str, Any]:
    result = {}
    for name, field in model.model_fields.items():
        key = field.alias or name
        fallback = defaults.get(key)
        result[key] = _sanitize_value(raw.get(key), field.annotation, field.metadata, fallback)
    return result


def _sanitize_value(value: Any, annotation: Any, metadata: List[Any], fallback: Any) -> Any:
    if value is None:
        return copy.deepcopy(fallback)

    annotation = _strip_optional(annotation)

    if _is_model(annotation):
        if not isinstance(value, dict):
            return copy.deepcopy(fallback)
        sub_defaults = fallback if isinstance(fallback, dict) else resolve_defaults(annotation)
        return _sanitize_model(value, annotation, sub_defaults)

    origin = get_origin(annotation)

    if origin is Literal:
        allowed = get_args(annotation)
        if any(value == option and type(value) is type(option) for option in allowed):
            return value
        return copy.deepcopy(fallback)

    if origin in (list, List):
        args = get_args(annotation)
        item_type = args[0] if args else Any
        if _is_model(item_type):
            items = _sanitize_model_items(value, item_type)
        else:
            coerced = sanitize_field(value, fallback if isinstance(fallback, list) else [])
            if coerced is fallback:
                return copy.deepcopy(fallback)
            items = [item for item in coerced if _accepts(item_type, [], item)]
        return items if _accepts(annotation, metadata, items) else copy.deepcopy(fallback)

    coerced = sanitize_field(value, fallback) if fallback is not None else value
    if _accepts(annotation, metadata, coerced):
        return coerced
    return copy.deepcopy(fallback)


def _sanitize_model_items(value: Any, item_model: Type[BaseModel]) -> List[Dict[str, Any]]:
    if isinstance(value, dict):
        value = list(value.values())
    if not isinstance(value, list):
        return []

    items = []
    for item in value:
        if not isinstance(item, dict):
            continue
        try:
            validated = item_model.model_validate_json(json.dumps(item), strict=True)
        except (ValidationError, TypeError, ValueError):
            logger.debug("Dropping invalid %s entry: %r", item_model.__name__, item)
            continue
        items.append(validated.model_dump(by_alias=True, mode="json"))
    return items


def _accepts(annotation: Any, metadata: List[Any], value: Any) -> bool:
    """Whether ``value`` satisfies the annotation and its field constraints."""
    if annotation is Any:
        return True
    target = Annotated[(annotation, *metadata)] if metadata else annotation
    try:
        _adapter(target).validate_json(json.dumps(value), strict=True)
    except (ValidationError, TypeError, ValueError):
        return False
    return True


def _strip_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is getattr(types, "UnionType", None):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _adapter(target: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable metadata
        return TypeAdapter(target)


@functools.lru_cache(maxsize=512)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)
