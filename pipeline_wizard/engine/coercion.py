"""Field-level coercion of untyped values against a typed fallback."""

from typing import Any, Dict


def sanitize_field(raw: Any, fallback: Any) -> Any:
    """
    Coerce an arbitrary value so that it has the runtime type of ``fallback``.

    Args:
        raw: Untrusted value (from a JSON import or a stored blob)
        fallback: Default value; its type decides what is accepted

    Returns:
        ``raw`` when it already has the right kind, a filtered or merged
        version of it for lists and dicts, otherwise ``fallback``
    """
    if raw is None:
        return fallback

    # bool before numbers: True is an int in Python
    if isinstance(fallback, bool):
        return raw if isinstance(raw, bool) else fallback

    if isinstance(fallback, (int, float)):
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return raw
        return fallback

    if isinstance(fallback, str):
        return raw if isinstance(raw, str) else fallback

    if isinstance(fallback, list):
        if isinstance(raw, list):
            return [item for item in raw if isinstance(item, str)]
        if isinstance(raw, dict):
            # {"0": "a", "1": "b"} is the same list after a lossy round-trip
            return [item for item in raw.values() if isinstance(item, str)]
        return fallback

    if isinstance(fallback, dict):
        if not isinstance(raw, dict):
            return fallback
        return {key: sanitize_field(raw.get(key), default) for key, default in fallback.items()}

    return fallback


def fix_arrays(value: Any) -> Any:
    """Turn objects whose keys are all consecutive integers back into lists.

    Form serializers sometimes submit ``["a", "b"]`` as ``{"0": "a", "1": "b"}``.
    Applied recursively.
    """
    if isinstance(value, list):
        return [fix_arrays(item) for item in value]

    if isinstance(value, dict):
        if value and _has_index_keys(value):
            ordered = sorted(value.items(), key=lambda item: int(item[0]))
            return [fix_arrays(item) for _, item in ordered]
        return {key: fix_arrays(item) for key, item in value.items()}

    return value


def _has_index_keys(value: Dict[str, Any]) -> bool:
    keys = list(value.keys())
    if not all(isinstance(key, str) and key.isascii() and key.isdigit() for key in keys):
        return False
    return sorted(int(key) for key in keys) == list(range(len(keys)))
