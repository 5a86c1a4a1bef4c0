"""Base model shared by every pipeline configuration schema."""

from pydantic import BaseModel, ConfigDict


def to_wire_name(name: str) -> str:
    """Convert a snake_case field name to the camelCase key used in stored JSON.

    Digits stay attached to the word they follow, so ``i18n_enabled`` becomes
    ``i18nEnabled`` and ``e2e_framework`` becomes ``e2eFramework``.
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class ConfigModel(BaseModel):
    """
    Base class for configuration blocks.

    Python code uses snake_case attributes; the serialized configuration uses
    camelCase keys. Unknown keys are ignored on validation so they never reach
    a resolved configuration.
    """

    model_config = ConfigDict(
        alias_generator=to_wire_name,
        populate_by_name=True,
        extra="ignore",
    )
