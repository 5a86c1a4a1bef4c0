"""Step visibility resolver.

Pure functions over a PipelineSpec and a configuration; nothing here moves
the current step of a session.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .registry import get_predicate
from .schema import PipelineSpec


def visible_steps(
    spec: PipelineSpec,
    config: Dict[str, Any],
    predicates: Optional[Mapping[str, Callable[[Dict[str, Any]], bool]]] = None,
) -> List[int]:
    """
    Compute the ordered list of reachable step ordinals.

    A step is hidden when any group containing it has a false predicate.
    Visible steps keep their canonical numeric order.

    Args:
        spec: Pipeline step spec
        config: Live configuration
        predicates: Optional name -> function overrides (tests); by default
                    names are resolved through the registry

    Returns:
        Visible ordinals in ascending order

    Raises:
        UnknownPredicateError: If a group names an unregistered predicate
    """
    hidden = set()
    for group in spec.groups:
        if predicates is not None and group.when in predicates:
            predicate = predicates[group.when]
        else:
            predicate = get_predicate(group.when)
        if not predicate(config):
            hidden.update(group.steps)

    return [number for number in spec.step_numbers if number not in hidden]


def next_step(visible: Sequence[int], current: int) -> Optional[int]:
    """Following visible ordinal, or None at the end or when ``current`` is hidden."""
    if current not in visible:
        return None
    index = list(visible).index(current)
    if index >= len(visible) - 1:
        return None
    return visible[index + 1]


def prev_step(visible: Sequence[int], current: int) -> Optional[int]:
    """Preceding visible ordinal, or None at the start or when ``current`` is hidden."""
    if current not in visible:
        return None
    index = list(visible).index(current)
    if index == 0:
        return None
    return visible[index - 1]
