"""WizardSession - live configuration, step pointer and completion flag."""

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple, Union

from .defaults import resolve_defaults
from .loader import SpecLoader
from .migration import ingest_config
from .registry import Pipeline, get_pipeline
from .sanitizer import validate_config
from .schema import PipelineSpec
from .visibility import next_step, prev_step, visible_steps

if TYPE_CHECKING:
    from .generator import DocumentGenerator
    from .store import ConfigStore, SaveResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WizardState:
    """Immutable snapshot handed to subscribers."""

    config: Dict[str, Any]
    current_step: int
    is_complete: bool
    visible_steps: Tuple[int, ...]


Subscriber = Callable[[WizardState], None]


class WizardSession:
    """
    Owns one wizard's configuration while it is being edited.

    All mutation is synchronous. Views observe changes through ``subscribe``;
    every callback receives a deep-copied WizardState, and stores receive a
    deep copy at save time, so nothing outside the session shares the live
    dict.
    """

    def __init__(
        self,
        pipeline: Union[str, Pipeline],
        spec: Optional[PipelineSpec] = None,
        config: Optional[Dict[str, Any]] = None,
        loader: Optional[SpecLoader] = None,
    ):
        """
        Initialize a session on step 1.

        Args:
            pipeline: Pipeline name or registered Pipeline
            spec: Step spec (default: loaded from the pipeline's spec.yaml)
            config: Initial configuration (default: schema defaults)
            loader: SpecLoader used when ``spec`` is not given
        """
        self.pipeline = get_pipeline(pipeline) if isinstance(pipeline, str) else pipeline
        if spec is None:
            spec = (loader or SpecLoader()).load_pipeline_spec(self.pipeline.name)
        self.spec = spec

        self._config = copy.deepcopy(config) if config is not None else resolve_defaults(self.pipeline.schema)
        self._current_step = 1
        self._is_complete = False
        self._subscribers: List[Subscriber] = []
        self.project_id: Optional[str] = None

    # -- read access -------------------------------------------------------

    @property
    def config(self) -> Dict[str, Any]:
        """Deep copy of the live configuration."""
        return copy.deepcopy(self._config)

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @property
    def visible_steps(self) -> List[int]:
        return visible_steps(self.spec, self._config)

    @property
    def total_steps(self) -> int:
        return len(self.visible_steps)

    def snapshot(self) -> WizardState:
        return WizardState(
            config=copy.deepcopy(self._config),
            current_step=self._current_step,
            is_complete=self._is_complete,
            visible_steps=tuple(self.visible_steps),
        )

    # -- mutation ----------------------------------------------------------

    def update(self, partial: Dict[str, Any]) -> None:
        """
        Merge a partial configuration into the live one.

        Top-level values replace; dict values are merged one level deep so
        that ``{"auth": {"mfa": True}}`` keeps the other ``auth`` fields.
        Keys that are not part of the configuration are ignored.

        If the change hides the current step, the session moves to the
        nearest earlier visible step (or the first one).
        """
        for key, value in partial.items():
            if key not in self._config:
                logger.warning("Ignoring unknown %s configuration key: %s", self.pipeline.name, key)
                continue

            current = self._config[key]
            if isinstance(value, dict) and isinstance(current, dict):
                self._config[key] = {**current, **copy.deepcopy(value)}
            else:
                self._config[key] = copy.deepcopy(value)

        self._relocate_if_hidden()
        self._notify()

    def import_config(self, raw: Any) -> None:
        """
        Replace the configuration with an ingested blob.

        Resets the step pointer to 1 and clears the completion flag.

        Raises:
            PipelineMismatchError: If the blob is tagged for another pipeline
        """
        config = ingest_config(raw, self.pipeline)

        if self.pipeline.reset_on_import:
            defaults = resolve_defaults(self.pipeline.schema)
            for key in self.pipeline.reset_on_import:
                config[key] = defaults[key]

        self._config = config
        self._current_step = 1
        self._is_complete = False
        logger.info("Imported %s configuration", self.pipeline.name)
        self._notify()

    def set_step(self, number: int) -> None:
        """Jump to a step. Callers pass ordinals taken from ``visible_steps``."""
        self._current_step = number
        self._notify()

    def next(self) -> Optional[int]:
        """
        Advance to the next visible step.

        Returns:
            The new step, or None when the current step was the last visible
            one (the session is then marked complete)
        """
        visible = self.visible_steps
        target = next_step(visible, self._current_step)
        if target is None and self._current_step not in visible:
            target = next((number for number in visible if number > self._current_step), None)

        if target is None:
            self._is_complete = True
        else:
            self._current_step = target
        self._notify()
        return target

    def previous(self) -> Optional[int]:
        """Go back to the previous visible step; None when already on the first."""
        visible = self.visible_steps
        target = prev_step(visible, self._current_step)
        if target is None and self._current_step not in visible:
            earlier = [number for number in visible if number < self._current_step]
            target = earlier[-1] if earlier else None

        if target is not None:
            self._current_step = target
            self._notify()
        return target

    def complete(self, is_complete: bool = True) -> None:
        self._is_complete = is_complete
        self._notify()

    def reset(self) -> None:
        """Discard edits and start over from the schema defaults."""
        self._config = resolve_defaults(self.pipeline.schema)
        self._current_step = 1
        self._is_complete = False
        self.project_id = None
        self._notify()

    # -- observers ---------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Function that removes the listener again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        if not self._subscribers:
            return
        state = self.snapshot()
        for callback in list(self._subscribers):
            callback(state)

    def _relocate_if_hidden(self) -> None:
        visible = self.visible_steps
        if not visible or self._current_step in visible:
            return
        earlier = [number for number in visible if number < self._current_step]
        target = earlier[-1] if earlier else visible[0]
        logger.debug("Step %s is hidden now, moving to step %s", self._current_step, target)
        self._current_step = target

    # -- collaborators -----------------------------------------------------

    def save(self, store: "ConfigStore", existing_id: Optional[str] = None) -> "SaveResult":
        """
        Hand a copy of the configuration to a store.

        Args:
            store: Persistence adapter
            existing_id: Id of the record to update (default: the id returned
                         by the last successful save, if any)

        Returns:
            The store's SaveResult, unchanged; errors are not retried
        """
        target_id = existing_id if existing_id is not None else self.project_id
        result = store.save(target_id, copy.deepcopy(self._config))
        if result.error:
            logger.warning("Saving %s configuration failed: %s", self.pipeline.name, result.error)
        else:
            self.project_id = result.id
        return result

    def generate(self, generator: "DocumentGenerator") -> Any:
        """
        Pass the resolved, validated configuration to a document generator.

        Raises:
            ConfigValidationError: If the live configuration is not schema-valid
        """
        resolved = validate_config(self.pipeline.schema, self._config)
        return generator.generate(self.pipeline.name, resolved)


def open_session(pipeline: Union[str, Pipeline], **kwargs: Any) -> WizardSession:
    """Create a session using the pipeline's own session class when it has one."""
    if isinstance(pipeline, str):
        pipeline = get_pipeline(pipeline)
    session_class = pipeline.session_class or WizardSession
    return session_class(pipeline, **kwargs)
