"""Exception types raised by the pipeline wizard."""

from typing import Optional


class PipelineWizardError(Exception):
    """Base class for all pipeline wizard errors."""


class UnknownPipelineError(PipelineWizardError, KeyError):
    """Raised when a pipeline discriminator has no registered schema."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown pipeline: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class PipelineMismatchError(PipelineWizardError, ValueError):
    """Raised when a stored blob is tagged for a different pipeline."""

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Configuration is tagged as {found!r} but was loaded into the {expected!r} pipeline"
        )


class ConfigValidationError(PipelineWizardError, ValueError):
    """Raised when a configuration fails full-schema validation.

    Attributes:
        message: First validation message reported by the schema
        path: Dotted path of the offending field (empty for the root)
    """

    def __init__(self, message: str, path: str = "", errors: Optional[list] = None):
        self.message = message
        self.path = path
        self.errors = errors or []
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        """Message in the form shown to users after a failed save."""
        if self.path:
            return f"{self.message} (field: {self.path})"
        return self.message


class SpecNotFoundError(PipelineWizardError, FileNotFoundError):
    """Raised when a pipeline step spec file does not exist."""


class UnknownPredicateError(PipelineWizardError, KeyError):
    """Raised when a step group names a predicate that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown visibility predicate: {name!r}")

    def __str__(self) -> str:
        return self.args[0]
