"""Pydantic models for pipeline step specs (spec.yaml)."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WizardStep(BaseModel):
    """One screen of a pipeline wizard, identified by its fixed ordinal."""

    model_config = ConfigDict(extra="allow")

    number: int = Field(..., ge=1, description="Fixed ordinal of the step (1..N)")
    id: str = Field(..., description="Unique step identifier (e.g., 'corporate_identity')")
    label: str = Field(..., description="Short label shown in the step navigation")


class StepGroup(BaseModel):
    """
    A set of steps that are shown or hidden together.

    The group is visible while its predicate returns True for the live
    configuration; steps outside every group are always visible.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Group identifier (e.g., 'commerce')")
    steps: List[int] = Field(..., description="Ordinals of the steps in the group")
    when: str = Field(..., description="Predicate name (e.g., 'website.is_ecommerce')")


class StepCategory(BaseModel):
    """Navigation grouping of steps; has no effect on visibility."""

    id: str = Field(..., description="Category identifier")
    label: str = Field(..., description="Category label")
    steps: List[int] = Field(default_factory=list, description="Ordinals in the category")


class PipelineSpec(BaseModel):
    """
    Step graph of one pipeline.

    Steps must be numbered 1..N without gaps; groups and categories may only
    refer to existing steps.
    """

    model_config = ConfigDict(extra="allow")

    pipeline: str = Field(..., description="Pipeline identifier (e.g., 'website')")
    version: Union[str, float] = Field(..., description="Spec version")
    description: str = Field(..., description="Human-readable description")
    steps: List[WizardStep] = Field(default_factory=list, description="Wizard steps in canonical order")
    groups: List[StepGroup] = Field(default_factory=list, description="Conditionally visible step groups")
    categories: List[StepCategory] = Field(default_factory=list, description="Navigation categories")

    @model_validator(mode="after")
    def _check_ordinals(self) -> "PipelineSpec":
        numbers = [step.number for step in self.steps]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"Steps of {self.pipeline!r} must be numbered 1..N in order, got {numbers}")

        known = set(numbers)
        for group in [*self.groups, *self.categories]:
            unknown = sorted(set(group.steps) - known)
            if unknown:
                raise ValueError(f"{group.id!r} refers to unknown steps {unknown}")
        return self

    @property
    def step_numbers(self) -> List[int]:
        return [step.number for step in self.steps]

    def get_step(self, number: int) -> Optional[WizardStep]:
        for step in self.steps:
            if step.number == number:
                return step
        return None

    def category_of(self, number: int) -> Optional[str]:
        for category in self.categories:
            if number in category.steps:
                return category.id
        return None
