"""Workflow wizard session with step-builder operations."""

from typing import Any, Dict, List, Optional

from ...engine.state import WizardSession
from .migration import new_id
from .schema import WorkflowStep


class WorkflowWizardSession(WizardSession):
    """
    WizardSession for the workflow pipeline.

    Adds the editing operations of the steps builder. Each operation goes
    through ``update`` so subscribers see it as one change; ``order`` is
    renumbered 0..n-1 whenever steps are removed or moved.
    """

    def _steps(self) -> List[Dict[str, Any]]:
        return self.config['steps']

    def add_step(self, **fields: Any) -> str:
        """Append an empty step and return its id."""
        steps = self._steps()
        step = WorkflowStep(id=new_id(), order=len(steps)).model_dump(by_alias=True, mode='json')
        step.update(fields)
        steps.append(step)
        self.update({'steps': steps})
        return step['id']

    def remove_step(self, step_id: str) -> None:
        steps = [step for step in self._steps() if step['id'] != step_id]
        self.update({'steps': _renumber(steps)})

    def update_step(self, step_id: str, updates: Dict[str, Any]) -> None:
        steps = [
            {**step, **updates} if step['id'] == step_id else step
            for step in self._steps()
        ]
        self.update({'steps': steps})

    def reorder_steps(self, active_id: str, over_id: str) -> None:
        """Move step ``active_id`` to the position of ``over_id``."""
        steps = self._steps()
        old_index = _index_of(steps, active_id)
        new_index = _index_of(steps, over_id)
        if old_index is None or new_index is None:
            return

        moved = steps.pop(old_index)
        steps.insert(new_index, moved)
        self.update({'steps': _renumber(steps)})

    def add_template(self, step_id: str, template: Dict[str, Any]) -> str:
        return self._add_child(step_id, 'templates', template)

    def remove_template(self, step_id: str, template_id: str) -> None:
        self._remove_child(step_id, 'templates', template_id)

    def add_link(self, step_id: str, link: Dict[str, Any]) -> str:
        return self._add_child(step_id, 'links', link)

    def remove_link(self, step_id: str, link_id: str) -> None:
        self._remove_child(step_id, 'links', link_id)

    def add_service(self, step_id: str, service: Dict[str, Any]) -> str:
        return self._add_child(step_id, 'services', service)

    def remove_service(self, step_id: str, service_id: str) -> None:
        self._remove_child(step_id, 'services', service_id)

    def _add_child(self, step_id: str, key: str, item: Dict[str, Any]) -> str:
        child = {**item, 'id': new_id()}
        steps = [
            {**step, key: [*step[key], child]} if step['id'] == step_id else step
            for step in self._steps()
        ]
        self.update({'steps': steps})
        return child['id']

    def _remove_child(self, step_id: str, key: str, child_id: str) -> None:
        steps = [
            {**step, key: [c for c in step[key] if c.get('id') != child_id]} if step['id'] == step_id else step
            for step in self._steps()
        ]
        self.update({'steps': steps})


def _index_of(steps: List[Dict[str, Any]], step_id: str) -> Optional[int]:
    for index, step in enumerate(steps):
        if step['id'] == step_id:
            return index
    return None


def _renumber(steps: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{**step, 'order': index} for index, step in enumerate(steps)]
