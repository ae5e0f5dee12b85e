"""The list of quest steps a quest giver is able to validate."""

from __future__ import annotations

from collections.abc import Iterable

from .quest_data import QuestValidatableSteps


class QuestGiverComponent:
    """Quest steps that one giver validates, keyed by quest id.

    Only meaningful on the authoritative side; without authority no step
    is ever validated.
    """

    def __init__(self, *, has_authority: bool = True) -> None:
        self.has_authority = has_authority
        self.validatable_steps: dict[int, QuestValidatableSteps] = {}

    def add_validatable_steps(self, quest_id: int, steps: Iterable[int]) -> None:
        """Declare the steps of a quest this giver validates, replacing earlier ones."""
        self.validatable_steps[quest_id] = QuestValidatableSteps(
            quest_id=quest_id, steps=list(steps)
        )

    def can_validate_quest_step(self, quest_id: int, step_id: int) -> bool:
        """Tell whether this giver can validate the given step of a quest."""
        if not self.has_authority:
            return False
        entry = self.validatable_steps.get(quest_id)
        if entry is None:
            return False
        return step_id in entry.steps