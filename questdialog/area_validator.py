"""An area of the world that validates quest steps for players entering it."""

from __future__ import annotations

from typing import Any

from .interfaces import Controller, QuestBearer, QuestGiver
from .quest_data import QuestValidatableSteps
from .quest_giver import QuestGiverComponent


class AreaQuestValidator(QuestGiver):
    """A box-shaped area acting as a quest giver for the steps it lists.

    The quest giver component only exists on the authoritative side; without
    authority the area validates nothing.
    """

    def __init__(
        self,
        validatable_steps: QuestValidatableSteps | None = None,
        *,
        has_authority: bool = True,
    ) -> None:
        self.has_authority = has_authority
        self.validatable_steps = (
            validatable_steps if validatable_steps is not None else QuestValidatableSteps()
        )
        self.box_extent = (200.0, 200.0, 200.0)
        self.quest_component: QuestGiverComponent | None = (
            QuestGiverComponent() if has_authority else None
        )

    def begin_play(self) -> None:
        """Register the area's validatable steps with its quest giver component."""
        if self.quest_component is None:
            return
        if self.validatable_steps.quest_id != 0:
            self.quest_component.add_validatable_steps(
                self.validatable_steps.quest_id, self.validatable_steps.steps
            )

    def try_progress_quest(self, other_actor: Any) -> bool:
        """Try to advance the area's quest for the player controlling ``other_actor``."""
        if not self.has_authority:
            return False

        get_controller = getattr(other_actor, "get_controller", None)
        if not callable(get_controller):
            return False

        controller = get_controller()
        if not isinstance(controller, Controller):
            return False
        if not isinstance(controller, QuestBearer):
            return False

        return controller.get_quest_bearer_component().authority_try_progress_quest(
            self.validatable_steps.quest_id, self
        )

    def get_quest_giver_component(self) -> QuestGiverComponent | None:
        return self.quest_component