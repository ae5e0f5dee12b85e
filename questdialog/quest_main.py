"""The server-side registry of every quest and the rules for advancing them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from . import messages
from .interfaces import DialogDisplay, QuestBearer, QuestGiver
from .quest_data import QuestMetaData, QuestStep


class QuestMainComponent:
    """Holds every quest definition, keyed by quest id.

    Only the authoritative side registers quests or hands them to players.
    """

    def __init__(self, *, has_authority: bool = True) -> None:
        self.has_authority = has_authority
        self.quests: dict[int, QuestMetaData] = {}

    def find_next_step_id(self, quest: QuestMetaData, current_step: int) -> int:
        """Return the sub id of the step following ``current_step``.

        A quest not yet started (``current_step`` of -1) begins at 0; a step
        that is last or not found also gives 0.
        """
        if current_step == -1:
            return 0
        for step, following in zip(quest.steps, quest.steps[1:]):
            if step.quest_sub_id == current_step:
                return following.quest_sub_id
        return 0

    def find_next_step(self, quest: QuestMetaData, current_step: int) -> QuestStep:
        """Return the step following ``current_step``, or the first step if none does."""
        if not quest.steps:
            raise ValueError(f"quest {quest.quest_id} has no steps")
        for step, following in zip(quest.steps, quest.steps[1:]):
            if step.quest_sub_id == current_step:
                return following
        return quest.steps[0]

    def add_quest(self, quest: QuestMetaData) -> None:
        """Register a quest, replacing any with the same id."""
        if not self.has_authority:
            return
        self.quests[quest.quest_id] = quest

    def add_quests(self, rows: Iterable[QuestMetaData | None]) -> None:
        """Register every quest of a table; missing rows are skipped."""
        for row in rows:
            if row is not None:
                self.add_quest(row)

    def get_quest_data(self, quest_id: int) -> QuestMetaData:
        """Return a registered quest."""
        try:
            return self.quests[quest_id]
        except KeyError:
            raise KeyError(f"quest {quest_id} is not registered") from None

    def force_add_player_quest(self, player: Any, quest_id: int) -> None:
        """Give a quest to a player without any validation."""
        if not self.has_authority:
            return
        if isinstance(player, QuestBearer):
            player.get_quest_bearer_component().authority_add_quest(quest_id)

    def try_progress_quest(self, quest_id: int, bearer: Any, validator: Any) -> bool:
        """Start or advance a quest for ``bearer`` if ``validator`` may validate the next step."""
        if not isinstance(bearer, QuestBearer):
            messages.error("Tried to progress a quest for a non quest bearer")
            return False
        if not isinstance(validator, QuestGiver):
            messages.error("Tried to progress a quest from a non quest giver")
            return False

        quest = self.get_quest_data(quest_id)

        current_step = -1
        if bearer.is_quest_known(quest_id):
            current_step = bearer.get_known_quest(quest_id).current_step.quest_sub_id

        next_step = self.find_next_step_id(quest, current_step)
        if validator.get_quest_giver_component().can_validate_quest_step(quest_id, next_step):
            if current_step == -1:
                messages.log(f"Adding Quest id : {quest.quest_id:,}")
                bearer.add_quest(quest)
                return True

            messages.log(
                f"Progressing Quest id : {quest.quest_id:,} step : {current_step:,}"
            )
            dialog = bearer.get_known_quest(quest.quest_id).current_step.item_turn_in_dialog
            if dialog and isinstance(bearer, DialogDisplay):
                bearer.force_display_text_in_dialog(dialog)

            bearer.progress_quest(quest, self.find_next_step(quest, current_step))
            return True

        messages.warning(
            f"Tried to validate an impossible quest state QID: {quest.quest_id:,}"
            f" Current step : {current_step:,}"
        )
        return False