"""Quest progress of one player: known quests, their steps and checks on them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NamedTuple

from .events import Signal
from .interfaces import DialogGameMode, QuestBearer, QuestGiver
from .quest_data import (
    QuestMetaData,
    QuestProgressData,
    QuestProgressStep,
    QuestStep,
    QuestStepCondition,
)


class ItemCheck(NamedTuple):
    """Outcome of offering items and coins to a quest step."""

    accepted: bool
    remaining_items: list[int]
    remaining_coins: float


class QuestBearerComponent:
    """Stores the quests a player knows and how far each has progressed.

    Signals:
      known_quest_changed -- emitted with no arguments after progress is applied
      new_quest -- emitted with no arguments for each newly indexed quest
      quest_updated -- emitted with (quest_id, step_id) when a quest moves on
    """

    def __init__(
        self,
        owner: Any = None,
        game_mode: Any = None,
        *,
        has_authority: bool = True,
    ) -> None:
        self.owner = owner
        self.game_mode = game_mode
        self.has_authority = has_authority
        self._known: list[QuestProgressData] = []
        self._lookup: dict[int, int] = {}
        self.known_quest_changed = Signal()
        self.new_quest = Signal()
        self.quest_updated = Signal()

    @property
    def known_quests(self) -> tuple[QuestProgressData, ...]:
        """Every known quest, in the order it was learned."""
        return tuple(self._known)

    def _refresh(self) -> None:
        for index, data in enumerate(self._known):
            if data.quest_id not in self._lookup:
                self._lookup[data.quest_id] = index
                self.new_quest.emit()
            else:
                self._lookup[data.quest_id] = index
        self.known_quest_changed.emit()

    def _learn(self, quest_meta: QuestMetaData) -> None:
        data = QuestProgressData(
            quest_id=quest_meta.quest_id,
            progress_id=0,
            repeatable=quest_meta.repeatable,
            quest_title=quest_meta.quest_title,
            current_step=QuestProgressStep.from_step(quest_meta.steps[0]),
        )
        self._known.append(data)
        self._lookup[quest_meta.quest_id] = len(self._known) - 1

    def _require_game_mode(self) -> DialogGameMode:
        if not isinstance(self.game_mode, DialogGameMode):
            raise RuntimeError("no dialog game mode is available")
        return self.game_mode

    def authority_try_progress_quest(self, quest_id: int, validator: Any) -> bool:
        """Ask the game mode to move a quest on, validated by the given actor."""
        if not self.has_authority:
            return False
        if isinstance(self.game_mode, DialogGameMode):
            return self.game_mode.try_progress_quest(quest_id, self.owner, validator)
        return False

    def try_progress_quest(self, quest_id: int, validator: Any) -> None:
        """Request progress on one quest."""
        self.authority_try_progress_quest(quest_id, validator)

    def try_progress_all(self, validator: Any) -> None:
        """Request progress on every quest the validator can validate."""
        if validator is None or not isinstance(validator, QuestGiver):
            raise ValueError("validator is not a quest giver")
        component = validator.get_quest_giver_component()
        for quest_id in list(component.validatable_steps):
            self.try_progress_quest(quest_id, validator)

    def progress_quest(
        self,
        quest_meta: QuestMetaData,
        next_step: QuestStep,
        skip_reward: bool = False,
    ) -> None:
        """Complete the current step of a known quest and move to the next one."""
        if not self.has_authority:
            return

        data = self._known[self._lookup[quest_meta.quest_id]]
        if next_step.quest_sub_id != data.progress_id or data.repeatable:
            data.current_step.completed = True

            reward = data.current_step.reward_class
            if not skip_reward and reward is not None and isinstance(self.owner, QuestBearer):
                self.owner.grant_reward(reward)

            if not data.repeatable:
                data.previous_steps.append(data.current_step)
                data.progress_id = next_step.quest_sub_id

                new_step = QuestProgressStep(
                    quest_id=next_step.quest_id,
                    quest_sub_id=next_step.quest_sub_id,
                    step_title=next_step.step_title,
                    step_description=next_step.step_description,
                    reward_class=next_step.reward_class,
                    necessary_items=list(next_step.necessary_items),
                    necessary_coins=next_step.necessary_coins,
                    item_turn_in_dialog=next_step.item_turn_in_dialog,
                    completed=False,
                )
                if next_step.finishing_step:
                    new_step.completed = True
                    data.finished = True
                data.current_step = new_step

                self.quest_updated.emit(data.quest_id, data.current_step.quest_sub_id)

        self._refresh()

    def add_quest(self, quest_meta: QuestMetaData) -> None:
        """Start a quest at its first step unless it is already known."""
        if not self.has_authority:
            return
        if quest_meta.quest_id in self._lookup:
            return
        self._learn(quest_meta)
        self.quest_updated.emit(quest_meta.quest_id, 0)

    def can_validate_step_with_items(
        self,
        quest_id: int,
        step_id: int,
        items: Iterable[int],
        coins: float,
    ) -> ItemCheck:
        """Check whether the items and coins offered satisfy the current step.

        The remaining items are those not taken by the step; every copy of an
        item the step takes is taken.
        """
        offered = list(items)
        remaining = list(offered)

        if not self.is_at_step(quest_id, step_id):
            return ItemCheck(False, remaining, coins)

        current = self.get_known_quest(quest_id).current_step
        if not current.necessary_items and current.necessary_coins == 0.0:
            return ItemCheck(False, remaining, coins)

        needed = list(current.necessary_items)
        if needed:
            for item in offered:
                if item in needed:
                    needed.remove(item)
                    remaining = [i for i in remaining if i != item]

        items_ok = not needed
        coins_ok = current.necessary_coins - coins <= 0.0
        return ItemCheck(items_ok and coins_ok, remaining, coins)

    def get_known_quest(self, quest_id: int) -> QuestProgressData:
        """Return the progress record of a known quest."""
        try:
            return self._known[self._lookup[quest_id]]
        except KeyError:
            raise KeyError(f"quest {quest_id} is not known") from None

    def is_quest_known(self, quest_id: int) -> bool:
        """Tell whether the quest has been started."""
        return quest_id in self._lookup

    def can_display(
        self,
        quest_id: int,
        step_id: int,
        condition: QuestStepCondition = QuestStepCondition.EQUAL,
    ) -> bool:
        """Compare the quest's progress with a step according to the condition."""
        if not self.is_quest_known(quest_id):
            return False
        if condition is QuestStepCondition.LESSER:
            return self.is_before_step(quest_id, step_id)
        if condition is QuestStepCondition.LESSER_EQUAL:
            return self.is_before_or_at_step(quest_id, step_id)
        if condition is QuestStepCondition.GREATER:
            return self.is_past_step(quest_id, step_id)
        if condition is QuestStepCondition.GREATER_EQUAL:
            return self.is_at_or_past_step(quest_id, step_id)
        return self.is_at_step(quest_id, step_id)

    def can_validate(self, quest_id: int, step_id: int) -> bool:
        """Tell whether the given step could still be validated for this player."""
        if step_id == 0:
            return not self.is_quest_known(quest_id)
        if not self.is_quest_known(quest_id):
            return False
        return not self.is_past_step(quest_id, step_id)

    def is_before_step(self, quest_id: int, step_id: int) -> bool:
        data = self.get_known_quest(quest_id)
        return data.quest_id > 0 and data.progress_id < step_id

    def is_before_or_at_step(self, quest_id: int, step_id: int) -> bool:
        data = self.get_known_quest(quest_id)
        return data.quest_id > 0 and data.progress_id <= step_id

    def is_past_step(self, quest_id: int, step_id: int) -> bool:
        return self.get_known_quest(quest_id).progress_id > step_id

    def is_at_or_past_step(self, quest_id: int, step_id: int) -> bool:
        return self.get_known_quest(quest_id).progress_id >= step_id

    def is_at_step(self, quest_id: int, step_id: int) -> bool:
        if not self.is_quest_known(quest_id):
            return False
        return self.get_known_quest(quest_id).progress_id == step_id

    def authority_add_quest(self, quest_id: int) -> None:
        """Start a quest taken from the game mode's quest registry."""
        if not self.has_authority:
            return
        if quest_id in self._lookup:
            return
        game_mode = self._require_game_mode()
        quest_meta = game_mode.get_main_quest_component().get_quest_data(quest_id)
        self._learn(quest_meta)

    def authority_setup_quest_data(self, quest_id: int, step_id: int) -> None:
        """Start a quest and advance it to the given step without rewards."""
        if not self.has_authority:
            return
        game_mode = self._require_game_mode()
        main = game_mode.get_main_quest_component()
        if main is None:
            return

        self.authority_add_quest(quest_id)
        if quest_id in self._lookup:
            quest_meta = main.get_quest_data(quest_id)
            for current in range(step_id):
                self.progress_quest(quest_meta, main.find_next_step(quest_meta, current), True)