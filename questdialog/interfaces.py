"""Roles that game objects take in dialogs and quests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from . import messages
from .quest_data import QuestMetaData, QuestProgressData, QuestStep, QuestStepCondition


class Controller:
    """A player controller, possibly possessing a pawn."""

    def __init__(self, pawn: Any = None) -> None:
        self.pawn = pawn

    def get_pawn(self) -> Any:
        """Return the pawn this controller possesses, or None."""
        return self.pawn


class DialogActor(ABC):
    """Something a player can talk to."""

    @abstractmethod
    def get_relation(self, actor: Any) -> float:
        """Return how this actor regards the given actor."""

    @abstractmethod
    def get_dialog_component(self) -> Any:
        """Return the dialog component holding this actor's topics."""

    @abstractmethod
    def get_relation_string(self, relation: float) -> str:
        """Describe a relation value in words."""

    @abstractmethod
    def has_dialog(self) -> bool:
        """Tell whether this actor has anything to say."""

    @abstractmethod
    def get_character_name_for_dialog(self) -> str:
        """Return the name shown in the dialog window."""

    def can_trade(self) -> bool:
        return False

    def can_give(self) -> bool:
        return True

    def can_train(self) -> bool:
        return False

    def can_bank(self) -> bool:
        return False

    def get_max_interaction_distance(self) -> float:
        return 500.0


class QuestGiver(ABC):
    """Something that can validate quest steps."""

    @abstractmethod
    def get_quest_giver_component(self) -> Any:
        """Return the component listing the steps this giver validates."""

    def can_validate_quest_step(self, quest_id: int, step_id: int) -> bool:
        return self.get_quest_giver_component().can_validate_quest_step(quest_id, step_id)


class QuestBearer(ABC):
    """Something that carries quests, normally a player controller."""

    @abstractmethod
    def get_quest_bearer_component(self) -> Any:
        """Return the component storing this bearer's quest progress."""

    def can_validate(self, quest_id: int, step_id: int) -> bool:
        return self.get_quest_bearer_component().can_validate(quest_id, step_id)

    def can_display(
        self,
        quest_id: int,
        step_id: int,
        condition: QuestStepCondition = QuestStepCondition.EQUAL,
    ) -> bool:
        return self.get_quest_bearer_component().can_display(quest_id, step_id, condition)

    def try_progress_quest(self, quest_id: int, validator: Any) -> None:
        self.get_quest_bearer_component().try_progress_quest(quest_id, validator)

    def try_progress_all(self, validator: Any) -> None:
        self.get_quest_bearer_component().try_progress_all(validator)

    def get_known_quest(self, quest_id: int) -> QuestProgressData:
        return self.get_quest_bearer_component().get_known_quest(quest_id)

    def is_quest_known(self, quest_id: int) -> bool:
        return self.get_quest_bearer_component().is_quest_known(quest_id)

    def progress_quest(self, quest_meta: QuestMetaData, next_step: QuestStep) -> None:
        self.get_quest_bearer_component().progress_quest(quest_meta, next_step, False)

    def add_quest(self, quest_meta: QuestMetaData) -> None:
        self.get_quest_bearer_component().add_quest(quest_meta)

    def grant_reward(self, reward: Any) -> None:
        """Hand a step's reward to the bearer; does nothing by default."""


class DialogGameMode(ABC):
    """The game mode owning the global dialog and quest registries."""

    @abstractmethod
    def get_main_dialog_component(self) -> Any:
        """Return the registry of every dialog topic."""

    @abstractmethod
    def get_main_quest_component(self) -> Any:
        """Return the registry of every quest, or None."""

    def try_progress_quest(self, quest_id: int, bearer: Any, validator: Any) -> bool:
        main = self.get_main_quest_component()
        if main is None:
            messages.error("Invalid quest master component")
            return False
        return main.try_progress_quest(quest_id, bearer, validator)


class DialogDisplay(ABC):
    """Something that shows dialog text to a player."""

    @abstractmethod
    def force_display_text_in_dialog(self, text: str) -> None:
        """Show text in the open dialog window."""

    def process_scripted_function(self, text: str, world: Any) -> str:
        """Expand scripted parts of a dialog line; unchanged by default."""
        return text