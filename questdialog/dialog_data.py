"""Dialog topics, the bundles grouping them and when they may be shown."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .interfaces import DialogActor, QuestBearer, QuestGiver
from .quest_data import QuestStepCondition, QuestValidatableSteps


@dataclass
class DialogTopicCondition:
    """What must hold for a dialog topic to be offered."""

    quest_id: int = 0
    minimum_step_id: int = 0
    step_condition: QuestStepCondition = QuestStepCondition.EQUAL
    minimum_relation: float = 0.375

    def verify_condition(self, dialog_actor: Any, controller: Any) -> bool:
        """Tell whether the topic may be shown to this controller by this actor."""
        relation_ok = False
        if isinstance(dialog_actor, DialogActor):
            relation_ok = dialog_actor.get_relation(controller.get_pawn()) >= self.minimum_relation

        if self.quest_id != 0:
            if isinstance(controller, QuestBearer) and isinstance(dialog_actor, QuestGiver):
                quest_ok = controller.can_display(
                    self.quest_id, self.minimum_step_id, self.step_condition
                )
                return quest_ok and relation_ok
            return False

        return relation_ok


@dataclass
class DialogTopic:
    """A topic of conversation and the quest steps it may validate."""

    id: int = 0
    topic: str = ""
    topic_condition: DialogTopicCondition = field(default_factory=DialogTopicCondition)
    topic_text: str = ""
    quest_relation: QuestValidatableSteps = field(default_factory=QuestValidatableSteps)


@dataclass
class DialogTopicBundle:
    """A group of related dialog topics."""

    id: int = 0
    topic_list: list[int] = field(default_factory=list)
    meta_name: str = ""


@dataclass
class DialogTopicMetaBundle:
    """A set of topic bundles with the greetings that open a conversation."""

    id: int = 0
    good_greeting_dialog: str = "Greetings"
    bad_greeting_dialog: str = "I don't wish to speak to your kind. Now get lost!"
    minimum_relation: float = 0.375
    topic_bundle_list: list[int] = field(default_factory=list)
    meta_name: str = ""