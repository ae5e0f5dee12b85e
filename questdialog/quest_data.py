"""Quest definitions and the per-player progress records built from them."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


class QuestStepCondition(Enum):
    """How a player's progress is compared with a step number."""

    EQUAL = "equal"
    LESSER = "lesser"
    LESSER_EQUAL = "lesser_equal"
    GREATER = "greater"
    GREATER_EQUAL = "greater_equal"


@dataclass
class QuestStep:
    """One objective of a quest: go somewhere, talk to someone, bring items."""

    quest_id: int = 0
    quest_sub_id: int = 0
    step_title: str = ""
    step_description: str = ""
    finishing_step: bool = False
    reward_class: Any = None
    necessary_items: list[int] = field(default_factory=list)
    necessary_coins: float = 0.0
    item_turn_in_dialog: str = ""


@dataclass
class QuestMetaData:
    """The complete definition of a quest."""

    quest_id: int = 0
    quest_title: str = ""
    repeatable: bool = False
    steps: list[QuestStep] = field(default_factory=list)


@dataclass
class QuestValidatableSteps:
    """Steps of one quest that a quest giver is able to validate."""

    quest_id: int = 0
    steps: list[int] = field(default_factory=list)


@dataclass
class QuestProgressStep(QuestStep):
    """A quest step together with its completion state."""

    completed: bool = False

    @classmethod
    def from_step(cls, step: QuestStep) -> QuestProgressStep:
        """Build a not yet completed progress step from a quest step."""
        values = {f.name: getattr(step, f.name) for f in fields(QuestStep)}
        values["necessary_items"] = list(step.necessary_items)
        return cls(**values)


@dataclass
class QuestProgressData:
    """A quest as seen by the player carrying it."""

    quest_id: int = 0
    progress_id: int = 0
    finished: bool = False
    repeatable: bool = False
    current_step: QuestProgressStep = field(default_factory=QuestProgressStep)
    quest_title: str = ""
    previous_steps: list[QuestProgressStep] = field(default_factory=list)