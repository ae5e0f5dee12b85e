"""The dialog topics one speaker offers and how its text links to them."""

from __future__ import annotations

from typing import Any

from .dialog_data import DialogTopic
from .interfaces import DialogGameMode

_TRAILING_PUNCTUATION = ".,!:?"
_INVALID_GREETING = "Error"


class DialogComponent:
    """Topics and greetings of one speaker, loaded from the game mode's registry."""

    def __init__(self, game_mode: Any = None, *, has_authority: bool = True) -> None:
        self.game_mode = game_mode
        self.has_authority = has_authority
        self.topic_data: list[DialogTopic] = []
        self.topics: dict[int, DialogTopic] = {}
        self.topic_lookup: dict[str, int] = {}
        self.dialog_name = ""
        self.good_greeting = ""
        self.bad_greeting = ""
        self.greeting_limit = 0.0

    def _index(self, topic: DialogTopic) -> None:
        self.topics.setdefault(topic.id, topic)
        self.topic_lookup.setdefault(topic.topic, topic.id)

    def sync_lookup(self) -> None:
        """Index every topic of ``topic_data``, keeping entries already indexed."""
        for topic in self.topic_data:
            self._index(topic)

    def init_dialog_from_id(self, dialog_id: int) -> None:
        """Load the topics and greetings of a meta bundle from the game mode."""
        if not self.has_authority:
            return

        full_dialog: list[DialogTopic] = []
        if isinstance(self.game_mode, DialogGameMode):
            main = self.game_mode.get_main_dialog_component()
            if main is not None:
                full_dialog = main.get_all_dialog_topics_for_meta_bundle(dialog_id)
                self.good_greeting = main.get_good_greeting(dialog_id)
                self.bad_greeting = main.get_bad_greeting(dialog_id)
                self.greeting_limit = main.get_greeting_relation_limit(dialog_id)

        for topic in full_dialog:
            self.topic_data.append(topic)
            self._index(topic)

    def get_dialog_topic(self, topic_id: int) -> DialogTopic:
        """Return a topic by id."""
        try:
            return self.topics[topic_id]
        except KeyError:
            raise KeyError(f"dialog topic {topic_id} is not known") from None

    def get_dialog_topic_id(self, name: str) -> int:
        """Return the id of a topic by name, or 0 if there is none."""
        return self.topic_lookup.get(name, 0)

    def parse_text_hyperlink(self, text: str, dialog_actor: Any, controller: Any) -> str:
        """Mark every word naming an available topic as a dialog link.

        Words are separated by spaces; one trailing punctuation mark is kept
        outside the link. Every word in the result is followed by a space.
        """
        parts: list[str] = []
        for word in (w for w in text.split(" ") if w):
            suffix = ""
            local_word = word
            if word[-1] in _TRAILING_PUNCTUATION:
                suffix = word[-1]
                local_word = word[:-1]

            topic = None
            if local_word in self.topic_lookup:
                topic = self.topics.get(self.topic_lookup[local_word])

            if topic is not None and topic.topic_condition.verify_condition(
                dialog_actor, controller
            ):
                parts.append(
                    f'<DialogLink id="{local_word}">{local_word}</>{suffix} '
                )
            else:
                parts.append(f"{word} ")
        return "".join(parts)

    def is_valid(self) -> bool:
        """Tell whether the greetings were found when the dialog was loaded."""
        return self.good_greeting != _INVALID_GREETING