"""The global registry of dialog topics, bundles and meta bundles."""

from __future__ import annotations

from collections.abc import Iterable

from .dialog_data import DialogTopic, DialogTopicBundle, DialogTopicMetaBundle

_MISSING_GREETING = "Error"


class DialogMainComponent:
    """Every dialog topic, grouped into bundles and meta bundles.

    A topic is a subject of conversation; a bundle groups topics; a meta
    bundle groups bundles and carries the greetings of a speaker.
    """

    def __init__(self) -> None:
        self.topics: dict[int, DialogTopic] = {}
        self.topic_lookup: dict[str, int] = {}
        self.bundles: dict[int, DialogTopicBundle] = {}
        self.meta_bundles: dict[int, DialogTopicMetaBundle] = {}

    def add_topics(self, rows: Iterable[DialogTopic | None]) -> None:
        """Register every topic of a table; missing rows are skipped."""
        for row in rows:
            if row is not None:
                self.add_topic(row)

    def add_bundles(self, rows: Iterable[DialogTopicBundle | None]) -> None:
        """Register every bundle of a table; missing rows are skipped."""
        for row in rows:
            if row is not None:
                self.add_bundle(row)

    def add_meta_bundles(self, rows: Iterable[DialogTopicMetaBundle | None]) -> None:
        """Register every meta bundle of a table; missing rows are skipped."""
        for row in rows:
            if row is not None:
                self.add_meta_bundle(row)

    def add_topic(self, topic: DialogTopic) -> None:
        """Register a topic under its id and its name."""
        self.topics[topic.id] = topic
        self.topic_lookup[topic.topic] = topic.id

    def add_bundle(self, bundle: DialogTopicBundle) -> None:
        self.bundles[bundle.id] = bundle

    def add_meta_bundle(self, meta_bundle: DialogTopicMetaBundle) -> None:
        self.meta_bundles[meta_bundle.id] = meta_bundle

    def get_all_dialog_topics_for_bundle(self, bundle_id: int) -> list[DialogTopic]:
        """Return the registered topics of a bundle, in bundle order."""
        bundle = self.bundles.get(bundle_id)
        if bundle is None:
            return []
        return [self.topics[tid] for tid in bundle.topic_list if tid in self.topics]

    def get_all_dialog_topics_for_meta_bundle(self, meta_id: int) -> list[DialogTopic]:
        """Return the topics of every bundle in a meta bundle, in order."""
        meta = self.meta_bundles.get(meta_id)
        if meta is None:
            return []
        return [
            topic
            for bundle_id in meta.topic_bundle_list
            for topic in self.get_all_dialog_topics_for_bundle(bundle_id)
        ]

    def get_bad_greeting(self, meta_id: int) -> str:
        meta = self.meta_bundles.get(meta_id)
        return meta.bad_greeting_dialog if meta is not None else _MISSING_GREETING

    def get_good_greeting(self, meta_id: int) -> str:
        meta = self.meta_bundles.get(meta_id)
        return meta.good_greeting_dialog if meta is not None else _MISSING_GREETING

    def get_greeting_relation_limit(self, meta_id: int) -> float:
        meta = self.meta_bundles.get(meta_id)
        return meta.minimum_relation if meta is not None else 0.0