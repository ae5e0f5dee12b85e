from questdialog.dialog_data import (
    DialogTopic,
    DialogTopicBundle,
    DialogTopicCondition,
    DialogTopicMetaBundle,
)
from questdialog.interfaces import Controller, DialogActor, QuestBearer, QuestGiver
from questdialog.quest_data import QuestStepCondition


class Npc(DialogActor):
    def __init__(self, relation):
        self.relation = relation
        self.asked = []

    def get_relation(self, actor):
        self.asked.append(actor)
        return self.relation

    def get_dialog_component(self):
        return None

    def get_relation_string(self, relation):
        return ""

    def has_dialog(self):
        return True

    def get_character_name_for_dialog(self):
        return "Npc"


class GiverNpc(Npc, QuestGiver):
    def get_quest_giver_component(self):
        return None


class BearerComponent:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def can_display(self, quest_id, step_id, condition):
        self.calls.append((quest_id, step_id, condition))
        return self.result


class Player(Controller, QuestBearer):
    def __init__(self, pawn, component):
        super().__init__(pawn)
        self.component = component

    def get_quest_bearer_component(self):
        return self.component


def test_relation_threshold_is_inclusive():
    condition = DialogTopicCondition(minimum_relation=0.5)
    assert condition.verify_condition(Npc(0.5), Controller()) is True
    assert condition.verify_condition(Npc(0.49), Controller()) is False


def test_relation_is_asked_about_controller_pawn():
    pawn = object()
    npc = Npc(1.0)
    DialogTopicCondition().verify_condition(npc, Controller(pawn))
    assert npc.asked == [pawn]


def test_non_dialog_actor_fails():
    assert DialogTopicCondition().verify_condition(object(), Controller()) is False


def test_quest_condition_requires_bearer_and_giver():
    condition = DialogTopicCondition(quest_id=3)
    assert condition.verify_condition(Npc(1.0), Player(None, BearerComponent(True))) is False
    assert condition.verify_condition(GiverNpc(1.0), Controller()) is False


def test_quest_condition_combines_with_relation():
    component = BearerComponent(True)
    condition = DialogTopicCondition(
        quest_id=3, minimum_step_id=2, step_condition=QuestStepCondition.GREATER_EQUAL
    )
    assert condition.verify_condition(GiverNpc(1.0), Player(None, component)) is True
    assert component.calls == [(3, 2, QuestStepCondition.GREATER_EQUAL)]
    assert condition.verify_condition(GiverNpc(0.0), Player(None, component)) is False


def test_quest_condition_refused_by_bearer():
    condition = DialogTopicCondition(quest_id=3)
    assert condition.verify_condition(GiverNpc(1.0), Player(None, BearerComponent(False))) is False


def test_defaults_from_definitions():
    condition = DialogTopicCondition()
    assert condition.minimum_relation == 0.375
    assert condition.step_condition is QuestStepCondition.EQUAL
    meta = DialogTopicMetaBundle()
    assert meta.good_greeting_dialog == "Greetings"
    assert meta.bad_greeting_dialog == "I don't wish to speak to your kind. Now get lost!"


def test_default_containers_are_independent():
    a, b = DialogTopic(), DialogTopic()
    a.quest_relation.steps.append(1)
    a.topic_condition.quest_id = 5
    assert b.quest_relation.steps == []
    assert b.topic_condition.quest_id == 0
    bundle_a, bundle_b = DialogTopicBundle(), DialogTopicBundle()
    bundle_a.topic_list.append(1)
    assert bundle_b.topic_list == []