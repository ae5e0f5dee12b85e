import logging

import pytest

from questdialog.interfaces import (
    Controller,
    DialogDisplay,
    DialogGameMode,
    QuestBearer,
    QuestGiver,
)
from questdialog.quest_bearer import QuestBearerComponent
from questdialog.quest_data import QuestMetaData, QuestStep
from questdialog.quest_giver import QuestGiverComponent
from questdialog.quest_main import QuestMainComponent


class GameMode(DialogGameMode):
    def __init__(self, main):
        self.main = main

    def get_main_dialog_component(self):
        return None

    def get_main_quest_component(self):
        return self.main


class Player(Controller, QuestBearer, DialogDisplay):
    def __init__(self, game_mode):
        super().__init__()
        self.component = QuestBearerComponent(owner=self, game_mode=game_mode)
        self.shown = []

    def get_quest_bearer_component(self):
        return self.component

    def force_display_text_in_dialog(self, text):
        self.shown.append(text)


class Npc(QuestGiver):
    def __init__(self, quest_id, steps):
        self.component = QuestGiverComponent()
        self.component.add_validatable_steps(quest_id, steps)

    def get_quest_giver_component(self):
        return self.component


def make_quest(turn_in=""):
    return QuestMetaData(
        quest_id=7,
        quest_title="Bakery",
        steps=[
            QuestStep(quest_id=7, quest_sub_id=0, step_title="Start", item_turn_in_dialog=turn_in),
            QuestStep(quest_id=7, quest_sub_id=1, step_title="Middle"),
            QuestStep(quest_id=7, quest_sub_id=2, step_title="End", finishing_step=True),
        ],
    )


@pytest.fixture
def world():
    main = QuestMainComponent()
    main.add_quest(make_quest())
    game_mode = GameMode(main)
    return main, Player(game_mode), Npc(7, [0, 1, 2])


def test_find_next_step_id():
    main = QuestMainComponent()
    quest = make_quest()
    assert main.find_next_step_id(quest, -1) == 0
    assert main.find_next_step_id(quest, 0) == 1
    assert main.find_next_step_id(quest, 1) == 2
    assert main.find_next_step_id(quest, 2) == 0
    assert main.find_next_step_id(quest, 42) == 0


def test_find_next_step():
    main = QuestMainComponent()
    quest = make_quest()
    assert main.find_next_step(quest, 0) is quest.steps[1]
    assert main.find_next_step(quest, 2) is quest.steps[0]


def test_find_next_step_without_steps():
    with pytest.raises(ValueError):
        QuestMainComponent().find_next_step(QuestMetaData(quest_id=3), 0)


def test_get_quest_data_round_trip(world):
    main, _, _ = world
    assert main.get_quest_data(7).quest_title == "Bakery"
    with pytest.raises(KeyError):
        main.get_quest_data(99)


def test_add_quest_without_authority():
    main = QuestMainComponent(has_authority=False)
    main.add_quest(make_quest())
    assert main.quests == {}


def test_add_quests_skips_missing_rows():
    main = QuestMainComponent()
    main.add_quests([make_quest(), None, QuestMetaData(quest_id=9)])
    assert sorted(main.quests) == [7, 9]


def test_progress_through_quest(world):
    main, player, npc = world
    assert main.try_progress_quest(7, player, npc) is True
    assert player.is_quest_known(7)
    assert player.get_known_quest(7).progress_id == 0

    assert main.try_progress_quest(7, player, npc) is True
    assert player.get_known_quest(7).progress_id == 1

    assert main.try_progress_quest(7, player, npc) is True
    data = player.get_known_quest(7)
    assert data.progress_id == 2
    assert data.finished is True
    assert [s.quest_sub_id for s in data.previous_steps] == [0, 1]


def test_giver_that_cannot_validate(world, caplog):
    main, player, _ = world
    npc = Npc(7, [1])
    with caplog.at_level(logging.WARNING, logger="questdialog"):
        assert main.try_progress_quest(7, player, npc) is False
    assert not player.is_quest_known(7)
    assert "Current step : -1" in caplog.text


def test_non_bearer_is_rejected(world):
    main, _, npc = world
    assert main.try_progress_quest(7, object(), npc) is False


def test_non_giver_is_rejected(world):
    main, player, _ = world
    assert main.try_progress_quest(7, player, object()) is False
    assert not player.is_quest_known(7)


def test_unknown_quest_raises(world):
    main, player, npc = world
    with pytest.raises(KeyError):
        main.try_progress_quest(99, player, npc)


def test_turn_in_dialog_is_shown():
    main = QuestMainComponent()
    main.add_quest(make_quest(turn_in="Thanks for the bread"))
    player = Player(GameMode(main))
    npc = Npc(7, [0, 1])
    main.try_progress_quest(7, player, npc)
    assert player.shown == []
    main.try_progress_quest(7, player, npc)
    assert player.shown == ["Thanks for the bread"]


def test_force_add_player_quest(world):
    main, player, _ = world
    main.force_add_player_quest(player, 7)
    assert player.is_quest_known(7)
    assert player.get_known_quest(7).quest_title == "Bakery"


def test_force_add_without_authority(world):
    main, player, _ = world
    main.has_authority = False
    main.force_add_player_quest(player, 7)
    assert not player.is_quest_known(7)