# questdialog

A small, engine-independent library for NPC dialog and quest tracking in
role-playing games. It has no dependencies outside the standard library.

## What is in it

- `questdialog.quest_data`: the dataclasses `QuestStep`, `QuestMetaData`,
  `QuestValidatableSteps`, `QuestProgressStep` (with
  `QuestProgressStep.from_step`) and `QuestProgressData`, and the
  `QuestStepCondition` enum (`EQUAL`, `LESSER`, `LESSER_EQUAL`, `GREATER`,
  `GREATER_EQUAL`) used to compare a player's progress with a step.
- `questdialog.dialog_data`: `DialogTopic`, `DialogTopicBundle`,
  `DialogTopicMetaBundle` and `DialogTopicCondition`. Its
  `verify_condition(dialog_actor, controller)` checks the speaker's relation
  with the controller's pawn against `minimum_relation` (0.375 by default) and,
  when `quest_id` is set, the controller's quest progress.
- `questdialog.interfaces`: abstract roles for your game objects —
  `DialogActor`, `QuestGiver`, `QuestBearer`, `DialogGameMode`,
  `DialogDisplay` — and a plain `Controller` holding a pawn.
- `questdialog.quest_main.QuestMainComponent`: the registry of every quest
  (`add_quest`, `add_quests`, `get_quest_data`) and the rule for starting or
  advancing a quest (`try_progress_quest(quest_id, bearer, validator)`).
- `questdialog.dialog_main.DialogMainComponent`: the registry of topics,
  bundles and meta bundles, with their greetings; unknown meta bundles give the
  greeting `"Error"` and a relation limit of `0.0`.
- `questdialog.quest_bearer.QuestBearerComponent`: the quests one player
  knows and the checks on them (`is_at_step`, `is_past_step`, `can_display`,
  `can_validate`, `can_validate_step_with_items`, which returns an
  `ItemCheck(accepted, remaining_items, remaining_coins)`). It emits three
  `Signal`s: `known_quest_changed`, `new_quest` and
  `quest_updated(quest_id, step_id)`.
- `questdialog.quest_giver.QuestGiverComponent`: the steps an NPC or place may
  validate (`add_validatable_steps`, `can_validate_quest_step`).
- `questdialog.dialog_component.DialogComponent`: one speaker's topics and
  greetings, loaded with `init_dialog_from_id` from the game mode's dialog
  registry. `parse_text_hyperlink` turns words naming an available topic into
  `<DialogLink id="...">word</>` markup, keeping one trailing `.,!:?` outside
  the link.
- `questdialog.area_validator.AreaQuestValidator`: a quest giver for trigger
  areas; `try_progress_quest(actor)` advances the area's quest for the
  controller returned by the actor's `get_controller()`.
- `questdialog.screen_message.ScreenMessage`: opacity over time of a timed
  on-screen message; `tick(delta_time)` updates `opacity` and sets `removed`
  once `life_time` plus two fades have passed.
- `questdialog.events.Signal`: `connect`, `disconnect`, `emit`.
- `questdialog.messages`: `log`, `warning` and `error`, written to the
  `questdialog` logger.
- `questdialog.journal_markup`: `strike` and `bold`, which wrap text in
  `<Strike>…</>` and `<Bold>…</>`.

Components that take `has_authority=False` do nothing that changes state:
they register nothing and validate nothing.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from questdialog.interfaces import Controller, DialogGameMode, QuestBearer, QuestGiver
from questdialog.quest_bearer import QuestBearerComponent
from questdialog.quest_data import QuestMetaData, QuestStep
from questdialog.quest_giver import QuestGiverComponent
from questdialog.quest_main import QuestMainComponent


class GameMode(DialogGameMode):
    def __init__(self):
        self.quests = QuestMainComponent()

    def get_main_dialog_component(self):
        return None

    def get_main_quest_component(self):
        return self.quests


class Player(Controller, QuestBearer):
    def __init__(self, game_mode):
        super().__init__()
        self.quest_component = QuestBearerComponent(owner=self, game_mode=game_mode)

    def get_quest_bearer_component(self):
        return self.quest_component


class Hunter(QuestGiver):
    def __init__(self):
        self.giver = QuestGiverComponent()
        self.giver.add_validatable_steps(1, [0, 1])

    def get_quest_giver_component(self):
        return self.giver


game_mode = GameMode()
game_mode.quests.add_quest(
    QuestMetaData(
        quest_id=1,
        quest_title="Wolf fangs",
        steps=[
            QuestStep(quest_id=1, quest_sub_id=0, step_title="Talk to the hunter"),
            QuestStep(quest_id=1, quest_sub_id=1, step_title="Bring ten fangs",
                      finishing_step=True),
        ],
    )
)

player, hunter = Player(game_mode), Hunter()
player.quest_component.quest_updated.connect(lambda qid, step: print(qid, step))

game_mode.try_progress_quest(1, player, hunter)  # starts the quest at step 0
game_mode.try_progress_quest(1, player, hunter)  # moves to step 1, which finishes it
assert player.get_known_quest(1).finished
```

## What it does not do

The library holds dialog and quest state and the rules that change it; it
does not draw anything. There are no dialog or quest-journal windows, no
rendering of the `<DialogLink>`, `<Strike>` or `<Bold>` markup, no network
replication between a server and clients, and no loading of quest or dialog
tables from files: rows are passed in as dataclass instances through
`add_quests`, `add_topics`, `add_bundles` and `add_meta_bundles`. Rewards are
handed to `QuestBearer.grant_reward`, which does nothing unless you override it.