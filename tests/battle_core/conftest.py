from collections import deque
from typing import Iterable

import pytest

from src.battle_core.constants import move_slot_key
from src.battle_core.damage_calculator import DamageCalculator
from src.battle_core.data.moves import MOVE_CATALOG, get_move_data
from src.battle_core.enums import Type, Weather
from src.battle_core.event_bus import BattleEvent, EventBus
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.battle_move import MoveDefinition, MoveInstance
from src.battle_core.schema.battle_state import BattleState
from src.battle_core.schema.combatant import Combatant
from src.battle_core.utils.rng import BattleRng


class ScriptedRng(BattleRng):
    """BattleRng that replays queued rolls before falling back to its seeded stream.

    randoms feed random() (and so chance / coin_flip / choice_index / hit counts),
    percents feed percent_roll(), damage_rolls feed damage_roll().
    """

    def __init__(self, seed: int = 0, randoms: Iterable[float] = (), percents: Iterable[float] = (), damage_rolls: Iterable[float] = ()):
        super().__init__(seed)
        self.randoms = deque(randoms)
        self.percents = deque(percents)
        self.damage_rolls = deque(damage_rolls)

    def random(self) -> float:
        if self.randoms:
            return self.randoms.popleft()
        return self._random.random()

    def percent_roll(self) -> float:
        if self.percents:
            return self.percents.popleft()
        return self._random.random() * 100

    def damage_roll(self) -> float:
        if self.damage_rolls:
            return self.damage_rolls.popleft()
        return super().damage_roll()


def build_mon(
    name: str = "Testmon",
    level: int = 50,
    hp: int = 100,
    max_hp: int | None = None,
    attack: int = 50,
    defense: int = 50,
    special_attack: int = 50,
    special_defense: int = 50,
    speed: int = 50,
    types: Iterable[Type] = (Type.NORMAL,),
    moves: Iterable[str | MoveDefinition] = ("Tackle",),
    **extra,
) -> Combatant:
    move_defs = [get_move_data(m) if isinstance(m, str) else m for m in moves]
    return Combatant(
        name=name,
        species=name,
        level=level,
        hp=hp,
        max_hp=max_hp if max_hp is not None else max(hp, 1),
        attack=attack,
        defense=defense,
        special_attack=special_attack,
        special_defense=special_defense,
        speed=speed,
        types=list(types),
        moves={move_slot_key(i): MoveInstance(move=m, pp_remaining=m.pp) for i, m in enumerate(move_defs)},
        **extra,
    )


@pytest.fixture
def make_rng():
    return ScriptedRng


@pytest.fixture
def make_mon():
    return build_mon


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorded(bus) -> list[BattleEvent]:
    events: list[BattleEvent] = []
    bus.subscribe("*", events.append)
    return events


@pytest.fixture
def make_ctx(bus):
    """Build a MoveContext wired to the shared bus."""

    def _make(
        attacker: Combatant,
        defender: Combatant,
        move: str | MoveDefinition,
        rng: BattleRng | None = None,
        weather: Weather = Weather.CLEAR,
        catalog: dict[str, MoveDefinition] | None = None,
    ) -> MoveContext:
        move_def = get_move_data(move) if isinstance(move, str) else move
        return MoveContext(
            attacker=attacker,
            defender=defender,
            move=move_def,
            battle_state=BattleState(battlers=[attacker, defender], weather=weather),
            catalog=catalog if catalog is not None else MOVE_CATALOG,
            calculator=DamageCalculator(rng or ScriptedRng(), bus),
        )

    return _make
