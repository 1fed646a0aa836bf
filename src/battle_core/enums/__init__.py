from src.battle_core.enums.type import Type
from src.battle_core.enums.move import MoveCategory
from src.battle_core.enums.move_effect import MoveEffect
from src.battle_core.enums.stat import Stat
from src.battle_core.enums.status import StatusCondition
from src.battle_core.enums.other import Side, Weather
from src.battle_core.enums.event import BattleEventType
