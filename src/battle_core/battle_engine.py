import logging
from typing import Optional

from src.battle_core.constants import REASON_FAINTED, REASON_NO_PP, REASON_STATUS_EFFECT, REASON_UNKNOWN_MOVE
from src.battle_core.damage_calculator import DamageCalculator
from src.battle_core.data.moves import MOVE_CATALOG
from src.battle_core.enums import BattleEventType, Side, Stat, Weather
from src.battle_core.event_bus import EventBus
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.move_effects.effect_applier import execute_effect
from src.battle_core.schema.battle_move import MoveDefinition
from src.battle_core.schema.battle_state import BattleState
from src.battle_core.schema.combatant import Combatant, StatStages
from src.battle_core.stat_stages import effective_stat
from src.battle_core.turn_start_effects import TurnStartEffectsProcessor
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)


class BattleEngine:
    """
    Core battle engine for a two-combatant, turn-based battle

    The engine is a pure state machine over BattleState: every public
    transition takes a state and returns a new one, leaving its input intact.
    Side effects are limited to publishing on the engine's EventBus and
    drawing from its BattleRng.

    Turn flow (execute_turn):
    1. Reject the turn if the battle is already over
    2. Tick status effects (paralysis may flag a skip)
    3. Order the two actions by effective speed (ties: coin flip)
    4. Execute the first action; execute the second only if the battle goes on
    5. Advance the turn counter unless the battle ended
    """

    def __init__(
        self,
        catalog: Optional[dict[str, MoveDefinition]] = None,
        events: Optional[EventBus] = None,
        rng: Optional[BattleRng] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            catalog: Moves available to redirecting effects; defaults to MOVE_CATALOG
            events: Event bus to publish on; a private one is created if omitted
            rng: Random source; takes precedence over `seed`
            seed: Seed for a fresh BattleRng when `rng` is not given
        """
        self.catalog = catalog if catalog is not None else MOVE_CATALOG
        self.events = events if events is not None else EventBus()
        self.rng = rng if rng is not None else BattleRng(seed)
        self.calculator = DamageCalculator(self.rng, self.events)
        self.turn_start_effects = TurnStartEffectsProcessor(self.rng, self.events)

    # =========================================================================
    # SETUP
    # =========================================================================

    @staticmethod
    def _prepare_for_battle(combatant: Combatant) -> Combatant:
        return combatant.model_copy(
            update={
                "stat_stages": StatStages(),
                "status_effects": {},
                "skip_turn": False,
                "last_received_physical_damage": 0,
            }
        )

    def create_battle_state(self, player: Combatant, opponent: Combatant, weather: Weather = Weather.CLEAR) -> BattleState:
        """Fresh battle at turn 1 with neutral stages and no lingering status."""
        state = BattleState(
            battlers=[self._prepare_for_battle(player), self._prepare_for_battle(opponent)],
            weather=weather,
        )
        self.events.emit(BattleEventType.BATTLE_STARTED, player=state.player.name, opponent=state.opponent.name, weather=weather.name)
        logger.debug("Battle started: %s vs %s", state.player.name, state.opponent.name)
        return state

    # =========================================================================
    # TURN RESOLUTION
    # =========================================================================

    def process_status_effects(self, state: BattleState) -> BattleState:
        return self.turn_start_effects.process(state)

    def determine_turn_order(self, state: BattleState) -> tuple[Side, Side]:
        """Faster side first by effective speed; an exact tie is a coin flip."""
        player_speed = effective_stat(state.player, Stat.SPEED)
        opponent_speed = effective_stat(state.opponent, Stat.SPEED)

        if player_speed == opponent_speed:
            player_first = self.rng.coin_flip()
        else:
            player_first = player_speed > opponent_speed
        order = (Side.PLAYER, Side.OPPONENT) if player_first else (Side.OPPONENT, Side.PLAYER)

        self.events.emit(
            BattleEventType.SPEED_COMPARISON,
            player={"name": state.player.name, "speed": player_speed},
            opponent={"name": state.opponent.name, "speed": opponent_speed},
            first_attacker=state.battler(order[0]).name,
        )
        return order

    def execute_turn(self, state: BattleState, player_move_key: str, opponent_move_key: str) -> BattleState:
        """
        Resolve one full turn.

        Args:
            state: Current battle state
            player_move_key: Slot key ("Move 1".."Move 4") chosen by the player side
            opponent_move_key: Slot key chosen by the opponent side

        Returns:
            The state after both actions (or after the first, if it ended the battle)
        """
        if state.battle_over:
            logger.debug("Turn rejected: battle already over")
            return state

        state = self.process_status_effects(state)
        self.events.emit(BattleEventType.TURN_STARTED, turn=state.turn, player=state.player.name, opponent=state.opponent.name)

        order = self.determine_turn_order(state)
        move_keys = {Side.PLAYER: player_move_key, Side.OPPONENT: opponent_move_key}
        for side in Side:
            instance = state.battler(side).get_move(move_keys[side])
            self.events.emit(
                BattleEventType.MOVE_SELECTED,
                pokemon=state.battler(side).name,
                move_key=move_keys[side],
                move=instance.name if instance else None,
            )

        first, second = order
        state = self.execute_attack(state, first, move_keys[first])
        if not state.battle_over:
            state = self.execute_attack(state, second, move_keys[second])

        if not state.battle_over:
            state = state.model_copy(update={"turn": state.turn + 1})
        logger.debug("Turn resolved; battle_over=%s winner=%s", state.battle_over, state.winner)
        return state

    def _fail_move_use(self, state: BattleState, side: Side, reason: str, move_key: str, attacker: Combatant | None = None) -> BattleState:
        attacker = attacker or state.battler(side)
        instance = attacker.get_move(move_key)
        self.events.emit(
            BattleEventType.MOVE_USED,
            pokemon=attacker.name,
            move=instance.name if instance else None,
            move_key=move_key,
            failed=True,
            reason=reason,
        )
        logger.info("%s could not act (%s)", attacker.name, reason)
        return state.with_battler(side, attacker)

    def execute_attack(self, state: BattleState, attacker_side: Side, move_key: str) -> BattleState:
        """
        One combatant uses one move.

        Validation happens in order: a pending skip (consumed here), a fainted
        attacker, an unknown slot, an exhausted move. Any of these produces a
        failed move-use event and spends no PP. Otherwise PP is spent, the
        move's effect runs, and a fainted combatant ends the battle.
        """
        attacker = state.battler(attacker_side)
        defender_side = attacker_side.opponent

        if attacker.skip_turn:
            return self._fail_move_use(state, attacker_side, REASON_STATUS_EFFECT, move_key, attacker.model_copy(update={"skip_turn": False}))
        if attacker.is_fainted():
            return self._fail_move_use(state, attacker_side, REASON_FAINTED, move_key)

        instance = attacker.get_move(move_key)
        if instance is None:
            return self._fail_move_use(state, attacker_side, REASON_UNKNOWN_MOVE, move_key)
        if instance.pp_remaining <= 0:
            return self._fail_move_use(state, attacker_side, REASON_NO_PP, move_key)

        used = instance.use()
        attacker = attacker.model_copy(update={"moves": {**attacker.moves, move_key: used}})
        defender = state.battler(defender_side)
        self.events.emit(BattleEventType.PP_UPDATED, pokemon=attacker.name, move=used.name, remaining_pp=used.pp_remaining, max_pp=used.move.pp)
        self.events.emit(BattleEventType.MOVE_USED, pokemon=attacker.name, target=defender.name, move=used.name, move_key=move_key)

        ctx = MoveContext(
            attacker=attacker,
            defender=defender,
            move=used.move,
            battle_state=state,
            catalog=self.catalog,
            calculator=self.calculator,
        )
        result = execute_effect(ctx)

        state = state.with_battler(attacker_side, result.attacker or attacker)
        state = state.with_battler(defender_side, result.defender or defender)
        return self._check_battle_end(state, attacker_side)

    def _check_battle_end(self, state: BattleState, attacker_side: Side) -> BattleState:
        defender_side = attacker_side.opponent
        if state.battler(defender_side).is_fainted():
            loser, winner = defender_side, attacker_side
        elif state.battler(attacker_side).is_fainted():
            # Recoil knocked out the user while the target survived
            loser, winner = attacker_side, defender_side
        else:
            return state

        self.events.emit(BattleEventType.POKEMON_FAINTED, pokemon=state.battler(loser).name)
        self.events.emit(BattleEventType.BATTLE_ENDED, winner=state.battler(winner).name, loser=state.battler(loser).name, winner_side=winner.name)
        logger.debug("%s fainted; %s wins", state.battler(loser).name, state.battler(winner).name)
        return state.model_copy(update={"battle_over": True, "winner": winner})

    # =========================================================================
    # QUERIES
    # =========================================================================

    @staticmethod
    def get_valid_moves(combatant: Combatant) -> list[str]:
        """Slot keys of moves that still have PP."""
        return [key for key, instance in combatant.moves.items() if instance.pp_remaining > 0]

    def select_random_move(self, combatant: Combatant) -> Optional[str]:
        """Uniform pick among moves with PP; None when nothing is usable."""
        valid = self.get_valid_moves(combatant)
        index = self.rng.choice_index(len(valid))
        return valid[index] if index >= 0 else None

    @staticmethod
    def is_valid_battle_state(state: BattleState) -> bool:
        """Structural and consistency checks beyond what the schema enforces."""
        for combatant in state.battlers:
            if not combatant.moves:
                return False
            if not 0 <= combatant.hp <= combatant.max_hp:
                return False
            if any(not 0 <= instance.pp_remaining <= instance.move.pp for instance in combatant.moves.values()):
                return False
        if state.battle_over != (state.winner is not None):
            return False
        return True
