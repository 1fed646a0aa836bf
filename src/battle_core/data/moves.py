from src.battle_core.enums import MoveCategory, MoveEffect, Stat, StatusCondition, Type, Weather
from src.battle_core.exceptions import UnknownMoveError
from src.battle_core.schema.battle_move import EffectParams, MoveDefinition, SubEffect

PHYSICAL = MoveCategory.PHYSICAL
SPECIAL = MoveCategory.SPECIAL
STATUS = MoveCategory.STATUS


def _boost(stat: Stat, stages: int = 1) -> SubEffect:
    return SubEffect(effect=MoveEffect.STAT_BOOST_SELF, params=EffectParams(stat=stat, stage_change=stages))


_MOVES = [
    # Basic physical moves
    MoveDefinition(
        name="Tackle",
        power=40,
        pp=35,
        category=PHYSICAL,
        type=Type.NORMAL,
        description="A physical attack in which the user charges and slams into the target with its whole body.",
    ),
    MoveDefinition(
        name="Scratch",
        power=40,
        pp=35,
        category=PHYSICAL,
        type=Type.NORMAL,
        description="Hard, pointed, sharp claws rake the target to inflict damage.",
    ),
    # Elemental special moves
    MoveDefinition(
        name="Thundershock",
        power=40,
        pp=30,
        category=SPECIAL,
        type=Type.ELECTRIC,
        description="A jolt of electricity is hurled at the target to inflict damage.",
    ),
    MoveDefinition(
        name="Vine Whip",
        power=45,
        pp=25,
        category=SPECIAL,
        type=Type.GRASS,
        description="The target is struck with slender, whiplike vines to inflict damage.",
    ),
    MoveDefinition(
        name="Ember",
        power=40,
        pp=25,
        category=SPECIAL,
        type=Type.FIRE,
        description="The target is attacked with small flames.",
    ),
    MoveDefinition(
        name="Water Gun",
        power=40,
        pp=25,
        category=SPECIAL,
        type=Type.WATER,
        description="The target is blasted with a forceful shot of water.",
    ),
    MoveDefinition(
        name="Thunderbolt",
        power=90,
        pp=15,
        category=SPECIAL,
        type=Type.ELECTRIC,
        description="A strong electric blast is loosed at the target.",
    ),
    MoveDefinition(
        name="Razor Leaf",
        power=55,
        pp=25,
        category=SPECIAL,
        type=Type.GRASS,
        description="Sharp-edged leaves are launched to slash at opposing Pokémon.",
    ),
    MoveDefinition(
        name="Flamethrower",
        power=90,
        pp=15,
        category=SPECIAL,
        type=Type.FIRE,
        description="The target is scorched with an intense blast of fire.",
    ),
    MoveDefinition(
        name="Bubble Beam",
        power=65,
        pp=20,
        category=SPECIAL,
        type=Type.WATER,
        effect=MoveEffect.SECONDARY_EFFECT,
        params=EffectParams(secondary_effect_chance=10, stat=Stat.SPEED, stage_change=1),
        description="A spray of bubbles is forcefully ejected at the target. This may also lower the target's Speed stat.",
    ),
    MoveDefinition(
        name="Swift",
        power=60,
        pp=20,
        accuracy=None,
        category=SPECIAL,
        type=Type.NORMAL,
        effect=MoveEffect.ALWAYS_HIT,
        description="Star-shaped rays are shot at the opposing Pokémon. This attack never misses.",
    ),
    MoveDefinition(
        name="Psyshock",
        power=80,
        pp=10,
        category=SPECIAL,
        type=Type.PSYCHIC,
        attack_stat=Stat.SPECIAL_ATTACK,
        defense_stat=Stat.DEFENSE,
        description="The user materializes a special psychic wave to attack. This attack does physical damage.",
    ),
    MoveDefinition(
        name="Weather Ball",
        power=50,
        pp=10,
        category=SPECIAL,
        type=Type.NORMAL,
        effect=MoveEffect.WEATHER_DEPENDENT,
        weather_effects={
            Weather.SUN: SubEffect(effect=MoveEffect.HIT, power=100, type=Type.FIRE),
            Weather.RAIN: SubEffect(effect=MoveEffect.HIT, power=100, type=Type.WATER),
            Weather.SANDSTORM: SubEffect(effect=MoveEffect.HIT, power=100, type=Type.ROCK),
            Weather.HAIL: SubEffect(effect=MoveEffect.HIT, power=100, type=Type.ICE),
        },
        default_effect=SubEffect(effect=MoveEffect.HIT),
        description="The power and type of this move change with the weather.",
    ),
    # Stat-changing moves
    MoveDefinition(
        name="Growl",
        pp=40,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_LOWER_TARGET,
        params=EffectParams(stat=Stat.ATTACK, stage_change=1),
        description="The user growls in an endearing way, making opposing Pokémon less wary. This lowers their Attack stats.",
    ),
    MoveDefinition(
        name="Tail Whip",
        pp=30,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_LOWER_TARGET,
        params=EffectParams(stat=Stat.DEFENSE, stage_change=1),
        description="The user wags its tail cutely, making opposing Pokémon less wary and lowering their Defense stat.",
    ),
    MoveDefinition(
        name="Leer",
        pp=30,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_LOWER_TARGET,
        params=EffectParams(stat=Stat.DEFENSE, stage_change=1),
        description="The user gives opposing Pokémon an intimidating leer that lowers the Defense stat.",
    ),
    MoveDefinition(
        name="String Shot",
        pp=40,
        category=STATUS,
        type=Type.BUG,
        effect=MoveEffect.STAT_LOWER_TARGET,
        params=EffectParams(stat=Stat.SPEED, stage_change=2),
        description="The user binds the target with silk blown from its mouth. This lowers the target's Speed stat.",
    ),
    MoveDefinition(
        name="Sand Attack",
        pp=15,
        category=STATUS,
        type=Type.GROUND,
        effect=MoveEffect.STAT_LOWER_TARGET,
        params=EffectParams(stat=Stat.ACCURACY, stage_change=1),
        description="Sand is hurled in the target's face, reducing its accuracy.",
    ),
    MoveDefinition(
        name="Growth",
        pp=20,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.SPECIAL_ATTACK, stage_change=1),
        description="The user's body grows all at once, raising its Sp. Atk stat.",
    ),
    MoveDefinition(
        name="Withdraw",
        pp=15,
        category=STATUS,
        type=Type.WATER,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.DEFENSE, stage_change=1),
        description="The user withdraws into its shell, raising its Defense stat.",
    ),
    MoveDefinition(
        name="Howl",
        pp=40,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.ATTACK, stage_change=1),
        description="The user howls loudly to raise its spirit, which raises its Attack stat.",
    ),
    MoveDefinition(
        name="Meditate",
        pp=40,
        category=STATUS,
        type=Type.PSYCHIC,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.ATTACK, stage_change=1),
        description="The user meditates to awaken the power deep within its body and raise its Attack stat.",
    ),
    MoveDefinition(
        name="Defense Curl",
        pp=40,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.DEFENSE, stage_change=1),
        description="The user curls up to conceal weak spots and raise its Defense stat.",
    ),
    MoveDefinition(
        name="Harden",
        pp=30,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.DEFENSE, stage_change=1),
        description="The user stiffens all the muscles in its body to raise its Defense stat.",
    ),
    MoveDefinition(
        name="Nasty Plot",
        pp=20,
        category=STATUS,
        type=Type.DARK,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.SPECIAL_ATTACK, stage_change=2),
        description="The user stimulates its brain by thinking bad thoughts. This sharply raises the user's Sp. Atk stat.",
    ),
    MoveDefinition(
        name="Double Team",
        pp=15,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.STAT_BOOST_SELF,
        params=EffectParams(stat=Stat.EVASION, stage_change=1),
        description="By moving rapidly, the user makes illusory copies of itself to raise its evasiveness.",
    ),
    # Combo moves
    MoveDefinition(
        name="Swords Dance",
        pp=20,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.COMBO,
        first_effect=_boost(Stat.ATTACK, 2),
        second_effect=SubEffect(effect=MoveEffect.HEAL, params=EffectParams(heal_fraction=0.1)),
        description="A frenetic dance to uplift the fighting spirit. Sharply raises the user's Attack stat.",
    ),
    MoveDefinition(
        name="Cosmic Power",
        pp=20,
        category=STATUS,
        type=Type.PSYCHIC,
        effect=MoveEffect.COMBO,
        first_effect=_boost(Stat.DEFENSE),
        second_effect=_boost(Stat.SPECIAL_DEFENSE),
        description="The user absorbs a mystical power from space to raise its Defense and Sp. Def stats.",
    ),
    MoveDefinition(
        name="Dragon Dance",
        pp=20,
        category=STATUS,
        type=Type.DRAGON,
        effect=MoveEffect.COMBO,
        first_effect=_boost(Stat.ATTACK),
        second_effect=_boost(Stat.SPEED),
        description="The user vigorously performs a mystic, powerful dance that raises its Attack and Speed stats.",
    ),
    # Status and healing
    MoveDefinition(
        name="Thunder Wave",
        pp=20,
        accuracy=90,
        category=STATUS,
        type=Type.ELECTRIC,
        effect=MoveEffect.STATUS,
        params=EffectParams(status_effect=StatusCondition.PARALYSIS),
        description="The user launches a weak jolt of electricity that paralyzes the target.",
    ),
    MoveDefinition(
        name="Recover",
        pp=10,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.HEAL,
        params=EffectParams(heal_fraction=0.5),
        description="Restoring its own cells, the user restores its own HP by half of its max HP.",
    ),
    MoveDefinition(
        name="Metronome",
        pp=10,
        category=STATUS,
        type=Type.NORMAL,
        effect=MoveEffect.METRONOME,
        description="The user waggles a finger and stimulates its brain into randomly using nearly any move.",
    ),
    # Damage with side effects
    MoveDefinition(
        name="Double-Edge",
        power=120,
        pp=15,
        category=PHYSICAL,
        type=Type.NORMAL,
        effect=MoveEffect.RECOIL,
        params=EffectParams(recoil_fraction=0.33),
        description="A reckless, life-risking tackle that also hurts the user.",
    ),
    MoveDefinition(
        name="Pin Missile",
        power=25,
        pp=20,
        accuracy=95,
        category=PHYSICAL,
        type=Type.BUG,
        effect=MoveEffect.MULTI_HIT,
        description="Sharp spikes are shot at the target in rapid succession. Hits 2-5 times.",
    ),
    MoveDefinition(
        name="Fire Punch",
        power=75,
        pp=15,
        category=PHYSICAL,
        type=Type.FIRE,
        effect=MoveEffect.SECONDARY_EFFECT,
        params=EffectParams(status_effect=StatusCondition.BURN, status_duration=3, secondary_effect_chance=10),
        description="The target is punched with a fiery fist. This may leave the target with a burn.",
    ),
    MoveDefinition(
        name="Giga Drain",
        power=75,
        pp=10,
        category=SPECIAL,
        type=Type.GRASS,
        effect=MoveEffect.VAMPIRIC,
        params=EffectParams(heal_fraction=0.5),
        description="A nutrient-draining attack. The user's HP is restored by half the damage taken by the target.",
    ),
    MoveDefinition(
        name="Counter",
        pp=20,
        category=PHYSICAL,
        type=Type.FIGHTING,
        effect=MoveEffect.COUNTER,
        description="A retaliation move that counters any physical attack, inflicting double the damage taken.",
    ),
]

MOVE_CATALOG: dict[str, MoveDefinition] = {move.name: move for move in _MOVES}


def get_move_data(name: str) -> MoveDefinition:
    """Catalog lookup. Raises UnknownMoveError for names not in MOVE_CATALOG."""
    try:
        return MOVE_CATALOG[name]
    except KeyError:
        raise UnknownMoveError(name) from None


def get_all_move_names() -> list[str]:
    return list(MOVE_CATALOG)
