from src.battle_core.enums import Type
from src.battle_core.exceptions import UnknownSpeciesError
from src.battle_core.schema.species_info import SpeciesInfo


def _species(hp: int, atk: int, defense: int, spatk: int, spdef: int, spe: int, types: list[Type], default_moves: list[str] | None = None) -> SpeciesInfo:
    return SpeciesInfo(
        base_hp=hp,
        base_attack=atk,
        base_defense=defense,
        base_special_attack=spatk,
        base_special_defense=spdef,
        base_speed=spe,
        types=types,
        default_moves=default_moves or [],
    )


# Starters carry a fixed default moveset; the rest derive theirs from data.learnsets
SPECIES_INFOS: dict[str, SpeciesInfo] = {
    "Pikachu": _species(35, 55, 40, 50, 40, 90, [Type.ELECTRIC], ["Tackle", "Thundershock", "Thunderbolt"]),
    "Bulbasaur": _species(45, 49, 49, 65, 65, 45, [Type.GRASS, Type.POISON], ["Tackle", "Vine Whip", "Razor Leaf"]),
    "Charmander": _species(39, 52, 43, 60, 50, 65, [Type.FIRE], ["Scratch", "Ember", "Flamethrower"]),
    "Squirtle": _species(44, 48, 65, 50, 64, 43, [Type.WATER], ["Tackle", "Water Gun", "Bubble Beam"]),
    "Abra": _species(25, 20, 15, 105, 55, 90, [Type.PSYCHIC]),
    "Jigglypuff": _species(115, 45, 20, 45, 25, 20, [Type.NORMAL, Type.FAIRY]),
    "Diglett": _species(10, 55, 25, 35, 45, 95, [Type.GROUND]),
    "Geodude": _species(40, 80, 100, 30, 30, 20, [Type.ROCK, Type.GROUND]),
    "Gastly": _species(30, 35, 30, 100, 35, 80, [Type.GHOST, Type.POISON]),
    "Onix": _species(35, 45, 160, 30, 45, 70, [Type.ROCK, Type.GROUND]),
    "Voltorb": _species(40, 30, 50, 55, 55, 100, [Type.ELECTRIC]),
    "Exeggcute": _species(60, 40, 80, 60, 45, 40, [Type.GRASS, Type.PSYCHIC]),
    "Cubone": _species(50, 50, 95, 40, 50, 35, [Type.GROUND]),
    "Koffing": _species(40, 65, 95, 60, 45, 35, [Type.POISON]),
    "Rhyhorn": _species(80, 85, 95, 30, 30, 25, [Type.GROUND, Type.ROCK]),
    "Chansey": _species(250, 5, 5, 35, 105, 50, [Type.NORMAL]),
    "Staryu": _species(30, 45, 55, 70, 55, 85, [Type.WATER]),
    "Scyther": _species(70, 110, 80, 55, 80, 105, [Type.BUG, Type.FLYING]),
    "Magmar": _species(65, 95, 57, 100, 85, 93, [Type.FIRE]),
    "Pinsir": _species(65, 125, 100, 55, 70, 85, [Type.BUG]),
    "Tauros": _species(75, 100, 95, 40, 70, 110, [Type.NORMAL]),
    "Magikarp": _species(20, 10, 55, 15, 20, 80, [Type.WATER]),
    "Eevee": _species(55, 55, 50, 45, 65, 55, [Type.NORMAL]),
    "Porygon": _species(65, 60, 70, 85, 75, 40, [Type.NORMAL]),
    "Dratini": _species(41, 64, 45, 50, 50, 50, [Type.DRAGON]),
}

STARTER_SPECIES = ("Pikachu", "Bulbasaur", "Charmander", "Squirtle")


def get_species_info(species: str) -> SpeciesInfo:
    try:
        return SPECIES_INFOS[species]
    except KeyError:
        raise UnknownSpeciesError(species) from None


def get_all_species() -> list[str]:
    return list(SPECIES_INFOS)
