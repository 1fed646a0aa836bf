"""Level-up learnsets: which moves each species knows at a given level."""

from src.battle_core.constants import MAX_MON_MOVES
from src.battle_core.schema.species_info import LearnsetEntry


def _learnset(*entries: tuple[int, str]) -> list[LearnsetEntry]:
    return [LearnsetEntry(level=level, move=move) for level, move in entries]


LEARNSETS: dict[str, list[LearnsetEntry]] = {
    "Pikachu": _learnset((1, "Tackle"), (1, "Growl"), (5, "Thunder Wave"), (10, "Thundershock"), (13, "Swift"), (18, "Double-Edge"), (25, "Thunderbolt")),
    "Bulbasaur": _learnset((1, "Tackle"), (1, "Growl"), (7, "Vine Whip"), (13, "Growth"), (20, "Razor Leaf"), (27, "Giga Drain")),
    "Charmander": _learnset((1, "Scratch"), (1, "Growl"), (7, "Ember"), (13, "Fire Punch"), (19, "Leer"), (25, "Flamethrower")),
    "Squirtle": _learnset((1, "Tackle"), (1, "Tail Whip"), (7, "Water Gun"), (13, "Withdraw"), (19, "Bubble Beam"), (25, "Recover")),
    "Abra": _learnset((1, "Metronome"), (1, "Growth"), (1, "Thunder Wave"), (16, "Psyshock"), (22, "Recover")),
    "Jigglypuff": _learnset((1, "Tackle"), (1, "Growl"), (9, "Thunder Wave"), (14, "Metronome"), (19, "Double-Edge"), (24, "Recover")),
    "Diglett": _learnset((1, "Scratch"), (1, "Growl"), (8, "Swift"), (15, "Withdraw"), (21, "Double-Edge")),
    "Geodude": _learnset((1, "Tackle"), (1, "Leer"), (10, "Withdraw"), (16, "Double-Edge"), (21, "Counter")),
    "Gastly": _learnset((1, "Leer"), (1, "Growth"), (8, "Psyshock"), (16, "Thunder Wave"), (22, "Giga Drain")),
    "Onix": _learnset((1, "Tackle"), (1, "Withdraw"), (9, "Leer"), (14, "Counter"), (19, "Double-Edge")),
    "Voltorb": _learnset((1, "Tackle"), (1, "Thunder Wave"), (9, "Thundershock"), (17, "Swift"), (25, "Thunderbolt")),
    "Exeggcute": _learnset((1, "Tackle"), (1, "Growl"), (7, "Vine Whip"), (15, "Psyshock"), (19, "Growth"), (25, "Giga Drain")),
    "Cubone": _learnset((1, "Tackle"), (1, "Growl"), (9, "Leer"), (17, "Counter"), (25, "Double-Edge")),
    "Koffing": _learnset((1, "Tackle"), (1, "Thunder Wave"), (9, "Growth"), (17, "Withdraw"), (21, "Double-Edge")),
    "Rhyhorn": _learnset((1, "Tackle"), (1, "Leer"), (10, "Withdraw"), (15, "Counter"), (25, "Double-Edge")),
    "Chansey": _learnset((1, "Tackle"), (1, "Growl"), (9, "Recover"), (17, "Metronome"), (23, "Double-Edge")),
    "Staryu": _learnset((1, "Tackle"), (1, "Swift"), (9, "Water Gun"), (17, "Recover"), (22, "Bubble Beam")),
    "Scyther": _learnset((1, "Scratch"), (1, "Leer"), (9, "Swift"), (17, "Counter"), (21, "Pin Missile"), (25, "Double-Edge")),
    "Magmar": _learnset((1, "Scratch"), (1, "Leer"), (7, "Ember"), (13, "Fire Punch"), (19, "Growth"), (25, "Flamethrower")),
    "Pinsir": _learnset((1, "Tackle"), (1, "Leer"), (9, "Withdraw"), (17, "Pin Missile"), (25, "Double-Edge")),
    "Tauros": _learnset((1, "Tackle"), (1, "Leer"), (9, "Withdraw"), (15, "Counter"), (21, "Double-Edge")),
    "Magikarp": _learnset((1, "Tackle"), (1, "Leer"), (10, "Swift"), (20, "Water Gun")),
    "Eevee": _learnset((1, "Tackle"), (1, "Growl"), (9, "Swift"), (17, "Double-Edge"), (25, "Recover")),
    "Porygon": _learnset((1, "Tackle"), (1, "Thunder Wave"), (9, "Psyshock"), (17, "Thundershock"), (25, "Recover")),
    "Dratini": _learnset((1, "Tackle"), (1, "Leer"), (8, "Thunder Wave"), (15, "Swift"), (22, "Double-Edge")),
}


def get_available_moves(species: str, level: int) -> list[str]:
    """Every move the species has learned by `level`, in learn order. Unknown species: []."""
    return [entry.move for entry in LEARNSETS.get(species, []) if entry.level <= level]


def get_best_moves(species: str, level: int, count: int = MAX_MON_MOVES) -> list[str]:
    """
    Pick up to `count` moves for a species at a level.

    When the species knows more than `count` moves, the most recently learned
    ones win (highest learn level first; ties keep learn order).
    """
    learned = [entry for entry in LEARNSETS.get(species, []) if entry.level <= level]
    if len(learned) <= count:
        return [entry.move for entry in learned]
    ranked = sorted(learned, key=lambda entry: entry.level, reverse=True)
    return [entry.move for entry in ranked[:count]]
