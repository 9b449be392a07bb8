"""Factory functions that build weapons and characters by kind."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Callable, Dict, List, Optional

from duelo.characters import (
    Barbarian,
    Character,
    Conjurer,
    Gladiator,
    Knight,
    Mercenary,
    Necromancer,
    Paladin,
    Sorcerer,
    Warlock,
    WeaponPair,
)
from duelo.items import Amulet, Potion, SpellBook, Staff
from duelo.weapons import Club, DoubleAxe, SingleAxe, Spear, Sword, Weapon


class WeaponType(IntEnum):
    STAFF = 0
    SPELL_BOOK = 1
    POTION = 2
    AMULET = 3
    SWORD = 4
    CLUB = 5
    DOUBLE_AXE = 6
    SINGLE_AXE = 7
    SPEAR = 8


class CharacterType(IntEnum):
    WARLOCK = 0
    CONJURER = 1
    SORCERER = 2
    NECROMANCER = 3
    BARBARIAN = 4
    PALADIN = 5
    KNIGHT = 6
    MERCENARY = 7
    GLADIATOR = 8


_WEAPON_BUILDERS: Dict[WeaponType, Callable[[], Weapon]] = {
    WeaponType.STAFF: lambda: Staff("Baston", "Mago", 2022),
    WeaponType.SPELL_BOOK: lambda: SpellBook("LibrodeHerchizos", "Mago", 2020),
    WeaponType.POTION: lambda: Potion("Pocion", "Mago", 2024),
    WeaponType.AMULET: lambda: Amulet("Amuleto", "Mago", 2020),
    WeaponType.SWORD: lambda: Sword("Espada", "Guerrero", 2024, 10),
    WeaponType.CLUB: lambda: Club("Garrote", "Guerrero", 2025, 10, 20),
    WeaponType.DOUBLE_AXE: lambda: DoubleAxe("Hachadoble", "Guerrero", 2025, 10),
    WeaponType.SINGLE_AXE: lambda: SingleAxe("Hachasimple", "Guerrero", 2020, 5),
    WeaponType.SPEAR: lambda: Spear("Lanza", "Guerrero", 2025, 3),
}

_CHARACTER_CLASSES: Dict[CharacterType, tuple] = {
    CharacterType.WARLOCK: (Warlock, "Brujo"),
    CharacterType.CONJURER: (Conjurer, "Conjurador"),
    CharacterType.SORCERER: (Sorcerer, "Hechicero"),
    CharacterType.NECROMANCER: (Necromancer, "Nigromante"),
    CharacterType.BARBARIAN: (Barbarian, "Barbaro"),
    CharacterType.PALADIN: (Paladin, "Paladin"),
    CharacterType.KNIGHT: (Knight, "Caballero"),
    CharacterType.MERCENARY: (Mercenary, "Mercenario"),
    CharacterType.GLADIATOR: (Gladiator, "Gladiador"),
}

_MAGES = (
    CharacterType.WARLOCK,
    CharacterType.CONJURER,
    CharacterType.SORCERER,
    CharacterType.NECROMANCER,
)

_WARRIORS = (
    CharacterType.BARBARIAN,
    CharacterType.PALADIN,
    CharacterType.MERCENARY,
    CharacterType.GLADIATOR,
)

MIN_PICKED = 3
MAX_WEAPONS = 2


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def create_weapon(kind: int) -> Weapon:
    """Build a fresh weapon of the given kind; raises ValueError for an unknown kind."""
    try:
        weapon_type = WeaponType(kind)
    except ValueError:
        raise ValueError(f"No se encontro arma: {kind!r}") from None
    return _WEAPON_BUILDERS[weapon_type]()


def create_character(kind: int, weapons: WeaponPair = (None, None)) -> Character:
    """Build a character of the given kind carrying the given pair of weapons."""
    try:
        character_type = CharacterType(kind)
    except ValueError:
        raise ValueError(f"No se pudo encontar personaje: {kind!r}") from None
    cls, name = _CHARACTER_CLASSES[character_type]
    return cls(name, tuple(weapons))


def _pick(pool: tuple, rng: Optional[random.Random]) -> List[CharacterType]:
    generator = _rng(rng)
    shuffled = list(pool)
    generator.shuffle(shuffled)
    count = generator.randint(MIN_PICKED, len(shuffled))
    return shuffled[:count]


def random_mages(rng: Optional[random.Random] = None) -> List[CharacterType]:
    """Pick three or four distinct mage kinds in random order."""
    return _pick(_MAGES, rng)


def random_warriors(rng: Optional[random.Random] = None) -> List[CharacterType]:
    """Pick three or four distinct warrior kinds in random order."""
    return _pick(_WARRIORS, rng)


def random_weapon_count(rng: Optional[random.Random] = None) -> int:
    """Choose how many weapons a character carries: 0, 1 or 2."""
    return _rng(rng).randint(0, MAX_WEAPONS)