import random

import pytest

from duelo.characters import Mage, Warrior
from duelo.factory import (
    CharacterType,
    WeaponType,
    create_character,
    create_weapon,
    random_mages,
    random_warriors,
    random_weapon_count,
)
from duelo.items import Amulet, Potion, SpellBook, Staff
from duelo.weapons import Club, DoubleAxe, SingleAxe, Spear, Sword, Weapon


@pytest.mark.parametrize(
    "kind, cls, name",
    [
        (WeaponType.STAFF, Staff, "Baston"),
        (WeaponType.SPELL_BOOK, SpellBook, "LibrodeHerchizos"),
        (WeaponType.POTION, Potion, "Pocion"),
        (WeaponType.AMULET, Amulet, "Amuleto"),
        (WeaponType.SWORD, Sword, "Espada"),
        (WeaponType.CLUB, Club, "Garrote"),
        (WeaponType.DOUBLE_AXE, DoubleAxe, "Hachadoble"),
        (WeaponType.SINGLE_AXE, SingleAxe, "Hachasimple"),
        (WeaponType.SPEAR, Spear, "Lanza"),
    ],
)
def test_create_weapon_builds_each_kind(kind, cls, name):
    weapon = create_weapon(kind)
    assert isinstance(weapon, cls)
    assert weapon.name == name


def test_create_weapon_accepts_plain_int():
    weapon = create_weapon(4)
    assert weapon.name == "Espada"
    assert weapon.damage == Sword.BASE_DAMAGE


def test_create_weapon_gives_fresh_objects():
    first = create_weapon(WeaponType.SWORD)
    first.increase_damage()
    second = create_weapon(WeaponType.SWORD)
    assert first.damage == Sword.BASE_DAMAGE + Weapon.DAMAGE_BONUS
    assert second.damage == Sword.BASE_DAMAGE


def test_sword_keeps_base_damage():
    assert create_weapon(WeaponType.SWORD).damage == Sword.BASE_DAMAGE


def test_club_has_hardness_twenty():
    assert create_weapon(WeaponType.CLUB).hardness == 20


@pytest.mark.parametrize("kind", [-1, 9, 100])
def test_create_weapon_rejects_unknown_kind(kind):
    with pytest.raises(ValueError):
        create_weapon(kind)


@pytest.mark.parametrize(
    "kind, name",
    [
        (CharacterType.WARLOCK, "Brujo"),
        (CharacterType.CONJURER, "Conjurador"),
        (CharacterType.SORCERER, "Hechicero"),
        (CharacterType.NECROMANCER, "Nigromante"),
        (CharacterType.BARBARIAN, "Barbaro"),
        (CharacterType.PALADIN, "Paladin"),
        (CharacterType.KNIGHT, "Caballero"),
        (CharacterType.MERCENARY, "Mercenario"),
        (CharacterType.GLADIATOR, "Gladiador"),
    ],
)
def test_create_character_names(kind, name):
    character = create_character(kind, (None, None))
    assert character.name == name
    assert character.weapons == (None, None)


def test_first_four_kinds_are_mages_rest_warriors():
    characters = [create_character(kind) for kind in CharacterType]
    mages = [isinstance(c, Mage) for c in characters]
    warriors = [isinstance(c, Warrior) for c in characters]
    assert mages == [True] * 4 + [False] * 5
    assert warriors == [False] * 4 + [True] * 5


def test_create_character_carries_weapons():
    sword = create_weapon(WeaponType.SWORD)
    staff = create_weapon(WeaponType.STAFF)
    character = create_character(CharacterType.GLADIATOR, (sword, staff))
    assert character.weapons == (sword, staff)


def test_create_character_rejects_unknown_kind():
    with pytest.raises(ValueError):
        create_character(9, (None, None))


@pytest.mark.parametrize("seed", range(30))
def test_random_mages_are_distinct_mages(seed):
    picked = random_mages(random.Random(seed))
    assert 3 <= len(picked) <= 4
    assert len(set(picked)) == len(picked)
    assert all(kind <= CharacterType.NECROMANCER for kind in picked)


@pytest.mark.parametrize("seed", range(30))
def test_random_warriors_are_distinct_and_exclude_knight(seed):
    picked = random_warriors(random.Random(seed))
    assert 3 <= len(picked) <= 4
    assert len(set(picked)) == len(picked)
    assert CharacterType.KNIGHT not in picked
    assert all(kind >= CharacterType.BARBARIAN for kind in picked)


def test_random_picks_reach_both_sizes():
    sizes = {len(random_mages(random.Random(seed))) for seed in range(100)}
    assert sizes == {3, 4}


def test_random_weapon_count_range():
    counts = {random_weapon_count(random.Random(seed)) for seed in range(100)}
    assert counts == {0, 1, 2}


def test_same_seed_same_picks():
    first = random_mages(random.Random(7))
    second = random_mages(random.Random(7))
    assert list(first) == list(second)
    assert 3 <= len(first) <= 4