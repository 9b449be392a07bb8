"""Build a random roster of armed mages and warriors and list it."""

from __future__ import annotations

import argparse
import random
from typing import List, Optional, Sequence

from duelo.characters import Character, Mage, Warrior
from duelo.factory import (
    CharacterType,
    WeaponType,
    create_character,
    create_weapon,
    random_mages,
    random_warriors,
    random_weapon_count,
)


def _armed(kind: CharacterType, rng: random.Random) -> Character:
    count = random_weapon_count(rng)
    first = create_weapon(rng.randrange(len(WeaponType))) if count >= 1 else None
    second = create_weapon(rng.randrange(len(WeaponType))) if count == 2 else None
    return create_character(kind, (first, second))


def build_roster(rng: Optional[random.Random] = None) -> List[Character]:
    """Create random mages, then random warriors, each with zero to two weapons."""
    generator = rng if rng is not None else random.Random()
    mages = [_armed(kind, generator) for kind in random_mages(generator)]
    warriors = [_armed(kind, generator) for kind in random_warriors(generator)]
    return mages + warriors


def _print_character(character: Character) -> None:
    print(f"Personaje : {character.name}")
    first, second = character.weapons
    if first is None and second is None:
        print(f"--> {character.name} es un personaje sin armas\n\n")
        return
    print("--> ARMAS: ")
    if first is not None:
        print(f"Primer arma: {first.name}")
        print(f"* DAÑO de {first.name}: {first.damage}")
    if second is not None:
        if first is not None:
            print()
        print(f"Segunda arma: {second.name}")
        print(f"* DAÑO de {second.name}: {second.damage}")
    print("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Crea personajes aleatorios con armas.")
    parser.add_argument("--seed", type=int, default=None, help="semilla aleatoria")
    args = parser.parse_args(argv)

    roster = build_roster(random.Random(args.seed))
    print("----------- LISTA PERSONAJES --------------")
    for character in roster:
        _print_character(character)

    print(f"personajes creados: {len(roster)}")
    print(f"-- guerreros creados: {sum(isinstance(c, Warrior) for c in roster)}")
    print(f"-- magos creados: {sum(isinstance(c, Mage) for c in roster)}")
    return 0