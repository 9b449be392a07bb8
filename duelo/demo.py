"""A scripted showcase: two armed characters, their weapons, and a fight."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from duelo.characters import Gladiator, Warlock
from duelo.items import SpellBook
from duelo.weapons import Sword, Weapon


def _print_weapon(title: str, weapon: Weapon) -> None:
    print(title)
    print(f"--> NOMBRE: {weapon.name}")
    print(f"--> TIPO DE ARMA: {weapon.category}")
    print(f"--> MODELO: {weapon.model}")
    print(f"--> PESO: {weapon.weight}")
    print(f"--> DAÑO BASE: {weapon.damage}")
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparse.ArgumentParser(description="Demostracion de armas, personajes y combate.").parse_args(argv)

    book = SpellBook("Libro de Hechizos", "Mago", 2023)
    sword = Sword("Espada", "Caballero", 2005, 10)

    _print_weapon(" \n ========= DATOS DE LA ESPADA ==========", sword)
    _print_weapon("========= DATOS DEL LIBRO DE HECHIZOS ==========", book)

    print(" \n ===============  VERIFICO COMPATIBILIDAD EN ARMAS =============== ")
    print("Compatibilidad para que un mago use libro de hechizos: ")
    book.is_compatible("Mago")
    print("Compatibilidad para que un mago use espada: ")
    sword.compatible("Mago")

    warlock = Warlock("Juan", (book, sword))

    print("\n Creacion de espada2...")
    second_sword = Sword("Espada2", "Caballero", 2005, 10)
    gladiator = Gladiator("Luis", (second_sword, None))

    print("\n ============= INFORMACION PERSONAJES ==============")
    warlock.show_info()
    print()
    gladiator.show_info()

    print("\n =============  EL BRUJO LANZA UN HECHIZO ESPECIFICO: ==============")
    first, _ = warlock.weapons
    if isinstance(first, SpellBook):
        first.select_spell("Explosion")
        first.cast()

    print(" \n ============== EL GLADIADOR USA SU ESPADA (y la desafila): ==============")
    blade, _ = gladiator.weapons
    if isinstance(blade, Sword):
        for _ in range(3):
            blade.strike()
            print(f"Filo restante de la espada: {blade.edge}")
        print(
            "\n ==============ESPADA del galdiador con su golpe especial "
            "(aumenta su longitud) ============== "
        )
        blade.special_attack()

    print("\n ============== COMBATE: gladiador ataca a brujo ==============")
    gladiator.attack(warlock)

    print("\n ============== COMBATE: Brujo ataca  a Gladiador ==============")
    warlock.attack(gladiator)

    print("\n ======= INFO FINAL ======")
    warlock.show_info()
    print()
    gladiator.show_info()
    return 0