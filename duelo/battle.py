"""A round-based duel between the player's character and a random rival."""

from __future__ import annotations

import argparse
import random
from enum import IntEnum
from typing import Optional, Sequence

from duelo.characters import Character
from duelo.factory import CharacterType, WeaponType, create_character, create_weapon

STARTING_HEALTH = 100
ROUND_DAMAGE = 10
NO_WEAPON = "sin arma"


class Move(IntEnum):
    STRONG = 1
    QUICK = 2
    DEFEND = 3


_MOVE_NAMES = {
    Move.STRONG: "Golpe Fuerte",
    Move.QUICK: "Golpe Rapido",
    Move.DEFEND: "Defensa y Golpe",
}

# Each move beats the one it maps to.
_BEATS = {
    Move.STRONG: Move.QUICK,
    Move.QUICK: Move.DEFEND,
    Move.DEFEND: Move.STRONG,
}

_RIVAL_POOL = tuple(kind for kind in CharacterType if kind is not CharacterType.KNIGHT)

_CHARACTER_MENU = (
    "0- Brujo ",
    "1- Conjurador ",
    "2- Hechicero ",
    "3- Nigromante ",
    "4- Barbaro ",
    "5- Paladin ",
    "6- Caballero ",
    "7- Mercenario ",
    "8- Gladiador ",
)

_WEAPON_MENU = (
    "0- Baston ",
    "1- Libro de Hechizos ",
    "2- Pocion ",
    "3- Amuleto ",
    "4- Espada ",
    "5- Garrote ",
    "6- Hacha doble ",
    "7- Hacha simple ",
    "8- Lanza ",
)

_MOVE_MENU = (
    "1- Golpe Fuerte  ",
    "2- Golpe Rápido ",
    "3- Defensa y Golpe ",
)


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_rival(rng: Optional[random.Random] = None) -> Character:
    """Create a random non-knight character carrying one random weapon."""
    generator = _rng(rng)
    kind = generator.choice(_RIVAL_POOL)
    weapon = create_weapon(generator.randrange(len(WeaponType)))
    return create_character(kind, (weapon, None))


def move_name(move: int) -> str:
    """Human-readable name of a move; unknown values give "Sin ataque"."""
    try:
        return _MOVE_NAMES[Move(move)]
    except ValueError:
        return "Sin ataque"


def random_move(rng: Optional[random.Random] = None) -> Move:
    """Pick one of the three moves at random."""
    return Move(_rng(rng).randint(Move.STRONG, Move.DEFEND))


def first_weapon_name(character: Character) -> str:
    """Name of the character's first weapon, or "sin arma" if it has none."""
    first, _ = character.weapons
    return first.name if first is not None else NO_WEAPON


def round_winner(first: int, second: int) -> Optional[int]:
    """Return 1 or 2 for the player whose move wins, or None on a draw."""
    first_move, second_move = Move(first), Move(second)
    if first_move is second_move:
        return None
    return 1 if _BEATS[first_move] is second_move else 2


def _ask(menu_title: str, menu: Sequence[str], prompt: str, retry: str, low: int, high: int) -> int:
    print(menu_title)
    for line in menu:
        print(line)
    answer = input(prompt)
    while True:
        try:
            value = int(answer.strip())
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        answer = input(retry)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Batalla por rondas contra un rival aleatorio.")
    parser.add_argument("--seed", type=int, default=None, help="semilla aleatoria")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    health_one = STARTING_HEALTH
    health_two = STARTING_HEALTH
    round_number = 1

    while health_one > 0 and health_two > 0:
        character_choice = _ask(
            "======= ELIJA SU PERSONAJE ====",
            _CHARACTER_MENU,
            "--> INGRESE Jugador: ",
            "OPCION INVALIDA !. Ingrese nuevo jugador: ",
            0,
            len(CharacterType) - 1,
        )
        weapon_choice = _ask(
            "======= ELIJA UN ARMA ====",
            _WEAPON_MENU,
            "--> INGRESE arma: ",
            "OPCION INVALIDA !. Ingrese nueva arma: ",
            0,
            len(WeaponType) - 1,
        )
        player_one = create_character(character_choice, (create_weapon(weapon_choice), None))
        player_two = random_rival(rng)

        move_choice = _ask(
            "======= ELIJA UN GOLPE ====",
            _MOVE_MENU,
            "--> INGRESE GOLPE: ",
            "OPCION INVALIDA !. Ingrese nuevo golpe: ",
            Move.STRONG,
            Move.DEFEND,
        )
        move_one = Move(move_choice)
        move_two = random_move(rng)

        print(f"========== COMIENZO DE BATALLA. RONDA N°: {round_number} =============")

        winner = round_winner(move_one, move_two)
        if winner is None:
            print("Empate. Ambos jugadores golpearon igual. Se pasa a la siguiente ronda. ")
            continue
        if winner == 1:
            health_two -= ROUND_DAMAGE
            print(
                f"{player_one.name} Ataca con: {first_weapon_name(player_one)} "
                f"y hace 10 de daño a: {player_two.name}"
            )
            print(f"Ganador de la ronda N° {round_number} es: {player_one.name}")
        else:
            health_one -= ROUND_DAMAGE
            print(
                f"{player_two.name} Ataca con: {first_weapon_name(player_two)} "
                f"y hace 10 de daño a: {player_one.name}"
            )
            print(f"Ganador de la ronda N° {round_number} es : {player_two.name}")

        round_number += 1

        print("\n ============= ESTADO ACTUAL ==========")
        print(f"JUGADOR 1 --> HP: {health_one}")
        print(f"JUGADOR 2 --> HP: {health_two}")

    print("\n ============= RESULTADO FINAL  ==========")
    if health_one <= 0 and health_two <= 0:
        print("Empate. AMBOS MURIERON. ")
    elif health_one <= 0:
        print("La vida del jugador 1 llego a su fin...")
        print("--> GANADOR DE LA BATALLA: JUGADOR 2.")
    else:
        print("La vida del jugador 2 llego a su fin...")
        print("--> GANADOR DE LA BATALLA: JUGADOR 1 ")
    return 0