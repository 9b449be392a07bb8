# duelo

A small console role-playing game about mages and warriors who duel with
combat weapons and magic items. All of its game text is in Spanish.

## The pieces

- **Weapons** (`duelo.weapons`): every weapon is a `Weapon` with a `name`,
  `kind`, `damage`, `weight`, `model` and a `category` ("Item Magico" or
  "Arma de Combate"). A weapon whose model year is 2010 or older
  (`is_legendary`) gets 5 extra damage when it is made.
- **Combat weapons** (`duelo.weapons`): `Sword`, `Club`, `DoubleAxe`,
  `SingleAxe` and `Spear`, all `CombatWeapon`s. Each has a `special_attack()`
  that returns the damage it deals. `compatible("Guerrero")` accepts a
  warrior. Any other class lowers the weapon's damage by 5. Swords and axes
  wear their edge and can be sharpened.
- **Magic items** (`duelo.items`): `Amulet`, `Staff`, `SpellBook` and
  `Potion`, all `MagicItem`s. Each has an `apply_magic_effect()` that returns
  the damage it deals. `is_compatible("Mago")` accepts a mage. Any other class
  lowers the item's damage by 5. A spell book knows "Bola de fuego",
  "Explosion" and "Hielo". `select_spell` raises `KeyError` for any other
  name.
- **Characters** (`duelo.characters`):
  - Mages (`Mage`): `Warlock`, `Conjurer`, `Sorcerer` and `Necromancer`.
  - Warriors (`Warrior`): `Barbarian`, `Paladin`, `Knight`, `Mercenary` and
    `Gladiator`.

  Each `Character` has 100 health, a level and two weapon slots
  (`weapons`). `attack(target)` hits with every carried weapon and returns the
  total. The target's `shield()` takes its defence off that total before
  health is lost. A character whose health reaches 0 is healed back to 100.
- **Factory** (`duelo.factory`): `create_weapon(kind)` and
  `create_character(kind, weapons)` build items and characters from
  `WeaponType` and `CharacterType`. Both raise `ValueError` for an unknown
  kind. `random_mages`, `random_warriors` and `random_weapon_count` make
  random picks. Each takes an optional `random.Random`.

## Installation

```
pip install .
```

## Commands

```
duelo-demo
```
Shows a sword and a spell book and checks their compatibility with a mage.
A warlock and a gladiator then equip them, use them and attack each other.

```
duelo-roster [--seed N]
```
Builds a random roster with `duelo.roster.build_roster` and lists it. The
roster holds three or four distinct mages and three or four distinct warriors,
each with zero to two random weapons.

```
duelo-battle [--seed N]
```
Starts an interactive duel. In every round you pick a character, a weapon and
a move, and you are asked again if an answer is out of range. The rival is a
random character other than a knight, carrying one random weapon, and it plays
a random move.

The moves work like this:

- A strong hit beats a quick hit.
- A quick hit beats defend-and-hit.
- Defend-and-hit beats a strong hit.

Equal moves are a draw. Each lost round costs the loser 10 of its 100 HP. The
duel ends when a player's HP reaches 0.

`--seed` makes the random choices repeatable.

## Library use

```python
import random

from duelo.factory import CharacterType, WeaponType, create_character, create_weapon, random_mages

sword = create_weapon(WeaponType.SWORD)
gladiator = create_character(CharacterType.GLADIATOR, (sword, None))
warlock = create_character(CharacterType.WARLOCK, (None, None))
gladiator.attack(warlock)
print(warlock.health)  # 95: 15 sword damage less the warlock's defence of 10

print(random_mages(random.Random(1)))
```

## Limits

- The game does not save anything between runs.
- In `duelo-battle`, HP is counted by the duel itself. The weapons and
  characters picked each round do not change it.
- There is no computer-versus-computer or two-player mode.

## Tests

```
pip install .[test]
pytest
```