"""Characters: mages and warriors that carry up to two weapons and fight."""

from __future__ import annotations

from typing import Optional, Tuple

from duelo.weapons import Weapon

WeaponPair = Tuple[Optional[Weapon], Optional[Weapon]]


class Character:
    """A fighter with health, a level, a shield and two weapon slots."""

    MAX_HEALTH = 100
    LEVEL = 0
    DEFENCE = 0
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo y el daño ejercido se reduce a  : {damage}"
    )
    FIRST_ATTACK_MESSAGE = "- {name}  Ataca con {weapon}, causa {damage} puntos de daño."
    SECOND_ATTACK_MESSAGE = "-{name} Ataca con {weapon}, causa {damage} de daño."
    RECEIVE_MESSAGE = "{name} -->  Recibe  {damage} puntos de daño"

    def __init__(self, name: str, weapons: WeaponPair = (None, None)) -> None:
        self.name = name
        self.level = self.LEVEL
        self.defence = self.DEFENCE
        self.health = self.MAX_HEALTH
        self.damage_taken = 0
        self.primary, self.secondary = weapons

    @property
    def weapons(self) -> WeaponPair:
        """The two weapon slots, first and second; either may be empty."""
        return self.primary, self.secondary

    def attack(self, target: Character) -> int:
        """Hit the target with every carried weapon; return the total damage."""
        if self.primary is None and self.secondary is None:
            print(f"{self.name}intenta atacar pero no tiene armas")
            return 0
        total = 0
        for weapon, template in (
            (self.primary, self.FIRST_ATTACK_MESSAGE),
            (self.secondary, self.SECOND_ATTACK_MESSAGE),
        ):
            if weapon is None:
                continue
            total += weapon.damage
            print(template.format(name=self.name, weapon=weapon.name, damage=weapon.damage))
        print(f"--> {self.name} en total causa {total} puntos de daño a {target.name}")
        target.damage_taken = total
        target.receive_damage()
        return total

    def shield(self) -> int:
        """Reduce the pending damage by the defence, apply it, and return it."""
        self.damage_taken = max(0, self.damage_taken - self.defence)
        self.health -= self.damage_taken
        print(self.SHIELD_MESSAGE.format(name=self.name, damage=self.damage_taken))
        return self.damage_taken

    def receive_damage(self) -> None:
        """Take the pending damage through the shield; a dead fighter is healed."""
        self.shield()
        print(self.RECEIVE_MESSAGE.format(name=self.name, damage=self.damage_taken))
        self.health = max(self.health, 0)
        self.heal()
        print(f"{self.name} tiene  {self.health} puntos de vida restante")

    def heal(self) -> bool:
        """Bring a fighter at zero health back to full; return whether it happened."""
        if self.health != 0:
            return False
        print("el enemigo murio")
        print("Curando...")
        self.health = self.MAX_HEALTH
        return True

    def increase_health(self, amount: int) -> int:
        """Add health, capped at the maximum, and return the new value."""
        self.health = min(self.health + amount, self.MAX_HEALTH)
        print(f"{self.name} Aumenta su vida un  {amount} . Vida actual: {self.health}")
        return self.health

    def show_info(self) -> None:
        """Print the weapons, level and remaining health."""
        if self.primary is not None:
            print(f"--> Primer arma que tiene {self.name} es : {self.primary.name}")
        else:
            print(f" --> Primer arma que tiene {self.name}: NO TIENE PRIMER ARMA")
        if self.secondary is not None:
            print(f"--> Segunda arma que tiene {self.name} es : {self.secondary.name}")
        else:
            print(f" --> Segunda arma que tiene {self.name}: NO TIENE SEGUNDA ARMA")
        print(f"--> Nivel de {self.name} es : {self.level}")
        print(f"--> Vida restante de {self.name} es : {self.health}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, health={self.health})"


class Mage(Character):
    """A spell caster protected by a magic shield."""

    FIRST_ATTACK_MESSAGE = (
        "- {name}  Ataca con su primer arma:  {weapon}, causa {damage} puntos de daño."
    )
    SECOND_ATTACK_MESSAGE = (
        "-{name} Ataca con su segunda arma: {weapon}, causa {damage} de daño."
    )
    RECEIVE_MESSAGE = "{name} -->  recibe  {damage} puntos de daño"


class Warrior(Character):
    """A fighter protected by special armour."""


class Warlock(Mage):
    LEVEL = 10
    DEFENCE = 10
    SHIELD_MESSAGE = (
        " PERO....{name} activa su escudo de Brujo (con brujeria) y el daño "
        "ejercido se reduce a  : {damage}"
    )


class Conjurer(Mage):
    LEVEL = 25
    DEFENCE = 30
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Conjurador y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Sorcerer(Mage):
    LEVEL = 40
    DEFENCE = 20
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Hechicero y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Necromancer(Mage):
    LEVEL = 50
    DEFENCE = 30
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Nigromante y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Barbarian(Warrior):
    LEVEL = 20
    DEFENCE = 20
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Barbaro y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Paladin(Warrior):
    LEVEL = 15
    DEFENCE = 15
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Paladin y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Knight(Warrior):
    LEVEL = 10
    DEFENCE = 10
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Caballero y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Mercenary(Warrior):
    LEVEL = 10
    DEFENCE = 15
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Mercenario y el daño ejercido se "
        "reduce a  : {damage}"
    )


class Gladiator(Warrior):
    LEVEL = 56
    DEFENCE = 20
    SHIELD_MESSAGE = (
        "PERO....{name} activa su escudo de Gladiador ( resistencia ) y el daño "
        "ejercido se reduce a  : {damage}"
    )