"""Weapons: the common weapon base and the combat weapons."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Weapon(ABC):
    """Anything a character can carry into a fight."""

    LEGENDARY_MODEL = 2010
    DAMAGE_BONUS = 5

    def __init__(self, name: str, kind: str, damage: int, weight: int, model: int) -> None:
        self.name = name
        self.kind = kind
        self.damage = damage
        self.weight = weight
        self.model = model

    @property
    def is_legendary(self) -> bool:
        """Old weapons (model year up to 2010) hit harder."""
        return self.model <= self.LEGENDARY_MODEL

    def increase_damage(self) -> None:
        """Raise the weapon's real damage by the fixed bonus."""
        self.damage += self.DAMAGE_BONUS

    @property
    @abstractmethod
    def category(self) -> str:
        """Either "Item Magico" or "Arma de Combate"."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, damage={self.damage})"


class CombatWeapon(Weapon):
    """A weapon meant for warriors; each one has its own special attack."""

    INCOMPATIBLE_PENALTY = 5
    _MAGIC_KINDS = frozenset({"Baston", "Libro de Hechizos", "Pocion", "Amuleto"})

    def __init__(
        self,
        name: str,
        kind: str,
        damage: int,
        model: int,
        weight: int,
        compatibility: str,
    ) -> None:
        super().__init__(name, kind, damage, weight, model)
        self.compatibility = compatibility
        if self.is_legendary:
            print(f"¡ ATENCION ! El daño incial de {self.name} es: {self.damage}")
            self.increase_damage()
            print(
                f"Pero, {self.name}--> Es un Arma con experiencia... modelo: "
                f"{self.model} .Aumenta su daño a:{self.damage}"
            )

    @property
    def category(self) -> str:
        return "Item Magico" if self.kind in self._MAGIC_KINDS else "Arma de Combate"

    def compatible(self, compatibility: str) -> bool:
        """Check the wielder's class; a non-warrior lowers the damage."""
        if compatibility == "Guerrero":
            print("Arma compatible para un Gurerrero")
            return True
        print(f"{self.name} no es compatible para un mago, daño reducido.")
        self.damage -= self.INCOMPATIBLE_PENALTY
        print(f"--> El daño ahora es:  {self.damage}")
        return False

    @abstractmethod
    def special_attack(self) -> int:
        """Perform the weapon's special attack and return the damage it deals."""


class Sword(CombatWeapon):
    """A long sword that loses its edge with every strike."""

    BASE_DAMAGE = 15
    LENGTH_BONUS = 20
    MAX_EDGE = 20

    def __init__(self, name: str, compatibility: str, model: int, weight: int) -> None:
        super().__init__(name, "Espada", self.BASE_DAMAGE, model, weight, compatibility)
        self.length_bonus = self.LENGTH_BONUS
        self.edge = self.MAX_EDGE

    def special_attack(self) -> int:
        self.damage += self.length_bonus
        print(f"Ahora el daño que genera {self.name} es: {self.damage}")
        return self.damage

    def sharpen(self) -> int:
        """Restore the edge once it is completely gone."""
        if self.edge == 0:
            self.edge = self.MAX_EDGE
        return self.edge

    def strike(self) -> int:
        """A normal blow: wears the edge and returns the damage dealt."""
        self.edge -= 1
        print(f"El golpe normal de la espada es: {self.damage} puntos de daño")
        return self.damage


class Club(CombatWeapon):
    """A heavy club whose hardness adds to the blow."""

    BASE_DAMAGE = 25
    HARDNESS_THRESHOLD = 20

    def __init__(
        self, name: str, compatibility: str, model: int, weight: int, hardness: int
    ) -> None:
        super().__init__(name, "Garrote", self.BASE_DAMAGE, model, weight, compatibility)
        self.hardness = hardness

    def special_attack(self) -> int:
        if self.hardness >= self.HARDNESS_THRESHOLD:
            self.damage += self.hardness
            print(f"El garrote golpea con mayor Fuerza. Su daño es: {self.damage}")
            return self.damage
        return self.basic_damage()

    def basic_damage(self) -> int:
        print(f"El daño basico generado por la lanza es: {self.damage}")
        return self.damage


class DoubleAxe(CombatWeapon):
    """A double-edged axe; each special attack dulls it."""

    BASE_DAMAGE = 20
    EXTRA_EDGE = 15
    INITIAL_EDGE = 50
    DULL_STEP = 2
    RESHARPENED_EDGE = 25

    def __init__(self, name: str, compatibility: str, model: int, weight: int) -> None:
        super().__init__(name, "Hachadoble", self.BASE_DAMAGE, model, weight, compatibility)
        self.extra_edge = self.EXTRA_EDGE
        self.edge = self.INITIAL_EDGE

    def special_attack(self) -> int:
        self.dull()
        self.damage += self.extra_edge
        print(f"el daño generado es: {self.damage}")
        return self.damage

    def dull(self) -> int:
        """Wear the edge down after use and return what is left."""
        if self.edge > 0:
            self.edge -= self.DULL_STEP
            return self.edge
        self.edge = 0
        print("Hacha doble sin filo. Necesita afilar para dañar")
        return self.edge

    def sharpen(self) -> int:
        if self.edge == 0:
            self.edge = self.RESHARPENED_EDGE
        return self.edge


class SingleAxe(CombatWeapon):
    """A single-edged axe that sharpens itself once the edge is gone."""

    BASE_DAMAGE = 20
    MAX_EDGE = 20
    MAX_WEAR = 50
    CRITICAL_WEAR = 45
    CRITICAL_BONUS = 20

    def __init__(self, name: str, compatibility: str, model: int, weight: int) -> None:
        super().__init__(name, "Hachasimple", self.BASE_DAMAGE, model, weight, compatibility)
        self.edge = self.MAX_EDGE
        self.wear = self.MAX_WEAR

    def sharpen(self) -> None:
        if self.edge == 0:
            self.edge = self.MAX_EDGE
            self.wear = self.MAX_WEAR

    def use(self) -> None:
        """A normal blow: lowers edge and wear, sharpening when blunt."""
        if self.edge > 0 and self.wear > 0:
            self.wear -= 1
            self.edge -= 1
        if self.edge <= 0 and self.wear > 0:
            print("el HachaSimple ya no tiene filo. Se afila automaticamente")
            self.sharpen()

    def special_attack(self) -> int:
        self.use()
        special = self.edge
        if self.edge == self.MAX_EDGE and self.wear >= self.CRITICAL_WEAR:
            special += self.CRITICAL_BONUS
            print("¡Daño especial CRITICO! ")
        else:
            print("Golpe normal.")
        total = self.damage + special
        print(f"Daño total es: {total}")
        return total


class Spear(CombatWeapon):
    """A spear that pierces armour on its special attack."""

    BASE_DAMAGE = 15
    DEPTH = 20

    def __init__(self, name: str, compatibility: str, model: int, weight: int) -> None:
        super().__init__(name, "Lanza", self.BASE_DAMAGE, model, weight, compatibility)
        self.depth = self.DEPTH

    def special_attack(self) -> int:
        self.damage += self.depth
        print(f"La lanza golpea con mayor profundidad es: {self.damage}")
        return self.damage

    def basic_damage(self) -> int:
        print(f"El daño basico generado por la lanza es: {self.damage}")
        return self.damage