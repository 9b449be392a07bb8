"""Magic items: the weapons meant for mages."""

from __future__ import annotations

from abc import abstractmethod

from duelo.weapons import Weapon


class MagicItem(Weapon):
    """A weapon meant for mages; each one has its own magic effect."""

    INCOMPATIBLE_PENALTY = 5
    _MAGIC_KINDS = frozenset({"Baston", "LibrodeHechizos", "Pocion", "Amuleto"})

    def __init__(self, name: str, kind: str, damage: int, weight: int, model: int) -> None:
        super().__init__(name, kind, damage, weight, model)
        if self.is_legendary:
            self.increase_damage()
            print(
                f"{self.name} --> Es un Item con experiencia... modelo : "
                f"{self.model}.Aumenta su daño a:{self.damage}"
            )

    @property
    def category(self) -> str:
        return "Item Magico" if self.kind in self._MAGIC_KINDS else "Arma de Combate"

    def _check_compatibility(
        self, compatibility: str, accepted: str, reduced: str
    ) -> bool:
        """Accept a mage; anyone else lowers the item's damage."""
        if compatibility == "Mago":
            print(accepted)
            return True
        print("Item NO compatible, daño reducido.")
        self.damage -= self.INCOMPATIBLE_PENALTY
        print(reduced.format(damage=self.damage))
        return False

    @abstractmethod
    def apply_magic_effect(self) -> int:
        """Use the item's magic and return the damage it deals."""


class Amulet(MagicItem):
    """An elemental amulet that runs on charges."""

    BASE_DAMAGE = 20
    WEIGHT = 3
    MAX_CHARGES = 5
    POWER = 20

    def __init__(self, name: str, compatibility: str, model: int) -> None:
        super().__init__(name, "Amuleto", self.BASE_DAMAGE, self.WEIGHT, model)
        self.element = "tierra"
        self.active = True
        self.charges = self.MAX_CHARGES
        self.power = self.POWER
        self.compatibility = compatibility

    def is_compatible(self, compatibility: str) -> bool:
        return self._check_compatibility(
            compatibility,
            "Item compatible para un Mago",
            "La pocion daña: {damage} porque usted es Gurerrero.",
        )

    def apply_magic_effect(self) -> int:
        damage = self.power
        if not self.active:
            damage //= 2
            print("Amuleto desactivado. Daña la mitad de su poder.")
        else:
            print(f"Amuleto activado, libera su poder: {self.element}")
            print(f"Daño total activado:{damage}")

        if self.charges > 0:
            self.charges -= 1
            print(f"cargas restantes: {self.charges}")
            if self.charges == 0:
                print("El amuleto se desactiva porque no tiene cargas")
                self.active = False
        else:
            self.charges = 0
            print("sin cargas disponibles. Hay que recargar")
        return damage

    def activate(self) -> bool:
        """Switch the amulet on if it still has charges."""
        if self.charges > 0:
            self.active = True
            print("amuleto activado.")
        else:
            print("no hay cargas para poder activarlo")
        return self.active

    def deactivate(self) -> None:
        self.active = False

    def recharge(self) -> None:
        self.charges = self.MAX_CHARGES
        self.active = True
        print("cargas del amuelto restauradas. Activado.")

    def power_damage(self) -> int:
        """Report the amulet's power and return it."""
        if not self.active:
            print(f"Amuleto desactivado. Su daño es: {self.power // 2}")
        else:
            print(f"Daño total. Amuleto activado: {self.power}")
        return self.power


class Staff(MagicItem):
    """A burning staff that spends energy and durability on every use."""

    BASE_DAMAGE = 20
    WEIGHT = 5
    MAX_CHARGES = 50
    MAX_DURABILITY = 50
    MAX_ENERGY = 100
    WEAR_STEP = 5
    ENERGY_COST = 10
    LAST_EFFORT_BONUS = 5

    def __init__(self, name: str, compatibility: str, model: int) -> None:
        super().__init__(name, "Baston", self.BASE_DAMAGE, self.WEIGHT, model)
        self.max_charges = self.MAX_CHARGES
        self.special_effect = "quemadura"
        self.compatibility = compatibility
        self.durability = self.MAX_DURABILITY
        self.energy = self.MAX_ENERGY

    def is_compatible(self, compatibility: str) -> bool:
        return self._check_compatibility(
            compatibility,
            "Item compatible para un Mago",
            "El baston daña {damage} porque usted es Gurerrero.",
        )

    def wear(self) -> int:
        """Lower the durability after a blow and return what is left."""
        self.durability -= self.WEAR_STEP
        if self.durability > 0:
            print(f"Al baston le queda :{self.durability}de durabilidad.")
        elif self.durability == 0:
            print("El baston se rompio. No se puede usar mas hasta repararlo")
        return self.durability

    def repair(self) -> None:
        if self.durability <= 0:
            self.durability = self.MAX_DURABILITY
            print("el baston fué completamente reparado.")

    def energy_level(self) -> int:
        print(f"Energia actual del baston: {self.energy} %.")
        return self.energy

    def recharge_energy(self) -> int:
        self.energy = self.MAX_ENERGY
        print("energia del baston totalmente recargada.")
        return self.energy

    def apply_magic_effect(self) -> int:
        if self.energy <= 0:
            print(
                "El baston no tiene energia. No se puede aplicar efecto magico "
                "hasta recargar."
            )
            self.recharge_energy()
        print(f"El baston aplica su efecto magico: {self.special_effect}")
        if self.energy <= self.ENERGY_COST:
            print("Ultimo ezfuerzo! El baston libera un golpe potenciado. ")
            self.damage += self.LAST_EFFORT_BONUS
            print(f"Nuevo daño potenciado:{self.damage}")
        self.energy -= self.ENERGY_COST
        self.wear()
        self.energy = max(self.energy, 0)
        print(f"Energia restante del baston: {self.energy}%")
        return self.damage


class SpellBook(MagicItem):
    """A book of spells; casting spends magic and wears the book."""

    BASE_DAMAGE = 20
    WEIGHT = 5
    MAX_MAGIC = 100
    MAX_DURABILITY = 50
    MAGIC_COST = 10
    WEAR_STEP = 5
    LAST_EFFORT_BONUS = 5

    def __init__(self, name: str, compatibility: str, model: int) -> None:
        super().__init__(name, "LibrodeHechizos", self.BASE_DAMAGE, self.WEIGHT, model)
        self.spells: dict[str, int] = {
            "Bola de fuego": 25,
            "Explosion": 30,
            "Hielo": 15,
        }
        self.magic = self.MAX_MAGIC
        self.compatibility = compatibility
        self.selected_spell = ""
        self.durability = self.MAX_DURABILITY

    def is_compatible(self, compatibility: str) -> bool:
        return self._check_compatibility(
            compatibility,
            "--> Item compatible para un Mago",
            "El Hechizo daña: {damage} porque usted es Gurerrero.",
        )

    def current_magic(self) -> int:
        print(f"Magia actual del libro: {self.magic}")
        return self.magic

    def cast(self) -> int:
        """Cast the selected spell and return its listed damage (0 if none)."""
        self.apply_magic_effect()
        return self.spells.get(self.selected_spell, 0)

    def select_spell(self, name: str) -> None:
        """Choose the spell to cast; raises KeyError for an unknown spell."""
        if name not in self.spells:
            raise KeyError(f"Hechizo no encontrado: {name}")
        self.selected_spell = name
        print(f"Hechizo seleccinado: {self.selected_spell}")

    def recharge_magic(self) -> int:
        self.magic = self.MAX_MAGIC
        print("Magia recargada")
        return self.magic

    def durability_level(self) -> int:
        print(f"Durabilidad actual del libro: {self.durability}")
        return self.durability

    def repair(self) -> int:
        if self.durability <= 0:
            self.durability = self.MAX_DURABILITY
            print("Libro reparado.")
        return self.durability

    def apply_magic_effect(self) -> int:
        if self.magic <= 0:
            print(
                "El libro no tiene magia. No se puede aplicar efecto magico "
                "hasta recargar."
            )
            self.recharge_magic()
            return 0
        if self.selected_spell not in self.spells:
            print("no existe este Hechizo.")
            return 0

        print(f"El libro aplica el hechizo: {self.selected_spell}")
        damage = self.spells[self.selected_spell]
        if self.magic <= self.MAGIC_COST:
            print("Ultimo ezfuerzo! El libro libera un hechizo potenciado. ")
            damage += self.LAST_EFFORT_BONUS
            print(f"Daño potenciado: {damage}")
        else:
            print(f"Daño magico aplicado: {damage}")

        self.magic = max(self.magic - self.MAGIC_COST, 0)
        self.durability -= self.WEAR_STEP
        if self.durability <= 0:
            self.durability = 0
            print("El libro se deterioro completamnete. Hay que repararlo")
            self.repair()
        print(
            f"Magia restante: {self.magic} | Durabilidad restante: {self.durability}"
        )
        return damage


class Potion(MagicItem):
    """A poison potion with a limited number of doses."""

    BASE_DAMAGE = 15
    WEIGHT = 1
    MAX_DOSES = 10
    POWER = 15
    EXPIRED_PENALTY = 10
    CURRENT_YEAR = 2025
    SHELF_LIFE = 10

    def __init__(self, name: str, compatibility: str, model: int) -> None:
        super().__init__(name, "Pocion", self.BASE_DAMAGE, self.WEIGHT, model)
        self.poison = "veneno"
        self.doses = self.MAX_DOSES
        self.power = self.POWER
        self.compatibility = compatibility
        self.expired = False

    def is_compatible(self, compatibility: str) -> bool:
        return self._check_compatibility(
            compatibility,
            "Item compatible para un Mago",
            "La pocion daña: {damage} porque usted es Gurerrero.",
        )

    def apply_magic_effect(self) -> int:
        if self.doses <= 0:
            print("Pocion vacia. ")
            return 0
        damage = self.power
        if self.expired:
            damage = max(damage - self.EXPIRED_PENALTY, 0)
            print("Pocion vencida... Daño debil")

        print(f"La pocion envenena al enemigo causandole {damage} de daño")
        self.doses -= 1
        if self.doses > 0:
            print(f"{self.doses} dosis restantes")
        else:
            self.doses = 0
            print("la pocion se agoto.")
            self.refill()
        return damage

    def use(self) -> int:
        """Drink one dose and return the potion's power."""
        self.apply_magic_effect()
        return self.power

    def refill(self) -> None:
        self.doses = self.MAX_DOSES
        self.expired = False
        print("Pocion recargada")

    def check_expiry(self) -> bool:
        """Mark the potion expired once it is more than ten years old."""
        if self.model + self.SHELF_LIFE < self.CURRENT_YEAR:
            self.expired = True
        return self.expired