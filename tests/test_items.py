import pytest

from duelo.items import Amulet, MagicItem, Potion, SpellBook, Staff


def test_base_values_and_category():
    book = SpellBook("Libro", "Mago", 2023)
    assert book.damage == SpellBook.BASE_DAMAGE
    assert book.category == "Item Magico"
    assert book.weight == SpellBook.WEIGHT
    assert isinstance(book, MagicItem)


def test_legendary_item_gets_bonus(capsys):
    staff = Staff("Baston", "Mago", 2005)
    assert staff.damage == Staff.BASE_DAMAGE + Staff.DAMAGE_BONUS
    assert "Es un Item con experiencia" in capsys.readouterr().out


@pytest.mark.parametrize("cls", [Amulet, Staff, SpellBook, Potion])
def test_compatibility(cls):
    item = cls("x", "Mago", 2020)
    before = item.damage
    assert item.is_compatible("Mago") is True
    assert item.damage == before
    assert item.is_compatible("Guerrero") is False
    assert item.damage == before - MagicItem.INCOMPATIBLE_PENALTY


def test_amulet_charges_and_deactivation():
    amulet = Amulet("Amuleto", "Mago", 2020)
    results = [amulet.apply_magic_effect() for _ in range(Amulet.MAX_CHARGES)]
    assert results == [Amulet.POWER] * Amulet.MAX_CHARGES
    assert amulet.charges == 0
    assert amulet.active is False
    assert amulet.apply_magic_effect() == Amulet.POWER // 2
    assert amulet.activate() is False
    amulet.recharge()
    assert amulet.charges == Amulet.MAX_CHARGES
    assert amulet.active is True


def test_amulet_power_damage_returns_full_power():
    amulet = Amulet("Amuleto", "Mago", 2020)
    amulet.deactivate()
    assert amulet.power_damage() == Amulet.POWER
    assert amulet.activate() is True


def test_staff_energy_and_last_effort():
    staff = Staff("Baston", "Mago", 2022)
    uses = Staff.MAX_ENERGY // Staff.ENERGY_COST
    for _ in range(uses - 1):
        assert staff.apply_magic_effect() == Staff.BASE_DAMAGE
    assert staff.apply_magic_effect() == Staff.BASE_DAMAGE + Staff.LAST_EFFORT_BONUS
    assert staff.energy_level() == 0
    assert staff.durability == 0
    staff.repair()
    assert staff.durability == Staff.MAX_DURABILITY
    staff.apply_magic_effect()
    assert staff.energy == Staff.MAX_ENERGY - Staff.ENERGY_COST


def test_staff_recharge_energy():
    staff = Staff("Baston", "Mago", 2022)
    staff.apply_magic_effect()
    assert staff.recharge_energy() == Staff.MAX_ENERGY


def test_spellbook_cast_selected_spell():
    book = SpellBook("Libro", "Mago", 2023)
    book.select_spell("Explosion")
    assert book.cast() == 30
    assert book.current_magic() == SpellBook.MAX_MAGIC - SpellBook.MAGIC_COST
    assert book.durability_level() == SpellBook.MAX_DURABILITY - SpellBook.WEAR_STEP


def test_spellbook_unknown_spell_raises():
    book = SpellBook("Libro", "Mago", 2023)
    with pytest.raises(KeyError):
        book.select_spell("Rayo")
    assert book.selected_spell == ""


def test_spellbook_without_selection_does_nothing():
    book = SpellBook("Libro", "Mago", 2023)
    assert book.cast() == 0
    assert book.magic == SpellBook.MAX_MAGIC


def test_spellbook_exhaustion_and_recharge():
    book = SpellBook("Libro", "Mago", 2023)
    book.select_spell("Hielo")
    damages = [book.apply_magic_effect() for _ in range(10)]
    assert damages[:-1] == [15] * 9
    assert damages[-1] == 15 + SpellBook.LAST_EFFORT_BONUS
    assert book.magic == 0
    assert book.durability == SpellBook.MAX_DURABILITY
    assert book.apply_magic_effect() == 0
    assert book.magic == SpellBook.MAX_MAGIC


def test_potion_doses_and_refill():
    potion = Potion("Pocion", "Mago", 2024)
    for _ in range(Potion.MAX_DOSES - 1):
        assert potion.use() == Potion.POWER
    assert potion.doses == 1
    assert potion.apply_magic_effect() == Potion.POWER
    assert potion.doses == Potion.MAX_DOSES


def test_potion_expiry():
    old = Potion("Pocion", "Mago", 2011)
    assert old.check_expiry() is True
    assert old.apply_magic_effect() == Potion.POWER - Potion.EXPIRED_PENALTY
    fresh = Potion("Pocion", "Mago", 2024)
    assert fresh.check_expiry() is False
    old.refill()
    assert old.expired is False