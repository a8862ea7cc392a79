import pytest

from dungeon_crawl.character import ALL_WEAPONS, Item, Rarity, new_character
from dungeon_crawl.items import (
    locked_weapons,
    pick_drop_rarity,
    try_drop_item,
    try_drop_weapon,
    use_potions_menu,
    weapons_by_rarity,
)


class ScriptedRng:
    """Returns the given numbers in order from randrange and choice."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[self.randrange(len(seq))]


def _answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


def _weapon(name):
    return next(w for w in ALL_WEAPONS if w.name == name)


def test_weapons_by_rarity_legendary():
    assert weapons_by_rarity(Rarity.LEGENDARY) == [_weapon("Blade of eternity")]


def test_weapons_by_rarity_partitions_catalogue():
    total = sum(len(weapons_by_rarity(r)) for r in Rarity)
    assert total == len(ALL_WEAPONS)
    assert all(w.rarity is Rarity.RARE for w in weapons_by_rarity(Rarity.RARE))


def test_locked_weapons_excludes_unlocked():
    hero = new_character("Aria", "Warrior")
    locked = locked_weapons(hero)
    assert set(locked).isdisjoint(hero.unlocked_weapons)
    assert len(locked) + len(hero.unlocked_weapons) == len(ALL_WEAPONS)


def test_locked_weapons_by_rarity():
    hero = new_character("Aria", "Warrior")
    assert locked_weapons(hero, Rarity.COMMON) == []
    assert locked_weapons(hero, Rarity.EPIC) == [_weapon("Flaming sword")]


@pytest.mark.parametrize(
    "roll, rarity",
    [
        (0, Rarity.LEGENDARY),
        (9, Rarity.LEGENDARY),
        (10, Rarity.EPIC),
        (24, Rarity.EPIC),
        (25, Rarity.RARE),
        (54, Rarity.RARE),
        (55, Rarity.COMMON),
        (99, Rarity.COMMON),
    ],
)
def test_pick_drop_rarity(roll, rarity):
    assert pick_drop_rarity(roll) is rarity


def test_try_drop_item_misses_above_chance():
    hero = new_character("Aria", "Warrior")
    rng = ScriptedRng([30])
    assert try_drop_item(hero, rng) is None
    assert (hero.healing_potion, hero.attack_potion, hero.defense_potion) == (0, 0, 0)
    assert rng.calls == 1


@pytest.mark.parametrize(
    "kind, item, attribute",
    [
        (0, Item.HEALING_POTION, "healing_potion"),
        (1, Item.ATTACK_POTION, "attack_potion"),
        (2, Item.DEFENSE_POTION, "defense_potion"),
    ],
)
def test_try_drop_item_gives_potion(kind, item, attribute):
    hero = new_character("Aria", "Warrior")
    assert try_drop_item(hero, ScriptedRng([29, kind])) is item
    assert getattr(hero, attribute) == 1


def test_try_drop_weapon_misses_above_chance():
    hero = new_character("Aria", "Warrior")
    before = list(hero.unlocked_weapons)
    assert try_drop_weapon(hero, ScriptedRng([50])) is None
    assert hero.unlocked_weapons == before


def test_try_drop_weapon_unlocks_legendary(capsys):
    hero = new_character("Aria", "Warrior")
    weapon = try_drop_weapon(hero, ScriptedRng([0, 0, 0]))
    assert weapon == _weapon("Blade of eternity")
    assert hero.unlocked_weapons[-1] == weapon
    assert "Destiny has chosen you." in capsys.readouterr().out


def test_try_drop_weapon_nothing_left_of_rarity():
    hero = new_character("Aria", "Warrior")
    before = list(hero.unlocked_weapons)
    rng = ScriptedRng([0, 99])
    assert try_drop_weapon(hero, rng) is None
    assert hero.unlocked_weapons == before
    assert rng.calls == 2


def test_menu_heals_and_closes(capsys):
    hero = new_character("Aria", "Warrior")
    hero.hp = hero.max_hp - 5
    hero.healing_potion = 1
    use_potions_menu(hero, _answers("1", "4"))
    assert hero.hp == hero.max_hp
    assert hero.healing_potion == 0
    assert "Closing inventory..." in capsys.readouterr().out


def test_menu_attack_and_defense_boosts():
    hero = new_character("Aria", "Rogue")
    hero.attack_potion = 1
    hero.defense_potion = 1
    use_potions_menu(hero, _answers("2", "3", "4"))
    assert hero.temp_attack_boost == 5
    assert hero.temp_defense_boost == 5
    assert (hero.attack_potion, hero.defense_potion) == (0, 0)


def test_menu_without_potions_changes_nothing(capsys):
    hero = new_character("Aria", "Mage")
    hero.hp = 1
    use_potions_menu(hero, _answers("1", "2", "3", "4"))
    out = capsys.readouterr().out
    assert hero.hp == 1
    assert hero.temp_attack_boost == 0 and hero.temp_defense_boost == 0
    assert "No attack potions available." in out
    assert "No defense potions available." in out


def test_menu_rejects_bad_input(capsys):
    hero = new_character("Aria", "Mage")
    use_potions_menu(hero, _answers("abc", "9", "4"))
    assert capsys.readouterr().out.count("Invalid choice.") == 2