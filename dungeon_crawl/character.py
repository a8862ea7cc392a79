"""Player characters, weapons and potions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from .screen import COLOR_BLUE, COLOR_PURPLE, COLOR_RESET, COLOR_YELLOW

HEAL_AMOUNT = 30
POTION_BOOST = 5


class Rarity(str, Enum):
    """How rare a weapon is."""

    COMMON = "Common"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"

    def __str__(self) -> str:
        return self.value


class Item(str, Enum):
    """Potions a character can carry."""

    HEALING_POTION = "Healing Potion"
    ATTACK_POTION = "Attack Potion"
    DEFENSE_POTION = "Defense Potion"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Weapon:
    """A weapon and the damage it adds to a roll."""

    name: str
    damage_bonus: int
    description: str
    rarity: Rarity | str


ALL_WEAPONS: tuple[Weapon, ...] = (
    Weapon("Sword", 5, "A rusty looking blade used for close combat.", Rarity.COMMON),
    Weapon("Staff", 3, "A sturdy staff that can unleash anger upon your enemies. Nerd.", Rarity.COMMON),
    Weapon(
        "Dagger",
        2,
        "A pocket dagger used for staby staby actions. It's quite shit but it sounds cool!",
        Rarity.COMMON,
    ),
    Weapon("GreatAxe", 8, "Big, brutal and slow.", Rarity.RARE),
    Weapon("Magic Wand", 6, "A wand bestowed to you by ancient powers.", Rarity.RARE),
    Weapon("Poisoned Blade", 4, "It stings after you swing. Edgelord.", Rarity.RARE),
    Weapon("Flaming sword", 10, "Engulfed in the God Emperor's holy fire", Rarity.EPIC),
    Weapon("Blade of eternity", 15, "Forged by the gods.", Rarity.LEGENDARY),
)

_RARITY_COLORS = {
    Rarity.RARE: COLOR_BLUE,
    Rarity.EPIC: COLOR_PURPLE,
    Rarity.LEGENDARY: COLOR_YELLOW,
}

# class name -> (hp, strength, defense, index of starting weapon)
_CLASS_STATS = {
    "Warrior": (100, 15, 10, 0),
    "Mage": (70, 20, 5, 1),
    "Rogue": (80, 12, 8, 2),
}

STARTING_GOLD = 50


def colorize_weapon(weapon: Weapon) -> str:
    """Return the weapon's name prefixed by its rarity, coloured for rare and better."""
    color = _RARITY_COLORS.get(weapon.rarity)
    if color is None:
        return f"[{weapon.rarity}] {weapon.name}"
    return f"{color}[{weapon.rarity}]{COLOR_RESET} {weapon.name}"


def _empty_weapon() -> Weapon:
    return Weapon("", 0, "", "")


@dataclass
class Character:
    """The player's hero: stats, potions, weapons and gold."""

    name: str = ""
    class_name: str = ""
    hp: int = 0
    max_hp: int = 0
    strength: int = 0
    defense: int = 0
    healing_potion: int = 0
    defense_potion: int = 0
    attack_potion: int = 0
    level: int = 0
    weapon: Weapon = field(default_factory=_empty_weapon)
    unlocked_weapons: list[Weapon] = field(default_factory=list)
    gold: int = 0
    temp_attack_boost: int = 0
    temp_defense_boost: int = 0
    stunned: bool = False
    burn_duration: int = 0

    def use_item(self, item: Item) -> None:
        """Drink a potion of the given kind."""
        if item is Item.HEALING_POTION:
            if self.healing_potion > 0:
                self.hp = min(self.hp + HEAL_AMOUNT, self.max_hp)
            self.healing_potion -= 1
            print(f"You have used a healing potion! You restored {HEAL_AMOUNT}HP.")
        elif item is Item.ATTACK_POTION:
            if self.attack_potion > 0:
                self.strength += POTION_BOOST
                self.attack_potion -= 1
                print(
                    "You have used an attack potion. Your strength grows -- "
                    f"now your attacks deal {POTION_BOOST} more damage!"
                )
        elif item is Item.DEFENSE_POTION:
            if self.defense_potion > 0:
                self.defense += POTION_BOOST
                self.defense_potion -= 1
                print(
                    f"You have used a defense potion! Defense boosted by {POTION_BOOST} for this round."
                )

    def to_dict(self) -> dict[str, Any]:
        """Return the character as the mapping stored in save files."""
        return {
            "Name": self.name,
            "Class": self.class_name,
            "HP": self.hp,
            "MaxHP": self.max_hp,
            "Strength": self.strength,
            "Defense": self.defense,
            "HealingPotion": self.healing_potion,
            "DefensePotion": self.defense_potion,
            "AttackPotion": self.attack_potion,
            "Level": self.level,
            "Weapon": _weapon_to_dict(self.weapon),
            "UnlockedWeapons": [_weapon_to_dict(w) for w in self.unlocked_weapons],
            "Gold": self.gold,
            "TempAttackBoost": self.temp_attack_boost,
            "TempDefenseBoost": self.temp_defense_boost,
            "Stunned": self.stunned,
            "BurnDuration": self.burn_duration,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Character:
        """Build a character from a save-file mapping; missing fields take zero values."""
        weapon_data = data.get("Weapon")
        return cls(
            name=data.get("Name", ""),
            class_name=data.get("Class", ""),
            hp=data.get("HP", 0),
            max_hp=data.get("MaxHP", 0),
            strength=data.get("Strength", 0),
            defense=data.get("Defense", 0),
            healing_potion=data.get("HealingPotion", 0),
            defense_potion=data.get("DefensePotion", 0),
            attack_potion=data.get("AttackPotion", 0),
            level=data.get("Level", 0),
            weapon=_weapon_from_dict(weapon_data) if weapon_data else _empty_weapon(),
            unlocked_weapons=[_weapon_from_dict(w) for w in data.get("UnlockedWeapons") or []],
            gold=data.get("Gold", 0),
            temp_attack_boost=data.get("TempAttackBoost", 0),
            temp_defense_boost=data.get("TempDefenseBoost", 0),
            stunned=data.get("Stunned", False),
            burn_duration=data.get("BurnDuration", 0),
        )


def _weapon_to_dict(weapon: Weapon) -> dict[str, Any]:
    return {
        "Name": weapon.name,
        "DamageBonus": weapon.damage_bonus,
        "Description": weapon.description,
        "Rarity": str(weapon.rarity),
    }


def _weapon_from_dict(data: dict[str, Any]) -> Weapon:
    raw_rarity = data.get("Rarity", "")
    try:
        rarity: Rarity | str = Rarity(raw_rarity)
    except ValueError:
        rarity = raw_rarity
    return Weapon(
        name=data.get("Name", ""),
        damage_bonus=data.get("DamageBonus", 0),
        description=data.get("Description", ""),
        rarity=rarity,
    )


def new_character(name: str, class_name: str) -> Character:
    """Create a level-1 character of the given class.

    Raises ValueError if the class is not Warrior, Mage or Rogue.
    """
    try:
        hp, strength, defense, weapon_index = _CLASS_STATS[class_name]
    except KeyError:
        raise ValueError(f"unknown class: {class_name!r}") from None
    return Character(
        name=name,
        class_name=class_name,
        hp=hp,
        max_hp=hp,
        strength=strength,
        defense=defense,
        level=1,
        weapon=ALL_WEAPONS[weapon_index],
        unlocked_weapons=list(ALL_WEAPONS[:3]),
        gold=STARTING_GOLD,
    )


def _first_word(answer: str) -> str:
    words = answer.split()
    return words[0] if words else ""


def create_character(ask: Callable[[str], str] = input) -> Character:
    """Ask the player for a name and a class until a valid class is given."""
    print("Please enter your name: ")
    name = _first_word(ask(""))
    while True:
        print("Please choose your class [Warrior|Mage|Rogue]")
        class_name = _first_word(ask(""))
        try:
            return new_character(name, class_name)
        except ValueError:
            print("Please enter a valid class!")