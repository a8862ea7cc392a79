"""Loot drops and the potion menu."""

from __future__ import annotations

import random
from typing import Callable

from .character import (
    ALL_WEAPONS,
    HEAL_AMOUNT,
    POTION_BOOST,
    Character,
    Item,
    Rarity,
    Weapon,
    colorize_weapon,
)
from .screen import COLOR_INFO, COLOR_ORK, COLOR_RESET, COLOR_SUBTITLE

ITEM_DROP_CHANCE = 30
WEAPON_DROP_CHANCE = 50

RARITY_DROP_CHANCES = {
    Rarity.LEGENDARY: 10,
    Rarity.EPIC: 15,
    Rarity.RARE: 30,
    Rarity.COMMON: 45,
}

_DROP_ORDER = (Rarity.LEGENDARY, Rarity.EPIC, Rarity.RARE)

_ITEM_DROPS = (
    (Item.HEALING_POTION, "healing_potion", "You got a healing potion!"),
    (Item.ATTACK_POTION, "attack_potion", "You got an attack potion!"),
    (Item.DEFENSE_POTION, "defense_potion", "You got a defense potion!"),
)

_FLAVOR = {
    Rarity.COMMON: "You find a simple but useful weapon.",
    Rarity.RARE: "You stumble upon a weapon radiating strange power.",
    Rarity.EPIC: "Your hands tramble. This weapon is radiating with energy.",
    Rarity.LEGENDARY: "The world goes silent. Destiny has chosen you.",
}

_RNG = random.Random()


def weapons_by_rarity(rarity: Rarity) -> list[Weapon]:
    """Return every weapon of the given rarity, in catalogue order."""
    return [w for w in ALL_WEAPONS if w.rarity == rarity]


def locked_weapons(player: Character, rarity: Rarity | None = None) -> list[Weapon]:
    """Return the weapons the player has not unlocked, optionally of one rarity."""
    unlocked = {w.name for w in player.unlocked_weapons}
    return [
        w
        for w in ALL_WEAPONS
        if w.name not in unlocked and (rarity is None or w.rarity == rarity)
    ]


def pick_drop_rarity(roll: int) -> Rarity:
    """Map a roll in 0..99 to a rarity using the drop chance table."""
    threshold = 0
    for rarity in _DROP_ORDER:
        threshold += RARITY_DROP_CHANCES[rarity]
        if roll < threshold:
            return rarity
    return Rarity.COMMON


def try_drop_item(player: Character, rng: random.Random | None = None) -> Item | None:
    """Maybe give the player a random potion; return the potion given, if any."""
    rng = _RNG if rng is None else rng
    if rng.randrange(100) >= ITEM_DROP_CHANCE:
        return None
    item, attribute, message = _ITEM_DROPS[rng.randrange(len(_ITEM_DROPS))]
    print(message)
    setattr(player, attribute, getattr(player, attribute) + 1)
    return item


def try_drop_weapon(player: Character, rng: random.Random | None = None) -> Weapon | None:
    """Maybe unlock a new weapon for the player; return it, if any."""
    rng = _RNG if rng is None else rng
    if rng.randrange(100) >= WEAPON_DROP_CHANCE:
        return None
    rarity = pick_drop_rarity(rng.randrange(100))
    candidates = locked_weapons(player, rarity)
    if not candidates:
        return None
    weapon = rng.choice(candidates)
    player.unlocked_weapons.append(weapon)
    print(f"\n **** You found a {colorize_weapon(weapon)}! ({weapon.description}) ****")
    print(_FLAVOR.get(weapon.rarity, ""))
    return weapon


def _read_choice(ask: Callable[[str], str]) -> int:
    try:
        return int(ask("").strip())
    except ValueError:
        return 0


def use_potions_menu(player: Character, ask: Callable[[str], str] = input) -> None:
    """Let the player drink potions until they close the inventory."""
    while True:
        print(f"\n {COLOR_SUBTITLE} --- Stats | Inventory --- {COLOR_RESET}")
        print(
            f"{COLOR_ORK}HP{COLOR_RESET}: {player.hp}/{player.max_hp} | "
            f"{COLOR_INFO}Attack Potions{COLOR_RESET}: {player.attack_potion} | "
            f"{COLOR_INFO}Armor Potions{COLOR_RESET}: {player.defense_potion} | "
            f"{COLOR_INFO}Healing Potions{COLOR_RESET}: {player.healing_potion}"
        )
        print("1. Use Healing potion.")
        print("2. Use Attack potion.")
        print("3. Use defense potions.")
        print("4. Close inventory.")

        choice = _read_choice(ask)
        if choice == 1:
            if player.healing_potion > 0:
                player.healing_potion -= 1
                player.hp = min(player.hp + HEAL_AMOUNT, player.max_hp)
                print(f"You have healed {HEAL_AMOUNT} HP. Your HP: {player.hp}")
            else:
                print("You don't have any healing potions. :()")
        elif choice == 2:
            if player.attack_potion > 0:
                player.attack_potion -= 1
                player.temp_attack_boost += POTION_BOOST
                print(f"Attack boosted by {POTION_BOOST} for the next round.")
            else:
                print("No attack potions available.")
        elif choice == 3:
            if player.defense_potion > 0:
                player.defense_potion -= 1
                player.temp_defense_boost += POTION_BOOST
                print(f"Defense boosted by {POTION_BOOST} for this round.")
            else:
                print("No defense potions available.")
        elif choice == 4:
            print("Closing inventory...")
            return
        else:
            print("Invalid choice.")