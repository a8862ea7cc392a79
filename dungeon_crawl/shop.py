"""The travelling merchant's shop."""

from __future__ import annotations

import random
from typing import Callable

from .character import Character, Weapon, colorize_weapon
from .items import locked_weapons
from .screen import COLOR_IMPORTANT, COLOR_RESET, COLOR_TITLE

HEALING_POTION_PRICE = 10
ATTACK_POTION_PRICE = 15
DEFENSE_POTION_PRICE = 15
MYSTERY_CHEST_PRICE = 30

_RNG = random.Random()


def drop_random_weapon(player: Character, rng: random.Random | None = None) -> Weapon | None:
    """Unlock a random weapon the player lacks; return it, or None if all are unlocked."""
    rng = _RNG if rng is None else rng
    locked = locked_weapons(player)
    if not locked:
        print("You already have all the weapons unlocked")
        return None
    weapon = locked[rng.randrange(len(locked))]
    player.unlocked_weapons.append(weapon)
    print(f"Mystery chest reward: {colorize_weapon(weapon)}! ({weapon.description})")
    return weapon


def _read_choice(ask: Callable[[str], str]) -> int:
    words = ask("").split()
    try:
        return int(words[0]) if words else 0
    except ValueError:
        return 0


def open_shop(
    player: Character,
    ask: Callable[[str], str] = input,
    rng: random.Random | None = None,
) -> None:
    """Let the player buy potions and mystery chests until they close the shop."""
    while True:
        print(f"\n{COLOR_TITLE}=====WELCOME TO THE SHOP, TAINTED ONE====={COLOR_RESET}")
        print(f"{COLOR_IMPORTANT}Gold{COLOR_RESET}: {player.gold}")
        print(f"1. Healing potion ({HEALING_POTION_PRICE}g)")
        print(f"2. Attack potion ({ATTACK_POTION_PRICE}g)")
        print(f"3. Defense potion ({DEFENSE_POTION_PRICE}g)")
        print(f"4. Mystery weapon chest ({MYSTERY_CHEST_PRICE}g)")
        print("5. Close shop.")

        choice = _read_choice(ask)
        if choice == 1:
            if player.gold >= HEALING_POTION_PRICE:
                player.gold -= HEALING_POTION_PRICE
                print(f"You've bought a healing potion. Your HP: {player.hp}")
                player.healing_potion += 1
            else:
                print("You don't have enough gold brokie.")
        elif choice == 2:
            if player.gold >= ATTACK_POTION_PRICE:
                player.gold -= ATTACK_POTION_PRICE
                print("You've bought an attack potion.")
                player.attack_potion += 1
            else:
                print("You don't have enough gold brokie.")
        elif choice == 3:
            if player.gold >= DEFENSE_POTION_PRICE:
                player.gold -= DEFENSE_POTION_PRICE
                print("You've bought a defense potion")
                player.defense_potion += 1
            else:
                print("You don't have enough gold, brokie.")
        elif choice == 4:
            if player.gold >= MYSTERY_CHEST_PRICE:
                player.gold -= MYSTERY_CHEST_PRICE
                drop_random_weapon(player, rng)
            else:
                print("You don't have enough gold, brokie.")
        elif choice == 5:
            print("Exiting the shop...")
            return
        else:
            print("Invalid choice.")