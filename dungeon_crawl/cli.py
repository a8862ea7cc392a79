"""The command-line game loop."""

from __future__ import annotations

import argparse
import random
from functools import partial
from typing import Callable, Sequence

from .character import Character, Weapon, colorize_weapon, create_character
from .combat import combat_round
from .items import try_drop_item, try_drop_weapon, use_potions_menu
from .monster import BOSS_INTERVAL, Monster, spawn_boss_for_level, spawn_monster_for_level
from .save import SaveError, auto_save_game, load_game_with_choice
from .screen import (
    COLOR_INFO,
    COLOR_RESET,
    center_text_smart,
    clear_screen,
    countdown,
    show_splash_screen,
)
from .shop import open_shop

BOSS_BONUS_GOLD = 100


def _ask(prompt: str = "") -> str:
    return input(prompt)


def _first_word(answer: str) -> str:
    words = answer.split()
    return words[0] if words else ""


def _read_int(ask: Callable[[str], str]) -> int:
    try:
        return int(_first_word(ask("")))
    except ValueError:
        return 0


def choose_weapon(player: Character, ask: Callable[[str], str] = _ask) -> Weapon | None:
    """Let the player equip one of their unlocked weapons; return it, or None if the pick is invalid."""
    print("Unlocked weapons: ")
    for number, weapon in enumerate(player.unlocked_weapons, start=1):
        print(
            f"[{number}] {colorize_weapon(weapon)} (+{weapon.damage_bonus} dmg) - "
            f"{weapon.description}"
        )
    print("Please enter weapon number: ")
    pick = _read_int(ask)
    if 0 < pick <= len(player.unlocked_weapons):
        player.weapon = player.unlocked_weapons[pick - 1]
        print(f"You have equipped the {player.weapon.name}")
        return player.weapon
    print("Invalid selection, keeping current weapon.")
    return None


def reward_victory(
    player: Character,
    monster: Monster,
    rng: random.Random | None = None,
) -> int:
    """Hand out gold and loot for a defeated monster; return the gold earned."""
    rng = random.Random() if rng is None else rng
    earned = 0
    if monster.is_boss:
        print(f"\n{monster.color_name()}: {monster.death_line}")
        bonus = BOSS_BONUS_GOLD + player.level * 2
        player.gold += bonus
        earned += bonus
        print(f"You defeated the boss and earned {bonus} bonus gold!", end="")
        try_drop_weapon(player, rng)
    gold = 10 + rng.randrange(5) + player.level * 2
    player.gold += gold
    earned += gold
    print(f"You defeated the {monster.color_name()}!")
    print(f"You have earned {gold} gold coins. Total gold coins: {player.gold}")
    try_drop_item(player, rng)
    try_drop_weapon(player, rng)
    return earned


def _new_player(ask: Callable[[str], str]) -> Character:
    player = create_character(ask)
    player.level = 1
    return player


def _start(ask: Callable[[str], str]) -> Character:
    print("Do you want to (1) Start New Game or (2)Load Saved Game")
    if _read_int(ask) == 2:
        try:
            return load_game_with_choice(ask)
        except SaveError as exc:
            print("Error loading save: ", exc)
            print("Starting a new game instead...")
    return _new_player(ask)


def _show_encounter(monster: Monster) -> None:
    clear_screen()
    center_text_smart(monster.ascii_art)
    print()
    center_text_smart(f"\nYou enocunter a {monster.color_name()}\n")
    print()
    center_text_smart(monster.description)
    print()


def _play(
    ask: Callable[[str], str],
    rng: random.Random,
    wait: Callable[[int], object],
) -> None:
    show_splash_screen(ask)
    player = _start(ask)

    while True:
        print(f"\n{COLOR_INFO}--- Level {player.level} ---{COLOR_RESET}")
        print(
            "Do you wish to change your weapon?(y/n)\n"
            f"You currently have the {colorize_weapon(player.weapon)} equipped."
        )
        if _first_word(ask("")) == "y":
            choose_weapon(player, ask)

        print("\nWould you like to open your inventory before this fight? (y/n)")
        if _first_word(ask("")) == "y":
            use_potions_menu(player, ask)
        else:
            print(
                "Cheeky choice mate -- your next encounter might be your last. "
                "But fine, continuing without opening the inventory"
            )

        is_boss = player.level > 0 and player.level % BOSS_INTERVAL == 0
        clear_screen()
        if is_boss:
            monster = spawn_boss_for_level(player.level)
        else:
            monster = spawn_monster_for_level(player.level, rng)
        _show_encounter(monster)

        print(f"\nYou are facing {monster.name_with_type()}", end="")
        while monster.hp > 0 and player.hp > 0:
            combat_round(player, monster, rng, wait)
        if player.hp <= 0:
            print("You died a horrible death! RIP my homie.")
            return

        reward_victory(player, monster, rng)

        print("You have survived this level... your journey continues...")
        print("Would you like to save your progress? (y/n)")
        if _first_word(ask("")) in ("y", "Y"):
            try:
                auto_save_game(player)
            except SaveError as exc:
                print("Warning: Could not save the game:", exc)
        else:
            print("Continuing without saving...")

        print()
        print(
            "Do you wish to (c) Continue exploring the dungeon or do you wish to "
            "(q) Quit while you are still able to..."
        )
        if _first_word(ask("")) in ("q", "Q"):
            print("Your journey ends here...", end="")
            wait(3)
            return

        player.level += 1

        print("Would you like to open the shop (y/n)?")
        shop_choice = _first_word(ask(""))
        if shop_choice == "y":
            open_shop(player, ask, rng)
        elif shop_choice == "n":
            print("You go past the travelling merchant, ignoring it.")
        else:
            print(
                "It's a yes or no question, yet you weren't able to input a simple letter. "
                "The merchant doesn't want to sell you his items. Good job, dork."
            )


def _no_sleep(_seconds: float) -> None:
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dungeon game; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="dungeon-crawl", description="Fight your way through an eerie dungeon."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    parser.add_argument(
        "--no-delay", action="store_true", help="skip the pauses between actions"
    )
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    wait: Callable[[int], object] = (
        partial(countdown, sleep=_no_sleep) if args.no_delay else countdown
    )
    try:
        _play(_ask, rng, wait)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())