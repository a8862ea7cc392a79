"""A single round of combat between the player and a monster."""

from __future__ import annotations

import random
from typing import Callable

from .character import Character
from .monster import Monster
from .screen import COLOR_RESET, COLOR_SUBTITLE, countdown

BURN_DAMAGE = 5

_RNG = random.Random()


def combat_round(
    player: Character,
    monster: Monster,
    rng: random.Random | None = None,
    wait: Callable[[int], object] = countdown,
) -> None:
    """Play one round: both sides roll a d20 and the higher roll deals the difference."""
    rng = _RNG if rng is None else rng
    print(f"\n{COLOR_SUBTITLE}=====COMBAT ROUND====={COLOR_RESET}")
    if monster.pre_combat_effect(player, rng):
        return

    player_roll = rng.randrange(20) + 1 + player.weapon.damage_bonus + player.temp_attack_boost
    monster_roll = rng.randrange(20) + 1
    name = monster.color_name()

    print(f"You roll: {player_roll} ")
    wait(2)
    print(f"The {name} rolls: {monster_roll}")

    if player.stunned:
        print("You are stunned and lose your turn!")
        player.stunned = False
        return

    if player.burn_duration > 0:
        player.hp -= BURN_DAMAGE
        print(f"You are burning! You take {BURN_DAMAGE} fire damage!")
        player.burn_duration -= 1

    if player_roll == 1:
        self_damage = rng.randrange(5) + 1
        player.hp -= self_damage
        print(
            f"CRITICAL MISS! You stumble and hurt yourself for {self_damage} damage! "
            f"Your HP: {player.hp}"
        )

    if player_roll == 20:
        critical = player.strength * 2
        monster.hp -= critical
        print(
            f"CRITICAL HIT! You unleash the powers of heavon upon the damned {name}, "
            f"dealing {critical} damage! Monster's HP: {monster.hp}"
        )

    if monster_roll == 1:
        self_damage = rng.randrange(5) + 1
        monster.hp -= self_damage
        print(
            f"THE FOOLISH CREATURE MISSES YOU! The {name} stumbles and hits itself for "
            f"{self_damage} damage like a moron! Monster's HP: {monster.hp}"
        )

    if monster_roll == 20:
        critical = monster.strength * 2
        player.hp -= critical
        print(
            f"OUCH! The {name} curses upon your bloodline and hits you like a truck for "
            f"{critical} damage! Your HP: {player.hp}"
        )

    if player_roll > monster_roll:
        damage = player_roll - monster_roll
        monster.hp -= damage
        print(f"You have hit the {name} for {damage} damage! MonsterHP: {monster.hp}")
    else:
        if monster.is_boss:
            monster.use_special_move(player, rng)
        damage = max(
            monster_roll - player_roll - player.defense - player.temp_defense_boost, 0
        )
        player.hp -= damage
        print(f"The {name} hits you for {damage} damage! YourHP: {player.hp}")

    player.temp_attack_boost = 0
    player.defense_potion = 0