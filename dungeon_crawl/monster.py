"""Monsters, bosses and their special abilities."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum

from .character import Character
from .screen import (
    COLOR_DEMON,
    COLOR_GOBLIN,
    COLOR_ORK,
    COLOR_RESET,
    COLOR_SKELETON,
    COLOR_SUCCUBUS,
    COLOR_WRAITH,
)

BOSS_INTERVAL = 5

GOBLIN_ART = r"""
    ____
   /\\' .\\ _____
  /: \\___\\ / . /\\
  \\' / . / /____/..\\
   \\/___/ \\' '\\ /
            \\'__'\\/
"""

SKELETON_ART = r"""
      ______
   .-' '-.
  / \\
 | |
 |, .-. .-. ,|
 | )(_o/ \\o_)( |
 |/ /\\ \\|
 (_ ^^ _)
  \\__|IIIIII|__/
   | \\IIIIII/ |
   \\ /         |  
    ._______/  
"""

ORC_ART = r""" 
      />_________________________________
[########[]_________________________________>
      \\>
"""

WRAITH_ART = r""" 
      .-" "-.
     / \\
    | |
    |, .-. .-. ,|
    | )(_o/ \\o_)( |
    |/ /\\ \\|
    (_ ^^ _)
     \\__|IIIIII|__/
      | \\IIIIII/ |
      \\ /         |
       \_________/  

"""

DEMON_ART = r"""
      __ __
     / \\~~~/ \\
 ,----( .. )
/ \\__ __/
\\ (__)
 \\_
"""

SUCCUBUS_ART = r"""
      . .
     (\\.-./)
    / \\
   /_/ \\_\\
   \\-\\_=_/-/
    ) (    \
   ( )     \
    \.___.\
"""

BONE_CRUSHER_ART = r"""
       ______
    .-' '-.
   / \\
  | .-""-. |
  | / .-. \\ |
   \\ \\___/ /
    '-.______.-'
    _/ \\_
   / \\
"""

INFERNA_ART = r"""
       ( . )
   ) ( )
         . ' . ' . ' .
  ( , ) (. ) ( ', )
   .' ) ( . ) , ( , ) ( .
)_._._._._._._._._._._._._._._._._._
"""

LICH_KING_ART = r"""
       .-.
      (o.o)
       |=|
      __|__
    //.=|=.\\
   // .=|=. \\
   \\ .=|=. //
    \
"""


class MonsterType(str, Enum):
    """The kinds of creature found in the dungeon."""

    GOBLIN = "Goblin"
    SKELETON = "Skeleton"
    ORK = "Ork"
    WRAITH = "Wraith"
    DEMON = "Demon"
    SUCCUBUS = "Succubus"

    def __str__(self) -> str:
        return self.value


_TYPE_COLORS = {
    MonsterType.GOBLIN: COLOR_GOBLIN,
    MonsterType.SKELETON: COLOR_SKELETON,
    MonsterType.ORK: COLOR_ORK,
    MonsterType.WRAITH: COLOR_WRAITH,
    MonsterType.DEMON: COLOR_DEMON,
    MonsterType.SUCCUBUS: COLOR_SUCCUBUS,
}

_RNG = random.Random()


@dataclass
class Monster:
    """A creature the player fights."""

    name: str
    monster_type: MonsterType
    hp: int
    strength: int
    is_boss: bool
    description: str
    intro_line: str
    death_line: str
    ascii_art: str

    def pre_combat_effect(self, player: Character, rng: random.Random | None = None) -> bool:
        """Apply the monster's passive ability; return True if the player's attack is voided."""
        rng = _RNG if rng is None else rng
        kind = self.monster_type
        if kind is MonsterType.GOBLIN:
            if rng.randrange(100) < 20:
                print(f"The {self.color_name()} dodged your attack!")
                return True
        elif kind is MonsterType.SKELETON:
            if rng.randrange(100) < 15:
                print(f"The {self.color_name()} blocked your attack!")
                return True
        elif kind is MonsterType.ORK:
            if rng.randrange(100) < 10:
                print(f"The {self.color_name()} is enraged!")
                self.strength += 5
        elif kind is MonsterType.WRAITH:
            print(f"The {self.color_name()} phases eerily...your armor becomes dead weight.")
        elif kind is MonsterType.DEMON:
            burn = rng.randrange(3) + 2
            player.hp -= burn
            print(f"The {self.color_name()}s fire aura burns you for {burn} damage!")
        elif kind is MonsterType.SUCCUBUS:
            print(
                f"The {self.color_name()} seduces you and lowers your strength by 2! What a shame."
            )
            player.strength -= 2
        return False

    def use_special_move(self, player: Character, rng: random.Random | None = None) -> None:
        """Let a boss try its signature move; ordinary monsters do nothing."""
        if not self.is_boss:
            return
        rng = _RNG if rng is None else rng
        if self.name == "Bonecursher":
            if rng.randrange(100) < 20:
                print(f"{self.color_name()} slams the ground and stuns you!")
                player.stunned = True
        elif self.name == "Inferna, Flame Witch":
            if rng.randrange(100) < 30:
                print(f"{self.color_name()} engulfs you in flames! You are burning!")
                player.burn_duration = 3
        elif self.name == "The Lich King":
            if rng.randrange(100) < 25:
                heal = rng.randrange(10) + 10
                self.hp += heal
                print(
                    f"{self.color_name()} absorbs the life around him and heals for {heal} HP!"
                )

    def _color(self) -> str:
        return _TYPE_COLORS.get(self.monster_type, "")

    def name_with_type(self) -> str:
        """Return 'a random <type>' with the type coloured."""
        return f"a random {self._color()}{self.monster_type}{COLOR_RESET}"

    def color_name(self) -> str:
        """Return the monster's name in its type's colour."""
        return f"{self._color()}{self.name}{COLOR_RESET}"


MONSTER_TEMPLATES: tuple[Monster, ...] = (
    Monster(
        "Goblin", MonsterType.GOBLIN, 30, 8, False,
        "A sneaky little creature with sharp teeth.",
        "A green creature approaches you!",
        "You slay the green creature",
        GOBLIN_ART,
    ),
    Monster(
        "Skeleton", MonsterType.SKELETON, 40, 10, False,
        "Clattering bones that won't stay down,",
        "You encounter a restless pile of bones.",
        "You have granted peace to the pile of bones",
        SKELETON_ART,
    ),
    Monster(
        "Ork", MonsterType.ORK, 50, 12, False,
        "Strong, brutal and always looking for a scrap.",
        "A red angry ork abushes you!",
        "You have slain the strange creature",
        ORC_ART,
    ),
    Monster(
        "Wraith", MonsterType.WRAITH, 35, 14, False,
        "It strikes from the shadows and ignores your armor,",
        "You can hardly see a transparent ghost.",
        "You banished the ghost.",
        WRAITH_ART,
    ),
    Monster(
        "Demon", MonsterType.DEMON, 60, 16, False,
        "Burns everything it touches.",
        "A creature from hell is blocking your path",
        "You exorcize the demon, sending it to the depths of hell.",
        DEMON_ART,
    ),
    Monster(
        "Succubus", MonsterType.SUCCUBUS, 35, 15, False,
        "You'd tap that sucubussy, but you know better then to do so.",
        "You encounter a creature that stirs your interest.",
        "After coming to your senses, you feel the creature's treachery and banish it from existence.",
        SUCCUBUS_ART,
    ),
)

BOSSES: tuple[Monster, ...] = (
    Monster(
        "Bone Crusher", MonsterType.SKELETON, 150, 25, True,
        "An ancient titan of bone and hatred. It swings with unstoppable force.",
        "-You dare approach me mortal? This carcass has a lot of fight left in it!",
        "-This cannot happen! DAMN YOU HERO!",
        BONE_CRUSHER_ART,
    ),
    Monster(
        "Inferna, Flame Witch", MonsterType.DEMON, 130, 30, True,
        "Her eyes glow like embers. Her eyes.. a burning whisper.",
        "You dare stand against me?",
        "Even though my form from this realm is broken, I will curse upon you from hell!",
        INFERNA_ART,
    ),
    Monster(
        "The Lich King", MonsterType.WRAITH, 160, 28, True,
        "The air freezes. Time slows. Death watches you from behind hollow eyes.",
        "You have finally come to meet me, messenger. Let me teach you something....",
        "You might have banished me and beaten the game, but my tainted touch is all over this realm!",
        LICH_KING_ART,
    ),
)


def spawn_monster_for_level(level: int, rng: random.Random | None = None) -> Monster:
    """Create a random ordinary monster scaled to the level.

    Raises ValueError if the level is below 1.
    """
    if level < 1:
        raise ValueError(f"level must be at least 1, got {level}")
    rng = _RNG if rng is None else rng
    template = MONSTER_TEMPLATES[rng.randrange(len(MONSTER_TEMPLATES))]
    return replace(
        template,
        hp=template.hp + rng.randrange(level * 3),
        strength=template.strength + level // 2,
    )


def spawn_boss_for_level(level: int) -> Monster:
    """Return a fresh copy of the boss guarding the level, cycling through the bosses.

    Raises ValueError for levels below the first boss level.
    """
    if level < BOSS_INTERVAL:
        raise ValueError(f"no boss before level {BOSS_INTERVAL}, got {level}")
    index = (level // BOSS_INTERVAL - 1) % len(BOSSES)
    return replace(BOSSES[index])