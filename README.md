# dungeon-crawl

A turn-based dungeon crawler for the terminal. Pick a class, fight your way
down level after level, collect weapons and potions, spend gold at the
travelling merchant, and face a boss every fifth level.

## Installing

```
pip install .
```

## Playing

```
dungeon-crawl
```

Options:

- `--seed N` seeds the dice, so a game can be replayed.
- `--no-delay` skips the one-second countdown pauses between actions.

The command exits with status 0 when the game ends (by death or by quitting)
and 1 if input runs out or the game is interrupted.

Start a new game, or load one from the `saves/` folder in the current
directory. You then choose a name and a class:

| Class   | HP  | Strength | Defense | Starting weapon |
|---------|-----|----------|---------|-----------------|
| Warrior | 100 | 15       | 10      | Sword           |
| Mage    | 70  | 20       | 5       | Staff           |
| Rogue   | 80  | 12       | 8       | Dagger          |

Every character begins at level 1 with 50 gold and the three common weapons
(Sword, Staff, Dagger) unlocked.

Before each fight you can change your weapon and open your inventory to drink
potions:

- **Healing potion** restores 30 HP, never above your maximum.
- **Attack potion** adds 5 to your roll for the next round.
- **Defense potion** reduces the damage you take by 5.

Unused defense potions are lost after a round of combat.

Combat rounds are d20 rolls; the higher roll deals the difference as damage,
and your defense reduces what you take. Your weapon's bonus adds to your roll,
a roll of 20 is a critical hit and a roll of 1 a critical miss, for monsters
too. Some monster types have their own trick: goblins may dodge, skeletons may
block, orks may fly into a rage, demons burn you each round and succubi sap
your strength. Bosses — the Bone Crusher, Inferna, Flame Witch and the Lich
King — appear on levels 5, 10, 15 and so on, in turn. Inferna can set you
burning and the Lich King can heal himself.

After a victory you earn gold (bosses give 100 bonus gold plus 2 per level)
and may find potions or weapons of Common, Rare, Epic or Legendary rarity.
You can then save your progress to
`saves/AutoSave_Level_<level>_<name>.json`, carry on or quit, and visit the
shop:

| Item                 | Price |
|----------------------|-------|
| Healing potion       | 10g   |
| Attack potion        | 15g   |
| Defense potion       | 15g   |
| Mystery weapon chest | 30g   |

The mystery chest unlocks a random weapon you do not have yet.

## Using it as a library

The game's pieces can be driven from code as well. Functions that roll dice
take an optional `random.Random`, and functions that read input take an `ask`
callable in place of `input`.

```python
import random

from dungeon_crawl.character import new_character
from dungeon_crawl.monster import spawn_monster_for_level
from dungeon_crawl.combat import combat_round

rng = random.Random(7)
hero = new_character("Aria", "Mage")
foe = spawn_monster_for_level(1, rng)
while hero.hp > 0 and foe.hp > 0:
    combat_round(hero, foe, rng, wait=lambda seconds: None)
```

Modules:

- `dungeon_crawl.character` — `Character`, `Weapon`, `Rarity`, `Item`,
  `new_character`, `create_character`, `colorize_weapon`.
- `dungeon_crawl.monster` — `Monster`, `MonsterType`,
  `spawn_monster_for_level`, `spawn_boss_for_level`.
- `dungeon_crawl.combat` — `combat_round`.
- `dungeon_crawl.items` — `try_drop_item`, `try_drop_weapon`,
  `locked_weapons`, `weapons_by_rarity`, `pick_drop_rarity`,
  `use_potions_menu`.
- `dungeon_crawl.shop` — `open_shop`, `drop_random_weapon`.
- `dungeon_crawl.save` — `auto_save_game`, `save_game_with_name`,
  `list_save_files`, `load_game_with_choice`, and `SaveError`, raised when a
  game cannot be saved or loaded. Save files are JSON written from
  `Character.to_dict` and read back with `Character.from_dict`.
- `dungeon_crawl.screen` — colour codes, `clear_screen`, `countdown`,
  `center_text`, `center_text_smart`, `show_splash_screen`.
- `dungeon_crawl.cli` — `main`, `choose_weapon`, `reward_victory`.

## Running the tests

```
pip install .[test]
pytest
```