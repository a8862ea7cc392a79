"""A turn-based terminal dungeon crawler: characters, monsters, combat, loot, shop and saves."""

__version__ = "0.1.0"