"""Saving and loading characters as JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from .character import Character

SAVE_FOLDER = Path("saves")


class SaveError(Exception):
    """Raised when a game cannot be saved or loaded."""


def _ensure_folder(folder: Path) -> None:
    try:
        folder.mkdir(exist_ok=True)
    except OSError as exc:
        raise SaveError(f"failed to create save folder: {exc}") from exc


def _write(player: Character, path: Path) -> None:
    try:
        path.write_text(json.dumps(player.to_dict(), indent=1), encoding="utf-8")
    except OSError as exc:
        raise SaveError(str(exc)) from exc


def save_game_with_name(
    player: Character,
    ask: Callable[[str], str] = input,
    folder: Path | str = SAVE_FOLDER,
) -> Path:
    """Ask for a save name and write the character to ``<name>.json``; return the path."""
    folder = Path(folder)
    _ensure_folder(folder)
    print("Enter a name for your save file: ")
    words = ask("").split()
    save_name = words[0] if words else ""
    path = folder / f"{save_name}.json"
    _write(player, path)
    print("Game saved successfully!", save_name)
    return path


def list_save_files(folder: Path | str = SAVE_FOLDER) -> list[str]:
    """Return the names of the files in the save folder, sorted."""
    try:
        entries = list(Path(folder).iterdir())
    except OSError as exc:
        raise SaveError(str(exc)) from exc
    return sorted(entry.name for entry in entries if not entry.is_dir())


def load_game_with_choice(
    ask: Callable[[str], str] = input,
    folder: Path | str = SAVE_FOLDER,
) -> Character:
    """List the saves, ask which one to load and return its character."""
    folder = Path(folder)
    try:
        saves = list_save_files(folder)
    except SaveError:
        saves = []
    if not saves:
        raise SaveError("no saves found")

    print("Available save files: ")
    for number, name in enumerate(saves, start=1):
        print(f"{number}. {name}")
    print("Choose a save file by inputting the number: ", end="")
    words = ask("").split()
    try:
        choice = int(words[0]) if words else 0
    except ValueError:
        choice = 0
    if not 1 <= choice <= len(saves):
        raise SaveError("invalid choice")

    try:
        data = json.loads((folder / saves[choice - 1]).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SaveError(str(exc)) from exc
    if not isinstance(data, dict):
        raise SaveError("save file does not hold a character")
    player = Character.from_dict(data)
    print("Game loaded successfully!")
    return player


def auto_save_game(player: Character, folder: Path | str = SAVE_FOLDER) -> Path:
    """Write the character to ``AutoSave_Level_<level>_<name>.json``; return the path."""
    folder = Path(folder)
    _ensure_folder(folder)
    path = folder / f"AutoSave_Level_{player.level}_{player.name}.json"
    _write(player, path)
    print(f"Game auto-saved as {path}")
    return path