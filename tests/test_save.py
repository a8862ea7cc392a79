import json

import pytest

from dungeon_crawl.character import new_character
from dungeon_crawl.save import (
    SaveError,
    auto_save_game,
    list_save_files,
    load_game_with_choice,
    save_game_with_name,
)


def answers(*values):
    it = iter(values)
    return lambda prompt="": next(it)


def test_auto_save_file_name(tmp_path):
    player = new_character("Ann", "Warrior")
    folder = tmp_path / "saves"
    path = auto_save_game(player, folder)
    assert path.name == "AutoSave_Level_1_Ann.json"
    assert list_save_files(folder) == ["AutoSave_Level_1_Ann.json"]


def test_auto_save_round_trip(tmp_path):
    player = new_character("Ann", "Mage")
    player.gold = 123
    player.healing_potion = 2
    auto_save_game(player, tmp_path)
    loaded = load_game_with_choice(answers("1"), tmp_path)
    assert loaded == player


def test_save_with_name_writes_json(tmp_path):
    player = new_character("Bob", "Rogue")
    path = save_game_with_name(player, answers("hero"), tmp_path)
    assert path.name == "hero.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["Name"] == "Bob"
    assert data["Class"] == "Rogue"


def test_list_save_files_sorted_and_skips_dirs(tmp_path):
    (tmp_path / "b.json").write_text("{}")
    (tmp_path / "a.json").write_text("{}")
    (tmp_path / "nested").mkdir()
    assert list_save_files(tmp_path) == ["a.json", "b.json"]


def test_list_save_files_missing_folder(tmp_path):
    with pytest.raises(SaveError):
        list_save_files(tmp_path / "missing")


def test_load_without_saves(tmp_path):
    with pytest.raises(SaveError, match="no saves found"):
        load_game_with_choice(answers("1"), tmp_path)


def test_load_missing_folder(tmp_path):
    with pytest.raises(SaveError, match="no saves found"):
        load_game_with_choice(answers("1"), tmp_path / "missing")


@pytest.mark.parametrize("answer", ["0", "5", "x", ""])
def test_load_invalid_choice(tmp_path, answer):
    auto_save_game(new_character("Ann", "Warrior"), tmp_path)
    with pytest.raises(SaveError, match="invalid choice"):
        load_game_with_choice(answers(answer), tmp_path)


def test_load_corrupt_file(tmp_path):
    (tmp_path / "broken.json").write_text("not json")
    with pytest.raises(SaveError):
        load_game_with_choice(answers("1"), tmp_path)


def test_load_picks_chosen_file(tmp_path):
    first = new_character("Ann", "Warrior")
    second = new_character("Zed", "Mage")
    save_game_with_name(first, answers("a"), tmp_path)
    save_game_with_name(second, answers("b"), tmp_path)
    assert load_game_with_choice(answers("2"), tmp_path) == second