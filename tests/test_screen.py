import sys
from unittest import mock

import pytest

from dungeon_crawl import screen


def _padding(line):
    return len(line) - len(line.lstrip(" "))


def test_center_text_balances_padding(capsys):
    screen.center_text("ab", 10)
    line = capsys.readouterr().out.rstrip("\n")
    assert line.strip() == "ab"
    right_room = 10 - len(line)
    assert abs(_padding(line) - right_room) <= 1
    assert _padding(line) > 0


def test_center_text_leaves_long_lines_untouched(capsys):
    text = "this line is wider than the box"
    screen.center_text(text, 5)
    assert capsys.readouterr().out == text + "\n"


def test_center_text_keeps_every_line(capsys):
    text = "one\ntwo words\nx"
    screen.center_text(text, 40)
    out_lines = capsys.readouterr().out.split("\n")[:-1]
    assert [line.strip() for line in out_lines] == ["one", "two words", "x"]


def test_center_text_smart_falls_back_to_default_width(capsys):
    screen.center_text_smart("hello")
    line = capsys.readouterr().out.rstrip("\n")
    assert line.strip() == "hello"
    assert abs(_padding(line) - (screen.DEFAULT_WIDTH - len(line))) <= 1


def test_countdown_sleeps_once_per_second(capsys):
    waits = []
    screen.countdown(3, sleep=waits.append)
    out = capsys.readouterr().out
    assert waits == [1, 1, 1]
    for n in (3, 2, 1):
        assert f"Next action in: {n} seconds" in out
    assert out.endswith("\n\r\r")
    assert out.index("3 seconds") < out.index("1 seconds")


def test_countdown_zero_does_not_wait(capsys):
    waits = []
    screen.countdown(0, sleep=waits.append)
    assert waits == []
    assert capsys.readouterr().out == "\n\r\r"


def _one_enter(prompts):
    def ask(prompt):
        prompts.append(prompt)
        return ""

    return ask


def test_show_splash_screen_waits_for_enter(capsys):
    prompts = []
    with mock.patch.object(screen.subprocess, "run"):
        screen.show_splash_screen(_one_enter(prompts))
    out = capsys.readouterr().out
    assert screen.SPLASH_PROMPT in out
    assert "____" in out
    assert len(prompts) == 1


def test_splash_clears_with_clear_on_unix(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    prompts = []
    with mock.patch.object(screen.subprocess, "run") as run:
        screen.show_splash_screen(_one_enter(prompts))
    assert run.call_args_list[0].args[0] == ["clear"]
    assert screen.SPLASH_PROMPT in capsys.readouterr().out


def test_splash_clears_with_cls_on_windows(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "win32")
    prompts = []
    with mock.patch.object(screen.subprocess, "run") as run:
        screen.show_splash_screen(_one_enter(prompts))
    assert run.call_args_list[0].args[0] == ["cmd", "/c", "cls"]
    assert screen.SPLASH_PROMPT in capsys.readouterr().out


def test_splash_survives_missing_clear_command(capsys):
    prompts = []
    with mock.patch.object(screen.subprocess, "run", side_effect=FileNotFoundError):
        screen.show_splash_screen(_one_enter(prompts))
    assert screen.SPLASH_PROMPT in capsys.readouterr().out
    assert len(prompts) == 1