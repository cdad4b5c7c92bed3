# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pathlib import Path
from speller.argx import arg, CommandLineTool, Config, name_to_cmd_parts, UserError
from typing import Callable

import pytest


class TestCLI(CommandLineTool):
    __test__ = False  # to avoid PytestCollectionWarning

    @arg()
    def word__suggest(self) -> None:
        """3"""

    @arg()
    def dictionary__info(self) -> None:
        """1"""

    @arg()
    def word__check(self) -> None:
        """2"""

    def helper(self) -> None:
        pass


def test_commands_are_alphabetically_ordered() -> None:
    cli = TestCLI("testcli")
    cli.add_cmds(cli.add_cmd)

    assert [item.dest for item in cli.subparsers._choices_actions] == ["dictionary", "word"]
    assert sorted(cli._cats[("word",)].choices) == ["check", "suggest"]


def test_command_has_function_help() -> None:
    cli = TestCLI("testcli")
    cli.add_cmds(cli.add_cmd)

    help_text = cli._cats[("dictionary",)].choices["info"].format_help()
    assert cli.dictionary__info.__doc__ is not None
    assert cli.dictionary__info.__doc__ in help_text


def test_only_tagged_methods_become_commands() -> None:
    cli = TestCLI("testcli")
    calls: list[Callable] = []
    cli.add_cmds(calls.append)
    assert calls == [cli.dictionary__info, cli.word__check, cli.word__suggest]


@pytest.mark.parametrize(
    "name,parts",
    [
        ("word__check", ["word", "check"]),
        ("dictionary__info", ["dictionary", "info"]),
        ("word_check", ["word", "check"]),
        ("word__check_all", ["word", "check-all"]),
    ],
)
def test_name_to_cmd_parts(name: str, parts: list[str]) -> None:
    assert name_to_cmd_parts(name) == parts


def test_config_missing_file_is_empty(tmp_path: Path) -> None:
    assert Config(tmp_path / "missing.json") == {}


def test_config_loads_json(tmp_path: Path) -> None:
    path = tmp_path / "speller.json"
    path.write_text('{"dictionary": "ospd", "max_distance": 1}', encoding="utf-8")
    assert Config(path) == {"dictionary": "ospd", "max_distance": 1}


def test_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "speller.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(UserError, match="Invalid JSON"):
        Config(path)
