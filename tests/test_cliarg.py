# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pytest import CaptureFixture
from speller.argx import CommandLineTool
from speller.cliarg import arg, max_distance_type

import argparse
import pytest


@pytest.mark.parametrize("value,expected", [("0", 0), ("2", 2), ("0x3", 3)])
def test_max_distance_type(value: str, expected: int) -> None:
    assert max_distance_type(value) == expected


@pytest.mark.parametrize("value", ["-1", "two", ""])
def test_max_distance_type_rejects(value: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        max_distance_type(value)


def test_shared_arguments_are_added_to_each_command(capsys: CaptureFixture[str]) -> None:
    """Test that the shared @arg declarations reach CommandLineTool.run()"""

    class T(CommandLineTool):
        """Test class"""

        @arg.json
        @arg.max_distance
        @arg.word
        def t(self) -> None:
            """t"""
            print(self.args.word, self.args.max_distance, self.args.json)

    assert T("speller").run(args=["t", "cit", "--max-distance", "1", "--json"]) is None
    assert capsys.readouterr().out == "cit 1 True\n"

    assert T("speller").run(args=["t", "cit"]) is None
    assert capsys.readouterr().out == "cit None False\n"
