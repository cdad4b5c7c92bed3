# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx
from .checker import SpellChecker
from .cliarg import arg
from .distance import DEFAULT_MAX_DISTANCE
from .sources import dictionary_location, open_word_source
from argparse import ArgumentParser
from speller import envdefault
from typing import Callable, Protocol

CHECK_COLUMNS = ["word", "valid", "suggestions"]
SUGGEST_COLUMNS = ["word", "distance"]
INFO_COLUMNS = ["source", "words", "nodes"]


class CheckerFactory(Protocol):
    def __call__(self, location: str, request_timeout: float | None) -> SpellChecker:
        ...


def load_checker(location: str, request_timeout: float | None = None) -> SpellChecker:
    return SpellChecker.from_words(open_word_source(location, timeout=request_timeout))


class SpellerCLI(argx.CommandLineTool):
    checker: SpellChecker
    location: str

    def __init__(self, checker_factory: CheckerFactory = load_checker):
        argx.CommandLineTool.__init__(self, "speller")
        self.checker_factory = checker_factory

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--dictionary",
            help="Named dictionary: popular, enable1 or ospd [SPELLER_DICTIONARY], default {!r}".format(
                envdefault.SPELLER_DICTIONARY
            ),
            default=None,
        )
        parser.add_argument(
            "--dictionary-base",
            help="Directory or URL holding the named dictionaries [SPELLER_DICTIONARY_BASE], default {!r}".format(
                envdefault.SPELLER_DICTIONARY_BASE
            ),
            default=None,
        )
        parser.add_argument(
            "--word-list",
            help="Word list file or URL, one word per line; overrides --dictionary [SPELLER_WORD_LIST]",
            default=None,
            metavar="FILE_OR_URL",
        )
        parser.add_argument(
            "--request-timeout",
            type=int,
            default=None,
            help="Wait for up to N seconds when fetching a word list (default: infinite)",
        )

    def get_config_str(self, key: str) -> str | None:
        value = self.config.get(key)
        if value is not None and not isinstance(value, str):
            raise argx.UserError("Invalid {} {!r} in configuration file: expected a string".format(key, value))
        return value

    def get_word_source_location(self) -> str:
        """Word list given on the command line, then in the config file, then in the environment"""
        word_list = self.args.word_list or self.get_config_str("word_list") or envdefault.SPELLER_WORD_LIST
        if word_list:
            return word_list

        name = self.args.dictionary or self.get_config_str("dictionary") or envdefault.SPELLER_DICTIONARY
        base = (
            self.args.dictionary_base
            or self.get_config_str("dictionary_base")
            or envdefault.SPELLER_DICTIONARY_BASE
        )
        return dictionary_location(name, base)

    def get_max_distance(self) -> int:
        if getattr(self.args, "max_distance", None) is not None:
            return self.args.max_distance
        distance = self.config.get("max_distance", DEFAULT_MAX_DISTANCE)
        if not isinstance(distance, int) or isinstance(distance, bool) or distance < 0:
            raise argx.UserError(
                "Invalid max_distance {!r} in configuration file: expected a non-negative integer".format(distance)
            )
        return distance

    def pre_run(self, func: Callable[[], int | None]) -> None:
        self.location = self.get_word_source_location()
        self.checker = self.checker_factory(self.location, self.args.request_timeout)

    @arg.json
    @arg.words
    def word__check(self) -> None:
        """Check spelling of words"""
        results = [dict(self.checker.check(word).to_dict(), word=word) for word in self.args.words]
        self.print_response(results, json=self.args.json, table_layout=CHECK_COLUMNS)

    @arg.json
    @arg.max_distance
    @arg.word
    def word__suggest(self) -> None:
        """Suggest dictionary words close to a word"""
        suggestions = self.checker.get_suggestions(self.args.word, distance=self.get_max_distance())
        self.print_response([s._asdict() for s in suggestions], json=self.args.json, table_layout=SUGGEST_COLUMNS)

    @arg.json
    def dictionary__info(self) -> None:
        """Show the loaded dictionary"""
        index = self.checker.index
        info = {"source": self.location, "words": len(index), "nodes": index.node_count()}
        self.print_response(info, json=self.args.json, table_layout=INFO_COLUMNS, single_item=True)


def main() -> None:
    SpellerCLI().main()


if __name__ == "__main__":
    main()
