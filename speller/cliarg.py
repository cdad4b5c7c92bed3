# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .argx import arg

import argparse


def max_distance_type(value: str) -> int:
    try:
        distance = int(value, 0)
    except ValueError as ex:
        raise argparse.ArgumentTypeError("invalid edit distance {!r}: expected an integer".format(value)) from ex
    if distance < 0:
        raise argparse.ArgumentTypeError("invalid edit distance {!r}: must not be negative".format(value))
    return distance


arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.max_distance = arg(
    "--max-distance",
    type=max_distance_type,
    default=None,
    help="Maximum number of edits between the word and a suggestion [config: max_distance] (default: 2)",
)
arg.word = arg("word", help="Word to look up")
arg.words = arg("words", nargs="+", metavar="word", help="Words to look up")
