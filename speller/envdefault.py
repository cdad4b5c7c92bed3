# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

SPELLER_CONFIG_DIR = os.environ.get("SPELLER_CONFIG_DIR", os.path.join(USER_HOME, ".config", "speller"))

SPELLER_CONFIG = os.environ.get("SPELLER_CONFIG", os.path.join(SPELLER_CONFIG_DIR, "speller.json"))
SPELLER_DICTIONARY = os.environ.get("SPELLER_DICTIONARY", "popular")
SPELLER_DICTIONARY_BASE = os.environ.get("SPELLER_DICTIONARY_BASE", "dictionaries")
SPELLER_WORD_LIST = os.environ.get("SPELLER_WORD_LIST")
