# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Word sources: plain text word lists read from files or fetched over HTTP"""
from __future__ import annotations

from .session import get_requests_session
from requests import Session
from typing import Iterator

import logging

DICTIONARIES = ("popular", "enable1", "ospd")

log = logging.getLogger("speller.sources")


class WordSourceError(Exception):
    """Word list could not be loaded"""

    def __init__(self, message: str, status: int | None = None) -> None:
        Exception.__init__(self, message)
        self.status = status

    def __str__(self) -> str:
        message = self.args[0]
        if self.status is None:
            return message
        return f"{message}, status={self.status}"


def split_words(text: str) -> list[str]:
    """One word per line; surrounding whitespace and blank lines are dropped"""
    words = []
    for line in text.splitlines():
        word = line.strip()
        if word:
            words.append(word)
    return words


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def dictionary_location(name: str, base: str) -> str:
    if name not in DICTIONARIES:
        raise WordSourceError("Unknown dictionary {!r}: expected one of {}".format(name, ", ".join(DICTIONARIES)))
    return "{}/{}.txt".format(base.rstrip("/"), name)


class FileWordSource:
    def __init__(self, path: str) -> None:
        self.path = path

    def read(self) -> list[str]:
        try:
            with open(self.path, encoding="utf-8") as fp:
                words = split_words(fp.read())
        except OSError as ex:
            raise WordSourceError(
                "Failed to read word list {!r}: {}: {}".format(self.path, ex.__class__.__name__, ex)
            ) from ex
        except UnicodeDecodeError as ex:
            raise WordSourceError("Word list {!r} is not valid UTF-8".format(self.path)) from ex
        log.info("Loaded %d words from %s", len(words), self.path)
        return words

    def __iter__(self) -> Iterator[str]:
        return iter(self.read())


class UrlWordSource:
    def __init__(self, url: str, session: Session | None = None, timeout: float | None = None) -> None:
        self.url = url
        self.session = session or get_requests_session(timeout=timeout)

    def read(self) -> list[str]:
        # connection errors propagate as requests.exceptions.ConnectionError
        response = self.session.get(self.url)
        if not str(response.status_code).startswith("2"):
            raise WordSourceError("Failed to fetch word list {!r}".format(self.url), status=response.status_code)
        words = split_words(response.text)
        log.info("Loaded %d words from %s", len(words), self.url)
        return words

    def __iter__(self) -> Iterator[str]:
        return iter(self.read())


def open_word_source(
    location: str, *, session: Session | None = None, timeout: float | None = None
) -> FileWordSource | UrlWordSource:
    if is_url(location):
        return UrlWordSource(location, session=session, timeout=timeout)
    return FileWordSource(location)
