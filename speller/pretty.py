# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Print command results as plain text tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[str]


def format_item(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(format_item(entry) for entry in value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, str):
        # json encode strings only when they carry something that needs escaping
        json_v = json.dumps(value, ensure_ascii=False)
        if json_v == '"{}"'.format(value):
            return value
        return json_v
    if value is None:
        return ""
    return str(value)


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts as aligned columns yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, in order. Defaults to all fields sorted by name.
    :param bool header: True to print the field names
    """
    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    for item in result:
        formatted_row: dict[str, str] = {}
        formatted_values.append(formatted_row)
        for key, value in item.items():
            if table_layout is not None and key not in table_layout:
                continue
            formatted_row[key] = format_item(value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))

    fields = list(table_layout) if table_layout is not None else sorted(widths)
    for field in fields:
        widths.setdefault(field, len(field))

    if header:
        yield "  ".join(f.upper().ljust(widths[f]) for f in fields).rstrip()
        yield "  ".join("=" * widths[f] for f in fields)
    for formatted_row in formatted_values:
        yield "  ".join(formatted_row.get(f, "").ljust(widths[f]) for f in fields).rstrip()


def print_table(
    result: ResultType | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout, header=header):
        print(row, file=file or sys.stdout)
