"""Small numeric and string conversion helpers shared by the solutions."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def absolute(value):
    """Return the absolute value of any number, keeping its type."""
    return -value if value < 0 else value


def atois(*args: str) -> list[int]:
    """Parse every argument as a base-10 integer.

    Only an optional sign followed by ASCII digits is accepted. A ValueError
    naming the offending column is raised at the first invalid value.
    """
    values = []
    for column, text in enumerate(args):
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"parsing column {column} as int: invalid syntax {text!r}")
        values.append(int(text))
    return values