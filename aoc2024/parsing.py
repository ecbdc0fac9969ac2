"""Reading of space-separated values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class InvalidDataError(ValueError):
    """The input data does not have the expected shape."""


def _lines(data: str | Iterable[str]) -> Iterable[str]:
    if isinstance(data, str):
        return data.splitlines()
    return data


def iter_ssv(data: str | Iterable[str], expected_cols: int = 0) -> Iterator[list[str]]:
    """Yield the whitespace-separated fields of each line in ``data``.

    ``data`` is a string or an iterable of lines such as an open text file.
    If ``expected_cols`` is non-zero, a row with a different number of
    fields raises InvalidDataError and ends the iteration.
    """
    for line in _lines(data):
        record = line.split()
        if expected_cols and len(record) != expected_cols:
            raise InvalidDataError(
                f"expected {expected_cols} columns per row, got {len(record)}"
            )
        yield record