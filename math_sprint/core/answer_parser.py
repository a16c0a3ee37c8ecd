"""Parsing of typed answers."""

from __future__ import annotations

import re

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_answer(raw_input: str | None) -> int | None:
    """Return the integer at the start of ``raw_input``, or ``None``.

    Leading whitespace and an optional sign are accepted and anything after
    the digits is ignored, so ``"12abc"`` parses as 12 and ``"4.9"`` as 4.
    ``None`` means the input had no numeric prefix and can never be correct.
    """
    if not raw_input:
        return None
    match = _LEADING_INTEGER.match(raw_input)
    if match is None:
        return None
    return int(match.group(1))
