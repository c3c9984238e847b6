"""Digit-string helpers and the weighted mod-10 check digit."""

from __future__ import annotations

import re

DIGIT_RUN_RE = re.compile(r"[0-9]+")


def is_digit_string(text: str) -> bool:
    """Return True if text is a non-empty run of ASCII digits."""
    return DIGIT_RUN_RE.fullmatch(text) is not None


def digit_runs(text: str) -> list[re.Match[str]]:
    """Return every maximal run of ASCII digits in text."""
    return list(DIGIT_RUN_RE.finditer(text))


def mod10_check_digit(digits: str) -> int:
    """Return the mod-10 check digit for a digit string.

    Weights alternate 2, 1, 2, ... starting with the rightmost digit; a
    doubled digit above 9 contributes the sum of its two digits.
    """
    total = 0
    reversed_digits = list(map(int, reversed(digits)))
    for index, digit in enumerate(reversed_digits):
        weighted = digit
        if index % 2 == 0:
            weighted *= 2
            if weighted > 9:
                weighted -= 9
        total += weighted

    return (10 - total % 10) % 10
