"""Find OCR numbers in free text.

Real-world text glues references to amounts, labels and other numbers, or
splits them across lines. The scanner therefore joins all digit runs and tries
every window of acceptable length, keeping the ones that verify.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .checksum import OCRError, verify_and_strip
from .utils import get_logger
from .validators import digit_runs

DEFAULT_MIN_LENGTH = 4
DEFAULT_MAX_LENGTH = 18

log = get_logger(__name__)


@dataclass(slots=True)
class OCRMatch:
    """Single accepted OCR window and where it sits in the source text."""

    value: str
    payload: str
    start: int
    end: int

    def to_dict(self) -> dict[str, object]:
        """Return a stable, serializable representation of this match."""
        return asdict(self)


def _join_digits(text: str) -> tuple[str, list[int]]:
    """Return all digits of text joined, plus each digit's offset in text."""
    digits: list[str] = []
    offsets: list[int] = []
    for run in digit_runs(text):
        digits.append(run.group(0))
        offsets.extend(range(run.start(), run.end()))
    return "".join(digits), offsets


def find_matches(
    text: str,
    *,
    length_digit: bool = False,
    pad: str = "",
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> list[OCRMatch]:
    """Return every window of text's digits that verifies as an OCR number.

    Windows are ordered by start offset, then by length. The same value may
    appear more than once if it occurs at several places.
    """
    digits, offsets = _join_digits(text)
    shortest = max(min_length, 1)

    matches: list[OCRMatch] = []
    tried = 0
    for first in range(len(digits)):
        longest = min(max_length, len(digits) - first)
        for length in range(shortest, longest + 1):
            candidate = digits[first : first + length]
            tried += 1
            try:
                payload = verify_and_strip(candidate, length_digit=length_digit, pad=pad)
            except OCRError:
                continue
            matches.append(
                OCRMatch(
                    value=candidate,
                    payload=payload,
                    start=offsets[first],
                    end=offsets[first + length - 1] + 1,
                )
            )

    log.debug("Scanned %d digits, tried %d windows, accepted %d", len(digits), tried, len(matches))
    return matches


def find_all_in_string(
    text: str,
    *,
    length_digit: bool = False,
    pad: str = "",
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> list[str]:
    """Return the unique OCR numbers found in text, in first-seen order."""
    matches = find_matches(
        text,
        length_digit=length_digit,
        pad=pad,
        min_length=min_length,
        max_length=max_length,
    )
    return list(dict.fromkeys(match.value for match in matches))
