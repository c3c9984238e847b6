"""Generation and verification of Swedish OCR payment references.

An OCR number is laid out as::

    payload [pad] [length digit] check digit

The check digit is the weighted mod-10 digit over everything before it. The
optional length digit is the total length of the finished number modulo 10.
Bankgirot allows at most 25 digits.
"""

from __future__ import annotations

from enum import Enum

from .validators import is_digit_string, mod10_check_digit

MAX_OCR_LENGTH = 25
MIN_OCR_LENGTH = 2


class ErrorKind(Enum):
    """Every way generation or verification can fail."""

    MUST_BE_NUMERIC = "must_be_numeric"
    OVERLONG_OCR = "overlong_ocr"
    TOO_SHORT_OCR = "too_short_ocr"
    BAD_CHECKSUM = "bad_checksum"
    BAD_LENGTH_DIGIT = "bad_length_digit"
    BAD_PADDING = "bad_padding"


class OCRError(ValueError):
    """Raised when a number cannot be turned into, or read as, an OCR."""

    def __init__(self, kind: ErrorKind, value: str) -> None:
        super().__init__(f"{kind.value}: {value!r}")
        self.kind = kind
        self.value = value


def _normalize(number: str | int) -> str:
    """Return number as a digit string or raise MUST_BE_NUMERIC."""
    text = str(number) if isinstance(number, int) else number
    if not isinstance(text, str) or not is_digit_string(text):
        raise OCRError(ErrorKind.MUST_BE_NUMERIC, str(number))
    return text


def _check_pad(pad: str) -> None:
    if pad and not is_digit_string(pad):
        raise OCRError(ErrorKind.MUST_BE_NUMERIC, pad)


def generate(number: str | int, *, length_digit: bool = False, pad: str = "") -> str:
    """Return number with padding, optional length digit and check digit added.

    >>> generate("123")
    '1230'
    >>> generate("1234567890", length_digit=True, pad="0")
    '1234567890037'
    """
    ocr = _normalize(number)
    _check_pad(pad)

    ocr += pad
    if length_digit:
        # Counts itself and the check digit still to come.
        ocr += str((len(ocr) + 2) % 10)
    ocr += str(mod10_check_digit(ocr))

    if len(ocr) > MAX_OCR_LENGTH:
        raise OCRError(ErrorKind.OVERLONG_OCR, ocr)
    return ocr


def verify_and_strip(ocr: str | int, *, length_digit: bool = False, pad: str = "") -> str:
    """Validate an OCR number and return its payload.

    Checks run in order: numeric, length, check digit, length digit, padding.
    The first failing check raises OCRError with the matching ErrorKind.
    """
    digits = _normalize(ocr)
    _check_pad(pad)

    min_length = MIN_OCR_LENGTH + (1 if length_digit else 0)
    if len(digits) < min_length:
        raise OCRError(ErrorKind.TOO_SHORT_OCR, digits)

    body, check = digits[:-1], digits[-1]
    if mod10_check_digit(body) != int(check):
        raise OCRError(ErrorKind.BAD_CHECKSUM, digits)

    if length_digit:
        if int(body[-1]) != len(digits) % 10:
            raise OCRError(ErrorKind.BAD_LENGTH_DIGIT, digits)
        body = body[:-1]

    if pad:
        if not body.endswith(pad):
            raise OCRError(ErrorKind.BAD_PADDING, digits)
        body = body[: -len(pad)]

    return body
