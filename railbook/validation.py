"""Checks for numeric input, travel dates and account passwords."""

SPECIAL_CHARACTERS = frozenset("@#!$%&_")
MIN_PASSWORD_LENGTH = 8
MIN_YEAR = 25
DATE_LENGTH = 8


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_valid_number(text: str) -> bool:
    """Return True if text is an optional leading '-' followed by ASCII digits."""
    if not text:
        return False
    head, rest = text[0], text[1:]
    if head != "-" and not _is_digit(head):
        return False
    return all(_is_digit(ch) for ch in rest)


def parse_int(text: str) -> int:
    """Convert a string accepted by is_valid_number to an int."""
    if not is_valid_number(text):
        raise ValueError(f"not a number: {text!r}")
    if text == "-":
        return 0
    return int(text)


def is_valid_date(text: str) -> bool:
    """Return True for a dd/mm/yy date with a plausible day, month and year."""
    if len(text) != DATE_LENGTH or text[2] != "/" or text[5] != "/":
        return False
    parts = (text[0:2], text[3:5], text[6:8])
    if not all(_is_digit(ch) for part in parts for ch in part):
        return False
    day, month, year = (int(part) for part in parts)
    return 1 <= day <= 31 and 1 <= month <= 12 and year >= MIN_YEAR


def is_strong_password(password: str) -> bool:
    """Return True if the password is long enough and mixes character classes."""
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and any("A" <= ch <= "Z" for ch in password)
        and any("a" <= ch <= "z" for ch in password)
        and any(_is_digit(ch) for ch in password)
        and any(ch in SPECIAL_CHARACTERS for ch in password)
    )