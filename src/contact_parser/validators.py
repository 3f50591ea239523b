"""Structural checks for extracted contact fields.

OCR output is noisy. A candidate that fails one of these checks is still
kept, flagged invalid, so the user can correct it.
"""

from urllib.parse import urlsplit


def is_valid_email(email: str) -> bool:
    """Return True if the address contains both '@' and '.'."""
    return "@" in email and "." in email


def is_valid_phone(phone: str, min_digits: int = 10, max_digits: int = 15) -> bool:
    """Return True if the number has between min_digits and max_digits digits, inclusive."""
    digits = sum(1 for ch in phone if ch.isdigit())
    return min_digits <= digits <= max_digits


def is_valid_url(url: str) -> bool:
    """Return True if the URL has both a scheme and a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)


def is_valid_address(
    street: str | None = None,
    city: str | None = None,
    state: str | None = None,
    postal_code: str | None = None,
) -> bool:
    """
    Return True if the address has enough parts to be deliverable.

    Accepted combinations are street and city, city and state, or street
    and postal code.
    """
    return bool(
        (street and city)
        or (city and state)
        or (street and postal_code)
    )
