"""Policy number checksum validation.

A policy number d1 d2 ... d9 (d1 leftmost) is valid when

    (9*d1 + 8*d2 + 7*d3 + ... + 2*d8 + 1*d9) mod 11 == 0

Malformed input (wrong length, '?' or any other non-digit) has no checksum
and is never valid. Neither function raises for such input.
"""

from typing import Optional, Union

from .constants import CHECKSUM_MODULUS, CHECKSUM_WEIGHTS, DIGITS_PER_ENTRY

PolicyNumberLike = Union[str, int]


def normalize_policy_number(number: PolicyNumberLike) -> str:
    """Convert a policy number given as str or int to its string form.

    Integers lose leading zeros, so 12345678 stays an 8-digit number.

    Example:
        >>> normalize_policy_number(345882865)
        '345882865'
    """
    return str(number)


def is_well_formed(number: PolicyNumberLike) -> bool:
    """Check that the number has exactly 9 ASCII digits."""
    text = normalize_policy_number(number)
    return (
        len(text) == DIGITS_PER_ENTRY
        and text.isascii()
        and text.isdigit()
    )


def calculate_checksum(number: PolicyNumberLike) -> Optional[int]:
    """Calculate the weighted mod-11 checksum of a policy number.

    Args:
        number: 9-digit policy number as str or int

    Returns:
        Weighted digit sum mod 11 (0-10), or None if the number is not
        exactly 9 digits

    Example:
        >>> calculate_checksum("345882865")
        0
        >>> calculate_checksum(111111111)
        1
        >>> calculate_checksum("86110??36") is None
        True
    """
    if not is_well_formed(number):
        return None

    text = normalize_policy_number(number)
    total = sum(
        weight * int(digit) for weight, digit in zip(CHECKSUM_WEIGHTS, text)
    )

    return total % CHECKSUM_MODULUS


def validate_checksum(number: PolicyNumberLike) -> bool:
    """Check whether a policy number passes the checksum.

    Args:
        number: Policy number as str or int

    Returns:
        True only for a 9-digit number whose checksum is 0

    Example:
        >>> validate_checksum("123456789")
        True
        >>> validate_checksum("123456788")
        False
        >>> validate_checksum(12345678)
        False
    """
    return calculate_checksum(number) == 0
