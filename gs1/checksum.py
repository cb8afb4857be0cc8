"""
GS1 Check Digit Module

Computes and verifies the GS1 mod-10 check digit shared by GLN, GTIN and SSCC
keys. PGLN validation relies on the GLN-13 variant: 12 payload digits followed
by one check digit.

Algorithm (GS1 General Specifications, section 7.9):
1. Starting from the rightmost payload digit, weight digits alternately 3, 1, 3, 1...
2. Sum the weighted digits
3. Check digit = (10 - (sum mod 10)) mod 10
"""

import re

GLN_PAYLOAD_LENGTH = 12

_DIGITS_ONLY = re.compile(r"^[0-9]+$")


def is_only_digits(value: str) -> bool:
    """Return True if the value is non-empty and made of ASCII digits only."""
    return bool(value) and _DIGITS_ONLY.match(value) is not None


def calculate_check_digit(code: str) -> str:
    """
    Calculate GS1 check digit using the standard algorithm.

    Args:
        code: Numeric string without check digit

    Returns:
        Single digit check digit as string

    Example:
        >>> calculate_check_digit("400638133393")
        '1'
    """
    # Rightmost payload digit carries weight 3
    total = sum(int(digit) * (3 if i % 2 == 0 else 1) for i, digit in enumerate(reversed(code)))
    check_digit = (10 - (total % 10)) % 10
    return str(check_digit)


def calculate_gln13_check_digit(gln_12: str) -> str:
    """
    Calculate the check digit of a GLN-13 from its 12 payload digits.

    Args:
        gln_12: Company prefix + location reference (exactly 12 digits)

    Returns:
        Single check digit (0-9)

    Raises:
        ValueError: If the payload is not exactly 12 digits

    Example:
        >>> calculate_gln13_check_digit("061414100001")
        '2'
    """
    if len(gln_12) != GLN_PAYLOAD_LENGTH or not is_only_digits(gln_12):
        raise ValueError(f"GLN payload must be {GLN_PAYLOAD_LENGTH} digits, got '{gln_12}'")

    return calculate_check_digit(gln_12)


def is_valid_gln13(value: str) -> bool:
    """
    Validate a 13-digit GLN including its check digit.

    Use Case: Validate GLNs scanned from barcodes or typed by hand
    """
    if value is None or len(value) != GLN_PAYLOAD_LENGTH + 1 or not is_only_digits(value):
        return False

    return value[-1] == calculate_gln13_check_digit(value[:GLN_PAYLOAD_LENGTH])
