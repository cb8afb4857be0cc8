"""
GS1 Check Digit Tests

Tests the mod-10 check digit used to validate GLN-13 identifiers.
"""

import random

import pytest

from gs1.checksum import calculate_check_digit, calculate_gln13_check_digit, is_valid_gln13


@pytest.mark.parametrize("payload, expected", [
    ("061414100001", "2"),
    ("061414100000", "5"),
    ("012345600001", "8"),
    ("400638133393", "1"),   # GTIN-13 4006381333931
    ("000000000000", "0"),
])
def test_known_gln_check_digits(payload, expected):
    """Test check digits against hand-computed GS1 examples"""
    assert calculate_gln13_check_digit(payload) == expected


def test_check_digit_is_single_deterministic_digit():
    """Test every 12-digit payload yields one digit 0-9, the same each time"""
    rng = random.Random(417)
    for _ in range(500):
        payload = "".join(rng.choice("0123456789") for _ in range(12))
        digit = calculate_gln13_check_digit(payload)
        assert len(digit) == 1
        assert digit in "0123456789"
        assert calculate_gln13_check_digit(payload) == digit


def test_rightmost_digit_weighted_by_three():
    """Test the weight 3 lands on the rightmost payload digit"""
    # 1 * 3 = 3 -> (10 - 3) % 10 = 7
    assert calculate_check_digit("000000000001") == "7"
    # 1 * 1 = 1 -> 9
    assert calculate_check_digit("000000000010") == "9"


@pytest.mark.parametrize("payload", ["06141410000", "0614141000012", "06141410000a", ""])
def test_gln13_payload_must_be_twelve_digits(payload):
    """Test non 12-digit payloads are rejected"""
    with pytest.raises(ValueError):
        calculate_gln13_check_digit(payload)


def test_is_valid_gln13():
    """Test full GLN-13 validation"""
    assert is_valid_gln13("0614141000012")
    assert not is_valid_gln13("0614141000013")
    assert not is_valid_gln13("061414100001")
    assert not is_valid_gln13("06141410000x2")
    assert not is_valid_gln13(None)
