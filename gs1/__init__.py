"""
GS1 Identifier Module

Check digit arithmetic and the PGLN party/location identifier.
"""

from .checksum import calculate_check_digit, calculate_gln13_check_digit, is_valid_gln13
from .pgln import PGLN, InvalidIdentifierFormatError, detect_pgln_issue, is_pgln

__all__ = [
    'PGLN',
    'InvalidIdentifierFormatError',
    'calculate_check_digit',
    'calculate_gln13_check_digit',
    'detect_pgln_issue',
    'is_pgln',
    'is_valid_gln13',
]
