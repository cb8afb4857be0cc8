"""
Party Global Location Number (PGLN)

Identifies trading partners, business departments, regions and locations in
full chain traceability. Three formats are accepted:

- GLN-13:      0614141000012                      (12 digits + check digit)
- Party URN:   urn:epc:id:party:<anything>       (no digit constraint)
- GS1 URN:     urn:epc:id:pgln:0614141.00001      (also :id:sgln:)
               company prefix + location reference must total 12 digits

Accepted strings are stored verbatim. Equality, hashing, ordering and str()
use the lower-cased form.
"""

import argparse
import logging
import re
from functools import total_ordering
from typing import Any, Optional, Tuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from gs1.checksum import GLN_PAYLOAD_LENGTH, calculate_gln13_check_digit, is_only_digits

logger = logging.getLogger(__name__)

DIGITAL_LINK_AI = "417"  # GS1 Application Identifier for party GLN

# Anything outside unreserved URN characters
_URI_INCOMPATIBLE = re.compile(r"[^._\-:0-9A-Za-z]")


class InvalidIdentifierFormatError(ValueError):
    """Raised when a string is not a valid PGLN."""
    pass


def is_uri_compatible(value: str) -> bool:
    """Return True if every character can appear unescaped in a URN."""
    return _URI_INCOMPATIBLE.search(value) is None


def detect_pgln_issue(pgln_str: Optional[str]) -> Optional[str]:
    """
    Explain why a string is not a valid PGLN.

    Args:
        pgln_str: Raw identifier string (may be None)

    Returns:
        Human-readable reason, or None if the string is a valid PGLN

    Example:
        >>> detect_pgln_issue("0614141000012") is None
        True
        >>> detect_pgln_issue("12 34")
        'PGLN cannot contain spaces.'
    """
    if not pgln_str:
        return "PGLN is NULL or EMPTY."

    if " " in pgln_str:
        return "PGLN cannot contain spaces."

    if not is_uri_compatible(pgln_str):
        return "The PGLN contains non-compatiable characters for a URI."

    if len(pgln_str) == GLN_PAYLOAD_LENGTH + 1 and is_only_digits(pgln_str):
        checksum = calculate_gln13_check_digit(pgln_str[:GLN_PAYLOAD_LENGTH])
        if checksum != pgln_str[-1]:
            return (
                f"The check sum did not calculate correctly. The expected check sum was {checksum}. "
                "Please make sure to validate that you typed the PGLN correctly. It's possible the "
                "check sum was typed correctly but another number was entered wrong."
            )
        return None

    if pgln_str.startswith("urn:") and ":party:" in pgln_str:
        return None

    if pgln_str.startswith("urn:") and (":id:pgln:" in pgln_str or ":id:sgln:" in pgln_str):
        pieces = pgln_str.split(":")[-1].split(".")
        if len(pieces) < 2:
            return (
                "This is supposed to contain the company prefix and the location code. "
                "Did not find these two pieces."
            )

        digits = pieces[0] + pieces[1]
        if not is_only_digits(digits):
            return (
                "This is supposed to be a GS1 PGLN based on the System Prefix and Data Type Prefix. "
                "That means the Company Prefix and Serial Numbers should only be digits. Found "
                "non-digit characters in the Company Prefix or Serial Number."
            )
        if len(digits) != GLN_PAYLOAD_LENGTH:
            return (
                "This is supposed to be a GS1 PGLN based on the System Prefix and Data Type Prefix. "
                "That means the Company Prefix and Serial Numbers should contain a maximum total of "
                f"{GLN_PAYLOAD_LENGTH} digits between the two. The total number of digits when "
                f"combined is {len(digits)}."
            )
        return None

    return f"The PGLN is not in a valid EPCIS URI format or in GS1 (P)GLN-13 format. PGLN = {pgln_str}"


def is_pgln(pgln_str: Optional[str]) -> bool:
    """Return True if the string is a valid PGLN in any accepted format."""
    return detect_pgln_issue(pgln_str) is None


@total_ordering
class PGLN:
    """
    Immutable PGLN value.

    Construct with PGLN(raw) to fail fast, or PGLN.try_parse(raw) to get
    a (pgln, error) pair without raising.
    """

    __slots__ = ("_value",)

    def __init__(self, pgln_str: str):
        error = detect_pgln_issue(pgln_str)
        if error:
            logger.error(f"Rejected PGLN {pgln_str!r}: {error}")
            raise InvalidIdentifierFormatError(f"The PGLN {pgln_str} is not valid. {error}")
        object.__setattr__(self, "_value", pgln_str)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("PGLN is immutable")

    @classmethod
    def try_parse(cls, pgln_str: Optional[str]) -> Tuple[Optional["PGLN"], Optional[str]]:
        """
        Parse without raising.

        Returns:
            (PGLN, None) on success, (None, reason) on failure
        """
        error = detect_pgln_issue(pgln_str)
        if error:
            return None, error
        return cls(pgln_str), None

    @property
    def value(self) -> str:
        """The identifier exactly as it was given."""
        return self._value

    def is_gs1_pgln(self) -> bool:
        return ":id:pgln:" in self._value or ":id:sgln:" in self._value

    def _is_party_urn(self) -> bool:
        # Party URNs are accepted before the GS1 piece checks run
        return self._value.startswith("urn:") and ":party:" in self._value

    def to_digital_link_url(self) -> str:
        """
        Project the PGLN onto a GS1 Digital Link path.

        Example:
            >>> PGLN("urn:epc:id:sgln:0614141.00001.0").to_digital_link_url()
            '417/0614141000012'
        """
        if self.is_gs1_pgln() and not self._is_party_urn():
            pieces = self._value.split(":")[-1].split(".")
            gln_12 = pieces[0] + pieces[1]
            return f"{DIGITAL_LINK_AI}/{gln_12}{calculate_gln13_check_digit(gln_12)}"
        return f"{DIGITAL_LINK_AI}/{self._value}"

    def copy(self) -> "PGLN":
        return PGLN(self._value)

    def __reduce__(self):
        return (PGLN, (self._value,))

    def __str__(self) -> str:
        return self._value.lower()

    def __repr__(self) -> str:
        return f"PGLN({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PGLN):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: "PGLN") -> bool:
        if not isinstance(other, PGLN):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate(cls, value: Any) -> "PGLN":
        if isinstance(value, PGLN):
            return value
        if isinstance(value, str):
            # Reported by the model validation that wraps this call
            error = detect_pgln_issue(value)
            if error:
                raise InvalidIdentifierFormatError(f"The PGLN {value} is not valid. {error}")
            return cls(value)
        raise InvalidIdentifierFormatError(f"PGLN must be a string, got {type(value).__name__}")


def main() -> None:
    from utility.config import configure_logging

    configure_logging()

    parser = argparse.ArgumentParser(description="Validate PGLN identifiers")
    parser.add_argument("values", nargs="+", help="GLN-13 or EPC URN strings")
    args = parser.parse_args()

    for raw in args.values:
        pgln, error = PGLN.try_parse(raw)
        if pgln is None:
            print(f"❌ {raw}: {error}")
        else:
            print(f"✅ {pgln} -> {pgln.to_digital_link_url()}")


if __name__ == "__main__":
    main()
