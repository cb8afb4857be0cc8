"""
PGLN Identifier Tests

Tests parsing, validation messages, Digital Link projection, equality and
ordering of Party Global Location Numbers.
"""

import copy
import pickle

import pytest
from pydantic import ValidationError

from gs1.checksum import calculate_gln13_check_digit
from gs1.pgln import PGLN, InvalidIdentifierFormatError, detect_pgln_issue, is_pgln
from masterdata.models import TradingParty


class TestPGLNValidation:
    """Test suite for the three accepted PGLN formats."""

    @pytest.mark.parametrize("value", [
        "0614141000012",
        "0614141000005",
        "urn:epc:id:pgln:0614141.00001",
        "urn:epc:id:sgln:0123456.00001.0",
        "urn:epc:id:party:0123456789:01",
        "urn:gdst:example.org:party:vessel.1",
    ])
    def test_valid_values(self, value):
        """Test accepted formats construct without error"""
        pgln = PGLN(value)
        assert pgln.value == value
        assert is_pgln(value)

    @pytest.mark.parametrize("value", ["", None])
    def test_null_or_empty(self, value):
        assert detect_pgln_issue(value) == "PGLN is NULL or EMPTY."
        with pytest.raises(InvalidIdentifierFormatError):
            PGLN(value)

    def test_spaces_rejected(self):
        assert detect_pgln_issue("12 34") == "PGLN cannot contain spaces."

    def test_uri_incompatible_characters_rejected(self):
        error = detect_pgln_issue("urn:epc:id:party:{abc}")
        assert "non-compatiable characters for a URI" in error

    def test_bad_check_digit_names_expected_digit(self):
        error = detect_pgln_issue("0614141000013")
        assert error is not None
        assert "The expected check sum was 2." in error

    def test_every_wrong_check_digit_rejected(self):
        """Test only the computed check digit is accepted for a payload"""
        payload = "012345600001"
        expected = calculate_gln13_check_digit(payload)
        for digit in "0123456789":
            pgln, error = PGLN.try_parse(payload + digit)
            if digit == expected:
                assert pgln is not None and error is None
            else:
                assert pgln is None
                assert f"expected check sum was {expected}" in error

    def test_party_urn_has_no_digit_constraint(self):
        assert is_pgln("urn:epc:id:party:1")
        assert is_pgln("urn:epc:id:party:abc.def.ghi")

    @pytest.mark.parametrize("value, count", [
        ("urn:epc:id:sgln:0123456.0001.0", 11),
        ("urn:epc:id:sgln:0123456.000001.0", 13),
        ("urn:epc:id:pgln:061414.10000", 11),
    ])
    def test_gs1_urn_digit_count(self, value, count):
        """Test company prefix + location reference must total 12 digits"""
        error = detect_pgln_issue(value)
        assert error is not None
        assert f"combined is {count}." in error

    def test_gs1_urn_needs_two_pieces(self):
        error = detect_pgln_issue("urn:epc:id:pgln:061414100001")
        assert "Did not find these two pieces." in error

    def test_gs1_urn_non_digits(self):
        error = detect_pgln_issue("urn:epc:id:sgln:0614141.0000A.0")
        assert "Found non-digit characters" in error

    @pytest.mark.parametrize("value", [
        "061414100001",
        "urn:epc:id:sgtin:0614141.00001.1",
        "epc:id:party:abc",
    ])
    def test_unrecognised_format(self, value):
        error = detect_pgln_issue(value)
        assert "not in a valid EPCIS URI format" in error
        assert value in error

    def test_constructor_message_includes_input(self):
        with pytest.raises(InvalidIdentifierFormatError) as exc_info:
            PGLN("12 34")
        assert "The PGLN 12 34 is not valid." in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)


class TestPGLNTryParse:

    def test_success_has_no_error(self):
        pgln, error = PGLN.try_parse("0614141000012")
        assert pgln == PGLN("0614141000012")
        assert error is None

    def test_failure_has_no_value(self):
        pgln, error = PGLN.try_parse("0614141000013")
        assert pgln is None
        assert error

    def test_none_does_not_raise(self):
        pgln, error = PGLN.try_parse(None)
        assert pgln is None
        assert error == "PGLN is NULL or EMPTY."


class TestDigitalLink:

    def test_gln13_unchanged(self):
        assert PGLN("0614141000012").to_digital_link_url() == "417/0614141000012"

    def test_sgln_gets_check_digit(self):
        assert PGLN("urn:epc:id:sgln:0123456.00001.0").to_digital_link_url() == "417/0123456000018"

    def test_pgln_urn(self):
        assert PGLN("urn:epc:id:pgln:0614141.00001").to_digital_link_url() == "417/0614141000012"

    def test_party_urn_with_gs1_marker_not_projected(self):
        """Test a party URN that also mentions :id:pgln: keeps its value"""
        pgln = PGLN("urn:epc:id:party:x:id:pgln:abc")
        assert pgln.is_gs1_pgln()
        assert pgln.to_digital_link_url() == "417/urn:epc:id:party:x:id:pgln:abc"

        other = PGLN("urn:epc:id:party:x:id:sgln:0614141.ab")
        assert other.to_digital_link_url() == "417/urn:epc:id:party:x:id:sgln:0614141.ab"

    def test_is_gs1_pgln(self):
        assert PGLN("urn:epc:id:pgln:0614141.00001").is_gs1_pgln()
        assert PGLN("urn:epc:id:sgln:0614141.00001.0").is_gs1_pgln()
        assert not PGLN("0614141000012").is_gs1_pgln()
        assert not PGLN("urn:epc:id:party:abc").is_gs1_pgln()


class TestPGLNEquality:

    def test_case_insensitive_equality_and_hash(self):
        upper = PGLN("urn:epc:id:party:ABC")
        lower = PGLN("urn:epc:id:party:abc")
        assert upper == lower
        assert hash(upper) == hash(lower)
        assert len({upper, lower}) == 1

    def test_str_is_lower_case_value_is_verbatim(self):
        pgln = PGLN("urn:epc:id:party:ABC")
        assert str(pgln) == "urn:epc:id:party:abc"
        assert pgln.value == "urn:epc:id:party:ABC"

    def test_not_equal_to_plain_string(self):
        assert PGLN("0614141000012") != "0614141000012"

    def test_copy_is_equal_by_value(self):
        pgln = PGLN("urn:epc:id:party:ABC")
        clone = pgln.copy()
        assert clone == pgln
        assert clone is not pgln

    def test_immutable(self):
        pgln = PGLN("0614141000012")
        with pytest.raises(AttributeError):
            pgln._value = "0614141000005"

    def test_ordering_is_lexicographic_and_consistent(self):
        values = [
            PGLN("urn:epc:id:party:b"),
            PGLN("0614141000012"),
            PGLN("urn:epc:id:party:A"),
            PGLN("urn:epc:id:party:a"),
            PGLN("0614141000005"),
        ]
        ordered = sorted(values)
        assert [str(p) for p in ordered] == sorted(str(p) for p in values)

        for left in values:
            for right in values:
                equal = left == right
                assert equal == (not left < right and not right < left)
                assert equal == (str(left) == str(right))

    def test_ordering_against_other_types(self):
        with pytest.raises(TypeError):
            PGLN("0614141000012") < "0614141000013"


class TestPGLNModelField:

    def test_string_coerced_to_pgln(self):
        party = TradingParty(id="urn:epc:id:party:acme", pgln="0614141000012")
        assert isinstance(party.id, PGLN)
        assert party.pgln == PGLN("0614141000012")

    def test_invalid_string_rejected(self):
        with pytest.raises(ValidationError):
            TradingParty(pgln="0614141000013")

    def test_serialized_as_string(self):
        party = TradingParty(pgln="urn:epc:id:pgln:0614141.00001")
        assert party.model_dump()["pgln"] == "urn:epc:id:pgln:0614141.00001"


class TestPGLNCopying:
    """Test PGLN values survive the standard copy and pickle protocols."""

    @pytest.fixture
    def pgln(self):
        return PGLN("urn:epc:id:party:ACME")

    def test_shallow_and_deep_copy(self, pgln):
        for clone in (copy.copy(pgln), copy.deepcopy(pgln)):
            assert clone == pgln
            assert clone.value == "urn:epc:id:party:ACME"

    def test_pickle_round_trip(self, pgln):
        restored = pickle.loads(pickle.dumps(pgln))
        assert restored == pgln
        assert restored.value == pgln.value

    def test_model_deep_copy(self):
        party = TradingParty(id="urn:epc:id:party:acme", pgln="0614141000012")
        clone = party.model_copy(deep=True)
        assert clone.pgln == PGLN("0614141000012")
        assert clone.model_dump() == party.model_dump()


def test_invalid_model_field_logged_once(caplog):
    """Test a rejected PGLN field does not log from the identifier itself"""
    with caplog.at_level("ERROR"):
        with pytest.raises(ValidationError):
            TradingParty(pgln="0614141000013")
    assert [r for r in caplog.records if r.name == "gs1.pgln"] == []


def test_strict_constructor_logs_rejection(caplog):
    with caplog.at_level("ERROR"):
        with pytest.raises(InvalidIdentifierFormatError):
            PGLN("0614141000013")
    assert len([r for r in caplog.records if r.name == "gs1.pgln"]) == 1
