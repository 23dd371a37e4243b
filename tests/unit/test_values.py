"""Unit tests for the value model."""

from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from tnetcodec import Boolean, Float, Integer, List, Mapping, Null, String


class TestConstruction:
    """Test positional construction of each variant."""

    def test_scalars(self) -> None:
        """Test scalar variants hold their payload."""
        assert Boolean(True).value is True
        assert Integer(-7).value == -7
        assert Float(1.5).value == 1.5
        assert String(b"abc").value == b"abc"

    def test_keyword_construction(self) -> None:
        """Test the field can also be passed by name."""
        assert Integer(value=3) == Integer(3)

    def test_null_has_no_payload(self) -> None:
        """Test all Null instances are equal."""
        assert Null() == Null()
        assert Null().kind == "null"

    def test_big_integer(self) -> None:
        """Test integers are not bounded to a machine word."""
        assert Integer(2**100).value == 2**100

    def test_float_widens_int(self) -> None:
        """Test an int given to Float is stored as float."""
        value = Float(3)
        assert isinstance(value.value, float)
        assert value.value == 3.0

    def test_string_copies_buffers(self) -> None:
        """Test bytearray and memoryview are stored as bytes."""
        assert String(bytearray(b"xy")).value == b"xy"
        assert String(memoryview(b"xy")).value == b"xy"
        assert isinstance(String(bytearray(b"xy")).value, bytes)

    def test_empty_containers_are_falsy(self) -> None:
        """Test len() drives truthiness, so emptiness is not absence."""
        assert len(List()) == 0
        assert not List()
        assert not Mapping()
        assert List([Null()])
        assert isinstance(List(), List)

    def test_list_stores_tuple(self) -> None:
        """Test list items become an immutable tuple."""
        value = List([Integer(1), Integer(2)])
        assert value.items == (Integer(1), Integer(2))
        assert len(value) == 2
        assert len(List()) == 0

    def test_mapping_from_dict(self) -> None:
        """Test a dict of bytes keys is accepted in insertion order."""
        value = Mapping({b"a": Integer(1), b"b": Null()})
        assert list(value.keys()) == [b"a", b"b"]

    def test_mapping_accepts_string_keys(self) -> None:
        """Test String instances are unwrapped to bytes keys."""
        value = Mapping([(String(b"k"), Integer(1))])
        assert value.pairs == ((b"k", Integer(1)),)


class TestValidation:
    """Test type constraints at construction time."""

    def test_integer_rejects_bool(self) -> None:
        """Test bool is not silently accepted as an integer."""
        with pytest.raises(ValidationError):
            Integer(True)

    @pytest.mark.skipif(
        not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
        reason="interpreter has no int string conversion limit",
    )
    def test_integer_rejects_unencodable_size(self) -> None:
        """Test integers too long to render as decimal are rejected."""
        max_digits = sys.get_int_max_str_digits()
        Integer(10**max_digits - 1)
        with pytest.raises(ValidationError, match="decimal digits"):
            Integer(10**max_digits)
        with pytest.raises(ValidationError, match="decimal digits"):
            Integer(-(10 ** (max_digits + 10)))

    def test_integer_rejects_str(self) -> None:
        """Test numeric strings are rejected."""
        with pytest.raises(ValidationError):
            Integer("42")

    def test_boolean_rejects_int(self) -> None:
        """Test 0/1 are not booleans."""
        with pytest.raises(ValidationError):
            Boolean(1)

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_float_rejects_non_finite(self, bad: float) -> None:
        """Test values with no wire spelling are rejected."""
        with pytest.raises(ValidationError):
            Float(bad)

    def test_float_rejects_bool_and_str(self) -> None:
        """Test only real numbers become floats."""
        with pytest.raises(ValidationError):
            Float(True)
        with pytest.raises(ValidationError):
            Float("1.5")

    def test_string_rejects_text(self) -> None:
        """Test str must be encoded by the caller."""
        with pytest.raises(ValidationError):
            String("hello")

    def test_list_rejects_plain_objects(self) -> None:
        """Test list items must already be values."""
        with pytest.raises(ValidationError):
            List([1, 2])

    def test_mapping_rejects_bad_pair(self) -> None:
        """Test pairs must be (key, value)."""
        with pytest.raises(ValidationError):
            Mapping([(b"a",)])

    def test_mapping_rejects_text_key(self) -> None:
        """Test keys must be bytes."""
        with pytest.raises(ValidationError):
            Mapping([("a", Integer(1))])

    def test_values_are_frozen(self) -> None:
        """Test values cannot be modified after construction."""
        value = Integer(1)
        with pytest.raises(ValidationError):
            value.value = 2  # type: ignore[misc]


class TestMappingSemantics:
    """Test ordered pair semantics of Mapping."""

    def test_duplicate_keys_preserved(self) -> None:
        """Test duplicates are kept and lookups return the first."""
        value = Mapping([(b"a", Integer(1)), (b"a", Integer(2))])
        assert len(value) == 2
        assert value.get(b"a") == Integer(1)

    def test_get_default(self) -> None:
        """Test missing keys return the default."""
        value = Mapping([(b"a", Integer(1))])
        assert value.get(b"missing") is None
        assert value.get(b"missing", Null()) == Null()

    def test_order_matters_for_equality(self) -> None:
        """Test mappings with the same pairs in a different order differ."""
        first = Mapping([(b"a", Integer(1)), (b"b", Integer(2))])
        second = Mapping([(b"b", Integer(2)), (b"a", Integer(1))])
        assert first != second

    def test_variants_not_equal_across_kinds(self) -> None:
        """Test Integer(1) and Float(1.0) are distinct values."""
        assert Integer(1) != Float(1.0)
