"""Tests for FieldSet ordering and omission rules."""

import pytest

from girocheckout_sdk.fields import FieldSet, stringify


class TestStringify:
    """Tests for the value stringification policy."""

    def test_string_passes_through(self):
        assert stringify("EUR") == "EUR"

    def test_integer_is_decimal_text(self):
        assert stringify(100) == "100"
        assert stringify(0) == "0"

    def test_booleans_are_one_and_zero(self):
        assert stringify(True) == "1"
        assert stringify(False) == "0"

    def test_none_is_empty(self):
        assert stringify(None) == ""

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            stringify(1.5)
        with pytest.raises(TypeError):
            stringify(["a"])


class TestFieldSet:
    """Tests for FieldSet."""

    def test_preserves_insertion_order(self):
        fields = FieldSet()
        fields.set("merchantId", "5103056")
        fields.set("projectId", "45490")
        fields.set("amount", 100)
        assert fields.names() == ["merchantId", "projectId", "amount"]
        assert fields.values() == ["5103056", "45490", "100"]

    def test_empty_string_is_omitted(self):
        fields = FieldSet()
        assert fields.set("purpose", "") is False
        assert "purpose" not in fields
        assert len(fields) == 0

    def test_none_is_omitted(self):
        fields = FieldSet.from_pairs([("merchantId", "1"), ("pkn", None), ("currency", "EUR")])
        assert fields.items() == [("merchantId", "1"), ("currency", "EUR")]

    def test_false_and_zero_are_kept(self):
        fields = FieldSet.from_pairs([("recurring", False), ("amount", 0)])
        assert fields.items() == [("recurring", "0"), ("amount", "0")]

    def test_reset_keeps_position_and_takes_new_value(self):
        fields = FieldSet.from_pairs([("a", "1"), ("b", "2"), ("c", "3")])
        fields.set("a", "9")
        assert fields.items() == [("a", "9"), ("b", "2"), ("c", "3")]

    def test_reset_with_empty_value_keeps_old_value(self):
        fields = FieldSet.from_pairs([("a", "1"), ("b", "2")])
        fields.set("a", "")
        fields.set("b", None)
        assert fields.items() == [("a", "1"), ("b", "2")]

    def test_get_with_default(self):
        fields = FieldSet.from_pairs([("a", "1")])
        assert fields.get("a") == "1"
        assert fields.get("missing") is None
        assert fields.get("missing", "x") == "x"

    def test_copy_is_independent(self):
        fields = FieldSet.from_pairs([("a", "1")])
        clone = fields.copy()
        clone.set("b", "2")
        assert "b" not in fields
        assert clone == FieldSet.from_pairs([("a", "1"), ("b", "2")])

    def test_iteration_yields_pairs(self):
        fields = FieldSet.from_pairs([("a", "1"), ("b", "2")])
        assert list(fields) == [("a", "1"), ("b", "2")]
