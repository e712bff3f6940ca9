"""Tests for strict format substitution (conguard/formatting.py)."""

import pytest

from conguard import FormatArgumentError, format_message


class TestFormatMessage:
    def test_no_placeholders(self):
        assert format_message("plain text") == "plain text"

    def test_auto_numbered_fields(self):
        assert format_message("{} + {} = {}", (1, 2, 3)) == "1 + 2 = 3"

    def test_explicit_indexes_may_repeat(self):
        assert format_message("{0}{1}{0}", ("a", "b")) == "aba"

    def test_keyword_fields(self):
        assert format_message("{x}/{y}", (), {"x": 1, "y": 2}) == "1/2"

    def test_escaped_braces(self):
        assert format_message("{{literal}} {}", ("value",)) == "{literal} value"

    def test_nested_format_spec(self):
        assert format_message("{:>{}}", ("ab", 4)) == "  ab"

    def test_attribute_and_index_access(self):
        assert format_message("{0[1]} {1.real}", ([5, 6], 3)) == "6 3"

    @pytest.mark.parametrize(
        "fmt,args,kwargs",
        [
            ("{}", (), {}),
            ("{1}", ("only",), {}),
            ("{name}", (), {}),
            ("{}", (1, 2), {}),
            ("none", (), {"unused": 1}),
            ("{0} {}", (1, 2), {}),
            ("{:q}", (1,), {}),
            ("{", (), {}),
        ],
    )
    def test_mismatches_raise(self, fmt, args, kwargs):
        with pytest.raises(FormatArgumentError):
            format_message(fmt, args, kwargs)

    def test_format_must_be_str(self):
        with pytest.raises(FormatArgumentError):
            format_message(42)
