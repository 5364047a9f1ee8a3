"""
Tests for byte-offset helpers used in error messages.
"""

import pytest

from jparser.utils.positions import byte_offset, locate, offset_from_line_column


class TestOffsetFromLineColumn:

    def test_first_line(self):
        assert offset_from_line_column(b"test string", "expected ident at line 1 column 2") == 2

    def test_later_line_adds_line_start(self):
        body = b'{\n  "a": 1,\n  "b": x\n}'

        offset = offset_from_line_column(body, "expected value at line 3 column 8")

        assert offset == body.index(b"x") + 1

    def test_message_without_position(self):
        assert offset_from_line_column(b"{}", "something went wrong") is None


class TestLocate:

    def test_empty_path_points_at_first_value(self):
        assert locate("  \n {}", ()) == 4

    def test_member_value_and_key(self):
        text = '{"a": 1, "b": [true, {"c": null}]}'

        assert text[locate(text, ("a",)):].startswith("1")
        assert text[locate(text, ("b", 1, "c")):].startswith("null")
        assert text[locate(text, ("b", 1, "c"), key=True):].startswith('"c"')

    def test_duplicate_keys_resolve_to_last(self):
        text = '{"a": 1, "a": 2}'

        assert locate(text, ("a",)) == text.rindex("2")

    def test_escaped_keys_are_compared_decoded(self):
        text = '{"caf\\u00e9": 5}'

        assert text[locate(text, ("café",)):] == "5}"

    @pytest.mark.parametrize("loc", [("missing",), ("b", 9), ("a", "deeper")])
    def test_unresolvable_steps_stop_at_deepest_match(self, loc):
        text = '{"a": 1, "b": [1]}'

        index = locate(text, loc)

        assert index in (0, text.index("1"), text.index("["))


class TestByteOffset:

    def test_ascii(self):
        assert byte_offset("abc", 2) == 3

    def test_multibyte_characters_count_as_bytes(self):
        text = '{"ñ": 1}'

        assert byte_offset(text, text.index("1")) == text.encode("utf-8").index(b"1") + 1
