"""Tests for path rendering, parsing and traversal."""

import pytest

from structval import MISSING, format_path, get_in, parse_path
from structval.paths import extend, to_path


class TestFormatPath:
    def test_root(self):
        assert format_path(()) == "value"

    def test_keys(self):
        assert format_path(("user", "name")) == "user.name"

    def test_indices(self):
        assert format_path(("tags", 1)) == "tags[1]"
        assert format_path(("rows", 0, 2)) == "rows[0][2]"

    def test_leading_index(self):
        assert format_path((0, "name")) == "[0].name"

    def test_custom_root(self):
        assert format_path((), root="$") == "$"


class TestParsePath:
    def test_simple(self):
        assert parse_path("user.name") == ("user", "name")

    def test_indices(self):
        assert parse_path("tags[1]") == ("tags", 1)
        assert parse_path("[0].name") == (0, "name")
        assert parse_path("rows[0][-1]") == ("rows", 0, -1)

    def test_empty(self):
        assert parse_path("") == ()

    @pytest.mark.parametrize("bad", ["a..b", "a.", "a.[0]", "[x]", "1abc"])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            parse_path(bad)

    def test_inverse_of_format(self):
        path = ("user", "tags", 3, "label")
        assert parse_path(format_path(path)) == path


class TestExtend:
    def test_does_not_mutate(self):
        parent = ("a",)
        left = extend(parent, "b")
        right = extend(parent, 0)
        assert parent == ("a",)
        assert left == ("a", "b")
        assert right == ("a", 0)

    def test_to_path(self):
        assert to_path(None) == ()
        assert to_path(["a", 0]) == ("a", 0)
        assert to_path("a[0]") == ("a", 0)


class TestGetIn:
    def test_nested(self):
        data = {"a": {"b": [1, 2, {"c": "x"}]}}
        assert get_in(data, ("a", "b", 1)) == 2
        assert get_in(data, ("a", "b", 2, "c")) == "x"
        assert get_in(data, ()) is data

    def test_missing(self):
        data = {"a": {"b": [1]}}
        assert get_in(data, ("a", "x")) is MISSING
        assert get_in(data, ("a", "b", 5)) is MISSING
        assert get_in(data, ("a", "b", "k")) is MISSING
        assert get_in("text", (0,)) is MISSING

    def test_default(self):
        assert get_in({}, ("a",), default=None) is None

    def test_present_none(self):
        assert get_in({"a": None}, ("a",)) is None
