"""Tests for validation_context."""

from structval import Num, Str, Struct, format_path, validate, validation_context
from structval.context import current_formatter
from structval.messages import default_formatter


def terse(path, kind, value, expected):
    return f"{format_path(path)}: expected {expected}"


class TestValidationContext:
    def test_default(self):
        assert current_formatter() is default_formatter

    def test_formatter_applies_inside_block(self):
        with validation_context(formatter=terse):
            result = validate({"x": "a"}, Struct({"x": Num}))
        assert result.messages == ["x: expected Num"]

    def test_reset_after_block(self):
        with validation_context(formatter=terse):
            pass
        assert current_formatter() is default_formatter
        assert validate(1, Str).messages == ["value is 1, should be a Str"]

    def test_reset_after_exception(self):
        try:
            with validation_context(formatter=terse):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert current_formatter() is default_formatter

    def test_custom_messages_take_precedence(self):
        with validation_context(formatter=terse):
            result = validate({"x": "a"}, Struct({"x": Num}), messages={"x": "bad x"})
        assert result.messages == ["bad x"]

    def test_explicit_formatter_wins(self):
        def loud(path, kind, value, expected):
            return "LOUD"

        with validation_context(formatter=terse):
            assert validate(1, Str, formatter=loud).messages == ["LOUD"]
