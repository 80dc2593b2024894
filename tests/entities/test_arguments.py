"""
Tests for argument classification.
"""

import pytest

from zero_shell.entities.arguments import ArgumentSpec
from zero_shell.exceptions import InvalidOptionError, UsageError


class TestArgumentSpec:
    """Test cases for ArgumentSpec.parse."""

    LS_SPEC = ArgumentSpec(
        max_operands=1,
        flags={"a": "show_all", "l": "long_format", "F": "classify"},
    )

    def test_no_arguments(self):
        """Test defaults when nothing is given."""
        parsed = self.LS_SPEC.parse([])

        assert parsed.operands == ()
        assert parsed.flags == {
            "show_all": False,
            "long_format": False,
            "classify": False,
        }

    def test_combined_flags(self):
        """Test a flag cluster such as -la."""
        parsed = self.LS_SPEC.parse(["-la", "dir"])

        assert parsed.flag("show_all")
        assert parsed.flag("long_format")
        assert not parsed.flag("classify")
        assert parsed.operands == ("dir",)

    def test_separate_flags_in_any_position(self):
        """Test that flags after operands are still recognized."""
        parsed = self.LS_SPEC.parse(["dir", "-F"])

        assert parsed.flag("classify")
        assert parsed.operands == ("dir",)

    def test_unknown_flag(self):
        """Test that an unknown flag character aborts parsing."""
        with pytest.raises(InvalidOptionError) as exc_info:
            self.LS_SPEC.parse(["-az"])

        assert exc_info.value.option == "z"
        assert exc_info.value.render() == "invalid option -- 'z'"
        assert exc_info.value.status == 2

    def test_lone_dash_is_operand(self):
        """Test that '-' on its own is a positional operand."""
        parsed = self.LS_SPEC.parse(["-"])

        assert parsed.operands == ("-",)

    def test_too_many_operands(self):
        """Test the upper arity bound."""
        with pytest.raises(UsageError, match="too many arguments"):
            self.LS_SPEC.parse(["a", "b"])

    def test_missing_operand(self):
        """Test the lower arity bound."""
        spec = ArgumentSpec(min_operands=1, flags={"r": "recursive"})

        with pytest.raises(UsageError, match="missing operand"):
            spec.parse(["-r"])

    def test_exact_arity_message(self):
        """Test that a fixed arity reports the usage message both ways."""
        spec = ArgumentSpec(
            min_operands=2, max_operands=2, arity_message="usage: cp <source> <destination>"
        )

        with pytest.raises(UsageError, match="usage: cp"):
            spec.parse(["a"])
        with pytest.raises(UsageError, match="usage: cp"):
            spec.parse(["a", "b", "c"])
        assert spec.parse(["a", "b"]).operands == ("a", "b")

    def test_without_flags_every_token_is_operand(self):
        """Test that builtins without flags keep dash tokens as operands."""
        spec = ArgumentSpec()
        parsed = spec.parse(["-n", "hello"])

        assert parsed.operands == ("-n", "hello")
        assert parsed.flags == {}

    def test_order_preserved(self):
        """Test that operands keep input order."""
        spec = ArgumentSpec(flags={"r": "recursive"})
        parsed = spec.parse(["c", "-r", "a", "b"])

        assert parsed.operands == ("c", "a", "b")
