"""
Argument classification shared by every builtin.
"""

from dataclasses import dataclass, field
from typing import Optional

from zero_shell.exceptions import InvalidOptionError, UsageError


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Declarative argument contract of a builtin.

    Attributes:
        min_operands: Minimum number of positional operands
        max_operands: Maximum number of positional operands, None for unbounded
        flags: Mapping from flag character to the flag's name
        arity_message: Message reported when the operand count is out of range
    """

    min_operands: int = 0
    max_operands: Optional[int] = None
    flags: dict[str, str] = field(default_factory=dict)
    arity_message: str = "missing operand"

    def parse(self, args: tuple[str, ...] | list[str]) -> "ParsedArguments":
        """
        Classify argument tokens into flags and positional operands.

        A token starting with '-' (and longer than '-' alone) is a flag cluster
        when the builtin recognizes any flags; every character must be known.
        Builtins without flags treat every token as an operand.

        Args:
            args: Argument tokens in input order

        Returns:
            ParsedArguments with every known flag set to True or False

        Raises:
            InvalidOptionError: If a flag character is not recognized
            UsageError: If the operand count violates the contract
        """
        enabled: dict[str, bool] = {name: False for name in self.flags.values()}
        operands: list[str] = []
        for token in args:
            if self.flags and token.startswith("-") and len(token) > 1:
                for char in token[1:]:
                    name = self.flags.get(char)
                    if name is None:
                        raise InvalidOptionError(char)
                    enabled[name] = True
            else:
                operands.append(token)

        if len(operands) < self.min_operands:
            raise UsageError(self.arity_message)
        if self.max_operands is not None and len(operands) > self.max_operands:
            message = (
                self.arity_message
                if self.max_operands == self.min_operands
                else "too many arguments"
            )
            raise UsageError(message)
        return ParsedArguments(flags=enabled, operands=tuple(operands))


@dataclass(frozen=True)
class ParsedArguments:
    """Flags and positional operands of a single invocation."""

    flags: dict[str, bool]
    operands: tuple[str, ...]

    def flag(self, name: str) -> bool:
        return self.flags.get(name, False)
