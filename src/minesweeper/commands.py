"""
Player command parsing.

Grammar, one command per line, tokens separated by whitespace::

    r X Y    reveal the cell in column X, row Y
    f X Y    toggle the flag on the cell in column X, row Y
    q        quit
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandType(Enum):
    """Actions a player can type."""

    REVEAL = "r"
    FLAG = "f"
    QUIT = "q"


class CommandError(ValueError):
    """Raised when a line of input is not a valid command."""


@dataclass(frozen=True)
class Command:
    """A parsed player command. Coordinates are None for quit."""

    action: CommandType
    x: Optional[int] = None
    y: Optional[int] = None


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Coordinates are only checked to be integers; range checking is left to
    the board, which ignores positions it does not have.

    Raises:
        CommandError: On an unknown action, a wrong number of tokens or
            coordinates that are not integers.
    """
    tokens = line.split()
    if not tokens:
        raise CommandError("Invalid command format. Use r/f x y")

    try:
        action = CommandType(tokens[0].lower())
    except ValueError:
        raise CommandError("Invalid command!") from None

    if action is CommandType.QUIT:
        if len(tokens) != 1:
            raise CommandError("Invalid command format. Use q to quit")
        return Command(action)

    if len(tokens) != 3:
        raise CommandError("Invalid command format. Use r/f x y")

    try:
        x, y = int(tokens[1]), int(tokens[2])
    except ValueError:
        raise CommandError("Invalid coordinates!") from None

    return Command(action, x, y)
