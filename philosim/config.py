"""Command-line argument validation for the dining philosophers table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence

from philosim.numbers import atoi, atoi_long

__all__ = ["ErrorKind", "InputError", "Settings", "check_args", "validate", "parse_settings"]

_INT_MAX = 2147483647
_MAX_PHILOSOPHERS = 200
_MIN_TIME = 60
_MAX_DIGITS = 10
_WHITESPACE = " \t\n\v\f\r"


class ErrorKind(enum.Enum):
    """The kinds of input error, each with its user-facing message."""

    ARGUMENT_COUNT = "Error: Invalid number of arguments. Expected 4 or 5 arguments."
    INVALID_ARGUMENT = "Error: Invalid argument. All arguments must be valid integers."
    PHILOSOPHER_COUNT = "Error: Number of philosophers must be between 1 and 200."
    TIME_VALUE = "Error: Time values must be greater than or equal to 60."
    ALLOCATION = "Error: Memory allocation failed."


class InputError(ValueError):
    """Raised when the command-line arguments are rejected."""

    exit_status = 255

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; ``number_of_meals`` None means unlimited."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    number_of_meals: Optional[int] = None


def _too_long(arg: str) -> bool:
    rest = arg.lstrip(_WHITESPACE)
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    return len(rest) > _MAX_DIGITS


def check_args(argv: Sequence[str]) -> None:
    """Check that there are 4 or 5 arguments, each a short run of digits."""
    if len(argv) not in (4, 5):
        raise InputError(ErrorKind.ARGUMENT_COUNT)
    for arg in argv:
        if _too_long(arg) or not all("0" <= ch <= "9" for ch in arg):
            raise InputError(ErrorKind.INVALID_ARGUMENT)


def _check_time(arg: str) -> None:
    value = atoi_long(arg)
    if value < _MIN_TIME or value > _INT_MAX:
        raise InputError(ErrorKind.TIME_VALUE)


def validate(argv: Sequence[str]) -> None:
    """Check every argument's form and range, raising InputError on the first fault."""
    check_args(argv)
    count = atoi_long(argv[0])
    if count <= 0 or count > _MAX_PHILOSOPHERS:
        raise InputError(ErrorKind.PHILOSOPHER_COUNT)
    # Time to die, then time to sleep, then time to eat.
    for arg in (argv[1], argv[3], argv[2]):
        _check_time(arg)
    if len(argv) == 5 and atoi_long(argv[4]) == 0:
        raise InputError(ErrorKind.INVALID_ARGUMENT)


def parse_settings(argv: Sequence[str]) -> Settings:
    """Validate ``argv`` (arguments without the program name) and build Settings."""
    validate(argv)
    meals = atoi(argv[4]) if len(argv) == 5 else None
    return Settings(
        number_of_philosophers=atoi(argv[0]),
        time_to_die=atoi(argv[1]),
        time_to_eat=atoi(argv[2]),
        time_to_sleep=atoi(argv[3]),
        number_of_meals=meals,
    )