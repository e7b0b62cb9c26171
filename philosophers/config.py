"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from typing import Iterable

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the command-line arguments cannot describe a simulation."""

    def __init__(self, message: str = "Invalid Input") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Config:
    """Settings of one simulation; times are in milliseconds."""

    n_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way: whitespace, one sign, digits.

    Anything after the digits is ignored; text without digits reads as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    return sign * int(digits) if digits else 0


def parse_args(args: Iterable[str]) -> Config:
    """Build a Config from the arguments that follow the program name.

    Four or five arguments are expected: number of philosophers, time to
    die, time to eat, time to sleep and optionally the meals each must eat.
    Every value must be positive.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise InputError()
    values = [parse_int(arg) for arg in args]
    if any(value <= 0 for value in values):
        raise InputError()
    n_philo, time_to_die, time_to_eat, time_to_sleep = values[:4]
    meals_required = values[4] if len(values) == 5 else None
    return Config(n_philo, time_to_die, time_to_eat, time_to_sleep, meals_required)