"""Built-in grids and transition cases."""

from typing import NamedTuple, Tuple

# 5x5 demo grid used when an engine is created without input.
# Encoded: 01000,10011,11001,01000,10001
DEFAULT_PATTERN: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0),
    (1, 0, 0, 1, 1),
    (1, 1, 0, 0, 1),
    (0, 1, 0, 0, 0),
    (1, 0, 0, 0, 1),
)


class TransitionCase(NamedTuple):
    """A start state and the state expected after one step, both in encoded form."""

    name: str
    start: str
    expected: str


SELF_TEST_CASES: Tuple[TransitionCase, ...] = (
    TransitionCase("example", "01000,10011,11001,01000,10001", "00000,10111,11111,01000,00000"),
    TransitionCase("reproduction", "00000,01110,00000,00000,00000", "00100,00100,00100,00000,00000"),
    TransitionCase("top edge", "01110,00000,00000,00000,00000", "00100,00100,00000,00000,00000"),
    TransitionCase("side edge", "00000,00001,00001,00001,00000", "00000,00000,00011,00000,00000"),
    TransitionCase("non-square", "00000,01110,00000", "00100,00100,00100"),
)
