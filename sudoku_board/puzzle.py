"""Puzzle state parsing.

Puzzles travel as two 81 character strings: the original clues and the
user's entries. Anything that is not a digit (``'.'`` is the conventional
placeholder) counts as an empty cell, and short strings are padded with empty
cells; parsing never raises.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from sudoku_board.types import CELL_COUNT, CellIndex, Digit

EMPTY_PLACEHOLDER = "."


def parse_digits(text: str) -> PVector[Digit]:
    """Map each of the 81 positions of ``text`` to a digit in ``0..9``."""
    digits = []
    for i in range(CELL_COUNT):
        char = text[i] if i < len(text) else "0"
        digits.append(int(char) if char in "0123456789" else 0)
    return pvector(digits)


@dataclass(frozen=True)
class PuzzleState:
    """Immutable snapshot of a board.

    Attributes:
        given: Clue digits of the original puzzle (0 = empty).
        entered: Digits placed by the user (0 = no entry).
    """

    given: PVector[Digit]
    entered: PVector[Digit]

    def has_digit(self, index: CellIndex) -> bool:
        """Return True if the cell holds either a clue or an entered digit."""
        return self.given[index] != 0 or self.entered[index] != 0

    def clue_count(self) -> int:
        return sum(1 for digit in self.given if digit != 0)


def parse_puzzle(original: str, entered: str) -> PuzzleState:
    return PuzzleState(given=parse_digits(original), entered=parse_digits(entered))
