"""Cell group hint (e.g. an almost locked set) outlined as one region."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class HintGroup:
    """Arbitrary, possibly disconnected set of cells.

    Attributes:
        cells: ``(row, column)`` pairs; the first one anchors the name badge.
        color: Abstract hint color name.
        name: Optional badge text.
    """

    cells: Tuple[Tuple[int, int], ...]
    color: str
    name: Optional[str] = None
