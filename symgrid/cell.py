"""A single square of the puzzle grid."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Cell:
    """State of one grid square: fill, owning block and an optional letter mark.

    A cell is marked either symmetric ('S') or asymmetric ('A'), never both.
    Turning one mark on clears the other.
    """

    filled: bool = False
    block_id: int = -1
    value: int = 0
    has_number: bool = False
    _symmetry: bool = field(default=False, init=False, repr=False)
    _asymmetry: bool = field(default=False, init=False, repr=False)

    @property
    def symmetry(self) -> bool:
        """True when the cell marks its block as one that must be symmetric."""
        return self._symmetry

    @symmetry.setter
    def symmetry(self, flag: bool) -> None:
        self._symmetry = flag
        if flag:
            self._asymmetry = False

    @property
    def asymmetry(self) -> bool:
        """True when the cell marks its block as one that must be asymmetric."""
        return self._asymmetry

    @asymmetry.setter
    def asymmetry(self, flag: bool) -> None:
        self._asymmetry = flag
        if flag:
            self._symmetry = False

    def reset(self) -> None:
        """Return the cell to its empty, unassigned, unmarked state."""
        self.filled = False
        self.block_id = -1
        self.value = 0
        self.has_number = False
        self._symmetry = False
        self._asymmetry = False