"""The gardener and the tools it can carry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Optional

if TYPE_CHECKING:
    from gardensim.soil import Soil

DIRECTIONS: dict[str, tuple[int, int]] = {
    "e": (0, -1),
    "d": (0, 1),
    "c": (-1, 0),
    "b": (1, 0),
}


def _label(index: int) -> str:
    return chr(ord("A") + index)


class Tool(ABC):
    """A tool the gardener can hold and use on the soil."""

    symbol: ClassVar[str]
    name: ClassVar[str]

    def __init__(self, capacity: int = 0, units: int = 0, serial: int = 0) -> None:
        self.capacity = capacity
        self.units = units
        self.serial = serial

    @abstractmethod
    def use(self, soil: Soil) -> None:
        """Apply the tool to a cell of soil."""

    @abstractmethod
    def reduce_capacity(self, soil: Soil) -> None:
        """Spend part of the tool's capacity on a cell of soil."""


class Gardener:
    """The gardener's position in the garden and the tool in hand."""

    def __init__(self) -> None:
        self.row = -1
        self.col = -1
        self.inside = False
        self.tool: Optional[Tool] = None

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def enter(self, row: int, col: int) -> str:
        """Enter the garden at the given cell."""
        self.row, self.col = row, col
        self.inside = True
        return f"Jardineiro entrou em ({_label(row)},{_label(col)})"

    def leave(self) -> str:
        """Leave the garden."""
        self.inside = False
        return "Jardineiro saiu do jardim."

    def move(self, direction: str) -> tuple[int, int]:
        """Step one cell in direction e, d, c or b; return the new position."""
        try:
            d_row, d_col = DIRECTIONS[direction]
        except KeyError:
            raise ValueError("Direção inválida.") from None
        if not self.inside:
            raise RuntimeError("Erro: o jardineiro está fora do jardim.")
        self.set_position(self.row + d_row, self.col + d_col)
        return self.position

    def set_position(self, row: int, col: int) -> None:
        self.row, self.col = row, col

    def has_tool(self) -> bool:
        return self.tool is not None