"""The garden: a rectangular grid of soil cells and the gardener working in it."""

from __future__ import annotations

from typing import Iterator, Optional

from gardensim.gardener import Gardener
from gardensim.plants import Plant, create_plant
from gardensim.soil import Soil

_TABLE_TITLE = (
    "--------------------------- Lista de plantas no jardim --------------------------- \n"
)
_TABLE_HEADER = (
    "\t\t| \t TIPO \t| \t POSIÇÃO \t| \tAGUA \t| \t  NUTRIENTES \t| \n"
)
_TABLE_FOOTER = (
    "---------------------------------------------------------------------------------- \n"
)
_NO_PLANTS = (
    "Não existem plantas no jardim!\n"
    "Experimente plantar primeiro utilizando o comando - > planta <linha> <coluna> <tipo>\n"
    "\n"
)


def _upper(index: int) -> str:
    return chr(ord("A") + index)


def _lower(index: int) -> str:
    return chr(ord("a") + index)


def _plant_row(row: int, col: int, plant: Plant) -> str:
    return (
        f"\t\t| \t{plant.name}\t| \t ({_lower(row)}, {_lower(col)})\t\t| "
        f"\t {plant.water}\t\t| \t\t {plant.nutrients}\t\t\t|\n"
    )


class Garden:
    """A grid of soil cells, indexed from zero, with one gardener."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("Um jardim precisa de pelo menos uma linha e uma coluna.")
        self.rows = rows
        self.cols = cols
        self.gardener = Gardener()
        self._grid = [[Soil() for _ in range(cols)] for _ in range(rows)]

    def __iter__(self) -> Iterator[tuple[int, int, Soil]]:
        """Yield (row, col, soil) for every cell, row by row."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def is_valid(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the garden."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid(row, col):
            raise IndexError(f"Posição inválida ({row}, {col}).")

    def soil(self, row: int, col: int) -> Soil:
        """The soil cell at (row, col)."""
        self._check(row, col)
        return self._grid[row][col]

    def render(self) -> str:
        """The garden as a lettered map, one symbol per cell."""
        header = "".join(f"{_upper(c)} " for c in range(self.cols))
        lines = [f"\n   {header}\n"]
        for row, cells in enumerate(self._grid):
            body = "".join(f"{cell.render()} " for cell in cells)
            lines.append(f"{_upper(row)}  {body}\n")
        lines.append("\n")
        return "".join(lines)

    def advance(self, steps: int = 1) -> list[str]:
        """Let every living plant act for the given number of instants.

        Returns the messages produced, such as plants dying.
        """
        messages: list[str] = []
        for _ in range(steps):
            for _, _, cell in self:
                plant = cell.plant
                if plant is not None and plant.alive:
                    message = plant.act(cell)
                    if message:
                        messages.append(message)
        return messages

    def plant(self, row: int, col: int, kind: str) -> str:
        """Plant a new plant of the given kind at (row, col)."""
        cell = self.soil(row, col)
        if cell.has_plant():
            raise ValueError("Já existe uma planta nessa posição.")
        new_plant = create_plant(kind)
        cell.place_plant(new_plant)
        return f"Planta {new_plant.name} plantada em ({_upper(row)}, {_upper(col)})."

    def harvest(self, row: int, col: int) -> Optional[str]:
        """Remove the plant at (row, col); return a message, or None if empty."""
        cell = self.soil(row, col)
        if cell.plant is None:
            return None
        name = cell.plant.name
        cell.remove_plant()
        return f"A planta {name} foi colhida da posição ({_upper(row)}, {_upper(col)})."

    def _table(self, entries: list[tuple[int, int, Plant]]) -> str:
        text = _TABLE_TITLE + _TABLE_HEADER
        text += "".join(_plant_row(row, col, plant) for row, col, plant in entries)
        text += _TABLE_FOOTER
        if not entries:
            text += _NO_PLANTS
        return text

    def list_plants(self) -> str:
        """A table of every plant in the garden."""
        entries = [
            (row, col, cell.plant) for row, col, cell in self if cell.plant is not None
        ]
        return self._table(entries)

    def list_plant(self, row: int, col: int) -> str:
        """A table describing the plant at (row, col), if any."""
        plant = self.soil(row, col).plant
        return self._table([] if plant is None else [(row, col, plant)])