"""8x8 Othello board with conversion to and from the host's integer grid."""

from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple

SIZE = 8

# External cell codes used by the host grid.
EMPTY_CODE = -1
WHITE_CODE = 0
BLACK_CODE = 1


class Cell(IntEnum):
    WHITE = 0
    BLACK = 1
    EMPTY = 2

    @property
    def opponent(self) -> "Cell":
        if self == Cell.WHITE:
            return Cell.BLACK
        if self == Cell.BLACK:
            return Cell.WHITE
        return Cell.EMPTY


_FROM_CODE = {WHITE_CODE: Cell.WHITE, BLACK_CODE: Cell.BLACK, EMPTY_CODE: Cell.EMPTY}
_TO_CODE = {Cell.WHITE: WHITE_CODE, Cell.BLACK: BLACK_CODE, Cell.EMPTY: EMPTY_CODE}
_SYMBOLS = {Cell.WHITE: "W", Cell.BLACK: "B", Cell.EMPTY: "."}


def side_from_flag(is_white: bool) -> Cell:
    return Cell.WHITE if is_white else Cell.BLACK


def flag_from_side(side: Cell) -> bool:
    return side == Cell.WHITE


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


class Board:
    def __init__(self, cells: Optional[List[List[Cell]]] = None):
        """Wrap an 8x8 cell matrix, or start from an empty board."""
        if cells is None:
            cells = [[Cell.EMPTY] * SIZE for _ in range(SIZE)]
        self.cells = cells

    @classmethod
    def initial(cls) -> "Board":
        """Standard start: two white and two black discs on the center diagonals."""
        board = cls()
        board[3, 3] = Cell.WHITE
        board[3, 4] = Cell.BLACK
        board[4, 3] = Cell.BLACK
        board[4, 4] = Cell.WHITE
        return board

    @classmethod
    def from_external(cls, grid: Sequence[Sequence[int]], strict: bool = False) -> "Board":
        """Build a board from the host grid (-1 empty, 0 white, 1 black).

        Codes other than the two occupied ones read as empty unless
        ``strict`` is set, in which case they raise ValueError.
        """
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError(f"Board must be {SIZE}x{SIZE}")
        cells = []
        for r, row in enumerate(grid):
            line = []
            for c, code in enumerate(row):
                cell = _FROM_CODE.get(code)
                if cell is None:
                    if strict:
                        raise ValueError(f"Invalid cell code {code!r} at ({r}, {c})")
                    cell = Cell.EMPTY
                line.append(cell)
            cells.append(line)
        return cls(cells)

    def to_external(self) -> List[List[int]]:
        return [[_TO_CODE[cell] for cell in row] for row in self.cells]

    def count_of(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.cells)

    def positions_of(self, cell: Cell) -> Iterator[Tuple[int, int]]:
        """Yield coordinates holding ``cell`` in row-major order."""
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value == cell:
                    yield r, c

    def empties(self) -> int:
        return self.count_of(Cell.EMPTY)

    def copy(self) -> "Board":
        return Board([row[:] for row in self.cells])

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        r, c = pos
        return self.cells[r][c]

    def __setitem__(self, pos: Tuple[int, int], value: Cell):
        r, c = pos
        self.cells[r][c] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        lines = ["  " + " ".join("abcdefgh"[:SIZE])]
        for r, row in enumerate(self.cells):
            lines.append(f"{r + 1} " + " ".join(_SYMBOLS[cell] for cell in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"Board(white={self.count_of(Cell.WHITE)}, "
                f"black={self.count_of(Cell.BLACK)}, empty={self.empties()})")
