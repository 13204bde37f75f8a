from array import array
from typing import Iterator, List, Tuple

import numpy as np

class Grid:
    # Passage bits: a set bit means the side is OPEN
    NORTH = 0b0001
    SOUTH = 0b0010
    EAST  = 0b0100
    WEST  = 0b1000

    ALL_PASSAGES = NORTH | SOUTH | EAST | WEST

    # Popping from the end of a shuffled copy of this gives a random direction
    DIRECTIONS = (NORTH, SOUTH, EAST, WEST)

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    # Index by cell value
    NAMES = ("X", "N", "S", "NS", "E", "NE", "SE", "NSE", "W",
             "NW", "SW", "NSW", "EW", "NEW", "SEW", "NSEW")

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # 0 = no passages carved yet (unvisited)
        self.cells = array('B', [0] * (width * height))

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)]

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Opens the passage between (x1, y1) and its neighbor in 'dir_bit'.
        The neighbor gets the OPPOSITE bit so passages always come in pairs.
        Carving an existing passage changes nothing.
        """
        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]

        if not (0 <= x2 < self.width and 0 <= y2 < self.height):
            return # Cannot carve into void

        self.cells[y1 * self.width + x1] |= dir_bit
        self.cells[y2 * self.width + x2] |= self.OPPOSITE[dir_bit]

    def has_passage(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.width + x] & dir_bit) != 0

    def is_visited(self, x: int, y: int) -> bool:
        return self.cells[y * self.width + x] != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check passages.
        """
        if y > 0:
            yield (x, y - 1, self.NORTH)
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors reachable through a carved passage.
        """
        val = self.cells[y * self.width + x]

        if (val & self.NORTH) and y > 0:
            yield (x, y - 1)
        if (val & self.SOUTH) and y < self.height - 1:
            yield (x, y + 1)
        if (val & self.EAST) and x < self.width - 1:
            yield (x + 1, y)
        if (val & self.WEST) and x > 0:
            yield (x - 1, y)

    def rows(self) -> List[List[int]]:
        w = self.width
        return [list(self.cells[y * w:(y + 1) * w]) for y in range(self.height)]

    def as_array(self) -> np.ndarray:
        """Read-only (height, width) uint8 view for renderers."""
        view = np.frombuffer(self.cells, dtype=np.uint8).reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    def asciify(self) -> str:
        """
        Text rendering: '_' is a closed south side, '|' a closed east side.
        """
        rv = "_" * (self.width * 2 - 1) + "\n"
        for y in range(self.height):
            line = "|"
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                line += " " if val & self.SOUTH else "_"
                if val & self.EAST:
                    right = self.cells[y * self.width + x + 1]
                    line += " " if (val | right) & self.SOUTH else "_"
                else:
                    line += "|"
            rv += line + "\n"
        return rv


def new_grid(size: int) -> Grid:
    return Grid(size, size)

def opposite(direction: int) -> int:
    return Grid.OPPOSITE[direction]

def delta(direction: int) -> Tuple[int, int]:
    return Grid.DX[direction], Grid.DY[direction]

def carve(grid: Grid, x: int, y: int, direction: int):
    grid.carve_path(x, y, direction)
