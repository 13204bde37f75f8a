from collections import deque
from typing import Dict, Set, Tuple

from maze_stepper.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def popcount_passages(val: int) -> int:
        c = 0
        if val & Grid.NORTH: c += 1
        if val & Grid.SOUTH: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.WEST: c += 1
        return c

    @staticmethod
    def count_passages(grid: Grid) -> int:
        """Number of carved passage pairs (each shared by two cells)."""
        total = 0
        for val in grid.cells:
            total += MazeAnalyzer.popcount_passages(val)
        return total // 2

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        """
        True if every open side has a matching open side on the neighbor,
        and no passage leads off the grid.
        """
        for y in range(grid.height):
            for x in range(grid.width):
                val = grid.cells[y * grid.width + x]
                for direction in Grid.DIRECTIONS:
                    if not (val & direction):
                        continue
                    nx, ny = x + Grid.DX[direction], y + Grid.DY[direction]
                    if not grid.in_bounds(nx, ny):
                        return False
                    if not grid.has_passage(nx, ny, Grid.OPPOSITE[direction]):
                        return False
        return True

    @staticmethod
    def reachable(grid: Grid, start: Tuple[int, int] = (0, 0)) -> Set[Tuple[int, int]]:
        """Flood fill over open passages."""
        grid.get_index(*start)
        seen = {start}
        queue = deque([start])
        while queue:
            cx, cy = queue.popleft()
            for n in grid.get_open_neighbors(cx, cy):
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return seen

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        return len(MazeAnalyzer.reachable(grid)) == grid.width * grid.height

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected with exactly cells-1 passages, i.e. a spanning tree."""
        cells = grid.width * grid.height
        return MazeAnalyzer.is_connected(grid) and MazeAnalyzer.count_passages(grid) == cells - 1

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0 # 1 exit
        corridors = 0 # 2 exits
        junctions = 0 # 3+ exits
        unvisited = 0

        for val in grid.cells:
            exits = MazeAnalyzer.popcount_passages(val)
            if exits == 0: unvisited += 1
            elif exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            else: junctions += 1

        total = grid.width * grid.height
        return {
            "passages": MazeAnalyzer.count_passages(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "unvisited": unvisited,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
