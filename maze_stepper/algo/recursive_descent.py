from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from maze_stepper.core.grid import Grid
from maze_stepper.algo.base import MazeAlgorithm

@dataclass
class WorkItem:
    x: int
    y: int
    # Shuffled once on creation, consumed from the end
    directions: List[int] = field(default_factory=list)


class RecursiveDescent(MazeAlgorithm):
    """
    Depth-first backtracking with an explicit stack so that generation
    can pause after every direction tried.
    """
    key = "recdesc"
    name = "Recursive Descent"
    link = "http://weblog.jamisbuck.org/2010/12/27/maze-generation-recursive-backtracking"
    ms_per_step = 200

    def __init__(self, seed: int = None, ms_per_step=None, random_start: bool = False):
        super().__init__(seed=seed, ms_per_step=ms_per_step)
        # Start from a random cell instead of the top-left corner
        self.random_start = random_start
        self.work: List[WorkItem] = []

    def reset_work(self, width: int, height: int):
        self.work = []
        # A lone cell has nothing to explore
        if width * height == 1:
            return
        if self.random_start:
            self.add_work(self.rng.randrange(width), self.rng.randrange(height))
        else:
            self.add_work(0, 0)

    def release_work(self):
        self.work = []

    def add_work(self, x: int, y: int):
        directions = list(Grid.DIRECTIONS)
        self.rng.shuffle(directions)
        self.work.append(WorkItem(x, y, directions))

    def carve_next(self) -> Tuple[Optional[WorkItem], bool]:
        if self.done:
            return None, True
        if not self.work:
            self.finish()
            return None, True

        current = self.work[-1]
        if not current.directions:
            # Fully explored, backtrack
            self.work.pop()
            return current, False

        direction = current.directions.pop()
        nx = current.x + Grid.DX[direction]
        ny = current.y + Grid.DY[direction]
        if self.grid.in_bounds(nx, ny) and not self.grid.is_visited(nx, ny):
            self.grid.carve_path(current.x, current.y, direction)
            self.add_work(nx, ny)

        return current, False

    @property
    def frontier(self) -> List[Tuple[int, int]]:
        """Cells still on the stack, bottom first. The last one is being explored."""
        return [(item.x, item.y) for item in self.work]
