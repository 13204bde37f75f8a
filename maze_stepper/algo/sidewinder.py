from dataclasses import dataclass
from typing import Optional, Tuple

from maze_stepper.core.grid import Grid
from maze_stepper.algo.base import MazeAlgorithm

@dataclass
class RunCursor:
    x: int
    y: int
    # First cell of the run being built in this row
    run_start: int


class Sidewinder(MazeAlgorithm):
    """
    Row by row, one cell per step: either extend the current run east,
    or close it by carving north from a random cell of the run.
    The top row is a single run with nothing above it.
    """
    key = "sidewinder"
    name = "Sidewinder"
    link = "http://weblog.jamisbuck.org/2011/2/3/maze-generation-sidewinder-algorithm"

    def __init__(self, seed: int = None, ms_per_step=None, harder: bool = False):
        super().__init__(seed=seed, ms_per_step=ms_per_step)
        # Runs get longer towards the east, which hides the bias a little
        self.harder = harder
        self.cursor: Optional[RunCursor] = None

    def reset_work(self, width: int, height: int):
        self.cursor = RunCursor(0, 0, 0)

    def release_work(self):
        self.cursor = None

    def east_probability(self, x: int) -> float:
        if self.harder:
            return 0.4 + (x / self.grid.width) * 0.4
        return 0.5

    def carve_next(self) -> Tuple[Optional[RunCursor], bool]:
        if self.done:
            return None, True
        c = self.cursor
        if c is None or c.y == self.grid.height:
            self.finish()
            return None, True

        marker = RunCursor(c.x, c.y, c.run_start)
        at_east_edge = c.x == self.grid.width - 1
        if not at_east_edge and (c.y == 0 or self.rng.random() < self.east_probability(c.x)):
            self.grid.carve_path(c.x, c.y, Grid.EAST)
        else:
            if c.y > 0:
                north = self.rng.randint(c.run_start, c.x)
                self.grid.carve_path(north, c.y, Grid.NORTH)
            c.run_start = c.x + 1

        c.x += 1
        if c.x == self.grid.width:
            c.x = 0
            c.y += 1
            c.run_start = 0
        return marker, False
