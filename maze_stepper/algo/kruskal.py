import logging
from typing import List, Optional, Tuple

from maze_stepper.core.grid import Grid
from maze_stepper.core.sets import DisjointSetRegistry
from maze_stepper.algo.base import MazeAlgorithm

logger = logging.getLogger(__name__)

class Kruskal(MazeAlgorithm):
    """
    Randomised Kruskal: walls are tried in random order, one per step,
    and knocked down only when they separate two different sets.
    """
    key = "kruskal"
    name = "Kruskal"
    link = "http://weblog.jamisbuck.org/2011/1/3/maze-generation-kruskal-s-algorithm"

    def __init__(self, seed: int = None, ms_per_step=None):
        super().__init__(seed=seed, ms_per_step=ms_per_step)
        self.sets = DisjointSetRegistry()
        # (x, y, direction) of every interior wall, tried from the end
        self.edges: List[Tuple[int, int, int]] = []

    def reset_work(self, width: int, height: int):
        self.sets.reset()
        for idx in range(width * height):
            self.sets.add(idx, self.sets.next_id())

        self.edges = []
        for y in range(height):
            for x in range(width):
                if y > 0:
                    self.edges.append((x, y, Grid.NORTH))
                if x > 0:
                    self.edges.append((x, y, Grid.WEST))
        self.rng.shuffle(self.edges)

    def release_work(self):
        self.edges = []
        self.sets.clear()

    def carve_next(self) -> Tuple[Optional[Tuple[int, int, int]], bool]:
        if self.done:
            return None, True
        # A single set left means every cell is connected
        if not self.edges or len(self.sets) <= 1:
            logger.debug("%d walls left untried", len(self.edges))
            self.finish()
            return None, True

        edge = self.edges.pop()
        x, y, direction = edge
        nx, ny = x + Grid.DX[direction], y + Grid.DY[direction]
        here = self.grid.get_index(x, y)
        there = self.grid.get_index(nx, ny)

        if self.sets.set_for_cell(here) != self.sets.set_for_cell(there):
            self.grid.carve_path(x, y, direction)
            # Move the smaller set into the bigger one
            here_size = self.sets.set_size(self.sets.set_for_cell(here))
            there_size = self.sets.set_size(self.sets.set_for_cell(there))
            if here_size >= there_size:
                self.sets.merge(here, there)
            else:
                self.sets.merge(there, here)
        return edge, False

    def set_for_cell(self, x: int, y: int) -> int:
        """Current set id of (x, y), for colouring regions while running."""
        return self.sets.set_for_cell(self.grid.get_index(x, y))
