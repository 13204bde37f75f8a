import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from maze_stepper.core.grid import Grid
from maze_stepper.core.sets import DisjointSetRegistry
from maze_stepper.algo.base import MazeAlgorithm

logger = logging.getLogger(__name__)

@dataclass
class RowWorkItem:
    row: int
    size: int


class Eller(MazeAlgorithm):
    """
    Eller's algorithm, one row per step.

    Cells of the row being carved are grouped into sets of already
    connected cells. Horizontal passages only join different sets, and
    every set sends at least one passage down so no region is cut off.
    The bottom row joins all remaining sets.
    """
    key = "eller"
    name = "Eller’s Algorithm"
    link = "http://weblog.jamisbuck.org/2010/12/29/maze-generation-eller-s-algorithm"

    def __init__(self, seed: int = None, ms_per_step=None):
        super().__init__(seed=seed, ms_per_step=ms_per_step)
        self.sets = DisjointSetRegistry()
        self.work: List[RowWorkItem] = []
        # {set_id: [x, ...]} of the last processed row
        self.row_sets: Dict[int, List[int]] = {}

    def reset_work(self, width: int, height: int):
        self.sets.reset()
        self.row_sets = {}
        # Reversed so popping from the end goes top to bottom
        self.work = [RowWorkItem(y, width) for y in range(height - 1, -1, -1)]

    def release_work(self):
        self.work = []
        self.sets.clear()
        self.row_sets = {}

    def carve_next(self) -> Tuple[Optional[RowWorkItem], bool]:
        if self.done:
            return None, True
        if not self.work:
            self.finish()
            return None, True

        current = self.work.pop()
        self.carve_row(current.row, current.size)
        return current, False

    def carve_row(self, y: int, size: int):
        sets = self.sets
        last_row = y == self.grid.height - 1

        # Assign each remaining cell to its own set
        for x in range(size):
            if sets.set_for_cell(x) == DisjointSetRegistry.UNASSIGNED:
                sets.add(x, sets.next_id())

        # Randomly merge adjacent sets, all of them on the last row
        for x in range(size - 1):
            if sets.set_for_cell(x) == sets.set_for_cell(x + 1):
                continue
            if last_row or self.rng.random() < 0.5:
                self.grid.carve_path(x, y, Grid.EAST)
                sets.merge(x, x + 1)

        prev_sets = sets.clear()
        self.row_sets = prev_sets

        if last_row:
            return

        # At least one vertical connection per set
        for set_id, members in prev_sets.items():
            members = list(members)
            verticals = self.rng.randint(1, len(members))
            self.rng.shuffle(members)
            for x in members[:verticals]:
                sets.add(x, set_id)
                self.grid.carve_path(x, y, Grid.SOUTH)

        logger.debug("Row %d: %d sets, %d carried down", y, len(prev_sets), sets.cell_count)

    def run_to_completion(self):
        """Carves every remaining row without pausing."""
        while not self.step():
            pass

    def set_for_cell(self, x: int) -> int:
        """Set id of x in the row that will be carved next (0 if not yet grouped)."""
        return self.sets.set_for_cell(x)
