from typing import List, Optional, Tuple

from maze_stepper.core.grid import Grid
from maze_stepper.algo.base import MazeAlgorithm

# Bias -> (vertical, horizontal) directions a cell may carve
BIASES = {
    "NorthEast": (Grid.NORTH, Grid.EAST),
    "SouthEast": (Grid.SOUTH, Grid.EAST),
    "SouthWest": (Grid.SOUTH, Grid.WEST),
    "NorthWest": (Grid.NORTH, Grid.WEST),
}

class BinaryTree(MazeAlgorithm):
    """
    Every cell carves either its vertical or its horizontal bias
    direction, one cell per step. Cells are visited in random order
    unless ordered=True, in which case they go row by row.
    """
    key = "binarytree"
    name = "Binary Tree"
    link = "http://weblog.jamisbuck.org/2011/2/1/maze-generation-binary-tree-algorithm"

    def __init__(self, seed: int = None, ms_per_step=None, bias: str = "NorthWest", ordered: bool = False):
        super().__init__(seed=seed, ms_per_step=ms_per_step)
        if bias not in BIASES:
            raise ValueError(f"Unknown bias '{bias}', choose from: {', '.join(BIASES)}")
        self.bias = bias
        self.ordered = ordered
        self.remaining: List[Tuple[int, int]] = []

    @property
    def variant(self) -> str:
        return f"{'ordered' if self.ordered else 'random'}:{self.bias}"

    def reset_work(self, width: int, height: int):
        self.remaining = [(x, y) for y in range(height) for x in range(width)]
        if self.ordered:
            # Popped from the end, so reverse to start at the top-left
            self.remaining.reverse()
        else:
            self.rng.shuffle(self.remaining)

    def release_work(self):
        self.remaining = []

    def choose_direction(self, x: int, y: int) -> Optional[int]:
        vertical, horizontal = BIASES[self.bias]
        can_vertical = self.grid.in_bounds(x, y + Grid.DY[vertical])
        can_horizontal = self.grid.in_bounds(x + Grid.DX[horizontal], y)
        if can_vertical and can_horizontal:
            return vertical if self.rng.random() < 0.5 else horizontal
        if can_vertical:
            return vertical
        if can_horizontal:
            return horizontal
        # The corner the bias points at
        return None

    def carve_next(self) -> Tuple[Optional[Tuple[int, int]], bool]:
        if self.done:
            return None, True
        if not self.remaining:
            self.finish()
            return None, True

        x, y = self.remaining.pop()
        direction = self.choose_direction(x, y)
        if direction is not None:
            self.grid.carve_path(x, y, direction)
        return (x, y), False
