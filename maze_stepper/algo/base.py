import logging
import random
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Tuple

from maze_stepper.core.grid import Grid

logger = logging.getLogger(__name__)

class MazeAlgorithm(ABC):
    """
    Common contract for steppable generators.

    A driver calls init(size), then step(time) once per tick until it
    returns True, reading self.grid and self.current in between.
    """
    key = ""
    name = ""
    link = ""
    # None -> every step() call runs one unit of work
    ms_per_step: Optional[float] = None

    def __init__(self, seed: int = None, ms_per_step: Optional[float] = None):
        self.seed = seed
        self.rng = random.Random(seed)
        if ms_per_step is not None:
            self.ms_per_step = ms_per_step
        self.grid: Optional[Grid] = None
        self.current: Any = None
        self.done = True
        self.step_count = 0
        self.next_tick = 0.0

    def init(self, width: int, height: int = None):
        """Allocates a fresh width x height grid (square when height is omitted)."""
        if height is None:
            height = width
        if width < 1 or height < 1:
            raise ValueError(f"Maze size must be positive, got {width}x{height}")
        self.grid = Grid(width, height)
        self.current = None
        self.done = False
        self.step_count = 0
        self.next_tick = 0.0
        self.reset_work(width, height)
        logger.debug("%s initialised with %dx%d grid", self.name, width, height)

    @abstractmethod
    def reset_work(self, width: int, height: int):
        """Rebuilds the algorithm-private working state for a fresh grid."""

    @abstractmethod
    def carve_next(self) -> Tuple[Any, bool]:
        """
        Performs one bounded unit of work.
        Returns (current marker or None, done).
        """

    def step(self, time: Optional[float] = None) -> bool:
        if self.done:
            return True
        if time is not None and self.ms_per_step is not None:
            if time < self.next_tick:
                return False
            self.next_tick = time + self.ms_per_step

        self.current, done = self.carve_next()
        if not done:
            self.step_count += 1
        return done

    def stop(self):
        self.done = True
        self.current = None
        self.release_work()

    @abstractmethod
    def release_work(self):
        """Drops transient working state after completion or stop()."""

    def finish(self):
        if not self.done:
            logger.debug("%s finished after %d steps", self.name, self.step_count)
        self.done = True
        self.release_work()

    def run(self) -> Iterator[str]:
        """
        Steps to completion, yielding a status string per step.
        Call init() first.
        """
        if self.grid is None:
            raise RuntimeError("init() must be called before run()")
        while not self.step():
            yield f"Step {self.step_count}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
