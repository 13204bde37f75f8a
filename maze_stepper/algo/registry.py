from typing import Dict, List, Type

from maze_stepper.algo.base import MazeAlgorithm
from maze_stepper.algo.recursive_descent import RecursiveDescent
from maze_stepper.algo.eller import Eller
from maze_stepper.algo.binary_tree import BinaryTree
from maze_stepper.algo.sidewinder import Sidewinder
from maze_stepper.algo.kruskal import Kruskal

# Order is the order a driver should list them in
ALGORITHMS: Dict[str, Type[MazeAlgorithm]] = {
    RecursiveDescent.key: RecursiveDescent,
    Eller.key: Eller,
    BinaryTree.key: BinaryTree,
    Sidewinder.key: Sidewinder,
    Kruskal.key: Kruskal,
}

def available() -> List[str]:
    return list(ALGORITHMS)

def create(key: str, seed: int = None, **kwargs) -> MazeAlgorithm:
    try:
        cls = ALGORITHMS[key]
    except KeyError:
        raise ValueError(f"Unknown algorithm '{key}', choose from: {', '.join(ALGORITHMS)}") from None
    return cls(seed=seed, **kwargs)
