from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from maze_graph.core.maze import Key, Maze, MazeGeneratable
from maze_graph.core.rng import Seed, make_rng, random_seed


class Generator(ABC):
    def __init__(self, rng_factory: Callable = make_rng):
        self.rng_factory = rng_factory
        self.seed: Optional[Seed] = None
        self.step_count = 0

    @abstractmethod
    def generate_from_seed(self, maze: MazeGeneratable, start: Key, goal: Key, seed: Seed) -> bool:
        """
        Carves a solvable maze in place.
        Returns False only if goal cannot be reached from start even with every wall removed.
        """
        pass

    def generate(self, maze: MazeGeneratable, start: Key, goal: Key) -> bool:
        """Same as generate_from_seed with a fresh random seed, kept on self.seed."""
        self.seed = random_seed()
        return self.generate_from_seed(maze, start, goal, self.seed)


class Solver(ABC):
    def __init__(self):
        self.visited_count = 0

    @abstractmethod
    def solve(self, maze: Maze, start: Key, goal: Key) -> List[Key]:
        """Keys to walk from start to goal inclusive, empty if there is no path."""
        pass
