import logging
from typing import List, Set

from maze_graph.core.maze import Key, MazeGeneratable
from maze_graph.core.rng import Seed
from maze_graph.algo.base import Generator

logger = logging.getLogger(__name__)


class DepthFirstSearch(Generator):
    """
    Randomized depth first search (recursive backtracker) over any MazeGeneratable.
    Uses an explicit stack so large mazes don't hit the recursion limit.
    """

    def generate_from_seed(self, maze: MazeGeneratable, start: Key, goal: Key, seed: Seed) -> bool:
        maze.add_all_walls()

        self.seed = seed
        self.step_count = 0
        rng = self.rng_factory(seed)

        visited: Set[Key] = set()
        stack: List[Key] = [start]

        while stack:
            current = stack.pop()
            visited.add(current)

            unvisited = [n for n in maze.adjacent(current) if n not in visited]

            if not unvisited:
                # Dead end, the predecessor is still on the stack
                continue

            chosen = rng.choice(unvisited)
            maze.remove_wall(current, chosen)

            # Come back here once the branch through chosen is exhausted
            stack.append(current)
            stack.append(chosen)

            self.step_count += 1
            if self.step_count % 1000 == 0:
                logger.debug(f"Carving... Visited: {len(visited)} Stack: {len(stack)}")

        # Every node reachable from start has been visited with its walls carved
        reached = goal in visited
        logger.debug(f"DFS carved {self.step_count} passages, visited {len(visited)} nodes, goal reached: {reached}")
        return reached
