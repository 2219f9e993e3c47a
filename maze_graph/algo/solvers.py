import logging
from collections import deque
from typing import Dict, List

from maze_graph.core.maze import Key, Maze
from maze_graph.algo.base import Solver

logger = logging.getLogger(__name__)


class BreadthFirstSearch(Solver):
    def solve(self, maze: Maze, start: Key, goal: Key) -> List[Key]:
        self.visited_count = 0
        if start == goal:
            return [start]

        # Searching from the goal means the parent chain already runs start -> goal
        # node -> the node it was discovered from
        parents: Dict[Key, Key] = {goal: goal}
        queue = deque([goal])
        solved = False

        while queue and not solved:
            current = queue.popleft()

            for neighbour in maze.neighbours(current):
                if neighbour in parents:
                    continue

                parents[neighbour] = current
                self.visited_count += 1
                if self.visited_count % 1000 == 0:
                    logger.debug(f"Visited: {self.visited_count}")

                if neighbour == start:
                    solved = True
                    break

                queue.append(neighbour)

        if not solved:
            logger.debug(f"No path from {start} to {goal} ({self.visited_count} visited)")
            return []

        path = [start]
        node = start
        while node != goal:
            node = parents[node]
            path.append(node)

        logger.debug(f"Path length {len(path)} ({self.visited_count} visited)")
        return path
