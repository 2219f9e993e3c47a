from typing import Any, Dict

from maze_graph.core.maze import Maze


class MazeStats:
    @staticmethod
    def calculate_stats(maze: Maze) -> Dict[str, Any]:
        """
        Classifies every node by its number of open passages.
        Works on any topology since it only looks at accessible neighbours.
        """
        isolated = 0      # 0 exits
        dead_ends = 0     # 1 exit
        corridors = 0     # 2 exits
        junctions = 0     # 3+ exits

        for key in maze.nodes():
            exits = len(maze.neighbours(key))
            if exits == 0: isolated += 1
            elif exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            else: junctions += 1

        total = maze.node_count()
        return {
            "isolated": isolated,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
