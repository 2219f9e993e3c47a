from abc import ABC, abstractmethod
from typing import Hashable, List, Optional, Tuple

# Any hashable, comparable value identifies a node. SquareGrid uses (row, col).
Key = Hashable


class Maze(ABC):
    """
    A maze whose nodes are connected by edges, each of which may or may not be a wall.
    Adjacency is fixed by the topology, only the wall state changes.
    """

    __slots__ = ()

    @abstractmethod
    def nodes(self) -> List[Key]:
        """Keys of every node in the maze."""
        pass

    @abstractmethod
    def adjacent(self, key: Key) -> List[Key]:
        """
        Topologically adjacent nodes, whether or not a wall separates them.
        Must return an empty list for unknown keys.
        """
        pass

    @abstractmethod
    def has_wall(self, k1: Key, k2: Key) -> Optional[bool]:
        """
        Whether a wall separates neighbours k1 and k2.
        Returns None if they are not neighbours, so never test the result for truthiness.
        """
        pass

    def neighbours(self, key: Key) -> List[Key]:
        """Adjacent nodes that can actually be walked to."""
        return [k for k in self.adjacent(key) if self.has_wall(key, k) is False]

    def node_count(self) -> int:
        return len(self.nodes())

    def solve(self, solver, start: Key, goal: Key) -> List[Key]:
        return solver.solve(self, start, goal)


class MazeMut(Maze):
    __slots__ = ()

    @abstractmethod
    def add_wall(self, k1: Key, k2: Key) -> Optional[bool]:
        """Block passage. Returns the previous wall state, or None if not neighbours."""
        pass

    @abstractmethod
    def remove_wall(self, k1: Key, k2: Key) -> Optional[bool]:
        """Open passage. Returns the previous wall state, or None if not neighbours."""
        pass


class MazeGeneratable(MazeMut):
    __slots__ = ()

    @abstractmethod
    def add_all_walls(self):
        """Separate every pair of adjacent nodes with a wall."""
        pass

    @abstractmethod
    def possible_walls(self) -> List[Tuple[Key, Key]]:
        """Every adjacent pair, listed once regardless of order."""
        pass
