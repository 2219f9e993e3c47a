from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np

from maze_graph.core.maze import MazeGeneratable

Cell = Tuple[int, int]


class SquareGrid(MazeGeneratable):
    """
    Rectangular grid of square cells keyed by (row, col).

    right_walls[row, col] is the wall between (row, col) and (row, col + 1),
    down_walls[row, col] the one between (row, col) and (row + 1, col).
    The last column of right_walls and last row of down_walls are never used.
    """

    __slots__ = ('rows', 'cols', 'right_walls', 'down_walls', 'fully_walled')

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # 1 byte per wall
        self.right_walls = np.ones((rows, cols), dtype=bool)
        self.down_walls = np.ones((rows, cols), dtype=bool)
        self.fully_walled = True

    def __repr__(self) -> str:
        return f"SquareGrid(rows={self.rows}, cols={self.cols})"

    def __str__(self) -> str:
        from maze_graph.viz.text_renderer import TextRenderer
        return TextRenderer(self).render()

    def contains(self, key) -> bool:
        try:
            row, col = key
        except (TypeError, ValueError):
            return False
        if not (isinstance(row, Integral) and isinstance(col, Integral)):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_index(self, key: Cell) -> int:
        if self.contains(key):
            return key[0] * self.cols + key[1]
        raise IndexError(f"Cell {key} out of bounds")

    def _locate_wall(self, k1, k2) -> Optional[Tuple[np.ndarray, int, int]]:
        """
        Returns (wall array, row, col) for the wall between k1 and k2,
        or None if they are not orthogonal neighbours inside the grid.
        """
        if not (self.contains(k1) and self.contains(k2)):
            return None
        (r1, c1), (r2, c2) = k1, k2

        if r1 == r2:
            if c1 + 1 == c2:
                return self.right_walls, r1, c1
            if c2 + 1 == c1:
                return self.right_walls, r1, c2
        elif c1 == c2:
            if r1 + 1 == r2:
                return self.down_walls, r1, c1
            if r2 + 1 == r1:
                return self.down_walls, r2, c1
        return None

    def _set_wall(self, k1, k2, value: bool) -> Optional[bool]:
        loc = self._locate_wall(k1, k2)
        if loc is None:
            return None
        walls, row, col = loc
        previous = bool(walls[row, col])
        walls[row, col] = value
        if not value:
            self.fully_walled = False
        return previous

    def nodes(self) -> List[Cell]:
        return [(row, col) for row in range(self.rows) for col in range(self.cols)]

    def adjacent(self, key) -> List[Cell]:
        if not self.contains(key):
            return []
        row, col = key
        out = []
        if row > 0:
            out.append((row - 1, col))
        if row < self.rows - 1:
            out.append((row + 1, col))
        if col > 0:
            out.append((row, col - 1))
        if col < self.cols - 1:
            out.append((row, col + 1))
        return out

    def has_wall(self, k1, k2) -> Optional[bool]:
        loc = self._locate_wall(k1, k2)
        if loc is None:
            return None
        walls, row, col = loc
        return bool(walls[row, col])

    def node_count(self) -> int:
        return self.rows * self.cols

    def add_wall(self, k1, k2) -> Optional[bool]:
        return self._set_wall(k1, k2, True)

    def remove_wall(self, k1, k2) -> Optional[bool]:
        return self._set_wall(k1, k2, False)

    def add_all_walls(self):
        if self.fully_walled:
            return
        self.right_walls.fill(True)
        self.down_walls.fill(True)
        self.fully_walled = True

    def possible_walls(self) -> List[Tuple[Cell, Cell]]:
        out = []
        for row in range(self.rows):
            for col in range(self.cols):
                if row + 1 < self.rows:
                    out.append(((row, col), (row + 1, col)))
                if col + 1 < self.cols:
                    out.append(((row, col), (row, col + 1)))
        return out
