from typing import Iterable, List

from maze_graph.core.grid import SquareGrid


class TextRenderer:
    """
    Draws a SquareGrid as ASCII art. A 4x4 maze with a solution path:

    +---+---+---+---+
    | * |   |   |   |
    +   +---+---+---+
    | *     |   |   |
    +   +---+---+---+
    | * |   |   |   |
    +   +---+---+---+
    | *   *   *   * |
    +---+---+---+---+
    """

    MARKER = "*"

    def __init__(self, grid: SquareGrid):
        self.grid = grid

    def get_lines(self) -> List[str]:
        grid = self.grid
        lines = ["+---" * grid.cols + "+"]

        for row in range(grid.rows):
            main_line = "|"
            bottom_border = "+"
            for col in range(grid.cols):
                main_line += "   |" if grid.right_walls[row, col] else "    "
                bottom_border += "---+" if grid.down_walls[row, col] else "   +"
            lines.append(main_line)
            lines.append(bottom_border)

        return lines

    def render(self, keys: Iterable = ()) -> str:
        """Each key inside the grid gets a marker, anything else is ignored."""
        lines = self.get_lines()
        for key in keys:
            if not self.grid.contains(key):
                continue
            row, col = key
            line = lines[2 * row + 1]
            pos = 4 * col + 2
            lines[2 * row + 1] = line[:pos] + self.MARKER + line[pos + 1:]

        return "".join(line + "\n" for line in lines)
