import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_graph.core.grid import SquareGrid
from maze_graph.algo.dfs import DepthFirstSearch
from maze_graph.algo.solvers import BreadthFirstSearch
from maze_graph.viz.text_renderer import TextRenderer

class TestTextRenderer(unittest.TestCase):
    def test_fully_walled(self):
        grid = SquareGrid(2, 2)
        expected = (
            "+---+---+\n"
            "|   |   |\n"
            "+---+---+\n"
            "|   |   |\n"
            "+---+---+\n"
        )
        self.assertEqual(TextRenderer(grid).render(), expected)
        self.assertEqual(str(grid), expected)

    def test_passages_and_markers(self):
        grid = SquareGrid(2, 2)
        grid.remove_wall((0, 0), (0, 1))
        grid.remove_wall((0, 0), (1, 0))
        expected = (
            "+---+---+\n"
            "| *   * |\n"
            "+   +---+\n"
            "|   |   |\n"
            "+---+---+\n"
        )
        # Out of range keys are dropped
        out = TextRenderer(grid).render([(0, 0), (0, 1), (5, 5), (-1, 0)])
        self.assertEqual(out, expected)

    def test_solution_markers(self):
        grid = SquareGrid(6, 6)
        DepthFirstSearch().generate_from_seed(grid, (0, 0), (5, 5), 8)
        path = BreadthFirstSearch().solve(grid, (0, 0), (5, 5))
        out = TextRenderer(grid).render(path)

        lines = out.splitlines()
        self.assertEqual(len(lines), 2 * 6 + 1)
        self.assertTrue(all(len(line) == 4 * 6 + 1 for line in lines))
        self.assertEqual(out.count("*"), len(path))
        # Deterministic
        self.assertEqual(out, TextRenderer(grid).render(path))

if __name__ == '__main__':
    unittest.main()
