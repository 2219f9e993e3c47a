import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_graph.core.grid import SquareGrid
from maze_graph.algo.dfs import DepthFirstSearch
from maze_graph.algo.solvers import BreadthFirstSearch
from maze_graph.core.complexity import MazeStats

def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows*cols/1e6:.2f}M cells) ---")

    # 1. Memory
    start_time = time.time()
    grid = SquareGrid(rows, cols)
    mem_mb = (grid.right_walls.nbytes + grid.down_walls.nbytes) / (1024 * 1024)
    print(f"Grid Init: {time.time() - start_time:.4f}s")
    print(f"Memory (Wall Data): ~{mem_mb:.2f} MB")

    start, goal = (0, 0), (rows - 1, cols - 1)

    # 2. Generation
    print("Generating...")
    gen_start = time.time()
    DepthFirstSearch().generate_from_seed(grid, start, goal, 42)
    gen_time = time.time() - gen_start
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {(rows*cols)/gen_time:,.0f} cells/sec")

    # 3. Solving
    solver = BreadthFirstSearch()
    solve_start = time.time()
    path = solver.solve(grid, start, goal)
    print(f"Solve Time: {time.time() - solve_start:.4f}s (path {len(path)}, visited {solver.visited_count})")

    stats = MazeStats.calculate_stats(grid)
    print(f"Dead Ends: {stats['dead_ends']} ({stats['dead_end_percent']:.1f}%)")

def run_suite():
    sizes = [
        (100, 100),
        (500, 500),
        (1000, 1000),      # 1M
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)

if __name__ == "__main__":
    run_suite()
