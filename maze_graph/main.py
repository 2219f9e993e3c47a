import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_graph' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_graph.core.rng import parse_seed


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def seed_arg(text: str):
    try:
        return parse_seed(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid seed {text!r}: {e}")


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Graph: generate and solve mazes on graph topologies")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a grid maze and print it")
    gen_parser.add_argument("--rows", type=positive_int, default=15, help="Number of rows")
    gen_parser.add_argument("--cols", type=positive_int, default=15, help="Number of columns")
    gen_parser.add_argument("--seed", type=seed_arg, default=None, help="Decimal integer or 64 hex digit seed")
    gen_parser.add_argument("--solve", action="store_true", help="Mark the BFS solution path")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor / junction counts")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and solving")
    bench_parser.add_argument("--size", type=positive_int, default=1000, help="Benchmark size")
    bench_parser.add_argument("--seed", type=seed_arg, default=123, help="Random Seed")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_graph")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    from maze_graph.core.grid import SquareGrid
    from maze_graph.algo.dfs import DepthFirstSearch
    from maze_graph.algo.solvers import BreadthFirstSearch

    if args.command == "generate":
        grid = SquareGrid(args.rows, args.cols)
        start = (0, 0)
        goal = (args.rows - 1, args.cols - 1)

        generator = DepthFirstSearch()
        logger.info(f"Generating {args.rows}x{args.cols} maze with DFS...")
        if args.seed is None:
            reached = generator.generate(grid, start, goal)
        else:
            reached = generator.generate_from_seed(grid, start, goal, args.seed)

        seed = generator.seed
        logger.info(f"Seed: {seed.hex() if isinstance(seed, bytes) else seed}")
        if not reached:
            logger.warning(f"Goal {goal} is unreachable from {start}")

        path = []
        if args.solve:
            path = BreadthFirstSearch().solve(grid, start, goal)
            logger.info(f"Path Length: {len(path)}")

        if args.stats:
            from maze_graph.core.complexity import MazeStats
            logger.info(f"Stats: {MazeStats.calculate_stats(grid)}")

        from maze_graph.viz.text_renderer import TextRenderer
        print(TextRenderer(grid).render(path), end="")

    elif args.command == "benchmark":
        logger.info(f"Running Benchmark (Size: {args.size}x{args.size})...")
        grid = SquareGrid(args.size, args.size)
        start = (0, 0)
        goal = (args.size - 1, args.size - 1)

        t0 = time.time()
        DepthFirstSearch().generate_from_seed(grid, start, goal, args.seed)
        gen_time = time.time() - t0

        solver = BreadthFirstSearch()
        t0 = time.time()
        path = solver.solve(grid, start, goal)
        solve_time = time.time() - t0

        print(f"\n{'STEP':<12} | {'TIME (s)':<10} | {'DETAIL':<20}")
        print("-" * 48)
        print(f"{'DFS':<12} | {gen_time:<10.4f} | {grid.node_count():,} cells")
        print(f"{'BFS':<12} | {solve_time:<10.4f} | path {len(path)}, visited {solver.visited_count}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
