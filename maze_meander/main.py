import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_meander' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_meander.core.errors import MazeConfigError

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Meander: weighted multi-path maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=30, help="Maze Width (cells)")
    gen_parser.add_argument("--height", type=int, default=40, help="Maze Height (cells)")
    gen_parser.add_argument("--zone", type=int, default=3, help="Start/finish zone size (cells)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--branch-probability", type=float, default=0.05,
                            help="Chance per step that a path splits in two")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--solution", action="store_true", help="Print (or show) the solution path")
    gen_parser.add_argument("--stats", action="store_true", help="Print maze statistics")

    bench_parser = subparsers.add_parser("benchmark", help="Time generation on a square grid")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def run_generate(args, logger):
    from maze_meander.core.grid import Grid
    from maze_meander.algo.generator import MeanderGenerator
    from maze_meander.algo.solvers import solution_coords

    grid = Grid(args.width, args.height, args.zone)
    generator = MeanderGenerator(grid, seed=args.seed, branch_probability=args.branch_probability)
    logger.info(f"Generating {args.width}x{args.height} maze (zone={args.zone}, seed={args.seed})...")

    if args.visual:
        logger.info("Visual mode enabled - Opening window...")
        from maze_meander.viz.renderer import Renderer
        renderer = Renderer(grid, generator=generator, show_solution=args.solution)
        renderer.init_window()
        renderer.run_loop()
        # Window may close before generation is over
        if not renderer.gen_finished:
            logger.info("Visualization closed before generation finished.")
            return 0
    else:
        t0 = time.time()
        generator.run_all()
        logger.info(f"Generated maze in {(time.time() - t0) * 1000:.0f} milliseconds.")

    if grid.goal_reached:
        path = solution_coords(grid)
        logger.info(f"Finish reached at {grid.finish}. Solution length: {len(path)}")
        if args.solution:
            print(" ".join(f"{x},{y}" for x, y in path))
    else:
        logger.warning("Finish area was never reached.")

    if args.stats:
        from maze_meander.core.complexity import MazeStats
        stats = MazeStats.calculate_stats(grid)
        stats["max_depth"] = MazeStats.max_depth(grid)
        stats["branches"] = generator.branch_count
        stats["backtracks"] = generator.backtrack_count
        for key, value in stats.items():
            print(f"{key:<18} {value:.2f}" if isinstance(value, float) else f"{key:<18} {value}")
    return 0

def run_benchmark(args, logger):
    from maze_meander.core.grid import Grid
    from maze_meander.algo.generator import MeanderGenerator
    from maze_meander.algo.solvers import solution_path

    logger.info(f"Running generation benchmark (Size: {args.size}x{args.size})...")
    t0 = time.time()
    grid = Grid(args.size, args.size, 3)
    t_grid = time.time() - t0

    t0 = time.time()
    gen = MeanderGenerator(grid, seed=args.seed)
    gen.run_all()
    t_gen = time.time() - t0

    t0 = time.time()
    path = solution_path(grid)
    t_path = time.time() - t0

    print(f"\n{'STAGE':<20} | {'TIME (s)':<10}")
    print("-" * 34)
    print(f"{'Grid init':<20} | {t_grid:<10.4f}")
    print(f"{'Generation':<20} | {t_gen:<10.4f}")
    print(f"{'Solution walk':<20} | {t_path:<10.4f}")
    print(f"\nSteps: {gen.step_count:,}  Branches: {gen.branch_count:,}  Solution: {len(path)} cells")
    return 0

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_meander")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            return run_generate(args, logger)
        elif args.command == "benchmark":
            return run_benchmark(args, logger)
    except MazeConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
