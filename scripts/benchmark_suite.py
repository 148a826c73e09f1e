import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_meander.core.grid import Grid
from maze_meander.algo.generator import MeanderGenerator
from maze_meander.algo.solvers import solution_path
from maze_meander.core.complexity import MazeStats

def benchmark_size(width: int, height: int, seed: int = 42):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")

    start_time = time.time()
    grid = Grid(width, height, 3)
    print(f"Grid Init: {time.time() - start_time:.4f}s")

    print("Generating...")
    algo = MeanderGenerator(grid, seed=seed)
    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {(width*height)/gen_time:,.0f} cells/sec")
    print(f"Steps: {algo.step_count:,} (branches {algo.branch_count:,}, backtracks {algo.backtrack_count:,})")

    path_start = time.time()
    path = solution_path(grid)
    print(f"Solution Walk: {time.time() - path_start:.4f}s ({len(path)} cells)")

    stats = MazeStats.calculate_stats(grid)
    print(f"Dead ends: {stats['dead_ends']:,} ({stats['dead_end_percent']:.1f}%)  Unvisited: {stats['unvisited']:,}")

def run_suite():
    sizes = [
        (30, 40),      # Letter page, medium cells
        (120, 160),    # Letter page, micro cells
        (300, 300),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
