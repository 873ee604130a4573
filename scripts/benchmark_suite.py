import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.maze import Maze, GenTactic
from perfect_maze.core.rand import SeededRandom
from perfect_maze.core.analysis import MazeAnalyzer
from perfect_maze.config import GenerationConfig, generate, setup_logging

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    start_time = time.time()
    maze = Maze(width, height)
    print(f"Lattice Init: {time.time() - start_time:.4f}s ({maze.room_count:,} rooms)")

    for tactic in GenTactic:
        gen_start = time.time()
        maze.gen(tactic, SeededRandom(42))
        gen_time = time.time() - gen_start

        stats = MazeAnalyzer.calculate_stats(maze)
        print(f"{tactic.value.upper():8s} {gen_time:.4f}s "
              f"| {maze.room_count/gen_time:,.0f} rooms/sec "
              f"| dead ends {stats['dead_end_percent']:.1f}%")

def run_suite():
    sizes = [
        (101, 101),
        (501, 501),
        (1001, 1001),  # 250k rooms
    ]

    for w, h in sizes:
        benchmark_size(w, h)

    # One logged run through the config entry point
    config = GenerationConfig(width=51, height=51, tactic="wilson", seed=42, verbose=True)
    setup_logging(config.verbose)
    generate(config)

if __name__ == "__main__":
    run_suite()
