import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prim_maze.algo.prim import generate
from prim_maze.core.analysis import calculate_stats

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    gen_start = time.time()
    maze = generate(width, height, seed=42)
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {(width*height)/max(gen_time, 1e-9):,.0f} cells/sec")
    print(f"Memory (Maze Data): ~{maze.nbytes / (1024 * 1024):.2f} MB")

    stats = calculate_stats(maze)
    print(f"Dead ends: {stats['dead_ends']} ({stats['dead_end_percent']:.1f}%)")

def run_suite():
    sizes = [
        (100, 100),
        (500, 500),
        (1000, 1000),      # 1M
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
