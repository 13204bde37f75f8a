import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.algo.registry import ALGORITHMS, create
from maze_stepper.core.analysis import MazeAnalyzer

def benchmark_size(key: str, size: int):
    print(f"\n--- {key} {size}x{size} ({size*size} cells) ---")

    algo = create(key, seed=42)
    start_time = time.time()
    algo.init(size)
    print(f"Init: {time.time() - start_time:.4f}s")

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s ({algo.step_count} steps)")
    if gen_time > 0:
        print(f"Speed: {algo.step_count/gen_time:,.0f} steps/sec")

    stats = MazeAnalyzer.calculate_stats(algo.grid)
    print(f"Perfect: {MazeAnalyzer.is_perfect(algo.grid)}  Dead ends: {stats['dead_end_percent']:.1f}%")

def run_suite():
    sizes = [10, 50, 100, 200]
    for key in ALGORITHMS:
        for size in sizes:
            benchmark_size(key, size)

if __name__ == "__main__":
    run_suite()
