"""
Microbenchmark: time per step vs grid size and relaxation passes.
Run:
  python benchmarks/bench_steps.py
"""
import time
from verlet_cloth.config import ClothConfig
from verlet_cloth.profiler import Profiler
from verlet_cloth.scene import Scene

WIDTH, HEIGHT = 1600.0, 1200.0


def run(n: int, iterations: int, steps: int = 200):
    prof = Profiler()
    config = ClothConfig(rows=n, cols=n, start_distance=10.0, rest_length=10.0,
                         iterations=iterations, seed=12345)
    # Anchor the grid so it fits on screen
    scene = Scene.from_config(config, WIDTH / 2, HEIGHT / 2, profiler=prof)

    # warmup
    for _ in range(20):
        scene.step(WIDTH, HEIGHT)
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(steps):
        scene.step(WIDTH, HEIGHT)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 20, 40]:
        for iterations in [1, 5]:
            per_step, summary = run(n, iterations)
            print(f"N={n*n:5d} iters={iterations}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
            for k in ["integrate", "forces", "solve"]:
                if k in summary:
                    print(" ", k, summary[k])
            print()
