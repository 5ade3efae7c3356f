"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sim import World, Vector2D
from gravity_sim.profiler import Profiler

def run(n: int, steps: int = 200):
    prof = Profiler()
    world = World(bounds=(2000.0, 2000.0), G=1.0, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn bodies on a grid with small random jitter, far enough apart not to merge
    side = int(np.ceil(np.sqrt(n)))
    k = 0
    for iy in range(side):
        for ix in range(side):
            if k >= n:
                break
            x = 500.0 + 40.0 * ix + float(rng.normal())
            y = 500.0 + 40.0 * iy + float(rng.normal())
            vx, vy = rng.normal(size=2)
            world.add_body(100.0, Vector2D(x, y), Vector2D(vx, vy))
            k += 1

    # warmup
    world.run(0.01, 10)
    prof.stats.clear()

    t0 = time.perf_counter()
    world.run(0.01, steps)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, len(world.bodies), prof.stats.summary()

if __name__ == "__main__":
    for n in [2, 10, 25, 50, 100]:
        per_step, alive, summary = run(n)
        print(f"N={n:4d}  alive={alive:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["integrating", "force_evaluating", "velocity_integrating",
                  "collision_detecting", "removing", "merging"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
