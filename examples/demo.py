# examples/demo.py
# Demo layout stepped in 10 ms ticks, printed every simulated second.
from gravity_sim import World
from gravity_sim.constants import DEFAULT_DT
from gravity_sim.logging_config import setup_logging
from gravity_sim.renderer import DebugRenderer
from gravity_sim.scenarios import seed_demo

setup_logging("DEBUG")

world = World(bounds=(500, 500))
seed_demo(world)

renderer = DebugRenderer(verbose=False)
for _ in range(30):
    world.run(DEFAULT_DT, 100)
    renderer.render(world)

print("iterations:", world.iteration, "bodies left:", len(world.bodies))
