from gravity_sim import World, Vector2D
from gravity_sim.io import save_world, load_world

world = World()
world.add_body(100.0, Vector2D(100.0, 100.0), Vector2D(5.0, 0.0))
world.add_body(300.0, Vector2D(120.0, 100.0), Vector2D(-5.0, 0.0))

while len(world.bodies) > 1:
    world.step(0.01)

merged = world.bodies[0]
print("merged after", world.iteration, "steps:", merged.mass, merged.radius, merged.velocity)

save_world(world, "merged.json")
print("reloaded:", load_world("merged.json").live_bodies())
