from gravity_sim import World
from gravity_sim.core.invariants import total_energy
from gravity_sim.scenarios import circular_binary

world = World(bounds=(500, 500), G=1.0)
a, b = circular_binary(world, mass=100.0, separation=50.0)

e0 = total_energy(world.bodies, world.G)
for _ in range(3142):  # ~ one period at dt = 0.05
    world.step(0.05)

print("separation:", (b.position - a.position).magnitude())
print("positions:", a.position, b.position)
print("energy drift:", total_energy(world.bodies, world.G) - e0)
