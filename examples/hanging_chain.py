import numpy as np
from verlet_cloth import Scene, ParticleStore

# Horizontal chain of 8 links, pinned at its left end
n = 9
positions = np.zeros((n, 3))
positions[:, 0] = 100.0 + 20.0 * np.arange(n)
positions[:, 1] = 100.0

scene = Scene(particles=ParticleStore(positions=positions), iterations=10, damping=0.01)
for i in range(n - 1):
    scene.add_constraint(i, i + 1, 20.0)
scene.add_pin(0)

for _ in range(600):
    scene.step(800, 600)

print("chain end:", scene.particles.positions[-1], "(hangs about 160 px below the pin)")
