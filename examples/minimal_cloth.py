from verlet_cloth import ClothConfig, Scene
from verlet_cloth.core.invariants import max_constraint_error

config = ClothConfig(iterations=5, seed=1)
scene = Scene.from_config(config, 800, 600)

for _ in range(240):
    scene.step(800, 600)

print("lowest particle y:", float(scene.particles.positions[:, 1].max()),
      "max link error:", max_constraint_error(scene.particles, scene.constraints))
