from verlet_cloth import ClothConfig, Scene, run
from verlet_cloth.renderer import BufferedBackend

scene = Scene.from_config(ClothConfig(seed=3), 800, 600)
corner = scene.particles.positions[99]

# Grab the bottom-right corner and pull it to the right for a second, then let go
script = [((corner[0], corner[1]), True)] + [((750.0, 550.0), True)] * 60 + [((750.0, 550.0), False)] * 60
backend = BufferedBackend(size=(800, 600), pointer_script=script)
run(scene, backend, frames=len(script))

print("frames recorded:", len(backend.frames), "corner now at:", scene.particles.positions[99])
