# MIT License (see LICENSE)
"""
Frame backends for windowing, input and drawing.

This subpackage provides:
    - FrameBackend: Abstract interface consumed by the frame driver.
    - NullBackend: Headless, draws nothing.
    - BufferedBackend: Records draw calls and replays scripted pointer input.
    - DebugBackend: One text line per frame.

The pygame window (PygameBackend) is not imported here so the engine has
no graphics dependency; import it from verlet_cloth.renderer.pygame_backend.

Typical usage:
    from verlet_cloth.renderer import NullBackend

    run(scene, NullBackend(size=(800, 600)), frames=600)
"""
from .adapter import (
    FrameBackend,
    NullBackend,
    BufferedBackend,
    DebugBackend,
)

__all__ = [
    "FrameBackend",
    "NullBackend",
    "BufferedBackend",
    "DebugBackend",
]
