# MIT License (see LICENSE)
"""
Frame backends: the engine's view of the window, pointer and drawing.

The simulation core never touches a graphics library. Everything it needs
from the outside world goes through the FrameBackend interface: the
display size (for the boundary clamp), the pointer state (for dragging),
a handful of drawing primitives and the end-of-frame signal.

Backends in this module have no graphics dependency. The pygame window
lives in renderer.pygame_backend and is imported only on request.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, TextIO
import sys

import numpy as np

if TYPE_CHECKING:
    from ..scene import Scene

PointerState = tuple[tuple[float, float], bool]


class FrameBackend(ABC):
    """
    Abstract base class for window/input/drawing collaborators.

    Usage per frame:
        width, height = backend.get_display_size()
        (x, y), down = backend.get_pointer_state()
        ... simulate ...
        backend.draw_scene(scene, radius)
        backend.draw_text("0.016", 20, 20, 20)
        backend.present_frame()
    """

    @abstractmethod
    def get_display_size(self) -> tuple[float, float]:
        """Current drawable (width, height)."""
        ...

    @abstractmethod
    def get_pointer_state(self) -> PointerState:
        """Pointer position and whether the primary button is down."""
        ...

    @abstractmethod
    def draw_segment(self, p1: np.ndarray, p2: np.ndarray) -> None:
        ...

    @abstractmethod
    def draw_point(self, p: np.ndarray, radius: float) -> None:
        ...

    @abstractmethod
    def draw_text(self, s: str, x: float, y: float, size: float) -> None:
        ...

    @abstractmethod
    def present_frame(self) -> None:
        """
        Finish the current frame.

        This is the only point where control is handed back to the outside
        world between frames.
        """
        ...

    def should_close(self) -> bool:
        """True once the user asked to close the window."""
        return False

    def close(self) -> None:
        """Release backend resources."""

    def draw_scene(self, scene: "Scene", radius: float) -> None:
        """
        Draw every structural link as a segment, then every particle.

        Args:
            scene: The scene to draw.
            radius: Particle radius.
        """
        pos = scene.particles.positions
        for c in scene.constraints:
            self.draw_segment(pos[c.idx_1], pos[c.idx_2])
        for p in pos:
            self.draw_point(p, radius)


class NullBackend(FrameBackend):
    """
    Headless backend that draws nothing.

    Reports a fixed display size and an idle pointer. Useful for
    benchmarks and batch runs.
    """

    def __init__(self, size: tuple[float, float] = (800.0, 600.0)):
        self.size = (float(size[0]), float(size[1]))
        self.frames_presented = 0

    def get_display_size(self) -> tuple[float, float]:
        return self.size

    def get_pointer_state(self) -> PointerState:
        return (0.0, 0.0), False

    def draw_segment(self, p1, p2) -> None:
        pass

    def draw_point(self, p, radius) -> None:
        pass

    def draw_text(self, s, x, y, size) -> None:
        pass

    def present_frame(self) -> None:
        self.frames_presented += 1


class BufferedBackend(FrameBackend):
    """
    Backend that records every draw call, frame by frame.

    Pointer input can be scripted: each frame consumes the next entry of
    pointer_script, and the last entry repeats once the script runs out.

    Example:
        backend = BufferedBackend(size=(1000, 1000),
                                  pointer_script=[((500, 500), True)] * 10)
        run(scene, backend, frames=10)
        frame = backend.frames[-1]
        print(len(frame["segments"]), len(frame["points"]))
    """

    def __init__(
        self,
        size: tuple[float, float] = (800.0, 600.0),
        pointer_script: Iterable[PointerState] | None = None,
    ):
        self.size = (float(size[0]), float(size[1]))
        self.pointer_script = list(pointer_script or [])
        self.frames: list[dict] = []
        self._pointer_index = 0
        self._current = self._new_frame()

    @staticmethod
    def _new_frame() -> dict:
        return {"segments": [], "points": [], "texts": []}

    def get_display_size(self) -> tuple[float, float]:
        return self.size

    def get_pointer_state(self) -> PointerState:
        if not self.pointer_script:
            return (0.0, 0.0), False
        i = min(self._pointer_index, len(self.pointer_script) - 1)
        self._pointer_index += 1
        (x, y), down = self.pointer_script[i]
        return (float(x), float(y)), bool(down)

    def draw_segment(self, p1, p2) -> None:
        self._current["segments"].append((np.array(p1), np.array(p2)))

    def draw_point(self, p, radius) -> None:
        self._current["points"].append((np.array(p), float(radius)))

    def draw_text(self, s, x, y, size) -> None:
        self._current["texts"].append((s, float(x), float(y), float(size)))

    def present_frame(self) -> None:
        self.frames.append(self._current)
        self._current = self._new_frame()

    def clear(self) -> None:
        """Drop all recorded frames."""
        self.frames.clear()


class DebugBackend(NullBackend):
    """
    Text backend for development without a window.

    Writes one summary line per frame (particle count, bounding box and
    any diagnostic text) to a stream, stdout by default.

    Output:
        [frame 12] 100 pts x=[400.0, 581.2] y=[300.0, 482.9] | 0.0021
    """

    def __init__(
        self,
        size: tuple[float, float] = (800.0, 600.0),
        output: TextIO | None = None,
    ):
        super().__init__(size)
        self.output = output or sys.stdout
        self._points: list[np.ndarray] = []
        self._texts: list[str] = []

    def draw_point(self, p, radius) -> None:
        self._points.append(np.array(p))

    def draw_text(self, s, x, y, size) -> None:
        self._texts.append(s)

    def present_frame(self) -> None:
        line = f"[frame {self.frames_presented}] {len(self._points)} pts"
        if self._points:
            pts = np.array(self._points)
            lo, hi = pts.min(axis=0), pts.max(axis=0)
            line += f" x=[{lo[0]:.1f}, {hi[0]:.1f}] y=[{lo[1]:.1f}, {hi[1]:.1f}]"
        if self._texts:
            line += " | " + " ".join(self._texts)
        self.output.write(line + "\n")
        self.output.flush()

        self._points.clear()
        self._texts.clear()
        super().present_frame()
