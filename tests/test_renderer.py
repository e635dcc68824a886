import io
import pytest
import numpy as np
from verlet_cloth.__main__ import main
from verlet_cloth.config import ClothConfig
from verlet_cloth.driver import run
from verlet_cloth.io.json_io import save_config
from verlet_cloth.renderer.adapter import BufferedBackend, DebugBackend, NullBackend
from verlet_cloth.scene import Scene


def test_debug_backend_output():
    out = io.StringIO()
    scene = Scene.from_config(ClothConfig(rows=3, cols=3, seed=1), 800.0, 600.0)

    run(scene, DebugBackend(output=out), frames=2)

    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[frame 0] 9 pts x=[")
    assert lines[1].startswith("[frame 1] 9 pts")


def test_pointer_script_repeats_last_entry():
    backend = BufferedBackend(pointer_script=[((1, 2), True), ((3, 4), False)])
    assert backend.get_pointer_state() == ((1.0, 2.0), True)
    assert backend.get_pointer_state() == ((3.0, 4.0), False)
    assert backend.get_pointer_state() == ((3.0, 4.0), False)
    assert BufferedBackend().get_pointer_state() == ((0.0, 0.0), False)


def test_buffered_backend_clear():
    backend = BufferedBackend()
    backend.draw_point(np.zeros(3), 2.0)
    backend.present_frame()
    assert len(backend.frames) == 1
    backend.clear()
    assert backend.frames == []


def test_null_backend():
    backend = NullBackend(size=(320, 240))
    assert backend.get_display_size() == (320.0, 240.0)
    assert backend.get_pointer_state() == ((0.0, 0.0), False)
    assert not backend.should_close()


def test_cli_headless(tmp_path, capsys):
    """The launcher runs a configured cloth headless and prints phase timings."""
    path = tmp_path / "cloth.json"
    save_config(ClothConfig(rows=4, cols=4), str(path))

    assert main(["--config", str(path), "--backend", "null", "--frames", "3", "--seed", "9"]) == 0

    out = capsys.readouterr().out
    assert "integrate" in out and "solve" in out


def test_pygame_backend_headless(monkeypatch):
    """The pygame window runs on SDL's dummy video driver."""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame_backend = pytest.importorskip("verlet_cloth.renderer.pygame_backend")

    backend = pygame_backend.PygameBackend(size=(320, 240), fps=0)
    try:
        scene = Scene.from_config(ClothConfig(rows=3, cols=3, seed=0), 320.0, 240.0)
        state = run(scene, backend, frames=2)
        assert state.frame == 2
        assert backend.get_display_size() == (320.0, 240.0)
        assert not backend.should_close()
    finally:
        backend.close()
