# MIT License (see LICENSE)
"""
Command-line launcher.

Run:
  python -m verlet_cloth                      # pygame window
  python -m verlet_cloth --backend debug --frames 120
  python -m verlet_cloth --config cloth.json --seed 7
"""
from __future__ import annotations
from dataclasses import replace
import argparse
import logging

from .config import ClothConfig
from .driver import run
from .interaction import InteractionController
from .io.json_io import load_config
from .profiler import Profiler
from .renderer.adapter import DebugBackend, NullBackend
from .scene import Scene

logger = logging.getLogger("verlet_cloth")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="verlet_cloth", description="Verlet cloth simulation")
    parser.add_argument("--config", "-c", help="JSON configuration file")
    parser.add_argument("--backend", "-b", choices=("pygame", "debug", "null"), default="pygame",
                        help="Frame backend (default: pygame)")
    parser.add_argument("--frames", "-n", type=int, default=None,
                        help="Number of frames to run (default: until the window closes)")
    parser.add_argument("--seed", type=int, default=None, help="Jitter seed (overrides the config)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config) if args.config else ClothConfig()
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    if args.backend == "pygame":
        try:
            from .renderer.pygame_backend import PygameBackend
        except ImportError:
            raise SystemExit("pygame backend needs pygame: pip install verlet-cloth[viewer]")
        backend = PygameBackend(config.window, config.title)
    elif args.backend == "debug":
        backend = DebugBackend(config.window)
    else:
        if args.frames is None:
            raise SystemExit("--backend null needs --frames")
        backend = NullBackend(config.window)

    profiler = Profiler()
    width, height = backend.get_display_size()
    logger.info("Starting %s backend at %dx%d", args.backend, width, height)
    scene = Scene.from_config(config, width, height, profiler=profiler)
    try:
        run(
            scene,
            backend,
            frames=args.frames,
            controller=InteractionController(config.intersect_threshold),
            particle_radius=config.particle_radius,
        )
    finally:
        backend.close()

    if args.backend != "pygame":
        for name, s in profiler.stats.summary().items():
            print(f"{name:10s} n={s['n']:6d} mean={s['mean_ms']:.3f} ms max={s['max_ms']:.3f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
