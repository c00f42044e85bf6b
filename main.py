#!/usr/bin/env python3
"""Manual QA check: spawn the test entity in front of the viewpoint."""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.modules.placement import PlacementSpawner, ScriptLifecycle, SpawnerConfig
from src.modules.world_host import Scene, Simulator, ViewpointCamera
from src.shared.constants import DEFAULT_DURATION, DELETE_ON_TEARDOWN

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(levelname)-8s  %(message)s", datefmt="%H:%M:%S")
log = logging.getLogger(__name__)


def _args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Spawn the QA test cylinder 3 m in front of the viewpoint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python main.py --gui\n"
            "  python main.py --yaw 90 --pitch -20 --delete-on-teardown\n"
        ),
    )
    p.add_argument("--gui", action="store_true")
    p.add_argument("--duration", type=float, default=DEFAULT_DURATION)
    p.add_argument("--position", type=float, nargs=3, default=[0.0, 1.7, 0.0], metavar=("X", "Y", "Z"))
    p.add_argument("--yaw", type=float, default=0.0)
    p.add_argument("--pitch", type=float, default=0.0)
    p.add_argument("--delete-on-teardown", action="store_true", default=DELETE_ON_TEARDOWN)
    return p.parse_args()


def main() -> int:
    args = _args()

    scene = Scene()
    if not scene.setup(use_gui=args.gui):
        return 1
    scene.add_ground()

    viewpoint = ViewpointCamera(position=list(args.position), yaw=args.yaw, pitch=args.pitch)
    lifecycle = ScriptLifecycle("entitySpawner")
    spawner = PlacementSpawner(viewpoint, scene, lifecycle,
                               SpawnerConfig(delete_on_teardown=args.delete_on_teardown))

    try:
        handle = spawner.activate()
        center = scene.get_entity_position(handle)
        print(f"\nhandle   → {handle}")
        print(f"position → ({center[0]:.3f}, {center[1]:.3f}, {center[2]:.3f})")

        Simulator(scene).run(args.duration, realtime=args.gui)
    finally:
        lifecycle.end()
        print(f"entities after teardown: {len(scene.entities)}")
        scene.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())
