"""
#WHERE
    Used by main.py and tests/test_world_host.py.

#WHAT
    PyBullet simulation runner: steps physics and ages world entities so
    that finite lifetimes expire.

#INPUT
    Scene, duration, physics rate.

#OUTPUT
    Handles of the entities removed by lifetime expiry.
"""

import logging
import time
from typing import List, Optional

from src.modules.placement.models import EntityHandle
from src.shared.constants import DEFAULT_PHYSICS_HZ

from .scene import Scene

log = logging.getLogger(__name__)


class Simulator:
    def __init__(self, scene: Scene, physics_hz: int = DEFAULT_PHYSICS_HZ):
        self.scene = scene
        self.physics_hz = physics_hz
        self.current_time = 0.0

    def step(self, dt: Optional[float] = None) -> List[EntityHandle]:
        import pybullet as p
        if dt is None:
            dt = 1.0 / self.physics_hz
        p.stepSimulation(physicsClientId=self.scene.client)
        self.current_time += dt
        return self.scene.advance(dt)

    def run(self, duration: float, realtime: bool = False) -> List[EntityHandle]:
        total_steps = int(duration * self.physics_hz)
        dt = 1.0 / self.physics_hz
        expired: List[EntityHandle] = []

        log.info("Simulation: %ss @ %dHz (realtime=%s)", duration, self.physics_hz, realtime)

        for _ in range(total_steps):
            expired.extend(self.step(dt))
            if realtime:
                time.sleep(dt)

        log.info("Simulated %.2fs, %d entities expired", self.current_time, len(expired))
        return expired
