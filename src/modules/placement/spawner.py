"""
#WHERE
    Used by main.py and tests/test_placement.py.

#WHAT
    One-shot placement spawner: levels the viewpoint orientation to a
    yaw-only heading, computes a point a fixed distance ahead of the
    viewpoint and asks the host to create a fixed entity there.

#INPUT
    ViewpointSource + EntityService capabilities, ScriptLifecycle,
    SpawnerConfig.

#OUTPUT
    EntityHandle of the spawned entity; optional deletion at teardown.
"""

import logging
from typing import List, Optional, Sequence

from src.shared import math3d
from src.shared.math3d import Quat, Vec3

from .errors import HostUnavailableError, SpawnFailedError, SpawnerError
from .host import EntityService, ViewpointSource
from .lifecycle import ScriptLifecycle
from .models import EntityDescriptor, EntityHandle, SpawnerConfig

log = logging.getLogger(__name__)


def level_orientation(orientation: Sequence[float]) -> Quat:
    """Drop the pitch of *orientation*, keeping its horizontal heading."""
    _, yaw, roll = math3d.safe_euler_angles(orientation)
    return math3d.from_pitch_yaw_roll_degrees(0.0, yaw, roll)


def compute_placement_point(position: Sequence[float], orientation: Sequence[float],
                            distance: float = 3.0) -> Vec3:
    forward = math3d.get_forward(level_orientation(orientation))
    return math3d.vec3_sum(position, math3d.vec3_multiply(distance, forward))


def _is_valid_handle(handle) -> bool:
    if handle is None or isinstance(handle, bool):
        return False
    if isinstance(handle, int):
        return handle >= 0
    return True


class PlacementSpawner:
    def __init__(self, viewpoint: ViewpointSource, entities: EntityService,
                 lifecycle: ScriptLifecycle, config: SpawnerConfig = None):
        self.viewpoint = viewpoint
        self.entities = entities
        self.lifecycle = lifecycle
        self.config = config or SpawnerConfig()
        self.handles: List[EntityHandle] = []
        self._cleanup_connected = False

    @property
    def is_active(self) -> bool:
        return bool(self.handles)

    @property
    def handle(self) -> Optional[EntityHandle]:
        return self.handles[-1] if self.handles else None

    def activate(self) -> EntityHandle:
        if self.lifecycle.ended:
            raise SpawnerError(f"Lifecycle '{self.lifecycle.name}' has ended; nothing spawned")
        if self.handles:
            log.warning("Spawner already active (%d entities); spawning another", len(self.handles))

        try:
            orientation = self.viewpoint.get_orientation()
            position = self.viewpoint.get_position()
        except SpawnerError:
            raise
        except Exception as e:
            raise HostUnavailableError(f"Viewpoint query failed: {e}") from e

        center = compute_placement_point(position, orientation, self.config.distance)
        descriptor: EntityDescriptor = self.config.descriptor.at(center)

        try:
            handle = self.entities.create_entity(descriptor)
        except SpawnerError:
            raise
        except Exception as e:
            raise HostUnavailableError(f"Entity creation failed: {e}") from e

        if not _is_valid_handle(handle):
            raise SpawnFailedError(f"Host returned invalid handle {handle!r} for '{descriptor.name}'")

        self.handles.append(handle)
        if not self._cleanup_connected:
            self.lifecycle.connect(self.cleanup)
            self._cleanup_connected = True

        log.info("Spawned '%s' at (%.3f, %.3f, %.3f) -> handle %s",
                 descriptor.name, center[0], center[1], center[2], handle)
        return handle

    def cleanup(self) -> None:
        if not self.config.delete_on_teardown:
            log.debug("Teardown: keeping %d spawned entities", len(self.handles))
            return
        for handle in self.handles:
            self.entities.delete_entity(handle)
            log.info("Teardown: deleted handle %s", handle)
        self.handles.clear()
