"""Capabilities the spawner consumes from its host world.

The host's camera, avatar and entity systems are injected as these
protocols so the placement maths can run against test doubles as well as
the PyBullet world in ``src.modules.world_host``.
"""

from typing import Protocol

from src.shared.math3d import Quat, Vec3

from .models import EntityDescriptor, EntityHandle


class ViewpointSource(Protocol):
    def get_orientation(self) -> Quat:
        """Current viewpoint orientation in the script frame."""
        ...

    def get_position(self) -> Vec3:
        """Current viewpoint position in the script frame."""
        ...


class EntityService(Protocol):
    def create_entity(self, descriptor: EntityDescriptor) -> EntityHandle:
        """Add an entity to the world and return its handle."""
        ...

    def delete_entity(self, handle: EntityHandle) -> None:
        """Remove an entity.  Unknown handles must be ignored."""
        ...
