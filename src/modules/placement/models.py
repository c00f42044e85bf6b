"""
#WHERE
    Used by spawner.py, host.py, world_host/scene.py and the tests.

#WHAT
    Data models for the placement spawner: the immutable entity descriptor,
    the opaque handle type and the spawner configuration.

#INPUT
    Literal defaults from src.shared.constants.

#OUTPUT
    EntityDescriptor, SpawnerConfig dataclass instances.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from src.shared import constants as C
from src.shared.math3d import Vec3

# Opaque id issued by the host; PyBullet body ids are ints.
EntityHandle = int


@dataclass(frozen=True, slots=True)
class EntityDescriptor:
    name: str = C.ENTITY_NAME
    type: str = C.ENTITY_TYPE
    shape: str = C.ENTITY_SHAPE
    color: Tuple[int, int, int] = C.ENTITY_COLOR
    dimensions: Vec3 = C.ENTITY_DIMENSIONS
    position: Vec3 = (0.0, 0.0, 0.0)
    lifetime: float = C.INFINITE_LIFETIME
    script: Optional[str] = None

    @property
    def is_infinite(self) -> bool:
        return self.lifetime < 0

    def at(self, position: Vec3) -> "EntityDescriptor":
        """Copy of this descriptor placed at *position*."""
        return replace(self, position=tuple(float(c) for c in position))

    def to_properties(self) -> dict:
        """Property record in the host's ``addEntity`` shape."""
        props = {
            "name": self.name,
            "type": self.type,
            "shapeType": self.shape,
            "color": {"red": self.color[0], "green": self.color[1], "blue": self.color[2]},
            "position": {"x": self.position[0], "y": self.position[1], "z": self.position[2]},
            "dimensions": {"x": self.dimensions[0], "y": self.dimensions[1], "z": self.dimensions[2]},
            "lifetime": self.lifetime,
        }
        if self.script is not None:
            props["script"] = self.script
        return props


@dataclass
class SpawnerConfig:
    distance: float = C.PLACEMENT_DISTANCE
    delete_on_teardown: bool = C.DELETE_ON_TEARDOWN
    descriptor: EntityDescriptor = field(default_factory=EntityDescriptor)
