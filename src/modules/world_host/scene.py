"""PyBullet world acting as the spawner's entity system, with a Factory for shape creation."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from src.modules.placement.errors import HostUnavailableError
from src.modules.placement.models import EntityDescriptor, EntityHandle
from src.shared import constants as C
from src.shared import math3d
from src.shared.math3d import Quat, Vec3

log = logging.getLogger(__name__)


# Script frame is Y-up; PyBullet is Z-up.  A +90° turn about X maps one onto
# the other: script (x, y, z) -> bullet (x, -z, y).
def to_bullet(v: Sequence[float]) -> Vec3:
    return (float(v[0]), -float(v[2]), float(v[1]))


def from_bullet(v: Sequence[float]) -> Vec3:
    return (float(v[0]), float(v[2]), -float(v[1]))


def rgb_to_rgba(color: Sequence[int]) -> List[float]:
    return [max(0, min(255, c)) / 255.0 for c in color[:3]] + [1.0]


@dataclass(slots=True)
class WorldEntity:
    handle: EntityHandle
    descriptor: EntityDescriptor
    age: float = 0.0

    @property
    def expired(self) -> bool:
        return not self.descriptor.is_infinite and self.age >= self.descriptor.lifetime


class ShapeFactory:
    """Builds (collision, visual, base orientation) for a shape type.

    Dimensions are full extents in the script frame.
    """

    @staticmethod
    def create(shape: str, dimensions: Sequence[float], rgba: List[float],
               client: int = 0) -> Tuple[int, int, Quat]:
        creators = {
            "cube": ShapeFactory._create_box,
            "sphere": ShapeFactory._create_sphere,
            "cylinder-x": ShapeFactory._create_cylinder_x,
            "cylinder-y": ShapeFactory._create_cylinder_y,
            "cylinder-z": ShapeFactory._create_cylinder_z,
        }

        creator = creators.get(shape)
        if not creator:
            raise ValueError(f"Unknown shape: {shape}")
        return creator(dimensions, rgba, client)

    @staticmethod
    def _create_box(dims: Sequence[float], rgba: List[float], client: int) -> Tuple[int, int, Quat]:
        import pybullet as p
        half = [abs(c) / 2.0 for c in to_bullet(dims)]
        collision = p.createCollisionShape(p.GEOM_BOX, halfExtents=half, physicsClientId=client)
        visual = p.createVisualShape(p.GEOM_BOX, halfExtents=half, rgbaColor=rgba, physicsClientId=client)
        return collision, visual, math3d.IDENTITY

    @staticmethod
    def _create_sphere(dims: Sequence[float], rgba: List[float], client: int) -> Tuple[int, int, Quat]:
        import pybullet as p
        radius = dims[0] / 2.0
        collision = p.createCollisionShape(p.GEOM_SPHERE, radius=radius, physicsClientId=client)
        visual = p.createVisualShape(p.GEOM_SPHERE, radius=radius, rgbaColor=rgba, physicsClientId=client)
        return collision, visual, math3d.IDENTITY

    @staticmethod
    def _cylinder(radius: float, height: float, rgba: List[float], client: int) -> Tuple[int, int]:
        import pybullet as p
        collision = p.createCollisionShape(p.GEOM_CYLINDER, radius=radius, height=height,
                                           physicsClientId=client)
        visual = p.createVisualShape(p.GEOM_CYLINDER, radius=radius, length=height,
                                     rgbaColor=rgba, physicsClientId=client)
        return collision, visual

    # PyBullet cylinders run along their local Z axis, which is script Y.

    @staticmethod
    def _create_cylinder_y(dims: Sequence[float], rgba: List[float], client: int) -> Tuple[int, int, Quat]:
        collision, visual = ShapeFactory._cylinder(dims[0] / 2.0, dims[1], rgba, client)
        return collision, visual, math3d.IDENTITY

    @staticmethod
    def _create_cylinder_x(dims: Sequence[float], rgba: List[float], client: int) -> Tuple[int, int, Quat]:
        collision, visual = ShapeFactory._cylinder(dims[1] / 2.0, dims[0], rgba, client)
        return collision, visual, math3d.angle_axis(90.0, math3d.UNIT_Y)

    @staticmethod
    def _create_cylinder_z(dims: Sequence[float], rgba: List[float], client: int) -> Tuple[int, int, Quat]:
        collision, visual = ShapeFactory._cylinder(dims[0] / 2.0, dims[2], rgba, client)
        return collision, visual, math3d.angle_axis(90.0, math3d.UNIT_X)


class Scene:
    def __init__(self, gravity: float = C.GRAVITY):
        self.gravity = gravity
        self.client = None
        self.entities: Dict[EntityHandle, WorldEntity] = {}
        self.ground_id = None
        self._is_setup = False

    @property
    def is_setup(self) -> bool:
        return self._is_setup

    def setup(self, use_gui: bool = False) -> bool:
        import pybullet as p
        import pybullet_data

        try:
            mode = p.GUI if use_gui else p.DIRECT
            self.client = p.connect(mode)

            if self.client < 0:
                log.error("PyBullet connection failed")
                self.client = None
                return False

            p.setAdditionalSearchPath(pybullet_data.getDataPath(), physicsClientId=self.client)
            p.setGravity(0, 0, self.gravity, physicsClientId=self.client)
            p.setRealTimeSimulation(0, physicsClientId=self.client)

            self._is_setup = True
            log.info("World ready (gravity=%s, gui=%s)", self.gravity, use_gui)
            return True
        except Exception as e:
            log.error("World setup failed: %s", e)
            return False

    def _require_setup(self) -> None:
        if not self._is_setup:
            raise HostUnavailableError("World is not set up")

    def add_ground(self) -> int:
        import pybullet as p
        self._require_setup()
        self.ground_id = p.loadURDF("plane.urdf", physicsClientId=self.client)
        return self.ground_id

    # ── EntityService ────────────────────────────────────────────────

    def create_entity(self, descriptor: EntityDescriptor) -> EntityHandle:
        import pybullet as p
        self._require_setup()

        rgba = rgb_to_rgba(descriptor.color)
        collision, visual, local_orn = ShapeFactory.create(
            descriptor.shape, descriptor.dimensions, rgba, self.client)

        body_id = p.createMultiBody(
            baseMass=0,
            baseCollisionShapeIndex=collision,
            baseVisualShapeIndex=visual,
            basePosition=list(to_bullet(descriptor.position)),
            baseOrientation=list(local_orn),
            physicsClientId=self.client,
        )
        if body_id < 0:
            log.error("createMultiBody failed for '%s'", descriptor.name)
            return body_id

        self.entities[body_id] = WorldEntity(handle=body_id, descriptor=descriptor)
        log.info("Added %s '%s' (body %d)", descriptor.shape, descriptor.name, body_id)
        return body_id

    def delete_entity(self, handle: EntityHandle) -> None:
        import pybullet as p
        entity = self.entities.pop(handle, None)
        if entity is None:
            log.debug("delete_entity: unknown handle %s", handle)
            return
        if self._is_setup:
            p.removeBody(handle, physicsClientId=self.client)
        log.info("Removed '%s' (body %d)", entity.descriptor.name, handle)

    # ── queries ──────────────────────────────────────────────────────

    def get_entity(self, handle: EntityHandle) -> Optional[WorldEntity]:
        return self.entities.get(handle)

    def find_by_name(self, name: str) -> List[WorldEntity]:
        return [e for e in self.entities.values() if e.descriptor.name == name]

    def get_entity_position(self, handle: EntityHandle) -> Optional[Vec3]:
        import pybullet as p
        if handle not in self.entities:
            return None
        self._require_setup()
        pos, _ = p.getBasePositionAndOrientation(handle, physicsClientId=self.client)
        return from_bullet(pos)

    def advance(self, dt: float) -> List[EntityHandle]:
        """Age entities by *dt* seconds and remove those past their lifetime."""
        expired = []
        for entity in list(self.entities.values()):
            entity.age += dt
            if entity.expired:
                expired.append(entity.handle)
        for handle in expired:
            log.info("Lifetime expired for body %d", handle)
            self.delete_entity(handle)
        return expired

    def cleanup(self):
        import pybullet as p
        if self.client is not None:
            p.disconnect(physicsClientId=self.client)
            self.client = None
            self._is_setup = False
            self.entities.clear()
            log.info("World cleaned up")
