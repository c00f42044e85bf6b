"""
#WHERE
    Imported by main.py and tests/test_world_host.py.

#WHAT
    World host: a PyBullet world standing in for the engine's entity
    system, plus the user's viewpoint camera.

#INPUT
    EntityDescriptor records from the placement spawner.

#OUTPUT
    PyBullet bodies, entity handles, viewpoint position / orientation.
"""

from .camera import ViewpointCamera
from .scene import Scene, ShapeFactory, WorldEntity, from_bullet, to_bullet
from .simulator import Simulator

__all__ = [
    'Scene', 'ShapeFactory', 'WorldEntity', 'Simulator', 'ViewpointCamera',
    'to_bullet', 'from_bullet',
]
