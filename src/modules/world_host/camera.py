"""
#WHERE
    Used by main.py and the tests as the spawner's ViewpointSource.

#WHAT
    The user's viewpoint (avatar position + camera heading) in the script
    frame.  Yaw turns about +Y (positive = left), pitch about +X
    (positive = up), roll about the view axis.

#INPUT
    Position (metres, Y-up) and yaw / pitch / roll in degrees.

#OUTPUT
    (x, y, z, w) orientation quaternion and (x, y, z) position.
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence

from src.shared import math3d
from src.shared.math3d import Quat, Vec3


@dataclass
class ViewpointCamera:
    position: List[float] = field(default_factory=lambda: [0.0, 1.7, 0.0])
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def get_orientation(self) -> Quat:
        return math3d.from_pitch_yaw_roll_degrees(self.pitch, self.yaw, self.roll)

    def get_position(self) -> Vec3:
        return (float(self.position[0]), float(self.position[1]), float(self.position[2]))

    def move_to(self, position: Sequence[float]):
        self.position = [float(c) for c in position]

    def turn(self, yaw: float = 0.0, pitch: float = 0.0):
        self.yaw = (self.yaw + yaw + 180.0) % 360.0 - 180.0
        self.pitch = max(-90.0, min(90.0, self.pitch + pitch))

    def look_at(self, target: Sequence[float]):
        dx, dy, dz = (float(target[i]) - float(self.position[i]) for i in range(3))
        horizontal = math.hypot(dx, dz)
        if horizontal < 1e-9 and abs(dy) < 1e-9:
            return
        # forward is -Z at yaw 0
        self.yaw = math.degrees(math.atan2(-dx, -dz))
        self.pitch = math.degrees(math.atan2(dy, horizontal))
        self.roll = 0.0
