"""
#WHERE
    Imported by placement/, world_host/ and main.py: single source of truth
    for the spawner's literal values and the host's default parameters.

#WHAT
    Centralised constants.  Edit here, not in individual module files.

#INPUT / #OUTPUT
    Pure constants, no I/O.
"""

# ── Placement ────────────────────────────────────────────────────────────

PLACEMENT_DISTANCE: float = 3.0     # metres ahead of the viewpoint
DELETE_ON_TEARDOWN: bool = False    # spawned entity survives script teardown

# ── Spawned entity ───────────────────────────────────────────────────────

ENTITY_NAME: str = "Cusack_Testing"
ENTITY_TYPE: str = "Shape"
ENTITY_SHAPE: str = "cylinder-y"
ENTITY_COLOR: tuple[int, int, int] = (200, 10, 200)        # 0-255 RGB
ENTITY_DIMENSIONS: tuple[float, float, float] = (2.0, 4.0, 2.0)
INFINITE_LIFETIME: float = -1.0     # no time-based removal

# ── Host world ───────────────────────────────────────────────────────────

GRAVITY: float = -9.81          # m/s², PyBullet Z-down convention
DEFAULT_PHYSICS_HZ: int = 240   # simulation steps per second
DEFAULT_DURATION: float = 5.0   # seconds, manual runner
