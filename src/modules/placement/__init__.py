"""
#WHERE
    Imported by main.py and tests/test_placement.py.

#WHAT
    Placement spawner: places one fixed entity a set distance ahead of the
    user's viewpoint, with optional removal at script teardown.

#INPUT
    Host viewpoint + entity capabilities, ScriptLifecycle, SpawnerConfig.

#OUTPUT
    EntityHandle of the spawned entity.
"""

from .errors import HostUnavailableError, SpawnerError, SpawnFailedError
from .host import EntityService, ViewpointSource
from .lifecycle import ScriptLifecycle
from .models import EntityDescriptor, EntityHandle, SpawnerConfig
from .spawner import PlacementSpawner, compute_placement_point, level_orientation

__all__ = [
    'PlacementSpawner', 'compute_placement_point', 'level_orientation',
    'EntityDescriptor', 'EntityHandle', 'SpawnerConfig',
    'EntityService', 'ViewpointSource', 'ScriptLifecycle',
    'SpawnerError', 'HostUnavailableError', 'SpawnFailedError',
]
