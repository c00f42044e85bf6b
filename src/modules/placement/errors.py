"""Failure types raised by the placement spawner."""


class SpawnerError(RuntimeError):
    """Base class for spawner failures."""


class HostUnavailableError(SpawnerError):
    """The viewpoint or entity system could not be reached."""


class SpawnFailedError(SpawnerError):
    """The host accepted the create request but returned no usable handle."""
