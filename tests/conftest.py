"""Shared fixtures: an in-memory host standing in for the engine."""

from typing import Dict, List

import pytest

from src.modules.placement import EntityDescriptor, ScriptLifecycle
from src.modules.world_host import ViewpointCamera

_UNSET = object()


class RecordingEntityService:
    """Keeps created entities in a dict; ``forced_handle`` overrides the returned handle."""

    def __init__(self, forced_handle=_UNSET):
        self.entities: Dict[int, EntityDescriptor] = {}
        self.deleted: List[int] = []
        self.forced_handle = forced_handle
        self._next = 1

    def create_entity(self, descriptor: EntityDescriptor):
        if self.forced_handle is not _UNSET:
            return self.forced_handle
        handle = self._next
        self._next += 1
        self.entities[handle] = descriptor
        return handle

    def delete_entity(self, handle) -> None:
        self.deleted.append(handle)
        self.entities.pop(handle, None)


class BrokenViewpoint:
    def get_orientation(self):
        raise ConnectionError("camera offline")

    def get_position(self):
        raise ConnectionError("avatar offline")


@pytest.fixture
def viewpoint():
    return ViewpointCamera(position=[0.0, 0.0, 0.0])


@pytest.fixture
def entities():
    return RecordingEntityService()


@pytest.fixture
def lifecycle():
    return ScriptLifecycle("test")
