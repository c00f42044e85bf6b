"""Script teardown signal: handlers registered with ``connect`` run once on ``end``."""

import logging
from typing import Callable, List

log = logging.getLogger(__name__)


class ScriptLifecycle:
    def __init__(self, name: str = "script"):
        self.name = name
        self._handlers: List[Callable[[], None]] = []
        self._ended = False

    @property
    def ended(self) -> bool:
        return self._ended

    def connect(self, handler: Callable[[], None]) -> None:
        if self._ended:
            raise RuntimeError(f"Lifecycle '{self.name}' has already ended")
        self._handlers.append(handler)

    def disconnect(self, handler: Callable[[], None]) -> bool:
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        handlers, self._handlers = self._handlers, []
        log.info("Ending '%s' (%d teardown handler(s))", self.name, len(handlers))
        for handler in handlers:
            handler()
