"""
Publish/subscribe registry connecting a test-run coordinator to its listeners.
"""

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Dict, List

FAULT = "testconsole.fault"
RUN_STARTED = "testconsole.run.started"
RUN_FINISHED = "testconsole.run.finished"
TEST_STARTED = "testconsole.test.started"
TEST_FINISHED = "testconsole.test.finished"

Handler = Callable[[Any], None]

log = logging.getLogger(__name__)


class EventRegistry:
    """
    Ordered handlers per event name.

    Dispatch is synchronous on the publishing thread. Publishing holds a
    re-entrant lock so handlers never run concurrently, while a handler may
    still publish further events itself.
    """
    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)
        self._lock = threading.RLock()

    def subscribe(self, event_name: str, handler: Handler) -> None:
        if not callable(handler):
            raise TypeError(f"Handler for {event_name!r} is not callable: {handler!r}")
        with self._lock:
            self._handlers[event_name].append(handler)
        log.debug("subscribed %r to %s", handler, event_name)

    def publish(self, event_name: str, payload: Any = None) -> None:
        # Handler errors propagate: a failing listener aborts the run.
        with self._lock:
            for handler in list(self._handlers.get(event_name, ())):
                handler(payload)
