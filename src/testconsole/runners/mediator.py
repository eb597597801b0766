"""
Coordinator that runs a TestSuite and publishes lifecycle events.
"""

import logging
import os
import time
import traceback
from typing import Any, Callable, List, Optional

from .. import events
from ..events import EventRegistry
from ..faults import Error, Failure, Fault, Omission, Pending
from .runner import OmittedError, PendedError, TestCase, TestContext, TestResult, TestSuite

log = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _backtrace(exc: BaseException) -> List[str]:
    frames = [
        fr for fr in traceback.extract_tb(exc.__traceback__)
        if not os.path.abspath(fr.filename).startswith(_PACKAGE_DIR + os.sep)
    ]
    return [f"{fr.filename}:{fr.lineno}:in {fr.name}" for fr in frames]

def _location(exc: BaseException) -> Optional[str]:
    trace = _backtrace(exc)
    if not trace:
        return None
    return trace[-1].rsplit(":in ", 1)[0]


class TestRunnerMediator:
    __test__ = False

    def __init__(self, suite: TestSuite, registry: Optional[EventRegistry] = None):
        self.suite = suite
        self.registry = registry or EventRegistry()

    def add_listener(self, event_name: str, callback: Callable[[Any], None]) -> None:
        self.registry.subscribe(event_name, callback)

    def notify_listeners(self, event_name: str, payload: Any = None) -> None:
        self.registry.publish(event_name, payload)

    def run_suite(self) -> TestResult:
        result = TestResult()
        log.debug("running suite %s (%d tests)", self.suite.name, len(self.suite))
        t0 = time.perf_counter()
        self.notify_listeners(events.RUN_STARTED, result)
        for test in self.suite.tests:
            self._run_test(test, result)
        elapsed = time.perf_counter() - t0
        self.notify_listeners(events.RUN_FINISHED, elapsed)
        log.debug("suite %s finished in %.3fs: %s", self.suite.name, elapsed, result)
        return result

    def _add_fault(self, result: TestResult, fault: Fault) -> None:
        result.add_fault(fault)
        self.notify_listeners(events.FAULT, fault)

    def _run_test(self, test: TestCase, result: TestResult) -> None:
        self.notify_listeners(events.TEST_STARTED, test.name)
        ctx = TestContext(test.name, result)
        fault: Optional[Fault] = None
        try:
            test.run(ctx)
        except PendedError as e:
            fault = Pending(test.name, str(e), _location(e))
        except OmittedError as e:
            fault = Omission(test.name, str(e), _location(e))
        except AssertionError as e:
            fault = Failure(test.name, str(e), _location(e))
        except Exception as e:
            fault = Error.from_exception(test.name, e, _backtrace(e))
        # Published outside the try block so listener errors are never turned into faults.
        for note in ctx.notifications:
            self._add_fault(result, note)
        if fault is not None:
            self._add_fault(result, fault)
        result.run_count += 1
        self.notify_listeners(events.TEST_FINISHED, test.name)
