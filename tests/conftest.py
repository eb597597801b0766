"""
Shared fixtures: a scripted coordinator that replays a fixed event sequence,
so reporter output can be compared byte for byte.
"""

import io
from typing import Any, List, Tuple

import pytest

from testconsole import events
from testconsole.config import ReporterOptions
from testconsole.events import EventRegistry
from testconsole.faults import Failure
from testconsole.reporters.console import ConsoleReporter
from testconsole.runners.runner import TestResult

ELAPSED = 0.5


class ScriptedMediator:
    def __init__(self, script: List[Tuple[str, Any]], result: TestResult):
        self.script = script
        self.result = result
        self.registry = EventRegistry()

    def add_listener(self, event_name, callback):
        self.registry.subscribe(event_name, callback)

    def run_suite(self) -> TestResult:
        for event_name, payload in self.script:
            self.registry.publish(event_name, payload)
        return self.result


class ScriptedReporter(ConsoleReporter):
    def __init__(self, script, result, suite="sample", **kwargs):
        super().__init__(suite, **kwargs)
        self.script = script
        self.scripted_result = result

    def create_mediator(self, suite):
        return ScriptedMediator(self.script, self.scripted_result)


def passing_script(result: TestResult, name: str = "t1"):
    return [
        (events.RUN_STARTED, result),
        (events.TEST_STARTED, name),
        (events.TEST_FINISHED, name),
        (events.RUN_FINISHED, ELAPSED),
    ]


def failing_script(result: TestResult, fault: Failure):
    return [
        (events.RUN_STARTED, result),
        (events.TEST_STARTED, fault.test_name),
        (events.FAULT, fault),
        (events.TEST_FINISHED, fault.test_name),
        (events.RUN_FINISHED, ELAPSED),
    ]


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def report(stream):
    """
    Run a script through a ScriptedReporter and return what it printed.
    """
    def _report(script, result, output_level="normal", use_color=False, **kwargs):
        opts = ReporterOptions(output_level=output_level, use_color=use_color)
        ScriptedReporter(script, result, options=opts, output=stream, **kwargs).start()
        return stream.getvalue()
    return _report
