"""
Console reporter: renders test-run lifecycle events to a text stream.

While the run is in progress it prints one progress mark per test (a "." for a
clean test, the fault's glyph otherwise). When the run finishes it lists every
fault in discovery order and prints the result line, colored by verdict.
"""

import logging
import os
import sys
import types
from enum import Enum
from typing import Any, List, Mapping, Optional, TextIO

from .. import events
from ..color import Color, ColorScheme, apply, guess_color_availability, scheme_named
from ..config import ReporterOptions
from ..faults import Fault
from ..output_level import OutputLevel, should_show
from ..runners.mediator import TestRunnerMediator
from ..runners.runner import TestResult, TestSuite

log = logging.getLogger(__name__)


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class ConsoleReporter:
    """
    Runs a TestSuite on the console.

    Parameters
    ----------
    suite : TestSuite or module
        The suite to run. A module is turned into a suite through its
        ``discover()`` function.
    options : ReporterOptions, optional
        Output level, color flag and color scheme, by default NORMAL with
        color guessed from the output stream.
    output : TextIO, optional
        Where the report is written, by default ``sys.stdout``.
    environ : Mapping[str, str], optional
        Environment consulted when guessing color support, by default
        ``os.environ``.
    """
    def __init__(
        self,
        suite: Any,
        options: Optional[ReporterOptions] = None,
        output: Optional[TextIO] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.suite = suite
        self.options: ReporterOptions = options or ReporterOptions()
        self.output_level: OutputLevel = self.options.output_level
        self.output: TextIO = output if output is not None else sys.stdout
        use_color = self.options.use_color
        if use_color is None:
            use_color = guess_color_availability(self.output, os.environ if environ is None else environ)
        self.use_color: bool = use_color
        self.color_scheme: ColorScheme = scheme_named(self.options.color_scheme)
        self.faults: List[Fault] = []
        self.result: Optional[TestResult] = None
        self.state = RunState.IDLE
        self._already_outputted = False
        self._mediator: Optional[TestRunnerMediator] = None

    @classmethod
    def run(cls, suite: Any, **kwargs) -> TestResult:
        return cls(suite, **kwargs).start()

    def start(self) -> TestResult:
        """Begin the test run; returns once every event has been handled."""
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"reporter already {self.state.value}")
        self._setup_mediator()
        self._attach_to_mediator()
        self.state = RunState.RUNNING
        return self._mediator.run_suite()

    # ---------- setup ----------
    def _setup_mediator(self) -> None:
        self._mediator = self.create_mediator(self.suite)
        self._output_setup_end()

    def create_mediator(self, suite: Any) -> TestRunnerMediator:
        if isinstance(suite, types.ModuleType):
            suite = TestSuite.from_module(suite)
        return TestRunnerMediator(suite)

    def _output_setup_end(self) -> None:
        if isinstance(self.suite, (type, types.ModuleType)):
            suite_name = self.suite.__name__
        else:
            suite_name = str(self.suite)
        self._output(f"Loaded suite {suite_name}")

    def _attach_to_mediator(self) -> None:
        self._mediator.add_listener(events.FAULT, self._add_fault)
        self._mediator.add_listener(events.RUN_STARTED, self._started)
        self._mediator.add_listener(events.RUN_FINISHED, self._finished)
        self._mediator.add_listener(events.TEST_STARTED, self._test_started)
        self._mediator.add_listener(events.TEST_FINISHED, self._test_finished)

    # ---------- event handlers ----------
    def _ignored(self, event_name: str) -> bool:
        if self.state is RunState.FINISHED:
            log.debug("ignoring %s after run finished", event_name)
            return True
        return False

    def _add_fault(self, fault: Fault) -> None:
        if self._ignored(events.FAULT):
            return
        self.faults.append(fault)
        self._output_single(fault.single_character_display,
                            self.fault_color(fault),
                            OutputLevel.PROGRESS_ONLY)
        self._already_outputted = True

    def _started(self, result: TestResult) -> None:
        if self._ignored(events.RUN_STARTED):
            return
        self.result = result
        self._output("Started")

    def _test_started(self, name: str) -> None:
        if self._ignored(events.TEST_STARTED):
            return
        self._output_single(f"{name}: ", None, OutputLevel.VERBOSE)

    def _test_finished(self, name: str) -> None:
        if self._ignored(events.TEST_FINISHED):
            return
        if not self._already_outputted:
            self._output_single(".", self.color_scheme.color_for("success"), OutputLevel.PROGRESS_ONLY)
        self._nl(OutputLevel.VERBOSE)
        self._already_outputted = False

    def _finished(self, elapsed_time: float) -> None:
        if self._ignored(events.RUN_FINISHED):
            return
        if self._output_p(OutputLevel.NORMAL) and not self._output_p(OutputLevel.VERBOSE):
            self._nl()
        self._nl()
        self._output(f"Finished in {elapsed_time} seconds.")
        for index, fault in enumerate(self.faults, start=1):
            self._nl()
            self._output_single("%3d) " % index)
            self._output(self.format_fault(fault), self.fault_color(fault))
        self._nl()
        self._output("" if self.result is None else self.result, self.result_color())
        self.state = RunState.FINISHED

    # ---------- formatting ----------
    def format_fault(self, fault: Fault) -> str:
        return fault.long_display()

    def fault_color(self, fault: Fault) -> Optional[Color]:
        return self.color_scheme.color_for(fault.category)

    def result_color(self) -> Optional[Color]:
        if self.result is None:
            return None
        if self.result.passed:
            return self.color_scheme.color_for("success")
        if self.result.error_count > 0:
            return self.color_scheme.color_for("error")
        if self.result.failure_count > 0:
            return self.color_scheme.color_for("failure")
        return None

    # ---------- output primitives ----------
    def _nl(self, level: OutputLevel = OutputLevel.NORMAL) -> None:
        self._output("", None, level)

    def _output(self, something: Any, color: Optional[Color] = None,
                level: OutputLevel = OutputLevel.NORMAL) -> None:
        if not self._output_p(level):
            return
        self._output_single(something, color, level)
        self.output.write("\n")
        self.output.flush()

    def _output_single(self, something: Any, color: Optional[Color] = None,
                       level: OutputLevel = OutputLevel.NORMAL) -> None:
        if not self._output_p(level):
            return
        text = str(something)
        if self.use_color and color is not None:
            text = apply(text, color)
        self.output.write(text)
        self.output.flush()

    def _output_p(self, level: OutputLevel) -> bool:
        return should_show(level, self.output_level)
