from dataclasses import dataclass, field
from types import ModuleType
from typing import Callable, List
from ..faults import Error, Failure, Fault, Notification, Omission, Pending


class AssertionFailedError(AssertionError):
    pass

class PendedError(Exception):
    pass

class OmittedError(Exception):
    pass


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"

@dataclass
class TestResult:
    # Prevent pytest from collecting this as a test class
    __test__ = False

    run_count: int = 0
    assertion_count: int = 0
    faults: List[Fault] = field(default_factory=list)

    def add_fault(self, fault: Fault) -> None:
        self.faults.append(fault)

    def _count(self, kind: type) -> int:
        return sum(1 for f in self.faults if isinstance(f, kind))

    @property
    def failure_count(self) -> int: return self._count(Failure)
    @property
    def error_count(self) -> int: return self._count(Error)
    @property
    def pending_count(self) -> int: return self._count(Pending)
    @property
    def omission_count(self) -> int: return self._count(Omission)
    @property
    def notification_count(self) -> int: return self._count(Notification)

    @property
    def passed(self) -> bool:
        return self.failure_count == 0 and self.error_count == 0

    def __str__(self) -> str:
        return ", ".join([
            _plural(self.run_count, "test"),
            _plural(self.assertion_count, "assertion"),
            _plural(self.failure_count, "failure"),
            _plural(self.error_count, "error"),
            _plural(self.pending_count, "pending"),
            _plural(self.omission_count, "omission"),
            _plural(self.notification_count, "notification"),
        ])


class TestContext:
    """Handed to each test body; records assertions and notifications."""
    __test__ = False

    def __init__(self, name: str, result: TestResult):
        self.name = name
        self._result = result
        self.notifications: List[Notification] = []

    def assert_true(self, condition: object, message: str = "") -> None:
        self._result.assertion_count += 1
        if not condition:
            raise AssertionFailedError(message or f"<{condition!r}> is not true.")

    def pend(self, message: str = "pended.") -> None:
        raise PendedError(message)

    def omit(self, message: str = "omitted.") -> None:
        raise OmittedError(message)

    def notify(self, message: str) -> None:
        self.notifications.append(Notification(self.name, message))


class TestCase:
    __test__ = False

    def __init__(self, name: str, func: Callable[[TestContext], None]):
        self.name = name
        self.func = func

    def run(self, ctx: TestContext):
        return self.func(ctx)

    def __repr__(self) -> str:
        return f"TestCase({self.name!r})"


class TestSuite:
    __test__ = False

    def __init__(self, name: str, tests: List[TestCase]):
        self.name = name
        self.tests = list(tests)

    @classmethod
    def from_module(cls, module: ModuleType) -> "TestSuite":
        discover = getattr(module, "discover", None)
        if discover is None:
            raise ValueError(f"Suite module {module.__name__!r} has no discover() function")
        return cls(module.__name__, discover())

    def __len__(self) -> int:
        return len(self.tests)

    def __str__(self) -> str:
        return self.name
