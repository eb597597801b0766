"""
Fault kinds recorded while a test runs.

A fault's category is its class name lowercased; the console reporter uses it
to look up a display color.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Fault:
    test_name: str
    message: str = ""
    location: Optional[str] = None

    label = "Fault"
    single_character_display = "?"

    @property
    def category(self) -> str:
        return type(self).__name__.lower()

    def _where(self) -> str:
        return f"{self.test_name} [{self.location}]" if self.location else self.test_name

    def long_display(self) -> str:
        return f"{self.label}: {self.message}\n{self._where()}"

    def __str__(self) -> str:
        return self.long_display()


@dataclass
class Failure(Fault):
    label = "Failure"
    single_character_display = "F"

    def long_display(self) -> str:
        return f"{self.label}:\n{self._where()}:\n{self.message}"


@dataclass
class Error(Fault):
    exception_name: str = "Exception"
    backtrace: List[str] = field(default_factory=list)

    label = "Error"
    single_character_display = "E"

    @classmethod
    def from_exception(cls, test_name: str, exc: BaseException, backtrace: List[str]) -> "Error":
        return cls(test_name, str(exc), exception_name=type(exc).__name__,
                   backtrace=list(backtrace))

    def long_display(self) -> str:
        lines = [f"{self.label}:", f"{self.test_name}:", f"{self.exception_name}: {self.message}"]
        lines.extend(f"    {entry}" for entry in self.backtrace)
        return "\n".join(lines)


@dataclass
class Pending(Fault):
    label = "Pending"
    single_character_display = "P"


@dataclass
class Omission(Fault):
    label = "Omission"
    single_character_display = "O"


@dataclass
class Notification(Fault):
    label = "Notification"
    single_character_display = "N"
