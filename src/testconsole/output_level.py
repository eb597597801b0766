from enum import IntEnum
from typing import Union


class OutputLevel(IntEnum):
    """How much detail the console reporter prints, least to most."""
    SILENT = 0
    PROGRESS_ONLY = 1
    NORMAL = 2
    VERBOSE = 3

    @classmethod
    def parse(cls, value: Union["OutputLevel", int, str]) -> "OutputLevel":
        """Accept an OutputLevel, its int value or its name (any case, '-' or '_')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid output level: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(
                    f"Invalid output level {value!r}; expected 0-{max(cls).value}"
                ) from None
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
        names = ", ".join(m.name.lower() for m in cls)
        raise ValueError(f"Invalid output level {value!r}; expected one of: {names}")


def should_show(message_level: OutputLevel, configured_level: OutputLevel) -> bool:
    return message_level <= configured_level
