# Lightweight package init: avoid eager imports that can fail at console start.
__all__ = ["ConsoleReporter", "OutputLevel", "ReporterOptions"]

__version__ = "0.1.0"

def __getattr__(name):
    if name == "ConsoleReporter":
        from .reporters.console import ConsoleReporter as _ConsoleReporter
        return _ConsoleReporter
    if name == "OutputLevel":
        from .output_level import OutputLevel as _OutputLevel
        return _OutputLevel
    if name == "ReporterOptions":
        from .config import ReporterOptions as _ReporterOptions
        return _ReporterOptions
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
