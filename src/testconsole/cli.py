from typing import Optional
import importlib
import sys
import typer
from .config import load_options, ReporterOptions
from .output_level import OutputLevel
from .reporters.console import ConsoleReporter
from .runners.runner import TestSuite
from .logging import setup_logging

app = typer.Typer(add_completion=False, help="testconsole - run a test suite module with the console reporter")

def _load_suite_module(module: str):
    if "" not in sys.path:
        sys.path.insert(0, "")
    try:
        return importlib.import_module(module)
    except ImportError as e:
        typer.echo(f"Cannot import suite module {module!r}: {e}", err=True)
        raise typer.Exit(code=2)

@app.command()
def run(
    suite: str = typer.Argument(..., help="Importable module exposing discover(), e.g. tests.smoke"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML file with reporter options"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Label every test"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Progress marks and faults only"),
    silent: bool = typer.Option(False, "--silent", help="Print nothing"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Force color on/off (default: guess)"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level for diagnostics on stderr"),
):
    log = setup_logging(log_level)
    opts: ReporterOptions = load_options(config) if config else ReporterOptions()
    overrides = {}
    if silent:
        overrides["output_level"] = OutputLevel.SILENT
    elif quiet:
        overrides["output_level"] = OutputLevel.PROGRESS_ONLY
    elif verbose:
        overrides["output_level"] = OutputLevel.VERBOSE
    if color is not None:
        overrides["use_color"] = color
    if overrides:
        opts = opts.model_copy(update=overrides)
    log.debug("reporter options: %s", opts)

    mod = _load_suite_module(suite)
    result = ConsoleReporter(mod, options=opts).start()
    raise typer.Exit(code=0 if result.passed else 1)

@app.command("list")
def list_tests(suite: str = typer.Argument(..., help="Importable module exposing discover()")):
    for t in TestSuite.from_module(_load_suite_module(suite)).tests:
        typer.echo(t.name)
