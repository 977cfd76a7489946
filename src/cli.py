import logging
import sys
from pathlib import Path

import click

from src.batch.runner import run_batch
from src.core.errors import ConstantTermError
from src.logging_config import configure_logging
from src.solver import solve_text

log = logging.getLogger("constant_term.cli")


def _solve_or_exit(text: str) -> None:
    try:
        click.echo(solve_text(text))
    except ConstantTermError as e:
        log.debug("single input failed", exc_info=True)
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


def _run_directory(directory: Path) -> None:
    outcomes = run_batch(directory)
    if not outcomes:
        click.echo(f"No input files found in {directory}.", err=True)
        sys.exit(1)
    for outcome in outcomes:
        click.echo(outcome.render(), err=not outcome.ok)
    if not all(outcome.ok for outcome in outcomes):
        sys.exit(1)


@click.command(
    name="constant-term",
    help="Recover the constant term of the polynomial through keys.k base-N encoded points. "
         "PATH may be a JSON file or a directory of JSON files; without PATH, stdin is read "
         "when it is piped, otherwise the current directory is processed.",
)
@click.argument("path", required=False, type=click.Path(exists=True, path_type=Path))
@click.option("--stdin", "from_stdin", is_flag=True, help="Read a single record from stdin")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
def main(path, from_stdin, log_level):
    configure_logging(level=log_level)
    stdin = click.get_text_stream("stdin")

    if from_stdin or (path is None and not stdin.isatty()):
        _solve_or_exit(stdin.read())
    elif path is not None and path.is_file():
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"ERROR: {e}", err=True)
            sys.exit(1)
        _solve_or_exit(text)
    else:
        _run_directory(path if path is not None else Path.cwd())


if __name__ == '__main__':
    main()
