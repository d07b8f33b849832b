"""CLI interface for cursecov"""

import logging
from pathlib import Path
from typing import Optional

import click

from cursecov import __version__
from cursecov.application.coverage_service import CoverageService
from cursecov.application.report_renderer import render_report
from cursecov.domain.errors import ConfigurationError, CursecovError
from cursecov.infrastructure.config.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


@click.command()
@click.option(
    "--include-pattern",
    type=str,
    default=None,
    help="Comma-separated glob patterns of files to include (default: **/*.js,**/*.ts).",
)
@click.option(
    "--ignore-pattern",
    type=str,
    default=None,
    help="Comma-separated glob patterns of files to ignore (default: none).",
)
@click.option(
    "--min-coverage",
    type=float,
    default=None,
    help="Minimum percentage of comments that need curse words (default: 30).",
)
@click.option("--verbose", "-v", is_flag=True, help="Print a per-file report and enable debug logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .cursecov.yml config file",
)
@click.version_option(__version__, prog_name="cursecov")
def cli(
    include_pattern: Optional[str],
    ignore_pattern: Optional[str],
    min_coverage: Optional[float],
    verbose: bool,
    config: Optional[Path],
):
    """Analyze the percentage of curse word comments in JS/TS projects."""
    setup_logging(verbose)

    try:
        config_manager = ConfigManager(
            config_path=config,
            overrides={
                "patterns": {"include": include_pattern, "ignore": ignore_pattern},
                "coverage": {"min_coverage": min_coverage},
            },
        )
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)

    service = CoverageService()
    try:
        report = service.run(
            config_manager.get_include_patterns(),
            config_manager.get_ignore_patterns(),
        )
    except CursecovError as e:
        _die(str(e), verbose=verbose, exc=e)

    if verbose:
        click.echo(render_report(report))

    result = service.check(report, config_manager.get_min_coverage())
    if not result.passed:
        _die(result.message)

    logger.info(f"Curse word coverage: {result.coverage}% (minimum {result.min_coverage:g}%)")


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
