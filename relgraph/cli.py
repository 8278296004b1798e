"""CLI entrypoint for relgraph."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="relgraph")
@click.option("--verbose", is_flag=True, default=False, help="Log pipeline stages at DEBUG level")
def cli(verbose: bool) -> None:
    """relgraph - Lay out source/platform/downstream relationship graphs.

    Build positioned, styled graphs from relationship records and write them
    as JSON, SVG, HTML, DOT or a summary.
    """
    _setup_logging(verbose)


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    required=True,
    help="Record file (JSON or YAML with 'sources' and 'downstreams')",
)
@click.option(
    "--mode",
    type=click.Choice(["traditional", "venn", "column"]),
    default=None,
    help="Layout strategy (defaults to the config file's, else traditional)",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "svg", "html", "dot", "md", "rich"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option("--highlight", default=None, help="Node id to highlight (lower-cased name)")
@click.option("--seed", type=int, default=None, help="Seed for pixel jitter, for reproducible output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config with mode, threshold, seed, colors and size",
)
@click.option("--top", type=int, default=15, show_default=True, help="Entities listed in md/rich summaries")
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write output to a file")
def build(
    input_path: Path,
    mode: str | None,
    fmt: str,
    highlight: str | None,
    seed: int | None,
    config_path: Path | None,
    top: int,
    out: Path | None,
) -> None:
    """Build and render the relationship graph for a record file."""
    from .commands.build_cmd import run_build

    try:
        exit_code = run_build(
            input_path,
            mode=mode,
            fmt=fmt,
            out=out,
            highlight=highlight,
            seed=seed,
            config_path=config_path,
            top=top,
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@cli.command()
@click.option(
    "--profile",
    type=click.Choice(["entities", "layered"]),
    default="entities",
    show_default=True,
    help="Synthetic data shape ('layered' suits the column layout)",
)
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write records to a file")
def demo(profile: str, seed: int | None, out: Path | None) -> None:
    """Generate a synthetic record file."""
    from .commands.demo_cmd import run_demo

    try:
        exit_code = run_demo(profile=profile, seed=seed, out=out)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
