"""Root CLI command: ``baconctl [-l] INPUT_FILE``.

Parses the movie file, then answers Bacon-number queries read from
stdin, one actor name per line, until ``exit`` or end of input.
"""

from __future__ import annotations

from pathlib import Path

import click

from baconctl import __version__
from baconctl.commands._base import BaconCommand
from baconctl.commands._context import AppContext, text_stream
from baconctl.commands.loop import run_queries
from baconctl.config.settings import BaconSettings

_EXAMPLES = """\
  echo "Tom Hanks" | baconctl movies.txt
  baconctl -l movies.txt
  baconctl --reference "Meryl Streep" -l movies.txt
  baconctl --json movies.txt < queries.txt
  baconctl --dump movies.txt"""


@click.command(cls=BaconCommand, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="baconctl")
@click.option("-l", "--list-path", is_flag=True, help="Print the chain of connecting movies.")
@click.option("-r", "--reference", default=None, help="Reference actor (default: Kevin Bacon).")
@click.option("--json", "json_output", is_flag=True, help="One JSON result per query.")
@click.option("--dump", is_flag=True, help="List actors and their movies, then exit.")
@click.option("--dump-movies", is_flag=True, help="List movies and their casts, then exit.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and query timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.argument("input_file", type=click.Path(path_type=Path))
@click.pass_context
def cli(
    ctx: click.Context,
    list_path: bool,
    reference: str | None,
    json_output: bool,
    dump: bool,
    dump_movies: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    input_file: Path,
) -> None:
    """baconctl — compute Bacon numbers from a movie cast file.

    INPUT_FILE lists movies as "Movie: <title>" lines, each followed by
    one actor name per line. Queries are read from stdin.
    """
    settings = BaconSettings.from_cli(
        config_path=config_path,
        reference=reference,
        list_path=list_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    store = app.load(input_file)

    if dump or dump_movies:
        from baconctl.output.renderers import render_graph_dump

        listing = render_graph_dump(store, by_movie=dump_movies, color=settings.output.color)
        if listing:
            click.echo(listing, file=app.stdout)
        return

    ctx.exit(run_queries(app, text_stream("stdin")))
