"""CLI application entry point for osmgeo.

This module provides the main CLI interface using Typer.
"""

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, TypeVar

import structlog
import typer

from osmgeo import __version__
from osmgeo.actions import reverse_way
from osmgeo.cli.output import (
    console,
    print_chains,
    print_error,
    print_graph_info,
    print_header,
    print_step,
    print_success,
    print_tag_changes,
    print_turns,
)
from osmgeo.config import LoggingConfig, OsmGeoSettings
from osmgeo.core import Intersection, infer_restriction, join_ways
from osmgeo.domain import Entity, Node, Relation, Way
from osmgeo.exceptions import OsmGeoError
from osmgeo.geo import Extent
from osmgeo.graph import Graph
from osmgeo.io import GeoJSONWriter, OsmJsonReader, write_osm_json
from osmgeo.utils import OperationLogger, configure_logging

EntityT = TypeVar("EntityT", bound=Entity)

# Create the Typer app
app = typer.Typer(
    name="osmgeo",
    help="Inspect OpenStreetMap data: junction turns, way joining, reversal and export.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by all commands."""

    settings: OsmGeoSettings
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]osmgeo[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def global_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect OpenStreetMap data in OSM JSON format."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = OsmGeoSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    ctx.obj = CliState(settings=settings, quiet=quiet)


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState(settings=OsmGeoSettings())


def _operation_logger(state: CliState) -> OperationLogger:
    """Create the run logger, writing a log file only when one was requested."""
    config = state.settings.logging
    if config.log_file is not None:
        logger = configure_logging(
            log_file=config.log_file,
            console_level=config.log_level,
            file_level=config.file_log_level,
            quiet=True,
        )
    else:
        logger = structlog.wrap_logger(
            logging.getLogger("osmgeo"),
            wrapper_class=structlog.stdlib.BoundLogger,
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
        )
    return OperationLogger(logger)


def _load_graph(path: Path, state: CliState, run: OperationLogger) -> Graph:
    """Load an OSM JSON file, printing a step unless quiet.

    Raises:
        typer.Exit: If the file is missing or cannot be loaded
    """
    if not path.is_file():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    if not state.quiet:
        print_step("Loading OSM data")

    with OsmJsonReader(path) as reader:
        graph = reader.graph
    run.log_graph_loaded(str(path), len(graph))
    return graph


def _require(graph: Graph, entity_id: str, kind: type[EntityT]) -> EntityT:
    entity = graph.entity(entity_id)
    if not isinstance(entity, kind):
        print_error(f"{entity_id} is a {entity.type}, expected a {kind.__name__.lower()}")
        raise typer.Exit(code=1)
    return entity


def _run(
    operation: str,
    ctx: typer.Context,
    body: Callable[[CliState, OperationLogger], str | None],
) -> None:
    """Run a command body with shared logging and error reporting.

    A body may return a success message, printed with the run time once the
    operation has finished.
    """
    state = _state(ctx)
    run = _operation_logger(state)
    run.start(operation)

    if not state.quiet:
        print_header(__version__)

    try:
        message = body(state, run)
    except typer.Exit:
        raise
    except OsmGeoError as e:
        run.log_error(operation, e)
        print_error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        run.finish(operation)

    if message and not state.quiet:
        print_success(message, total_time_s=run.stats.duration_seconds)


@app.command()
def info(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to OSM JSON file", show_default=False),
    ],
) -> None:
    """Summarize an OSM JSON file.

    Prints entity counts, the extent of all located nodes and the number of
    nodes where highways meet.

    Example:
        osmgeo info map.json
    """

    def body(state: CliState, run: OperationLogger) -> None:
        graph = _load_graph(input_file, state, run)

        counts = Counter(entity.type for entity in graph)
        extent = Extent()
        intersections = 0
        for entity in graph:
            if isinstance(entity, Node):
                extent = extent.extend(entity.extent())
                if entity.is_highway_intersection(graph):
                    intersections += 1

        print_graph_info(str(input_file), dict(counts), extent, intersections)

    _run("info", ctx, body)


@app.command()
def turns(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to OSM JSON file", show_default=False),
    ],
    vertex: Annotated[
        str,
        typer.Argument(help="Junction node id (e.g. n42)", show_default=False),
    ],
    from_node: Annotated[
        str,
        typer.Argument(help="Node id next to the junction on the incoming way", show_default=False),
    ],
    infer: Annotated[
        bool,
        typer.Option(
            "--infer/--no-infer",
            help="Show the restriction type implied by each turn's angle",
        ),
    ] = True,
) -> None:
    """List the turns from one approach to a junction.

    Example:
        osmgeo turns map.json n2 n1
    """

    def body(state: CliState, run: OperationLogger) -> None:
        graph = _load_graph(input_file, state, run)
        _require(graph, vertex, Node)
        _require(graph, from_node, Node)

        result = Intersection(graph, vertex).turns(from_node)
        run.log_turns(vertex, from_node, len(result))

        inferred = None
        if infer:
            projection = state.settings.projection.to_projection()
            inferred = {
                i: infer_restriction(graph, turn.from_, turn.via, turn.to, projection)
                for i, turn in enumerate(result)
            }

        if not state.quiet:
            print_step(f"Turns at {vertex} from {from_node}")
        print_turns(result, inferred)

    _run("turns", ctx, body)


@app.command()
def join(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to OSM JSON file", show_default=False),
    ],
    entity_ids: Annotated[
        list[str],
        typer.Argument(
            help="Way ids to join; a relation id joins its members",
            show_default=False,
        ),
    ],
) -> None:
    """Join ways into connected chains.

    Example:
        osmgeo join map.json w1 w2 w3
    """

    def body(state: CliState, run: OperationLogger) -> None:
        graph = _load_graph(input_file, state, run)

        members: list = []
        for entity_id in entity_ids:
            entity = graph.entity(entity_id)
            if isinstance(entity, Relation):
                members.extend(entity.members)
            else:
                members.append(entity)

        chains = join_ways(
            members, graph, reverse_tagged=state.settings.join.reverse_tagged_members
        )
        run.log_join(len(members), len(chains))

        if not state.quiet:
            print_step(f"{len(chains)} chains")
        print_chains(chains)

    _run("join", ctx, body)


@app.command()
def reverse(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to OSM JSON file", show_default=False),
    ],
    way_id: Annotated[
        str,
        typer.Argument(help="Id of the way to reverse (e.g. w42)", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the updated data to this OSM JSON file",
        ),
    ] = None,
) -> None:
    """Reverse a way, correcting direction-dependent tags and roles.

    Example:
        osmgeo reverse map.json w42 -o reversed.json
    """

    def body(state: CliState, run: OperationLogger) -> str | None:
        graph = _load_graph(input_file, state, run)
        before = _require(graph, way_id, Way)

        updated = reverse_way(graph, way_id)
        after = updated.entity(way_id)
        run.log_reverse(way_id)

        if not state.quiet:
            print_step(f"Reversed {way_id}")
        console.print(f"  {' '.join(after.nodes)}")
        print_tag_changes(dict(before.tags), dict(after.tags))

        if output is not None:
            write_osm_json(updated, output)  # type: ignore[arg-type]
            return f"Wrote {output}"
        return None

    _run("reverse", ctx, body)


@app.command()
def export(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to OSM JSON file", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Path of the GeoJSON file to write", show_default=False),
    ],
) -> None:
    """Export all ways as a GeoJSON FeatureCollection.

    Closed area ways become Polygons; all other ways become LineStrings.

    Example:
        osmgeo export map.json ways.geojson
    """

    def body(state: CliState, run: OperationLogger) -> str:
        graph = _load_graph(input_file, state, run)

        writer = GeoJSONWriter(graph, output)
        added = writer.add_ways()
        writer.save()

        skipped = len(writer.skipped)
        suffix = f" ({skipped} incomplete skipped)" if skipped else ""
        return f"Exported {added} ways to {output}{suffix}"

    _run("export", ctx, body)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
