"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from osmgeo.core.join import JoinedChain
from osmgeo.domain.turn import Turn
from osmgeo.geo.extent import Extent

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]osmgeo[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_graph_info(
    path: str,
    counts: dict[str, int],
    extent: Extent,
    intersections: int,
) -> None:
    """Print a summary of a loaded graph.

    Args:
        path: Path to the OSM file
        counts: Number of entities per type
        extent: Extent of all located nodes
        intersections: Number of highway intersection nodes
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(
        f"  {counts.get('node', 0):,} nodes {SYM_DOT} {counts.get('way', 0):,} ways "
        f"{SYM_DOT} {counts.get('relation', 0):,} relations"
    )
    if extent.is_empty():
        console.print("  No located nodes")
    else:
        console.print(f"  Extent {extent.to_param()}")
    console.print(f"  {intersections:,} highway intersections")


def print_turns(turns: list[Turn], inferred: dict[int, str] | None = None) -> None:
    """Print turns as a table.

    Args:
        turns: Turns to print, in enumeration order
        inferred: Inferred restriction type per turn index
    """
    if not turns:
        console.print("  No turns")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
    table.add_column("#", justify="right")
    table.add_column("From way")
    table.add_column("To way")
    table.add_column("To node")
    table.add_column("Restriction")
    if inferred is not None:
        table.add_column("Inferred")

    for i, turn in enumerate(turns):
        restriction = turn.restriction or ""
        if turn.indirect_restriction:
            restriction += " (indirect)"
        to_way = turn.to.way + (" (u-turn)" if turn.u else "")
        row = [str(i + 1), turn.from_.way, to_way, turn.to.node, restriction]
        if inferred is not None:
            row.append(inferred.get(i, ""))
        table.add_row(*row)

    console.print(table)


def print_chains(chains: list[JoinedChain]) -> None:
    """Print joined chains.

    Args:
        chains: Chains in the order they were started
    """
    for i, chain in enumerate(chains, start=1):
        closed = " [green](closed)[/green]" if chain.is_closed() else ""
        members = ", ".join(m.id for m in chain.members)
        console.print(f"  {i}. {members}{closed}")
        console.print(f"     {' '.join(chain.node_ids())}")


def print_tag_changes(before: dict[str, str], after: dict[str, str]) -> None:
    """Print tags that differ between two versions of an entity.

    Args:
        before: Tags before the change
        after: Tags after the change
    """
    removed = sorted(set(before) - set(after))
    added = sorted(set(after) - set(before))
    changed = sorted(k for k in set(before) & set(after) if before[k] != after[k])

    if not (removed or added or changed):
        console.print("  Tags unchanged")
        return

    for key in removed:
        console.print(f"  [red]-[/red] {key}={before[key]}")
    for key in added:
        console.print(f"  [green]+[/green] {key}={after[key]}")
    for key in changed:
        console.print(f"  [yellow]~[/yellow] {key}={before[key]} {SYM_STEP} {after[key]}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(message: str, total_time_s: float | None = None) -> None:
    """Print success message.

    Args:
        message: What was completed
        total_time_s: Total run time in seconds
    """
    suffix = f" in {_format_time(total_time_s)}" if total_time_s is not None else ""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]{suffix}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
