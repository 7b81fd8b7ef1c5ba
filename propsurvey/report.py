"""Terminal rendering of a measurement session.

Builds the same information as the measurements side panel of the map app
(point and selection counts, the live readout of the armed pair, one row per
measured wall and the wall total) as rich renderables.
"""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from propsurvey.geo import format_decimal, format_dms
from propsurvey.survey import MeasurementSession

CONSOLE = Console()


def measurements_table(session: MeasurementSession) -> Table:
    """One row per measured wall: label, bearing, distance, start and end."""
    table = Table(title="Wall Measurements", title_justify="left")
    table.add_column("Wall", style="bold")
    table.add_column("Bearing from North", justify="right")
    table.add_column("Distance", justify="right")
    table.add_column("Start", style="dim")
    table.add_column("End", style="dim")

    for line in session.lines:
        table.add_row(
            line.label,
            line.bearing_label,
            line.distance_label,
            format_decimal(line.start),
            format_decimal(line.end),
        )
    return table


def session_panel(session: MeasurementSession) -> Panel:
    """Full measurements panel for ``session``."""
    summary = session.summary()

    counts = Table.grid(padding=(0, 2))
    counts.add_row("[b]Points[/b]: ", str(summary["marker_count"]))
    counts.add_row("[b]Selected[/b]: ", str(summary["selected_count"]))

    parts = [counts]

    preview = session.preview
    if preview is not None:
        parts.append(
            Text.assemble(
                ("Selected pair: ", "bold green"),
                f"{preview.bearing_label}, {preview.distance_label} ",
                (f"(from {format_dms(preview.start)} to {format_dms(preview.end)})", "dim"),
            )
        )

    if session.lines:
        parts.append(measurements_table(session))
        parts.append(Text(f"Total walls measured: {summary['line_count']}", style="dim"))
    else:
        parts.append(Text("No measurements yet", style="dim italic"))

    return Panel(Group(*parts), title="Measurements", padding=(1, 2))


def render_session(session: MeasurementSession, console: Console | None = None) -> None:
    """Print the measurements panel of ``session``."""
    (console or CONSOLE).print(session_panel(session))
