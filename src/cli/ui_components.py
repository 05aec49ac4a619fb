"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Record blocks on stdout stay plain text; Rich output goes to stderr.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import PersonRecord


def print_banner(console: Console) -> None:
    """Print the summary banner."""

    title = Text("PERSON-RECORDS", style="bold cyan")
    subtitle = Text("Construct • Print • Release", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_persons_table(records: Iterable[PersonRecord]) -> Table:
    """One row per record, in print order."""

    table = Table(title="Persons")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Age", style="white", justify="right")
    table.add_column("Address", style="white")
    table.add_column("Occupation", style="magenta")
    table.add_column("Gender", style="green")
    for record in records:
        table.add_row(
            record.name,
            str(record.age),
            record.address,
            record.occupation,
            record.gender_label(),
        )
    return table
