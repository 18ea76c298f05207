"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from presentation details.
- Everything renders on stderr; stdout belongs to the MCP stdio protocol.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tmdb_mcp import __version__


def print_banner(console: Console) -> None:
    title = Text(f"tmdb-mcp {__version__}", style="bold cyan")
    subtitle = Text("TMDB queries over the Model Context Protocol", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_doctor_table() -> Table:
    table = Table(title="tmdb-mcp Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
