# Rich console output: render a property catalog for terminal display.

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dotnet_shared.properties.models import PropertyDefinition, PropertyType

# Property type → Rich style
TYPE_STYLE = {
    PropertyType.STRING: "green",
    PropertyType.BOOLEAN: "bold blue",
}


def _category_label(definition: PropertyDefinition) -> str:
    if definition.category and definition.sub_category:
        return f"{definition.category} / {definition.sub_category}"
    return definition.category or ""


def print_catalog(
    definitions: Sequence[PropertyDefinition],
    title: str | None = None,
    verbose: bool = False,
    console: Console | None = None,
) -> None:
    """
    Print property definitions as a Rich table, in registration order.

    Hidden properties are dimmed. If verbose, the description of every
    visible property is printed below the table.
    """
    if console is None:
        console = Console()

    if not definitions:
        console.print(
            Panel(
                "[yellow]No properties declared.[/yellow]",
                title=title or "Properties",
                border_style="yellow",
                box=box.ROUNDED,
            )
        )
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE,
        padding=(0, 1),
    )
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Type", width=8)
    table.add_column("Default")
    table.add_column("Multi", justify="center", width=5)
    table.add_column("Category")
    table.add_column("Index", justify="right", width=5)

    for d in definitions:
        key = Text(d.key, style="dim" if d.hidden else "cyan")
        if d.hidden:
            key.append(" (hidden)", style="dim italic")
        table.add_row(
            key,
            Text(d.type.value, style=TYPE_STYLE.get(d.type, "white")),
            d.default_value or "",
            "yes" if d.multi_values else "",
            _category_label(d),
            "" if d.index is None else str(d.index),
        )

    console.print(table)

    if verbose:
        for d in definitions:
            if d.hidden:
                continue
            console.print(f"[bold]{d.name}[/bold] [dim]({d.key})[/dim]")
            console.print(f"  {d.description}")
        console.print()

    _print_summary(definitions, console)


def _print_summary(definitions: Sequence[PropertyDefinition], console: Console) -> None:
    """Print a compact count of visible and hidden properties."""
    hidden = sum(1 for d in definitions if d.hidden)
    total = len(definitions)
    console.print(
        Panel(
            f"[bold]{total} propert{'ies' if total != 1 else 'y'}[/bold] | "
            f"{total - hidden} visible | [dim]{hidden} hidden[/dim]",
            title="Summary",
            border_style="green",
            box=box.ROUNDED,
        )
    )
