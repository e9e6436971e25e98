"""Command-line interface for BarelyML."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from barelyml import __version__
from barelyml.config import get_settings
from barelyml.core.layout import height_required
from barelyml.formats import SUPPORTED_DIALECTS, convert, detect_dialect
from barelyml.formatting.ir import (
    AdmonitionBlock,
    Block,
    Document,
    ImageBlock,
    InlineRun,
    ListItem,
    TableBlock,
    TextBlock,
)
from barelyml.formatting.options import ParseOptions
from barelyml.formatting.parser import parse_document

app = typer.Typer(
    name="barelyml",
    help="Parse, inspect and convert BarelyML markup.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"BarelyML v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """BarelyML markup tools."""


def resolve_dialect(path: Path, dialect: Optional[str]) -> str:
    """Use an explicit dialect, or guess one from the file extension."""
    if dialect:
        name = dialect.lower()
        if name not in SUPPORTED_DIALECTS:
            raise ValueError(
                f"Unsupported dialect: {dialect}. "
                f"Supported dialects: {', '.join(SUPPORTED_DIALECTS)}"
            )
        return name
    return detect_dialect(path)


def render_runs(runs: tuple[InlineRun, ...]) -> Text:
    """Turn inline runs into styled rich text."""
    text = Text()
    for run in runs:
        if run.line_break:
            text.append("\n")
            continue
        styles = [run.color.rgb_hex]
        if run.bold:
            styles.append("bold")
        if run.italic:
            styles.append("italic")
        if run.scale > 1.0:
            styles.append("underline")
        text.append(run.text, style=" ".join(styles))
    text.rstrip()
    return text


def render_block(block: Block) -> object:
    """Build a rich renderable for one block."""
    if isinstance(block, TextBlock):
        return render_runs(block.runs)

    if isinstance(block, AdmonitionBlock):
        return Panel(
            render_runs(block.runs),
            title=block.kind.name,
            title_align="left",
            border_style=block.accent.rgb_hex,
        )

    if isinstance(block, ListItem):
        line = Text(" " * (block.indent // 5))
        if block.label:
            line.append(block.label_text + " ")
        line.append_text(render_runs(block.runs))
        return line

    if isinstance(block, ImageBlock):
        if block.is_missing:
            return Text.assemble(("[image] ", "dim"), render_runs(block.missing_message))
        return Text(
            f"[image] {block.filename} ({block.drawable.width}x{block.drawable.height})",
            style="dim",
        )

    if isinstance(block, TableBlock):
        table = Table(show_header=False, show_lines=True)
        for _ in range(block.column_count):
            table.add_column()
        for row in block.rows:
            cells = []
            for cell in row:
                if cell.drawable is not None:
                    cells.append(Text(f"[image] {cell.image.filename}", style="dim"))
                else:
                    content = render_runs(cell.runs)
                    if cell.is_header:
                        content.stylize("bold")
                    cells.append(content)
            table.add_row(*cells)
        return table

    raise TypeError(f"Unknown block type: {type(block).__name__}")


def show_document(document: Document, width: int, options: ParseOptions) -> None:
    for index, block in enumerate(document):
        height = height_required(block, width, options)
        console.print(
            f"[blue]#{index} {type(block).__name__}[/blue] "
            f"[dim](height {height:.1f})[/dim]"
        )
        console.print(render_block(block))

    links = document.links
    if links:
        console.print("\n[bold]Links:[/bold]")
        for link in links:
            console.print(f"  {link.label} -> {link.target}")


@app.command("convert")
def convert_command(
    path: Path = typer.Argument(
        ...,
        help="File to convert",
        exists=True,
        dir_okay=False,
    ),
    source: Optional[str] = typer.Option(
        None,
        "--from",
        "-f",
        help="Source dialect (default: guessed from the file extension)",
    ),
    target: str = typer.Option(
        "barelyml",
        "--to",
        "-t",
        help=f"Target dialect: {', '.join(SUPPORTED_DIALECTS)}",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: print to stdout)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Convert a document between BarelyML, Markdown, DokuWiki and AsciiDoc.

    Examples:

        barelyml convert notes.md --to barelyml

        barelyml convert page.dw --to asciidoc -o page.adoc
    """
    try:
        source_name = resolve_dialect(path, source)
        target_name = resolve_dialect(path, target)
        if verbose:
            console.print(f"[blue]Converting:[/blue] {path}")
            console.print(f"[blue]Dialects:[/blue] {source_name} -> {target_name}")

        result = convert(path.read_text(encoding="utf-8"), source_name, target_name)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if output is None:
        typer.echo(result, nl=False)
        return

    try:
        output.write_text(result, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error writing {output}:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]Success:[/green] {output}")


@app.command("show")
def show_command(
    path: Path = typer.Argument(
        ...,
        help="File to display",
        exists=True,
        dir_okay=False,
    ),
    dialect: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Input dialect (default: guessed from the file extension)",
    ),
    width: int = typer.Option(
        600,
        "--width",
        "-w",
        min=1,
        help="Layout width in pixels used for block heights",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Parse a document and print its blocks, links and layout heights."""
    settings = get_settings()
    try:
        name = resolve_dialect(path, dialect)
        markup = convert(path.read_text(encoding="utf-8"), name, "barelyml")
        options = ParseOptions.from_settings(settings)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if verbose:
        console.print(f"[blue]Showing:[/blue] {path} ({name})")
        if settings.image_dir is None:
            console.print("[yellow]Warning:[/yellow] no image directory configured")

    show_document(parse_document(markup, options), width, options)


if __name__ == "__main__":
    app()
