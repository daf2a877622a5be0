"""Command-line interface for dotlang."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import Engine, OutputFormat, RenderConfig, RenderError
from .gallery import EXAMPLES, build_example
from .visualization import GraphRenderer

# Setup rich console
console = Console()

ENGINE_CHOICES = [engine.value for engine in Engine]
FORMAT_CHOICES = [fmt.value for fmt in OutputFormat]


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _fail(error: Exception) -> None:
    console.print(f"Error: {error}", style="red")
    if logging.getLogger().level == logging.DEBUG:
        console.print_exception()
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(package_name="python-dotlang")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dotlang - build and render Graphviz DOT graphs.

    \b
    Examples:
      dotlang render graph.dot -o graph.svg
      dotlang render graph.dot -o graph.png -f png -e neato
      dotlang examples out/            # Render every bundled example
      dotlang show clusters            # Print DOT source of an example
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file path (default: input file with the format's extension)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="svg",
    help="Output format (default: svg)",
)
@click.option(
    "--engine",
    "-e",
    type=click.Choice(ENGINE_CHOICES),
    default="dot",
    help="Graphviz layout engine (default: dot)",
)
@click.pass_context
def render(
    ctx: click.Context,
    input_file: Path,
    output: Path | None,
    output_format: str,
    engine: str,
) -> None:
    """Render a DOT file to an image with Graphviz."""
    try:
        verbose_mode = ctx.obj.get("verbose", False)
        config = RenderConfig(
            engine=Engine(engine),
            output_format=OutputFormat(output_format),
            verbose=verbose_mode,
        )
        renderer = GraphRenderer(config)

        output_file = output or input_file.with_suffix(f".{output_format}")
        output_path = renderer.render_to_file(input_file.read_text(encoding="utf-8"), output_file)

        console.print(f"{output_path}", style="green")

    except Exception as e:
        _fail(e)


@cli.command("examples")
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path), default=Path("examples"))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="svg",
    help="Output format (default: svg)",
)
@click.option("--save-dot", is_flag=True, help="Save DOT source files alongside output")
@click.pass_context
def render_examples(ctx: click.Context, output_dir: Path, output_format: str, save_dot: bool) -> None:
    """Render every bundled example graph into OUTPUT_DIR."""
    try:
        verbose_mode = ctx.obj.get("verbose", False)
        renderer = GraphRenderer(RenderConfig(output_format=OutputFormat(output_format), verbose=verbose_mode))

        for name, (factory, engine) in EXAMPLES.items():
            if verbose_mode:
                console.print(f"Rendering example '{name}' with {engine.value}...", style="blue")

            dot_content = factory().source
            target = output_dir / f"{name}.{output_format}"
            if save_dot:
                renderer.save_dot_file(dot_content, target)
            output_path = renderer.render_to_file(dot_content, target, engine=engine)
            console.print(f"{output_path}", style="green")

    except Exception as e:
        _fail(e)


@cli.command("show")
@click.argument("name", type=click.Choice(list(EXAMPLES)))
def show_example(name: str) -> None:
    """Print the DOT source of a bundled example."""
    click.echo(build_example(name).source)


@cli.command("validate")
def validate_prerequisites() -> None:
    """Validate prerequisites for rendering."""
    table = Table(title="Prerequisites Validation")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="magenta")
    table.add_column("Description", style="green")

    try:
        renderer = GraphRenderer()
        engines = renderer.get_available_engines()
        graphviz_ok = True
    except RenderError as e:
        engines = []
        graphviz_ok = False
        console.print(f"Failed to initialize: {e}", style="red")

    table.add_row("Graphviz", "OK" if graphviz_ok else "FAILED", "Graphviz 'dot' executable on PATH")
    table.add_row(
        "Engines",
        ", ".join(engines) if engines else "none",
        "Layout engines found on PATH",
    )
    console.print(table)

    if not graphviz_ok:
        console.print("Install Graphviz: https://graphviz.org/download/", style="yellow")
        sys.exit(1)

    console.print("\nAll prerequisites validated successfully!", style="green bold")


@cli.command("info")
def show_info() -> None:
    """Show information about supported engines, formats, and examples."""
    engine_descriptions = {
        "dot": "Hierarchical layouts of directed graphs (default)",
        "neato": "Spring model layouts",
        "fdp": "Force-directed placement",
        "sfdp": "Multiscale force-directed placement for large graphs",
        "circo": "Circular layouts",
        "twopi": "Radial layouts",
    }

    engines_table = Table(title="Supported Engines")
    engines_table.add_column("Engine", style="cyan")
    engines_table.add_column("Description", style="green")
    for engine in Engine:
        engines_table.add_row(engine.value, engine_descriptions.get(engine.value, ""))
    console.print(engines_table)

    formats_table = Table(title="Supported Output Formats")
    formats_table.add_column("Format", style="cyan")
    for fmt in OutputFormat:
        formats_table.add_row(fmt.value)
    console.print(formats_table)

    examples_table = Table(title="Bundled Examples")
    examples_table.add_column("Name", style="cyan")
    examples_table.add_column("Engine", style="magenta")
    examples_table.add_column("Description", style="green")
    for name, (factory, engine) in EXAMPLES.items():
        examples_table.add_row(name, engine.value, (factory.__doc__ or "").strip())
    console.print(examples_table)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
