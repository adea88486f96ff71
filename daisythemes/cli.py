"""Command-line interface: extract-daisyui-themes."""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from daisythemes import __version__
from daisythemes.app import configure_logging
from daisythemes.config.settings import ExtractorSettings, split_theme_list
from daisythemes.errors import DaisyThemesError, format_error_for_user
from daisythemes.themes.css import read_css_file
from daisythemes.themes.extractor import ThemeExtractor
from daisythemes.themes.models import ExtractionPlan, ExtractionResult, ThemeOutcome
from daisythemes.themes.modules import NodeModuleLoader
from daisythemes.themes.output import write_themes_json
from daisythemes.themes.resolver import ThemeModuleResolver

app = typer.Typer(
    add_completion=False,
    help=(
        "Extract daisyUI themes and convert OKLCH colors to hex format. "
        "Property names are cleaned (removes -- and color- prefixes)."
    ),
    epilog=(
        "Examples: extract-daisyui-themes -t forest,dark,light -o ./output/themes.json | "
        "extract-daisyui-themes --read-css --css-path ./src/styles.css"
    ),
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def display_path(path: Path) -> str:
    """Show *path* relative to the working directory when it lives inside it."""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"extract-daisyui-themes {__version__}")
        raise typer.Exit()


@app.command()
def extract(
    themes_arg: str | None = typer.Argument(
        None, metavar="[THEMES]", help="Comma-separated theme names (same as --themes)"
    ),
    themes: str | None = typer.Option(
        None, "--themes", "-t", help="Comma-separated list of theme names (required if not using --read-css)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output JSON file path (default: ./themes.json)"
    ),
    read_css: bool = typer.Option(False, "--read-css", help="Read themes from CSS file"),
    css_path: Path | None = typer.Option(
        None, "--css-path", help="Path to CSS file (default: src/index.css)"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Extract daisyUI themes into a JSON file."""
    try:
        settings = ExtractorSettings.load(config)
    except DaisyThemesError as exc:
        err_console.print(f"[red]Error loading config:[/red] {escape(exc.message)}")
        raise typer.Exit(code=1)

    configure_logging(err_console, verbose=verbose, log_file=settings.log_file)

    theme_names = split_theme_list(themes or themes_arg) or settings.themes
    read_css = read_css or settings.read_css
    if not read_css and not theme_names:
        err_console.print("[red]Error: No themes specified and --read-css not enabled.[/red]")
        err_console.print("[yellow]Use -t or --themes flag, or enable --read-css.[/yellow]")
        err_console.print("[dim]Run with --help for usage information.[/dim]")
        raise typer.Exit(code=1)

    output_path = (output or Path(settings.output)).resolve()
    css_file = (css_path or Path(settings.css_path)).resolve()

    try:
        _run(settings, theme_names, read_css, css_file, output_path)
    except typer.Exit:
        raise
    except Exception as exc:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {escape(format_error_for_user(exc))}")
        raise typer.Exit(code=1)


def _run(
    settings: ExtractorSettings,
    theme_names: list[str],
    read_css: bool,
    css_file: Path,
    output_path: Path,
) -> None:
    loader = NodeModuleLoader(settings.node, prefix=settings.prefix)
    resolver = ThemeModuleResolver(
        loader,
        package_name=settings.package,
        prefix=settings.prefix,
    )
    extractor = ThemeExtractor(resolver)

    css = ""
    if read_css:
        console.print(f"[cyan]📄 Reading CSS file: [bold]{escape(display_path(css_file))}[/bold][/cyan]")
        try:
            css = read_css_file(css_file)
        except DaisyThemesError as exc:
            err_console.print(f"[red]Error reading CSS file: {escape(exc.message)}[/red]")
            raise typer.Exit(code=1)

    plan = extractor.plan(theme_names, read_css=read_css, css=css)
    if read_css:
        _print_css_findings(plan)

    if any(name not in plan.inline for name in plan.names):
        try:
            loader.executable()
        except DaisyThemesError as exc:
            err_console.print(f"[red]{escape(format_error_for_user(exc))}[/red]")
            raise typer.Exit(code=1)

    console.print(
        f"[cyan]🎨 Extracting [bold]{len(plan.names)}[/bold] theme(s): "
        f"[magenta]{escape(', '.join(plan.names))}[/magenta][/cyan]"
    )
    console.print(f"[cyan]📦 Output file: [bold]{escape(display_path(output_path))}[/bold][/cyan]")
    console.print()

    result = asyncio.run(extractor.run(plan, on_theme=_print_outcome))

    try:
        write_themes_json(result.themes, output_path)
    except DaisyThemesError as exc:
        err_console.print(f"[red]{escape(exc.message)}[/red]")
        raise typer.Exit(code=1)

    _print_summary(result, output_path)


def _print_css_findings(plan: ExtractionPlan) -> None:
    if plan.referenced_names:
        console.print(
            f"[blue]   Found [bold]{len(plan.referenced_names)}[/bold] theme name(s): "
            f"[magenta]{escape(', '.join(plan.referenced_names))}[/magenta][/blue]"
        )
    if plan.inline:
        console.print(
            f"[blue]   Found [bold]{len(plan.inline)}[/bold] inline theme(s): "
            f"[magenta]{escape(', '.join(plan.inline_names))}[/magenta][/blue]"
        )
    console.print()


def _print_outcome(outcome: ThemeOutcome) -> None:
    name = escape(outcome.name)
    if not outcome.ok:
        err_console.print(
            f"[red]✗ Skipping theme '[bold]{name}[/bold]': {escape(outcome.error or '')}[/red]"
        )
    elif outcome.source == "inline":
        console.print(f"[green]✓ Using inline CSS theme: [bold]{name}[/bold][/green]")
    else:
        console.print(f"[green]✓ Extracted theme: [bold]{name}[/bold][/green]")


def _print_summary(result: ExtractionResult, output_path: Path) -> None:
    console.print()
    console.print(
        f"[bold green]✨ Successfully wrote [yellow]{result.total}[/yellow] theme(s) to "
        f"[cyan]{escape(display_path(output_path))}[/cyan][/bold green]"
    )

    if result.themes:
        console.print()
        console.print("[bold cyan]📊 Theme Statistics:[/bold cyan]")
        for name, styles in result.themes.items():
            console.print(
                f"[dim]   [magenta]{escape(name)}[/magenta]: [yellow]{len(styles)}[/yellow] properties[/dim]"
            )

    if result.errors:
        console.print()
        console.print(f"[bold yellow]⚠️  Errors encountered ({result.failed}):[/bold yellow]")
        for error in result.errors:
            console.print(f"[red]  • [bold]{escape(error.theme)}[/bold]: [dim]{escape(error.error)}[/dim][/red]")


def main() -> None:
    """Console script entry point."""
    app()
