"""Command-line interface for devskill."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .client import DevSkillError, EvaluatorClient
from .config import GlobalConfig, LocalConfig, resolve_settings
from .panel import ChallengePanel, FileDocumentSource, Tier
from .utils.terminal import ConsoleNotifier, choose_index, create_table, scanline_trim


console = Console()


def setup_logging(debug: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def open_panel(ctx: click.Context, problem_id: Optional[str], document: Optional[str], runtime: Optional[str]) -> ChallengePanel:
    """Resolve settings and open a panel on the requested problem."""
    settings = resolve_settings(
        service_url=ctx.obj.get("url"),
        problem_id=problem_id,
        runtime=runtime,
        document=document,
    )
    client = EvaluatorClient(settings.service_url)
    return ChallengePanel.open(
        settings.problem_id,
        client,
        FileDocumentSource(settings.document),
        ConsoleNotifier(console),
        console=console,
        runtime=settings.runtime,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--url", help="Evaluation service address (default: from config)")
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, url: Optional[str], debug: bool):
    """devskill - solve DevSkill coding challenges from the terminal."""
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["url"] = url


@cli.command()
@click.argument("problem_id", required=False)
@click.pass_context
def problem(ctx: click.Context, problem_id: Optional[str]):
    """Show a challenge description and code template."""
    with open_panel(ctx, problem_id, None, None) as panel:
        if not panel.loaded:
            sys.exit(1)


@cli.command()
@click.argument("problem_id", required=False)
@click.option("-d", "--document", type=click.Path(path_type=Path), help="Solution file (default: from local config)")
@click.option("-r", "--runtime", help="Runtime to run the solution on")
@click.pass_context
def start(ctx: click.Context, problem_id: Optional[str], document: Optional[Path], runtime: Optional[str]):
    """Open a challenge and submit the solution file interactively."""
    with open_panel(ctx, problem_id, str(document) if document else None, runtime) as panel:
        if not panel.loaded:
            sys.exit(1)

        if panel.documents.active_document() is None:
            console.print(
                "[yellow]No solution file selected. Use -d FILE or 'devskill use'.[/yellow]"
            )

        current = panel.runtime or panel.problem.default_runtime
        while True:
            try:
                choice = scanline_trim(
                    f"\n[Enter] submit ({current})  [r] change runtime  [q] quit: "
                ).lower()
            except (KeyboardInterrupt, EOFError):
                console.print("\n[yellow]Closed[/yellow]")
                break

            if choice == "q":
                break
            elif choice == "r":
                runtimes = list(panel.problem.runtimes)
                for idx, name in enumerate(runtimes):
                    marker = "*" if name == current else ""
                    console.print(f"  {idx}{marker} {escape(name)}")
                idx = choose_index("Select runtime", runtimes)
                if idx is not None:
                    current = runtimes[idx]
            elif choice == "":
                panel.submit(current)
            else:
                console.print(f"[red]Unknown choice: {escape(choice)}[/red]")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-p", "--problem", "problem_id", help="Problem ID (default: from local config)")
@click.option("-r", "--runtime", help="Runtime to run the solution on")
@click.pass_context
def submit(ctx: click.Context, file: Path, problem_id: Optional[str], runtime: Optional[str]):
    """Submit a solution file once and show the result."""
    with open_panel(ctx, problem_id, str(file), runtime) as panel:
        if not panel.loaded:
            sys.exit(1)

        result = panel.submit(runtime)
        if result is None or result.tier != Tier.SUCCESS:
            sys.exit(1)


@cli.command()
@click.argument("problem_id")
@click.option("-d", "--document", type=click.Path(path_type=Path), help="Solution file for this challenge")
@click.option("-r", "--runtime", help="Default runtime for this challenge")
def use(problem_id: str, document: Optional[Path], runtime: Optional[str]):
    """Remember the challenge worked on in this directory."""
    path = LocalConfig.find_config()
    config = LocalConfig.load(path) if path else None
    if config is None:
        config = LocalConfig()

    config.problem_id = problem_id
    if document is not None:
        config.document = str(document.resolve())
    if runtime is not None:
        config.runtime = runtime
    config.save(path)

    console.print(f"[green]Now working on problem {escape(problem_id)}[/green]")
    if config.document:
        console.print(f"[bold cyan]Solution file:[/bold cyan] {escape(str(config.document))}")


@cli.group()
def config():
    """Manage global configuration."""
    pass


@config.command(name="show")
@click.pass_context
def config_show(ctx: click.Context):
    """Display effective configuration."""
    settings = resolve_settings(service_url=ctx.obj.get("url"))
    local_path = LocalConfig.find_config()

    table = create_table("Configuration", ["Setting", "Value"])
    table.add_row("Service URL", escape(settings.service_url))
    table.add_row("Problem", escape(settings.problem_id))
    table.add_row("Runtime", escape(settings.runtime))
    table.add_row("Solution file", escape(settings.document or "-"))
    table.add_row("Global config", str(GlobalConfig.default_path()))
    table.add_row("Local config", str(local_path) if local_path else "-")
    console.print(table)


@config.command(name="set-url")
@click.argument("url")
def config_set_url(url: str):
    """Set the evaluation service address."""
    if not url.startswith(("http://", "https://")):
        console.print(f"[red]Invalid URL: {escape(url)}[/red]")
        sys.exit(1)

    global_config = GlobalConfig.load()
    global_config.service_url = url.rstrip("/")
    global_config.save()
    console.print(f"[green]Service URL set to: {escape(global_config.service_url)}[/green]")


@config.command(name="set-runtime")
@click.argument("name", required=False)
@click.pass_context
def config_set_runtime(ctx: click.Context, name: Optional[str]):
    """Choose the default runtime."""
    global_config = GlobalConfig.load()

    if name is None:
        # Offer the runtimes of the current challenge
        settings = resolve_settings(service_url=ctx.obj.get("url"))
        client = EvaluatorClient(settings.service_url)
        console.print("[cyan]Fetching runtimes...[/cyan]")
        try:
            runtimes = list(client.fetch_problem(settings.problem_id).runtimes)
        except DevSkillError as e:
            console.print(f"[red]Failed to fetch runtimes: {escape(str(e))}[/red]")
            sys.exit(1)

        table = create_table("Available Runtimes", ["#", "Runtime"])
        for idx, runtime in enumerate(runtimes):
            marker = "*" if runtime == global_config.default_runtime else ""
            table.add_row(f"{idx}{marker}", escape(runtime))
        console.print(table)

        idx = choose_index("Select default runtime", runtimes)
        if idx is None:
            return
        name = runtimes[idx]

    global_config.default_runtime = name
    global_config.save()
    console.print(f"[green]Default runtime set to: {escape(name)}[/green]")


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]devskill[/bold cyan] version [green]{__version__}[/green]")
    console.print("Terminal client for the DevSkill evaluation service")


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
