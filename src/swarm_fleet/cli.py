"""CLI interface for swarm-fleet."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from swarm_fleet.assembler import build_fleet
from swarm_fleet.domains import domain_to_agent_name, match_domains
from swarm_fleet.errors import FleetError
from swarm_fleet.loader import PROMPTS_DIRNAME, default_user_config_dir, load_plugin_config, prompt_source
from swarm_fleet.models import AgentDefinition

console = Console()

_CATEGORY_STYLES = {
    "orchestrator": "bold blue",
    "specialist": "cyan",
    "quality_reviewer": "yellow",
    "pipeline_worker": "green",
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _load_fleet(project: Path | None, config_dir: Path | None, prompts: Path | None) -> list[AgentDefinition]:
    config_dir = config_dir or default_user_config_dir()
    prompts_dir = prompts or config_dir / PROMPTS_DIRNAME
    try:
        config = load_plugin_config(project_dir=project, user_config_dir=config_dir)
    except FleetError as e:
        raise click.ClickException(str(e)) from e
    return build_fleet(config, prompts=prompt_source(prompts_dir))


def _fleet_options(f):
    f = click.option("--verbose", is_flag=True, help="Verbose output")(f)
    f = click.option("--prompts", type=click.Path(file_okay=False, path_type=Path), default=None, help="Custom prompts directory (default: <config-dir>/prompts)")(f)
    f = click.option("--config-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="User config directory (default: ~/.config/swarm-fleet)")(f)
    f = click.option("--project", type=click.Path(exists=True, file_okay=False, path_type=Path), default=None, help="Project directory with a .swarm-fleet.json")(f)
    return f


@click.group()
@click.version_option(package_name="swarm-fleet")
def cli() -> None:
    """swarm-fleet: Resolve effective agent configuration for swarms."""


@cli.command()
@_fleet_options
def agents(project: Path | None, config_dir: Path | None, prompts: Path | None, verbose: bool) -> None:
    """Show the effective agent fleet."""
    _setup_logging(verbose)
    fleet = _load_fleet(project, config_dir, prompts)
    if not fleet:
        console.print("[dim]No enabled agents.[/dim]")
        return

    table = Table(show_header=True, title="Agent fleet")
    table.add_column("Agent", style="bold")
    table.add_column("Swarm", style="dim")
    table.add_column("Category")
    table.add_column("Mode")
    table.add_column("Model")
    table.add_column("Temp", justify="right")
    for agent in fleet:
        style = _CATEGORY_STYLES.get(agent.category.value, "white")
        temperature = agent.parameters.get("temperature")
        table.add_row(
            agent.name,
            agent.swarm_id,
            f"[{style}]{agent.category.value}[/{style}]",
            agent.mode.value,
            agent.model,
            f"{temperature:.2f}" if temperature is not None else "-",
        )
    console.print(table)


@cli.command()
@_fleet_options
@click.option("--indent", type=int, default=2, help="JSON indentation")
def export(project: Path | None, config_dir: Path | None, prompts: Path | None, verbose: bool, indent: int) -> None:
    """Print the host agent config map as JSON."""
    _setup_logging(verbose)
    fleet = _load_fleet(project, config_dir, prompts)
    payload = {agent.name: agent.to_host_config() for agent in fleet}
    click.echo(json.dumps(payload, indent=indent))


@cli.command()
@click.argument("text")
def match(text: str) -> None:
    """Recommend specialists for a task description."""
    domains = match_domains(text)
    if not domains:
        console.print("[dim]No specialist domains matched.[/dim]")
        return
    for domain in domains:
        console.print(f"[cyan]{domain}[/cyan] -> @{domain_to_agent_name(domain)}")
