"""Main CLI entry point for the fixture engine.

Generates random values for built-in shapes or importable classes from the
command line.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any
import sys
import uuid

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty
from rich.syntax import Syntax
from rich.table import Table

from fixture_engine import __version__
from fixture_engine.config.base import GeneratorConfig
from fixture_engine.config.loader import ConfigLoader, load_config
from fixture_engine.constraints.base import Constraint, MaxLength, MinLength, Required
from fixture_engine.engine.object_generator import create_default_generator
from fixture_engine.producers.base import NullProducer
from fixture_engine.producers.defaults import default_producers
from fixture_engine.utils.helpers import generate_seed, import_object
from fixture_engine.utils.logging import configure_logging

console = Console()

BUILTIN_TARGETS: dict[str, Any] = {
    "bool": bool,
    "int": int,
    "float": float,
    "complex": complex,
    "decimal": Decimal,
    "str": str,
    "bytes": bytes,
    "datetime": datetime,
    "date": date,
    "time": time,
    "timedelta": timedelta,
    "uuid": uuid.UUID,
}


def resolve_target(target: str) -> Any:
    """Turn a TARGET argument into a shape.

    Raises:
        click.BadParameter: If the target is neither a built-in name nor an
            importable ``package.module:Name`` path
    """
    if target in BUILTIN_TARGETS:
        return BUILTIN_TARGETS[target]

    try:
        return import_object(target)
    except (ValueError, ImportError, AttributeError) as e:
        raise click.BadParameter(
            f"'{target}' is not one of {', '.join(BUILTIN_TARGETS)} "
            f"and could not be imported: {e}",
            param_hint="TARGET",
        ) from e


@click.group()
@click.version_option(version=__version__, prog_name="fixture-gen")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Fixture Engine - Generate random values for tests.

    Builds strings, numbers, containers and whole object graphs from type
    annotations, honoring length and required markers.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging("DEBUG" if verbose else "WARNING")


@cli.command()
@click.argument("target")
@click.option("--count", "-n", type=click.IntRange(min=0), default=1, help="Number of values")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config YAML file")
@click.option("--null-chance", type=click.IntRange(0, 100), help="Percent chance of None for null-capable shapes")
@click.option("--min-length", type=click.IntRange(min=0), help="Minimum string/sequence length")
@click.option("--max-length", type=click.IntRange(min=0), help="Maximum string/sequence length (exclusive)")
@click.option("--required", is_flag=True, help="Never generate None for the top-level value")
@click.pass_context
def generate(
    ctx: click.Context,
    target: str,
    count: int,
    seed: int | None,
    config_path: str | None,
    null_chance: int | None,
    min_length: int | None,
    max_length: int | None,
    required: bool,
) -> None:
    """Generate random values.

    TARGET is a built-in shape name (int, str, datetime, ...) or an
    importable class such as ``myapp.models:Customer``.
    """
    verbose = ctx.obj.get("verbose", False)
    shape = resolve_target(target)

    try:
        config = load_config(config_path) if config_path else GeneratorConfig()
        if null_chance is not None:
            config.null_chance = null_chance

        if seed is None:
            seed = config.seed if config.seed is not None else generate_seed()

        generator = create_default_generator(seed=seed, config=config)

        constraints: list[Constraint] = []
        if required:
            constraints.append(Required())
        if min_length is not None:
            constraints.append(MinLength(min_length))
        if max_length is not None:
            constraints.append(MaxLength(max_length))

        for value in generator.generate_many(shape, count, constraints):
            console.print(Pretty(value))

        if verbose:
            console.print(f"[dim]seed: {seed}[/dim]")

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback
            console.print(escape(traceback.format_exc()))
        sys.exit(1)


@cli.command()
@click.pass_context
def list_producers(ctx: click.Context) -> None:
    """List the default producers in resolution order."""
    table = Table(title="Default Producers")
    table.add_column("#", justify="right")
    table.add_column("Producer", style="cyan")
    table.add_column("Null-capable")

    for i, producer in enumerate(default_producers()):
        table.add_row(
            str(i),
            producer.name,
            "yes" if isinstance(producer, NullProducer) else "-",
        )

    console.print(table)


@cli.command()
@click.option("--output", "-o", type=click.Path(), default="fixture-engine.yaml", help="Output file path")
@click.pass_context
def init_config(ctx: click.Context, output: str) -> None:
    """Initialize a new config file.

    Creates a YAML file holding the default engine settings.
    """
    loader = ConfigLoader()
    loader.save_file(GeneratorConfig(), output)

    console.print(f"[green]Created config: {output}[/green]")


@cli.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config YAML file")
@click.pass_context
def show_config(ctx: click.Context, config_path: str | None) -> None:
    """Show the effective engine configuration."""
    try:
        config = load_config(config_path) if config_path else GeneratorConfig()
    except Exception as e:
        console.print(f"[red]Error loading file: {escape(str(e))}[/red]")
        sys.exit(1)

    text = yaml.safe_dump({"generator": config.to_dict()}, sort_keys=False)
    console.print(Syntax(text, "yaml"))


if __name__ == "__main__":
    cli()
