"""fieldmap - command line entry point."""
import json
import logging
import sys

import click
from colorama import Fore, Style, init

from fieldmap.builder.field_builder import build_mapper
from fieldmap.cli.loader import load_class, to_plain
from fieldmap.config import settings
from fieldmap.exceptions import MapperConfigError
from fieldmap.exporter.json_exporter import JsonExporter

# Initialize colorama
init(autoreset=True)

VERSION = "0.1.0"
BANNER_WIDTH = 44


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * BANNER_WIDTH}")
    for text in (f"fieldmap {VERSION}", "DTO <-> entity field mapping"):
        # 4 columns on the left, 2 on the right
        click.echo(f"{Fore.CYAN}║   {Fore.WHITE}{text.ljust(BANNER_WIDTH - 6)}{Fore.CYAN} ║")
    click.echo(f"{Fore.CYAN}{'=' * BANNER_WIDTH}{Style.RESET_ALL}")
    click.echo()


def fail(message: str):
    """Report an error and exit with status 1."""
    click.echo(f"{Fore.RED}Error: {message}", err=True)
    sys.exit(1)


def load_mapper(reference: str):
    """Build the mapper of a MODULE:CLASS reference."""
    try:
        return build_mapper(load_class(reference))
    except MapperConfigError as e:
        fail(e.message)
    except (ImportError, ValueError) as e:
        fail(str(e))


def read_json(stream):
    """Parse JSON input."""
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        fail(f"Invalid JSON input: {e}")


def echo_json(data):
    click.echo(json.dumps(to_plain(data), indent=settings.json_indent, default=str))


@click.group()
@click.version_option(version=VERSION)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """fieldmap - Convert between DTOs and entities with declared field tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("model")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Export the field table to a JSON file",
)
def describe(model, output):
    """Show the field table of MODULE:CLASS."""
    print_banner()

    mapper = load_mapper(model)

    click.echo(f"{Fore.YELLOW}{model}")
    click.echo(f"{Fore.YELLOW}{'=' * len(model)}")

    for rule in mapper.config.fields:
        access = ("r" if not rule.disable_serialize else "-") + (
            "w" if not rule.disable_deserialize else "-"
        )
        scopes = ", ".join(sorted(str(s) for s in rule.scopes)) if rule.scopes is not None else "*"
        transform = f" {Fore.MAGENTA}[transform]" if rule.transformer is not None else ""
        click.echo(
            f"{Fore.GREEN}{rule.source}{Style.RESET_ALL} -> {Fore.GREEN}{rule.target}"
            f"{Style.RESET_ALL}  {access}  scopes: {scopes}{transform}"
        )

    if output:
        JsonExporter().export(output, mapper, model)
        click.echo(f"{Fore.GREEN}✅ Field table exported to {output}")


@cli.command()
@click.argument("model")
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--scope", "-s", default=None, help="Scope token of the caller")
def serialize(model, input_file, scope):
    """Serialize a JSON entity with the mapper of MODULE:CLASS."""
    mapper = load_mapper(model)
    echo_json(mapper.serialize(read_json(input_file), scope))


@cli.command()
@click.argument("model")
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--scope", "-s", default=None, help="Scope token of the caller")
def deserialize(model, input_file, scope):
    """Deserialize a JSON DTO with the mapper of MODULE:CLASS."""
    mapper = load_mapper(model)
    echo_json(mapper.deserialize(read_json(input_file), scope))


if __name__ == "__main__":
    cli()
