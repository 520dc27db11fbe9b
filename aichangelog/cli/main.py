"""Main CLI entry point for ai-changelog."""

import logging
import sys

import click

from .. import __version__
from ..config import get_config, create_sample_config
from ..providers import PROVIDERS
from .generate import generate


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config-file', '-c', help='Path to JSON configuration file')
@click.version_option(version=__version__, prog_name="ai-changelog")
@click.pass_context
def cli(ctx, debug, config_file):
    """ai-changelog - generate changelog sections from git history with an LLM."""

    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = get_config(config_file)
    except ValueError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['logger'] = logging.getLogger('aichangelog')


@cli.command()
@click.option('--path', '-p', default='ai-changelog.json', help='Path for the config file')
def init_config(path):
    """Create a sample configuration file."""
    try:
        create_sample_config(path)
    except OSError as e:
        click.echo(f"Error creating config file: {e}", err=True)
        sys.exit(1)

    click.echo(f"Sample configuration file created at: {path}")
    click.echo("Please edit the file and add your API keys.")


@cli.command()
def providers():
    """List available providers."""
    for name, provider_cls in PROVIDERS.items():
        click.echo(f"{name}\t{provider_cls.display_name}")


cli.add_command(generate)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
