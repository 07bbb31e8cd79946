"""Top-level Click group for the gqlify CLI."""

import click

from gqlify.init_cmd.cli import init_cmd


@click.group()
@click.version_option(package_name="gqlify", prog_name="gqlify")
def main():
    """gqlify - bootstrap NestJS + GraphQL workflows for Claude Code."""


main.add_command(init_cmd)
