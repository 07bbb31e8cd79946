"""Click command for installing the .claude workflow into a project."""

import sys

import click

from gqlify.init_cmd.claude_dir import InitError, init_claude_dir
from gqlify.init_cmd.summary import (
    render_already_exists,
    render_banner,
    render_copied,
    render_failure,
    render_success,
)


@click.command("init")
def init_cmd():
    """Initialize the .claude workflow in the current directory."""
    click.echo(render_banner(), nl=False)
    try:
        result = init_claude_dir()
    except InitError as exc:
        click.echo(render_failure(exc), nl=False, err=True)
        sys.exit(1)

    if not result.created:
        click.echo(render_already_exists(result), nl=False)
        return

    click.echo(render_copied(result), nl=False)
    click.echo(render_success(result), nl=False)
