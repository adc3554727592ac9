"""Click-based CLI entry point for auth0mgmt."""

import functools
import sys
from collections.abc import Callable
from typing import Any

import click
import requests

from ..core.exceptions import Auth0ManagerError
from ..utils.logging_utils import configure_from_env, setup_logging
from ..utils.rich_utils import install_rich_tracebacks
from .commands import CommandHandler

ENV_ARGUMENT = click.argument(
    "env", type=click.Choice(["dev", "prod"]), default="dev"
)


def exit_on_error(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report library and network errors on stderr and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Auth0ManagerError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except requests.exceptions.RequestException as e:
            click.echo(f"Request failed: {e}", err=True)
            sys.exit(1)

    return wrapper


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override AUTH0MGMT_LOG_LEVEL",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """auth0mgmt - Auth0 Management API client for grants and connections."""
    if log_level:
        setup_logging(level=log_level)
    else:
        configure_from_env()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@ENV_ARGUMENT
@click.option("--test-api", is_flag=True, help="Test API access")
@exit_on_error
def doctor(env: str, test_api: bool) -> None:
    """Test Auth0 credentials and API access."""
    if not CommandHandler(env).handle_doctor(test_api):
        sys.exit(1)


@cli.group("client-grants")
def client_grants() -> None:
    """Client grant operations."""


@client_grants.command("list")
@ENV_ARGUMENT
@click.option("--audience", help="Only grants for this API identifier")
@click.option("--client-id", help="Only grants for this client")
@exit_on_error
def list_client_grants(env: str, audience: str | None, client_id: str | None) -> None:
    """List client grants."""
    CommandHandler(env).list_client_grants(audience, client_id)


@client_grants.command("get")
@click.argument("grant_id")
@ENV_ARGUMENT
@exit_on_error
def get_client_grant(grant_id: str, env: str) -> None:
    """Show a client grant by ID."""
    CommandHandler(env).show_client_grant(grant_id)


@client_grants.command("create")
@ENV_ARGUMENT
@click.option("--client-id", required=True, help="Client to grant access to")
@click.option("--audience", required=True, help="API identifier")
@click.option("--scope", "scopes", multiple=True, help="Scope to grant (repeatable)")
@exit_on_error
def create_client_grant(
    env: str, client_id: str, audience: str, scopes: tuple[str, ...]
) -> None:
    """Create a client grant."""
    CommandHandler(env).create_client_grant(client_id, audience, scopes)


@client_grants.command("delete")
@click.argument("grant_id")
@ENV_ARGUMENT
@exit_on_error
def delete_client_grant(grant_id: str, env: str) -> None:
    """Delete a client grant."""
    if env == "prod":
        click.confirm(
            f"You are about to delete client grant {grant_id} in production. Continue?",
            abort=True,
        )
    CommandHandler(env).delete_client_grant(grant_id)


@cli.group()
def connections() -> None:
    """Connection operations."""


@connections.command("list")
@ENV_ARGUMENT
@click.option("--name", help="Only the connection with this name")
@click.option("--strategy", help="Only connections of this strategy")
@exit_on_error
def list_connections(env: str, name: str | None, strategy: str | None) -> None:
    """List connections."""
    CommandHandler(env).list_connections(name, strategy)


@connections.command("get")
@click.argument("connection_id")
@ENV_ARGUMENT
@exit_on_error
def get_connection(connection_id: str, env: str) -> None:
    """Show a connection by ID."""
    CommandHandler(env).show_connection(connection_id)


@connections.command("id")
@click.argument("name")
@ENV_ARGUMENT
@exit_on_error
def connection_id(name: str, env: str) -> None:
    """Print the ID of the connection with the given name."""
    CommandHandler(env).show_connection_id(name)


@connections.command("delete")
@click.argument("connection_id")
@ENV_ARGUMENT
@exit_on_error
def delete_connection(connection_id: str, env: str) -> None:
    """Delete a connection."""
    if env == "prod":
        click.confirm(
            f"You are about to delete connection {connection_id} in production. Continue?",
            abort=True,
        )
    CommandHandler(env).delete_connection(connection_id)


def main() -> None:
    """Console script entry point."""
    install_rich_tracebacks()
    cli()


if __name__ == "__main__":
    main()
