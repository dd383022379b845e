"""CLI commands for card relay administration."""

import asyncio
import json
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import click

from ..bootstrap import open_database, setup_container
from ..container import Container, get_container
from ..domain.errors import CardRelayError
from ..domain.models import UserRole
from ..logging_config import configure_logging
from ..services.auth_service import hash_password


def run_async(coro):
    """Run async coroutine in sync context."""
    return asyncio.run(coro)


@asynccontextmanager
async def wired_container() -> AsyncIterator[Container]:
    """Open the database and wire the container for one command."""
    container = get_container()
    database = None
    if not container.is_configured:
        database = open_database(container.settings)
        await database.create_all()
    setup_container(database, container)
    try:
        yield container
    finally:
        if database is not None:
            await database.dispose()


@click.group()
@click.version_option(version="1.0.0")
@click.option("--log-level", default=None, help="Log level (default from LOG_LEVEL)")
def cli(log_level: Optional[str]):
    """Send board cards to Google Chat."""
    settings = get_container().settings
    configure_logging(log_level or settings.log_level)


@cli.command("serve")
@click.option("--host", default=None, help="Bind host")
@click.option("--port", default=None, type=int, help="Bind port")
def serve(host: Optional[str], port: Optional[int]):
    """Run the HTTP API."""
    import uvicorn

    from ..api.app import create_app

    settings = get_container().settings
    app = create_app(cors_origins=settings.get_cors_origins())
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


@cli.command("init-db")
def init_db():
    """Create database tables."""
    async def _run():
        async with wired_container():
            pass

    run_async(_run())
    click.echo("✅ Database ready")


@cli.command("hash-password")
@click.password_option()
def hash_password_command(password: str):
    """Print a bcrypt hash for a password."""
    click.echo(hash_password(password))


@cli.command("create-user")
@click.option("--name", required=True, help="Display name")
@click.option("--email", required=True, help="Login email")
@click.option("--admin", is_flag=True, help="Grant admin role")
@click.password_option()
def create_user(name: str, email: str, admin: bool, password: str):
    """Create a user account."""

    async def _run():
        role = UserRole.ADMIN if admin else UserRole.MEMBER
        async with wired_container() as container:
            return await container.auth_service.register(name, email, password, role=role)

    try:
        user = run_async(_run())
    except CardRelayError as e:
        raise click.ClickException(str(e))

    click.echo(f"✅ Created {user.role.value} {user.email} [{user.id}]")


@cli.command("destinations")
@click.option("--as", "email", required=True, help="Email of the acting user")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def list_destinations(email: str, output_json: bool):
    """List destinations available to a user."""

    async def _run():
        async with wired_container() as container:
            user = await container.user_store.get_by_email(email.strip().lower())
            if user is None:
                return None
            return await container.destination_service.list_for(user)

    destinations = run_async(_run())
    if destinations is None:
        raise click.ClickException(f"User not found: {email}")

    if output_json:
        output = [
            {"id": d.id, "name": d.name, "description": d.description}
            for d in destinations
        ]
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    if not destinations:
        click.echo("No destinations available.")
        return

    for d in destinations:
        suffix = f" - {d.description}" if d.description else ""
        click.echo(f"💬 [{d.id}] {d.name}{suffix}")


@cli.command("send")
@click.argument("card_id")
@click.option("--destination", "-d", "destination_id", required=True, help="Destination ID")
@click.option("--caption", "-c", default=None, help="Caption shown above the card")
@click.option("--as", "email", required=True, help="Email of the sending user")
def send(card_id: str, destination_id: str, caption: Optional[str], email: str):
    """Send a card to a destination."""

    async def _run():
        async with wired_container() as container:
            user = await container.user_store.get_by_email(email.strip().lower())
            if user is None:
                return None
            return await container.dispatcher.send(card_id, destination_id, caption, user)

    result = run_async(_run())
    if result is None:
        raise click.ClickException(f"User not found: {email}")

    if not result.ok:
        raise click.ClickException(result.message)
    click.echo(f"✅ {result.message}")
