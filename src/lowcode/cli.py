"""Command-line interface for running and administering the platform."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from lowcode import __version__
from lowcode.core.logging import configure_logging
from lowcode.core.permissions.roles import Role


console = Console()

app = typer.Typer(
    name="lowcode",
    help="Run and administer the low-code data platform.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """Low-code platform CLI."""
    if version:
        console.print(f"[bold cyan]lowcode[/bold cyan] version {__version__}")
        raise typer.Exit()


async def _init_db() -> None:
    from lowcode.core.database import async_engine, init_models

    try:
        await init_models()
    finally:
        await async_engine.dispose()


@app.command(name="init-db")
def init_db() -> None:
    """Create database tables that don't exist yet."""
    configure_logging()
    with console.status("[bold green]Creating tables..."):
        asyncio.run(_init_db())
    console.print("[green]✓[/green] Database tables ready")


async def _create_user(email: str, name: str, role: Role, password: str):
    from lowcode.core.database import async_engine, async_session_factory, init_models
    from lowcode.modules.users.repos import UserRepository
    from lowcode.modules.users.schemas import UserCreate
    from lowcode.modules.users.services import UserService

    try:
        await init_models()
        async with async_session_factory() as session:
            service = UserService(UserRepository(session))
            user = await service.create_user(
                UserCreate(email=email, name=name, role=role, password=password)
            )
            await session.commit()
            return user
    finally:
        await async_engine.dispose()


@app.command(name="create-user")
def create_user(
    email: str = typer.Argument(..., help="Email address of the new user"),
    name: str = typer.Option(..., "--name", "-n", help="Display name"),
    role: Role = typer.Option(Role.VIEWER, "--role", "-r", help="Role of the user"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Create a user with a role."""
    from pydantic import ValidationError as SchemaValidationError

    from lowcode.core.errors import ConflictError

    configure_logging()
    try:
        user = asyncio.run(_create_user(email, name, role, password))
    except ConflictError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from None
    except SchemaValidationError as e:
        console.print("[red]Error:[/red] Invalid user data")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  - {field}: {error['msg']}")
        raise typer.Exit(1) from None

    console.print(
        f"[green]✓[/green] Created user [bold]{user.email}[/bold] "
        f"({user.role}) with id {user.id}"
    )


async def _seed():
    from lowcode.core.database import async_engine, async_session_factory, init_models
    from lowcode.seed import seed

    try:
        await init_models()
        async with async_session_factory() as session:
            result = await seed(session)
            await session.commit()
            return result
    finally:
        await async_engine.dispose()


@app.command(name="seed")
def seed_command() -> None:
    """Create demo users (one per role) and a sample Product model."""
    from lowcode.seed import DEMO_USERS

    configure_logging()
    result = asyncio.run(_seed())

    table = Table(title="Demo users")
    table.add_column("Email", style="cyan")
    table.add_column("Role")
    table.add_column("Password")
    table.add_column("Status")
    for data in DEMO_USERS:
        status = "created" if data["email"] in result.created_users else "exists"
        table.add_row(data["email"], data["role"].value, data["password"], status)
    console.print(table)

    if result.created_models:
        console.print(f"[green]✓[/green] Created models: {', '.join(result.created_models)}")
    else:
        console.print("[yellow]Sample models already exist[/yellow]")


@app.command(name="serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    console.print(f"[bold cyan]Serving[/bold cyan] on http://{host}:{port}")
    uvicorn.run(
        "lowcode.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
