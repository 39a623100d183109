"""
Tavvy Pros - CLI Entry Point.

Usage:
    tavvy serve                  Start the API server
    tavvy health                 Check configuration
    tavvy db                     Check database tables
    tavvy categories pro         Browse the category catalog
    tavvy progress <USER_ID>     Show a pro's saved onboarding progress
    tavvy --help                 Show help
"""

import asyncio

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

app = typer.Typer(
    name="tavvy",
    help="Tavvy Pros - service provider onboarding backend.",
    add_completion=False,
)
console = Console()


@app.command()
def health() -> None:
    """Check configuration."""
    from tavvy_pros.config import get_settings

    console.print("\n[bold]Tavvy Pros Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("[green]OK[/green] Configuration loaded")
        console.print(f"   Environment: {settings.tavvy_env}")
        console.print(f"   Log level: {settings.log_level}")

        if settings.supabase_url.startswith("https://"):
            console.print("[green]OK[/green] Supabase URL configured")
        else:
            console.print("[red]FAIL[/red] Supabase URL missing or invalid")
            raise typer.Exit(1)

        if settings.supabase_service_role_key:
            console.print("[green]OK[/green] Service role key configured")
        else:
            console.print("[red]FAIL[/red] Service role key missing")
            raise typer.Exit(1)

        if settings.supabase_anon_key:
            console.print("[green]OK[/green] Anon key configured (for frontend clients)")
        else:
            console.print("[yellow]WARN[/yellow] Anon key missing")

        console.print(f"   CORS origins: {', '.join(settings.cors_origin_list) or '(none)'}")
        console.print("\n[green]All checks passed![/green]")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"\n[red]FAIL Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from tavvy_pros import __version__

    console.print(f"Tavvy Pros version {__version__}")


@app.command()
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
) -> None:
    """Start the API server."""
    import os

    import uvicorn

    from tavvy_pros.logging_setup import setup_logging

    setup_logging()

    # Hosting platforms set PORT
    actual_port = int(os.environ.get("PORT", port))

    console.print("\n[bold green]Tavvy Pros API[/bold green]")
    console.print(f"Starting server on http://localhost:{actual_port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "tavvy_pros.web.app:app",
        host="0.0.0.0",
        port=actual_port,
        reload=reload,
    )


@app.command()
def db() -> None:
    """Check database connection and onboarding tables."""
    from tavvy_pros.db.client import get_service_client

    console.print("\n[bold]Database Connection Check[/bold]\n")

    try:
        client = get_service_client()
        console.print("[green]OK[/green] Connected to Supabase")
    except Exception as e:
        console.print(f"\n[red]FAIL Database connection failed: {e}[/red]")
        raise typer.Exit(1)

    failed = False
    console.print("\n[bold]Table Status:[/bold]")
    for table in ("places", "pros", "pro_providers"):
        try:
            result = client.table(table).select("*", count="exact").limit(0).execute()
            count = result.count if result.count is not None else "?"
            console.print(f"  [green]OK[/green] {table}: {count} rows")
        except Exception as e:
            failed = True
            console.print(f"  [red]FAIL[/red] {table}: {e}")

    if failed:
        raise typer.Exit(1)
    console.print("\n[green]Database check complete![/green]")


@app.command()
def categories(
    provider_type: str = typer.Argument("pro", help="pro, realtor or on_the_go"),
    search: str = typer.Option("", "--search", "-s", help="Filter by name, keyword or service"),
) -> None:
    """Browse the service category catalog."""
    from onboarding.catalog import (
        PROVIDER_TYPES,
        get_categories,
        get_featured_categories,
        search_categories,
    )

    if provider_type not in PROVIDER_TYPES:
        console.print(f"[red]Unknown provider type: {provider_type}. Options: {', '.join(PROVIDER_TYPES)}[/red]")
        raise typer.Exit(1)

    if search:
        matches = search_categories(provider_type, search)
        if not matches:
            console.print(f"[dim]No categories match '{search}'.[/dim]")
            return
    else:
        matches = get_categories(provider_type)

    featured = {c["name"] for c in get_featured_categories(provider_type)}
    tree = Tree(f"[bold]{provider_type}[/bold]")
    for category in matches:
        star = " [yellow]*[/yellow]" if category["name"] in featured else ""
        branch = tree.add(f"{category['icon']} {category['name']}{star}")
        for sub in category["subcategories"]:
            services = ", ".join(sub["services"])
            branch.add(f"{sub['name']} [dim]{services}[/dim]")

    console.print(tree)
    console.print(f"\n[dim]{len(matches)} categories ([yellow]*[/yellow] = featured)[/dim]")


@app.command()
def progress(
    user_id: str = typer.Argument(..., help="Supabase auth user id"),
) -> None:
    """Show a pro's saved onboarding progress."""
    from onboarding.persistence import OnboardingStore
    from onboarding.scoring import missing_fields, score
    from onboarding.state import STEP_TITLES, WizardStep, get_completed_steps
    from tavvy_pros.db.client import get_service_client

    store = OnboardingStore(get_service_client())
    state = asyncio.run(store.load(user_id))

    if state is None:
        console.print(f"[dim]No saved onboarding for {user_id}.[/dim]")
        raise typer.Exit(1)

    table = Table(title=f"Onboarding progress for {user_id}")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Step", f"{state.current_step} - {STEP_TITLES[WizardStep(state.current_step)]}")
    table.add_row("Steps done", ", ".join(str(s) for s in get_completed_steps(state)) or "-")
    table.add_row("Provider type", state.provider_type.value if state.provider_type else "-")
    table.add_row("Specialties", ", ".join(state.specialties) or "-")
    table.add_row("Business", state.business_name or "-")
    table.add_row("Completion", f"{score(state)}%")
    table.add_row("Missing", ", ".join(missing_fields(state)) or "-")
    console.print(table)


if __name__ == "__main__":
    app()
