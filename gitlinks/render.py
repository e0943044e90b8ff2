"""Rich console rendering for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .remotes import RemoteProvider

console = Console()


def print_provider(provider: RemoteProvider):
    """Print a summary panel for a resolved provider."""
    lines = [
        f"[bold cyan]{provider.name}[/bold cyan]",
        "",
        f"[dim]• Domain: {provider.domain}",
        f"• Repository: {provider.path}",
        f"• Protocol: {provider.protocol}",
        f"• User-defined: {'yes' if provider.custom else 'no'}[/dim]",
    ]
    console.print(Panel("\n".join(lines), border_style="cyan", padding=(1, 2)))


def print_links(links: dict[str, str]):
    """Print a table of link kind to URL."""
    table = Table(box=box.ROUNDED, border_style="green")
    table.add_column("Link", style="green")
    table.add_column("URL", overflow="fold")
    for kind, url in links.items():
        table.add_row(kind, url)
    console.print(table)


def print_remotes(rows: list[tuple[str, str, RemoteProvider | None]]):
    """Print a repository's remotes with the provider each resolved to."""
    table = Table(box=box.ROUNDED, border_style="cyan")
    table.add_column("Remote", style="cyan")
    table.add_column("Provider")
    table.add_column("Repository URL", overflow="fold")
    for name, url, provider in rows:
        if provider is None:
            table.add_row(name, "[dim]unknown[/dim]", f"[dim]{url}[/dim]")
        else:
            table.add_row(name, provider.name, provider.get_url_for_repository())
    console.print(table)


def print_error(message: str):
    """Print an error message."""
    console.print(f"\n[red]Error: {message}[/red]")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")
