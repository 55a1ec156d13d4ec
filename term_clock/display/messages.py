"""
Utility message display functions (errors, warnings, info).

Messages are printed outside the alternate screen only: before the clock
starts or after the terminal has been restored.
"""

from rich.markup import escape

from .core import err_console


def show_error(msg: str):
    """Display an error message on stderr."""
    err_console.print(f"[bold red]❌ error:[/bold red] {escape(msg)}")


def show_warning(msg: str):
    """Display a warning message."""
    err_console.print(f"[yellow]⚠️  {escape(msg)}[/yellow]")


def show_info(msg: str):
    """Display an info message."""
    err_console.print(f"[dim]ℹ️  {escape(msg)}[/dim]")
