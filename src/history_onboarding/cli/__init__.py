"""CLI entry point."""

import typer

app = typer.Typer(
    name="history-onboarding",
    help="git-history-onboarding - feature ownership and bug history from git",
    add_completion=False,
    rich_markup_mode="rich",
)

# Import commands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402

__all__ = ["app"]
