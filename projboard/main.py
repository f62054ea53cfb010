from __future__ import annotations

import sys

import typer
from rich.console import Console

from projboard.app import Board, build_board
from projboard.components.project_input import SubmitOutcome
from projboard.config import get_settings
from projboard.utils.logging import configure_logging

app = typer.Typer(help="Project board CLI.")


def _setup() -> Board:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return build_board(settings=settings)


def _show_lists(board: Board, console: Console) -> None:
    for project_list in board.lists.values():
        console.print(project_list.renderable())


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"people={settings.capacity_min}..{settings.capacity_max} "
        f"description_min_length={settings.description_min_length}"
    )


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", help="Project title."),
    description: str = typer.Option(..., "--description", "-d", help="Project description."),
    people: str = typer.Option(..., "--people", "-p", help="Number of people (integer)."),
) -> None:
    """
    Submit one project and print the resulting lists.
    """
    board = _setup()
    outcome = board.project_input.submit(title=title, description=description, people=people)
    if outcome is SubmitOutcome.REJECTED:
        raise typer.Exit(code=1)
    _show_lists(board, Console(width=board.screen.width))


@app.command()
def interactive() -> None:
    """
    Prompt for projects until you quit; lists are printed after every change.
    """
    board = _setup()
    console = Console(width=board.screen.width)

    while True:
        action = typer.prompt("Action [add/finish/list/quit]", default="add").strip().lower()
        if action in ("q", "quit"):
            break
        if action == "add":
            board.project_input.submit(
                title=typer.prompt("Title", default="", show_default=False),
                description=typer.prompt("Description", default="", show_default=False),
                people=typer.prompt("People", default="", show_default=False),
            )
        elif action == "finish":
            id_prefix = typer.prompt("Project id")
            if board.finish(id_prefix) is None:
                typer.echo(f"No single project matches '{id_prefix}'.", err=True)
                continue
        elif action != "list":
            typer.echo(f"Unknown action '{action}'.", err=True)
            continue
        _show_lists(board, console)

    board.close()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
