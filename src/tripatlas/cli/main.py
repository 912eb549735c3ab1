"""Main CLI definition for Tripatlas."""

from typing import Optional

import typer

from tripatlas import __version__
from tripatlas.cli.commands.animate import animate
from tripatlas.cli.commands.flights import flights
from tripatlas.cli.commands.suggest import suggest


def version_callback(value: bool) -> None:
    if value:
        print(f"tripatlas {__version__}")
        raise typer.Exit()


app = typer.Typer(help="Album suggestions and flight paths for travel journals.", no_args_is_help=True)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the program version",
    ),
) -> None:
    pass


app.command()(suggest)
app.command()(flights)
app.command()(animate)


if __name__ == "__main__":
    app()
