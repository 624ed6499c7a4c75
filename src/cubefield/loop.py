import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from cubefield.cli.commands.render import render_command
from cubefield.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="render")(render_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
