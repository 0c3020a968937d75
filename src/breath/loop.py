import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from breath.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)


@app.callback()
def _callback() -> None:
    """Breathing rings animation."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()
