from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .base import configure_logging
from .commands.lpc import lpc_command
from .commands.show import show_command

configure_logging()
app = typer.Typer(
    help="LPC feature extraction CLI",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("lpc")(lpc_command)


@app.command("show")
def show(
    path: Annotated[
        Path,
        typer.Argument(help="LPC output .npy file written by `lpcfeat lpc`."),
    ],
) -> None:
    """Print the feature and variance vectors of a saved LPC file.

    Shows one row per coefficient index with its mean (feature value) and
    variance across frames.
    """
    show_command(path)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
