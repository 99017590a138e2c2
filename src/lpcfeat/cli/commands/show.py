"""CLI command for inspecting saved LPC feature files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from rich.console import Console
from rich.table import Table

from ...pipeline.lpc import load_lpc_output
from ..base import handle_errors


def build_lpc_table(path: Path, features: np.ndarray, variance: np.ndarray) -> Table:
    """Build a rich table with one row per coefficient index."""
    table = Table(title=Path(path).name)
    table.add_column("k", justify="right", style="cyan")
    table.add_column("mean", justify="right")
    table.add_column("variance", justify="right")
    for k, (m, v) in enumerate(zip(features, variance), start=1):
        table.add_row(str(k), f"{m:.6g}", f"{v:.6g}")
    return table


def show_command(path: Path, console: Console | None = None) -> None:
    """Print the feature and variance vectors of a saved LPC file."""
    console = console or Console()
    with handle_errors("show"):
        features, variance = load_lpc_output(path)
        console.print(build_lpc_table(path, features, variance))
