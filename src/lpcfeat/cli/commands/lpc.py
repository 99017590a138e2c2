"""CLI command for LPC feature extraction."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Annotated

import typer

from ...global_config import LPC_CONFIG_PATH, RAW_AUDIO_DIR
from ...lpc import LPCConfig, load_lpc_config
from ...pipeline.lpc import LPC_OUTPUT_DIR, run_lpc
from ..base import BaseCLI, handle_errors


def resolve_lpc_config(
    config_path: Path,
    *,
    poles: int | None = None,
    window: int | None = None,
    solver: str | None = None,
    nonfinite: str | None = None,
    dump_spectrogram: bool = False,
) -> LPCConfig:
    """Load the YAML config and apply command-line overrides on top of it."""
    config = load_lpc_config(config_path)
    overrides = {
        "poles": poles,
        "window_length": window,
        "solver": solver.lower() if solver else None,
        "nonfinite": nonfinite.lower() if nonfinite else None,
        "dump_spectrogram": True if dump_spectrogram else None,
    }
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def lpc_command(
    files: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Audio file(s) to process. If omitted, all .wav files in data/datasets/raw/audio are used.",
        ),
    ] = None,
    poles: Annotated[
        int | None,
        typer.Option("--poles", "-p", help="Number of poles (LPC order). Uses config default if not set."),
    ] = None,
    window: Annotated[
        int | None,
        typer.Option("--window", "-w", help="Window length L in samples. Uses config default if not set."),
    ] = None,
    solver: Annotated[
        str | None,
        typer.Option("--solver", "-s", help="LPC solver: levinson, burg. Uses config default if not set."),
    ] = None,
    nonfinite: Annotated[
        str | None,
        typer.Option("--nonfinite", help="Non-finite coefficient policy: propagate, reject, zero."),
    ] = None,
    config_path: Annotated[
        Path,
        typer.Option("--config", "-c", help="LPC parameter YAML file."),
    ] = LPC_CONFIG_PATH,
    dump_spectrogram: Annotated[
        bool,
        typer.Option("--dump-spectrogram", help="Write per-track LPC envelope spectrograms."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be written without writing files."),
    ] = False,
    no_log: Annotated[
        bool,
        typer.Option("--no-log", help="Do not write a log file to data/logs/derived."),
    ] = False,
) -> None:
    """Compute LPC features from raw audio and write to data/derived/lpc.

    Parameters come from the YAML config (defaults: 10 poles, window 128);
    command-line options override it.

    Output filenames: <track-name>_lpc_<solver>_<poles>-<window>.npy, holding
    the feature (mean) vector and the variance vector as two rows.
    """
    cli = BaseCLI("lpc")

    audio_list = list(files) if files else None

    with handle_errors("lpc", logger=cli.logger):
        config = resolve_lpc_config(
            config_path,
            poles=poles,
            window=window,
            solver=solver,
            nonfinite=nonfinite,
            dump_spectrogram=dump_spectrogram,
        )

    def _run() -> dict:
        return run_lpc(
            audio_files=audio_list,
            output_dir=LPC_OUTPUT_DIR,
            raw_audio_dir=RAW_AUDIO_DIR,
            config=config,
            dry_run=dry_run,
        )

    pre_message = (
        "Computing LPC features (dry-run; no files will be written)..."
        if dry_run
        else "Computing LPC features for "
        + (f"{len(audio_list)} file(s)..." if audio_list else "all audio in raw folder...")
    )
    inputs_desc = (
        str([str(p) for p in audio_list]) if audio_list
        else f"all .wav in {RAW_AUDIO_DIR}"
    )
    cli.handle_cli_operation(
        operation="lpc",
        op_callable=_run,
        pre_message=pre_message,
        log_module="lpc",
        log_method=config.solver,
        log_dry_run=dry_run,
        enable_log=not no_log,
        log_context={
            "inputs": inputs_desc,
            "output_dir": str(LPC_OUTPUT_DIR),
            "config": str(config_path),
            "poles": config.poles,
            "window_length": config.window_length,
            "nonfinite": config.nonfinite,
        },
    )
