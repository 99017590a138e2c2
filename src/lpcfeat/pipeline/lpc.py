"""Pipeline for computing LPC features from raw audio and writing .npy outputs."""

from __future__ import annotations

import dataclasses
from functools import partial
from pathlib import Path

import librosa
import numpy as np

from ..global_config import LPC_DIR, RAW_AUDIO_DIR, SPECTROGRAM_DIR
from ..lpc import LPCConfig, LPCExtractor
from ..spectrogram import LPCSpectrogram

LPC_OUTPUT_DIR = LPC_DIR


def _resolve_audio_files(files: list[Path] | None, raw_audio_dir: Path) -> list[Path]:
    """Return list of audio paths: explicit files if given, else all .wav in raw_audio_dir."""
    if files:
        return [Path(p).resolve() for p in files]
    if not raw_audio_dir.exists():
        return []
    return sorted(raw_audio_dir.glob("*.wav"))


def _track_name(audio_path: Path) -> str:
    """Stem of the audio file (no extension)."""
    return audio_path.stem


def _output_filename(track_name: str, solver: str, poles: int, window_length: int) -> str:
    """Build filename: <track-name>_lpc_<solver>_<poles>-<window_length>.npy."""
    return f"{track_name}_lpc_{solver}_{poles}-{window_length}.npy"


def run_lpc(
    *,
    audio_files: list[Path] | None = None,
    output_dir: Path = LPC_OUTPUT_DIR,
    raw_audio_dir: Path = RAW_AUDIO_DIR,
    spectrogram_dir: Path = SPECTROGRAM_DIR,
    config: LPCConfig | None = None,
    dry_run: bool = False,
) -> dict:
    """Compute LPC features for audio file(s) and write .npy to output_dir.

    If audio_files is None or empty, uses all .wav files in raw_audio_dir.
    Each output holds a (2, poles) float64 array: row 0 is the feature
    (mean) vector, row 1 the variance vector.
    Output filename: <track-name>_lpc_<solver>_<poles>-<window_length>.npy.
    Same parameters overwrite.

    When config.dump_spectrogram is set (and not dry_run), per-track LPC
    envelope spectrograms are written to spectrogram_dir as <track-name>_lpc.*.

    Returns:
        Dict with success, total, succeeded, failed, skipped, message, items, failures.
    """
    config = config or LPCConfig()
    if dry_run and config.dump_spectrogram:
        config = dataclasses.replace(config, dump_spectrogram=False)

    paths = _resolve_audio_files(audio_files, raw_audio_dir)
    if not paths:
        return {
            "success": True,
            "total": 0,
            "succeeded": 0,
            "failed": 0,
            "skipped": 0,
            "message": "No audio files to process.",
            "items": [],
            "failures": [],
        }

    output_dir = Path(output_dir)
    if not dry_run:
        output_dir.mkdir(parents=True, exist_ok=True)

    succeeded = 0
    failed = 0
    items: list[dict] = []
    failures: list[dict] = []

    for audio_path in paths:
        track_name = _track_name(audio_path)
        out_name = _output_filename(track_name, config.solver, config.poles, config.window_length)
        out_path = output_dir / out_name

        if not audio_path.exists():
            failed += 1
            failures.append({"item": str(audio_path), "reason": "File not found"})
            items.append({"file": str(audio_path), "status": "failed", "detail": "File not found"})
            continue

        try:
            y, sr = librosa.load(audio_path, sr=None, mono=True)
            extractor = LPCExtractor(
                config,
                sink_factory=partial(
                    LPCSpectrogram, name=f"{track_name}_lpc", output_dir=spectrogram_dir
                ),
            )
            result = extractor.extract(y)
            if not dry_run:
                np.save(out_path, np.vstack([result.features, result.variance]), allow_pickle=False)
            succeeded += 1
            items.append({
                "file": audio_path.name,
                "output": out_name,
                "status": "success",
                "sample_rate_hz": int(sr),
                "num_samples": int(len(y)),
                "num_frames": result.n_frames,
                "poles": config.poles,
                "window_length": config.window_length,
            })
        except Exception as e:
            failed += 1
            failures.append({"item": str(audio_path), "reason": str(e)})
            items.append({"file": audio_path.name, "status": "failed", "detail": str(e)})

    return {
        "success": failed == 0,
        "total": len(paths),
        "succeeded": succeeded,
        "failed": failed,
        "skipped": 0,
        "message": f"Processed {len(paths)} file(s). Succeeded: {succeeded}, failed: {failed}."
        + (" [DRY RUN]" if dry_run else ""),
        "items": items,
        "failures": failures,
    }


def load_lpc_output(path: Path) -> tuple[np.ndarray, np.ndarray]:
    """Load a saved LPC output file and return (features, variance)."""
    arr = np.load(Path(path), allow_pickle=False)
    if arr.ndim != 2 or arr.shape[0] != 2:
        raise ValueError(f"Expected LPC output of shape (2, poles), got {arr.shape}: {path}")
    return arr[0], arr[1]
