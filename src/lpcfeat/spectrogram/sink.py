"""LPC spectral-envelope spectrogram sink.

The extractor forwards every frame's coefficients here when spectrogram
dumping is enabled. The sink is write-only: nothing it stores flows back into
the extracted features.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import matplotlib.pyplot as plt
import numpy as np
from scipy.signal import freqz

from ..global_config import SPECTROGRAM_DIR

logger = __import__("logging").getLogger(__name__)


class SpectrogramSink(Protocol):
    """Receiver of per-frame LPC coefficients."""

    def add_lpc(self, coefficients: np.ndarray, poles: int, half_window: int) -> None: ...

    def dump(self) -> Path | None: ...


def lpc_envelope(coefficients: np.ndarray, poles: int, n_bins: int) -> np.ndarray:
    """Magnitude of the all-pole model 1/A(e^jw) at n_bins frequencies in [0, pi).

    Parameters
    ----------
    coefficients : np.ndarray
        Predictor coefficients a[0..poles-1]; A(z) = 1 - sum_k a[k] z^-(k+1).
    poles : int
        Number of coefficients to use.
    n_bins : int
        Number of frequency bins.
    """
    if n_bins < 1:
        raise ValueError(f"n_bins must be positive, got {n_bins}")
    a = np.concatenate(([1.0], -np.asarray(coefficients, dtype=np.float64)[:poles]))
    _, h = freqz([1.0], a, worN=n_bins)
    return np.abs(h)


class LPCSpectrogram:
    """Collect LPC envelopes frame by frame and render them on `dump`.

    Output on dump: ``<name>.npy`` (bins x frames magnitudes) and
    ``<name>.png`` (dB image) under output_dir.
    """

    def __init__(self, name: str = "lpc", output_dir: Path = SPECTROGRAM_DIR) -> None:
        self.name = name
        self.output_dir = Path(output_dir)
        self.columns: list[np.ndarray] = []

    def add_lpc(self, coefficients: np.ndarray, poles: int, half_window: int) -> None:
        self.columns.append(lpc_envelope(coefficients, poles, half_window))

    def to_array(self) -> np.ndarray:
        """Stacked envelopes, shape (bins, frames)."""
        if not self.columns:
            return np.zeros((0, 0))
        return np.column_stack(self.columns)

    def dump(self) -> Path | None:
        """Write the collected spectrogram; returns the PNG path (None if empty)."""
        if not self.columns:
            logger.info("Spectrogram %s has no frames; nothing written", self.name)
            return None

        spec = self.to_array()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        npy_path = self.output_dir / f"{self.name}.npy"
        png_path = self.output_dir / f"{self.name}.png"
        np.save(npy_path, spec, allow_pickle=False)

        with np.errstate(divide="ignore", invalid="ignore"):
            spec_db = 20 * np.log10(np.maximum(spec, 1e-12))
        fig, ax = plt.subplots(figsize=(8, 4))
        try:
            ax.imshow(spec_db, origin="lower", aspect="auto", cmap="magma")
            ax.set_xlabel("Frame")
            ax.set_ylabel("Frequency bin")
            ax.set_title(f"LPC envelope ({self.name})")
            fig.savefig(png_path, dpi=100)
        finally:
            plt.close(fig)

        logger.info("Wrote spectrogram %s (%d frames)", png_path, spec.shape[1])
        return png_path
