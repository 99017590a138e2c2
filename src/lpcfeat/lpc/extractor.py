"""LPC feature extraction over overlapping Hamming-tapered frames.

Frames of length L start every L//2 samples. Each frame is solved for
``poles`` prediction coefficients, and the coefficients are folded into a
running mean (the feature vector) and variance.

A sample shorter than L yields no frames: both vectors stay zero and the
call still succeeds (``n_frames == 0``).

Extractor instances are not thread-safe. Each `extract` call snapshots the
config, so setters used between calls never affect a call in flight, but
sharing one instance across threads is the caller's responsibility.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator
from dataclasses import dataclass

import numpy as np

from ..spectrogram.sink import LPCSpectrogram, SpectrogramSink
from .config import LPCConfig
from .errors import FeatureExtractionError
from .solvers import LPCSolver, get_solver
from .stats import RunningStats
from .window import hamming_taper, window_frame

logger = __import__("logging").getLogger(__name__)


@dataclass(frozen=True)
class LPCFeatures:
    """Result of one extraction call."""

    features: np.ndarray
    variance: np.ndarray
    n_frames: int
    success: bool


def frame_starts(n_samples: int, window_length: int) -> Iterator[int]:
    """Yield the start offset of every frame processed for a sample of n_samples."""
    half = window_length // 2
    offset = half
    while offset + half <= n_samples:
        yield offset - half
        offset += half


class LPCExtractor:
    """Extract LPC mean/variance features from a 1-D sample."""

    def __init__(
        self,
        config: LPCConfig | None = None,
        *,
        solver: LPCSolver | None = None,
        sink_factory: Callable[[], SpectrogramSink] | None = None,
    ) -> None:
        self.config = config or LPCConfig()
        self._solver = solver
        self.sink_factory = sink_factory or LPCSpectrogram
        self.features: np.ndarray | None = None
        self.variance: np.ndarray | None = None

    @property
    def poles(self) -> int:
        return self.config.poles

    @poles.setter
    def poles(self, value: int) -> None:
        self.config = dataclasses.replace(self.config, poles=value)

    @property
    def window_length(self) -> int:
        return self.config.window_length

    @window_length.setter
    def window_length(self, value: int) -> None:
        self.config = dataclasses.replace(self.config, window_length=value)

    @property
    def solver(self) -> LPCSolver:
        """Injected solver if one was given, else the configured one."""
        return self._solver or get_solver(self.config.solver)

    def extract(self, sample) -> LPCFeatures:
        """Run the full pipeline over one sample.

        Args:
            sample: 1-D sequence of amplitudes.

        Returns:
            `LPCFeatures` holding the mean (features) and variance vectors.

        Raises:
            FeatureExtractionError: On any fault (malformed sample, solver or
                sink failure, rejected non-finite coefficients). Nothing is
                published on failure.
        """
        config = self.config
        try:
            result = self._extract(sample, config, self.solver)
        except Exception as exc:
            logger.debug("LPC extraction failed", exc_info=True)
            raise FeatureExtractionError(exc) from exc

        self.features = result.features
        self.variance = result.variance
        return result

    def _extract(self, sample, config: LPCConfig, solver: LPCSolver) -> LPCFeatures:
        x = np.asarray(sample, dtype=np.float64)
        if x.ndim != 1:
            raise ValueError(f"sample must be 1-D, got shape {x.shape}")

        P = config.poles
        L = config.window_length
        half = config.half_window
        sink = self.sink_factory() if config.dump_spectrogram else None

        stats = RunningStats(P)
        taper = hamming_taper(L)
        for start in frame_starts(len(x), L):
            frame = window_frame(x, start, L, taper)
            coeffs, _errors = solver(frame, P)
            coeffs = self._check_finite(np.asarray(coeffs, dtype=np.float64), start, config.nonfinite)
            if sink is not None:
                sink.add_lpc(coeffs, P, half)
            stats.update(coeffs)

        if sink is not None:
            sink.dump()

        logger.debug(
            "LPC extraction: %d frame(s), poles=%d, window_length=%d", stats.count, P, L
        )
        return LPCFeatures(
            features=stats.mean,
            variance=stats.variance,
            n_frames=stats.count,
            success=len(stats.mean) > 0,
        )

    @staticmethod
    def _check_finite(coeffs: np.ndarray, start: int, policy: str) -> np.ndarray:
        """Apply the non-finite policy to one frame's coefficients."""
        finite = np.isfinite(coeffs)
        if finite.all():
            return coeffs
        if policy == "reject":
            raise ValueError(f"Non-finite LPC coefficients in frame starting at {start}")
        if policy == "zero":
            logger.warning("Zeroing non-finite LPC coefficients in frame starting at %d", start)
            return np.where(finite, coeffs, 0.0)
        logger.warning("Non-finite LPC coefficients in frame starting at %d", start)
        return coeffs
