"""Frame slicing and Hamming taper."""

from __future__ import annotations

import numpy as np


def hamming_taper(length: int) -> np.ndarray:
    """Hamming window 0.54 - 0.46*cos(2*pi*n/(L-1)) for n in [0, L)."""
    if length < 2:
        raise ValueError(f"length must be at least 2, got {length}")
    n = np.arange(length, dtype=np.float64)
    return 0.54 - 0.46 * np.cos(2 * np.pi * n / (length - 1))


def window_frame(
    sample: np.ndarray,
    offset: int,
    length: int,
    taper: np.ndarray | None = None,
) -> np.ndarray:
    """Copy ``sample[offset:offset+length]`` and apply the Hamming taper in place.

    Parameters
    ----------
    sample : np.ndarray
        1-D float sample.
    offset : int
        First sample of the frame.
    length : int
        Frame length L.
    taper : np.ndarray or None
        Precomputed taper of length L; built from `hamming_taper` if None.
    """
    if offset < 0 or offset + length > len(sample):
        raise ValueError(
            f"Frame [{offset}, {offset + length}) does not fit a sample of length {len(sample)}"
        )
    if taper is None:
        taper = hamming_taper(length)
    frame = np.array(sample[offset : offset + length], dtype=np.float64)
    frame *= taper
    return frame
