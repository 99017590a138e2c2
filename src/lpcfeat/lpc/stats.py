"""Running per-coefficient mean and variance."""

from __future__ import annotations

import numpy as np


class RunningStats:
    """Fold coefficient vectors into a running mean and population variance.

    Uses the exact recurrence

        mean' = (i * mean + c) / (i + 1)
        var'  = (i * var + i * (mean - mean')**2 + (c - mean')**2) / (i + 1)

    with i the number of vectors seen so far. The operation order is part of
    the contract: results must match it bit for bit.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self.mean = np.zeros(size)
        self.variance = np.zeros(size)
        self.count = 0

    def update(self, coefficients: np.ndarray) -> None:
        """Fold one coefficient vector into the statistics."""
        c = np.asarray(coefficients, dtype=np.float64)
        if c.shape != (self.size,):
            raise ValueError(f"Expected {self.size} coefficients, got shape {c.shape}")
        i = self.count
        prev_mean = self.mean
        self.mean = (i * prev_mean + c) / (i + 1)
        self.variance = (
            i * self.variance + i * (prev_mean - self.mean) ** 2 + (c - self.mean) ** 2
        ) / (i + 1)
        self.count = i + 1

    def reset(self) -> None:
        self.mean = np.zeros(self.size)
        self.variance = np.zeros(self.size)
        self.count = 0
