"""LPC extraction settings.

Builds on `lpcfeat.global_config` for the default parameter file location.
Settings are immutable; change them by building a new `LPCConfig`
(`dataclasses.replace`) rather than mutating shared state.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from ..global_config import LPC_CONFIG_PATH

logger = __import__("logging").getLogger(__name__)

DEFAULT_POLES = 10
DEFAULT_WINDOW_LENGTH = 128
DEFAULT_SOLVER = "levinson"

# How non-finite solver output is treated before it reaches the statistics
NONFINITE_POLICIES = frozenset({"propagate", "reject", "zero"})

# Kept in sync with lpcfeat.lpc.solvers.SOLVERS
SOLVER_NAMES = frozenset({"levinson", "burg"})


@dataclass(frozen=True)
class LPCConfig:
    """Pole count, window length, and solver options for one extractor."""

    poles: int = DEFAULT_POLES
    window_length: int = DEFAULT_WINDOW_LENGTH
    solver: str = DEFAULT_SOLVER
    nonfinite: str = "propagate"
    dump_spectrogram: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.poles, bool) or not isinstance(self.poles, int):
            raise TypeError(f"poles must be an int, got {type(self.poles).__name__}")
        if isinstance(self.window_length, bool) or not isinstance(self.window_length, int):
            raise TypeError(
                f"window_length must be an int, got {type(self.window_length).__name__}"
            )
        if self.poles < 1:
            raise ValueError(f"poles must be positive, got {self.poles}")
        # A window of 1 has a zero half-window and an undefined taper.
        if self.window_length < 2:
            raise ValueError(f"window_length must be at least 2, got {self.window_length}")
        if self.solver not in SOLVER_NAMES:
            raise ValueError(f"Unknown LPC solver: {self.solver}. Use one of: {sorted(SOLVER_NAMES)}")
        if self.nonfinite not in NONFINITE_POLICIES:
            raise ValueError(
                f"Unknown non-finite policy: {self.nonfinite}. "
                f"Use one of: {sorted(NONFINITE_POLICIES)}"
            )

    @property
    def half_window(self) -> int:
        """Hop between consecutive frames, in samples."""
        return self.window_length // 2

    @classmethod
    def from_params(cls, params: Sequence[int] | None, **overrides: Any) -> LPCConfig:
        """Build a config from a positional parameter source.

        The source holds ``[poles, window_length]``. An empty or missing
        source keeps the defaults; both entries are required otherwise.

        Args:
            params: Positional parameters, or None.
            **overrides: Any other `LPCConfig` field.

        Returns:
            New `LPCConfig`.

        Raises:
            ValueError: If params holds a single entry.
        """
        if not params:
            return cls(**overrides)
        if len(params) < 2:
            raise ValueError(
                f"params must hold [poles, window_length], got {list(params)}"
            )
        return cls(poles=int(params[0]), window_length=int(params[1]), **overrides)


def load_lpc_config(path: Path = LPC_CONFIG_PATH) -> LPCConfig:
    """Load LPC settings from a YAML mapping.

    A missing file yields the defaults. Keys must be `LPCConfig` field names.

    Args:
        path: YAML file path. Defaults to LPC_CONFIG_PATH.

    Returns:
        `LPCConfig` built from the file.

    Raises:
        ValueError: If the document is not a mapping or holds unknown keys.
        yaml.YAMLError: If the YAML is invalid.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No LPC config at %s, using defaults", path)
        return LPCConfig()

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return LPCConfig()
    if not isinstance(data, dict):
        raise ValueError(f"LPC config must be a mapping, got {type(data).__name__}: {path}")

    known = {f.name for f in fields(LPCConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown LPC config key(s) in {path}: {unknown}")

    return LPCConfig(**data)
