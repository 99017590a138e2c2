"""LPC feature extraction package."""

from .config import DEFAULT_POLES, DEFAULT_WINDOW_LENGTH, LPCConfig, load_lpc_config
from .errors import FeatureExtractionError
from .extractor import LPCExtractor, LPCFeatures, frame_starts
from .solvers import SOLVER_TYPES, autocorrelation, get_solver, solve_burg, solve_levinson
from .stats import RunningStats
from .window import hamming_taper, window_frame

__all__ = [
    "DEFAULT_POLES",
    "DEFAULT_WINDOW_LENGTH",
    "LPCConfig",
    "load_lpc_config",
    "FeatureExtractionError",
    "LPCExtractor",
    "LPCFeatures",
    "frame_starts",
    "SOLVER_TYPES",
    "autocorrelation",
    "get_solver",
    "solve_burg",
    "solve_levinson",
    "RunningStats",
    "hamming_taper",
    "window_frame",
]
