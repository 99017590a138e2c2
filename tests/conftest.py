from __future__ import annotations

import os
from pathlib import Path

import numpy as np
import pytest

# Headless rendering for spectrogram tests
os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Forces test mode. Application code can use this to refuse dangerous behaviors.
    Automatically applied to all tests.
    """
    monkeypatch.setenv("APP_ENV", "test")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    A dedicated temp root directory for each test.
    All filesystem writes in tests should be under this root (or tmp_path directly).
    """
    root = tmp_path / "proj"
    (root / "data" / "in").mkdir(parents=True)
    (root / "data" / "out").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def chdir_to_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Automatically change working directory to project_root for all tests.
    This ensures relative-path operations go into the temp directory by default.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def sample_512() -> np.ndarray:
    """Deterministic 512-sample test signal: two sinusoids plus seeded noise."""
    n = np.arange(512)
    rng = np.random.default_rng(1234)
    return (
        np.sin(2 * np.pi * 0.05 * n)
        + 0.5 * np.sin(2 * np.pi * 0.17 * n)
        + 0.1 * rng.standard_normal(512)
    )
