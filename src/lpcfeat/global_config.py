"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared filesystem anchors that many modules can import.

Modules that need domain-specific settings define their own `config.py`
on top of these anchors (see `lpcfeat.lpc.config`).
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
# PROJECT_ROOT is the repo root (where pyproject.toml and data/ live)
# From src/lpcfeat/global_config.py, go up two levels: src/lpcfeat -> src -> repo root
PROJECT_ROOT: Path = PACKAGE_ROOT.parent.parent

# Core Names
PROJECT_NAME = "lpcfeat"
PACKAGE_NAME = "lpcfeat"


# Data directories
DATA_DIR: Path = PROJECT_ROOT / "data"
DATASETS_DIR: Path = DATA_DIR / "datasets"
RAW_AUDIO_DIR: Path = DATASETS_DIR / "raw" / "audio"
DERIVED_DIR: Path = DATA_DIR / "derived"
LPC_DIR: Path = DERIVED_DIR / "lpc"
SPECTROGRAM_DIR: Path = DERIVED_DIR / "spectrogram"

# Logs directories
LOGS_DIR: Path = DATA_DIR / "logs"
DERIVED_LOGS_DIR: Path = LOGS_DIR / "derived"

# Parameter files
CONFIG_DIR: Path = PROJECT_ROOT / "config"
LPC_CONFIG_PATH: Path = CONFIG_DIR / "lpc.yaml"
