"""
lpcfeat core package.

Computes Linear Predictive Coding features from audio samples: overlapping
Hamming-tapered frames, per-frame prediction coefficients, and their running
mean and variance.

Layout:
- `lpcfeat.lpc` – numeric core (windowing, solvers, statistics, extractor)
- `lpcfeat.spectrogram` – optional LPC envelope spectrogram sink
- `lpcfeat.pipeline` – batch verbs over audio files
- `lpcfeat.cli` – Typer-based CLI

Configuration:
- Shared filesystem anchors live in `lpcfeat.global_config`.
- LPC settings live in `lpcfeat.lpc.config` (YAML-backed).
"""
