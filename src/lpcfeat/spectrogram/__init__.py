"""Spectrogram rendering of per-frame LPC envelopes."""

from .sink import LPCSpectrogram, SpectrogramSink, lpc_envelope

__all__ = [
    "LPCSpectrogram",
    "SpectrogramSink",
    "lpc_envelope",
]
