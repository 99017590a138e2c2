"""Pipeline orchestration layer.

Pipeline modules are organized by verb:
- `pipeline/lpc.py` - LPC feature extraction over audio files

Import policy:
- CLI imports only from `pipeline.*` for orchestration (verbs).
- `pipeline.*` may call `lpc.*` and `spectrogram.*` as helpers.
- `lpc.*` must not call `pipeline.*`.
"""
