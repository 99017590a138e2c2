"""Tests for the LPC pipeline."""

from __future__ import annotations

import wave
from pathlib import Path

import numpy as np
import pytest

from lpcfeat.lpc import LPCConfig
from lpcfeat.pipeline.lpc import (
    _output_filename,
    _resolve_audio_files,
    _track_name,
    load_lpc_output,
    run_lpc,
)


def _write_wav(path: Path, samples: np.ndarray, sr: int = 16000) -> None:
    """Write a mono int16 WAV from float samples in [-1, 1] so librosa can load it."""
    buf = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(sr)
        w.writeframes(buf.tobytes())


def _tone(n: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    t = np.arange(n)
    return 0.5 * np.sin(2 * np.pi * 0.03 * t) + 0.05 * rng.standard_normal(n)


class TestLPCHelpers:
    """Unit tests for pipeline helpers."""

    def test_track_name_from_path(self) -> None:
        assert _track_name(Path("/foo/bar/SPK-001.wav")) == "SPK-001"

    def test_output_filename_format(self) -> None:
        assert _output_filename("SPK-001", "levinson", 10, 128) == "SPK-001_lpc_levinson_10-128.npy"

    def test_resolve_audio_files_explicit(self, tmp_path: Path) -> None:
        a = tmp_path / "a.wav"
        a.touch()
        got = _resolve_audio_files([a], tmp_path)
        assert [p.name for p in got] == ["a.wav"]

    def test_resolve_audio_files_default_folder(self, tmp_path: Path) -> None:
        (tmp_path / "one.wav").touch()
        (tmp_path / "two.wav").touch()
        (tmp_path / "notes.txt").touch()
        got = _resolve_audio_files(None, tmp_path)
        assert [p.name for p in got] == ["one.wav", "two.wav"]

    def test_resolve_audio_files_nonexistent_folder(self, tmp_path: Path) -> None:
        assert _resolve_audio_files(None, tmp_path / "missing") == []

    def test_load_lpc_output_rejects_bad_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.npy"
        np.save(path, np.zeros(10))
        with pytest.raises(ValueError, match="shape"):
            load_lpc_output(path)


@pytest.mark.integration
class TestRunLPC:
    """Integration-style tests for run_lpc (use tmp paths)."""

    def test_writes_features_and_variance(self, tmp_path: Path) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "lpc"
        _write_wav(wav_dir / "SPK01.wav", _tone(512))

        result = run_lpc(audio_files=[wav_dir / "SPK01.wav"], output_dir=out_dir, raw_audio_dir=wav_dir)

        assert result["success"] is True
        assert result["succeeded"] == 1
        item = result["items"][0]
        assert item["num_frames"] == 7
        assert item["num_samples"] == 512
        assert item["sample_rate_hz"] == 16000
        features, variance = load_lpc_output(out_dir / "SPK01_lpc_levinson_10-128.npy")
        assert features.shape == (10,)
        assert variance.shape == (10,)
        assert np.all(variance >= 0)

    def test_default_folder_and_custom_config(self, tmp_path: Path) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "lpc"
        _write_wav(wav_dir / "A.wav", _tone(2048, seed=1))
        _write_wav(wav_dir / "B.wav", _tone(2048, seed=2))

        result = run_lpc(
            output_dir=out_dir,
            raw_audio_dir=wav_dir,
            config=LPCConfig(poles=12, window_length=256, solver="burg"),
        )

        assert result["success"] is True
        assert result["total"] == 2
        assert (out_dir / "A_lpc_burg_12-256.npy").exists()
        assert (out_dir / "B_lpc_burg_12-256.npy").exists()

    def test_dry_run_writes_nothing(self, tmp_path: Path) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "lpc"
        spec_dir = tmp_path / "spec"
        _write_wav(wav_dir / "SPK02.wav", _tone(512))

        result = run_lpc(
            audio_files=[wav_dir / "SPK02.wav"],
            output_dir=out_dir,
            spectrogram_dir=spec_dir,
            config=LPCConfig(dump_spectrogram=True),
            dry_run=True,
        )

        assert result["success"] is True
        assert "[DRY RUN]" in result["message"]
        assert not out_dir.exists()
        assert not spec_dir.exists()

    def test_dump_spectrogram(self, tmp_path: Path) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        spec_dir = tmp_path / "spec"
        _write_wav(wav_dir / "SPK03.wav", _tone(1024))

        result = run_lpc(
            audio_files=[wav_dir / "SPK03.wav"],
            output_dir=tmp_path / "lpc",
            spectrogram_dir=spec_dir,
            config=LPCConfig(dump_spectrogram=True),
        )

        assert result["success"] is True
        assert (spec_dir / "SPK03_lpc.png").exists()
        assert np.load(spec_dir / "SPK03_lpc.npy").shape == (64, 15)

    def test_short_audio_succeeds_with_zero_features(self, tmp_path: Path) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        out_dir = tmp_path / "lpc"
        _write_wav(wav_dir / "SHORT.wav", _tone(100))

        result = run_lpc(audio_files=[wav_dir / "SHORT.wav"], output_dir=out_dir)

        assert result["success"] is True
        assert result["items"][0]["num_frames"] == 0
        features, variance = load_lpc_output(out_dir / "SHORT_lpc_levinson_10-128.npy")
        np.testing.assert_array_equal(features, np.zeros(10))
        np.testing.assert_array_equal(variance, np.zeros(10))

    def test_extraction_failure_is_reported(self, tmp_path: Path) -> None:
        wav_dir = tmp_path / "audio"
        wav_dir.mkdir()
        _write_wav(wav_dir / "SILENT.wav", np.zeros(512))
        _write_wav(wav_dir / "OK.wav", _tone(512))

        result = run_lpc(
            output_dir=tmp_path / "lpc",
            raw_audio_dir=wav_dir,
            config=LPCConfig(nonfinite="reject"),
        )

        assert result["success"] is False
        assert result["succeeded"] == 1
        assert result["failed"] == 1
        assert "SILENT.wav" in result["failures"][0]["item"]
        assert "extraction failed" in result["failures"][0]["reason"]

    def test_missing_file_is_reported(self, tmp_path: Path) -> None:
        result = run_lpc(audio_files=[tmp_path / "nope.wav"], output_dir=tmp_path / "lpc")
        assert result["success"] is False
        assert result["failures"][0]["reason"] == "File not found"

    def test_no_files_returns_ok_empty_message(self, tmp_path: Path) -> None:
        result = run_lpc(audio_files=None, output_dir=tmp_path, raw_audio_dir=tmp_path)
        assert result["success"] is True
        assert result["total"] == 0
        assert "No audio files" in result["message"]
