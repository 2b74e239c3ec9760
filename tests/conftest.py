"""Pytest configuration - shared fixtures for the DSP preset tests.

`config_dir` builds a throwaway config directory shaped like the real one:
    <tmp>/dspconfig
    <tmp>/presets/dsp/*.txt
"""
from __future__ import annotations

from pathlib import Path
import pytest

from dspchain.plugins import PluginRegistry

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def registry():
    """Registry with a small, ordered set of DSP units."""
    return PluginRegistry([
        ("eq", "Equalizer"),
        ("comp", "Compressor"),
        ("reverb", "Reverb"),
    ])


@pytest.fixture
def config_dir(tmp_path):
    """Empty config dir; presets/dsp is created on first write."""
    return tmp_path / "config"


@pytest.fixture
def write_preset(config_dir):
    """Write a named preset file: write_preset("rock", "eq {\\n}\\n")."""
    def _write(name: str, text: str, suffix: str = ".txt") -> Path:
        path = config_dir / "presets" / "dsp" / f"{name}{suffix}"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_current(config_dir):
    """Write the live chain file (dspconfig)."""
    def _write(text: str) -> Path:
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / "dspconfig"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
