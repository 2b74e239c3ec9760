"""App path helpers (cross-platform).

SSOT for where the DSP chain presets live on disk.

Environment overrides (useful for portable/dev launches):
- DSPCHAIN_CFG_DIR: base config dir containing dspconfig + presets/dsp/
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

from dspchain.config import (
    APP_NAME,
    CURRENT_PRESET_FILENAME,
    PRESETS_SUBDIR,
)


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_config_dir() -> Path:
    """Base config dir. Not created here; absence means an empty catalog."""
    cfg_dir = _env_path("DSPCHAIN_CFG_DIR")
    if cfg_dir is not None:
        return cfg_dir
    return Path(user_config_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_current_preset_path(config_dir: Path | None = None) -> Path:
    base = config_dir if config_dir is not None else get_config_dir()
    return base / CURRENT_PRESET_FILENAME


def get_presets_dir(config_dir: Path | None = None) -> Path:
    base = config_dir if config_dir is not None else get_config_dir()
    return base.joinpath(*PRESETS_SUBDIR)
