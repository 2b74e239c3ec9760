"""
Tests for dspchain.utils (logger, app paths).
"""

from pathlib import Path

from dspchain.utils import app_paths
from dspchain.utils.logger import DSPChainLogger, LogLevel


class TestLogger:

    def test_format_message(self):
        msg = DSPChainLogger.format_message("Loaded", component="PRESET", details="rock.txt")
        assert msg == "[PRESET] Loaded - rock.txt"

    def test_format_message_plain(self):
        assert DSPChainLogger.format_message("hello") == "hello"

    def test_signal_receives_all_levels(self):
        log = DSPChainLogger("dspchain.test.signal")
        received = []
        log.signal_emitter.log_message.connect(
            lambda msg, level, ts: received.append((msg, level))
        )
        log.preset("scan", details="dir")
        log.error("boom", component="PRESET")
        assert received == [
            ("[PRESET] scan - dir", int(LogLevel.DEBUG)),
            ("[PRESET] boom", int(LogLevel.ERROR)),
        ]

    def test_gui_level(self):
        log = DSPChainLogger("dspchain.test.gui_level")
        log.set_gui_level(LogLevel.WARNING)
        received = []
        log.signal_emitter.log_message.connect(lambda msg, level, ts: received.append(msg))
        log.info("quiet")
        log.warning("loud")
        assert received == ["loud"]

    def test_file_logging(self, tmp_path):
        log = DSPChainLogger("dspchain.test.file")
        path = tmp_path / "dsp.log"
        log.enable_file_logging(str(path))
        log.plugins("registry ready")
        log.disable_file_logging()
        assert "[PLUGINS] registry ready" in path.read_text(encoding="utf-8")


class TestAppPaths:

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DSPCHAIN_CFG_DIR", str(tmp_path))
        assert app_paths.get_config_dir() == tmp_path.resolve()

    def test_default_is_absolute(self, monkeypatch):
        monkeypatch.delenv("DSPCHAIN_CFG_DIR", raising=False)
        assert app_paths.get_config_dir().is_absolute()

    def test_layout(self):
        base = Path("/cfg")
        assert app_paths.get_current_preset_path(base) == base / "dspconfig"
        assert app_paths.get_presets_dir(base) == base / "presets" / "dsp"
