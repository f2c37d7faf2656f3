"""
Unit tests for the loguru-based Logger.
"""

import pytest
from loguru import logger

from evapotranspiration import fao
from evapotranspiration.config import load_config
from evapotranspiration.core.conversion import deg_to_rad
from evapotranspiration.thornthwaite import thornthwaite
from evapotranspiration.utils.logger import Logger


@pytest.fixture
def captured():
    """Collect formatted log messages at DEBUG and above."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)


class TestLogger:
    """Test Logger setup and helpers."""

    def test_static_helpers(self, captured):
        Logger.debug("debug message")
        Logger.warning("warning message")
        assert any(m.startswith("DEBUG debug message") for m in captured)
        assert any(m.startswith("WARNING warning message") for m in captured)

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "et.log"
        Logger.setup(log_file=str(log_file), level="INFO", console=False)
        thornthwaite([0.0] * 12, [12.0] * 12)
        logger.complete()
        assert "heat index is zero" in log_file.read_text()

    def test_setup_from_config(self, tmp_path):
        log_file = tmp_path / "from_config.log"
        config = {
            "logging": {
                "level": "WARNING",
                "console": False,
                "file_log": True,
                "log_file": str(log_file),
                "format": "{level} | {message}",
            }
        }
        Logger.setup_from_config(config)
        thornthwaite([20.0] * 12, [12.0] * 12)
        thornthwaite([0.0] * 12, [12.0] * 12)
        text = log_file.read_text()
        assert "WARNING | Thornthwaite heat index is zero" in text
        assert "exponent" not in text

    def test_package_sinks_ignore_application_records(self, tmp_path):
        log_file = tmp_path / "package.log"
        Logger.setup(log_file=str(log_file), level="DEBUG", console=False)
        logger.info("application message")
        thornthwaite([0.0] * 12, [12.0] * 12)
        text = log_file.read_text()
        assert "application message" not in text
        assert "heat index is zero" in text

    def test_package_disabled_until_setup(self, captured):
        logger.disable("evapotranspiration")
        try:
            fao.sunset_hour_angle(deg_to_rad(90.0), 0.409)
            assert not any("Clamping" in m for m in captured)
        finally:
            logger.enable("evapotranspiration")

    def test_polar_clamp_is_logged(self, captured):
        fao.sunset_hour_angle(deg_to_rad(90.0), 0.409)
        assert any(m.startswith("DEBUG Clamping") for m in captured)


class TestApplicationSinks:
    """Sinks added by the host application are never removed."""

    def test_survives_setup_from_config(self, captured):
        Logger.setup_from_config(load_config())
        logger.info("app message")
        assert any(m.startswith("INFO app message") for m in captured)

    def test_survives_repeated_setup(self, captured):
        Logger.configure_for_testing()
        Logger.setup(level="INFO", console=False)
        logger.info("app message")
        assert any(m.startswith("INFO app message") for m in captured)

    def test_survives_reset(self, captured):
        Logger.reset()
        logger.info("app message")
        assert any(m.startswith("INFO app message") for m in captured)

    def test_setup_replaces_only_own_sinks(self, tmp_path):
        Logger.setup(log_file=str(tmp_path / "a.log"), console=False)
        Logger.setup(log_file=str(tmp_path / "b.log"), console=False)
        assert len(Logger._handler_ids) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
