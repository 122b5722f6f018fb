import logging

import pytest

from clockface.config.settings import Settings, get_settings

CLOCKFACE_ENV = (
    "CLOCKFACE_WIDTH",
    "CLOCKFACE_HEIGHT",
    "CLOCKFACE_PADDING",
    "CLOCKFACE_LOG_LEVEL",
    "CLOCKFACE_LOG_FILE",
    "CLOCKFACE_DEBUG",
    "CLOCKFACE_SVG_OUTPUT_PATH",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep config.yaml, .env and CLOCKFACE_* variables from leaking into tests."""
    monkeypatch.chdir(tmp_path)
    for name in CLOCKFACE_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that a test (e.g. CliRunner) has closed."""
    yield
    logger = logging.getLogger("clockface")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def test_settings(tmp_path):
    """Settings writing into a temporary directory."""
    return Settings(
        width=800,
        height=600,
        padding=50,
        update_interval=0.1,
        svg_output_path=tmp_path / "cache" / "clock.svg",
        log_file=None,
    )
