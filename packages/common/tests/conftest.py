import pytest

from tgui_common import config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from config files on the host."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TGUI_COMMON_CONFIG", raising=False)
    monkeypatch.setattr(config, "DEFAULT_PATHS", ())
    config.get_config.cache_clear()
    yield
    config.get_config.cache_clear()
