import pytest

from fastaseq.settings.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep user config files and FASTASEQ_* variables out of every test."""
    for name in ("FASTASEQ_LINE_WIDTH", "FASTASEQ_ALLOW_DUPLICATES", "FASTASEQ_ENCODING", "FASTASEQ_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FASTASEQ_CONFIG_PATH", str(tmp_path / "no-such-config.json"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
