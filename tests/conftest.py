import pytest


@pytest.fixture(autouse=True)
def fast_text(monkeypatch, tmp_path):
    monkeypatch.setattr("rps.utils.TEXT_DELAY", 0)
    monkeypatch.setenv("RPS_LOG_FILE", str(tmp_path / "rps.log"))
    monkeypatch.delenv("RPS_LEGACY_DRAW", raising=False)
