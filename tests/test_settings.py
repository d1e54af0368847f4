from qtsugar.config.settings import _env_ms


def test_env_value_used(monkeypatch):
    monkeypatch.setenv("QTSUGAR_TEST_MS", "250")
    assert _env_ms("QTSUGAR_TEST_MS", 300) == 250


def test_missing_or_blank_falls_back(monkeypatch):
    monkeypatch.delenv("QTSUGAR_TEST_MS", raising=False)
    assert _env_ms("QTSUGAR_TEST_MS", 300) == 300
    monkeypatch.setenv("QTSUGAR_TEST_MS", "  ")
    assert _env_ms("QTSUGAR_TEST_MS", None) is None


def test_malformed_or_negative_falls_back(monkeypatch):
    monkeypatch.setenv("QTSUGAR_TEST_MS", "soon")
    assert _env_ms("QTSUGAR_TEST_MS", 300) == 300
    monkeypatch.setenv("QTSUGAR_TEST_MS", "-10")
    assert _env_ms("QTSUGAR_TEST_MS", 300) == 300
