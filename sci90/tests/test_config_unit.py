from sci90.internal_core.config import load_config


def test_load_config_defaults(monkeypatch) -> None:
    for name in ("SCI90_STRICT_ANSWERS", "SCI90_LOG_LEVEL", "SCI90_SHARE_BASE_URL", "SCI90_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    config = load_config()
    assert config.SCI90_STRICT_ANSWERS is False
    assert config.SCI90_LOG_LEVEL == "INFO"
    assert config.SCI90_CORS_ORIGINS == ("*",)
    assert config.share_links_enabled() is False


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SCI90_STRICT_ANSWERS", "yes")
    monkeypatch.setenv("SCI90_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCI90_SHARE_BASE_URL", " https://example.test/ ")
    monkeypatch.setenv("SCI90_CORS_ORIGINS", "https://a.test, https://b.test")
    config = load_config()
    assert config.SCI90_STRICT_ANSWERS is True
    assert config.SCI90_LOG_LEVEL == "DEBUG"
    assert config.SCI90_SHARE_BASE_URL == "https://example.test/"
    assert config.SCI90_CORS_ORIGINS == ("https://a.test", "https://b.test")
    assert config.share_links_enabled() is True
