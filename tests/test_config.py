from portfolio_cms.config import settings


def test_allowed_origins_are_normalized(monkeypatch):
    monkeypatch.setattr(settings, "FRONTEND_URLS", " https://jane.dev/, http://localhost:5173,,https://jane.dev ")
    assert settings.allowed_origins == ["https://jane.dev", "http://localhost:5173"]


def test_plain_http_origins_are_not_upgraded(monkeypatch):
    monkeypatch.setattr(settings, "FRONTEND_URLS", "http://localhost:3000")
    assert settings.allowed_origins == ["http://localhost:3000"]
