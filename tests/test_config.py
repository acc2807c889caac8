from codesearch.config import Config


def test_defaults(monkeypatch):
    for key in ("SEARCH_BACKEND_URL", "SEARCH_BACKEND_TIMEOUT", "FORWARD_HEADERS", "LOG_LEVEL", "PORT"):
        monkeypatch.delenv(key, raising=False)
    cfg = Config()
    assert cfg.SEARCH_BACKEND_URL == "http://localhost:9200/api/code"
    assert cfg.SEARCH_BACKEND_TIMEOUT is None
    assert cfg.FORWARD_HEADERS == ("authorization", "cookie")
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.PORT == 8000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_BACKEND_URL", "http://backend:9000/code/")
    monkeypatch.setenv("SEARCH_BACKEND_TIMEOUT", "2.5")
    monkeypatch.setenv("FORWARD_HEADERS", " Authorization , X-Tenant ,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = Config()
    assert cfg.SEARCH_BACKEND_URL == "http://backend:9000/code"
    assert cfg.SEARCH_BACKEND_TIMEOUT == 2.5
    assert cfg.FORWARD_HEADERS == ("authorization", "x-tenant")
    assert cfg.LOG_LEVEL == "DEBUG"


def test_non_positive_timeout_disables_it(monkeypatch):
    monkeypatch.setenv("SEARCH_BACKEND_TIMEOUT", "0")
    assert Config().SEARCH_BACKEND_TIMEOUT is None
