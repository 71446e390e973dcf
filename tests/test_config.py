"""Settings parsing from the environment."""

import pytest

from skillpath.config import Settings


@pytest.mark.parametrize("raw, expected", [
    ("http://a.com", ["http://a.com"]),
    ("http://a.com, http://b.com", ["http://a.com", "http://b.com"]),
    ('["http://a.com", "http://b.com"]', ["http://a.com", "http://b.com"]),
])
def test_cors_origins_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", raw)
    assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == expected


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("BACKEND_CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ["*"]
