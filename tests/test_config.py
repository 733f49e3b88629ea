"""
Tests for Settings validation.
"""
import pytest
from pydantic import ValidationError

from sports_buddy.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "mongodb://db:27017")

    config = Settings()

    assert config.PORT == 5678
    assert config.MONGODB_DATABASE == "sportsBuddy"
    assert config.ACCOUNTS_COLLECTION == "users"
    assert config.POSTS_COLLECTION == "sportsInfo"
    assert config.cors_origins_list == ["http://localhost:3000", "https://sports-buddy-react-1.onrender.com"]


@pytest.mark.parametrize("url", ["", "   "])
def test_empty_mongodb_url_rejected(url):
    with pytest.raises(ValidationError):
        Settings(MONGODB_URL=url)


def test_missing_mongodb_url_rejected(monkeypatch):
    monkeypatch.delenv("MONGODB_URL", raising=False)
    monkeypatch.delenv("MONGO_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings()


def test_legacy_mongo_url_variable(monkeypatch):
    monkeypatch.delenv("MONGODB_URL", raising=False)
    monkeypatch.setenv("MONGO_URL", "mongodb://legacy:27017")

    assert Settings().MONGODB_URL == "mongodb://legacy:27017"


def test_port_must_be_positive(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "mongodb://db:27017")
    monkeypatch.setenv("PORT", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_cors_origins_list_drops_blanks(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "mongodb://db:27017")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, ,http://b.test,")

    assert Settings().cors_origins_list == ["http://a.test", "http://b.test"]
