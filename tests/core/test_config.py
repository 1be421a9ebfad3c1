"""Tests for configuration loading"""
import pytest
from pydantic import ValidationError

from app.core.config import Config


class TestConfig:
    """Test Config construction"""

    def test_missing_secret_is_fatal(self, monkeypatch):
        """Configuration cannot be built without a signing secret"""
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Config(_env_file=None)

    def test_reads_environment(self, monkeypatch):
        """Values come from environment variables"""
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.setenv("PORT", "5050")
        monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
        monkeypatch.setenv("CORS_ORIGIN", "https://shop.acme.io")

        config = Config(_env_file=None)

        assert config.jwt_secret == "from-env"
        assert config.port == 5050
        assert config.mongo_uri == "mongodb://db:27017"
        assert config.cors_origin == "https://shop.acme.io"

    def test_defaults(self, monkeypatch):
        """Test default values"""
        for name in ("PORT", "JWT_EXPIRATION", "JWT_ALGORITHM"):
            monkeypatch.delenv(name, raising=False)

        config = Config(_env_file=None, jwt_secret="s")

        assert config.port == 4000
        assert config.jwt_expiration == 3600
        assert config.jwt_algorithm == "HS256"
