"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from unravel.core.config import Settings
from unravel.services.checkers import EnglishChecker


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.english_word_ratio == 0.5
        assert settings.max_search_depth == 3
        assert settings.max_parallel_decoders is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("UNRAVEL_ENGLISH_WORD_RATIO", "0.8")
        monkeypatch.setenv("UNRAVEL_MAX_PARALLEL_DECODERS", "2")
        settings = Settings()
        assert settings.english_word_ratio == 0.8
        assert settings.max_parallel_decoders == 2

    def test_ratio_is_bounded(self):
        with pytest.raises(ValidationError):
            Settings(english_word_ratio=1.5)

    def test_environment_flags(self):
        assert Settings(app_env="production").is_production
        assert Settings(app_env="development").is_development

    def test_explicit_threshold_wins(self):
        assert EnglishChecker(threshold=0.9).threshold == 0.9
