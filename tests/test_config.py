import logging

import pytest

from sniff_text import config
from sniff_text.languagepacks import ENGLISH_LANGUAGE_PACK, GERMAN_LANGUAGE_PACK
from sniff_text.log import setup_logging
from sniff_text.models import AnalysisOptions


class TestConfig:

    def test_defaults(self):
        assert config.as_dict() == {
            "max_execution_time_ms": 50.0,
            "enable_early_termination": True,
            "include_details": True,
            "min_word_count": 2,
            "language": "english",
            "log_level": "WARNING",
        }

    def test_env_names(self):
        assert config.env_name("max_execution_time_ms") == "SNIFF_TEXT_MAX_EXECUTION_MS"
        assert config.env_name("min_word_count") == "SNIFF_TEXT_MIN_WORDS"
        assert config.env_name("language") == "SNIFF_TEXT_LANGUAGE"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SNIFF_TEXT_MAX_EXECUTION_MS", "80")
        monkeypatch.setenv("SNIFF_TEXT_ENABLE_EARLY_TERMINATION", "off")
        monkeypatch.setenv("SNIFF_TEXT_MIN_WORDS", "5")
        assert config.get("max_execution_time_ms") == 80.0
        assert config.get("enable_early_termination") is False
        assert config.get("min_word_count") == 5

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("SNIFF_TEXT_LANGUAGE", "  ")
        assert config.get("language") == "english"

    @pytest.mark.parametrize("key,env,value", [
        ("include_details", "SNIFF_TEXT_INCLUDE_DETAILS", "maybe"),
        ("min_word_count", "SNIFF_TEXT_MIN_WORDS", "lots"),
    ])
    def test_bad_values(self, monkeypatch, key, env, value):
        monkeypatch.setenv(env, value)
        with pytest.raises(ValueError, match=env):
            config.get(key)

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            config.get("nope")


class TestOptionsFromConfig:

    def test_defaults(self):
        options = AnalysisOptions.from_config()
        assert options.language_pack is ENGLISH_LANGUAGE_PACK
        assert options.max_execution_time_ms == 50.0
        assert options.min_word_count == 2
        assert options.enable_early_termination is True
        assert options.include_details is True

    def test_language_from_environment(self, monkeypatch):
        monkeypatch.setenv("SNIFF_TEXT_LANGUAGE", "german")
        monkeypatch.setenv("SNIFF_TEXT_INCLUDE_DETAILS", "0")
        options = AnalysisOptions.from_config()
        assert options.language_pack is GERMAN_LANGUAGE_PACK
        assert options.include_details is False

    def test_explicit_pack_wins(self, monkeypatch):
        monkeypatch.setenv("SNIFF_TEXT_LANGUAGE", "german")
        assert AnalysisOptions.from_config(ENGLISH_LANGUAGE_PACK).language_pack is ENGLISH_LANGUAGE_PACK


class TestLogging:

    def test_single_handler(self):
        logger = setup_logging("INFO")
        setup_logging("DEBUG")
        names = [h.get_name() for h in logger.handlers]
        assert names.count("sniff_text.rich") == 1
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back(self):
        assert setup_logging("LOUD").level == logging.WARNING
