import logging
from unittest.mock import patch

from movie_registry.logging_setup import setup_logging


def test_level_name_is_case_insensitive():
    with patch("movie_registry.logging_setup.logging.basicConfig") as basic_config:
        setup_logging("debug")

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("APP_LOG_LEVEL", "ERROR")
    with patch("movie_registry.logging_setup.logging.basicConfig") as basic_config:
        setup_logging("chatty")

    assert basic_config.call_args.kwargs["level"] == logging.INFO
