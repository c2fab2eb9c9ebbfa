import logging

from meetings.config import Settings
from meetings.core.env import load_env
from meetings.logging import configure_logging
from meetings.scripts import build_meetings as build_meetings_script


def test_load_env_does_not_fail_when_missing() -> None:
    load_env()


def test_log_level_setting_defaults_to_info(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert Settings().LOG_LEVEL == "INFO"


def test_configure_logging_quiets_google_clients() -> None:
    configure_logging("debug")
    assert logging.getLogger("googleapiclient").level == logging.WARNING
    assert logging.getLogger("google.auth").level == logging.WARNING


def test_main_configures_logging_from_settings(monkeypatch) -> None:
    levels = []

    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(build_meetings_script, "load_env", lambda: None)
    monkeypatch.setattr(build_meetings_script, "configure_logging", lambda level: levels.append(level))
    monkeypatch.setattr(build_meetings_script, "build_meetings", lambda output_path, settings=None: [])

    build_meetings_script.main(["--output", "meetings.json"])

    assert levels == ["DEBUG"]
