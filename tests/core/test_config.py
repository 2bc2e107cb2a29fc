import pytest
from pydantic import ValidationError
from seqsplice.core.config import DEFAULT_LOG_DATEFMT, DEFAULT_LOG_FORMAT, Settings


def test_settings_defaults():
    settings = Settings.load({})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == DEFAULT_LOG_FORMAT
    assert settings.LOG_DATEFMT == DEFAULT_LOG_DATEFMT


def test_settings_from_environ():
    settings = Settings.load(
        {"LOG_LEVEL": "debug", "LOG_FORMAT": "%(message)s", "UNRELATED": "x"}
    )
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(message)s"


def test_settings_reads_os_environ(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert Settings.load().LOG_LEVEL == "WARNING"


def test_settings_rejects_unknown_level():
    with pytest.raises(ValidationError):
        Settings.load({"LOG_LEVEL": "VERBOSE"})


def test_settings_rejects_empty_format():
    with pytest.raises(ValidationError):
        Settings.load({"LOG_FORMAT": ""})


@pytest.mark.parametrize(
    "raw, expected", [("warn", "WARNING"), ("WARN", "WARNING"), ("fatal", "CRITICAL")]
)
def test_settings_accepts_logging_aliases(raw, expected):
    assert Settings.load({"LOG_LEVEL": raw}).LOG_LEVEL == expected


def test_settings_load_stays_strict_for_unknown_levels():
    with pytest.raises(ValidationError):
        Settings.load({"LOG_LEVEL": "trace"})
