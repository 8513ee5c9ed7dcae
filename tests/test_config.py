import pytest

from pullsbot import config
from pullsbot.config import load_github_settings, validate_environment_variables


def _set_required(monkeypatch):
    for name in config.REQUIRED_VARS:
        monkeypatch.setenv(name, "value")


def test_validate_environment_variables_ok(monkeypatch):
    _set_required(monkeypatch)
    validate_environment_variables()


def test_validate_environment_variables_missing_exits(monkeypatch, capsys):
    _set_required(monkeypatch)
    monkeypatch.delenv("GITHUB_TOKEN")
    monkeypatch.setenv("GITHUB_ORG", "   ")

    with pytest.raises(SystemExit) as exc:
        validate_environment_variables()

    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "GITHUB_TOKEN" in err
    assert "GITHUB_ORG" in err


def test_load_github_settings_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.setenv("GITHUB_ORG", "acme")
    monkeypatch.setenv("GITHUB_TOKEN", "secret")

    settings = load_github_settings()

    assert settings.api_url == "https://api.github.com"
    assert settings.org == "acme"
    assert settings.token == "secret"


def test_load_github_settings_custom_url(monkeypatch):
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")
    assert load_github_settings().api_url == "https://ghe.example.com/api/v3"
