"""Tests for configuration settings."""

import pytest

from fieldkit.config import FieldkitSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from FIELDKIT_* variables and any .env in the working directory."""
    monkeypatch.delenv("FIELDKIT_WARN_UNDECODABLE", raising=False)
    monkeypatch.delenv("FIELDKIT_COPY_NONE", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = FieldkitSettings()

    assert settings.warn_undecodable is False
    assert settings.copy_none is True


@pytest.mark.parametrize(
    ("variable", "value", "attribute", "expected"),
    [
        ("FIELDKIT_WARN_UNDECODABLE", "true", "warn_undecodable", True),
        ("FIELDKIT_WARN_UNDECODABLE", "0", "warn_undecodable", False),
        ("FIELDKIT_COPY_NONE", "false", "copy_none", False),
    ],
)
def test_environment_overrides(monkeypatch, variable, value, attribute, expected):
    monkeypatch.setenv(variable, value)

    assert getattr(FieldkitSettings(), attribute) is expected


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("FIELDKIT_COPY_NONE=false\nUNRELATED=1\n", encoding="utf-8")

    assert FieldkitSettings().copy_none is False


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("FIELDKIT_COPY_NONE", "false")

    assert FieldkitSettings(copy_none=True).copy_none is True
