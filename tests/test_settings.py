from __future__ import annotations

import dataclasses

import pytest

from tmdb_images import settings as mod


def test_load_settings_defaults() -> None:
    settings = mod.load_settings({})

    assert settings.tmdb_api_key is None
    assert settings.has_api_key is False
    assert settings.port == 3000
    assert settings.timeout_seconds == 10.0
    assert settings.cors_allow_origins == ()
    assert settings.include_image_language == ("en", "hi", "ta", "te", "ja", "ko", "null")


def test_load_settings_reads_environment_values() -> None:
    settings = mod.load_settings(
        {
            "TMDB_API_KEY": "  abc123 ",
            "PORT": "8080",
            "TMDB_TIMEOUT_SECONDS": "2.5",
            "CORS_ALLOW_ORIGINS": "https://a.example, ,https://b.example",
        }
    )

    assert settings.tmdb_api_key == "abc123"
    assert settings.port == 8080
    assert settings.timeout_seconds == 2.5
    assert settings.cors_allow_origins == ("https://a.example", "https://b.example")


def test_blank_api_key_counts_as_missing() -> None:
    assert mod.load_settings({"TMDB_API_KEY": "   "}).has_api_key is False


@pytest.mark.parametrize("port", ["abc", "0", "70000", "-1"])
def test_invalid_port_is_rejected(port: str) -> None:
    with pytest.raises(ValueError, match="PORT"):
        mod.load_settings({"PORT": port})


@pytest.mark.parametrize("timeout", ["soon", "0", "-3"])
def test_invalid_timeout_is_rejected(timeout: str) -> None:
    with pytest.raises(ValueError, match="TMDB_TIMEOUT_SECONDS"):
        mod.load_settings({"TMDB_TIMEOUT_SECONDS": timeout})


def test_settings_are_immutable() -> None:
    settings = mod.load_settings({"TMDB_API_KEY": "k"})

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.tmdb_api_key = "other"  # type: ignore[misc]


def test_load_settings_without_mapping_uses_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mod, "load_env", lambda: None)
    monkeypatch.setenv("TMDB_API_KEY", "from-env")
    monkeypatch.setenv("PORT", "4000")

    settings = mod.load_settings()

    assert settings.tmdb_api_key == "from-env"
    assert settings.port == 4000


def test_load_cors_origins_ignores_invalid_port_and_timeout() -> None:
    environ = {"PORT": "not-a-port", "TMDB_TIMEOUT_SECONDS": "soon", "CORS_ALLOW_ORIGINS": "https://a.example"}

    assert mod.load_cors_origins(environ) == ("https://a.example",)
    with pytest.raises(ValueError):
        mod.load_settings(environ)
