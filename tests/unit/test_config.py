"""Unit tests for configuration loading."""

import dataclasses

import pytest

from agentloop.config import (
    DEFAULT_API_URL,
    DEFAULT_PROGRESS_PATH,
    DEFAULT_REPO,
    ConfigurationError,
    Settings,
    load_settings,
    parse_repo,
)


@pytest.mark.unit
class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        settings = load_settings({"AGENT_LOOP_TOKEN": "tok"})

        assert settings.repo == DEFAULT_REPO
        assert settings.token == "tok"
        assert settings.api_url == DEFAULT_API_URL
        assert settings.progress_path == DEFAULT_PROGRESS_PATH

    def test_github_token_fallback(self) -> None:
        settings = load_settings({"GITHUB_TOKEN": "gh"})

        assert settings.token == "gh"

    def test_agent_loop_token_preferred(self) -> None:
        settings = load_settings({"AGENT_LOOP_TOKEN": "own", "GITHUB_TOKEN": "gh"})

        assert settings.token == "own"

    def test_missing_token(self) -> None:
        with pytest.raises(ConfigurationError, match="Missing AGENT_LOOP_TOKEN or GITHUB_TOKEN"):
            load_settings({"AGENT_LOOP_REPO": "a/b"})

    def test_empty_token(self) -> None:
        with pytest.raises(ConfigurationError):
            load_settings({"AGENT_LOOP_TOKEN": "", "GITHUB_TOKEN": ""})

    def test_overrides(self) -> None:
        settings = load_settings(
            {
                "AGENT_LOOP_REPO": "acme/loop",
                "AGENT_LOOP_TOKEN": "tok",
                "AGENT_LOOP_API_URL": "https://ghe.example.com/api/v3/",
                "AGENT_LOOP_PROGRESS_PATH": "docs/progress.md",
            }
        )

        assert settings.repo == "acme/loop"
        assert settings.owner == "acme"
        assert settings.repo_name == "loop"
        assert settings.api_url == "https://ghe.example.com/api/v3"
        assert settings.progress_path == "docs/progress.md"

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGENT_LOOP_REPO", "env/repo")
        monkeypatch.setenv("AGENT_LOOP_TOKEN", "env-token")

        settings = load_settings()

        assert settings.repo == "env/repo"
        assert settings.token == "env-token"

    def test_settings_are_immutable(self) -> None:
        settings = Settings(repo="a/b", token="t")

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.token = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestParseRepo:
    """Tests for parse_repo."""

    def test_valid(self) -> None:
        assert parse_repo("owner/repo") == "owner/repo"

    @pytest.mark.parametrize("value", ["owner", "owner/", "/repo", ""])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid AGENT_LOOP_REPO value"):
            parse_repo(value)
