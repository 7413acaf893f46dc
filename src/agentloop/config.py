"""Process configuration for the tracker connection."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_REPO = "bentossell/agent-loop"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_PROGRESS_PATH = "progress.txt"


class ConfigurationError(Exception):
    """Repository identifier or credential is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Connection settings handed to the tracker client.

    Attributes:
        repo: Repository in "owner/repo" form.
        token: Bearer credential for the tracker API.
        api_url: Base URL of the tracker REST API.
        progress_path: Repository path of the agent progress log.
    """

    repo: str
    token: str
    api_url: str = DEFAULT_API_URL
    progress_path: str = DEFAULT_PROGRESS_PATH

    @property
    def owner(self) -> str:
        return self.repo.split("/")[0]

    @property
    def repo_name(self) -> str:
        return self.repo.split("/")[1]


def parse_repo(value: str) -> str:
    """Validate an "owner/repo" identifier.

    Raises:
        ConfigurationError: If either part is missing.
    """
    parts = value.split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ConfigurationError("Invalid AGENT_LOOP_REPO value")
    return f"{parts[0]}/{parts[1]}"


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigurationError: If the repo is malformed or no token is set.
    """
    env = os.environ if environ is None else environ

    repo = parse_repo(env.get("AGENT_LOOP_REPO") or DEFAULT_REPO)

    token = env.get("AGENT_LOOP_TOKEN") or env.get("GITHUB_TOKEN")
    if not token:
        raise ConfigurationError("Missing AGENT_LOOP_TOKEN or GITHUB_TOKEN")

    return Settings(
        repo=repo,
        token=token,
        api_url=(env.get("AGENT_LOOP_API_URL") or DEFAULT_API_URL).rstrip("/"),
        progress_path=env.get("AGENT_LOOP_PROGRESS_PATH") or DEFAULT_PROGRESS_PATH,
    )
