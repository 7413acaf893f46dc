"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends

from agentloop.config import load_settings
from agentloop.tracker import TrackerClient

TrackerFactory = Callable[[], TrackerClient]


def open_tracker() -> TrackerClient:
    """Build a tracker client from the current process configuration.

    Raises:
        ConfigurationError: If the repo or credential is missing or malformed.
    """
    return TrackerClient.from_settings(load_settings())


def get_tracker_factory() -> TrackerFactory:
    """Dependency that provides the tracker client factory.

    Routes call the factory themselves so request validation can happen
    before configuration is read.
    """
    return open_tracker


# Type alias for dependency injection
TrackerFactoryDep = Annotated[TrackerFactory, Depends(get_tracker_factory)]
