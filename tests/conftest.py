"""Shared pytest fixtures and configuration for the hw-client test suite.

Guidelines
----------
* No network access in any test.
* The wallet backend is always a recording fake.
* Tests never touch the real home directory: ``HOME`` points into
  ``tmp_path`` and the current directory is restored after each test.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from hw_client.core.models import Config


class RecordingCommands:
    """Wallet backend fake that records every handler call."""

    def __init__(self, result: Any = None) -> None:
        self.calls: list[tuple[str, Config, dict[str, Any]]] = []
        self.result = result

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        def handler(config: Config, **kwargs: Any) -> Any:
            self.calls.append((name, config, kwargs))
            return self.result

        return handler


@pytest.fixture
def commands() -> RecordingCommands:
    return RecordingCommands()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point ``HOME`` at a scratch directory and pin the OS to Linux."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr("hw_client.infra.platform_dirs.platform.system", lambda: "Linux")
    monkeypatch.chdir(tmp_path)

    umask = os.umask(0o022)
    os.umask(umask)
    yield home
    os.umask(umask)

    logger = logging.getLogger("hw_client")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
