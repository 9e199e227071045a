"""Fallback wallet backend used when none is supplied.

The launcher ships without a wallet engine.  :class:`UnconfiguredCommands`
satisfies :class:`~hw_client.core.protocols.WalletCommands` structurally:
``version`` is answered locally and every other command raises
:class:`~hw_client.exceptions.BackendUnavailableError`.  Applications
embedding the launcher pass their own backend to
:func:`hw_client.cli.app.main`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hw_client.core.grammar import GRAMMAR
from hw_client.core.models import Config
from hw_client.exceptions import BackendUnavailableError
from hw_client.version import __version__


class UnconfiguredCommands:
    """Backend that only knows its own version."""

    def version(self, config: Config) -> dict[str, Any]:
        return {
            "client": __version__,
            "network": config.network_name,
        }

    def __getattr__(self, name: str) -> Callable[..., Any]:
        keyword = _KEYWORDS.get(name)
        if keyword is None:
            raise AttributeError(name)

        def unavailable(config: Config, **_: Any) -> Any:
            raise BackendUnavailableError(
                f"Command '{keyword}' requires a wallet backend, but none is installed.",
                hint=f"Run hw through an application that provides a backend "
                f"(server socket: {config.connect}).",
            )

        return unavailable


_KEYWORDS: dict[str, str] = {spec.handler: spec.keyword for spec in GRAMMAR}
