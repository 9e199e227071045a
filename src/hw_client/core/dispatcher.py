"""Command dispatch: routes positional tokens to a wallet backend.

The dispatcher owns no business logic.  It matches the tokens against
the grammar, hands the resolved configuration and bound arguments to
the backend, and reports what happened.  Rendering help or diagnostics
is left to the CLI layer.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from hw_client.core.grammar import CommandMatch, CommandSpec, match_command
from hw_client.core.models import Config
from hw_client.core.protocols import WalletCommands

logger = logging.getLogger(__name__)


class DispatchStatus(enum.Enum):
    HANDLED = "handled"
    HELP = "help"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of one dispatch."""

    status: DispatchStatus
    command: CommandSpec | None = None
    output: Any = None
    """Value returned by the handler, if one ran."""


class CommandDispatcher:
    """Invoke the :class:`WalletCommands` method selected by the grammar."""

    def __init__(self, commands: WalletCommands) -> None:
        self._commands: WalletCommands = commands

    def dispatch(self, config: Config, tokens: Sequence[str]) -> DispatchResult:
        """Run the command described by *tokens*.

        Exceptions raised by the handler propagate unchanged.
        """
        match = match_command(tokens)
        if match is None:
            logger.debug("No command matches %r", list(tokens))
            return DispatchResult(DispatchStatus.INVALID)
        if not isinstance(match, CommandMatch):
            return DispatchResult(DispatchStatus.HELP)

        handler = getattr(self._commands, match.spec.handler)
        logger.debug("Dispatching %s to %s", match.spec.keyword, match.spec.handler)
        output = handler(config, **match.arguments)
        return DispatchResult(DispatchStatus.HANDLED, command=match.spec, output=output)
