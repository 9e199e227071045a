"""Custom exception hierarchy for hw-client.

Every error this launcher raises on purpose inherits from
:class:`HwClientError` so the CLI error boundary can render a clean
message instead of a traceback.  Raw ``OSError`` and ``yaml.YAMLError``
instances never leave the infrastructure layer; they are re-raised as
one of the typed subclasses below.

Hierarchy
---------
HwClientError
├── ArgumentParseError
├── ConfigFileError
├── WorkdirError
└── BackendUnavailableError
"""

from __future__ import annotations

from collections.abc import Sequence


class HwClientError(Exception):
    """Base exception for all hw-client errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class ArgumentParseError(HwClientError):
    """Raised when the command line holds unknown flags or bad values.

    All diagnostic lines collected while parsing are kept in
    :attr:`diagnostics`, in the order they were produced.
    """

    def __init__(self, diagnostics: Sequence[str]) -> None:
        lines = tuple(diagnostics)
        super().__init__("; ".join(lines) or "invalid arguments")
        self.diagnostics: tuple[str, ...] = lines


# --- Configuration ---------------------------------------------------------

class ConfigFileError(HwClientError):
    """Raised when the configuration file exists but cannot be decoded."""


# --- Filesystem ------------------------------------------------------------

class WorkdirError(HwClientError):
    """Raised when the working directory cannot be created or entered."""


# --- Wallet backend --------------------------------------------------------

class BackendUnavailableError(HwClientError):
    """Raised when a command needs a wallet backend and none is installed."""
