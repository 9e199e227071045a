"""Core layer: configuration model, resolution and command dispatch.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or network I/O; readers and backends are injected.
* No imports from ``cli`` or ``infra``.
"""

from hw_client.core.config_resolver import ConfigResolver
from hw_client.core.dispatcher import CommandDispatcher, DispatchResult, DispatchStatus
from hw_client.core.grammar import COMMANDS, CommandShape, CommandSpec, match_command
from hw_client.core.models import AddressType, Config, OutputFormat, ResolvedConfig
from hw_client.core.options import OPTIONS, OptionSpec, apply_transforms
from hw_client.core.protocols import ConfigSource, WalletCommands

__all__: list[str] = [
    "COMMANDS",
    "OPTIONS",
    "AddressType",
    "CommandDispatcher",
    "CommandShape",
    "CommandSpec",
    "Config",
    "ConfigResolver",
    "ConfigSource",
    "DispatchResult",
    "DispatchStatus",
    "OptionSpec",
    "OutputFormat",
    "ResolvedConfig",
    "WalletCommands",
    "apply_transforms",
    "match_command",
]
