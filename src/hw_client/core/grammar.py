"""Static command grammar.

The table below is the complete set of commands the launcher accepts.
Each entry states how many positional tokens may follow its keyword and
which handler of :class:`~hw_client.core.protocols.WalletCommands`
receives them.  :func:`match_command` is the only place that interprets
positional tokens.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

HELP_KEYWORD = "help"


class CommandShape(enum.Enum):
    """Arity class of a grammar entry."""

    NULLARY = "nullary"
    """The keyword alone."""

    FIXED = "fixed"
    """Exactly one token per named slot."""

    VARIADIC = "variadic"
    """The named slots followed by any number of extra tokens."""

    OPTIONAL_SUFFIX = "optional-suffix"
    """The named slots followed by optional trailing tokens (e.g. a page)."""


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """One entry of the command grammar."""

    keyword: str
    handler: str
    """Name of the :class:`WalletCommands` method to invoke."""

    shape: CommandShape
    summary: str
    slots: tuple[str, ...] = ()
    rest: str | None = None
    """Keyword receiving the open-ended token list, if any."""

    def accepts(self, count: int) -> bool:
        """Return whether *count* tokens after the keyword fit this entry."""
        if self.shape in (CommandShape.NULLARY, CommandShape.FIXED):
            return count == len(self.slots)
        return count >= len(self.slots)

    @property
    def synopsis(self) -> str:
        parts = [self.keyword, *(f"<{slot}>" for slot in self.slots)]
        if self.rest is not None:
            if self.shape is CommandShape.OPTIONAL_SUFFIX:
                parts.append(f"[{self.rest}]")
            else:
                parts.append(f"[{self.rest}...]")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class CommandMatch:
    """A grammar entry together with its bound arguments."""

    spec: CommandSpec
    arguments: dict[str, str | list[str]]


def _nullary(keyword: str, handler: str, summary: str) -> CommandSpec:
    return CommandSpec(keyword, handler, CommandShape.NULLARY, summary)


def _fixed(keyword: str, handler: str, summary: str, *slots: str) -> CommandSpec:
    return CommandSpec(keyword, handler, CommandShape.FIXED, summary, slots)


def _variadic(keyword: str, handler: str, summary: str, *slots: str, rest: str) -> CommandSpec:
    return CommandSpec(keyword, handler, CommandShape.VARIADIC, summary, slots, rest)


def _paged(keyword: str, handler: str, summary: str, *slots: str) -> CommandSpec:
    return CommandSpec(keyword, handler, CommandShape.OPTIONAL_SUFFIX, summary, slots, "page")


GRAMMAR: tuple[CommandSpec, ...] = (
    # Server
    _nullary("start", "start", "Start the wallet server"),
    _nullary("stop", "stop", "Stop the wallet server"),
    # Keyrings
    _variadic("newkeyring", "new_keyring", "Create a keyring, optionally from a mnemonic",
              rest="mnemonic"),
    _nullary("keyring", "keyring", "Display the current keyring"),
    _nullary("keyrings", "keyrings", "List all keyrings"),
    # Accounts
    _fixed("newacc", "new_acc", "Create a regular account", "name"),
    _variadic("newms", "new_ms", "Create an M of N multisig account",
              "name", "m", "n", rest="keys"),
    _fixed("newread", "new_read", "Create a read-only account", "name", "key"),
    _variadic("newreadms", "new_read_ms", "Create a read-only M of N multisig account",
              "name", "m", "n", rest="keys"),
    _variadic("addkeys", "add_keys", "Add public keys to a multisig account",
              "name", rest="keys"),
    _fixed("setgap", "set_gap", "Set the address gap of an account", "name", "gap"),
    _fixed("account", "account", "Display an account", "name"),
    _nullary("accounts", "accounts", "List all accounts"),
    # Addresses
    _paged("list", "list_addresses", "List addresses", "name"),
    _fixed("unused", "unused", "List unused addresses", "name"),
    _fixed("label", "label", "Set the label of an address", "name", "index", "label"),
    _paged("txs", "txs", "List transactions", "name"),
    _paged("addrtxs", "addr_txs", "List transactions of an address", "name", "index"),
    _fixed("genaddrs", "gen_addrs", "Generate addresses up to an index", "name", "count"),
    # Transactions
    _fixed("send", "send", "Send coins to an address", "name", "address", "amount"),
    _variadic("sendmany", "send_many", "Send coins to several address:amount pairs",
              "name", rest="recipients"),
    _fixed("import", "import_tx", "Import a transaction", "name", "tx"),
    _fixed("sign", "sign", "Sign a pending transaction", "name", "txid"),
    _fixed("gettx", "get_tx", "Display a transaction", "name", "txid"),
    _fixed("balance", "balance", "Display the balance of an account", "name"),
    _fixed("getoffline", "get_offline", "Fetch data for offline signing", "name", "txid"),
    _fixed("signoffline", "sign_offline", "Sign a transaction offline", "name", "tx", "data"),
    _variadic("rescan", "rescan", "Rescan the blockchain, optionally from a timestamp",
              rest="timestamp"),
    _fixed("deletetx", "delete_tx", "Delete a pending transaction", "txid"),
    _fixed("decodetx", "decode_tx", "Decode a raw transaction", "tx"),
    # Utility
    _nullary("status", "status", "Display server status"),
    _nullary("keypair", "keypair", "Generate a public/private key pair"),
    _nullary("version", "version", "Display version information"),
)

COMMANDS: dict[str, CommandSpec] = {spec.keyword: spec for spec in GRAMMAR}


class HelpRequest:
    """Marker returned by :func:`match_command` for ``[]`` and ``["help"]``."""

    def __repr__(self) -> str:
        return "HELP"


HELP = HelpRequest()


def match_command(tokens: Sequence[str]) -> CommandMatch | HelpRequest | None:
    """Match positional *tokens* against the grammar.

    Returns :data:`HELP` for an empty list or a lone ``help``, a
    :class:`CommandMatch` when exactly one entry fits, and ``None`` when
    nothing does.
    """
    if not tokens or list(tokens) == [HELP_KEYWORD]:
        return HELP
    keyword, *args = tokens
    spec = COMMANDS.get(keyword)
    if spec is None or not spec.accepts(len(args)):
        return None
    bound: dict[str, str | list[str]] = dict(zip(spec.slots, args))
    if spec.rest is not None:
        bound[spec.rest] = list(args[len(spec.slots):])
    return CommandMatch(spec=spec, arguments=bound)


def command_help_lines() -> list[str]:
    """Return the command listing shown in the usage text."""
    width = max(len(spec.synopsis) for spec in GRAMMAR)
    lines = ["Commands:"]
    for spec in GRAMMAR:
        lines.append(f"  {spec.synopsis:<{width}}  {spec.summary}")
    lines.append(f"  {HELP_KEYWORD:<{width}}  Display this help")
    return lines
