"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts.  The configuration file
reader and the wallet backend are supplied from outside, which keeps
resolution and dispatch free of filesystem and network access.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from hw_client.core.models import Config


class ConfigSource(Protocol):
    """Contract for configuration file readers."""

    def exists(self, path: Path) -> bool:
        """Return whether a configuration file is present at *path*."""
        ...  # pragma: no cover

    def load(self, path: Path) -> Config:
        """Decode the file at *path* into a :class:`Config`.

        Keys missing from the file keep their built-in default.

        Raises
        ------
        ConfigFileError
            When the document cannot be parsed or holds invalid values.
        """
        ...  # pragma: no cover


class WalletCommands(Protocol):
    """Contract for wallet command backends.

    There is one method per entry of the command grammar.  Every method
    receives the resolved :class:`Config` first and the grammar's named
    slots as keyword arguments; open-ended slots arrive as ``list[str]``.
    The return value is rendered by the CLI according to
    ``config.output_format``: ``None`` prints nothing, a ``str`` is
    printed verbatim and anything else is serialised.

    Errors raised by a backend are not intercepted by the dispatcher.
    """

    # Server
    def start(self, config: Config) -> Any: ...
    def stop(self, config: Config) -> Any: ...

    # Keyrings
    def new_keyring(self, config: Config, *, mnemonic: list[str]) -> Any: ...
    def keyring(self, config: Config) -> Any: ...
    def keyrings(self, config: Config) -> Any: ...

    # Accounts
    def new_acc(self, config: Config, *, name: str) -> Any: ...
    def new_ms(self, config: Config, *, name: str, m: str, n: str, keys: list[str]) -> Any: ...
    def new_read(self, config: Config, *, name: str, key: str) -> Any: ...
    def new_read_ms(self, config: Config, *, name: str, m: str, n: str, keys: list[str]) -> Any: ...
    def add_keys(self, config: Config, *, name: str, keys: list[str]) -> Any: ...
    def set_gap(self, config: Config, *, name: str, gap: str) -> Any: ...
    def account(self, config: Config, *, name: str) -> Any: ...
    def accounts(self, config: Config) -> Any: ...

    # Addresses
    def list_addresses(self, config: Config, *, name: str, page: list[str]) -> Any: ...
    def unused(self, config: Config, *, name: str) -> Any: ...
    def label(self, config: Config, *, name: str, index: str, label: str) -> Any: ...
    def txs(self, config: Config, *, name: str, page: list[str]) -> Any: ...
    def addr_txs(self, config: Config, *, name: str, index: str, page: list[str]) -> Any: ...
    def gen_addrs(self, config: Config, *, name: str, count: str) -> Any: ...

    # Transactions
    def send(self, config: Config, *, name: str, address: str, amount: str) -> Any: ...
    def send_many(self, config: Config, *, name: str, recipients: list[str]) -> Any: ...
    def import_tx(self, config: Config, *, name: str, tx: str) -> Any: ...
    def sign(self, config: Config, *, name: str, txid: str) -> Any: ...
    def get_tx(self, config: Config, *, name: str, txid: str) -> Any: ...
    def balance(self, config: Config, *, name: str) -> Any: ...
    def get_offline(self, config: Config, *, name: str, txid: str) -> Any: ...
    def sign_offline(self, config: Config, *, name: str, tx: str, data: str) -> Any: ...
    def rescan(self, config: Config, *, timestamp: list[str]) -> Any: ...
    def delete_tx(self, config: Config, *, txid: str) -> Any: ...
    def decode_tx(self, config: Config, *, tx: str) -> Any: ...

    # Utility
    def status(self, config: Config) -> Any: ...
    def keypair(self, config: Config) -> Any: ...
    def version(self, config: Config) -> Any: ...
