"""Declarative table of command-line flags.

Each :class:`OptionSpec` assigns exactly one :class:`Config` field, so
every transformation it produces is idempotent: applying the same list
twice gives the same result as applying it once.  Configuration
resolution depends on that property because it replays the flag list
over the file-derived configuration.  Flags with accumulating effects
(append, increment) must not be added to this table.  Transformations
are applied left to right, so the last occurrence of a repeated flag
wins.  Earlier hw clients let the first occurrence win instead.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from hw_client.core.models import AddressType, Config, OutputFormat

Transform = Callable[[Config], Config]
"""Pure configuration transformation produced by one flag occurrence."""

_DEFAULTS = Config()


def non_negative_int(raw: str) -> int:
    """Parse a numeric flag value.

    Raises :class:`argparse.ArgumentTypeError` so the parser reports the
    offending flag together with the message.
    """
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"value must not be negative: {raw!r}")
    return value


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One recognised flag and the configuration field it sets."""

    short: str
    long: str
    field: str
    help: str
    metavar: str | None = None
    """Value placeholder; ``None`` for no-argument toggles."""

    convert: Callable[[str], Any] = str
    """Converter applied to the raw value of a value-taking flag."""

    value: Any = None
    """Constant assigned by a toggle."""

    @property
    def takes_value(self) -> bool:
        return self.metavar is not None

    def transform(self, raw: str | None = None) -> Transform:
        """Return the transformation for one occurrence of this flag.

        *raw* is the flag's argument text and must be given exactly when
        :attr:`takes_value` is true.
        """
        if self.takes_value:
            if raw is None:
                raise ValueError(f"{self.long} requires a value")
            new_value = self.convert(raw)
        else:
            new_value = self.value
        name = self.field

        def apply(config: Config) -> Config:
            return config.with_changes(**{name: new_value})

        return apply


def apply_transforms(config: Config, transforms: Iterable[Transform]) -> Config:
    """Apply *transforms* to *config* in order and return the result.

    When a flag is repeated its last occurrence wins, so ``-j -y``
    selects YAML output.
    """
    for transform in transforms:
        config = transform(config)
    return config


OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        "-k", "--keyring", "keyring",
        f"Default: {_DEFAULTS.keyring}", metavar="NAME",
    ),
    OptionSpec(
        "-c", "--count", "count",
        f"Items per page. Default: {_DEFAULTS.count}",
        metavar="INT", convert=non_negative_int,
    ),
    OptionSpec(
        "-m", "--minconf", "min_conf",
        f"Minimum confirmations. Default: {_DEFAULTS.min_conf}",
        metavar="INT", convert=non_negative_int,
    ),
    OptionSpec(
        "-f", "--fee", "fee",
        f"Fee per kilobyte. Default: {_DEFAULTS.fee}",
        metavar="INT", convert=non_negative_int,
    ),
    OptionSpec(
        "-R", "--rcptfee", "rcpt_fee",
        f"Recipient pays fee. Default: {_DEFAULTS.rcpt_fee}", value=True,
    ),
    OptionSpec(
        "-S", "--nosig", "sign_tx",
        f"Do not sign. Default: {not _DEFAULTS.sign_tx}", value=False,
    ),
    OptionSpec(
        "-i", "--internal", "addr_type",
        f"Internal addresses. Default: {_DEFAULTS.addr_type is AddressType.INTERNAL}",
        value=AddressType.INTERNAL,
    ),
    OptionSpec(
        "-o", "--offline", "offline",
        f"Offline balance. Default: {_DEFAULTS.offline}", value=True,
    ),
    OptionSpec(
        "-r", "--revpage", "reverse_paging",
        f"Reverse paging. Default: {_DEFAULTS.reverse_paging}", value=True,
    ),
    OptionSpec(
        "-p", "--pass", "passphrase", "Mnemonic passphrase", metavar="PASS",
    ),
    OptionSpec(
        "-j", "--json", "output_format", "Output JSON", value=OutputFormat.JSON,
    ),
    OptionSpec(
        "-y", "--yaml", "output_format", "Output YAML", value=OutputFormat.YAML,
    ),
    OptionSpec(
        "-s", "--socket", "connect",
        f"Server socket. Default: {_DEFAULTS.connect}", metavar="URI",
    ),
    OptionSpec(
        "-d", "--detach", "detach",
        f"Detach server. Default: {_DEFAULTS.detach}", value=True,
    ),
    OptionSpec(
        "-t", "--testnet", "testnet", "Testnet3 network", value=True,
    ),
    OptionSpec(
        "-g", "--config", "config_file",
        f"Config file. Default: {_DEFAULTS.config_file}", metavar="FILE",
    ),
    OptionSpec(
        "-w", "--workdir", "work_dir",
        "Working directory. OS-dependent default", metavar="DIR",
    ),
    OptionSpec(
        "-v", "--verbose", "verbose", "Verbose output", value=True,
    ),
)
