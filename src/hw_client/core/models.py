"""Domain models for hw-client.

All models are **frozen** dataclasses.  A :class:`Config` is built once
per invocation and never mutated afterwards: every change produces a new
value through :func:`dataclasses.replace`.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from hw_client.exceptions import ConfigFileError


class AddressType(enum.Enum):
    """Address chain used by address-producing commands."""

    EXTERNAL = "external"
    INTERNAL = "internal"


class OutputFormat(enum.Enum):
    """How command results are rendered on stdout."""

    NORMAL = "normal"
    JSON = "json"
    YAML = "yaml"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Config:
    """Fully populated client configuration.

    The ``metadata["key"]`` of each field is its name in the YAML
    configuration file.
    """

    keyring: str = field(default="main", metadata={"key": "keyring-name"})
    """Name of the keyring commands operate on."""

    count: int = field(default=5, metadata={"key": "output-size"})
    """Items per page for paged listings."""

    min_conf: int = field(default=0, metadata={"key": "minimum-confirmations"})

    fee: int = field(default=10000, metadata={"key": "fee-per-kb"})
    """Fee per kilobyte, in satoshi."""

    rcpt_fee: bool = field(default=False, metadata={"key": "recipient-pays-fee"})
    sign_tx: bool = field(default=True, metadata={"key": "sign-transactions"})
    addr_type: AddressType = field(
        default=AddressType.EXTERNAL, metadata={"key": "address-type"},
    )
    offline: bool = field(default=False, metadata={"key": "offline"})
    reverse_paging: bool = field(default=False, metadata={"key": "reverse-paging"})

    passphrase: str | None = field(default=None, metadata={"key": "mnemonic-passphrase"})
    """Optional mnemonic passphrase; ``None`` when not supplied."""

    output_format: OutputFormat = field(
        default=OutputFormat.NORMAL, metadata={"key": "display-format"},
    )
    connect: str = field(default="tcp://127.0.0.1:4000", metadata={"key": "server-socket"})
    detach: bool = field(default=False, metadata={"key": "detach-server"})
    testnet: bool = field(default=False, metadata={"key": "use-testnet"})

    config_file: str = field(default="config.yml", metadata={"key": "config-file"})
    """Configuration file, relative to the working directory unless absolute."""

    work_dir: str = field(default="", metadata={"key": "work-dir"})
    """Working directory override.  Empty means "use the OS default"."""

    verbose: bool = field(default=False, metadata={"key": "verbose"})

    @property
    def network_name(self) -> str:
        """Directory name of the selected network."""
        return "testnet3" if self.testnet else "prodnet"

    def with_changes(self, **changes: Any) -> Config:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from a decoded configuration document.

        Unknown keys are ignored and missing keys keep their default.

        Raises
        ------
        ConfigFileError
            If a known key holds a value of the wrong type.
        """
        values: dict[str, Any] = {}
        for fld in fields(cls):
            key = fld.metadata["key"]
            if key in data:
                values[fld.name] = _coerce(key, fld.default, data[key])
        return cls(**values)


def _coerce(key: str, default: Any, raw: Any) -> Any:
    """Validate *raw* against the type of the field default."""
    if isinstance(default, enum.Enum):
        enum_type = type(default)
        try:
            return enum_type(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            raise ConfigFileError(
                f"Invalid value for '{key}': {raw!r}",
                hint=f"Expected one of: {allowed}",
            ) from None
    if default is None:
        # Nullable text field.
        if raw is None or isinstance(raw, str):
            return raw
        raise ConfigFileError(f"Invalid value for '{key}': expected text, got {raw!r}")
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        raise ConfigFileError(f"Invalid value for '{key}': expected true/false, got {raw!r}")
    if isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
            return raw
        raise ConfigFileError(
            f"Invalid value for '{key}': expected a non-negative integer, got {raw!r}",
        )
    if isinstance(raw, str):
        return raw
    raise ConfigFileError(f"Invalid value for '{key}': expected text, got {raw!r}")


# ---------------------------------------------------------------------------
# Resolution result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Outcome of configuration resolution."""

    config: Config
    """Final configuration, with ``work_dir`` always populated."""

    work_dir: Path
    """Absolute base directory (before the network name is appended)."""

    config_file: Path
    """Absolute path of the configuration file that was consulted."""

    loaded_file: bool
    """Whether :attr:`config_file` existed and was read."""

    @property
    def network_dir(self) -> Path:
        """Directory the wallet actually runs in."""
        return self.work_dir / self.config.network_name
