"""PyYAML backed implementation of :class:`~hw_client.core.protocols.ConfigSource`.

This module is the **only** place that imports ``yaml`` for reading
configuration.  Files are read as bytes so PyYAML detects the encoding
itself and reports undecodable input as a parser error.  Parser and I/O
errors are re-raised as :class:`~hw_client.exceptions.ConfigFileError`
carrying the original diagnostic.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from hw_client.core.models import Config
from hw_client.exceptions import ConfigFileError


class YamlConfigSource:
    """Read configuration files written in YAML.

    An empty document is treated as an empty mapping, so every field
    keeps its default.
    """

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def load(self, path: Path) -> Config:
        """Decode *path* into a :class:`Config` layered over the defaults.

        Raises
        ------
        ConfigFileError
            On unreadable files, YAML syntax errors, non-mapping documents
            or invalid field values.
        """
        try:
            with open(path, "rb") as handle:
                data: Any = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigFileError(f"Cannot parse {path}: {exc}") from exc
        except OSError as exc:
            raise ConfigFileError(f"Cannot read {path}: {exc.strerror or exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigFileError(
                f"Cannot parse {path}: expected a mapping at the top level, "
                f"got {type(data).__name__}",
            )
        try:
            return Config.from_mapping(data)
        except ConfigFileError as exc:
            raise ConfigFileError(f"{path}: {exc}", hint=exc.hint) from exc
