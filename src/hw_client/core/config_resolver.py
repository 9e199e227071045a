"""Layered configuration resolution.

Precedence, lowest to highest: built-in defaults, the configuration
file, command-line flags.  The file's location depends on the working
directory, which a flag may set, so resolution runs in two phases:

1. Apply the flag transformations to the defaults to learn where the
   working directory and the configuration file are.
2. If that file exists, decode it and replay the *same* transformations
   over it, so flags still win over file contents.

Replaying is only sound because every transformation is an idempotent
field assignment (see :mod:`hw_client.core.options`).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from hw_client.core.models import Config, ResolvedConfig
from hw_client.core.options import Transform, apply_transforms
from hw_client.core.protocols import ConfigSource

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Combine defaults, an optional file and flag transformations.

    Parameters
    ----------
    source:
        Reader for the configuration file.
    default_dir:
        Callable returning the OS default application directory; only
        consulted when no working directory was given on the command line.
    """

    def __init__(self, source: ConfigSource, default_dir: Callable[[], str]) -> None:
        self._source: ConfigSource = source
        self._default_dir: Callable[[], str] = default_dir

    def resolve(self, transforms: Sequence[Transform]) -> ResolvedConfig:
        """Resolve the final configuration for one invocation.

        Raises
        ------
        ConfigFileError
            If the configuration file exists but cannot be decoded.
        """
        provisional = apply_transforms(Config(), transforms)

        base_dir = _absolute(provisional.work_dir or self._default_dir())
        config_file = self.config_file_path(provisional, base_dir)
        logger.debug("Looking for configuration file %s", config_file)

        loaded = self._source.exists(config_file)
        if loaded:
            logger.debug("Loading configuration from %s", config_file)
            final = apply_transforms(self._source.load(config_file), transforms)
        else:
            final = provisional

        if not final.work_dir:
            final = final.with_changes(work_dir=str(base_dir))

        return ResolvedConfig(
            config=final,
            work_dir=_absolute(final.work_dir),
            config_file=config_file,
            loaded_file=loaded,
        )

    @staticmethod
    def config_file_path(config: Config, base_dir: Path) -> Path:
        """Return the configuration file of *config*, anchored at *base_dir*."""
        candidate = Path(config.config_file)
        if candidate.is_absolute():
            return candidate
        return base_dir / candidate


def _absolute(path: str) -> Path:
    return Path(os.path.abspath(path))
