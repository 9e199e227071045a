"""Infrastructure: working directory preparation.

Creates the wallet directory with owner-only permissions and makes it
the current directory, so every relative path used by the wallet
backend lands inside it.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from hw_client.exceptions import WorkdirError

logger = logging.getLogger(__name__)

OWNER_ONLY: int = stat.S_IRWXU
"""Directory mode applied to the working directory (``0o700``)."""

CREATION_MASK: int = stat.S_IRWXG | stat.S_IRWXO
"""Process umask: files created afterwards are not readable by group or others."""


def init_workdir(path: Path) -> Path:
    """Create *path* if needed, restrict it to its owner and ``chdir`` into it.

    Safe to call repeatedly on the same path; the permissions are
    re-asserted every time.

    Returns
    -------
    Path
        The absolute directory now in effect.

    Raises
    ------
    WorkdirError
        If the directory cannot be created, restricted or entered.
    """
    target = Path(os.path.abspath(path))
    os.umask(CREATION_MASK)
    try:
        target.mkdir(parents=True, exist_ok=True)
        target.chmod(OWNER_ONLY)
        os.chdir(target)
    except OSError as exc:
        raise WorkdirError(
            f"Cannot prepare working directory {target}: {exc.strerror or exc}",
            hint="Choose another location with --workdir.",
        ) from exc
    logger.debug("Working directory is %s", target)
    return target
