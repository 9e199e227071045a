"""Infrastructure: OS-dependent default application directory.

Pure lookup and string composition with no filesystem access.  A missing
environment variable falls back to the current directory instead of
failing, so directory resolution never aborts the process.
"""

from __future__ import annotations

import ntpath
import os
import platform
import posixpath
from collections.abc import Mapping

APP_NAME = "Haskoin Wallet"
SHORT_NAME = "hw"

FALLBACK_DIR = "."

_WINDOWS_SYSTEMS: tuple[str, ...] = ("windows", "mingw", "msys", "cygwin")


def _is_windows(system: str) -> bool:
    lowered = system.lower()
    return any(lowered.startswith(prefix) for prefix in _WINDOWS_SYSTEMS)


def default_app_dir(
    system: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the default application directory for the host OS.

    Parameters
    ----------
    system:
        OS family as reported by :func:`platform.system`.  Defaults to
        the running system.
    environ:
        Environment mapping.  Defaults to :data:`os.environ`.
    """
    if system is None:
        system = platform.system()
    if environ is None:
        environ = os.environ

    if _is_windows(system):
        base = environ.get("LOCALAPPDATA") or environ.get("APPDATA")
        if not base:
            return FALLBACK_DIR
        return ntpath.join(base, APP_NAME)

    home = environ.get("HOME")
    if not home:
        return FALLBACK_DIR
    if system.lower() == "darwin":
        return posixpath.join(home, "Library", "Application Support", APP_NAME)
    return posixpath.join(home, f".{SHORT_NAME}")
