"""Infrastructure layer: operating system and file format integration.

Every raw ``OSError`` or parser exception is caught here and re-raised
as a :class:`~hw_client.exceptions.HwClientError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from hw_client.infra.backend import UnconfiguredCommands
from hw_client.infra.platform_dirs import default_app_dir
from hw_client.infra.workdir import init_workdir
from hw_client.infra.yaml_source import YamlConfigSource

__all__: list[str] = [
    "UnconfiguredCommands",
    "YamlConfigSource",
    "default_app_dir",
    "init_workdir",
]
