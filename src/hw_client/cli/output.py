"""Rendering of handler results in the selected output format."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from typing import Any

import yaml

from hw_client.core.models import OutputFormat


def _plain(value: Any) -> Any:
    """Convert enums and tuples into JSON/YAML friendly values."""
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _normal(value: Any) -> str:
    if isinstance(value, Mapping):
        return "\n".join(f"{key}: {item}" for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return "\n".join(str(item) for item in value)
    return str(value)


def render(value: Any, output_format: OutputFormat) -> str | None:
    """Return the text to print for a handler result, or ``None``.

    Strings are assumed to be already formatted and pass through
    unchanged in every format.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    data = _plain(value)
    if output_format is OutputFormat.JSON:
        return json.dumps(data, indent=2)
    if output_format is OutputFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip("\n")
    return _normal(data)
