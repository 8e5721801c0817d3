"""TOML text helpers for the settings file."""

from typing import Any, Dict

import tomlkit
from tomlkit.exceptions import TOMLKitError


def load_toml(text: str) -> Dict[str, Any]:
    """Parse TOML text into a plain dict.

    Raises:
        ValueError: If the text is not valid TOML 1.0
    """
    try:
        return tomlkit.parse(text).unwrap()
    except TOMLKitError as e:
        raise ValueError(f'Invalid TOML: {e}') from e


def dump_toml(data: Dict[str, Any]) -> str:
    """Render a dict as TOML text, one key per line."""
    return tomlkit.dumps(data)


__all__ = ['dump_toml', 'load_toml']
