"""Filesystem helpers shared by the settings store and logging setup."""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def ensure_directory(path: PathLike) -> Path:
    """Create ``path`` and any missing ancestors, parent first.

    Raises:
        NotADirectoryError: If ``path`` exists but is not a directory
        OSError: If a directory cannot be created
    """
    directory = Path(path)
    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f'{directory} exists and is not a directory')
        return directory

    if directory.parent != directory:
        ensure_directory(directory.parent)
    directory.mkdir(exist_ok=True)
    return directory


def canonicalize_path(path: PathLike) -> Path:
    """Return the absolute path with symlinks and ``..`` segments resolved.

    Raises:
        FileNotFoundError: If the path does not exist
    """
    return Path(path).resolve(strict=True)


__all__ = ['PathLike', 'canonicalize_path', 'ensure_directory']
