"""Shared filesystem locations for the per-user storage."""

from pathlib import Path

from canzero.common.exceptions import HomeDirectoryUnavailableError
from canzero.common.fs import PathLike
from canzero.config.log import get_logger

APP_DIR_NAME = '.canzero'
APPDATA_FILE_NAME = 'canzero.toml'

logger = get_logger(__name__)


def get_app_dir() -> Path:
    """Return the canzero storage directory under the user's home."""

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        logger.critical('No home directory available on the OS: %s', exc)
        raise HomeDirectoryUnavailableError(f'No home directory available on the OS: {exc}') from exc
    return home / APP_DIR_NAME


def get_appdata_path(storage_root: PathLike | None = None) -> Path:
    """Return the settings file path, defaulting the root to ``get_app_dir()``."""

    root = Path(storage_root) if storage_root is not None else get_app_dir()
    return root / APPDATA_FILE_NAME


__all__ = ['APPDATA_FILE_NAME', 'APP_DIR_NAME', 'get_app_dir', 'get_appdata_path']
