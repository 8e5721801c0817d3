"""Per-user canzero settings stored in ``~/.canzero/canzero.toml``."""

from canzero.appdata import (
    AppData,
    AppDataError,
    AppDataIOError,
    AppDataModel,
    BrokenConfigError,
    HomeDirectoryUnavailableError,
    InvalidConfigPathError,
)

__all__ = [
    'AppData',
    'AppDataError',
    'AppDataIOError',
    'AppDataModel',
    'BrokenConfigError',
    'HomeDirectoryUnavailableError',
    'InvalidConfigPathError',
]
