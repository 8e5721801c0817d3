from canzero.appdata.exceptions import (
    AppDataError,
    AppDataIOError,
    BrokenConfigError,
    HomeDirectoryUnavailableError,
    InvalidConfigPathError,
)
from canzero.appdata.models import AppDataModel
from canzero.appdata.store import AppData

__all__ = [
    'AppData',
    'AppDataError',
    'AppDataIOError',
    'AppDataModel',
    'BrokenConfigError',
    'HomeDirectoryUnavailableError',
    'InvalidConfigPathError',
]
