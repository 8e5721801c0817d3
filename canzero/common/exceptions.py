"""Base exceptions shared by the settings store and its storage location helpers."""

from pathlib import Path
from typing import Optional


class AppDataError(Exception):
    """Base exception for application data operations."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class HomeDirectoryUnavailableError(AppDataError):
    """The current user's home directory cannot be determined."""

    pass
