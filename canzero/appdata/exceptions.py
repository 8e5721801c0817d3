"""Application data domain exceptions."""

from canzero.common.exceptions import AppDataError, HomeDirectoryUnavailableError


class BrokenConfigError(AppDataError):
    """Stored settings file exists but does not parse as the expected record."""

    pass


class InvalidConfigPathError(AppDataError):
    """Supplied configuration path resolves to a directory."""

    pass


class AppDataIOError(AppDataError):
    """Filesystem failure while reading, resolving or writing settings."""

    pass


__all__ = ['AppDataError', 'AppDataIOError', 'BrokenConfigError', 'HomeDirectoryUnavailableError', 'InvalidConfigPathError']
