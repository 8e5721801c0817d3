"""Per-user settings store with dirty tracking and save-on-close."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Optional, Type

from canzero.appdata.exceptions import AppDataError, AppDataIOError, BrokenConfigError, InvalidConfigPathError
from canzero.appdata.models import AppDataModel
from canzero.common.fs import PathLike, canonicalize_path, ensure_directory
from canzero.config.log import get_logger
from canzero.config.paths import get_appdata_path

logger = get_logger(__name__)


class AppData:
    """In-memory mirror of ``<storage_root>/canzero.toml``.

    Changes made through :meth:`set_config_path` are only written back by
    :meth:`flush`, :meth:`close` or on leaving a ``with`` block, and only when
    the stored value actually changed.

    Example:
        with AppData.read() as appdata:
            appdata.set_config_path('network.yaml')
    """

    def __init__(self, model: Optional[AppDataModel] = None, storage_root: Optional[PathLike] = None):
        self._storage_path = get_appdata_path(storage_root)
        self._model = model if model is not None else AppDataModel()
        self._changed = False
        self._closed = False

    @classmethod
    def read(cls, storage_root: Optional[PathLike] = None) -> AppData:
        """Load the stored settings, or defaults when no file exists yet.

        Raises:
            BrokenConfigError: If the file is not valid TOML or not the expected record
            AppDataIOError: If the file exists but cannot be read
        """
        storage_path = get_appdata_path(storage_root)
        if not storage_path.exists():
            logger.debug('No settings file at %s, using defaults', storage_path)
            return cls(storage_root=storage_path.parent)

        try:
            text = storage_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise AppDataIOError(f'Failed to read {storage_path}: {exc}', path=storage_path) from exc

        try:
            model = AppDataModel.from_toml(text)
        except ValueError as exc:
            logger.error('Broken settings file %s: %s', storage_path, exc)
            raise BrokenConfigError(f'Broken settings file {storage_path}', path=storage_path) from exc

        logger.debug('Loaded settings from %s', storage_path)
        return cls(model=model, storage_root=storage_path.parent)

    @classmethod
    def default(cls, storage_root: Optional[PathLike] = None) -> AppData:
        """Empty settings bound to ``storage_root``, nothing read from disk."""
        return cls(storage_root=storage_root)

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    @property
    def storage_root(self) -> Path:
        return self._storage_path.parent

    @property
    def changed(self) -> bool:
        """True while there are changes not yet written to disk."""
        return self._changed

    @property
    def closed(self) -> bool:
        return self._closed

    def get_config_path(self) -> Optional[Path]:
        return self._model.config_path

    def set_config_path(self, path: Optional[PathLike]) -> None:
        """Store ``path`` canonicalized, or clear it with ``None``.

        Raises:
            AppDataIOError: If the path cannot be resolved (e.g. it does not exist)
            InvalidConfigPathError: If the path resolves to a directory
            AppDataError: If the store was closed
        """
        self._ensure_open()

        new_config_path = None
        if path is not None:
            try:
                new_config_path = canonicalize_path(path)
            except (OSError, RuntimeError) as exc:
                raise AppDataIOError(f'Failed to resolve config path {path}: {exc}', path=Path(path)) from exc
            if new_config_path.is_dir():
                raise InvalidConfigPathError(f'Config path {new_config_path} is a directory', path=new_config_path)

        if new_config_path != self._model.config_path:
            self._model.config_path = new_config_path
            self._changed = True

    def flush(self) -> bool:
        """Write pending changes to disk.

        Returns:
            True if the file was written, False if there was nothing to write

        Raises:
            AppDataIOError: If the storage directory or file cannot be written
        """
        if not self._changed:
            logger.debug('Settings unchanged, skipping write to %s', self._storage_path)
            return False

        storage_dir = self._storage_path.parent
        try:
            ensure_directory(storage_dir)
        except OSError as exc:
            raise AppDataIOError(f'Failed to create config directories {storage_dir}: {exc}', path=storage_dir) from exc

        try:
            self._storage_path.write_text(self._model.to_toml(), encoding='utf-8')
        except OSError as exc:
            raise AppDataIOError(f'Failed to write to {self._storage_path}: {exc}', path=self._storage_path) from exc

        self._changed = False
        logger.info('Saved settings to %s', self._storage_path)
        return True

    def close(self) -> None:
        """Flush pending changes and mark the store closed. Safe to call twice."""
        if self._closed:
            return
        self.flush()
        self._closed = True

    def copy(self) -> AppData:
        """Independent copy with the same storage location, value and pending state."""
        duplicate = type(self)(model=self._model.model_copy(), storage_root=self.storage_root)
        duplicate._changed = self._changed
        return duplicate

    def _ensure_open(self) -> None:
        if self._closed:
            raise AppDataError(f'Settings store for {self._storage_path} is closed', path=self._storage_path)

    def __enter__(self) -> AppData:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            self.close()
            return

        # The in-flight exception wins over a failed save.
        try:
            self.close()
        except AppDataError as flush_exc:
            logger.error('Failed to save settings while handling %s: %s', exc_type.__name__, flush_exc)

    def __repr__(self) -> str:
        return f'AppData(config_path={self._model.config_path!r}, storage_path={self._storage_path!r}, changed={self._changed})'


__all__ = ['AppData']
