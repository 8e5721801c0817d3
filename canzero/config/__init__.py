from canzero.config.log import configure_structlog, get_logger
from canzero.config.models import LoggingConfig
from canzero.config.paths import get_app_dir, get_appdata_path

__all__ = ['LoggingConfig', 'configure_structlog', 'get_app_dir', 'get_appdata_path', 'get_logger']
