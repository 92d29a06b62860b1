import logging
import logging.handlers
import sys
from typing import Any, Dict, Optional

from ..core.config_loader import ConfigLoader

LIBRARY_LOGGER_NAME = 'pageobjects'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _level(name: Any, fallback: int) -> int:
    return getattr(logging, str(name).upper(), fallback)


def _console_handler(config: Dict[str, Any], level: int, fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_level(config.get('level'), level))
    handler.setFormatter(logging.Formatter(config.get('format', fmt)))
    return handler


def _file_handler(config: Dict[str, Any], config_loader: ConfigLoader, level: int, fmt: str) -> logging.Handler:
    log_path = config_loader.resolve_path(config.get('path', 'logs/pageobjects.log'))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    rotation_type = config.get('rotation_type')  # 'size', 'time' or None
    if rotation_type == 'size':
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=int(config.get('max_bytes', 5 * 1024 * 1024)),
            backupCount=int(config.get('backup_count', 5)),
            encoding='utf-8',
        )
    elif rotation_type == 'time':
        handler = logging.handlers.TimedRotatingFileHandler(
            log_path,
            when=config.get('when', 'midnight'),
            interval=int(config.get('interval', 1)),
            backupCount=int(config.get('backup_count', 5)),
            encoding='utf-8',
        )
    else:
        handler = logging.FileHandler(log_path, encoding='utf-8')

    handler.setLevel(_level(config.get('level'), level))
    handler.setFormatter(logging.Formatter(config.get('format', fmt)))
    return handler


def setup_logger(config_loader: Optional[ConfigLoader] = None,
                 logger_name: Optional[str] = LIBRARY_LOGGER_NAME) -> logging.Logger:
    """
    Configures the library's logger from the 'logging' block of the settings.

    Only the 'pageobjects' logger is touched by default; pass logger_name=None to
    configure the root logger instead. Relative file handler paths are resolved
    next to the settings file. Calling this again replaces the handlers it added.
    """
    if config_loader is None:
        config_loader = ConfigLoader()

    level = _level(config_loader.get_logging_setting('level', 'INFO'), logging.INFO)
    fmt = config_loader.get_logging_setting('format', DEFAULT_LOG_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if logger_name is not None:
        logger.propagate = bool(config_loader.get_logging_setting('propagate', False))

    console_config = config_loader.get_logging_setting('console_handler', {})
    if console_config.get('enabled', True):
        logger.addHandler(_console_handler(console_config, level, fmt))

    file_config = config_loader.get_logging_setting('file_handler', {})
    if file_config.get('enabled', False):
        logger.addHandler(_file_handler(file_config, config_loader, level, fmt))

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
