"""
Logging Configuration - Centralized logging setup

Cung cấp logging nhất quán cho toàn bộ library.
Mặc định chỉ log ra console ở mức WARNING để library không ồn ào.

- CHARFREQ_DEBUG=1: DEBUG level cho mọi handler
- CHARFREQ_LOG_DIR=<dir>: bật file log với rotation (max 5 files, 2MB each),
  buffered writes qua MemoryHandler
"""

import logging
import logging.handlers
import sys
from typing import Optional

from charfreq.config.paths import APP_NAME, DEBUG_MODE, get_log_dir

# Logger singleton
_logger: Optional[logging.Logger] = None

# Log rotation config
MAX_LOG_SIZE = 2 * 1024 * 1024  # 2MB per file
MAX_LOG_FILES = 5  # Keep 5 backup files
BUFFER_CAPACITY = 100  # Buffer 100 log records before flush


def _default_level() -> int:
    return logging.DEBUG if DEBUG_MODE else logging.WARNING


def get_logger() -> logging.Logger:
    """
    Get hoặc tạo logger singleton.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    _logger = logging.getLogger(APP_NAME)
    _logger.setLevel(_default_level())

    # Avoid duplicate handlers
    if _logger.handlers:
        return _logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_default_level())
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _logger.addHandler(console_handler)

    log_dir = get_log_dir()
    if log_dir is None:
        return _logger

    try:
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{APP_NAME}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=MAX_LOG_FILES,
            encoding="utf-8",
        )
        file_handler.setLevel(_default_level())
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        # Wrap with MemoryHandler for buffered writes (reduces disk I/O)
        memory_handler = logging.handlers.MemoryHandler(
            capacity=BUFFER_CAPACITY,
            flushLevel=logging.ERROR,  # Flush immediately on ERROR
            target=file_handler,
        )
        memory_handler.setLevel(_default_level())
        _logger.addHandler(memory_handler)

    except OSError as e:
        # Log to console if file logging fails
        _logger.warning(f"Could not create log file in {log_dir}: {e}")

    return _logger


def flush_logs():
    """
    Flush buffered logs.
    Gọi trước khi process exit để đảm bảo file log đầy đủ.
    """
    if _logger:
        for handler in _logger.handlers:
            handler.flush()


def set_debug_mode(enabled: bool):
    """
    Enable or disable debug mode at runtime.

    Args:
        enabled: True to enable DEBUG level logging
    """
    global DEBUG_MODE
    DEBUG_MODE = enabled

    logger = get_logger()
    new_level = _default_level()
    logger.setLevel(new_level)
    for handler in logger.handlers:
        handler.setLevel(new_level)


def log_error(message: str, exc: Optional[Exception] = None):
    """Log error với optional exception details"""
    logger = get_logger()
    if exc:
        logger.error(f"{message}: {exc}", exc_info=DEBUG_MODE)
    else:
        logger.error(message)


def log_warning(message: str):
    """Log warning"""
    get_logger().warning(message)


def log_info(message: str):
    """Log info"""
    get_logger().info(message)


def log_debug(message: str):
    """Log debug - only written if DEBUG_MODE is enabled"""
    if DEBUG_MODE:
        get_logger().debug(message)
