"""
Application Names - Centralized names cho charfreq

Module này định nghĩa tên app và các biến môi trường.
Tập trung ở một nơi để tránh hardcode rải rác và đảm bảo consistency.

charfreq là library, mặc định không ghi file nào.
File logging chỉ bật khi CHARFREQ_LOG_DIR được set.
"""

import os
from pathlib import Path
from typing import Optional


# =============================================================================
# Tên ứng dụng - Single source of truth cho naming
# =============================================================================
APP_NAME = "charfreq"

# =============================================================================
# Environment Variables
# =============================================================================
DEBUG_ENV_VAR = "CHARFREQ_DEBUG"
LOG_DIR_ENV_VAR = "CHARFREQ_LOG_DIR"
THREADS_ENV_VAR = "CHARFREQ_THREADS"
CASE_ENV_VAR = "CHARFREQ_CASE"
MERGE_ENV_VAR = "CHARFREQ_MERGE"

# Kiểm tra debug mode từ environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def get_log_dir() -> Optional[Path]:
    """
    Lấy thư mục log từ environment variable.

    Returns:
        Path nếu CHARFREQ_LOG_DIR được set, None nếu không
    """
    value = os.environ.get(LOG_DIR_ENV_VAR, "").strip()
    return Path(value).expanduser() if value else None
