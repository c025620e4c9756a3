"""設定管理 - 設定の読み込みと管理"""

from authlete_common.config.manager import ConfigManager
from authlete_common.config.settings import (
    DEFAULT_BASE_URL,
    AuthleteSettings,
    mask_secret,
)

__all__ = [
    "AuthleteSettings",
    "ConfigManager",
    "DEFAULT_BASE_URL",
    "mask_secret",
]
