"""
``grant_type`` パラメータの値
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class GrantType(str, Enum):
    """トークンエンドポイントで使用されるグラントタイプ"""
    AUTHORIZATION_CODE = "authorization_code"
    IMPLICIT = "implicit"
    PASSWORD = "password"
    CLIENT_CREDENTIALS = "client_credentials"
    REFRESH_TOKEN = "refresh_token"
    # OpenID Connect CIBA Core 1.0
    CIBA = "urn:openid:params:grant-type:ciba"
    # RFC 8628
    DEVICE_CODE = "urn:ietf:params:oauth:grant-type:device_code"
    # RFC 8693
    TOKEN_EXCHANGE = "urn:ietf:params:oauth:grant-type:token-exchange"
    # RFC 7523
    JWT_BEARER = "urn:ietf:params:oauth:grant-type:jwt-bearer"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["GrantType"]:
        """ワイヤ上の文字列から列挙値を取得（未知の値は None）"""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            logger.warning("未知のグラントタイプです: %r", value)
            return None

    def __str__(self) -> str:
        return self.value
