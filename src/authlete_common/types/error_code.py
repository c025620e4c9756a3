"""
OAuth 2.0 / OpenID Connect のエラーコード

認可エンドポイント・トークンエンドポイント・リソースサーバが返す ``error``
パラメータの値を定義する。

参照:
- RFC 6749 4.1.2.1 / 4.2.2.1 / 5.2 (Error Response)
- RFC 6750 3.1 (Bearer Token Usage, Error Codes)
- OpenID Connect Core 1.0 3.1.2.6 (Authentication Error Response)

``request`` / ``request_uri`` パラメータはAuthleteがサポートしているため、
``request_not_supported`` と ``request_uri_not_supported`` は実際には使われない。
"""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """``error`` パラメータの値"""
    ACCESS_DENIED = "access_denied"
    ACCOUNT_SELECTION_REQUIRED = "account_selection_required"
    CONSENT_REQUIRED = "consent_required"
    INSUFFICIENT_SCOPE = "insufficient_scope"
    INTERACTION_REQUIRED = "interaction_required"
    INVALID_CLIENT = "invalid_client"
    INVALID_GRANT = "invalid_grant"
    INVALID_REQUEST = "invalid_request"
    INVALID_REQUEST_URI = "invalid_request_uri"
    INVALID_REQUEST_OBJECT = "invalid_request_object"
    INVALID_SCOPE = "invalid_scope"
    INVALID_TOKEN = "invalid_token"
    LOGIN_REQUIRED = "login_required"
    REGISTRATION_NOT_SUPPORTED = "registration_not_supported"
    REQUEST_NOT_SUPPORTED = "request_not_supported"
    REQUEST_URI_NOT_SUPPORTED = "request_uri_not_supported"
    SERVER_ERROR = "server_error"
    TEMPORARILY_UNAVAILABLE = "temporarily_unavailable"
    UNAUTHORIZED_CLIENT = "unauthorized_client"
    UNSUPPORTED_GRANT_TYPE = "unsupported_grant_type"
    UNSUPPORTED_RESPONSE_TYPE = "unsupported_response_type"

    @property
    def description(self) -> str:
        """仕様書上の説明文"""
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ErrorCode"]:
        """ワイヤ上の文字列から列挙値を取得

        Args:
            value: ``error`` パラメータの値

        Returns:
            対応する ErrorCode。None または未知の値の場合は None
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            logger.warning("未知のエラーコードです: %r", value)
            return None

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS: Dict[ErrorCode, str] = {
    ErrorCode.ACCESS_DENIED: (
        "The resource owner or authorization server denied the request."
    ),
    ErrorCode.ACCOUNT_SELECTION_REQUIRED: (
        "The End-User is REQUIRED to select a session at the Authorization "
        "Server. The End-User MAY be authenticated at the Authorization Server "
        "with different associated accounts, but the End-User did not select "
        "a session."
    ),
    ErrorCode.CONSENT_REQUIRED: (
        "The Authorization Server requires End-User consent."
    ),
    ErrorCode.INSUFFICIENT_SCOPE: (
        "The request requires higher privileges than provided by the access token."
    ),
    ErrorCode.INTERACTION_REQUIRED: (
        "The Authorization Server requires End-User interaction of some form "
        "to proceed."
    ),
    ErrorCode.INVALID_CLIENT: (
        "Client authentication failed (e.g., unknown client, no client "
        "authentication included, or unsupported authentication method)."
    ),
    ErrorCode.INVALID_GRANT: (
        "The provided authorization grant (e.g., authorization code, resource "
        "owner credentials) or refresh token is invalid, expired, revoked, "
        "does not match the redirection URI used in the authorization request, "
        "or was issued to another client."
    ),
    ErrorCode.INVALID_REQUEST: (
        "The request is missing a required parameter, includes an invalid "
        "parameter value, includes a parameter more than once, or is otherwise "
        "malformed."
    ),
    ErrorCode.INVALID_REQUEST_URI: (
        "The request_uri in the Authorization Request returns an error or "
        "contains invalid data."
    ),
    ErrorCode.INVALID_REQUEST_OBJECT: (
        "The request parameter contains an invalid Request Object."
    ),
    ErrorCode.INVALID_SCOPE: (
        "The requested scope is invalid, unknown, or malformed."
    ),
    ErrorCode.INVALID_TOKEN: (
        "The access token provided is expired, revoked, malformed, or invalid "
        "for other reasons."
    ),
    ErrorCode.LOGIN_REQUIRED: (
        "The Authorization Server requires End-User authentication."
    ),
    ErrorCode.REGISTRATION_NOT_SUPPORTED: (
        "The OP does not support use of the registration parameter."
    ),
    ErrorCode.REQUEST_NOT_SUPPORTED: (
        "The OP does not support use of the request parameter."
    ),
    ErrorCode.REQUEST_URI_NOT_SUPPORTED: (
        "The OP does not support use of the request_uri parameter."
    ),
    ErrorCode.SERVER_ERROR: (
        "The authorization server encountered an unexpected condition that "
        "prevented it from fulfilling the request."
    ),
    ErrorCode.TEMPORARILY_UNAVAILABLE: (
        "The authorization server is currently unable to handle the request "
        "due to a temporary overloading or maintenance of the server."
    ),
    ErrorCode.UNAUTHORIZED_CLIENT: (
        "The client is not authorized to request an authorization code or an "
        "access token using this method."
    ),
    ErrorCode.UNSUPPORTED_GRANT_TYPE: (
        "The authorization grant type is not supported by the authorization server."
    ),
    ErrorCode.UNSUPPORTED_RESPONSE_TYPE: (
        "The authorization server does not support obtaining an authorization "
        "code or an access token using this method."
    ),
}
