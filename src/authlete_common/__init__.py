"""authlete-common - Authlete API のデータモデル"""

from authlete_common.dto import (
    ApiResponse,
    Property,
    TokenUpdateAction,
    TokenUpdateRequest,
    TokenUpdateResponse,
)
from authlete_common.errors import (
    AuthleteCommonException,
    ConfigurationException,
    DeserializationException,
    SchemaValidationException,
)
from authlete_common.types import ErrorCode, GrantType

__version__ = "1.0.0"

__all__ = [
    "ApiResponse",
    "AuthleteCommonException",
    "ConfigurationException",
    "DeserializationException",
    "ErrorCode",
    "GrantType",
    "Property",
    "SchemaValidationException",
    "TokenUpdateAction",
    "TokenUpdateRequest",
    "TokenUpdateResponse",
    "__version__",
]
