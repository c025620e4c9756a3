"""プロトコル上の固定語彙"""

from authlete_common.types.error_code import ErrorCode
from authlete_common.types.grant_type import GrantType

__all__ = [
    "ErrorCode",
    "GrantType",
]
