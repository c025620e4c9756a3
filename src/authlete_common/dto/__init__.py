"""Authlete API のリクエスト/レスポンス DTO"""

from authlete_common.dto.api_response import ApiResponse
from authlete_common.dto.base import DtoModel
from authlete_common.dto.property import Property
from authlete_common.dto.schema import ValidationResult, ensure_valid_payload, validate_payload
from authlete_common.dto.token_update_request import TokenUpdateRequest
from authlete_common.dto.token_update_response import TokenUpdateAction, TokenUpdateResponse

__all__ = [
    "ApiResponse",
    "DtoModel",
    "Property",
    "TokenUpdateAction",
    "TokenUpdateRequest",
    "TokenUpdateResponse",
    "ValidationResult",
    "ensure_valid_payload",
    "validate_payload",
]
