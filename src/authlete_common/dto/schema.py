"""
ペイロードのスキーマ検証

受信した生のワイヤ形式ペイロードを DTO の JSON Schema で検証する。
DTO への変換（:meth:`DtoModel.from_dict`）は型の整合性しか見ないため、
必須フィールドの欠落などはこちらで検出する。
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Type

from jsonschema import Draft202012Validator, exceptions as jsonschema_exceptions

from authlete_common.dto.base import DtoModel
from authlete_common.errors import SchemaValidationException, create_schema_error

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """スキーマ検証結果"""

    ok: bool
    errors: List[str]


@lru_cache(maxsize=None)
def _validator_for(model_cls: Type[DtoModel]) -> Draft202012Validator:
    return Draft202012Validator(model_cls.json_schema())


def _format_path(error: jsonschema_exceptions.ValidationError) -> str:
    path = "$"
    for elem in error.absolute_path:
        if isinstance(elem, int):
            path += f"[{elem}]"
        else:
            path += f".{elem}"
    return path


def validate_payload(model_cls: Type[DtoModel], payload: Any) -> ValidationResult:
    """ペイロードを DTO のスキーマで検証する

    Args:
        model_cls: 検証に使う DTO クラス
        payload: ワイヤ形式のペイロード

    Returns:
        ValidationResult: 検証結果。エラーは ``$.path: message`` 形式
    """
    if not isinstance(payload, Mapping):
        return ValidationResult(False, ["$: payload はオブジェクトである必要があります"])

    schema_errors = sorted(
        _validator_for(model_cls).iter_errors(dict(payload)),
        key=_format_path,
    )
    errors = [f"{_format_path(error)}: {error.message}" for error in schema_errors]
    if errors:
        logger.debug("%s のスキーマ検証に失敗しました: %s", model_cls.__name__, errors)
    return ValidationResult(ok=not errors, errors=errors)


def ensure_valid_payload(model_cls: Type[DtoModel], payload: Any) -> Dict[str, Any]:
    """ペイロードを検証し、不正な場合は例外を送出する

    Raises:
        SchemaValidationException: スキーマに適合しない場合
    """
    result = validate_payload(model_cls, payload)
    if not result.ok:
        raise SchemaValidationException(create_schema_error(model_cls.__name__, result.errors))
    return dict(payload)
