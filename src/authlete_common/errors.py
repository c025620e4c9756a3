"""
エラー定義

authlete-common ライブラリ自身が送出するエラーコードと例外クラス。

OAuth/OIDC プロトコル上のエラー（``invalid_token`` など）は
:mod:`authlete_common.types.error_code` を参照。こちらはデシリアライズや
設定読み込みなど、クライアント側で起こる失敗のみを扱う。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class LibraryErrorCode(Enum):
    """ライブラリのエラーコード

    カテゴリ別にエラーコードを定義:
    - CONFIG_xxx: 設定エラー
    - DTO_xxx: ペイロードの変換・検証エラー
    """
    # 設定エラー
    CONFIG_INVALID_VALUE = "CONFIG_002"
    CONFIG_FILE_UNREADABLE = "CONFIG_003"

    # DTOエラー
    DTO_DESERIALIZATION_FAILED = "DTO_001"
    DTO_SCHEMA_INVALID = "DTO_002"


@dataclass
class LibraryError:
    """ライブラリのエラー情報

    Attributes:
        code: エラーコード文字列
        message: エラーメッセージ
        details: 追加のエラー詳細情報
        log_level: ログ出力時のレベル
    """
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    log_level: int = logging.ERROR


class AuthleteCommonException(Exception):
    """authlete-common 例外クラス

    LibraryErrorをラップする例外クラス
    """

    def __init__(self, error: LibraryError):
        """AuthleteCommonExceptionを初期化

        Args:
            error: LibraryErrorインスタンス
        """
        self.error = error
        self.log_level = error.log_level
        super().__init__(f"[{error.code}] {error.message}")


class ConfigurationException(AuthleteCommonException):
    """設定値の読み込み・検証エラー"""


class DeserializationException(AuthleteCommonException):
    """ワイヤ形式からDTOへの変換エラー"""


class SchemaValidationException(AuthleteCommonException):
    """ペイロードがJSON Schemaに適合しない場合の例外"""


ERROR_CODE_LOG_LEVEL: Dict[LibraryErrorCode, int] = {
    LibraryErrorCode.CONFIG_INVALID_VALUE: logging.ERROR,
    LibraryErrorCode.CONFIG_FILE_UNREADABLE: logging.WARNING,
    LibraryErrorCode.DTO_DESERIALIZATION_FAILED: logging.DEBUG,
    LibraryErrorCode.DTO_SCHEMA_INVALID: logging.DEBUG,
}


def create_config_error(
    message: str,
    details: Optional[Dict[str, Any]] = None,
    code: LibraryErrorCode = LibraryErrorCode.CONFIG_INVALID_VALUE,
) -> LibraryError:
    """設定エラーを作成

    Args:
        message: エラーメッセージ
        details: 追加詳細
        code: エラーコード

    Returns:
        LibraryError: 設定エラー
    """
    return LibraryError(
        code=code.value,
        message=message,
        details=details,
        log_level=ERROR_CODE_LOG_LEVEL.get(code, logging.ERROR),
    )


def create_deserialization_error(
    model_name: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> LibraryError:
    """デシリアライズエラーを作成

    Args:
        model_name: 変換先のDTOクラス名
        message: エラーメッセージ
        details: 追加詳細

    Returns:
        LibraryError: デシリアライズエラー
    """
    merged: Dict[str, Any] = {"model": model_name}
    if details:
        merged.update(details)
    return LibraryError(
        code=LibraryErrorCode.DTO_DESERIALIZATION_FAILED.value,
        message=message,
        details=merged,
        log_level=ERROR_CODE_LOG_LEVEL[LibraryErrorCode.DTO_DESERIALIZATION_FAILED],
    )


def create_schema_error(model_name: str, errors: list) -> LibraryError:
    """スキーマ検証エラーを作成

    Args:
        model_name: 検証対象のDTOクラス名
        errors: 整形済みのエラーメッセージ一覧

    Returns:
        LibraryError: スキーマ検証エラー
    """
    return LibraryError(
        code=LibraryErrorCode.DTO_SCHEMA_INVALID.value,
        message=f"{model_name} のペイロードがスキーマに適合しません: " + "; ".join(errors),
        details={"model": model_name, "errors": list(errors)},
        log_level=ERROR_CODE_LOG_LEVEL[LibraryErrorCode.DTO_SCHEMA_INVALID],
    )
