"""
DTO共通基盤

Authlete API とやり取りするペイロードの共通シリアライズ処理を提供する。
ワイヤ上のフィールド名は camelCase、Python 側は snake_case で扱う。
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from authlete_common.errors import DeserializationException, create_deserialization_error

logger = logging.getLogger(__name__)

DtoT = TypeVar("DtoT", bound="DtoModel")


class DtoModel(BaseModel):
    """全DTOの基底クラス

    - ``None`` のフィールドはワイヤ形式から除外される
    - 入力はワイヤ名（camelCase）と Python 名のどちらでも受け付ける
    - 未知のキーは無視する
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # ワイヤ形式の互換性を表すバージョン。互換性のない変更時にのみ上げる。
    SCHEMA_VERSION: ClassVar[int] = 1

    def to_dict(self) -> Dict[str, Any]:
        """ワイヤ形式の辞書に変換"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        """ワイヤ形式のJSON文字列に変換"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_dict(cls: Type[DtoT], data: Mapping) -> DtoT:
        """ワイヤ形式の辞書からインスタンスを生成

        Args:
            data: ワイヤ形式の辞書

        Returns:
            生成したインスタンス

        Raises:
            DeserializationException: 辞書でない場合、または型が合わない場合
        """
        if not isinstance(data, Mapping):
            raise DeserializationException(
                create_deserialization_error(
                    cls.__name__,
                    f"{cls.__name__} にはオブジェクトが必要です（実際: {type(data).__name__}）",
                )
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            errors = _summarize_validation_errors(exc)
            logger.debug("%s の変換に失敗しました: %s", cls.__name__, errors)
            raise DeserializationException(
                create_deserialization_error(
                    cls.__name__,
                    f"{cls.__name__} への変換に失敗しました（{exc.error_count()}件）",
                    details={"errors": errors},
                )
            ) from exc

    @classmethod
    def from_json(cls: Type[DtoT], text: str | bytes) -> DtoT:
        """ワイヤ形式のJSON文字列からインスタンスを生成

        Raises:
            DeserializationException: JSONとして不正な場合、または型が合わない場合
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            logger.debug("%s のJSON解析に失敗しました: %s", cls.__name__, exc)
            raise DeserializationException(
                create_deserialization_error(
                    cls.__name__,
                    f"JSONの解析に失敗しました: {exc}",
                )
            ) from exc
        return cls.from_dict(data)

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """ワイヤ形式のJSON Schemaを返す"""
        schema = cls.model_json_schema(by_alias=True)
        schema["x-schema-version"] = cls.SCHEMA_VERSION
        return schema


def _summarize_validation_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """pydantic のエラーを JSON 化可能な形に縮約する"""
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
        for error in exc.errors(include_url=False)
    ]
