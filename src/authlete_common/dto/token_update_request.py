"""
``/auth/token/update`` API へのリクエスト

既存のアクセストークンの有効期限・スコープ・プロパティを更新する。

- ``accessToken``: 更新対象の既存アクセストークン
- ``accessTokenExpiresAt``: 新しい有効期限（Unix エポックからのミリ秒）。
  含まれない、または 0 以下の場合は有効期限を変更しない
- ``scopes``: 新しいスコープ集合。含まれない（None）場合は変更しない。
  サービスがサポートしないスコープや、クライアントに許可されていない
  スコープはサーバ側で無視される
- ``properties``: 新しいプロパティ集合。含まれない（None）場合は変更しない

空リストは「未指定」とは区別して空配列のまま送信する。空配列をどう
解釈するかはサーバ側の判断に委ねる。

アクセストークンの存在確認やスコープの妥当性検証はクライアント側では
一切行わない。
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import ConfigDict, SerializerFunctionWrapHandler, model_serializer

from authlete_common.dto.base import DtoModel
from authlete_common.dto.property import Property, PropertyLike, to_property


def _require_access_token(schema: Dict[str, Any]) -> None:
    # モデル上は None を許すが、ワイヤ上では文字列必須
    schema["required"] = ["accessToken"]
    token = schema.get("properties", {}).get("accessToken")
    if token is not None:
        token.pop("anyOf", None)
        token.pop("default", None)
        token["type"] = "string"


class TokenUpdateRequest(DtoModel):
    """``/auth/token/update`` API のリクエスト

    Attributes:
        access_token: 更新対象のアクセストークン
        access_token_expires_at: 新しい有効期限（ミリ秒）。0 以下は変更なし
        scopes: 新しいスコープ集合。None は変更なし
        properties: 新しいプロパティ集合。None は変更なし
    """

    model_config = ConfigDict(json_schema_extra=_require_access_token)

    access_token: Optional[str] = None
    access_token_expires_at: int = 0
    scopes: Optional[List[str]] = None
    properties: Optional[List[Property]] = None

    @model_serializer(mode="wrap")
    def _omit_unchanged_expiration(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        # 0 以下はすべて「変更なし」として同一のワイヤ表現にする
        if self.access_token_expires_at <= 0:
            data.pop("accessTokenExpiresAt", None)
            data.pop("access_token_expires_at", None)
        return data

    def get_access_token(self) -> Optional[str]:
        """更新対象のアクセストークンを取得"""
        return self.access_token

    def set_access_token(self, access_token: Optional[str]) -> "TokenUpdateRequest":
        """更新対象のアクセストークンを設定

        Args:
            access_token: 既存のアクセストークン

        Returns:
            このインスタンス自身
        """
        self.access_token = access_token
        return self

    def get_access_token_expires_at(self) -> int:
        """新しい有効期限（Unix エポックからのミリ秒）を取得"""
        return self.access_token_expires_at

    def set_access_token_expires_at(self, expires_at: int) -> "TokenUpdateRequest":
        """新しい有効期限を設定

        0 または負の値を指定した場合、有効期限は変更されない。
        値の範囲や未来日時であるかどうかは検証しない。

        Args:
            expires_at: 新しい有効期限（Unix エポックからのミリ秒）

        Returns:
            このインスタンス自身
        """
        self.access_token_expires_at = expires_at
        return self

    def is_expiration_change_requested(self) -> bool:
        """有効期限の変更を要求しているかどうか"""
        return self.access_token_expires_at > 0

    def get_scopes(self) -> Optional[List[str]]:
        """新しいスコープ集合を取得"""
        return self.scopes

    def set_scopes(self, scopes: Optional[Iterable[str]]) -> "TokenUpdateRequest":
        """新しいスコープ集合を設定

        Args:
            scopes: 新しいスコープ集合。None はスコープを変更しないことを表す

        Returns:
            このインスタンス自身
        """
        self.scopes = None if scopes is None else list(scopes)
        return self

    def get_properties(self) -> Optional[List[Property]]:
        """新しいプロパティ集合を取得"""
        return self.properties

    def set_properties(
        self, properties: Optional[Iterable[PropertyLike]]
    ) -> "TokenUpdateRequest":
        """新しいプロパティ集合を設定

        Args:
            properties: 新しいプロパティ集合。辞書は Property に変換する。
                None はプロパティを変更しないことを表す

        Returns:
            このインスタンス自身
        """
        if properties is None:
            self.properties = None
        else:
            self.properties = [to_property(entry) for entry in properties]
        return self
