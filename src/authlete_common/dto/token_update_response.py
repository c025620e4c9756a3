"""
``/auth/token/update`` API のレスポンス

``action`` の値に応じて呼び出し側が取るべき動作を示す。

- ``INTERNAL_SERVER_ERROR``: Authlete 側またはリクエスト内容の問題
- ``BAD_REQUEST``: リクエストが不正（アクセストークン未指定など）
- ``FORBIDDEN``: アクセストークンに紐づくクライアントが更新を許可されていない
- ``NOT_FOUND``: アクセストークンが存在しない
- ``OK``: 更新に成功した
"""

from enum import Enum
from typing import Iterable, List, Optional

from authlete_common.dto.api_response import ApiResponse
from authlete_common.dto.property import Property, PropertyLike, to_property


class TokenUpdateResponse(ApiResponse):
    """``/auth/token/update`` API のレスポンス

    Attributes:
        action: 呼び出し側が取るべき動作
        access_token: 更新されたアクセストークン
        access_token_expires_at: 更新後の有効期限（ミリ秒）
        scopes: 更新後のスコープ集合
        properties: 更新後のプロパティ集合
    """

    class Action(str, Enum):
        """呼び出し側が取るべき動作"""
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        OK = "OK"

    action: Optional[Action] = None
    access_token: Optional[str] = None
    access_token_expires_at: int = 0
    scopes: Optional[List[str]] = None
    properties: Optional[List[Property]] = None

    def get_action(self) -> Optional["TokenUpdateResponse.Action"]:
        return self.action

    def set_action(self, action: Optional["TokenUpdateResponse.Action"]) -> "TokenUpdateResponse":
        self.action = action
        return self

    def get_access_token(self) -> Optional[str]:
        return self.access_token

    def set_access_token(self, access_token: Optional[str]) -> "TokenUpdateResponse":
        self.access_token = access_token
        return self

    def get_access_token_expires_at(self) -> int:
        return self.access_token_expires_at

    def set_access_token_expires_at(self, expires_at: int) -> "TokenUpdateResponse":
        self.access_token_expires_at = expires_at
        return self

    def get_scopes(self) -> Optional[List[str]]:
        return self.scopes

    def set_scopes(self, scopes: Optional[Iterable[str]]) -> "TokenUpdateResponse":
        self.scopes = None if scopes is None else list(scopes)
        return self

    def get_properties(self) -> Optional[List[Property]]:
        return self.properties

    def set_properties(
        self, properties: Optional[Iterable[PropertyLike]]
    ) -> "TokenUpdateResponse":
        """更新後のプロパティ集合を設定（辞書は Property に変換する）"""
        if properties is None:
            self.properties = None
        else:
            self.properties = [to_property(entry) for entry in properties]
        return self

    def is_successful(self) -> bool:
        """更新に成功したかどうか"""
        return self.action == TokenUpdateResponse.Action.OK


TokenUpdateAction = TokenUpdateResponse.Action
