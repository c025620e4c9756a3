"""アクセストークンなどに付与する任意のプロパティ"""

from collections.abc import Mapping
from typing import Optional, Union

from authlete_common.dto.base import DtoModel


class Property(DtoModel):
    """キーと値の組

    Attributes:
        key: プロパティ名
        value: プロパティ値
        hidden: True の場合、クライアントアプリケーションには見せない
    """

    key: Optional[str] = None
    value: Optional[str] = None
    hidden: bool = False

    def __init__(
        self,
        key: Optional[str] = None,
        value: Optional[str] = None,
        hidden: bool = False,
        **data,
    ):
        super().__init__(key=key, value=value, hidden=hidden, **data)

    def get_key(self) -> Optional[str]:
        return self.key

    def set_key(self, key: Optional[str]) -> "Property":
        self.key = key
        return self

    def get_value(self) -> Optional[str]:
        return self.value

    def set_value(self, value: Optional[str]) -> "Property":
        self.value = value
        return self

    def is_hidden(self) -> bool:
        return self.hidden

    def set_hidden(self, hidden: bool) -> "Property":
        self.hidden = hidden
        return self

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


PropertyLike = Union[Property, Mapping]


def to_property(entry: PropertyLike) -> Property:
    """Property または辞書を Property に変換する

    辞書の値は宣言された型へ変換する（``"false"`` は False になる）。

    Raises:
        pydantic.ValidationError: 宣言された型へ変換できない場合
    """
    if isinstance(entry, Property):
        return entry
    return Property.model_validate(dict(entry))
