"""Pydantic V2 ベースの Authlete クライアント設定モデル"""

import logging
from typing import Any, Literal, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.authlete.com"

# dump_masked() でマスクするフィールド
SECRET_FIELDS = (
    "service_owner_api_secret",
    "service_api_secret",
    "service_access_token",
)


def mask_secret(value: Optional[str]) -> Optional[str]:
    """機微情報を先頭と末尾だけ残してマスクする"""
    if not value:
        return value
    return f"{value[:4]}...{value[-4:]}" if len(value) > 12 else "***"


class AuthleteSettings(BaseSettings):
    """Authlete API 接続設定"""

    model_config = SettingsConfigDict(
        env_prefix="AUTHLETE_",
        env_file=".env",
        extra="ignore",
    )

    # 接続先
    base_url: str = Field(default=DEFAULT_BASE_URL)
    api_version: Literal["V2", "V3"] = "V2"
    timeout: int = Field(default=30, ge=1)

    # サービスオーナー資格情報（V2）
    service_owner_api_key: Optional[str] = None
    service_owner_api_secret: Optional[str] = None

    # サービス資格情報（V2 は key/secret、V3 はアクセストークン）
    service_api_key: Optional[str] = None
    service_api_secret: Optional[str] = None
    service_access_token: Optional[str] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ) -> Tuple[Any, ...]:
        """設定ソースの優先順位をカスタマイズ（env > dotenv > init）"""
        return (
            env_settings,
            dotenv_settings,
            init_settings,
            file_secret_settings,
        )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """スキームを検証し、末尾のスラッシュを取り除く"""
        if not value.startswith(("http://", "https://")):
            raise ValueError(
                f"base_url は http:// または https:// で始まる必要があります: {value!r}"
            )
        return value.rstrip("/")

    def dump_masked(self) -> dict:
        """機微情報をマスクした設定を返却する"""
        data = self.model_dump()
        for name in SECRET_FIELDS:
            data[name] = mask_secret(data.get(name))
        return data
