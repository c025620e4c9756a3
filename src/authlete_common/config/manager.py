"""
設定管理

YAML 設定ファイルと環境変数から Authlete 接続設定を読み込む。
環境変数は設定ファイルの値を上書きする。
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from authlete_common.config.settings import AuthleteSettings
from authlete_common.errors import (
    ConfigurationException,
    LibraryErrorCode,
    create_config_error,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """設定の読み込みと管理"""

    # 入れ子セクション名 -> {キー: フィールド名}
    SECTION_MAPPING = {
        "service_owner": {
            "api_key": "service_owner_api_key",
            "api_secret": "service_owner_api_secret",
        },
        "service": {
            "api_key": "service_api_key",
            "api_secret": "service_api_secret",
            "access_token": "service_access_token",
        },
    }

    def __init__(self):
        """ConfigManagerを初期化"""
        self._settings: Optional[AuthleteSettings] = None

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        force_reload: bool = False,
    ) -> AuthleteSettings:
        """設定を読み込む

        Args:
            config_path: 設定ファイルのパス（省略時はデフォルトパスを検索）
            force_reload: キャッシュを無視して再読み込みするかどうか

        Returns:
            AuthleteSettings: 読み込んだ設定

        Raises:
            ConfigurationException: 設定値が不正な場合
        """
        if self._settings is not None and not force_reload:
            return self._settings

        if config_path is not None:
            config_path = Path(config_path)
        file_config = self._load_from_file(config_path)
        try:
            self._settings = AuthleteSettings(**file_config)
        except ValidationError as exc:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors(include_url=False)
            ]
            raise ConfigurationException(
                create_config_error(
                    "設定値が不正です: " + "; ".join(errors),
                    details={"errors": errors},
                )
            ) from exc
        return self._settings

    def _load_from_file(self, config_path: Optional[Path] = None) -> Dict[str, Any]:
        """設定ファイルから読み込み

        Args:
            config_path: 設定ファイルのパス

        Returns:
            Dict[str, Any]: 読み込んだ設定値
        """
        if config_path is None:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_path = path
                    break

        if config_path is None or not config_path.exists():
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            error = create_config_error(
                f"設定ファイルを解析できません: {config_path}",
                details={"path": str(config_path), "reason": str(exc)},
                code=LibraryErrorCode.CONFIG_FILE_UNREADABLE,
            )
            logger.log(error.log_level, "[%s] %s", error.code, error.message)
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("設定ファイルの最上位がマッピングではありません: %s", config_path)
            return {}
        return self._normalize_config(data)

    def _get_default_config_paths(self) -> List[Path]:
        """デフォルトの設定ファイルパスを取得"""
        home = Path.home()
        return [
            Path.cwd() / "authlete.yaml",
            Path.cwd() / "authlete.yml",
            home / ".authlete.yaml",
            home / ".config" / "authlete" / "config.yaml",
        ]

    def _normalize_config(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """設定値を AuthleteSettings のフィールド名へ正規化

        次の3形式を受け付ける。後に挙げたものほど優先される。

        - フィールド名そのもの（``service_api_key``）
        - ドット区切りのキー（``service.api_key``）
        - 入れ子のセクション（``service: {api_key: ...}``）
        """
        fields = set(AuthleteSettings.model_fields)
        result: Dict[str, Any] = {
            key: value for key, value in data.items() if key in fields
        }

        for section, mapping in self.SECTION_MAPPING.items():
            for key, field_name in mapping.items():
                dotted = f"{section}.{key}"
                if dotted in data:
                    result[field_name] = data[dotted]

            nested = data.get(section)
            if isinstance(nested, dict):
                for key, field_name in mapping.items():
                    if key in nested:
                        result[field_name] = nested[key]

        ignored = sorted(
            str(key) for key in data
            if key not in fields
            and key not in self.SECTION_MAPPING
            and not any(str(key).startswith(f"{section}.") for section in self.SECTION_MAPPING)
        )
        if ignored:
            logger.warning("未知の設定キーを無視しました: %s", ", ".join(ignored))

        # YAML で数値として読まれた資格情報は文字列に揃える
        for key, value in list(result.items()):
            if key.endswith(("_api_key", "_api_secret", "_access_token")) and value is not None:
                result[key] = str(value)
        return result
