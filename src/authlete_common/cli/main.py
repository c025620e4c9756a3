"""
CLIコマンドの実行

DTO の JSON Schema 出力とペイロードファイルの検証を行う。
"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Type

from authlete_common.dto import (
    DtoModel,
    Property,
    TokenUpdateRequest,
    TokenUpdateResponse,
    validate_payload,
)

logger = logging.getLogger(__name__)

# CLI から参照できる DTO
MODEL_REGISTRY: Dict[str, Type[DtoModel]] = {
    "Property": Property,
    "TokenUpdateRequest": TokenUpdateRequest,
    "TokenUpdateResponse": TokenUpdateResponse,
}


class AuthleteCLI:
    """開発者向けCLI"""

    def run(self, command: str, args: List[str]) -> int:
        """コマンドを実行する

        Args:
            command: コマンド名
            args: コマンド引数

        Returns:
            終了コード（0: 成功、1: エラー）
        """
        if command == "schema":
            return self._schema(args[0])
        if command == "validate":
            return self._validate(args[0], Path(args[1]))
        print(f"Unknown command: '{command}'", file=sys.stderr)
        return 1

    def _resolve_model(self, name: str) -> Type[DtoModel] | None:
        model_cls = MODEL_REGISTRY.get(name)
        if model_cls is None:
            print(
                f"Unknown model: '{name}'. "
                f"Available models: {', '.join(sorted(MODEL_REGISTRY))}",
                file=sys.stderr,
            )
        return model_cls

    def _schema(self, model_name: str) -> int:
        """JSON Schema を出力する"""
        model_cls = self._resolve_model(model_name)
        if model_cls is None:
            return 1
        print(json.dumps(model_cls.json_schema(), ensure_ascii=False, indent=2))
        return 0

    def _validate(self, model_name: str, payload_path: Path) -> int:
        """ペイロードファイルを検証する"""
        model_cls = self._resolve_model(model_name)
        if model_cls is None:
            return 1

        try:
            payload = json.loads(payload_path.read_text(encoding="utf-8"))
        except OSError as exc:
            print(f"Cannot read {payload_path}: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"Invalid JSON in {payload_path}: {exc}", file=sys.stderr)
            return 1

        result = validate_payload(model_cls, payload)
        if not result.ok:
            logger.info("%s は %s のスキーマに適合しません", payload_path, model_name)
            for error in result.errors:
                print(error, file=sys.stderr)
            return 1

        print(f"{payload_path}: valid {model_name}")
        return 0
