"""
コマンドライン引数の解析

開発者向けCLIのコマンド解析とバリデーション機能を提供
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List


# 有効なコマンド一覧
VALID_COMMANDS = {"schema", "validate", "help", "version"}

# コマンドごとに必要な引数の数
REQUIRED_ARGS = {
    "schema": 1,
    "validate": 2,
}


@dataclass
class ParsedCommand:
    """解析済みコマンド

    Attributes:
        command: コマンド名
        args: コマンド引数
        options: オプション辞書
    """

    command: str
    args: List[str]
    options: Dict[str, Any]


@dataclass
class ValidationResult:
    """バリデーション結果

    Attributes:
        is_valid: 有効かどうか
        errors: エラーメッセージのリスト
    """

    is_valid: bool
    errors: List[str]


class ArgumentParser:
    """コマンドライン引数の解析"""

    def parse(self, argv: List[str]) -> ParsedCommand:
        """引数を解析してParsedCommandを返す

        Args:
            argv: コマンドライン引数リスト

        Returns:
            ParsedCommand: 解析結果
        """
        options: Dict[str, Any] = {}
        args: List[str] = []
        command: str = ""

        i = 0
        while i < len(argv):
            arg = argv[i]

            if arg in ("-h", "--help"):
                options["help"] = True
                i += 1
                continue

            if arg in ("-v", "--version"):
                options["version"] = True
                i += 1
                continue

            if arg == "--config-check":
                options["config_check"] = True
                i += 1
                continue

            # 設定ファイルの明示指定
            if arg == "--config":
                if i + 1 < len(argv) and not argv[i + 1].startswith("-"):
                    options["config_path"] = Path(argv[i + 1])
                    i += 2
                    continue
                i += 1
                continue

            if not command and not arg.startswith("-"):
                command = arg
            elif not arg.startswith("-"):
                args.append(arg)

            i += 1

        return ParsedCommand(command=command, args=args, options=options)

    def validate(self, parsed: ParsedCommand) -> ValidationResult:
        """解析結果の妥当性を検証

        Args:
            parsed: 解析済みコマンド

        Returns:
            ValidationResult: バリデーション結果
        """
        if (
            parsed.options.get("help")
            or parsed.options.get("version")
            or parsed.options.get("config_check")
        ):
            return ValidationResult(is_valid=True, errors=[])

        if not parsed.command:
            return ValidationResult(
                is_valid=False,
                errors=["Command is required. Use --help for usage information."],
            )

        if parsed.command not in VALID_COMMANDS:
            return ValidationResult(
                is_valid=False,
                errors=[
                    f"Unknown command: '{parsed.command}'. "
                    f"Available commands: {', '.join(sorted(VALID_COMMANDS))}"
                ],
            )

        required = REQUIRED_ARGS.get(parsed.command, 0)
        if len(parsed.args) < required:
            return ValidationResult(
                is_valid=False,
                errors=[
                    f"'{parsed.command}' requires {required} argument(s), "
                    f"got {len(parsed.args)}."
                ],
            )

        return ValidationResult(is_valid=True, errors=[])
