"""authlete-common のCLIエントリーポイント"""

import json
import sys
from typing import List

from authlete_common import __version__
from authlete_common.cli.main import AuthleteCLI
from authlete_common.cli.parser import ArgumentParser
from authlete_common.config.manager import ConfigManager
from authlete_common.errors import ConfigurationException


def main(args: List[str] | None = None) -> int:
    """
    authlete-common のメインエントリーポイント

    Args:
        args: コマンドライン引数（Noneの場合はsys.argvを使用）

    Returns:
        終了コード（0: 成功、非0: エラー）
    """
    if args is None:
        args = sys.argv[1:]

    parser = ArgumentParser()
    parsed = parser.parse(args)

    if parsed.options.get("version") or parsed.command == "version":
        print(f"authlete-common {__version__}")
        return 0

    if parsed.options.get("help") or parsed.command == "help" or not args:
        _print_help()
        return 0

    validation = parser.validate(parsed)
    if not validation.is_valid:
        for error in validation.errors:
            print(error, file=sys.stderr)
        return 1

    if parsed.options.get("config_check"):
        try:
            settings = ConfigManager().load(parsed.options.get("config_path"))
        except ConfigurationException as exc:
            print(f"Configuration error: {exc.error.message}", file=sys.stderr)
            return 1
        print(json.dumps(settings.dump_masked(), ensure_ascii=False, indent=2))
        return 0

    return AuthleteCLI().run(parsed.command, parsed.args)


def _print_help() -> None:
    """ヘルプメッセージを表示"""
    help_text = f"""authlete-common v{__version__} - Authlete API データモデルの開発者向けツール

Usage:
    authlete-common <command> [args] [options]

Commands:
    schema <Model>               DTO の JSON Schema を表示
    validate <Model> <file>      JSON ファイルを DTO のスキーマで検証
    help                         このヘルプメッセージを表示
    version                      バージョン情報を表示

Models:
    TokenUpdateRequest, TokenUpdateResponse, Property

Options:
    -h, --help           ヘルプメッセージを表示
    -v, --version        バージョン情報を表示
    --config-check       設定内容を検証して表示（資格情報はマスク）
    --config <path>      設定ファイルのパスを指定

Examples:
    authlete-common schema TokenUpdateRequest
    authlete-common validate TokenUpdateRequest request.json
"""
    print(help_text)


if __name__ == "__main__":
    sys.exit(main())
