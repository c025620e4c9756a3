"""
プロトコル語彙（ErrorCode / GrantType）のユニットテスト
"""

import json
import unittest

from authlete_common.types import ErrorCode, GrantType


class TestErrorCode(unittest.TestCase):
    """ErrorCode列挙型のテスト"""

    def test_member_count(self):
        """21個のエラーコードが定義されていること"""
        self.assertEqual(len(ErrorCode), 21)

    def test_wire_values(self):
        """ワイヤ上の値は小文字の識別子であること"""
        self.assertEqual(ErrorCode.ACCESS_DENIED.value, "access_denied")
        self.assertEqual(ErrorCode.INVALID_REQUEST_OBJECT.value, "invalid_request_object")
        self.assertEqual(ErrorCode.UNSUPPORTED_RESPONSE_TYPE.value, "unsupported_response_type")
        for code in ErrorCode:
            self.assertEqual(code.value, code.name.lower())

    def test_str_and_json(self):
        """文字列化・JSON化でワイヤ上の値になること"""
        self.assertEqual(str(ErrorCode.INVALID_GRANT), "invalid_grant")
        self.assertEqual(json.dumps({"error": ErrorCode.INVALID_GRANT}), '{"error": "invalid_grant"}')

    def test_every_member_has_description(self):
        """全エラーコードに説明文があること"""
        for code in ErrorCode:
            self.assertTrue(code.description)
        self.assertIn("access token", ErrorCode.INVALID_TOKEN.description)

    def test_parse_known(self):
        """既知の値は列挙値に変換されること"""
        self.assertIs(ErrorCode.parse("invalid_token"), ErrorCode.INVALID_TOKEN)

    def test_parse_none(self):
        """None は None"""
        self.assertIsNone(ErrorCode.parse(None))

    def test_parse_unknown_logs_warning(self):
        """未知の値は None を返し警告を記録すること"""
        with self.assertLogs("authlete_common.types.error_code", level="WARNING") as logs:
            self.assertIsNone(ErrorCode.parse("no_such_error"))
        self.assertIn("no_such_error", logs.output[0])

    def test_parse_is_case_sensitive(self):
        """大文字の値は未知として扱うこと"""
        with self.assertLogs("authlete_common.types.error_code", level="WARNING"):
            self.assertIsNone(ErrorCode.parse("INVALID_TOKEN"))


class TestGrantType(unittest.TestCase):
    """GrantType列挙型のテスト"""

    def test_basic_values(self):
        """RFC 6749 のグラントタイプ"""
        self.assertEqual(GrantType.AUTHORIZATION_CODE.value, "authorization_code")
        self.assertEqual(GrantType.CLIENT_CREDENTIALS.value, "client_credentials")
        self.assertEqual(GrantType.REFRESH_TOKEN.value, "refresh_token")

    def test_urn_values(self):
        """拡張グラントタイプは URN で表されること"""
        self.assertEqual(
            GrantType.DEVICE_CODE.value, "urn:ietf:params:oauth:grant-type:device_code"
        )
        self.assertEqual(GrantType.CIBA.value, "urn:openid:params:grant-type:ciba")
        self.assertIs(
            GrantType.parse("urn:ietf:params:oauth:grant-type:token-exchange"),
            GrantType.TOKEN_EXCHANGE,
        )

    def test_parse_unknown(self):
        """未知の値は None"""
        with self.assertLogs("authlete_common.types.grant_type", level="WARNING"):
            self.assertIsNone(GrantType.parse("magic"))
        self.assertIsNone(GrantType.parse(None))


if __name__ == "__main__":
    unittest.main()
