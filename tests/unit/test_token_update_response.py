"""
TokenUpdateResponse のユニットテスト
"""

import unittest

from authlete_common.dto import ApiResponse, Property, TokenUpdateAction, TokenUpdateResponse
from authlete_common.errors import DeserializationException


WIRE_RESPONSE = {
    "resultCode": "A135001",
    "resultMessage": "[A135001] Updated the access token successfully.",
    "action": "OK",
    "accessToken": "tok-123",
    "accessTokenExpiresAt": 1700000000000,
    "scopes": ["read"],
    "properties": [{"key": "k1", "value": "v1", "hidden": True}],
}


class TestTokenUpdateResponse(unittest.TestCase):
    """TokenUpdateResponse の基本動作"""

    def test_from_dict(self):
        """ワイヤ形式から全フィールドを復元できること"""
        response = TokenUpdateResponse.from_dict(WIRE_RESPONSE)
        self.assertIsInstance(response, ApiResponse)
        self.assertEqual(response.get_result_code(), "A135001")
        self.assertEqual(response.get_action(), TokenUpdateResponse.Action.OK)
        self.assertEqual(response.get_access_token(), "tok-123")
        self.assertEqual(response.get_access_token_expires_at(), 1700000000000)
        self.assertEqual(response.get_scopes(), ["read"])
        self.assertTrue(response.get_properties()[0].is_hidden())
        self.assertTrue(response.is_successful())

    def test_to_dict_round_trip(self):
        """ワイヤ形式へ戻すと元の辞書と一致すること"""
        response = TokenUpdateResponse.from_dict(WIRE_RESPONSE)
        self.assertEqual(response.to_dict(), WIRE_RESPONSE)

    def test_action_alias(self):
        """TokenUpdateAction は入れ子の Action と同一であること"""
        self.assertIs(TokenUpdateAction, TokenUpdateResponse.Action)
        self.assertEqual(
            [action.value for action in TokenUpdateAction],
            ["INTERNAL_SERVER_ERROR", "BAD_REQUEST", "FORBIDDEN", "NOT_FOUND", "OK"],
        )

    def test_not_successful(self):
        """OK 以外は成功とみなさないこと"""
        response = TokenUpdateResponse().set_action(TokenUpdateAction.NOT_FOUND)
        self.assertFalse(response.is_successful())
        self.assertFalse(TokenUpdateResponse().is_successful())

    def test_fluent_setters(self):
        """セッターは自身を返すこと"""
        response = TokenUpdateResponse()
        self.assertIs(response.set_result_code("A1"), response)
        self.assertIs(response.set_result_message("m"), response)
        self.assertIs(response.set_access_token("t"), response)
        self.assertIs(response.set_access_token_expires_at(1), response)
        self.assertIs(response.set_scopes(["a"]), response)
        self.assertIs(response.set_properties([]), response)

    def test_set_properties_accepts_mappings(self):
        """辞書は Property に変換されること"""
        response = TokenUpdateResponse().set_properties(
            [{"key": "k1", "value": "v1"}, {"key": "k2", "hidden": "true"}]
        )
        first, second = response.get_properties()
        self.assertIsInstance(first, Property)
        self.assertIs(first.is_hidden(), False)
        self.assertIs(second.is_hidden(), True)
        self.assertEqual(
            response.to_dict()["properties"],
            [{"key": "k1", "value": "v1", "hidden": False}, {"key": "k2", "hidden": True}],
        )

    def test_set_scopes_accepts_iterable(self):
        """任意の反復可能オブジェクトをリストとして保持すること"""
        response = TokenUpdateResponse().set_scopes(scope for scope in ("read", "write"))
        self.assertEqual(response.get_scopes(), ["read", "write"])

    def test_unknown_action_raises(self):
        """未知の action は DeserializationException"""
        with self.assertRaises(DeserializationException):
            TokenUpdateResponse.from_dict({"action": "MAYBE"})


if __name__ == "__main__":
    unittest.main()
