"""
プロトコル語彙のプロパティテスト

- 全ての列挙値はワイヤ上の値から parse で復元できる
- 定義されていない値は parse で None になる
"""

import logging
import unittest

from hypothesis import given, settings
from hypothesis import strategies as st

from authlete_common.types import ErrorCode, GrantType

ERROR_VALUES = {code.value for code in ErrorCode}
GRANT_VALUES = {grant.value for grant in GrantType}


class TestVocabularyParseProperty(unittest.TestCase):
    """parse のプロパティテスト"""

    def setUp(self):
        # 未知の値の警告でテスト出力が埋まらないようにする
        logging.disable(logging.WARNING)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    @given(code=st.sampled_from(list(ErrorCode)))
    @settings(max_examples=50)
    def test_error_code_round_trip(self, code: ErrorCode):
        """ErrorCode はワイヤ値から復元できる"""
        self.assertIs(ErrorCode.parse(str(code)), code)

    @given(value=st.text(max_size=40).filter(lambda v: v not in ERROR_VALUES))
    @settings(max_examples=100)
    def test_unknown_error_code_is_none(self, value: str):
        """未定義の値は None"""
        self.assertIsNone(ErrorCode.parse(value))

    @given(grant=st.sampled_from(list(GrantType)))
    @settings(max_examples=50)
    def test_grant_type_round_trip(self, grant: GrantType):
        """GrantType はワイヤ値から復元できる"""
        self.assertIs(GrantType.parse(grant.value), grant)

    @given(value=st.text(max_size=60).filter(lambda v: v not in GRANT_VALUES))
    @settings(max_examples=100)
    def test_unknown_grant_type_is_none(self, value: str):
        """未定義の値は None"""
        self.assertIsNone(GrantType.parse(value))


if __name__ == "__main__":
    unittest.main()
