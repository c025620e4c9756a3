"""Authlete API レスポンスの共通部分"""

from typing import Optional

from authlete_common.dto.base import DtoModel


class ApiResponse(DtoModel):
    """全APIレスポンスが持つ結果コードとメッセージ

    Attributes:
        result_code: 結果コード（例: ``A067001``）
        result_message: 結果メッセージ
    """

    result_code: Optional[str] = None
    result_message: Optional[str] = None

    def get_result_code(self) -> Optional[str]:
        return self.result_code

    def set_result_code(self, result_code: Optional[str]):
        self.result_code = result_code
        return self

    def get_result_message(self) -> Optional[str]:
        return self.result_message

    def set_result_message(self, result_message: Optional[str]):
        self.result_message = result_message
        return self
