# app/errors.py
from __future__ import annotations


class AnalyzerError(Exception):
    """
    解析処理で発生するエラーの基底クラス。
    status_code は API レイヤーでそのまま HTTP ステータスに使う。
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputValidationError(AnalyzerError):
    """URL / URL リストの検証エラー（400）。"""

    status_code = 400


class FetchError(AnalyzerError):
    """ネットワーク・タイムアウト・非HTML などの取得失敗。"""


class TokenizationError(AnalyzerError):
    """形態素解析エンジンの失敗。通常は発生しない。"""
