# models/page_models.py

from __future__ import annotations

from typing import List

from pydantic import Field

from models.base import CamelModel
from models.summary_models import TextSummary
from models.token_models import Token

# タグ別解析の対象（この順で処理・出力する）
REGION_NAMES = ("title", "h1", "h2", "body")


class PageRegions(CamelModel):
    """
    1ページから抽出したテキスト領域。
    どれも空白正規化・HTMLエンティティのデコード済み。
    """

    title: str = ""
    h1: str = ""
    h2: str = ""
    body: str = ""


class RegionAnalysis(CamelModel):
    """タグ（領域）1つ分の解析結果。"""

    text: str = ""
    text_length: int = 0
    token_count: int = 0
    summary: TextSummary = Field(default_factory=TextSummary)


class TagAnalysis(CamelModel):
    title: RegionAnalysis = Field(default_factory=RegionAnalysis)
    h1: RegionAnalysis = Field(default_factory=RegionAnalysis)
    h2: RegionAnalysis = Field(default_factory=RegionAnalysis)
    body: RegionAnalysis = Field(default_factory=RegionAnalysis)


class PageResult(CamelModel):
    """
    1ページ分の解析結果。

    tokens は本文の全トークンを保持する。
    単一URL API のレスポンスでは先頭 N 件だけに切り詰めるが、
    token_count / summary / by_tag は常に全件から計算したもの。
    """

    url: str
    title: str = ""
    body_text: str = ""
    text_length: int = 0
    token_count: int = 0
    tokens: List[Token] = Field(default_factory=list)
    summary: TextSummary = Field(default_factory=TextSummary)
    by_tag: TagAnalysis = Field(default_factory=TagAnalysis)

    def region(self, name: str) -> RegionAnalysis:
        """"title" / "h1" / "h2" / "body" から RegionAnalysis を取り出す。"""
        return getattr(self.by_tag, name)
