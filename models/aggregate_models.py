# models/aggregate_models.py

from __future__ import annotations

from typing import List

from pydantic import Field

from models.base import CamelModel
from models.page_models import PageResult


class AggregatedWord(CamelModel):
    """
    複数サイト横断の頻出語。
    site_count: その語が出現したサイト（URL）の数
    site_percentage: site_count / 全サイト数 × 100（小数1桁）
    """

    word: str
    count: int
    site_count: int
    site_percentage: float
    total_chars: int
    percentage: float


class TagAggregate(CamelModel):
    total_text_length: int = 0
    top_words: List[AggregatedWord] = Field(default_factory=list)


class TagAggregateSet(CamelModel):
    title: TagAggregate = Field(default_factory=TagAggregate)
    h1: TagAggregate = Field(default_factory=TagAggregate)
    h2: TagAggregate = Field(default_factory=TagAggregate)
    body: TagAggregate = Field(default_factory=TagAggregate)


class AggregatedSummary(CamelModel):
    """全サイトの統合サマリー。"""

    total_sites: int = 0
    total_text_length: int = 0
    top_words: List[AggregatedWord] = Field(default_factory=list)
    by_tag: TagAggregateSet = Field(default_factory=TagAggregateSet)


class UrlError(CamelModel):
    url: str
    error: str


class BatchResult(CamelModel):
    """複数URL一括解析のレスポンス。"""

    success: bool = True
    total_urls: int = 0
    success_count: int = 0
    error_count: int = 0
    results: List[PageResult] = Field(default_factory=list)
    errors: List[UrlError] = Field(default_factory=list)
    aggregated_summary: AggregatedSummary = Field(default_factory=AggregatedSummary)
