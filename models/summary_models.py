# models/summary_models.py

from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from models.base import CamelModel


class TopWord(CamelModel):
    """
    1テキスト内の頻出語。
    total_chars = 単語の文字数 × 出現回数
    percentage  = total_chars / テキスト長 × 100（小数2桁）
    """

    word: str
    count: int
    total_chars: int
    percentage: float


class TextSummary(CamelModel):
    """品詞ごとの件数と、名詞の頻出語ランキング。"""

    pos_count: Dict[str, int] = Field(default_factory=dict)
    top_words: List[TopWord] = Field(default_factory=list)
