# models/token_models.py

from __future__ import annotations

from pydantic import Field

from models.base import CamelModel


class Token(CamelModel):
    """
    形態素1つ分。Janome のトークンから生成する。

    - surface: 表層形
    - pos: 品詞（大分類。例: "名詞"）
    - pos_detail_1〜3: 品詞細分類（無い場合は "*"）
    - base_form: 原形
    - reading / pronunciation: 読み・発音（カタカナ）
    """

    surface: str
    pos: str
    pos_detail_1: str = Field("*", alias="posDetail1")
    pos_detail_2: str = Field("*", alias="posDetail2")
    pos_detail_3: str = Field("*", alias="posDetail3")
    base_form: str = "*"
    reading: str = "*"
    pronunciation: str = "*"
