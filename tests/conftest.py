"""
共通フィクスチャ。
fetch / 形態素解析はネットワークや辞書ロードを伴うので、テストでは差し替える。
"""

from typing import Dict, List

import pytest

from models.page_models import PageRegions
from models.token_models import Token


def make_token(surface: str, pos: str = "名詞") -> Token:
    return Token(surface=surface, pos=pos)


def fake_tokenize(text: str) -> List[Token]:
    """
    空白区切りで1トークンずつ作る形態素解析のスタブ。
    "が/助詞" のように書くと品詞を指定できる（省略時は名詞）。
    """
    tokens = []
    for chunk in text.split():
        surface, _, pos = chunk.partition("/")
        tokens.append(make_token(surface, pos or "名詞"))
    return tokens


@pytest.fixture
def stub_tokenizer(monkeypatch):
    """agents.summarizer_agent が使う tokenize をスタブに差し替える。"""
    calls: List[str] = []

    def _tokenize(text: str) -> List[Token]:
        calls.append(text)
        return fake_tokenize(text)

    monkeypatch.setattr("agents.summarizer_agent.tokenize", _tokenize)
    return calls


@pytest.fixture
def stub_pages(monkeypatch):
    """
    URL → PageRegions の辞書を登録すると、fetch_page がそれを返すようにする。
    未登録の URL は FetchError になる。
    """
    from app.errors import FetchError

    pages: Dict[str, PageRegions] = {}
    fetched: List[str] = []

    def _fetch_page(url: str) -> PageRegions:
        fetched.append(url)
        if url not in pages:
            raise FetchError(f"Webページの取得に失敗しました: 404 Not Found for {url}")
        return pages[url]

    monkeypatch.setattr("agents.page_agent.fetch_page", _fetch_page)
    return pages, fetched
