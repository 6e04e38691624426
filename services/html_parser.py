# services/html_parser.py

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup

from models.page_models import PageRegions
from services.crawler import fetch_html
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

# 本文として扱わない要素
REMOVED_TAGS: List[str] = [
    "script",
    "style",
    "noscript",
    "iframe",
    "nav",
    "header",
    "footer",
    "aside",
]


def _remove_noise(soup: BeautifulSoup) -> None:
    """script/style/ナビゲーション等を DOM から取り除く。"""
    for tag in soup(REMOVED_TAGS):
        tag.decompose()


def _join_headings(soup: BeautifulSoup, name: str) -> str:
    """h1 / h2 など同名の見出しをすべて連結して1つのテキストにする。"""
    texts = [h.get_text() for h in soup.find_all(name)]
    return normalize_text(" ".join(t for t in texts if t))


def parse_regions(html: str) -> PageRegions:
    """
    HTML文字列から title / h1 / h2 / body のテキストを抽出する。
    ※ ここではネットワークアクセスは行わない（fetch_html で取得済み前提）
    """
    soup = BeautifulSoup(html, "html.parser")
    _remove_noise(soup)

    title = normalize_text(soup.title.get_text()) if soup.title else ""

    # <body> が無い断片 HTML はドキュメント全体を本文とみなす
    body_root = soup.body if soup.body is not None else soup
    if body_root is soup and soup.title is not None:
        soup.title.decompose()
    body = normalize_text(body_root.get_text())

    return PageRegions(
        title=title,
        h1=_join_headings(soup, "h1"),
        h2=_join_headings(soup, "h2"),
        body=body,
    )


def fetch_page(url: str) -> PageRegions:
    """
    URL から HTML を取得して領域テキストに変換する。
      crawler.fetch_html() → parse_regions(html)
    """
    html = fetch_html(url)
    regions = parse_regions(html)
    logger.info(
        "[html_parser] parsed url=%s title_len=%s h1_len=%s h2_len=%s body_len=%s",
        url,
        len(regions.title),
        len(regions.h1),
        len(regions.h2),
        len(regions.body),
    )
    return regions
