# agents/page_agent.py

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from agents.summarizer_agent import summarize_text
from app.config import settings
from app.errors import InputValidationError
from models.page_models import REGION_NAMES, PageResult, RegionAnalysis, TagAnalysis
from models.token_models import Token
from services.html_parser import fetch_page
from services.tokenizer import apply_length_cap

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http://", "https://")


def is_valid_url(url: str) -> bool:
    """http:// か https:// で始まるかだけを見る簡易チェック。"""
    return url.startswith(ALLOWED_SCHEMES)


def validate_url(url: object) -> str:
    """
    単一URL API 用の入力チェック。
    未指定・空なら「URLが指定されていません」、スキーム不正なら「有効なURLを入力してください」。
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise InputValidationError("URLが指定されていません")
    url = url.strip()
    if not is_valid_url(url):
        raise InputValidationError("有効なURLを入力してください")
    return url


def _analyze_region(text: str) -> Tuple[List[Token], RegionAnalysis]:
    """
    1領域分のテキストを形態素解析してサマリーを作る。
    空テキストは形態素解析を呼ばずに空の結果を返す。
    """
    text = apply_length_cap(text)
    tokens, summary = summarize_text(text, top_n=settings.summary_top_n)
    return tokens, RegionAnalysis(
        text=text,
        text_length=len(text),
        token_count=len(tokens),
        summary=summary,
    )


def analyze_page(url: str) -> PageResult:
    """
    1ページ分の解析パイプライン。

      fetch_page → tokenize（title/h1/h2/body）→ generate_summary

    本文全体のトークン列は body 領域の結果をそのまま使う（同じテキストなので
    形態素解析を2回呼ぶ必要がない）。
    FetchError / TokenizationError はそのまま呼び出し元に伝播する。
    """
    logger.info("[page_agent] analyze start url=%s", url)

    regions = fetch_page(url)

    region_tokens: Dict[str, List[Token]] = {}
    region_results: Dict[str, RegionAnalysis] = {}
    for name in REGION_NAMES:
        tokens, analysis = _analyze_region(getattr(regions, name))
        region_tokens[name] = tokens
        region_results[name] = analysis

    body = region_results["body"]
    result = PageResult(
        url=url,
        title=regions.title,
        body_text=body.text,
        text_length=body.text_length,
        token_count=body.token_count,
        tokens=region_tokens["body"],
        summary=body.summary,
        by_tag=TagAnalysis(**region_results),
    )

    logger.info(
        "[page_agent] analyze done url=%s text_length=%s tokens=%s top_words=%s",
        url,
        result.text_length,
        result.token_count,
        len(result.summary.top_words),
    )
    return result


def truncate_tokens(result: PageResult, limit: int) -> PageResult:
    """表示用にトークン一覧だけ先頭 limit 件に切り詰めたコピーを返す。"""
    return result.model_copy(update={"tokens": result.tokens[:limit]})
