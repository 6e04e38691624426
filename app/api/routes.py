# app/api/routes.py
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from agents.page_agent import analyze_page, truncate_tokens, validate_url
from app.config import settings
from app.errors import InputValidationError
from app.graph.lg_workflow import run_workflow
from models.aggregate_models import BatchResult
from models.page_models import PageResult
from services import tokenizer

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Request モデル ---------
# 型違いも 400 で返したいので、中身のチェックはエンドポイント側で行う


class AnalyzeRequest(BaseModel):
    url: Optional[Any] = None


class AnalyzeMultipleRequest(BaseModel):
    urls: Optional[Any] = None


def _validate_url_list(urls: Any) -> list:
    if not urls or not isinstance(urls, list):
        raise InputValidationError("URLリストが指定されていません")
    if len(urls) > settings.max_batch_urls:
        raise InputValidationError(f"URLは最大{settings.max_batch_urls}件までです")
    return urls


# --------- エンドポイント ---------


@router.post("/analyze", response_model=PageResult)
def api_analyze(payload: AnalyzeRequest) -> PageResult:
    """
    単一URLの形態素解析。
    レスポンスの tokens は先頭 display_token_limit 件のみ（集計は全件）。
    """
    url = validate_url(payload.url)
    logger.info("[api.analyze] start url=%s", url)

    result = analyze_page(url)

    logger.info(
        "[api.analyze] done url=%s tokens=%s",
        url,
        result.token_count,
    )
    return truncate_tokens(result, settings.display_token_limit)


@router.post("/analyze-multiple", response_model=BatchResult)
def api_analyze_multiple(payload: AnalyzeMultipleRequest) -> BatchResult:
    """
    複数URLの一括形態素解析。

    1) URL ごとに順次 fetch → tokenize → summarize（失敗は errors へ）
    2) 成功分だけで統合サマリー（全体 + タグ別）を生成
    """
    urls = _validate_url_list(payload.urls)
    logger.info("[api.analyze-multiple] start urls=%s", len(urls))

    state = run_workflow(urls)

    results = state["results"]
    errors = state["errors"]

    logger.info(
        "[api.analyze-multiple] done total=%s success=%s error=%s",
        len(urls),
        len(results),
        len(errors),
    )

    return BatchResult(
        success=True,
        total_urls=len(urls),
        success_count=len(results),
        error_count=len(errors),
        results=results,
        errors=errors,
        aggregated_summary=state["aggregated_summary"],
    )


@router.get("/health")
def api_health() -> dict:
    """死活確認用。辞書のロードが済んでいるかも返す。"""
    return {"status": "ok", "tokenizerReady": tokenizer.is_ready()}
