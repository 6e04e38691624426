# app/graph/nodes.py
from __future__ import annotations

import logging
from typing import List, Tuple

from agents.aggregator_agent import generate_aggregated_summary
from agents.page_agent import analyze_page, is_valid_url
from app.config import settings
from app.errors import AnalyzerError
from app.graph.lg_state import GraphState
from models.aggregate_models import UrlError
from models.page_models import PageResult

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "無効なURL形式"


def _log_progress(state: GraphState, node: str, message: str) -> GraphState:
    """
    進捗ログを state に積むユーティリティ。
    state は dict (GraphState) として扱う。
    """
    line = f"[{node}] {message}"

    messages: List[str] = list(state.get("progress_messages", []))
    messages.append(line)

    state["progress_messages"] = messages
    state["current_node"] = node

    logger.info(line)
    return state


# ---------- ページ解析ノード ----------


Accumulator = Tuple[List[PageResult], List[UrlError]]


def _step(acc: Accumulator, raw_url: str) -> Accumulator:
    """
    URL 1件分の処理。成功なら results に、失敗なら errors に積む。
    1件の失敗で他の URL の処理は止めない。
    """
    results, errors = acc
    url = raw_url.strip() if isinstance(raw_url, str) else str(raw_url)

    if not is_valid_url(url):
        logger.warning("[page_node] invalid url=%s", url)
        errors.append(UrlError(url=url, error=INVALID_URL_MESSAGE))
        return acc

    try:
        results.append(analyze_page(url))
    except AnalyzerError as e:
        logger.warning("[page_node] error for url=%s: %s", url, e.message)
        errors.append(UrlError(url=url, error=e.message))
    except Exception as e:
        logger.exception("[page_node] unexpected error for url=%s", url)
        errors.append(UrlError(url=url, error=str(e) or e.__class__.__name__))
    return acc


def page_node(state: GraphState) -> GraphState:
    """
    URL を1件ずつ順番に解析する（並列にはしない）。
    (results, errors) を畳み込みで作って state に詰める。
    """
    urls: List[str] = state["urls"]
    state = _log_progress(state, "page", f"start: analyzing {len(urls)} urls sequentially")

    acc: Accumulator = ([], [])
    for url in urls:
        acc = _step(acc, url)

    results, errors = acc
    state["results"] = results
    state["errors"] = errors

    state = _log_progress(
        state,
        "page",
        f"done: success={len(results)} error={len(errors)}",
    )
    return state


# ---------- 統合サマリーノード ----------


def aggregate_node(state: GraphState) -> GraphState:
    """
    成功したページだけを対象に、全サイトの統合サマリーを生成する。
    """
    state = _log_progress(state, "aggregate", "start: building aggregated summary")

    results: List[PageResult] = state.get("results", [])
    summary = generate_aggregated_summary(results, top_n=settings.aggregate_top_n)
    state["aggregated_summary"] = summary

    logger.info(
        "[aggregate_node] total_sites=%s total_text_length=%s top_words=%s",
        summary.total_sites,
        summary.total_text_length,
        len(summary.top_words),
    )

    state = _log_progress(state, "aggregate", "done: aggregated summary generated")
    return state
