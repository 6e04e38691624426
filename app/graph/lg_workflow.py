# app/graph/lg_workflow.py
from __future__ import annotations

import logging
from typing import List

from app.graph.lg_state import GraphState, create_initial_state
from app.graph import nodes

logger = logging.getLogger(__name__)


def run_workflow(urls: List[str]) -> GraphState:
    """
    /api/analyze-multiple 用のシンプルな直列ワークフロー。

    page（URL ごとに fetch → tokenize → summarize）→ aggregate
    """
    logger.info("[lg_workflow] run_workflow start urls=%s", len(urls))

    state = create_initial_state(urls)

    # 1) 各URLを順次解析（失敗は errors に積んで続行）
    state = nodes.page_node(state)

    # 2) 成功分だけで統合サマリー
    state = nodes.aggregate_node(state)

    logger.info(
        "[lg_workflow] run_workflow done success=%s error=%s current_node=%s",
        len(state["results"]),
        len(state["errors"]),
        state.get("current_node"),
    )
    return state
