# app/graph/lg_state.py
from __future__ import annotations

from typing import Any, Dict, List


class GraphState(Dict[str, Any]):
    """
    一括解析ワークフローの「状態」コンテナ。
    実体はただの dict だが、型ヒントとして分かりやすくするためのラッパ。

    主なキー:
      urls / results (PageResult) / errors (UrlError) /
      aggregated_summary / progress_messages / current_node
    """
    pass


def create_initial_state(urls: List[str]) -> GraphState:
    """
    ワークフロー開始時の初期 state を作成。
    """
    state: GraphState = GraphState()
    state["urls"] = list(urls)
    state["results"] = []
    state["errors"] = []
    state["aggregated_summary"] = None
    state["progress_messages"] = []  # 各ノードからのログ的メッセージ
    state["current_node"] = None
    return state
