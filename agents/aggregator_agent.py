# agents/aggregator_agent.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from agents.summarizer_agent import is_countable_noun, percentage_of
from models.aggregate_models import (
    AggregatedSummary,
    AggregatedWord,
    TagAggregate,
    TagAggregateSet,
)
from models.page_models import REGION_NAMES, PageResult

# ============================================================
# パラメータ
# ============================================================

# 統合サマリーの頻出語の件数
DEFAULT_TOP_N: int = 20


# ============================================================
# ユーティリティ
# ============================================================

@dataclass
class _WordStat:
    """集計途中の1語分。sites は出現した URL の集合。"""

    count: int = 0
    sites: Set[str] = field(default_factory=set)


def _add(freq: Dict[str, _WordStat], word: str, url: str, count: int = 1) -> None:
    stat = freq.get(word)
    if stat is None:
        stat = freq[word] = _WordStat()
    stat.count += count
    stat.sites.add(url)


def _rank(
    freq: Dict[str, _WordStat],
    total_text_length: int,
    total_sites: int,
    top_n: int,
) -> List[AggregatedWord]:
    """
    まずサイト数の降順、同じならば出現回数の降順で並べ、上位 top_n 件を返す。
    それでも同じ場合は最初に集計された順を保つ。
    """
    ranked = sorted(
        freq.items(),
        key=lambda kv: (len(kv[1].sites), kv[1].count),
        reverse=True,
    )

    words: List[AggregatedWord] = []
    for word, stat in ranked[:top_n]:
        total_chars = len(word) * stat.count
        site_count = len(stat.sites)
        words.append(
            AggregatedWord(
                word=word,
                count=stat.count,
                site_count=site_count,
                site_percentage=percentage_of(site_count, total_sites, digits=1),
                total_chars=total_chars,
                percentage=percentage_of(total_chars, total_text_length),
            )
        )
    return words


# ============================================================
# メインロジック
# ============================================================

def aggregate_overall(results: List[PageResult], top_n: int = DEFAULT_TOP_N) -> AggregatedSummary:
    """
    全ページの本文トークン（全件）から名詞の出現回数とサイト数を集計する。
    by_tag はここでは埋めない。
    """
    freq: Dict[str, _WordStat] = {}
    total_text_length = 0

    for result in results:
        total_text_length += result.text_length
        for token in result.tokens:
            if is_countable_noun(token):
                _add(freq, token.surface, result.url)

    return AggregatedSummary(
        total_sites=len(results),
        total_text_length=total_text_length,
        top_words=_rank(freq, total_text_length, len(results), top_n),
    )


def aggregate_region(
    results: List[PageResult],
    region: str,
    top_n: int = DEFAULT_TOP_N,
) -> TagAggregate:
    """
    タグ別の統合サマリー。

    各ページのそのタグの頻出語トップ10（summary.top_words）だけを材料にする。
    あるページでトップ10に入らなかった語はそのページ分が数えられない点に注意。
    percentage の分母はそのタグのテキスト長の合計（0 なら 0.0）。
    """
    freq: Dict[str, _WordStat] = {}
    total_text_length = 0

    for result in results:
        analysis = result.region(region)
        total_text_length += analysis.text_length
        for top in analysis.summary.top_words:
            _add(freq, top.word, result.url, count=top.count)

    return TagAggregate(
        total_text_length=total_text_length,
        top_words=_rank(freq, total_text_length, len(results), top_n),
    )


def generate_aggregated_summary(
    results: Iterable[PageResult],
    top_n: int = DEFAULT_TOP_N,
) -> AggregatedSummary:
    """
    複数サイトの統合サマリーを生成する。
    results には解析に成功したページだけを渡すこと（エラー分は別で報告する）。
    """
    results = list(results)
    summary = aggregate_overall(results, top_n=top_n)
    summary.by_tag = TagAggregateSet(
        **{name: aggregate_region(results, name, top_n=top_n) for name in REGION_NAMES}
    )
    return summary
