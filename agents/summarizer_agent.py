# agents/summarizer_agent.py

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from models.summary_models import TextSummary, TopWord
from models.token_models import Token
from services.tokenizer import tokenize

# 頻出語の対象にする品詞（大分類がちょうど "名詞" のもの）
NOUN_POS = "名詞"

# 1テキストあたりの頻出語の件数
DEFAULT_TOP_N: int = 10


def is_countable_noun(token: Token) -> bool:
    """名詞かつ2文字以上なら頻出語の集計対象（1文字の名詞は除外）。"""
    return token.pos == NOUN_POS and len(token.surface) > 1


def percentage_of(total_chars: int, text_length: int, digits: int = 2) -> float:
    """total_chars がテキスト長に占める割合(%)。テキスト長 0 なら 0.0。"""
    if text_length <= 0:
        return 0.0
    return round(total_chars / text_length * 100, digits)


def generate_summary(
    tokens: Sequence[Token],
    text_length: int,
    top_n: int = DEFAULT_TOP_N,
) -> TextSummary:
    """
    トークン列から品詞ごとの件数と名詞の頻出語トップN を作る。

    - 同数の語は最初に出現した順を保つ（sorted は安定ソート）
    - percentage は word 文字数 × 出現回数 / text_length × 100 を小数2桁に丸めた値
    """
    pos_count: Dict[str, int] = {}
    word_freq: Dict[str, int] = {}

    for token in tokens:
        pos_count[token.pos] = pos_count.get(token.pos, 0) + 1
        if is_countable_noun(token):
            word_freq[token.surface] = word_freq.get(token.surface, 0) + 1

    ranked = sorted(word_freq.items(), key=lambda kv: kv[1], reverse=True)

    top_words: List[TopWord] = []
    for word, count in ranked[:top_n]:
        total_chars = len(word) * count
        top_words.append(
            TopWord(
                word=word,
                count=count,
                total_chars=total_chars,
                percentage=percentage_of(total_chars, text_length),
            )
        )

    return TextSummary(pos_count=pos_count, top_words=top_words)


def summarize_text(text: str, top_n: int = DEFAULT_TOP_N) -> Tuple[List[Token], TextSummary]:
    """
    テキストを形態素解析してサマリーまで作るショートカット。
    空文字なら形態素解析を呼ばずに空のサマリーを返す。
    """
    if not text:
        return [], TextSummary()
    tokens = tokenize(text)
    return tokens, generate_summary(tokens, len(text), top_n=top_n)
