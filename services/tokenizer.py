# services/tokenizer.py
from __future__ import annotations

import logging
import threading
from typing import List, Optional

from janome.tokenizer import Tokenizer

from app.config import settings
from app.errors import TokenizationError
from models.token_models import Token

logger = logging.getLogger(__name__)

# Janome の辞書ロードは重いので、プロセス内で1回だけ生成して共有する
_tokenizer: Optional[Tokenizer] = None
_lock = threading.Lock()


def get_tokenizer() -> Tokenizer:
    """
    共有 Tokenizer を返す。
    初回呼び出しが並行しても生成は1回だけで、後続はロックで完了を待つ。
    """
    global _tokenizer
    if _tokenizer is not None:
        return _tokenizer

    with _lock:
        if _tokenizer is None:
            logger.info("[tokenizer] 形態素解析エンジンを初期化中...")
            try:
                _tokenizer = Tokenizer()
            except Exception as e:
                logger.exception("[tokenizer] init failed: %s", e)
                raise TokenizationError(f"形態素解析エンジンの初期化に失敗しました: {e}") from e
            logger.info("[tokenizer] 初期化完了")
    return _tokenizer


def is_ready() -> bool:
    return _tokenizer is not None


def warm_up() -> None:
    """起動時に辞書をロードしておく（初回リクエストの遅延対策）。"""
    get_tokenizer()


def _to_token(jt) -> Token:
    """Janome の Token を Token モデルに変換する。"""
    # part_of_speech は "名詞,固有名詞,組織,*" のようなカンマ区切り
    parts = (jt.part_of_speech.split(",") + ["*", "*", "*"])[:4]
    return Token(
        surface=jt.surface,
        pos=parts[0],
        pos_detail_1=parts[1],
        pos_detail_2=parts[2],
        pos_detail_3=parts[3],
        base_form=jt.base_form,
        reading=jt.reading,
        pronunciation=jt.phonetic,
    )


def apply_length_cap(text: str) -> str:
    """
    max_text_length が設定されていれば、形態素解析の前にテキストを切り詰める。
    既定 (None) では何もしない。
    """
    limit = settings.max_text_length
    if limit is None or len(text) <= limit:
        return text
    logger.warning(
        "[tokenizer] text truncated length=%s max_text_length=%s",
        len(text),
        limit,
    )
    return text[:limit]


def tokenize(text: str) -> List[Token]:
    """
    テキストを形態素に分割する。空文字ならエンジンを呼ばずに [] を返す。
    """
    if not text:
        return []

    engine = get_tokenizer()
    try:
        tokens = [_to_token(t) for t in engine.tokenize(text)]
    except Exception as e:
        logger.exception("[tokenizer] tokenize failed length=%s", len(text))
        raise TokenizationError(f"形態素解析に失敗しました: {e}") from e

    logger.debug("[tokenizer] length=%s tokens=%s", len(text), len(tokens))
    return tokens
