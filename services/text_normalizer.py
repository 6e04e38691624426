# services/text_normalizer.py

from __future__ import annotations

import html
import re
from typing import Optional

# \s は NBSP(\xa0) や全角スペースも含む
_SPACE_RE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """
    抽出済みテキストの後処理。
    - HTMLエンティティをデコード（&nbsp; &lt; &amp; &#039; など）
    - 連続する空白を1つにまとめて前後をトリム
    """
    if not text:
        return ""
    text = html.unescape(text)
    text = _SPACE_RE.sub(" ", text)
    return text.strip()
