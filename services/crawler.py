# services/crawler.py

import logging
from typing import Optional

import requests

from app.config import settings
from app.errors import FetchError

logger = logging.getLogger(__name__)

_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """
    単純な GET だけのクロール。並列もリトライも入れていない。

    失敗（ネットワーク・タイムアウト・非2xx・HTML 以外）はすべて
    FetchError にまとめて投げ直す。
    """
    headers = {
        "User-Agent": settings.user_agent,
    }
    timeout = settings.fetch_timeout if timeout is None else timeout

    logger.info("[crawler] GET url=%s timeout=%s", url, timeout)
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except (requests.RequestException, ValueError) as e:
        # URL の解析エラー（urllib3 の LocationParseError 等）は ValueError 系で届く
        logger.warning("[crawler] fetch failed url=%s error=%s", url, e)
        raise FetchError(f"Webページの取得に失敗しました: {e}") from e

    content_type = resp.headers.get("Content-Type", "")
    if content_type and not any(t in content_type.lower() for t in _HTML_CONTENT_TYPES):
        logger.warning("[crawler] not html url=%s content_type=%s", url, content_type)
        raise FetchError(
            f"Webページの取得に失敗しました: HTML ではありません ({content_type})"
        )

    # Content-Type に charset が無い日本語ページの文字化け対策
    if "charset" not in content_type.lower():
        resp.encoding = resp.apparent_encoding

    logger.info(
        "[crawler] fetched url=%s status=%s length=%s",
        url,
        resp.status_code,
        len(resp.text),
    )
    return resp.text
