# app/config.py

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリ全体で使う設定クラス。
    .env から環境変数を読み込み、属性として参照できるようにする。
    """

    # ---------- サーバー ----------
    app_name: str = "JP Morph Analyzer"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # ---------- クロール ----------
    # FETCH_TIMEOUT=5 などと .env に書けば上書きされる
    fetch_timeout: float = 10.0
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36"
    )

    # ---------- 解析パラメータ ----------
    # 一括解析で受け付ける URL の上限
    max_batch_urls: int = 20

    # 単一URL解析のレスポンスに載せるトークン数（集計は全件で行う）
    display_token_limit: int = 100

    # 1テキストあたりの頻出語の件数
    summary_top_n: int = 10

    # 複数サイト統合サマリーの頻出語の件数
    aggregate_top_n: int = 20

    # 形態素解析に渡す最大文字数。None なら制限しない
    # （ドキュメント上は 5000 文字だが、既定では適用しない）
    max_text_length: Optional[int] = None

    # ---------- Pydantic Settings 設定 ----------
    model_config = SettingsConfigDict(
        env_file=".env",            # .env を読む
        env_file_encoding="utf-8",
        extra="ignore",             # 定義外の環境変数があっても無視（エラーにしない）
    )


@lru_cache
def get_settings() -> Settings:
    """Settings をシングルトン的に使うためのヘルパ。"""
    return Settings()


# 他のモジュールからは `from app.config import settings` で利用
settings = get_settings()
