import threading
import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.errors import TokenizationError
from services import tokenizer


def _janome_token(surface, part_of_speech, base_form="*", reading="*", phonetic="*"):
    return SimpleNamespace(
        surface=surface,
        part_of_speech=part_of_speech,
        base_form=base_form,
        reading=reading,
        phonetic=phonetic,
    )


@pytest.fixture
def fresh_tokenizer(monkeypatch):
    """共有インスタンスを未初期化に戻し、Janome の Tokenizer をモックに差し替える。"""
    monkeypatch.setattr(tokenizer, "_tokenizer", None)
    engine = MagicMock()
    factory = MagicMock(return_value=engine)
    monkeypatch.setattr(tokenizer, "Tokenizer", factory)
    return factory, engine


class TestTokenize:

    def test_maps_janome_fields(self, fresh_tokenizer):
        _, engine = fresh_tokenizer
        engine.tokenize.return_value = iter([
            _janome_token("東京", "名詞,固有名詞,地域,一般", "東京", "トウキョウ", "トーキョー"),
            _janome_token("へ", "助詞,格助詞,一般,*", "へ", "ヘ", "エ"),
        ])
        tokens = tokenizer.tokenize("東京へ")

        assert [t.surface for t in tokens] == ["東京", "へ"]
        first = tokens[0]
        assert first.pos == "名詞"
        assert (first.pos_detail_1, first.pos_detail_2, first.pos_detail_3) == ("固有名詞", "地域", "一般")
        assert first.base_form == "東京"
        assert first.reading == "トウキョウ"
        assert first.pronunciation == "トーキョー"
        assert first.model_dump(by_alias=True)["posDetail1"] == "固有名詞"

    def test_short_part_of_speech_is_padded(self, fresh_tokenizer):
        _, engine = fresh_tokenizer
        engine.tokenize.return_value = [_janome_token("ｘ", "記号")]
        token = tokenizer.tokenize("ｘ")[0]
        assert (token.pos, token.pos_detail_1, token.pos_detail_3) == ("記号", "*", "*")

    def test_empty_text_does_not_touch_engine(self, fresh_tokenizer):
        factory, _ = fresh_tokenizer
        assert tokenizer.tokenize("") == []
        factory.assert_not_called()

    def test_engine_failure(self, fresh_tokenizer):
        _, engine = fresh_tokenizer
        engine.tokenize.side_effect = RuntimeError("boom")
        with pytest.raises(TokenizationError, match="boom"):
            tokenizer.tokenize("テキスト")


class TestGetTokenizer:

    def test_initialized_once(self, fresh_tokenizer):
        factory, engine = fresh_tokenizer
        assert not tokenizer.is_ready()
        assert tokenizer.get_tokenizer() is engine
        assert tokenizer.get_tokenizer() is engine
        assert tokenizer.is_ready()
        factory.assert_called_once()

    def test_concurrent_first_use_builds_once(self, fresh_tokenizer):
        factory, engine = fresh_tokenizer

        def slow_build():
            time.sleep(0.05)
            return engine

        factory.side_effect = slow_build
        got = []
        threads = [threading.Thread(target=lambda: got.append(tokenizer.get_tokenizer())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert factory.call_count == 1
        assert got == [engine] * 8

    def test_init_failure(self, fresh_tokenizer):
        factory, _ = fresh_tokenizer
        factory.side_effect = OSError("dictionary missing")
        with pytest.raises(TokenizationError, match="dictionary missing"):
            tokenizer.warm_up()
        assert not tokenizer.is_ready()


class TestLengthCap:

    def test_disabled_by_default(self):
        text = "あ" * 6000
        assert tokenizer.apply_length_cap(text) == text

    def test_truncates_when_configured(self, monkeypatch):
        monkeypatch.setattr("app.config.settings.max_text_length", 5000)
        assert len(tokenizer.apply_length_cap("あ" * 6000)) == 5000
