from app.graph.lg_workflow import run_workflow
from models.page_models import PageRegions


def test_batch_fold_keeps_order_and_isolates_failures(stub_tokenizer, stub_pages):
    pages, fetched = stub_pages
    pages["https://a.example.com"] = PageRegions(body="解析")
    pages["https://c.example.com"] = PageRegions(body="解析 形態素")

    state = run_workflow([
        "https://a.example.com",
        "https://b.example.com",
        "https://c.example.com",
    ])

    assert [r.url for r in state["results"]] == ["https://a.example.com", "https://c.example.com"]
    assert [e.url for e in state["errors"]] == ["https://b.example.com"]
    assert fetched == ["https://a.example.com", "https://b.example.com", "https://c.example.com"]
    assert state["aggregated_summary"].total_sites == 2
    assert state["current_node"] == "aggregate"
    assert state["progress_messages"][0].startswith("[page] start")


def test_tokenization_error_is_reported_per_url(stub_pages, monkeypatch):
    from app.errors import TokenizationError

    def failing_tokenize(text):
        raise TokenizationError("形態素解析に失敗しました: boom")

    monkeypatch.setattr("agents.summarizer_agent.tokenize", failing_tokenize)
    pages, _ = stub_pages
    pages["https://a.example.com"] = PageRegions(body="解析")

    state = run_workflow(["https://a.example.com"])
    assert state["results"] == []
    assert state["errors"][0].error == "形態素解析に失敗しました: boom"


def test_non_string_entry_is_an_error(stub_tokenizer, stub_pages):
    state = run_workflow([123])
    assert state["errors"][0].url == "123"
    assert state["errors"][0].error == "無効なURL形式"


def test_unexpected_fetch_error_does_not_abort_batch(stub_tokenizer, monkeypatch):
    def fetch_page(url):
        if "broken" in url:
            raise ValueError("label empty or too long")
        return PageRegions(body="解析 東京")

    monkeypatch.setattr("agents.page_agent.fetch_page", fetch_page)

    state = run_workflow([
        "https://a.example.com",
        "https://broken.example.com",
        "https://c.example.com",
    ])

    assert [r.url for r in state["results"]] == ["https://a.example.com", "https://c.example.com"]
    assert len(state["errors"]) == 1
    assert state["errors"][0].url == "https://broken.example.com"
    assert state["errors"][0].error == "label empty or too long"
    assert len(state["results"]) + len(state["errors"]) == 3
    assert state["aggregated_summary"].total_sites == 2
