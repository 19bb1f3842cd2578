import pytest

from article_summary import ArticleSummaryService, NO_CONTENT_MESSAGE
from summarizer import NewsSummarizer

CONTENT = (
    "서울의 한 주택가에서 새벽 시간 화재가 발생해 주민들이 긴급 대피했다. "
    "경찰은 정확한 화재 원인을 밝히기 위해 수사에 착수했다고 밝혔다. "
    "소방 당국 관계자는 인명 피해는 없는 것으로 확인됐다고 전했다. "
    "주민들은 아침이 되어서야 집으로 돌아갈 수 있었다."
)


class RecordingSummarizer:
    def __init__(self):
        self.calls = []

    def summarize(self, text):
        self.calls.append(text)
        return "로컬 요약"


@pytest.mark.parametrize("content", [None, "", "   \n "])
def test_missing_content(content):
    assert ArticleSummaryService().summarize_content(content) == NO_CONTENT_MESSAGE


def test_local_summary_used_by_default():
    service = ArticleSummaryService()
    assert service.summarize_content(CONTENT) == NewsSummarizer().summarize(CONTENT)


def test_ai_summary_preferred():
    service = ArticleSummaryService(ai_summarizer=lambda text: "  AI 요약 결과  ")
    assert service.summarize_content(CONTENT) == "AI 요약 결과"


def test_ai_failure_falls_back_to_local():
    def failing(text):
        raise TimeoutError("upstream timeout")

    local = RecordingSummarizer()
    service = ArticleSummaryService(summarizer=local, ai_summarizer=failing)
    assert service.summarize_content(CONTENT) == "로컬 요약"
    assert len(local.calls) == 1


@pytest.mark.parametrize("result", ["", "   ", None, 0])
def test_empty_ai_result_falls_back_to_local(result):
    local = RecordingSummarizer()
    service = ArticleSummaryService(summarizer=local, ai_summarizer=lambda text: result)
    assert service.summarize_content(CONTENT) == "로컬 요약"


def test_content_is_collapsed_and_truncated():
    local = RecordingSummarizer()
    service = ArticleSummaryService(summarizer=local, max_input_chars=10)
    service.summarize_content("가나다\n\n라마바   사아자차카타파하")
    assert local.calls == ["가나다 라마바 사아"]


def test_summarize_articles():
    local = RecordingSummarizer()
    service = ArticleSummaryService(summarizer=local)
    items = [
        {'title': " 화재 발생 ", 'url': "https://news.example.com/1", 'content': CONTENT},
        {'title': "본문 없음", 'url': "https://news.example.com/2", 'content': None},
        {'title': "", 'url': "https://news.example.com/3", 'content': CONTENT},
        {'title': "URL 없음", 'content': CONTENT},
    ]
    assert service.summarize_articles(items) == [
        {'title': "화재 발생", 'url': "https://news.example.com/1", 'summary': "로컬 요약"},
        {'title': "본문 없음", 'url': "https://news.example.com/2", 'summary': NO_CONTENT_MESSAGE},
    ]


def test_summarize_articles_limit():
    service = ArticleSummaryService(summarizer=RecordingSummarizer(), max_articles=2)
    items = [{'title': f"기사 {i}", 'url': f"https://news.example.com/{i}", 'content': CONTENT} for i in range(5)]
    articles = service.summarize_articles(items)
    assert [a['title'] for a in articles] == ["기사 0", "기사 1"]


def test_summarize_articles_empty():
    assert ArticleSummaryService().summarize_articles(None) == []
