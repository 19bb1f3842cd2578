import re
import logging

from summarizer import NewsSummarizer

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = '본문을 가져오지 못했습니다.'


class ArticleSummaryService:
    def __init__(self, summarizer=None, ai_summarizer=None, max_input_chars=5000, max_articles=5):
        """
        :param summarizer: 로컬 추출 요약기 (기본: NewsSummarizer())
        :param ai_summarizer: 외부 요약 함수 text -> str (선택, 실패 시 로컬 요약으로 대체)
        :param max_input_chars: 요약기에 넘길 본문 최대 길이
        :param max_articles: summarize_articles가 반환할 최대 기사 수
        """
        self.summarizer = summarizer or NewsSummarizer()
        self.ai_summarizer = ai_summarizer
        self.max_input_chars = max_input_chars
        self.max_articles = max_articles

    def _prepare(self, content):
        clean = re.sub(r'\s+', ' ', content).strip()
        if self.max_input_chars and len(clean) > self.max_input_chars:
            logger.debug(f"본문 길이 {len(clean)}자 → {self.max_input_chars}자로 자름")
            clean = clean[:self.max_input_chars]
        return clean

    def _try_ai_summary(self, text):
        try:
            summary = self.ai_summarizer(text)
        except Exception as e:
            logger.warning(f"외부 요약 실패, 로컬 요약으로 대체: {e}")
            return None

        if not isinstance(summary, str) or not summary.strip():
            logger.warning("외부 요약 결과가 비어 있음, 로컬 요약으로 대체")
            return None
        return summary.strip()

    def summarize_content(self, content):
        """
        추출된 기사 본문 요약
        :param content: 본문 텍스트 또는 None (본문 추출 실패)
        :return: 요약 문자열
        """
        if not isinstance(content, str) or not content.strip():
            return NO_CONTENT_MESSAGE

        text = self._prepare(content)

        if self.ai_summarizer is not None:
            summary = self._try_ai_summary(text)
            if summary:
                return summary

        return self.summarizer.summarize(text)

    def summarize_articles(self, items):
        """
        기사 목록을 순서대로 요약
        :param items: [{'title': '제목', 'url': 'URL', 'content': '본문 또는 None'}, ...]
        :return: [{'title': '제목', 'url': 'URL', 'summary': '요약'}, ...]
        """
        articles = []
        for item in items or []:
            if len(articles) >= self.max_articles:
                break

            title = (item.get('title') or '').strip()
            url = (item.get('url') or '').strip()
            if not title or not url:
                logger.debug(f"제목/URL 없는 항목 건너뜀: {item}")
                continue

            articles.append({
                'title': title,
                'url': url,
                'summary': self.summarize_content(item.get('content'))
            })

        logger.info(f"기사 요약 {len(articles)}건 완료")
        return articles
