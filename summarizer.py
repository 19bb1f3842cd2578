import re
import logging

from text_cleaner import normalize_text, split_sentences

logger = logging.getLogger(__name__)

SENTINEL = '요약할 수 있는 내용이 없습니다.'

# 하드 뉴스 성격의 키워드 - 포함될 때마다 가산점
DEFAULT_KEYWORDS = (
    '수사', '요구', '의혹', '논란', '사과', '관계자', '경찰',
    'investigation', 'demand', 'allegation', 'controversy',
    'apology', 'official', 'police',
)

# 문장 앞머리의 접속사/군더더기 표현 - 감점
DEFAULT_STOP_PREFIXES = (
    '그리고', '하지만', '그러나', '또한', '한편', '이에 따라', '관계자에 따르면',
    'and', 'but', 'however', 'also', 'according to',
)

MIN_SENTENCE_LENGTH = 20
SHORT_PENALTY = -5
STOP_PREFIX_PENALTY = -2
KEYWORD_BONUS = 3
BODY_POSITION_BONUS = 1.5

# 끝 문장부호 (닫는 따옴표/괄호 앞에 있는 경우 포함)
TRAILING_PUNCTUATION = re.compile(r'[.!?]+(?=["\'”’)\]」』]*$)')
HAS_CONTENT = re.compile(r'\w')


class NewsSummarizer:
    def __init__(self, keywords=None, stop_prefixes=None, max_sentences=3,
                 include_headline_in_body=True, sentinel=SENTINEL):
        self.keywords = tuple(dict.fromkeys(kw.lower() for kw in (keywords or DEFAULT_KEYWORDS) if kw))
        self.stop_prefixes = tuple(sp for sp in (stop_prefixes or DEFAULT_STOP_PREFIXES) if sp)
        self.max_sentences = max(1, int(max_sentences))
        self.include_headline_in_body = include_headline_in_body
        self.sentinel = sentinel

        # 접두어 뒤에는 공백/문장부호/끝이 와야 함 ("Android"가 "and"로 걸리지 않도록)
        self._prefix_patterns = [
            re.compile(re.escape(prefix) + r'(?=[\s,.!?]|$)', re.IGNORECASE)
            for prefix in self.stop_prefixes
        ]

    def score_sentence(self, sentence, total):
        """
        문장 하나의 점수 계산 (길이, 접두어, 키워드, 위치)
        :param sentence: {'text': ..., 'index': ...}
        :param total: 전체 문장 수
        :return: 점수 (음수 가능)
        """
        text = sentence['text']
        text_lower = text.lower()
        score = 0

        if len(text) < MIN_SENTENCE_LENGTH:
            score += SHORT_PENALTY

        for pattern in self._prefix_patterns:
            if pattern.match(text):
                score += STOP_PREFIX_PENALTY

        for keyword in self.keywords:
            if keyword in text_lower:
                score += KEYWORD_BONUS

        # 리드/꼬리보다 본문 중간 문장 선호
        if total > 0:
            position = sentence['index'] / total
            if 0.2 < position < 0.8:
                score += BODY_POSITION_BONUS

        return score

    def score_sentences(self, sentences):
        total = len(sentences)
        return [
            dict(sentence, score=self.score_sentence(sentence, total))
            for sentence in sentences
        ]

    def _rank(self, scored):
        # 동점이면 앞 문장 우선
        return sorted(scored, key=lambda s: (-s['score'], s['index']))

    def _finish_sentence(self, text):
        """끝 문장부호를 마침표 하나로 통일"""
        text = text.rstrip()
        if TRAILING_PUNCTUATION.search(text):
            return TRAILING_PUNCTUATION.sub('.', text, count=1)
        return text + '.'

    def _coerce_max_sentences(self, max_sentences):
        if max_sentences is None or isinstance(max_sentences, bool):
            return self.max_sentences
        try:
            value = int(max_sentences)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"잘못된 문장 수 '{max_sentences}' - 기본값 {self.max_sentences} 사용")
            return self.max_sentences
        return max(1, value)

    def _build_summary(self, raw_text, max_sentences):
        text = normalize_text(raw_text)
        if not text:
            logger.debug("빈 입력 - 요약 불가")
            return self.sentinel

        # 부호만 있는 문장은 버리고 남은 문장으로 위치를 다시 매김
        kept = [s for s in split_sentences(text) if HAS_CONTENT.search(s['text'])]
        sentences = [dict(s, index=i) for i, s in enumerate(kept)]
        if not sentences:
            logger.debug("문장 없음 - 요약 불가")
            return self.sentinel

        ranked = self._rank(self.score_sentences(sentences))
        headline = ranked[0]

        candidates = ranked
        if not self.include_headline_in_body:
            candidates = ranked[1:]

        # 본문 문장은 점수 순이 아니라 원문 순서대로
        body = sorted(candidates[:max_sentences], key=lambda s: s['index'])

        lines = [self._finish_sentence(headline['text'])]
        lines.extend(self._finish_sentence(s['text']) for s in body)

        logger.debug(f"요약 완료: 문장 {len(sentences)}개 중 본문 {len(body)}개 선택")
        return '\n'.join(lines)

    def summarize(self, raw_text, max_sentences=None):
        """
        기사 본문을 헤드라인 1줄 + 본문 최대 N줄로 요약
        외부 요약이 실패했을 때의 마지막 대안이므로 어떤 입력에도 예외를 내지 않음
        :param raw_text: 원본 기사 텍스트 (HTML 섞여 있어도 됨)
        :param max_sentences: 본문 문장 수 (기본값: 생성 시 지정한 값)
        :return: 요약 문자열 (실패 시 SENTINEL)
        """
        try:
            limit = self._coerce_max_sentences(max_sentences)
            return self._build_summary(raw_text, limit)
        except Exception:
            logger.exception("요약 중 예상치 못한 오류")
            return self.sentinel


_default_summarizer = NewsSummarizer()


def summarize(raw_text, max_sentences=3):
    return _default_summarizer.summarize(raw_text, max_sentences)
