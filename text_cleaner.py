import re
import html
import logging

logger = logging.getLogger(__name__)

# 태그는 < 바로 뒤에 영문자, /, !, ? 가 와야 함 ("3 < 5 and 7 > 4" 같은 비교식은 남김)
TAG_PATTERN = re.compile(r'<[A-Za-z/!?][^<>]*>')
WHITESPACE_PATTERN = re.compile(r'\s+')
# 문장부호(. ! ?) 바로 뒤의 공백에서 자름 - 부호는 앞 문장에 남김
SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+')


def _clean_once(text):
    text = TAG_PATTERN.sub(' ', text)
    text = html.unescape(text)
    text = WHITESPACE_PATTERN.sub(' ', text)
    return text.strip()


def normalize_text(raw):
    """
    HTML 태그 제거, 엔티티 디코딩, 공백 정리
    :param raw: 원본 기사 텍스트 (None 허용)
    :return: 정리된 한 줄 텍스트 (실패 시 빈 문자열)
    """
    if not raw:
        return ''

    if isinstance(raw, bytes):
        raw = raw.decode('utf-8', errors='ignore')
    elif not isinstance(raw, str):
        raw = str(raw)

    # &lt;b&gt; 처럼 인코딩된 태그는 디코딩 후에야 드러나므로 변화가 없을 때까지 반복
    # 이중 인코딩된 엔티티(&amp;lt;)도 끝까지 풀리고, 인코딩된 태그 안의 글자는 사라짐
    # 매 반복마다 길이가 줄어들기 때문에 반드시 끝남
    text = raw
    while True:
        cleaned = _clean_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def split_sentences(text):
    """
    정리된 텍스트를 문장 단위로 분리
    :param text: normalize_text 결과
    :return: [{'text': '문장', 'index': 0}, ...]
    """
    if not text or not text.strip():
        return []

    sentences = []
    for fragment in SENTENCE_BOUNDARY.split(text):
        fragment = fragment.strip()
        if not fragment:
            continue
        sentences.append({
            'text': fragment,
            'index': len(sentences)
        })

    logger.debug(f"문장 분리: {len(sentences)}개")
    return sentences
