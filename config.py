import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


def _split_list(value):
    """쉼표로 구분된 환경변수를 리스트로 (비어 있으면 None → 기본 목록 사용)"""
    items = [item.strip() for item in value.split(',') if item.strip()]
    return items or None


# 요약 설정
SUMMARY_MAX_SENTENCES = int(os.getenv('SUMMARY_MAX_SENTENCES', 3))
SUMMARY_MAX_INPUT_CHARS = int(os.getenv('SUMMARY_MAX_INPUT_CHARS', 5000))
SUMMARY_MAX_ARTICLES = int(os.getenv('SUMMARY_MAX_ARTICLES', 5))

# 키워드/접두어 목록 (예: SUMMARY_KEYWORDS=수사,의혹,경찰)
SUMMARY_KEYWORDS = _split_list(os.getenv('SUMMARY_KEYWORDS', ''))
SUMMARY_STOP_PREFIXES = _split_list(os.getenv('SUMMARY_STOP_PREFIXES', ''))

# 헤드라인 문장을 본문에도 포함할지
SUMMARY_INCLUDE_HEADLINE_IN_BODY = os.getenv('SUMMARY_INCLUDE_HEADLINE_IN_BODY', 'true').lower() in ('1', 'true', 'yes', 'on')

# 로깅 설정
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()  # DEBUG, INFO, WARNING, ERROR
