"""
기사 본문 요약 실행 스크립트
파일(또는 표준입력)에서 본문을 읽어 요약을 출력합니다.

사용법: python main.py article.txt [-n 2]
"""
import sys
import logging
import argparse

from config import (
    LOG_LEVEL, SUMMARY_MAX_SENTENCES, SUMMARY_MAX_INPUT_CHARS, SUMMARY_MAX_ARTICLES,
    SUMMARY_KEYWORDS, SUMMARY_STOP_PREFIXES, SUMMARY_INCLUDE_HEADLINE_IN_BODY
)
from summarizer import NewsSummarizer
from article_summary import ArticleSummaryService

logger = logging.getLogger(__name__)


def build_service(max_sentences=None):
    summarizer = NewsSummarizer(
        keywords=SUMMARY_KEYWORDS,
        stop_prefixes=SUMMARY_STOP_PREFIXES,
        max_sentences=SUMMARY_MAX_SENTENCES if max_sentences is None else max_sentences,
        include_headline_in_body=SUMMARY_INCLUDE_HEADLINE_IN_BODY
    )
    return ArticleSummaryService(
        summarizer=summarizer,
        max_input_chars=SUMMARY_MAX_INPUT_CHARS,
        max_articles=SUMMARY_MAX_ARTICLES
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='뉴스 기사 본문 추출 요약')
    parser.add_argument('files', nargs='*', help='요약할 본문 파일 (없으면 표준입력)')
    parser.add_argument('-n', '--max-sentences', type=int, default=None,
                        help=f'본문 문장 수 (기본값: {SUMMARY_MAX_SENTENCES})')
    return parser.parse_args(argv)


def main(argv=None):
    # 로깅 설정
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, LOG_LEVEL, logging.INFO)
    )

    args = parse_args(argv)
    service = build_service(args.max_sentences)

    if not args.files:
        print(service.summarize_content(sys.stdin.read()))
        return 0

    exit_code = 0
    for idx, path in enumerate(args.files):
        try:
            with open(path, 'r', encoding='utf-8', errors='ignore') as f:
                content = f.read()
        except OSError as e:
            logger.error(f"파일 읽기 실패 '{path}': {e}")
            print(f"❌ {path}: 파일을 읽을 수 없습니다.")
            exit_code = 1
            continue

        if len(args.files) > 1:
            if idx > 0:
                print()
            print(f"📰 {path}")
        print(service.summarize_content(content))

    return exit_code


if __name__ == '__main__':
    sys.exit(main())
