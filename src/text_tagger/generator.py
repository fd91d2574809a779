"""텍스트 태그 생성 진입점.

전처리 -> 빈도 집계 -> 단어/구문 점수 -> 중복 제거 순서로 데이터가 흐른다.
호출마다 새 작업 테이블을 만들고, 공유 상태는 불변 규칙 집합과 불용어뿐이다.
"""

from __future__ import annotations

from text_tagger.analysis.frequency import FrequencyTable, count_frequency
from text_tagger.analysis.ngrams import extract_ngrams
from text_tagger.analysis.phrase_scoring import score_ngrams
from text_tagger.analysis.redundancy import filter_redundant_tags
from text_tagger.analysis.word_scoring import generate_word_tags, score_words
from text_tagger.corpus.preprocess import preprocess_text
from text_tagger.inflection import Inflector, InflectionRuleSet
from text_tagger.models import GeneratorOptions, TagResult
from text_tagger.utils.logging_config import get_logger

logger = get_logger(__name__)


def generate_phrase_tags(
    tokens: list[str],
    word_freq: FrequencyTable,
    sizes: tuple[int, ...],
    min_frequency: int,
    max_tags: int,
) -> list[TagResult]:
    """n-gram 구문 태그를 생성하여 상위 *max_tags* 개를 반환한다.

    구성 단어 점수는 필터링 전 전체 빈도표 *word_freq* 로 계산한다.
    """
    word_scores = score_words(word_freq, len(tokens))
    ngram_freq = extract_ngrams(tokens, sizes)
    logger.debug("n-gram 크기 %s에서 고유 n-gram %d개를 추출했습니다.", list(sizes), len(ngram_freq))
    return score_ngrams(ngram_freq, word_scores, word_freq, min_frequency)[:max_tags]


def generate_tags(
    text: str,
    options: GeneratorOptions | None = None,
    *,
    rules: InflectionRuleSet | None = None,
) -> list[TagResult]:
    """텍스트에서 대표 단어/구문 태그를 생성한다.

    사용자가 N개를 요청하면 단어 N개와 구문 N개를 각각 선정한 뒤
    중복을 제거하므로 최대 2N개가 반환된다.

    Args:
        text: 분석할 원문 텍스트
        options: 생성 옵션 (None이면 기본값)
        rules: 단수/복수 규칙 집합 (None이면 기본 규칙)

    Returns:
        점수 내림차순 태그 목록. 빈 텍스트이면 빈 목록.
    """
    opts = (options or GeneratorOptions()).normalized()

    tokens = preprocess_text(text, opts.case_sensitive)
    if not tokens:
        logger.debug("유효한 토큰이 없어 빈 결과를 반환합니다.")
        return []

    word_freq = count_frequency(tokens)
    logger.debug("토큰 %d개, 고유 단어 %d개", len(tokens), len(word_freq))

    word_tags = generate_word_tags(
        word_freq,
        len(tokens),
        opts.min_word_length,
        opts.min_frequency,
        opts.max_tags,
    )

    phrase_tags: list[TagResult] = []
    if opts.include_ngrams:
        phrase_tags = generate_phrase_tags(
            tokens,
            word_freq,
            opts.resolved_ngram_sizes(len(tokens)),
            opts.min_frequency,
            opts.max_tags,
        )

    logger.debug("단어 태그 %d개, 구문 태그 %d개를 병합합니다.", len(word_tags), len(phrase_tags))
    return filter_redundant_tags([*word_tags, *phrase_tags], Inflector(rules))
