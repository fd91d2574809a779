"""n-gram 구문 점수 계산 모듈.

구문 점수는 다음 네 요소의 가중합이다.

- 구성 단어 평균 점수: 점수가 없는 단어는 0으로 평균에 포함된다
- 로그 스케일 구문 빈도: ``log(freq + 1) / log(max_freq + 1)``
- 결속도: 가장 드문 구성 단어 빈도 대비 구문 빈도 (최대 1)
- 길이 패널티: ``1 / sqrt(구성 단어 수)``
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from text_tagger.constants import PHRASE_WEIGHTS, PhraseWeights
from text_tagger.models import TagKind, TagResult, sort_by_score
from text_tagger.utils.logging_config import get_logger

logger = get_logger(__name__)


def average_component_score(words: Sequence[str], word_scores: Mapping[str, float]) -> float:
    if not words:
        return 0.0
    return sum(word_scores.get(word, 0.0) for word in words) / len(words)


def frequency_score(phrase_freq: int, max_phrase_freq: int) -> float:
    max_log = math.log(max_phrase_freq + 1)
    if max_log <= 0:
        return 0.0
    return math.log(phrase_freq + 1) / max_log


def cohesion_score(words: Sequence[str], phrase_freq: int, word_freq: Mapping[str, int]) -> float:
    """구문이 가장 드문 구성 단어만큼 자주 등장할수록 1에 가까워진다."""
    if not words:
        return 0.0
    expected = min(word_freq.get(word, 0) for word in words)
    if expected <= 0:
        return 0.0
    return min(phrase_freq / expected, 1.0)


def length_penalty(words: Sequence[str]) -> float:
    return 1 / math.sqrt(len(words)) if words else 0.0


def score_phrase(
    phrase: str,
    phrase_freq: int,
    max_phrase_freq: int,
    word_scores: Mapping[str, float],
    word_freq: Mapping[str, int],
    weights: PhraseWeights = PHRASE_WEIGHTS,
) -> float:
    """단일 구문의 종합 점수를 계산한다."""
    words = phrase.split(" ")
    return (
        average_component_score(words, word_scores) * weights.component_score
        + frequency_score(phrase_freq, max_phrase_freq) * weights.frequency_score
        + cohesion_score(words, phrase_freq, word_freq) * weights.cohesion_score
        + length_penalty(words) * weights.length_penalty
    )


def score_ngrams(
    ngram_freq: Mapping[str, int],
    word_scores: Mapping[str, float],
    word_freq: Mapping[str, int],
    min_frequency: int,
) -> list[TagResult]:
    """최소 빈도 이상의 n-gram에 점수를 매겨 점수 내림차순으로 반환한다.

    Args:
        ngram_freq: 크기별로 합산된 n-gram 빈도표
        word_scores: 필터링 전 전체 단어 빈도표로 계산한 단어 점수
        word_freq: 전체 단어 빈도표
        min_frequency: 최소 구문 빈도

    Returns:
        구문 태그 목록. n-gram이 하나도 없으면 빈 목록을 반환한다.
    """
    if not ngram_freq:
        return []

    max_freq = max(ngram_freq.values())
    results = [
        TagResult(
            tag=ngram,
            score=score_phrase(ngram, freq, max_freq, word_scores, word_freq),
            frequency=freq,
            kind=TagKind.PHRASE,
        )
        for ngram, freq in ngram_freq.items()
        if freq >= min_frequency
    ]
    logger.debug("n-gram %d개 중 %d개에 점수를 매겼습니다.", len(ngram_freq), len(results))
    return sort_by_score(results)
