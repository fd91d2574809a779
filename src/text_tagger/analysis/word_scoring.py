"""단어 태그 필터링 및 점수 계산 모듈.

단어 점수 = 정규화 빈도(TF), 길이 보너스, 빈도 유의성의 가중합이다.
빈도 유의성은 상대 빈도 3%에서 최대가 되고 양쪽으로 지수 감쇠한다.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from text_tagger.constants import (
    FREQUENCY_DECAY_FACTOR,
    LENGTH_BONUS_SCALE,
    OPTIMAL_RELATIVE_FREQUENCY,
    WORD_WEIGHTS,
    WordWeights,
)
from text_tagger.models import TagKind, TagResult, sort_by_score
from text_tagger.utils.logging_config import get_logger

logger = get_logger(__name__)


def filter_words(
    word_freq: Mapping[str, int],
    min_length: int,
    min_frequency: int,
) -> dict[str, int]:
    """길이와 빈도 기준을 만족하는 단어만 남긴다."""
    return {
        word: freq
        for word, freq in word_freq.items()
        if len(word) >= min_length and freq >= min_frequency
    }


def frequency_significance(frequency: int, total_tokens: int) -> float:
    """빈도가 너무 흔하지도 드물지도 않은 정도를 계산한다."""
    if total_tokens <= 0:
        return 0.0
    relative = frequency / total_tokens
    distance = abs(relative - OPTIMAL_RELATIVE_FREQUENCY)
    return math.exp(-distance * FREQUENCY_DECAY_FACTOR)


def length_bonus(word: str) -> float:
    return min(1.0, len(word) / LENGTH_BONUS_SCALE)


def score_words(
    word_freq: Mapping[str, int],
    total_tokens: int,
    weights: WordWeights = WORD_WEIGHTS,
) -> dict[str, float]:
    """단어별 점수를 계산한다.

    Args:
        word_freq: 점수를 매길 단어 빈도표
        total_tokens: 전처리 후 전체 토큰 수
        weights: 요소별 가중치

    Returns:
        {단어: 점수} 사전. 입력이 비어 있으면 빈 사전을 반환한다.
    """
    if not word_freq or total_tokens <= 0:
        return {}

    max_freq = max(word_freq.values())
    scores: dict[str, float] = {}
    for word, freq in word_freq.items():
        tf = freq / max_freq
        scores[word] = (
            tf * weights.term_frequency
            + length_bonus(word) * weights.length_bonus
            + frequency_significance(freq, total_tokens) * weights.frequency_significance
        )
    return scores


def generate_word_tags(
    word_freq: Mapping[str, int],
    total_tokens: int,
    min_length: int,
    min_frequency: int,
    max_tags: int,
) -> list[TagResult]:
    """필터링과 점수 계산을 거쳐 상위 단어 태그를 반환한다."""
    filtered = filter_words(word_freq, min_length, min_frequency)
    scores = score_words(filtered, total_tokens)
    logger.debug("단어 후보 %d개 중 %d개가 필터를 통과했습니다.", len(word_freq), len(filtered))

    results = [
        TagResult(tag=word, score=score, frequency=word_freq[word], kind=TagKind.WORD)
        for word, score in scores.items()
    ]
    return sort_by_score(results)[:max_tags]
