"""빈도 기반 태그 점수 계산 및 중복 제거 모듈.

토큰 빈도를 집계하고, 단어와 n-gram 구문에 점수를 매긴 뒤
구성 단어, 포함 구문, 단복수 중복을 제거한다.
"""

from __future__ import annotations

from .frequency import count_frequency
from .ngrams import extract_ngrams
from .phrase_scoring import score_ngrams
from .redundancy import RedundancyReport, filter_redundant_tags
from .word_scoring import generate_word_tags, score_words

__all__ = [
    "RedundancyReport",
    "count_frequency",
    "extract_ngrams",
    "filter_redundant_tags",
    "generate_word_tags",
    "score_ngrams",
    "score_words",
]
