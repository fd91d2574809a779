"""text-tagger 패키지.

외부 말뭉치나 학습된 모델 없이 텍스트 한 덩어리의 통계 신호만으로
대표 단어/구문 태그를 추출한다. 빈도 기반 단어 점수, n-gram 구문 점수,
구성 단어/포함 구문/단복수 중복 제거 단계로 구성된다.
"""

from __future__ import annotations

from text_tagger.generator import generate_tags
from text_tagger.inflection import InflectionRuleSet, Inflector, build_default_rule_set
from text_tagger.models import GeneratorOptions, TagKind, TagResult

__all__ = [
    "GeneratorOptions",
    "InflectionRuleSet",
    "Inflector",
    "TagKind",
    "TagResult",
    "build_default_rule_set",
    "generate_tags",
]

__version__ = "0.1.0"
