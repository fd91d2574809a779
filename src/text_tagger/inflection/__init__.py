"""규칙 기반 단수/복수 변환 모듈.

불규칙 사전, 패턴 규칙, 불가산 단어 목록으로 구성된 불변 규칙 집합과
이를 사용하는 변환기를 제공한다.
"""

from __future__ import annotations

from .inflector import Inflector, restore_case
from .rules import InflectionRuleSet, InflectionRuleSetBuilder, build_default_rule_set

__all__ = [
    "InflectionRuleSet",
    "InflectionRuleSetBuilder",
    "Inflector",
    "build_default_rule_set",
    "restore_case",
]
