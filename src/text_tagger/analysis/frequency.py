"""토큰 빈도 집계 모듈."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping

FrequencyTable = Mapping[str, int]


def count_frequency(tokens: Iterable[str]) -> FrequencyTable:
    """토큰 시퀀스에서 {토큰: 출현 횟수} 빈도표를 만든다.

    반환값은 읽기 전용이며, 키 순서는 첫 등장 순서를 따른다.
    """
    counter: Counter[str] = Counter()
    for token in tokens:
        counter[token] += 1
    return MappingProxyType(dict(counter))
