"""태그 생성 결과와 옵션 데이터 구조."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from text_tagger.constants import (
    DEFAULT_MAX_TAGS,
    DEFAULT_MIN_FREQUENCY,
    DEFAULT_MIN_WORD_LENGTH,
    DEFAULT_NGRAM_SIZES,
    MIN_PHRASE_TOKENS,
)


class TagKind(str, Enum):
    """태그 종류."""

    WORD = "word"
    PHRASE = "phrase"


@dataclass(frozen=True, slots=True)
class TagResult:
    """태그 생성 결과.

    Attributes:
        tag: 공백으로 연결된 하나 이상의 토큰
        score: 관련도 점수 (상대 순위만 의미가 있다)
        frequency: 토큰 스트림에서의 실제 출현 횟수
        kind: 단어 또는 구문
    """

    tag: str
    score: float
    frequency: int
    kind: TagKind

    @property
    def tokens(self) -> list[str]:
        return self.tag.split(" ")

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "kind": self.kind.value,
            "score": self.score,
            "frequency": self.frequency,
        }


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """태그 생성 옵션.

    ``min_ngram_size`` 와 ``max_ngram_size`` 가 모두 주어지면 범위 지정이
    ``ngram_sizes`` 명시 목록보다 우선한다.

    Attributes:
        max_tags: 종류(단어/구문)별 최대 태그 수
        min_word_length: 단어 태그 최소 길이
        min_frequency: 최소 출현 빈도
        include_ngrams: False이면 구문 생성을 건너뛴다
        ngram_sizes: 생성할 n-gram 크기 목록
        min_ngram_size: n-gram 크기 범위 하한
        max_ngram_size: n-gram 크기 범위 상한
        case_sensitive: 대소문자 구분 여부
    """

    max_tags: int = DEFAULT_MAX_TAGS
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    min_frequency: int = DEFAULT_MIN_FREQUENCY
    include_ngrams: bool = True
    ngram_sizes: tuple[int, ...] = DEFAULT_NGRAM_SIZES
    min_ngram_size: int | None = None
    max_ngram_size: int | None = None
    case_sensitive: bool = False

    def normalized(self) -> GeneratorOptions:
        """범위를 벗어난 값을 가장 가까운 유효값으로 보정한 사본을 반환한다.

        검증 오류를 던지지 않고 조용히 보정한다. 중복된 n-gram 크기는
        빈도가 두 번 집계되지 않도록 첫 등장 순서대로 하나만 남긴다.
        """
        sizes: list[int] = []
        for size in self.ngram_sizes:
            size = max(int(size), MIN_PHRASE_TOKENS)
            if size not in sizes:
                sizes.append(size)

        min_size = self.min_ngram_size
        max_size = self.max_ngram_size
        if min_size is not None:
            min_size = max(int(min_size), MIN_PHRASE_TOKENS)
        if max_size is not None:
            max_size = int(max_size)

        return replace(
            self,
            max_tags=max(int(self.max_tags), 0),
            min_word_length=max(int(self.min_word_length), 1),
            min_frequency=max(int(self.min_frequency), 1),
            ngram_sizes=tuple(sizes),
            min_ngram_size=min_size,
            max_ngram_size=max_size,
        )

    def resolved_ngram_sizes(self, max_size: int | None = None) -> tuple[int, ...]:
        """실제로 생성할 n-gram 크기를 결정한다.

        범위가 비어 있으면(하한 > 상한) 빈 튜플을 반환한다.

        Args:
            max_size: 크기 상한 (보통 토큰 수). 이보다 큰 윈도우는 결과가 없으므로 제외한다.
        """
        if self.min_ngram_size is not None and self.max_ngram_size is not None:
            upper = self.max_ngram_size if max_size is None else min(self.max_ngram_size, max_size)
            return tuple(range(self.min_ngram_size, upper + 1))
        if max_size is None:
            return self.ngram_sizes
        return tuple(size for size in self.ngram_sizes if size <= max_size)


def sort_by_score(tags: list[TagResult]) -> list[TagResult]:
    """점수 내림차순으로 정렬한다. 동점이면 기존 상대 순서를 유지한다."""
    return sorted(tags, key=lambda t: -t.score)
