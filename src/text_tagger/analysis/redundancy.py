"""중복 태그 제거 모듈.

점수 내림차순 작업 집합에 대해 세 단계를 수행한다.

- 구문 포함: 점수가 같거나 높은 다른 구문을 연속 부분열로 포함하는 구문 제거
- 단복수 중복: 마지막 단어의 단수/복수만 다른 구문 쌍 중 낮은 쪽 제거
- 구성 단어: 살아남은 구문의 구성 단어와 같은 단어 태그 제거
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from text_tagger.inflection import Inflector
from text_tagger.models import TagKind, TagResult, sort_by_score
from text_tagger.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class RedundancyReport:
    """단계별 제거 결과."""

    contained_phrases: set[str] = field(default_factory=set)
    inflection_duplicates: set[str] = field(default_factory=set)
    subsumed_words: set[str] = field(default_factory=set)


def contains_contiguous(needle: Sequence[str], haystack: Sequence[str]) -> bool:
    """*needle* 이 *haystack* 안에 연속된 토큰 구간으로 존재하는지 판정한다."""
    size = len(needle)
    if size == 0 or size > len(haystack):
        return False
    return any(
        list(haystack[i : i + size]) == list(needle) for i in range(len(haystack) - size + 1)
    )


def find_contained_phrases(phrases: Sequence[TagResult]) -> set[str]:
    """점수가 같거나 높은 더 짧은 구문을 포함하는 구문을 찾는다.

    포함 관계는 더 짧은 구문에서 긴 구문으로만 성립하므로 두 구문이
    서로를 동시에 제거하는 경우는 없다.
    """
    removed: set[str] = set()
    tokenized = [(phrase, phrase.tokens) for phrase in phrases]
    for longer, longer_tokens in tokenized:
        for shorter, shorter_tokens in tokenized:
            if shorter.tag == longer.tag or shorter.score < longer.score:
                continue
            if contains_contiguous(shorter_tokens, longer_tokens):
                removed.add(longer.tag)
                break
    return removed


def find_inflection_duplicates(phrases: Sequence[TagResult], inflector: Inflector) -> set[str]:
    """마지막 단어의 단수/복수만 다른 구문 쌍에서 뒤쪽(낮은 점수) 구문을 찾는다.

    Args:
        phrases: 점수 내림차순으로 정렬된 구문 태그
        inflector: 단수/복수 변환기

    Returns:
        제거할 구문 문자열 집합
    """
    position = {phrase.tag: i for i, phrase in enumerate(phrases)}
    removed: set[str] = set()

    for i, phrase in enumerate(phrases):
        if phrase.tag in removed:
            continue
        *stem, last = phrase.tokens
        for form in (inflector.singular(last), inflector.plural(last)):
            if form == last:
                continue
            j = position.get(" ".join([*stem, form]))
            if j is None or phrases[j].tag in removed:
                continue
            removed.add(phrases[max(i, j)].tag)
            if j < i:
                break
    return removed


def filter_redundant_tags(
    tags: Sequence[TagResult],
    inflector: Inflector | None = None,
    report: RedundancyReport | None = None,
) -> list[TagResult]:
    """중복 태그를 제거하고 점수 내림차순으로 반환한다.

    Args:
        tags: 종류별 상위 N개로 잘린 단어/구문 태그
        inflector: 단수/복수 변환기 (None이면 기본 규칙 사용)
        report: 단계별 제거 결과를 기록할 객체

    Returns:
        중복이 제거된 태그 목록. 동점은 입력 순서를 유지한다.
    """
    inflector = inflector or Inflector()
    report = report if report is not None else RedundancyReport()

    ordered = sort_by_score(list(tags))
    phrases = [tag for tag in ordered if tag.kind is TagKind.PHRASE]

    report.contained_phrases = find_contained_phrases(phrases)
    remaining = [phrase for phrase in phrases if phrase.tag not in report.contained_phrases]

    report.inflection_duplicates = find_inflection_duplicates(remaining, inflector)
    surviving = [phrase for phrase in remaining if phrase.tag not in report.inflection_duplicates]

    report.subsumed_words = {token for phrase in surviving for token in phrase.tokens}

    logger.debug(
        "중복 제거: 포함 구문 %d개, 단복수 구문 %d개, 구성 단어 후보 %d개",
        len(report.contained_phrases),
        len(report.inflection_duplicates),
        len(report.subsumed_words),
    )

    surviving_tags = {phrase.tag for phrase in surviving}
    return [
        tag
        for tag in ordered
        if (tag.kind is TagKind.PHRASE and tag.tag in surviving_tags)
        or (tag.kind is TagKind.WORD and tag.tag not in report.subsumed_words)
    ]
