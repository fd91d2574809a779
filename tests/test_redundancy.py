"""중복 태그 제거 테스트."""

from __future__ import annotations

from text_tagger.analysis.redundancy import (
    RedundancyReport,
    contains_contiguous,
    filter_redundant_tags,
)
from text_tagger.inflection import Inflector
from text_tagger.models import TagKind, TagResult


def word(tag: str, score: float, frequency: int = 1) -> TagResult:
    return TagResult(tag, score, frequency, TagKind.WORD)


def phrase(tag: str, score: float, frequency: int = 1) -> TagResult:
    return TagResult(tag, score, frequency, TagKind.PHRASE)


def tags_of(results: list[TagResult]) -> list[str]:
    return [result.tag for result in results]


def test_contains_contiguous():
    """연속된 토큰 구간만 포함으로 인정한다."""
    assert contains_contiguous(["machine", "learning"], ["machine", "learning", "algorithms"])
    assert not contains_contiguous(["machine", "algorithms"], ["machine", "learning", "algorithms"])
    assert not contains_contiguous(["machine", "learning"], ["machine"])
    assert not contains_contiguous([], ["machine"])


def test_component_words_of_surviving_phrases_are_removed(inflector: Inflector):
    """살아남은 구문의 구성 단어는 단어 태그에서 제거된다."""
    result = filter_redundant_tags(
        [word("machine", 0.5), word("learning", 0.4), word("data", 0.3), phrase("machine learning", 0.8)],
        inflector,
    )
    assert tags_of(result) == ["machine learning", "data"]


def test_longer_phrase_with_lower_score_is_removed(inflector: Inflector):
    """점수가 같거나 높은 짧은 구문을 포함하는 긴 구문은 제거된다."""
    result = filter_redundant_tags(
        [phrase("machine learning", 0.8), phrase("machine learning algorithms", 0.5)], inflector
    )
    assert tags_of(result) == ["machine learning"]

    tied = filter_redundant_tags(
        [phrase("machine learning algorithms", 0.6), phrase("machine learning", 0.6)], inflector
    )
    assert tags_of(tied) == ["machine learning"]


def test_longer_phrase_with_higher_score_survives(inflector: Inflector):
    """긴 구문의 점수가 더 높으면 둘 다 유지된다."""
    result = filter_redundant_tags(
        [phrase("machine learning algorithms", 0.9), phrase("machine learning", 0.5)], inflector
    )
    assert tags_of(result) == ["machine learning algorithms", "machine learning"]


def test_non_contiguous_overlap_is_kept(inflector: Inflector):
    """연속되지 않은 겹침은 포함으로 보지 않는다."""
    result = filter_redundant_tags(
        [phrase("machine algorithms", 0.9), phrase("machine learning algorithms", 0.5)], inflector
    )
    assert tags_of(result) == ["machine algorithms", "machine learning algorithms"]


def test_inflection_duplicate_keeps_higher_score(inflector: Inflector):
    """마지막 단어의 단수/복수만 다른 구문은 점수가 높은 쪽만 남는다."""
    plural_lower = filter_redundant_tags(
        [phrase("neural network", 0.7), phrase("neural networks", 0.6)], inflector
    )
    assert tags_of(plural_lower) == ["neural network"]

    singular_lower = filter_redundant_tags(
        [phrase("neural network", 0.5), phrase("neural networks", 0.6)], inflector
    )
    assert tags_of(singular_lower) == ["neural networks"]


def test_inflection_duplicate_tie_keeps_first(inflector: Inflector):
    """동점이면 입력 순서상 앞선 구문을 유지한다."""
    result = filter_redundant_tags(
        [phrase("neural networks", 0.6), phrase("neural network", 0.6)], inflector
    )
    assert tags_of(result) == ["neural networks"]


def test_irregular_inflection_duplicate(inflector: Inflector):
    """불규칙 복수형도 중복으로 판정한다."""
    result = filter_redundant_tags(
        [phrase("sales people", 0.5), phrase("sales person", 0.7)], inflector
    )
    assert tags_of(result) == ["sales person"]


def test_removed_phrase_does_not_suppress_words(inflector: Inflector):
    """제거된 구문의 구성 단어는 단어 태그로 남는다."""
    result = filter_redundant_tags(
        [
            phrase("machine learning", 0.8),
            phrase("machine learning algorithms", 0.3),
            word("algorithms", 0.2),
        ],
        inflector,
    )
    assert tags_of(result) == ["machine learning", "algorithms"]


def test_report_records_each_pass(inflector: Inflector):
    """단계별 제거 결과가 보고서에 기록된다."""
    report = RedundancyReport()
    filter_redundant_tags(
        [
            phrase("neural network", 0.9),
            phrase("neural networks", 0.8),
            phrase("neural network model", 0.4),
            word("neural", 0.5),
            word("model", 0.3),
        ],
        inflector,
        report,
    )
    assert report.contained_phrases == {"neural network model"}
    assert report.inflection_duplicates == {"neural networks"}
    assert report.subsumed_words == {"neural", "network"}


def test_empty_input(inflector: Inflector):
    assert filter_redundant_tags([], inflector) == []
