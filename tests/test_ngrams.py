"""n-gram 추출 및 크기 결정 테스트."""

from __future__ import annotations

from text_tagger.analysis.ngrams import extract_ngrams, iter_ngrams
from text_tagger.models import GeneratorOptions


def test_extract_bigrams_counts_occurrences():
    """연속 윈도우별 출현 횟수를 센다."""
    tokens = ["deep", "learning", "model", "deep", "learning"]
    assert extract_ngrams(tokens, [2]) == {"deep learning": 2, "learning model": 1, "model deep": 1}


def test_sizes_are_pooled_into_one_table():
    """여러 크기의 n-gram을 한 표에 합산한다."""
    tokens = ["alpha", "beta", "gamma"]
    assert extract_ngrams(tokens, [2, 3]) == {
        "alpha beta": 1,
        "beta gamma": 1,
        "alpha beta gamma": 1,
    }


def test_size_longer_than_tokens_contributes_nothing():
    """토큰 수보다 큰 크기는 결과가 없다."""
    assert extract_ngrams(["alpha", "beta"], [3]) == {}
    assert list(iter_ngrams(["alpha"], 0)) == []


def test_range_takes_precedence_over_explicit_sizes():
    """하한/상한이 모두 있으면 범위가 명시 목록보다 우선한다."""
    options = GeneratorOptions(ngram_sizes=(5,), min_ngram_size=2, max_ngram_size=4).normalized()
    assert options.resolved_ngram_sizes() == (2, 3, 4)


def test_only_one_bound_uses_explicit_sizes():
    """범위 한쪽만 주어지면 명시 목록을 사용한다."""
    options = GeneratorOptions(ngram_sizes=(3,), min_ngram_size=2).normalized()
    assert options.resolved_ngram_sizes() == (3,)


def test_reversed_range_is_empty():
    """하한이 상한보다 크면 생성할 크기가 없다."""
    options = GeneratorOptions(min_ngram_size=4, max_ngram_size=2).normalized()
    assert options.resolved_ngram_sizes() == ()


def test_normalized_clamps_out_of_domain_values():
    """범위를 벗어난 옵션은 가장 가까운 유효값으로 보정한다."""
    options = GeneratorOptions(
        max_tags=-1,
        min_word_length=0,
        min_frequency=-3,
        ngram_sizes=(1, 2, 2, 3),
        min_ngram_size=0,
        max_ngram_size=3,
    ).normalized()

    assert options.max_tags == 0
    assert options.min_word_length == 1
    assert options.min_frequency == 1
    assert options.ngram_sizes == (2, 3)
    assert options.resolved_ngram_sizes() == (2, 3)


def test_sizes_are_capped_at_token_count():
    """토큰 수보다 긴 크기는 범위와 명시 목록 모두에서 제외된다."""
    ranged = GeneratorOptions(min_ngram_size=2, max_ngram_size=10**12).normalized()
    assert ranged.resolved_ngram_sizes(3) == (2, 3)

    explicit = GeneratorOptions(ngram_sizes=(2, 5, 3)).normalized()
    assert explicit.resolved_ngram_sizes(3) == (2, 3)
    assert explicit.resolved_ngram_sizes(1) == ()
