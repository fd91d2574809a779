"""텍스트 전처리 테스트."""

from __future__ import annotations

from text_tagger.analysis.frequency import count_frequency
from text_tagger.corpus.preprocess import is_content_token, normalize_text, preprocess_text


def test_lowercases_and_drops_stop_words():
    """기본 설정은 소문자로 변환하고 불용어를 제거한다."""
    tokens = preprocess_text("The cat sat on the mat")
    assert tokens == ["cat", "sat", "mat"]


def test_case_sensitive_keeps_original_case():
    """대소문자 구분 시 원문 대소문자를 유지한다."""
    assert preprocess_text("Machine Learning", case_sensitive=True) == ["Machine", "Learning"]


def test_strips_possessive_suffixes():
    """소유격 접미사와 곡선 따옴표 변형을 제거한다."""
    assert preprocess_text("The cat's toy") == ["cat", "toy"]
    assert preprocess_text("James’s book") == ["james", "book"]


def test_punctuation_becomes_whitespace():
    """구두점은 공백으로 바뀌고 한 글자 토큰은 제거된다."""
    assert preprocess_text("Hello, world! A-B test") == ["hello", "world", "test"]


def test_keeps_underscored_words_but_drops_symbol_only_tokens():
    """밑줄만으로 된 토큰은 제거하고 밑줄이 포함된 단어는 유지한다."""
    assert preprocess_text("__ foo_bar") == ["foo_bar"]
    assert not is_content_token("__")


def test_preserves_token_order():
    """n-gram 윈도우를 위해 토큰 순서를 보존한다."""
    assert preprocess_text("zeta alpha zeta beta") == ["zeta", "alpha", "zeta", "beta"]


def test_empty_and_stop_word_only_text():
    """빈 텍스트나 불용어뿐인 텍스트는 빈 목록이 된다."""
    assert preprocess_text("") == []
    assert preprocess_text("   \n\t ") == []
    assert preprocess_text("the and of it was") == []


def test_normalize_text_collapses_whitespace():
    """연속 공백은 하나로 합치고 양끝을 정리한다."""
    assert normalize_text("  Alpha\n\n beta\tGamma  ") == "alpha beta gamma"


def test_count_frequency():
    """토큰별 출현 횟수를 첫 등장 순서대로 집계한다."""
    table = count_frequency(["cat", "mat", "cat", "ran"])
    assert dict(table) == {"cat": 2, "mat": 1, "ran": 1}
    assert list(table) == ["cat", "mat", "ran"]
    assert dict(count_frequency([])) == {}
