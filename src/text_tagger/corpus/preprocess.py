"""원문 텍스트를 정규화하여 토큰 스트림으로 변환하는 전처리기.

토큰 순서는 n-gram 슬라이딩 윈도우의 원천이므로 그대로 보존한다.
"""

from __future__ import annotations

import re
from collections.abc import Collection

from text_tagger.constants import STOP_WORDS

# 소유격 접미사 ('s, s') 및 곡선 따옴표 변형
_POSSESSIVE_RE = re.compile(r"(['‘’]s|s['‘’])\b")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_MULTI_SPACE_RE = re.compile(r"\s+")
_QUOTE_ONLY_RE = re.compile(r"^['‘’\"`\-_]+$")


def normalize_text(text: str, case_sensitive: bool = False) -> str:
    """소유격 제거, 구두점 치환, 공백 정규화를 수행한다."""
    if not case_sensitive:
        text = text.lower()
    text = _POSSESSIVE_RE.sub("", text)
    text = _NON_WORD_RE.sub(" ", text)
    return _MULTI_SPACE_RE.sub(" ", text).strip()


def is_content_token(token: str, stop_words: Collection[str] = STOP_WORDS) -> bool:
    """토큰이 태그 후보로 남을 수 있는지 판정한다."""
    if len(token) <= 1:
        return False
    if token in stop_words:
        return False
    return not _QUOTE_ONLY_RE.match(token)


def preprocess_text(
    text: str,
    case_sensitive: bool = False,
    stop_words: Collection[str] = STOP_WORDS,
) -> list[str]:
    """텍스트를 토큰 목록으로 변환한다.

    Args:
        text: 원문 텍스트
        case_sensitive: True이면 소문자 변환을 생략한다
        stop_words: 제거할 불용어 집합

    Returns:
        원문 순서를 유지한 토큰 목록 (빈 텍스트이면 빈 목록)
    """
    normalized = normalize_text(text, case_sensitive)
    if not normalized:
        return []
    return [token for token in normalized.split(" ") if is_content_token(token, stop_words)]
