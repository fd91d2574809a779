"""입력 문서 읽기와 텍스트 전처리 모듈."""

from __future__ import annotations

from .preprocess import normalize_text, preprocess_text
from .reader import Document, find_input_files, iter_documents

__all__ = [
    "Document",
    "find_input_files",
    "iter_documents",
    "normalize_text",
    "preprocess_text",
]
