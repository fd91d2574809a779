"""공용 테스트 픽스처."""

from __future__ import annotations

import pytest

from text_tagger.inflection import Inflector


@pytest.fixture
def sample_text() -> str:
    """여러 구문이 반복되는 기술 문단."""
    return (
        "Machine learning is revolutionizing the technology industry. Artificial intelligence "
        "algorithms are becoming increasingly sophisticated, enabling computers to process natural "
        "language, recognize patterns, and make intelligent decisions. Deep learning neural networks "
        "have transformed computer vision, speech recognition, and predictive analytics. Companies are "
        "investing heavily in AI research and development to create innovative solutions for "
        "healthcare, finance, and autonomous vehicles. Machine learning models and neural networks "
        "power modern computer vision systems, and machine learning research keeps growing."
    )


@pytest.fixture
def machine_learning_text() -> str:
    """"machine learning" 이 4번, "machine learning algorithms" 가 1번 등장하는 텍스트."""
    return (
        "Machine learning improves search. Machine learning powers translation. "
        "Machine learning algorithms need data. Machine learning helps doctors."
    )


@pytest.fixture
def inflector() -> Inflector:
    """기본 규칙 집합을 사용하는 변환기."""
    return Inflector()
