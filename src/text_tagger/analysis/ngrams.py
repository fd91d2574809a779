"""토큰 시퀀스에서 연속 n-gram을 추출하는 모듈."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence


def iter_ngrams(tokens: Sequence[str], size: int) -> Iterator[tuple[str, ...]]:
    """크기 *size* 의 연속 윈도우를 순서대로 생성한다.

    토큰 수가 *size* 보다 적거나 *size* 가 1 미만이면 아무것도 생성하지 않는다.
    """
    if size <= 0 or size > len(tokens):
        return
    for i in range(len(tokens) - size + 1):
        yield tuple(tokens[i : i + size])


def extract_ngrams(tokens: Sequence[str], sizes: Iterable[int]) -> dict[str, int]:
    """여러 크기의 n-gram 출현 횟수를 하나의 표로 합산한다.

    크기가 다른 n-gram은 토큰 수가 달라 키가 충돌하지 않는다.

    Args:
        tokens: 전처리된 토큰 시퀀스
        sizes: 생성할 n-gram 크기들

    Returns:
        {공백 연결 n-gram: 출현 횟수}
    """
    counter: Counter[str] = Counter()
    for size in sizes:
        for ngram in iter_ngrams(tokens, size):
            counter[" ".join(ngram)] += 1
    return dict(counter)
