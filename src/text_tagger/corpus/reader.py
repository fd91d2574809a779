"""입력 파일에서 태그 생성 대상 문서를 읽어 오는 헬퍼입니다."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

logger = logging.getLogger(__name__)

_ALLOWED_SUFFIXES = {".txt", ".md", ".jsonl", ".json"}


@dataclass(frozen=True, slots=True)
class Document:
    """태그 생성 대상 문서.

    Attributes:
        source: 원본 파일 경로 (또는 "<stdin>", "<text>")
        index: 파일 안에서의 문서 순번 (0부터)
        text: 문서 본문
    """

    source: str
    index: int
    text: str

    @property
    def label(self) -> str:
        return f"{self.source}#{self.index}" if self.index else self.source


def find_input_files(input_dir: Path | None, inputs: Sequence[Path]) -> list[Path]:
    """분석 대상 파일 목록을 수집합니다."""
    files: list[Path] = []

    if input_dir is not None and input_dir.exists():
        for path in sorted(input_dir.rglob("*")):
            if path.is_file() and path.suffix.lower() in _ALLOWED_SUFFIXES:
                files.append(path)

    for path in inputs:
        if path.is_file():
            files.append(path)
        else:
            logger.warning("입력 파일을 찾을 수 없습니다: %s", path)

    return sorted(set(files))


def _iter_json_records(payload: object, text_key: str) -> Iterator[str]:
    records = payload if isinstance(payload, list) else [payload]
    for record in records:
        if isinstance(record, dict) and isinstance(record.get(text_key), str):
            yield record[text_key]


def _extract_texts_from_file(path: Path, text_key: str, encoding: str) -> Iterator[str]:
    """파일로부터 문서 본문을 순차적으로 추출합니다."""
    suffix = path.suffix.lower()
    if suffix in {".txt", ".md"}:
        yield path.read_text(encoding=encoding)
        return

    if suffix == ".jsonl":
        with path.open("r", encoding=encoding) as handle:
            for line_no, line in enumerate(handle, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError as exc:
                    logger.warning("%s 파일 %d번째 jsonl 라인을 해석할 수 없습니다: %s", path, line_no, exc)
                    continue
                yield from _iter_json_records(record, text_key)
        return

    if suffix == ".json":
        try:
            with path.open("r", encoding=encoding) as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            logger.warning("%s 파일을 json으로 파싱할 수 없습니다: %s", path, exc)
            return
        yield from _iter_json_records(payload, text_key)


def iter_documents(files: Sequence[Path], text_key: str = "text", encoding: str = "utf-8") -> Iterator[Document]:
    """파일 목록에서 문서 스트림을 생성합니다.

    텍스트 파일은 파일 하나가 문서 하나이고, json/jsonl 은 레코드 하나가 문서 하나입니다.
    """
    for path in files:
        count = 0
        for index, text in enumerate(_extract_texts_from_file(path, text_key, encoding)):
            count += 1
            yield Document(source=str(path), index=index, text=text)
        if count == 0:
            logger.warning("%s에서 텍스트를 추출하지 못했습니다.", path)
