"""태그 생성 결과를 파일로 저장하는 모듈.

출력 형식은 확장자로 결정한다: ``.csv``, ``.json``, ``.parquet``.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from text_tagger.models import TagResult
from text_tagger.utils.logging_config import get_logger

logger = get_logger(__name__)

FIELDNAMES = ["source", "rank", "tag", "kind", "score", "frequency"]


def build_records(source: str, tags: Sequence[TagResult]) -> list[dict[str, Any]]:
    """문서 하나의 태그 목록을 순위가 매겨진 행 목록으로 변환한다."""
    return [{"source": source, "rank": rank, **tag.to_dict()} for rank, tag in enumerate(tags, 1)]


def write_tags_csv(records: Iterable[dict[str, Any]], output_path: Path) -> None:
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
        writer.writeheader()
        for record in records:
            writer.writerow({**record, "score": f"{record['score']:.6f}"})


def write_tags_json(records: Iterable[dict[str, Any]], output_path: Path) -> None:
    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(list(records), handle, ensure_ascii=False, indent=2)
        handle.write("\n")


def write_tags_parquet(records: Iterable[dict[str, Any]], output_path: Path) -> None:
    rows = list(records)
    schema = pa.schema(
        [
            ("source", pa.string()),
            ("rank", pa.int32()),
            ("tag", pa.string()),
            ("kind", pa.string()),
            ("score", pa.float64()),
            ("frequency", pa.int64()),
        ]
    )
    columns = {name: [row[name] for row in rows] for name in FIELDNAMES}
    table = pa.Table.from_pydict(columns, schema=schema)
    pq.write_table(table, output_path)


_WRITERS = {
    ".csv": write_tags_csv,
    ".json": write_tags_json,
    ".parquet": write_tags_parquet,
}


def write_tags(records: Sequence[dict[str, Any]], output_path: Path) -> Path:
    """확장자에 맞는 형식으로 태그 행을 저장한다.

    Args:
        records: ``build_records`` 로 만든 행 목록
        output_path: 저장 경로 (.csv, .json, .parquet)

    Returns:
        저장된 파일 경로

    Raises:
        ValueError: 지원하지 않는 확장자인 경우
    """
    writer = _WRITERS.get(output_path.suffix.lower())
    if writer is None:
        supported = ", ".join(sorted(_WRITERS))
        raise ValueError(f"지원하지 않는 출력 형식입니다: {output_path.suffix or '(확장자 없음)'} (지원: {supported})")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer(records, output_path)
    logger.info("📄 태그 %d개 저장: %s", len(records), output_path)
    return output_path
