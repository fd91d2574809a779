"""태그 결과 저장 테스트."""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from text_tagger.export import FIELDNAMES, build_records, write_tags
from text_tagger.models import TagKind, TagResult


@pytest.fixture
def records() -> list[dict]:
    tags = [
        TagResult("machine learning", 0.78, 4, TagKind.PHRASE),
        TagResult("doctors", 0.33, 1, TagKind.WORD),
    ]
    return build_records("<text>", tags)


def test_build_records_ranks_tags(records: list[dict]):
    """문서 내 순위와 종류 문자열이 기록된다."""
    assert [record["rank"] for record in records] == [1, 2]
    assert records[0] == {
        "source": "<text>",
        "rank": 1,
        "tag": "machine learning",
        "kind": "phrase",
        "score": 0.78,
        "frequency": 4,
    }


def test_write_csv(tmp_path: Path, records: list[dict]):
    output = write_tags(records, tmp_path / "out" / "tags.csv")

    with output.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert list(rows[0]) == FIELDNAMES
    assert rows[0]["tag"] == "machine learning"
    assert rows[0]["score"] == "0.780000"
    assert rows[1]["kind"] == "word"


def test_write_json(tmp_path: Path, records: list[dict]):
    output = write_tags(records, tmp_path / "tags.json")
    assert json.loads(output.read_text(encoding="utf-8")) == records


def test_write_parquet(tmp_path: Path, records: list[dict]):
    output = write_tags(records, tmp_path / "tags.parquet")
    table = pq.read_table(output)
    assert table.column_names == FIELDNAMES
    assert table.column("tag").to_pylist() == ["machine learning", "doctors"]
    assert table.column("frequency").to_pylist() == [4, 1]


def test_unsupported_suffix_raises(tmp_path: Path, records: list[dict]):
    with pytest.raises(ValueError):
        write_tags(records, tmp_path / "tags.xml")
