"""CLI 진입점 테스트."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from rich.console import Console

from text_tagger.cli import create_command, format_time, format_value, main
from text_tagger.commands import GenerateCommand, InflectCommand
from text_tagger.parser import int_list, setup_parser

BASE_ARGS = ["--no-banner", "--no-log-file"]


@pytest.fixture
def console() -> Console:
    """출력을 기록하는 테스트용 콘솔."""
    return Console(record=True, width=160, force_terminal=False)


def test_generate_from_text_writes_output(tmp_path: Path, console: Console, machine_learning_text: str):
    """직접 입력한 텍스트에서 태그를 생성하고 json 으로 저장한다."""
    output = tmp_path / "tags.json"
    code = main(
        [*BASE_ARGS, "generate", "--text", machine_learning_text, "--ngram-sizes", "2,3", "--output", str(output)],
        console=console,
    )

    assert code == 0
    records = json.loads(output.read_text(encoding="utf-8"))
    assert records[0]["tag"] == "machine learning"
    assert records[0]["source"] == "<text>"
    assert "machine learning" in console.export_text()


def test_generate_from_input_files(tmp_path: Path, console: Console):
    """jsonl 레코드별로 태그를 생성하고 csv 로 저장한다."""
    source = tmp_path / "docs.jsonl"
    source.write_text(
        "\n".join(
            json.dumps({"text": text})
            for text in ["neural networks learn neural networks", "graph databases store graph databases"]
        ),
        encoding="utf-8",
    )
    output = tmp_path / "tags.csv"

    code = main([*BASE_ARGS, "generate", "--input", str(source), "--output", str(output)], console=console)

    assert code == 0
    content = output.read_text(encoding="utf-8")
    assert "neural networks" in content
    assert "graph databases" in content


def test_missing_inputs_fail(tmp_path: Path, console: Console):
    """읽을 문서가 없으면 종료 코드 1을 반환한다."""
    code = main([*BASE_ARGS, "generate", "--input", str(tmp_path / "missing.txt")], console=console)
    assert code == 1
    assert "FileNotFoundError" in console.export_text()


def test_unsupported_output_format_fails(tmp_path: Path, console: Console):
    code = main([*BASE_ARGS, "generate", "--text", "alpha beta alpha", "--output", str(tmp_path / "x.xml")], console=console)
    assert code == 1


def test_invalid_argument_returns_usage_error(console: Console):
    """음수 태그 수는 인자 오류로 처리한다."""
    assert main([*BASE_ARGS, "generate", "--text", "alpha", "--max-tags", "-1"], console=console) == 2


def test_inflect_command(console: Console):
    code = main([*BASE_ARGS, "inflect", "child", "boxes"], console=console)

    assert code == 0
    text = console.export_text()
    assert "children" in text
    assert "box" in text


def test_create_command_builds_options(console: Console):
    """파싱된 인자가 생성 옵션으로 전달된다."""
    parser = setup_parser(console, [GenerateCommand, InflectCommand])
    args = parser.parse_args(
        ["generate", "--text", "alpha", "--max-tags", "3", "--no-ngrams", "--min-ngram-size", "2", "--max-ngram-size", "3"]
    )
    command = create_command(console, args)

    assert isinstance(command, GenerateCommand)
    assert command.options.max_tags == 3
    assert command.options.include_ngrams is False
    assert command.options.resolved_ngram_sizes() == (2, 3)


def test_int_list():
    assert int_list("2, 3") == (2, 3)


def test_formatters():
    assert format_time(0.25) == "250ms"
    assert format_time(75) == "1분 15.0초"
    assert format_value([1, 2, 3]) == "list(3)"
    assert len(format_value("x" * 200)) == 120


def test_inflect_command_with_count(console: Console):
    """수량을 주면 수량에 맞는 형태 열이 추가된다."""
    code = main([*BASE_ARGS, "inflect", "duck", "--count", "3", "--inclusive"], console=console)

    assert code == 0
    assert "3 ducks" in console.export_text()
