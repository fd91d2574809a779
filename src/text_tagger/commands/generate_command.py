"""태그 생성 커맨드.

텍스트(직접 입력, 파일, 표준 입력)에서 단어/구문 태그를 생성하고
종류별 Rich 테이블로 출력한다. 선택적으로 결과를 파일로 저장한다.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from text_tagger.constants import (
    DEFAULT_MAX_TAGS,
    DEFAULT_MIN_FREQUENCY,
    DEFAULT_MIN_WORD_LENGTH,
    DEFAULT_NGRAM_SIZES,
    TAGS_OUTPUT_FILE,
)
from text_tagger.corpus.reader import Document, find_input_files, iter_documents
from text_tagger.models import GeneratorOptions, TagKind, TagResult
from text_tagger.parser import int_list, non_negative_int, positive_int
from text_tagger.utils.logging_config import create_progress

from .base import Command

logger = logging.getLogger(__name__)

_KIND_TITLES = {
    TagKind.WORD: "🔤 단어 태그",
    TagKind.PHRASE: "🧩 구문 태그",
}


class GenerateCommand(Command):
    """태그 생성 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        options: 태그 생성 옵션
        text: 직접 입력된 텍스트 (None이면 파일 또는 표준 입력 사용)
        inputs: 개별 입력 파일 목록
        input_dir: 입력 디렉토리
        text_key: json/jsonl 텍스트 키
        encoding: 입력 파일 인코딩
        output: 결과 저장 경로 (None이면 저장하지 않음)
    """

    name = "generate"
    help = "텍스트 태그 생성"

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        source = parser.add_argument_group("입력")
        source.add_argument("--text", default=None, help="분석할 텍스트 (없으면 파일 또는 표준 입력)")
        source.add_argument("--input", type=Path, nargs="*", default=[], help="입력 파일 (.txt, .md, .json, .jsonl)")
        source.add_argument("--input-dir", type=Path, default=None, help="입력 디렉토리")
        source.add_argument("--text-key", default="text", help="JSON/JSONL 파일에서 텍스트를 읽어올 키")
        source.add_argument("--encoding", default="utf-8", help="입력 파일 인코딩")

        options = parser.add_argument_group("생성 옵션")
        options.add_argument("--max-tags", type=non_negative_int, default=DEFAULT_MAX_TAGS, help="종류별 최대 태그 수")
        options.add_argument(
            "--min-word-length", type=positive_int, default=DEFAULT_MIN_WORD_LENGTH, help="단어 태그 최소 길이"
        )
        options.add_argument(
            "--min-frequency", type=positive_int, default=DEFAULT_MIN_FREQUENCY, help="최소 출현 빈도"
        )
        options.add_argument("--no-ngrams", action="store_true", help="구문 태그를 생성하지 않습니다")
        options.add_argument(
            "--ngram-sizes",
            type=int_list,
            default=DEFAULT_NGRAM_SIZES,
            help="쉼표로 구분한 n-gram 크기 (예: 2,3)",
        )
        options.add_argument("--min-ngram-size", type=positive_int, default=None, help="n-gram 크기 범위 하한")
        options.add_argument(
            "--max-ngram-size",
            type=positive_int,
            default=None,
            help="n-gram 크기 범위 상한 (하한과 함께 주면 --ngram-sizes 보다 우선)",
        )
        options.add_argument("--case-sensitive", action="store_true", help="대소문자를 구분합니다")

        parser.add_argument(
            "--output",
            type=Path,
            nargs="?",
            const=TAGS_OUTPUT_FILE,
            default=None,
            help=f"결과 저장 경로 (.csv, .json, .parquet). 경로 없이 주면 {TAGS_OUTPUT_FILE}",
        )

    def __init__(
        self,
        console: Console,
        options: GeneratorOptions,
        text: str | None = None,
        inputs: list[Path] | None = None,
        input_dir: Path | None = None,
        text_key: str = "text",
        encoding: str = "utf-8",
        output: Path | None = None,
    ):
        self.console = console
        self.options = options
        self.text = text
        self.inputs = inputs or []
        self.input_dir = input_dir
        self.text_key = text_key
        self.encoding = encoding
        self.output = output

    def collect_documents(self) -> list[Document]:
        """입력 방식에 따라 문서 목록을 구성한다.

        Raises:
            FileNotFoundError: 파일 입력을 지정했으나 읽을 문서가 없는 경우
        """
        if self.text is not None:
            return [Document(source="<text>", index=0, text=self.text)]

        if self.inputs or self.input_dir is not None:
            files = find_input_files(self.input_dir, self.inputs)
            documents = list(iter_documents(files, self.text_key, self.encoding))
            if not documents:
                raise FileNotFoundError("입력 문서를 찾을 수 없습니다.")
            logger.info("📂 입력 파일 %d개에서 문서 %d개를 읽었습니다.", len(files), len(documents))
            return documents

        return [Document(source="<stdin>", index=0, text=sys.stdin.read())]

    def render_tags(self, title: str, tags: list[TagResult]) -> None:
        """태그를 종류별 테이블로 출력한다."""
        self.console.print()
        self.console.rule(f"[bold]{title}[/bold]")
        for kind, kind_title in _KIND_TITLES.items():
            subset = [tag for tag in tags if tag.kind is kind]
            if not subset:
                continue
            table = Table(title=kind_title, show_header=True, border_style="dim")
            table.add_column("순위", style="dim", width=6, justify="center")
            table.add_column("태그", style="bold cyan")
            table.add_column("점수", style="yellow", justify="right")
            table.add_column("빈도", style="green", justify="right")
            for idx, tag in enumerate(subset, 1):
                table.add_row(f"{idx}", tag.tag, f"{tag.score:.4f}", f"{tag.frequency:,}회")
            self.console.print(table)

        if not tags:
            self.console.print("[dim]생성된 태그가 없습니다.[/dim]")

    def execute(self) -> dict[str, Any]:
        """태그 생성을 실행한다.

        Returns:
            실행 결과 딕셔너리 (documents, tags, words, phrases, output_path)
        """
        from text_tagger.export import build_records, write_tags
        from text_tagger.generator import generate_tags

        documents = self.collect_documents()

        results: list[tuple[Document, list[TagResult]]] = []
        with create_progress(self.console, disable=len(documents) <= 1) as progress:
            task = progress.add_task("태그 생성 중", total=len(documents))
            for document in documents:
                results.append((document, generate_tags(document.text, self.options)))
                progress.advance(task)

        for document, tags in results:
            self.render_tags(document.label, tags)
        self.console.print()

        all_tags = [tag for _, tags in results for tag in tags]
        summary: dict[str, Any] = {
            "documents": len(documents),
            "tags": len(all_tags),
            "words": sum(1 for tag in all_tags if tag.kind is TagKind.WORD),
            "phrases": sum(1 for tag in all_tags if tag.kind is TagKind.PHRASE),
        }

        if self.output is not None:
            records = [record for document, tags in results for record in build_records(document.label, tags)]
            summary["output_path"] = write_tags(records, self.output)

        return summary
